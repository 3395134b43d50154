from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ..analytics.models import CityShare, PriceBucketShare  # noqa: E402
from ..ranking.models import RankedRestaurant  # noqa: E402

logger = logging.getLogger(__name__)


def _save(fig, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved chart %s", path)
    return path


def plot_price_distribution(buckets: Sequence[PriceBucketShare], path: Path) -> Path:
    fig, ax = plt.subplots(figsize=(8, 4))
    labels = [b.label for b in buckets]
    counts = [b.item_count for b in buckets]
    bars = ax.bar(labels, counts, color="tab:orange")
    for bar, bucket in zip(bars, buckets):
        ax.annotate(
            f"{bucket.percentage:.1f}%",
            (bar.get_x() + bar.get_width() / 2, bar.get_height()),
            ha="center",
            va="bottom",
            fontsize=8,
        )
    ax.set_title("Menu Item Price Distribution")
    ax.set_xlabel("Price range")
    ax.set_ylabel("Menu items")
    return _save(fig, path)


def plot_city_distribution(
    cities: Sequence[CityShare], path: Path, top_n: int = 15
) -> Path:
    shown = list(cities)[:top_n]
    fig, ax = plt.subplots(figsize=(8, max(3, 0.35 * len(shown) + 1)))
    # Largest city on top
    ax.barh([c.city for c in reversed(shown)], [c.restaurant_count for c in reversed(shown)])
    ax.set_title(f"Restaurants per City (top {len(shown)})")
    ax.set_xlabel("Distinct restaurants")
    return _save(fig, path)


def plot_ranking(
    ranked: Sequence[RankedRestaurant], path: Path, title: str = "Restaurant Ranking"
) -> Path:
    fig, ax = plt.subplots(figsize=(8, max(3, 0.4 * len(ranked) + 1)))
    names = [r.name or r.id for r in reversed(ranked)]
    ax.barh(names, [r.score for r in reversed(ranked)], color="tab:green")
    ax.set_title(title)
    ax.set_xlabel("Score")
    return _save(fig, path)
