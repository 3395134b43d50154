from __future__ import annotations

import math

import numpy as np
import pandas as pd

from ..data_ingestion.snapshot import Snapshot
from .models import PriceBucketShare

# Half-open [lower, upper) price bands in euros
PRICE_BUCKETS: list[tuple[float, float, str]] = [
    (0.0, 5.0, "€0 - €5"),
    (5.0, 10.0, "€5 - €10"),
    (10.0, 15.0, "€10 - €15"),
    (15.0, 20.0, "€15 - €20"),
    (20.0, math.inf, "€20+"),
]


def bucket_label(price: float) -> str | None:
    """Return the band label for a single price, or None when it is not > 0."""
    if price is None or not (price > 0) or not math.isfinite(price):
        return None
    for lower, upper, label in PRICE_BUCKETS:
        if lower <= price < upper:
            return label
    return None


def price_distribution(
    snapshot: Snapshot, include_empty: bool = False
) -> list[PriceBucketShare]:
    prices = pd.to_numeric(snapshot.menu_items["price"], errors="coerce").astype(float)
    # Free items and missing prices are data errors, not a band
    prices = prices[np.isfinite(prices) & (prices > 0)]
    total = len(prices)
    if total == 0:
        return []

    counts = prices.map(bucket_label).value_counts()

    results: list[PriceBucketShare] = []
    for lower, upper, label in PRICE_BUCKETS:
        count = int(counts.get(label, 0))
        if count == 0 and not include_empty:
            continue
        results.append(PriceBucketShare(
            label=label,
            lower_bound=lower,
            upper_bound=upper if math.isfinite(upper) else None,
            item_count=count,
            percentage=round(count * 100.0 / total, 2),
        ))
    return results
