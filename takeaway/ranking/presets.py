"""
Ranking presets
===============

Each business question that ranks restaurants is a preset over the same
engine.  They differ only in the keyword, the review threshold, an optional
price floor, and whether the score is normalised by price:

* **pizza** – top 10 pizza restaurants, ``rating × log(reviews + 1)``,
  at least 5 reviews.
* **burger_value** – top 15 burger restaurants by value,
  ``rating × log(reviews + 1) / cheapest burger``, at least 10 reviews and
  burgers priced above €3 (cheaper ones are data errors).
* **hummus** – the "World Hummus Order": top 3 hummus restaurants,
  ``rating × log(reviews + 1)``, at least 10 reviews.
"""

from __future__ import annotations

from typing import Any

from ..data_ingestion.snapshot import Snapshot
from .engine import rank_restaurants
from .models import RankingRequest, RankingResponse

RANKING_PRESETS: dict[str, dict[str, Any]] = {
    "pizza": {
        "label": "Top pizza restaurants",
        "request": {"keywords": ["pizza"], "min_reviews": 5, "limit": 10},
    },
    "burger_value": {
        "label": "Best value burger restaurants",
        "request": {
            "keywords": ["burger"],
            "min_reviews": 10,
            "min_price": 3.0,
            "price_normalized": True,
            "limit": 15,
        },
    },
    "hummus": {
        "label": "World Hummus Order",
        "request": {"keywords": ["hummus"], "min_reviews": 10, "limit": 3},
    },
}


def build_request(name: str, **overrides: Any) -> RankingRequest:
    """Return the :class:`RankingRequest` for preset *name*, with overrides applied."""
    if name not in RANKING_PRESETS:
        raise KeyError(f"Unknown ranking preset: {name!r}")
    params = {**RANKING_PRESETS[name]["request"], **overrides}
    return RankingRequest(**params)


def run_preset(snapshot: Snapshot, name: str, **overrides: Any) -> RankingResponse:
    return rank_restaurants(snapshot, build_request(name, **overrides))
