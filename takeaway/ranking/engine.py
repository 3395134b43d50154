from __future__ import annotations

import logging

import pandas as pd

from ..data_ingestion.snapshot import Snapshot
from .filters import keyword_mask
from .models import RankedRestaurant, RankingRequest, RankingResponse
from .scoring import weighted_score

logger = logging.getLogger(__name__)


def _score_row(row: pd.Series, request: RankingRequest) -> float:
    price = row["min_price"] if request.price_normalized else None
    return weighted_score(
        row["rating"], int(row["review_count"]), price, log_base=request.log_base
    )


def rank_restaurants(snapshot: Snapshot, request: RankingRequest) -> RankingResponse:
    restaurants = snapshot.restaurants
    items = snapshot.menu_items[["restaurant_id", "name", "price"]].rename(
        columns={"name": "item_name"}
    )
    joined = restaurants.merge(items, left_on="id", right_on="restaurant_id", how="inner")

    # --- Hard filters ---
    mask = keyword_mask(joined["item_name"], request.keywords)
    mask = mask & (joined["rating"] > request.min_rating) & (joined["rating"] > 0)
    mask = mask & (joined["review_count"] >= request.min_reviews)
    if request.min_price is not None:
        mask = mask & (joined["price"] > request.min_price)
    if request.price_normalized:
        mask = mask & joined["price"].notna() & (joined["price"] > 0)

    candidates = joined.loc[mask]
    if candidates.empty:
        logger.info("No restaurants match keywords %s", request.keywords)
        return RankingResponse(results=[], total_candidates=0)

    # --- One row per restaurant, cheapest matching item ---
    grouped = (
        candidates.groupby("id", sort=False)
        .agg(
            name=("name", "first"),
            city=("city", "first"),
            rating=("rating", "first"),
            review_count=("review_count", "first"),
            min_price=("price", "min"),
        )
        .reset_index()
    )
    total_candidates = len(grouped)

    grouped["score"] = grouped.apply(_score_row, axis=1, request=request)
    top = grouped.sort_values(
        ["score", "id"], ascending=[False, True], kind="mergesort"
    ).head(request.limit)

    results: list[RankedRestaurant] = []
    for _, row in top.iterrows():
        min_price = row["min_price"]
        results.append(RankedRestaurant(
            id=row["id"],
            name=row["name"] if pd.notna(row["name"]) else None,
            city=row["city"] if pd.notna(row["city"]) else None,
            rating=float(row["rating"]),
            review_count=int(row["review_count"]),
            min_price=round(float(min_price), 2) if pd.notna(min_price) else None,
            score=float(row["score"]),
        ))

    return RankingResponse(results=results, total_candidates=total_candidates)
