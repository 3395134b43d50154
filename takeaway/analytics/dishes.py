from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..data_ingestion.snapshot import Snapshot
from ..ranking.filters import VEG_KEYWORDS, keyword_mask
from .geography import located
from .models import CityDishCount, CityPriceSummary, DishLocation

KAPSALON_KEYWORDS: tuple[str, ...] = ("kapsalon",)


def _matching_items(snapshot: Snapshot, keywords: Iterable[str]) -> pd.DataFrame:
    items = snapshot.menu_items.reset_index(drop=True)
    items = items.assign(item_key=items.index)
    return items.loc[keyword_mask(items["name"], keywords)]


def _items_by_city(snapshot: Snapshot, keywords: Iterable[str]) -> pd.DataFrame:
    """Matching items with every city they are delivered to, one row per (city, item)."""
    links = located(snapshot.locations)[["id", "city"]].merge(
        snapshot.location_links, left_on="id", right_on="location_id", how="inner"
    )
    joined = links[["city", "restaurant_id"]].merge(
        _matching_items(snapshot, keywords), on="restaurant_id", how="inner"
    )
    return joined.drop_duplicates(subset=["city", "item_key"])


def kapsalon_prices(snapshot: Snapshot, min_price: float = 1.0) -> list[CityPriceSummary]:
    """
    Average kapsalon price per city.

    Prices at or below *min_price* are treated as data errors and skipped.
    """
    rows = _items_by_city(snapshot, KAPSALON_KEYWORDS)
    rows = rows.loc[rows["price"] > min_price]
    if rows.empty:
        return []

    summary = (
        rows.groupby("city")
        .agg(
            restaurant_count=("restaurant_id", "nunique"),
            avg_price=("price", "mean"),
            min_price=("price", "min"),
            max_price=("price", "max"),
        )
        .reset_index()
        .round({"avg_price": 2, "min_price": 2, "max_price": 2})
        .sort_values(["avg_price", "city"], kind="mergesort")
    )

    return [
        CityPriceSummary(
            city=row.city,
            restaurant_count=int(row.restaurant_count),
            avg_price=float(row.avg_price),
            min_price=float(row.min_price),
            max_price=float(row.max_price),
        )
        for row in summary.itertuples(index=False)
    ]


def veg_dish_availability(snapshot: Snapshot) -> list[CityDishCount]:
    """Plant-based dishes and the restaurants serving them, per city."""
    rows = _items_by_city(snapshot, VEG_KEYWORDS)
    if rows.empty:
        return []

    summary = (
        rows.groupby("city")
        .agg(
            dish_count=("item_key", "nunique"),
            restaurant_count=("restaurant_id", "nunique"),
        )
        .reset_index()
        .sort_values(["dish_count", "city"], ascending=[False, True], kind="mergesort")
    )

    return [
        CityDishCount(
            city=row.city,
            dish_count=int(row.dish_count),
            restaurant_count=int(row.restaurant_count),
        )
        for row in summary.itertuples(index=False)
    ]


def veg_dish_locations(snapshot: Snapshot) -> list[DishLocation]:
    """Geocoded restaurants serving plant-based dishes, for the clustered map."""
    items = _matching_items(snapshot, VEG_KEYWORDS)
    if items.empty:
        return []

    counts = items.groupby("restaurant_id").size().rename("dish_count").reset_index()
    restaurants = snapshot.restaurants
    restaurants = restaurants.loc[
        restaurants["latitude"].notna() & restaurants["longitude"].notna()
    ].drop_duplicates(subset=["id"])
    located_counts = restaurants.merge(
        counts, left_on="id", right_on="restaurant_id", how="inner"
    ).sort_values(["dish_count", "id"], ascending=[False, True], kind="mergesort")

    return [
        DishLocation(
            restaurant_id=row.id,
            name=row.name if pd.notna(row.name) else None,
            city=row.city if pd.notna(row.city) else None,
            latitude=float(row.latitude),
            longitude=float(row.longitude),
            dish_count=int(row.dish_count),
        )
        for row in located_counts.itertuples(index=False)
    ]
