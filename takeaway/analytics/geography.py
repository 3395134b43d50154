from __future__ import annotations

import pandas as pd

from ..data_ingestion.snapshot import Snapshot
from .models import CityShare, DeadZone

DEAD_ZONE_MAX_RESTAURANTS = 3


def located(locations: pd.DataFrame) -> pd.DataFrame:
    """Drop locations without a usable city."""
    city = locations["city"].astype("string").str.strip()
    return locations.loc[city.notna() & (city != "")]


def city_distribution(snapshot: Snapshot) -> list[CityShare]:
    """
    Distinct restaurants per city and each city's share of the total.

    A restaurant linked to several locations in one city counts once there.
    The share is taken over the sum of the per-city counts.
    """
    linked = located(snapshot.locations).merge(
        snapshot.location_links, left_on="id", right_on="location_id", how="inner"
    )
    linked = linked.loc[linked["restaurant_id"].notna()]
    if linked.empty:
        return []

    counts = (
        linked.groupby("city")["restaurant_id"]
        .nunique()
        .rename("restaurant_count")
        .reset_index()
    )
    total = int(counts["restaurant_count"].sum())
    counts = counts.sort_values(
        ["restaurant_count", "city"], ascending=[False, True], kind="mergesort"
    )

    return [
        CityShare(
            city=row.city,
            restaurant_count=int(row.restaurant_count),
            market_share_pct=round(row.restaurant_count * 100.0 / total, 2),
        )
        for row in counts.itertuples(index=False)
    ]


def dead_zones(
    snapshot: Snapshot, max_restaurants: int = DEAD_ZONE_MAX_RESTAURANTS
) -> list[DeadZone]:
    """
    (city, postal code) areas served by at most *max_restaurants* restaurants.

    Outer join: a postal code without any linked restaurant is reported with 0.
    """
    areas = located(snapshot.locations).merge(
        snapshot.location_links, left_on="id", right_on="location_id", how="left"
    )
    if areas.empty:
        return []

    counts = (
        areas.groupby(["city", "postal_code"], dropna=False)["restaurant_id"]
        .nunique()
        .rename("restaurant_count")
        .reset_index()
    )
    counts = counts.loc[counts["restaurant_count"] <= max_restaurants]
    counts = counts.sort_values(
        ["restaurant_count", "city", "postal_code"],
        ascending=[True, True, True],
        na_position="last",
        kind="mergesort",
    )

    return [
        DeadZone(
            city=row.city,
            postal_code=row.postal_code if pd.notna(row.postal_code) else None,
            restaurant_count=int(row.restaurant_count),
        )
        for row in counts.itertuples(index=False)
    ]
