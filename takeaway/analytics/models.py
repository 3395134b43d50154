from __future__ import annotations

from pydantic import BaseModel, Field


class PriceBucketShare(BaseModel):
    label: str
    lower_bound: float
    upper_bound: float | None = Field(default=None, description="None for the open top bucket")
    item_count: int
    percentage: float


class CityShare(BaseModel):
    city: str
    restaurant_count: int
    market_share_pct: float


class DeadZone(BaseModel):
    city: str
    postal_code: str | None
    restaurant_count: int


class CityPriceSummary(BaseModel):
    city: str
    restaurant_count: int
    avg_price: float
    min_price: float
    max_price: float


class CityDishCount(BaseModel):
    city: str
    dish_count: int
    restaurant_count: int


class DishLocation(BaseModel):
    restaurant_id: str
    name: str | None
    city: str | None
    latitude: float
    longitude: float
    dish_count: int
