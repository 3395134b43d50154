from __future__ import annotations

from pydantic import BaseModel, Field

TABLE_COLUMNS: dict[str, list[str]] = {
    "restaurants": [
        "id",
        "name",
        "city",
        "rating",
        "review_count",
        "latitude",
        "longitude",
    ],
    "menu_items": [
        "id",
        "restaurant_id",
        "name",
        "description",
        "price",
        "alcohol_content",
        "caffeine_content",
    ],
    "locations": ["id", "name", "postal_code", "city", "latitude", "longitude"],
    "location_links": ["location_id", "restaurant_id"],
    "categories": ["id", "restaurant_id", "name", "item_id"],
    "category_links": ["category_id", "restaurant_id"],
}

# Raw column spellings seen in exports of the marketplace database, tried in order.
RAW_COLUMN_ALIASES: dict[str, dict[str, list[str]]] = {
    "restaurants": {
        "id": ["primarySlug", "restaurant_id", "id"],
        "name": ["name", "restaurant_name"],
        "city": ["city"],
        "rating": ["ratings", "rating"],
        "review_count": ["ratingsNumber", "review_count", "reviews"],
        "latitude": ["latitude", "lat"],
        "longitude": ["longitude", "lon", "lng"],
    },
    "menu_items": {
        "id": ["ID", "id"],
        "restaurant_id": ["primarySlug", "restaurant_id"],
        "name": ["name"],
        "description": ["description"],
        "price": ["price"],
        "alcohol_content": ["alcoholContent", "alcohol_content"],
        "caffeine_content": ["caffeineContent", "caffeine_content"],
    },
    "locations": {
        "id": ["ID", "id"],
        "name": ["name"],
        "postal_code": ["postalCode", "postal_code"],
        "city": ["city"],
        "latitude": ["latitude", "lat"],
        "longitude": ["longitude", "lon", "lng"],
    },
    "location_links": {
        "location_id": ["location_id", "locationId"],
        "restaurant_id": ["restaurant_id", "restaurantId", "primarySlug"],
    },
    "categories": {
        "id": ["id", "ID"],
        "restaurant_id": ["restaurant_id", "primarySlug"],
        "name": ["name"],
        "item_id": ["item_id", "itemId"],
    },
    "category_links": {
        "category_id": ["category_id", "categoryId"],
        "restaurant_id": ["restaurant_id", "restaurantId", "primarySlug"],
    },
}

REQUIRED_COLUMNS: dict[str, list[str]] = {
    "restaurants": ["id", "name", "city", "rating", "review_count"],
    "menu_items": ["restaurant_id", "name", "price"],
    "locations": ["id", "postal_code", "city"],
    "location_links": ["location_id", "restaurant_id"],
    "categories": [],
    "category_links": [],
}

NUMERIC_COLUMNS: dict[str, list[str]] = {
    "restaurants": ["rating", "review_count", "latitude", "longitude"],
    "menu_items": ["price", "alcohol_content", "caffeine_content"],
    "locations": ["latitude", "longitude"],
}

OPTIONAL_TABLES = frozenset({"categories", "category_links"})

# Columns holding identifiers; compared as strings across tables.
ID_COLUMNS: dict[str, list[str]] = {
    "restaurants": ["id"],
    "menu_items": ["id", "restaurant_id"],
    "locations": ["id"],
    "location_links": ["location_id", "restaurant_id"],
    "categories": ["id", "restaurant_id", "item_id"],
    "category_links": ["category_id", "restaurant_id"],
}

# Codes that look numeric in some exports but are labels, not quantities.
TEXT_COLUMNS: dict[str, list[str]] = {
    "locations": ["postal_code"],
}


class Restaurant(BaseModel):
    id: str = Field(..., min_length=1)
    name: str | None = None
    city: str | None = None
    rating: float | None = Field(default=None, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    latitude: float | None = None
    longitude: float | None = None


class MenuItem(BaseModel):
    id: str
    restaurant_id: str
    name: str | None = None
    description: str | None = None
    price: float | None = None
    alcohol_content: float | None = None
    caffeine_content: float | None = None


class Location(BaseModel):
    id: str
    name: str | None = None
    postal_code: str | None = None
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class LocationLink(BaseModel):
    location_id: str
    restaurant_id: str


class Category(BaseModel):
    id: str
    restaurant_id: str | None = None
    name: str | None = None
    item_id: str | None = None


class CategoryLink(BaseModel):
    category_id: str
    restaurant_id: str
