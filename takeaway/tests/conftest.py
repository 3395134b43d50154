from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from sqlalchemy import create_engine

from takeaway.data_ingestion.schema import (
    Category,
    CategoryLink,
    Location,
    LocationLink,
    MenuItem,
    Restaurant,
)
from takeaway.data_ingestion.snapshot import Snapshot

RESTAURANTS = [
    Restaurant(id="hummus-house", name="Hummus House", city="Amsterdam", rating=4.8, review_count=619, latitude=52.37, longitude=4.89),
    Restaurant(id="pita-place", name="Pita Place", city="Utrecht", rating=4.5, review_count=50),
    Restaurant(id="few-reviews", name="Tiny Hummus", city="Amsterdam", rating=5.0, review_count=3),
    Restaurant(id="zero-rated", name="Unrated Grill", city=None, rating=0.0, review_count=100),
    Restaurant(id="pizza-roma", name="Pizza Roma", city="Rotterdam", rating=4.2, review_count=200, latitude=51.92, longitude=4.48),
    Restaurant(id="pizza-napoli", name="Pizza Napoli", city="Amsterdam", rating=4.2, review_count=200),
    Restaurant(id="burger-bar", name="Burger Bar", city="Rotterdam", rating=4.0, review_count=120),
    Restaurant(id="cheap-burgers", name="Cheap Burgers", city="Amsterdam", rating=3.5, review_count=40),
    Restaurant(id="veg-corner", name="Green Corner", city="Utrecht", rating=4.6, review_count=80, latitude=52.09, longitude=5.12),
]

MENU_ITEMS = [
    MenuItem(id="1", restaurant_id="hummus-house", name="Hummus Plate", price=8.5),
    MenuItem(id="2", restaurant_id="hummus-house", name="Hummus Deluxe", price=12.0),
    MenuItem(id="3", restaurant_id="pita-place", name="Pita with hummus", price=6.0),
    MenuItem(id="4", restaurant_id="few-reviews", name="Hummus bowl", price=7.0),
    MenuItem(id="5", restaurant_id="zero-rated", name="HUMMUS", price=5.0),
    MenuItem(id="6", restaurant_id="pizza-roma", name="Pizza Margherita", price=9.0),
    MenuItem(id="7", restaurant_id="pizza-napoli", name="Pizza Napoletana", price=11.0),
    MenuItem(id="8", restaurant_id="burger-bar", name="Classic Burger", price=10.0),
    MenuItem(id="9", restaurant_id="burger-bar", name="Kids burger", price=2.5),
    MenuItem(id="10", restaurant_id="cheap-burgers", name="Cheeseburger", price=4.0),
    MenuItem(id="11", restaurant_id="cheap-burgers", name="Burger (data error)", price=0.0),
    MenuItem(id="12", restaurant_id="veg-corner", name="Vegan Kapsalon", price=9.5),
    MenuItem(id="13", restaurant_id="veg-corner", name="Vegetable soup", price=4.5),
    MenuItem(id="14", restaurant_id="pizza-roma", name="Kapsalon", price=8.0),
    MenuItem(id="15", restaurant_id="pizza-roma", name="Plant burger", price=22.0),
    MenuItem(id="16", restaurant_id="pita-place", name="Falafel", price=None),
    MenuItem(id="17", restaurant_id="pita-place", name="Las Vegas fries", price=3.0),
]

LOCATIONS = [
    Location(id="L1", name="Centrum", postal_code="1011", city="Amsterdam"),
    Location(id="L2", name="Grachtengordel", postal_code="1012", city="Amsterdam"),
    Location(id="L3", name="Centrum", postal_code="3011", city="Rotterdam"),
    Location(id="L4", name="Binnenstad", postal_code="3511", city="Utrecht"),
    Location(id="L5", name="Oost", postal_code="3512", city="Utrecht"),
    Location(id="L6", name="Unknown", postal_code="9999", city=None),
]

LOCATION_LINKS = [
    LocationLink(location_id="L1", restaurant_id="hummus-house"),
    LocationLink(location_id="L2", restaurant_id="hummus-house"),
    LocationLink(location_id="L1", restaurant_id="pizza-napoli"),
    LocationLink(location_id="L1", restaurant_id="few-reviews"),
    LocationLink(location_id="L1", restaurant_id="zero-rated"),
    LocationLink(location_id="L2", restaurant_id="cheap-burgers"),
    LocationLink(location_id="L3", restaurant_id="pizza-roma"),
    LocationLink(location_id="L3", restaurant_id="burger-bar"),
    LocationLink(location_id="L4", restaurant_id="pita-place"),
    LocationLink(location_id="L4", restaurant_id="veg-corner"),
    LocationLink(location_id="L6", restaurant_id="hummus-house"),
]

CATEGORIES = [Category(id="c1", restaurant_id="pizza-roma", name="Pizza")]
CATEGORY_LINKS = [CategoryLink(category_id="c1", restaurant_id="pizza-roma")]


@pytest.fixture
def snapshot() -> Snapshot:
    return Snapshot.from_records(
        restaurants=RESTAURANTS,
        menu_items=MENU_ITEMS,
        locations=LOCATIONS,
        location_links=LOCATION_LINKS,
        categories=CATEGORIES,
        category_links=CATEGORY_LINKS,
    )


@pytest.fixture
def empty_snapshot() -> Snapshot:
    return Snapshot.from_records()


def write_raw_tables(
    path: Path,
    skip: tuple[str, ...] = (),
    drop_columns: dict | None = None,
    replace_columns: dict | None = None,
) -> str:
    """Write a small marketplace database using the raw export column names."""
    raw = {
        "restaurants": pd.DataFrame({
            "primarySlug": ["hummus-house", "pita-place", "odd-rating"],
            "name": ["Hummus House", "Pita Place", "Odd Rating"],
            "city": ["Amsterdam", "Utrecht", ""],
            "ratings": ["4.8", "4.1/5", "n/a"],
            "ratingsNumber": [619, 50, None],
            "latitude": [52.37, None, 52.0],
            "longitude": [4.89, None, 5.0],
        }),
        "menuItems": pd.DataFrame({
            "ID": [1, 2, 3],
            "primarySlug": ["hummus-house", "pita-place", "pita-place"],
            "name": ["Hummus Plate", "Pita with hummus", "Falafel"],
            "description": ["", "warm", None],
            "price": ["8.5", "6", "abc"],
            "alcoholContent": [None, None, None],
            "caffeineContent": [None, None, None],
        }),
        "locations": pd.DataFrame({
            "ID": [1, 2],
            "name": ["Centrum", "Binnenstad"],
            "postalCode": ["1011", "3511"],
            "city": ["Amsterdam", "Utrecht"],
            "latitude": [52.37, 52.09],
            "longitude": [4.89, 5.12],
        }),
        "locations_to_restaurants": pd.DataFrame({
            "location_id": [1, 2],
            "restaurant_id": ["hummus-house", "pita-place"],
        }),
        "categories": pd.DataFrame({
            "id": [1],
            "restaurant_id": ["hummus-house"],
            "name": ["Middle Eastern"],
            "item_id": [1],
        }),
        "categories_restaurants": pd.DataFrame({
            "category_id": [1],
            "restaurant_id": ["hummus-house"],
        }),
    }
    url = f"sqlite:///{path}"
    engine = create_engine(url)
    try:
        for table, frame in raw.items():
            if table in skip:
                continue
            if drop_columns and table in drop_columns:
                frame = frame.drop(columns=drop_columns[table])
            if replace_columns and table in replace_columns:
                frame = frame.assign(**replace_columns[table])
            frame.to_sql(table, engine, index=False)
    finally:
        engine.dispose()
    return url


@pytest.fixture
def takeaway_db(tmp_path: Path) -> str:
    return write_raw_tables(tmp_path / "takeaway.db")


@pytest.fixture
def make_db(tmp_path: Path):
    """Factory for raw databases with tables or columns left out or replaced."""
    def _make(
        skip: tuple[str, ...] = (),
        drop_columns: dict | None = None,
        replace_columns: dict | None = None,
    ) -> str:
        return write_raw_tables(
            tmp_path / "partial.db",
            skip=skip,
            drop_columns=drop_columns,
            replace_columns=replace_columns,
        )
    return _make
