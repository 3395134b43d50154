from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterable

import pandas as pd
from pydantic import BaseModel

from .schema import (
    NUMERIC_COLUMNS,
    TABLE_COLUMNS,
    Category,
    CategoryLink,
    Location,
    LocationLink,
    MenuItem,
    Restaurant,
)


def _frame(records: Iterable[BaseModel], table: str) -> pd.DataFrame:
    rows = [r.model_dump() for r in records]
    frame = pd.DataFrame(rows, columns=TABLE_COLUMNS[table])
    for column in NUMERIC_COLUMNS.get(table, []):
        frame[column] = pd.to_numeric(frame[column], errors="coerce")
    return frame


@dataclass(frozen=True, eq=False)
class Snapshot:
    """The six marketplace tables, read-only for the duration of a run."""

    restaurants: pd.DataFrame
    menu_items: pd.DataFrame
    locations: pd.DataFrame
    location_links: pd.DataFrame
    categories: pd.DataFrame
    category_links: pd.DataFrame

    @classmethod
    def from_records(
        cls,
        restaurants: Iterable[Restaurant] = (),
        menu_items: Iterable[MenuItem] = (),
        locations: Iterable[Location] = (),
        location_links: Iterable[LocationLink] = (),
        categories: Iterable[Category] = (),
        category_links: Iterable[CategoryLink] = (),
    ) -> Snapshot:
        return cls(
            restaurants=_frame(restaurants, "restaurants"),
            menu_items=_frame(menu_items, "menu_items"),
            locations=_frame(locations, "locations"),
            location_links=_frame(location_links, "location_links"),
            categories=_frame(categories, "categories"),
            category_links=_frame(category_links, "category_links"),
        )

    def tables(self) -> dict[str, pd.DataFrame]:
        """Return the tables keyed by canonical name, in schema order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
