from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class IngestionConfig:
    """
    Where the marketplace snapshot lives and how its raw tables are named.
    """

    database_url: str = os.getenv("TAKEAWAY_DATABASE_URL", "sqlite:///data/takeaway.db")
    restaurants_table: str = "restaurants"
    menu_items_table: str = "menuItems"
    locations_table: str = "locations"
    location_links_table: str = "locations_to_restaurants"
    categories_table: str = "categories"
    category_links_table: str = "categories_restaurants"

    @property
    def table_names(self) -> dict[str, str]:
        """Canonical table name -> raw table name in the store."""
        return {
            "restaurants": self.restaurants_table,
            "menu_items": self.menu_items_table,
            "locations": self.locations_table,
            "location_links": self.location_links_table,
            "categories": self.categories_table,
            "category_links": self.category_links_table,
        }


DEFAULT_INGESTION_CONFIG = IngestionConfig()
