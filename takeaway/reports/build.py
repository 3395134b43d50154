"""
Run every business question against the snapshot and write the report.

Usage:
    python -m takeaway.reports.build
"""
from __future__ import annotations

import logging
from pathlib import Path

from ..analytics.buckets import price_distribution
from ..analytics.dishes import kapsalon_prices, veg_dish_availability, veg_dish_locations
from ..analytics.geography import city_distribution, dead_zones
from ..analytics.models import (
    CityDishCount,
    CityPriceSummary,
    CityShare,
    DeadZone,
    PriceBucketShare,
)
from ..data_ingestion.config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from ..data_ingestion.data_store import get_snapshot
from ..data_ingestion.snapshot import Snapshot
from ..quality.checks import missing_values, table_row_counts
from ..quality.models import TableRowCount
from ..ranking.models import RankedRestaurant
from ..ranking.presets import RANKING_PRESETS, run_preset
from .charts import plot_city_distribution, plot_price_distribution, plot_ranking
from .config import DEFAULT_REPORT_CONFIG, ReportConfig
from .maps import save_dish_map
from .tables import write_table

logger = logging.getLogger(__name__)


def build_report(
    snapshot: Snapshot, config: ReportConfig = DEFAULT_REPORT_CONFIG
) -> list[Path]:
    """Write tables, charts and the map for *snapshot*; return the written paths."""
    tables = config.tables_dir
    figures = config.figures_dir
    written: list[Path] = []

    # --- Data quality ---
    written.append(write_table(table_row_counts(snapshot), tables / "row_counts.csv", TableRowCount))
    missing = missing_values(snapshot)
    written.append(write_table([missing], tables / "missing_values.csv"))

    # --- Price bands ---
    buckets = price_distribution(snapshot)
    written.append(write_table(buckets, tables / "price_distribution.csv", PriceBucketShare))
    written.append(plot_price_distribution(buckets, figures / "price_distribution.png"))

    # --- Geography ---
    cities = city_distribution(snapshot)
    written.append(write_table(cities, tables / "city_distribution.csv", CityShare))
    written.append(
        plot_city_distribution(cities, figures / "city_distribution.png", config.chart_top_n)
    )
    zones = dead_zones(snapshot, config.dead_zone_max_restaurants)
    written.append(write_table(zones, tables / "dead_zones.csv", DeadZone))

    # --- Rankings ---
    for name, preset in RANKING_PRESETS.items():
        response = run_preset(snapshot, name, log_base=config.score_log_base)
        written.append(
            write_table(response.results, tables / f"ranking_{name}.csv", RankedRestaurant)
        )
        written.append(
            plot_ranking(response.results, figures / f"ranking_{name}.png", preset["label"])
        )
        logger.info(
            "%s: %d of %d candidates shown",
            preset["label"],
            len(response.results),
            response.total_candidates,
        )

    # --- Dishes ---
    kapsalon = kapsalon_prices(snapshot, config.kapsalon_min_price)
    written.append(write_table(kapsalon, tables / "kapsalon_prices.csv", CityPriceSummary))
    veg = veg_dish_availability(snapshot)
    written.append(write_table(veg, tables / "veg_dish_availability.csv", CityDishCount))
    written.append(save_dish_map(veg_dish_locations(snapshot), config.output_dir / "veg_map.html", config))

    return written


def run_report(
    ingestion_config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
    config: ReportConfig = DEFAULT_REPORT_CONFIG,
) -> list[Path]:
    snapshot = get_snapshot(ingestion_config)
    written = build_report(snapshot, config)
    logger.info("Wrote %d report artifacts to %s", len(written), config.output_dir)
    return written


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    paths = run_report()
    print(f"Report complete. {len(paths)} files written to: {DEFAULT_REPORT_CONFIG.output_dir}")
