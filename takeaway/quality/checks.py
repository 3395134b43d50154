from __future__ import annotations

import pandas as pd
from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from ..data_ingestion.config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from ..data_ingestion.snapshot import Snapshot
from .models import ColumnInfo, MissingValueReport, TableRowCount


def _blank(series: pd.Series) -> pd.Series:
    """Null or empty-string values."""
    text = series.astype("string").str.strip()
    return (text.isna() | (text == "")).astype(bool)


def schema_overview(
    engine: Engine, config: IngestionConfig = DEFAULT_INGESTION_CONFIG
) -> list[ColumnInfo]:
    """Column name, type, nullability and default of every raw table present."""
    inspector = inspect(engine)
    columns: list[ColumnInfo] = []
    for raw_name in config.table_names.values():
        if not inspector.has_table(raw_name):
            continue
        pk = set(inspector.get_pk_constraint(raw_name).get("constrained_columns") or [])
        for col in inspector.get_columns(raw_name):
            default = col.get("default")
            columns.append(ColumnInfo(
                table=raw_name,
                name=col["name"],
                type=str(col["type"]),
                nullable=bool(col.get("nullable", True)),
                default=str(default) if default is not None else None,
                primary_key=col["name"] in pk,
            ))
    return columns


def table_row_counts(snapshot: Snapshot) -> list[TableRowCount]:
    return [
        TableRowCount(table=name, row_count=len(frame))
        for name, frame in snapshot.tables().items()
    ]


def unique_restaurant_count(snapshot: Snapshot) -> int:
    return int(snapshot.restaurants["id"].nunique())


def duplicate_restaurant_ids(snapshot: Snapshot) -> list[str]:
    ids = snapshot.restaurants["id"].dropna()
    return sorted(ids[ids.duplicated()].unique().tolist())


def missing_values(snapshot: Snapshot) -> MissingValueReport:
    r = snapshot.restaurants
    return MissingValueReport(
        missing_id=int(_blank(r["id"]).sum()),
        missing_name=int(_blank(r["name"]).sum()),
        missing_city=int(_blank(r["city"]).sum()),
        missing_rating=int(r["rating"].isna().sum()),
        missing_latitude=int(r["latitude"].isna().sum()),
        missing_longitude=int(r["longitude"].isna().sum()),
    )
