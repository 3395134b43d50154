from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

import pandas as pd
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .schema import (
    ID_COLUMNS,
    NUMERIC_COLUMNS,
    OPTIONAL_TABLES,
    RAW_COLUMN_ALIASES,
    REQUIRED_COLUMNS,
    TABLE_COLUMNS,
    TEXT_COLUMNS,
)
from .snapshot import Snapshot

logger = logging.getLogger(__name__)


class SnapshotLoadError(RuntimeError):
    """The marketplace store could not be read into a snapshot."""


def _first_present(columns: List[str], candidates: List[str]) -> str | None:
    for col in candidates:
        if col in columns:
            return col
    return None


def _as_id(value: Any) -> str | None:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    # Integer keys come back as floats when the column holds NULLs
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _left_of_slash(value: Any) -> Any:
    return value.split("/")[0].strip() if isinstance(value, str) else value


def _normalize_ratings(ratings: pd.Series) -> pd.Series:
    """Ratings as floats in [0, 5]; "4.1/5" keeps 4.1, anything unparseable is NaN."""
    values = pd.to_numeric(ratings.map(_left_of_slash), errors="coerce")
    return values.astype(float).clip(lower=0.0, upper=5.0)


def _canonicalize(raw: pd.DataFrame, table: str) -> pd.DataFrame:
    """Rename raw columns to the canonical schema and coerce their values."""
    aliases = RAW_COLUMN_ALIASES[table]
    columns = list(raw.columns)

    canonical = pd.DataFrame(index=raw.index)
    missing: List[str] = []
    for column in TABLE_COLUMNS[table]:
        source = _first_present(columns, aliases[column])
        if source is None:
            if column in REQUIRED_COLUMNS[table]:
                missing.append(column)
            canonical[column] = None
        else:
            canonical[column] = raw[source]

    if missing:
        raise SnapshotLoadError(
            f"Table {table!r} is missing required column(s): {', '.join(missing)}"
        )

    for column in ID_COLUMNS[table] + TEXT_COLUMNS.get(table, []):
        canonical[column] = canonical[column].map(_as_id)

    if table == "restaurants":
        canonical["rating"] = _normalize_ratings(canonical["rating"])
        canonical["review_count"] = (
            pd.to_numeric(canonical["review_count"], errors="coerce")
            .fillna(0)
            .clip(lower=0)
            .astype(int)
        )

    for column in NUMERIC_COLUMNS.get(table, []):
        canonical[column] = pd.to_numeric(canonical[column], errors="coerce")

    return canonical.reset_index(drop=True)


def _check_reachable(database_url: str) -> None:
    url = make_url(database_url)
    # SQLite silently creates missing files; treat them as unreachable instead
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        if not Path(url.database).is_file():
            raise SnapshotLoadError(f"Database file not found: {url.database}")


def load_snapshot(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Snapshot:
    """
    Read the six marketplace tables into an immutable snapshot.

    Only SELECTs are issued. The category tables are optional and load empty
    when absent; any other missing table or required column is fatal.
    """
    _check_reachable(config.database_url)

    engine = create_engine(config.database_url)
    tables: dict[str, pd.DataFrame] = {}
    try:
        with engine.connect() as conn:
            inspector = inspect(conn)
            for canonical_name, raw_name in config.table_names.items():
                if not inspector.has_table(raw_name):
                    if canonical_name in OPTIONAL_TABLES:
                        logger.warning(
                            "Optional table %r not found, loading it empty", raw_name
                        )
                        tables[canonical_name] = pd.DataFrame(
                            columns=TABLE_COLUMNS[canonical_name]
                        )
                        continue
                    raise SnapshotLoadError(f"Required table {raw_name!r} not found")

                raw = pd.read_sql_table(raw_name, conn)
                tables[canonical_name] = _canonicalize(raw, canonical_name)
                logger.info("Loaded %d rows from %s", len(raw), raw_name)
    except SQLAlchemyError as exc:
        raise SnapshotLoadError(
            f"Could not read marketplace snapshot from {config.database_url}"
        ) from exc
    finally:
        engine.dispose()

    return Snapshot(**tables)
