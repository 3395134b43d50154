from __future__ import annotations

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .ingest import load_snapshot
from .snapshot import Snapshot

_snapshot: Snapshot | None = None


def get_snapshot(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Snapshot:
    """Return the in-memory snapshot, loading it on first call."""
    global _snapshot
    if _snapshot is None:
        _snapshot = load_snapshot(config)
    return _snapshot


def set_snapshot(snapshot: Snapshot) -> None:
    global _snapshot
    _snapshot = snapshot


def clear_snapshot() -> None:
    global _snapshot
    _snapshot = None
