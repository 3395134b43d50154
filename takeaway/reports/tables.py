from __future__ import annotations

from pathlib import Path
from typing import Sequence, Type

import pandas as pd
from pydantic import BaseModel


def results_frame(
    rows: Sequence[BaseModel], model: Type[BaseModel] | None = None
) -> pd.DataFrame:
    """Turn result models into a table; *model* fixes the columns of an empty result."""
    if not rows:
        columns = list(model.model_fields) if model is not None else []
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([r.model_dump() for r in rows])


def write_table(
    rows: Sequence[BaseModel],
    path: Path,
    model: Type[BaseModel] | None = None,
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    results_frame(rows, model).to_csv(path, index=False)
    return path
