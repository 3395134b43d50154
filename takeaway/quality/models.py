from __future__ import annotations

from pydantic import BaseModel


class ColumnInfo(BaseModel):
    table: str
    name: str
    type: str
    nullable: bool
    default: str | None = None
    primary_key: bool = False


class TableRowCount(BaseModel):
    table: str
    row_count: int


class MissingValueReport(BaseModel):
    missing_id: int
    missing_name: int
    missing_city: int
    missing_rating: int
    missing_latitude: int
    missing_longitude: int
