from __future__ import annotations

import math

from pydantic import BaseModel, Field, field_validator


class RankingRequest(BaseModel):
    keywords: list[str] = Field(..., min_length=1, description="Menu item name substrings")
    min_reviews: int = Field(default=0, ge=0)
    min_rating: float = Field(
        default=0.0, ge=0.0, le=5.0, description="Exclusive lower bound on rating"
    )
    min_price: float | None = Field(
        default=None, description="Exclusive lower bound on matching item price"
    )
    price_normalized: bool = Field(
        default=False, description="Divide the score by the cheapest matching item"
    )
    limit: int = Field(default=10, ge=1)
    log_base: float = Field(default=math.e, gt=1.0)

    @field_validator("keywords")
    @classmethod
    def _strip_keywords(cls, value: list[str]) -> list[str]:
        cleaned = [k.strip().lower() for k in value if k.strip()]
        if not cleaned:
            raise ValueError("at least one non-blank keyword is required")
        return cleaned


class RankedRestaurant(BaseModel):
    id: str
    name: str | None
    city: str | None
    rating: float
    review_count: int
    min_price: float | None = None
    score: float


class RankingResponse(BaseModel):
    results: list[RankedRestaurant]
    total_candidates: int
