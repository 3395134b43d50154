from __future__ import annotations

import math


def weighted_score(
    rating: float,
    review_count: int,
    price: float | None = None,
    log_base: float = math.e,
) -> float:
    """
    Review-weighted quality score.

    ``rating * log(review_count + 1)``, rounded to 2 decimals. When *price* is
    given the value variant ``rating * log(review_count + 1) / price`` is
    returned instead, rounded to 3 decimals.

    The logarithm dampens very large review counts so that volume cannot
    outweigh rating quality. ``log_base=10`` matches the base-10 ``LOG()`` of
    SQLite's math functions.
    """
    if review_count < 0:
        raise ValueError(f"review_count must be non-negative, got {review_count}")

    quality = rating * math.log(review_count + 1, log_base)
    if price is None:
        return round(quality, 2)

    if price <= 0:
        raise ValueError(f"price must be positive, got {price}")
    return round(quality / price, 3)
