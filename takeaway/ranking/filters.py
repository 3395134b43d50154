from __future__ import annotations

from typing import Iterable

import pandas as pd

# "veg" also matches words such as "vegetable" or "Las Vegas"; accepted noise
VEG_KEYWORDS: tuple[str, ...] = ("vegetarian", "vegan", "veg", "plant")


def _normalize_keywords(keywords: Iterable[str]) -> list[str]:
    return [k.strip().lower() for k in keywords if k and k.strip()]


def matches_keywords(name: str | None, keywords: Iterable[str]) -> bool:
    """True when *name* contains any of *keywords*, ignoring case."""
    if not isinstance(name, str) or not name:
        return False
    lowered = name.lower()
    return any(k in lowered for k in _normalize_keywords(keywords))


def keyword_mask(names: pd.Series, keywords: Iterable[str]) -> pd.Series:
    """Vectorized :func:`matches_keywords` over a column of item names."""
    lowered = names.astype("string").str.lower()
    mask = pd.Series(False, index=names.index)
    for keyword in _normalize_keywords(keywords):
        mask = mask | lowered.str.contains(keyword, regex=False).fillna(False).astype(bool)
    return mask
