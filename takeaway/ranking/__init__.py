"""
Ranking engine.

Responsibilities:
- Match menu items against keyword sets, case-insensitively.
- Filter restaurants by review-count and rating thresholds.
- Score restaurants with the review-weighted quality formula.
- Return deterministic, truncated rankings for each business question.
"""
