"""
Takeaway marketplace analysis.

Read-only analysis of a food-delivery marketplace snapshot:
- Load the six marketplace tables into an immutable in-memory snapshot.
- Rank restaurants by a review-weighted quality score.
- Bucket menu prices and aggregate restaurant coverage by area.
- Render the results as tables, charts and a clustered map.
"""
