"""
Report rendering.

Responsibilities:
- Turn analysis results into tables and write them as CSV.
- Render static charts for price bands, city coverage and rankings.
- Render an interactive clustered map of plant-based dish locations.
"""
