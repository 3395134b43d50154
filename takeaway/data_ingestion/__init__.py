"""
Data access layer.

Responsibilities:
- Connect read-only to the relational store holding the marketplace tables.
- Map raw column names into the canonical snapshot schema.
- Keep one immutable snapshot in memory for the duration of a run.
"""
