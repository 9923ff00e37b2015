"""Builders and value types for Firestore inserts, updates, reads by id, queries and aggregations."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "paths",
    "timestamps",
    "query",
    "filters",
    "aggregation",
    "insert",
    "transforms",
    "update",
    "select_by_id",
    "query_runners",
]