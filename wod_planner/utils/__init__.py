"""Utility functions and helper methods."""

from wod_planner.utils.text import (
    normalize_name,
    as_lower_set,
    parse_iso_date,
    parse_int
)

__all__ = [
    'normalize_name',
    'as_lower_set',
    'parse_iso_date',
    'parse_int'
]
