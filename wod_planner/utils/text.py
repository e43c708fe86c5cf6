# wod_planner/utils/text.py
import math
import re
from datetime import date
from typing import Any, Optional, Set

_ISO_DATE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def normalize_name(value: Any) -> str:
    """Lookup key for a name: trimmed and lower-cased."""
    if value is None:
        return ''
    return str(value).strip().lower()


def as_lower_set(values: Any) -> Set[str]:
    """
    Collect the non-empty string entries of a list as a lower-cased set.

    Anything that is not a list or tuple yields an empty set, and non-string
    entries are skipped.
    """
    out = set()
    if not isinstance(values, (list, tuple, set, frozenset)):
        return out
    for value in values:
        if not isinstance(value, str):
            continue
        normalized = value.strip().lower()
        if normalized:
            out.add(normalized)
    return out


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Parse a strict YYYY-MM-DD calendar date.

    Args:
        value: Raw value from a history record

    Returns:
        The date, or None when the value is absent, malformed or not a real day
    """
    if not isinstance(value, str):
        return None
    match = _ISO_DATE.match(value.strip())
    if not match:
        return None
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return None


def parse_int(value: Any, default: int) -> int:
    """
    Read an integer leniently: numbers are truncated, strings contribute their
    leading integer ("50 min" -> 50). Anything else returns the default.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return default
