# wod_planner/routines/fatigue.py
from collections import Counter
from datetime import date, timedelta
from typing import Dict, List, Optional, Set, Tuple

from wod_planner.data.loader import Movement
from wod_planner.utils import normalize_name, parse_iso_date


def session_in_lookback(session: Dict, cutoff: date) -> bool:
    """Undated or unparsable sessions count as recent."""
    session_date = parse_iso_date(session.get('date'))
    return session_date is None or session_date >= cutoff


def recent_context(history: List[Dict],
                   by_name: Dict[str, Movement],
                   lookback_days: int,
                   today: Optional[date] = None) -> Tuple[Set[str], Counter]:
    """
    Summarize recent training load.

    Args:
        history: Session records, most recent last (order does not matter)
        by_name: Library lookup keyed by normalized movement name
        lookback_days: Size of the window in days
        today: Reference day, defaults to the local calendar date

    Returns:
        Tuple of (recently performed movement keys, pattern frequency counter)
    """
    today = today or date.today()
    cutoff = today - timedelta(days=lookback_days)
    recent_movements = set()
    pattern_counter = Counter()

    for session in history:
        if not isinstance(session, dict) or not session_in_lookback(session, cutoff):
            continue

        session_movements = session.get('movements')
        if not isinstance(session_movements, list):
            session_movements = []
        for movement_name in session_movements:
            if not isinstance(movement_name, str):
                continue
            key = normalize_name(movement_name)
            if not key:
                continue

            recent_movements.add(key)
            found = by_name.get(key)
            if found:
                for pattern in found.patterns:
                    pattern_counter[pattern] += 1

        session_patterns = session.get('patterns')
        if not isinstance(session_patterns, list):
            session_patterns = []
        for pattern in session_patterns:
            if isinstance(pattern, str) and pattern.strip():
                pattern_counter[normalize_name(pattern)] += 1

    return recent_movements, pattern_counter


def fatigue_summary(pattern_counter: Counter, limit: int = 5) -> List[str]:
    """Most loaded patterns as "pattern (count)", ties in first-seen order."""
    ranked = sorted(pattern_counter.items(), key=lambda item: -item[1])
    return [f"{pattern} ({count})" for pattern, count in ranked[:limit]]
