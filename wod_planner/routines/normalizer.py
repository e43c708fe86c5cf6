# wod_planner/routines/normalizer.py
from typing import Any, Dict

from wod_planner.config import (
    ACTIVE_MODALITIES,
    DEFAULT_PROFILE,
    GOALS,
    INTENSITIES,
    LEVEL_RANK,
    MAX_SESSION_MINUTES,
    MIN_SESSION_MINUTES,
    MODALITIES,
    WOD_TYPES
)
from wod_planner.errors import InputError
from wod_planner.utils import as_lower_set, parse_int


def _choose(value: Any, default: str, allowed) -> str:
    label = str(value or default).strip().lower()
    return label if label in allowed else default


def normalize_profile(raw_profile: Any) -> Dict:
    """
    Coerce a raw athlete profile into its canonical form.

    Missing or invalid fields fall back to DEFAULT_PROFILE. String collections
    come back as sorted, lower-cased, de-duplicated lists so the profile can
    be written straight to JSON.

    Args:
        raw_profile: Profile record as decoded from JSON

    Returns:
        Canonical profile dictionary
    """
    if not isinstance(raw_profile, dict):
        raise InputError("Profile JSON must be an object.")

    merged = dict(DEFAULT_PROFILE)
    merged.update(raw_profile)

    minutes = parse_int(merged.get('session_minutes'), DEFAULT_PROFILE['session_minutes'])
    minutes = max(MIN_SESSION_MINUTES, min(MAX_SESSION_MINUTES, minutes))

    equipment_raw = merged.get('equipment_available') or list(DEFAULT_PROFILE['equipment_available'])
    equipment = as_lower_set(equipment_raw)
    equipment.add('none')

    limitations = merged.get('limitations')
    if not isinstance(limitations, dict):
        limitations = {}

    preferred = as_lower_set(merged.get('preferred_modalities'))
    preferred = sorted(preferred & MODALITIES)
    if not preferred:
        preferred = list(ACTIVE_MODALITIES)

    wod_type = merged.get('wod_type')
    if isinstance(wod_type, str) and wod_type.strip().lower() in WOD_TYPES:
        wod_type = wod_type.strip().lower()
    else:
        wod_type = None

    return {
        'goal': _choose(merged.get('goal'), DEFAULT_PROFILE['goal'], GOALS),
        'fitness_level': _choose(merged.get('fitness_level'), DEFAULT_PROFILE['fitness_level'], LEVEL_RANK),
        'session_minutes': minutes,
        'equipment_available': sorted(equipment),
        'limitations': {
            'avoid_patterns': sorted(as_lower_set(limitations.get('avoid_patterns'))),
            'avoid_movements': sorted(as_lower_set(limitations.get('avoid_movements')))
        },
        'preferred_modalities': preferred,
        'wod_type': wod_type,
        'intensity': _choose(merged.get('intensity'), DEFAULT_PROFILE['intensity'], INTENSITIES)
    }
