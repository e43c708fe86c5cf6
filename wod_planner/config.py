# wod_planner/config.py
import os
from types import MappingProxyType
from typing import NamedTuple

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

LEVEL_RANK = MappingProxyType({
    'beginner': 0,
    'intermediate': 1,
    'advanced': 2
})

GOALS = frozenset(['engine', 'strength', 'skill', 'mixed', 'power'])
INTENSITIES = frozenset(['low', 'moderate', 'high'])
MODALITIES = frozenset(['monostructural', 'gymnastics', 'weightlifting', 'odd-object', 'recovery'])
ACTIVE_MODALITIES = ('monostructural', 'gymnastics', 'weightlifting', 'odd-object')
WOD_TYPES = ('amrap', 'for_time', 'emom', 'chipper', 'interval')

# Equipment tags every athlete satisfies
OPTIONAL_EQUIPMENT = frozenset(['none', 'bodyweight'])

DEFAULT_PROFILE = MappingProxyType({
    'goal': 'mixed',
    'fitness_level': 'intermediate',
    'session_minutes': 45,
    'equipment_available': ('none',),
    'limitations': MappingProxyType({
        'avoid_patterns': (),
        'avoid_movements': ()
    }),
    'preferred_modalities': ACTIVE_MODALITIES,
    'wod_type': None,
    'intensity': 'moderate'
})

MIN_SESSION_MINUTES = 20
MAX_SESSION_MINUTES = 120

# Metcon formats drawn at random when the athlete did not ask for one
GOAL_WOD_TYPES = MappingProxyType({
    'engine': ('interval', 'amrap', 'for_time'),
    'strength': ('emom', 'for_time', 'amrap'),
    'power': ('emom', 'for_time', 'amrap'),
    'skill': ('emom', 'amrap', 'interval'),
    'mixed': WOD_TYPES
})

# (upper bound on session minutes, warmup, strength, metcon, cooldown)
BLOCK_LENGTHS = (
    (30, 6, 6, 12, 4),
    (45, 8, 10, 18, 6),
    (60, 10, 12, 24, 8),
    (None, 12, 15, 30, 10)
)

# Number of top-ranked candidates a random pick is drawn from
PICK_WINDOW = 8


class ScoringWeights(NamedTuple):
    """Additive weights used when scoring an eligible movement."""
    goal_match: float = 3.0
    mixed_compound: float = 1.0
    preferred_modality: float = 2.0
    recent_repeat: float = -4.0
    pattern_fatigue: float = -1.3
    level_match: float = 1.0
    level_below: float = 0.4
    low_intensity_power: float = -1.0
    high_intensity_boost: float = 1.0
    recovery: float = -2.5


DEFAULT_WEIGHTS = ScoringWeights()

DEFAULT_MOVEMENTS_FILE = os.getenv(
    'WOD_MOVEMENTS_FILE',
    os.path.join(PACKAGE_DIR, 'data', 'movements.json')
)


def default_history_days() -> int:
    """Lookback window in days, from WOD_HISTORY_DAYS when it is a valid integer."""
    raw = os.getenv('WOD_HISTORY_DAYS', '2')
    try:
        return max(1, int(raw))
    except ValueError:
        return 2
