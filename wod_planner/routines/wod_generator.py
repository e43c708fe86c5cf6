# wod_planner/routines/wod_generator.py
import sys
from datetime import date
from typing import Dict, List, Optional

from wod_planner.config import DEFAULT_MOVEMENTS_FILE, DEFAULT_WEIGHTS, ScoringWeights
from wod_planner.data.loader import Movement, load_movements, movement_map
from wod_planner.errors import InputError
from wod_planner.routines.assembler import (
    build_cooldown,
    build_metcon,
    build_scaling_notes,
    build_strength_or_skill,
    build_warmup,
    session_block_lengths
)
from wod_planner.routines.fatigue import fatigue_summary, recent_context
from wod_planner.routines.normalizer import normalize_profile
from wod_planner.routines.rng import SeededRandom
from wod_planner.routines.scoring import rank_candidates


def today_seed(today: Optional[date] = None) -> int:
    """Date-derived default seed (YYYYMMDD), stable for a calendar day."""
    today = today or date.today()
    return int(today.strftime('%Y%m%d'))


def build_plan(profile: Dict,
               history: List[Dict],
               movements: List[Movement],
               lookback_days: int,
               seed: int,
               today: Optional[date] = None,
               weights: ScoringWeights = DEFAULT_WEIGHTS) -> Dict:
    """
    Assemble one complete session plan.

    The run is a pure function of its arguments: the random source and the
    set of used movement names are created here and never outlive the call.

    Args:
        profile: Canonical profile (see normalize_profile)
        history: Session records
        movements: Movement library in file order
        lookback_days: Fatigue window in days
        seed: Random seed
        today: Reference day for the fatigue window
        weights: Score weights

    Returns:
        Plan dictionary with seed, profile, context and the session blocks
    """
    if not movements:
        raise InputError("Movement library must contain at least one movement.")

    rng = SeededRandom(seed)

    by_name = movement_map(movements)
    recent_movements, pattern_counter = recent_context(history, by_name, lookback_days, today)
    ranked = rank_candidates(movements, profile, recent_movements, pattern_counter, weights)

    blocks = session_block_lengths(profile['session_minutes'])
    used = set()

    warmup = build_warmup(ranked, used, rng, blocks['warmup'])
    strength_or_skill = build_strength_or_skill(ranked, used, rng, profile, blocks['strength'])
    metcon = build_metcon(ranked, used, rng, profile, blocks['metcon'])
    cooldown = build_cooldown(movements, rng, blocks['cooldown'])

    selected_for_scaling = warmup['movements'] + metcon['movements']
    if strength_or_skill:
        selected_for_scaling.append(strength_or_skill['movement'])

    return {
        'seed': seed,
        'profile': profile,
        'context': {
            'lookback_days': lookback_days,
            'recent_movements': sorted(recent_movements),
            'recent_fatigue_patterns': fatigue_summary(pattern_counter)
        },
        'warmup': warmup,
        'strength_or_skill': strength_or_skill,
        'metcon': metcon,
        'cooldown': cooldown,
        'scaling': build_scaling_notes(selected_for_scaling, by_name)
    }


class WodGenerator:
    """
    Generate daily WOD plans from an athlete profile and recent history.
    Holds the movement library so several athletes can be planned from one load.
    """
    def __init__(self,
                 movements_path: str = DEFAULT_MOVEMENTS_FILE,
                 movements: Optional[List[Movement]] = None,
                 weights: ScoringWeights = DEFAULT_WEIGHTS,
                 verbose: bool = False):
        """
        Initialize the WOD generator.

        Args:
            movements_path: Path to the movement library JSON
            movements: Already loaded library; skips reading movements_path
            weights: Score weights
            verbose: Print progress to stderr
        """
        self.verbose = verbose
        self.weights = weights
        if movements is None:
            self._log(f"Loading movement library from {movements_path}...")
            movements = load_movements(movements_path)
        self.movements = movements
        self._log(f"Loaded movement library: {len(self.movements)} movements")

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message, file=sys.stderr)

    def generate_plan(self,
                      raw_profile: Dict,
                      history: Optional[List[Dict]] = None,
                      lookback_days: int = 2,
                      seed: Optional[int] = None,
                      today: Optional[date] = None) -> Dict:
        """
        Normalize the profile and build a plan for it.

        Args:
            raw_profile: Profile record as read from JSON
            history: Session records, or None for no history
            lookback_days: Fatigue window in days, raised to at least 1
            seed: Random seed, defaults to today's YYYYMMDD
            today: Reference day, defaults to the local calendar date

        Returns:
            Plan dictionary
        """
        profile = normalize_profile(raw_profile)
        if seed is None:
            seed = today_seed(today)
        lookback_days = max(1, lookback_days)

        self._log(f"Generating {profile['goal']} session for {profile['session_minutes']} min "
                  f"(seed {seed}, lookback {lookback_days} days)...")
        plan = build_plan(profile, history or [], self.movements, lookback_days, seed, today, self.weights)
        self._log(f"Metcon: {plan['metcon']['type']} with {len(plan['metcon']['movements'])} movements")
        return plan
