"""WOD selection, assembly and rendering modules."""

from wod_planner.routines.rng import SeededRandom
from wod_planner.routines.normalizer import normalize_profile
from wod_planner.routines.fatigue import recent_context, fatigue_summary
from wod_planner.routines.scoring import can_do_movement, score_movement, rank_candidates
from wod_planner.routines.assembler import pick_best, session_block_lengths
from wod_planner.routines.wod_generator import WodGenerator, build_plan, today_seed
from wod_planner.routines.render import render_text, plan_to_json, plan_from_json

__all__ = [
    'SeededRandom',
    'normalize_profile',
    'recent_context',
    'fatigue_summary',
    'can_do_movement',
    'score_movement',
    'rank_candidates',
    'pick_best',
    'session_block_lengths',
    'WodGenerator',
    'build_plan',
    'today_seed',
    'render_text',
    'plan_to_json',
    'plan_from_json'
]
