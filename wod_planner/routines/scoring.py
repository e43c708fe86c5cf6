# wod_planner/routines/scoring.py
from collections import Counter
from typing import Dict, List, Set, Tuple

from wod_planner.config import DEFAULT_WEIGHTS, LEVEL_RANK, OPTIONAL_EQUIPMENT, ScoringWeights
from wod_planner.data.loader import Movement, movement_frame
from wod_planner.errors import NoEligibleMovementsError

ScoredCandidate = Tuple[Movement, float]


def difficulty_rank(difficulty: str) -> int:
    return LEVEL_RANK.get(difficulty, LEVEL_RANK['intermediate'])


def can_do_movement(movement: Movement, profile: Dict, recent_movements: Set[str]) -> bool:
    """
    Hard eligibility gate for a movement.

    Skill sessions may reach one level above the athlete and never repeat a
    recently performed movement.

    Args:
        movement: Library movement
        profile: Canonical profile
        recent_movements: Keys of movements performed inside the lookback window

    Returns:
        True if the movement may be programmed at all
    """
    skill_reach = 1 if profile['goal'] == 'skill' else 0
    if difficulty_rank(movement.difficulty) > LEVEL_RANK[profile['fitness_level']] + skill_reach:
        return False

    available = set(profile['equipment_available'])
    for item in movement.equipment:
        if item not in OPTIONAL_EQUIPMENT and item not in available:
            return False

    limitations = profile['limitations']
    if movement.key in limitations['avoid_movements']:
        return False
    if set(movement.patterns) & set(limitations['avoid_patterns']):
        return False

    if profile['goal'] == 'skill' and movement.key in recent_movements:
        return False

    return True


def score_movement(movement: Movement,
                   profile: Dict,
                   recent_movements: Set[str],
                   pattern_counter: Counter,
                   weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """
    Desirability of an eligible movement for this session. Higher is better.

    Args:
        movement: Eligible library movement
        profile: Canonical profile
        recent_movements: Keys of recently performed movements
        pattern_counter: Pattern frequency over the lookback window
        weights: Score weights

    Returns:
        Additive score
    """
    score = 0.0
    goal = profile['goal']
    effects = movement.effects

    if goal in effects:
        score += weights.goal_match

    if goal == 'mixed' and len(effects) >= 2:
        score += weights.mixed_compound

    if movement.modality in profile['preferred_modalities']:
        score += weights.preferred_modality

    if movement.key in recent_movements:
        score += weights.recent_repeat

    # One penalty per overworked pattern
    for pattern in movement.patterns:
        score += weights.pattern_fatigue * pattern_counter.get(pattern, 0)

    level_rank = LEVEL_RANK[profile['fitness_level']]
    movement_rank = difficulty_rank(movement.difficulty)
    if movement_rank == level_rank:
        score += weights.level_match
    elif movement_rank < level_rank:
        score += weights.level_below

    if profile['intensity'] == 'low':
        if 'power' in effects or movement.modality == 'weightlifting':
            score += weights.low_intensity_power
    elif profile['intensity'] == 'high':
        if 'power' in effects or 'engine' in effects:
            score += weights.high_intensity_boost

    if movement.modality == 'recovery':
        score += weights.recovery

    return score


def rank_candidates(movements: List[Movement],
                    profile: Dict,
                    recent_movements: Set[str],
                    pattern_counter: Counter,
                    weights: ScoringWeights = DEFAULT_WEIGHTS) -> List[ScoredCandidate]:
    """
    Filter the library to eligible movements and order them by score.

    Ties keep library order so that a fixed seed always walks the same list.

    Args:
        movements: Movement library in file order
        profile: Canonical profile
        recent_movements: Keys of recently performed movements
        pattern_counter: Pattern frequency over the lookback window
        weights: Score weights

    Returns:
        List of (movement, score) pairs, best first
    """
    eligible = [can_do_movement(m, profile, recent_movements) for m in movements]
    if not any(eligible):
        raise NoEligibleMovementsError(
            "No movements match the current equipment/level/limitations. Relax constraints and retry."
        )

    frame = movement_frame(movements)
    frame['eligible'] = eligible
    candidates = frame[frame['eligible']].copy()
    candidates['score'] = [
        score_movement(movements[position], profile, recent_movements, pattern_counter, weights)
        for position in candidates['position']
    ]
    candidates = candidates.sort_values(['score', 'position'], ascending=[False, True], kind='mergesort')

    return [
        (movements[int(position)], float(score))
        for position, score in zip(candidates['position'], candidates['score'])
    ]
