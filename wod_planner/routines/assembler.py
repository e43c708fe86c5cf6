# wod_planner/routines/assembler.py
from typing import Dict, Iterable, List, Optional, Set

from wod_planner.config import (
    ACTIVE_MODALITIES,
    BLOCK_LENGTHS,
    GOAL_WOD_TYPES,
    PICK_WINDOW,
    WOD_TYPES
)
from wod_planner.data.loader import Movement
from wod_planner.errors import NoEligibleMovementsError
from wod_planner.routines.rng import SeededRandom
from wod_planner.routines.scoring import ScoredCandidate
from wod_planner.utils import normalize_name

WARMUP_DEFAULTS = ('easy cardio', 'air squat', 'plank')

DEFAULT_COOLDOWN_ITEMS = [
    '2 min easy breathing walk',
    '2 x 45 sec per side hip opener',
    '2 x 45 sec thoracic opener'
]
DEFAULT_COOLDOWN_MOVEMENTS = ['Breathing walk', 'Hip opener', 'Thoracic opener']

DEFAULT_EASIER = 'Reduce reps and use controlled tempo'
DEFAULT_HARDER = 'Increase load or reduce rest'


def session_block_lengths(session_minutes: int) -> Dict[str, int]:
    """Minutes allotted to each block for a session of the given length."""
    for limit, warmup, strength, metcon, cooldown in BLOCK_LENGTHS:
        if limit is None or session_minutes <= limit:
            return {'warmup': warmup, 'strength': strength, 'metcon': metcon, 'cooldown': cooldown}


def _take_from_window(candidates: List[ScoredCandidate],
                      rng: SeededRandom,
                      used: Set[str],
                      window: int) -> Movement:
    top = candidates[:min(window, len(candidates))]
    chosen = rng.choice(top)[0]
    used.add(chosen.key)
    return chosen


def pick_best(ranked: List[ScoredCandidate],
              rng: SeededRandom,
              used: Set[str],
              modalities: Optional[Iterable[str]] = None,
              include_recovery: bool = False,
              window: int = PICK_WINDOW) -> Optional[Movement]:
    """
    Pick one of the best remaining candidates at random.

    Candidates already used, outside the allowed modalities or (unless
    include_recovery) of the recovery modality are skipped; the pick is drawn
    uniformly from the first `window` survivors in rank order and recorded in
    `used`.

    Args:
        ranked: Candidates ordered best first
        rng: Random source for this run
        used: Keys of movements already placed in the session, updated in place
        modalities: Allowed modalities, or None for any
        include_recovery: Whether recovery movements may be picked
        window: Size of the random pick window

    Returns:
        The chosen movement, or None if nothing survives the filters
    """
    allowed = set(modalities) if modalities is not None else None
    filtered = []
    for movement, score in ranked:
        if not include_recovery and movement.modality == 'recovery':
            continue
        if movement.key in used:
            continue
        if allowed is not None and movement.modality not in allowed:
            continue
        filtered.append((movement, score))

    if not filtered:
        return None
    return _take_from_window(filtered, rng, used, window)


def _warmup_friendly(movement: Movement) -> bool:
    if movement.modality in ('weightlifting', 'odd-object') and movement.difficulty != 'beginner':
        return False
    if 'power' in movement.effects or 'mental' in movement.effects:
        return False
    return 'burpee' not in movement.key


def pick_warmup(ranked: List[ScoredCandidate],
                rng: SeededRandom,
                used: Set[str],
                modalities: Iterable[str]) -> Optional[Movement]:
    allowed = set(modalities)
    filtered = [
        (movement, score) for movement, score in ranked
        if movement.key not in used and movement.modality in allowed and _warmup_friendly(movement)
    ]
    if not filtered:
        return pick_best(ranked, rng, used, allowed)
    return _take_from_window(filtered, rng, used, PICK_WINDOW)


def build_warmup(ranked: List[ScoredCandidate], used: Set[str], rng: SeededRandom, minutes: int) -> Dict:
    cyclical = pick_warmup(ranked, rng, used, ['monostructural'])
    base1 = pick_warmup(ranked, rng, used, ['gymnastics', 'recovery'])
    base2 = pick_warmup(ranked, rng, used, ['gymnastics', 'recovery', 'odd-object'])

    names = [
        picked.name if picked else default
        for picked, default in zip((cyclical, base1, base2), WARMUP_DEFAULTS)
    ]

    return {
        'duration_min': minutes,
        'movements': names,
        'items': [
            f"{max(3, minutes // 2)} min easy {names[0]}",
            f"2 rounds: 10 {names[1]}, 8 {names[2]}, 20 sec nasal breathing"
        ]
    }


def build_strength_or_skill(ranked: List[ScoredCandidate],
                            used: Set[str],
                            rng: SeededRandom,
                            profile: Dict,
                            minutes: int) -> Optional[Dict]:
    """
    Build the strength or skill block.

    Short engine sessions skip it, as does any session with no suitable
    movement left.
    """
    goal = profile['goal']
    level = profile['fitness_level']

    if goal == 'engine' and profile['session_minutes'] <= 35:
        return None

    if goal == 'skill':
        focus = 'skill'
        modalities = ['gymnastics', 'weightlifting']
    else:
        focus = 'strength'
        modalities = ['weightlifting', 'odd-object']

    movement = pick_best(ranked, rng, used, modalities)
    if movement is None:
        return None

    name = movement.name
    if focus == 'skill':
        prescription = f"E2MOM x {max(8, minutes)}: 2-4 quality reps {name} + technical drill between sets"
    elif level == 'beginner':
        prescription = f"{name}: 5 x 5 @ moderate load (RPE 7), rest 90 sec"
    elif level == 'intermediate':
        prescription = f"{name}: 5 x 3 @ challenging load (RPE 8), rest 2 min"
    else:
        prescription = f"{name}: 6 x 2 heavy quality reps (RPE 8-9), rest 2-3 min"

    return {
        'focus': focus,
        'duration_min': minutes,
        'movement': name,
        'prescription': prescription
    }


def rep_target(movement: Movement, level: str) -> str:
    """
    Work prescription for one metcon movement.

    Args:
        movement: Metcon movement
        level: Athlete fitness level

    Returns:
        Distance, calories, reps or time, e.g. "200 m" or "10 reps"
    """
    name = movement.key
    modality = movement.modality
    difficulty = movement.difficulty

    if modality == 'monostructural':
        if 'run' in name:
            return '200 m'
        if 'row' in name or 'bike' in name or 'ski' in name:
            return '12/10 cal'
        if 'double under' in name:
            return '30 reps'
        if 'jump rope' in name:
            return '60 reps'
        return '12/10 cal'

    if modality in ('weightlifting', 'odd-object'):
        if 'carry' in name:
            return '40 m'
        if difficulty == 'advanced':
            return '6 reps'
        if level == 'beginner':
            return '8 reps'
        return '10 reps'

    if modality == 'gymnastics':
        if difficulty == 'advanced':
            return '6 reps'
        if difficulty == 'intermediate':
            return '10 reps'
        return '14 reps'

    return '45 sec'


def choose_wod_type(profile: Dict, rng: SeededRandom) -> str:
    if profile['wod_type']:
        return profile['wod_type']
    return rng.choice(GOAL_WOD_TYPES.get(profile['goal'], WOD_TYPES))


def emom_minutes(station_count: int, minutes: int) -> int:
    """Smallest multiple of the station count covering the block and four full cycles."""
    total = max(station_count * 4, minutes)
    remainder = total % station_count
    if remainder:
        total += station_count - remainder
    return total


def describe_metcon(wod_type: str, lines: List[str], minutes: int) -> str:
    if wod_type == 'amrap':
        return f"{minutes}-min AMRAP: {' | '.join(lines)}"
    if wod_type == 'for_time':
        rounds = 4 if len(lines) <= 3 else 3
        return f"{rounds} rounds for time: {' | '.join(lines)}"
    if wod_type == 'emom':
        stations = [f"Min {idx + 1}: {line}" for idx, line in enumerate(lines)]
        return (f"EMOM {emom_minutes(len(lines), minutes)} (cycle {len(lines)} stations): "
                f"{' | '.join(stations)}")
    if wod_type == 'chipper':
        return f"For time chipper: {' -> '.join(lines)}"
    return f"{max(4, minutes // 3)} rounds: 2:00 work / 1:00 rest on {' | '.join(lines)}"


def build_metcon(ranked: List[ScoredCandidate],
                 used: Set[str],
                 rng: SeededRandom,
                 profile: Dict,
                 minutes: int) -> Dict:
    """
    Build the metcon: one movement per modality group, topped up to the
    session's target count.

    Raises:
        NoEligibleMovementsError: if not a single movement could be selected
    """
    wod_type = choose_wod_type(profile, rng)

    selected = []
    for group in (['monostructural'], ['gymnastics'], ['weightlifting', 'odd-object']):
        choice = pick_best(ranked, rng, used, group)
        if choice:
            selected.append(choice)

    target_count = 4 if profile['session_minutes'] > 45 else 3
    while len(selected) < target_count:
        extra = pick_best(ranked, rng, used, ACTIVE_MODALITIES)
        if extra is None:
            break
        selected.append(extra)

    if not selected:
        raise NoEligibleMovementsError(
            "No eligible movements remain for metcon after constraints. Relax constraints and retry."
        )

    lines = [f"{rep_target(movement, profile['fitness_level'])} {movement.name}" for movement in selected]

    return {
        'type': wod_type,
        'duration_min': minutes,
        'movements': [movement.name for movement in selected],
        'description': describe_metcon(wod_type, lines, minutes)
    }


def build_cooldown(movements: List[Movement], rng: SeededRandom, minutes: int) -> Dict:
    # Drawn from the whole library, eligibility does not apply here
    recovery_pool = [movement for movement in movements if movement.modality == 'recovery']
    rng.shuffle(recovery_pool)
    selected = recovery_pool[:2]

    if len(selected) < 2:
        return {
            'duration_min': minutes,
            'movements': list(DEFAULT_COOLDOWN_MOVEMENTS),
            'items': list(DEFAULT_COOLDOWN_ITEMS)
        }

    return {
        'duration_min': minutes,
        'movements': [selected[0].name, selected[1].name, 'Down-regulation breathing'],
        'items': [
            f"2 x 45 sec per side {selected[0].name}",
            f"2 x 45 sec per side {selected[1].name}",
            '2 min down-regulation breathing'
        ]
    }


def build_scaling_notes(movement_names: Iterable[str], by_name: Dict[str, Movement]) -> List[Dict]:
    notes = []
    seen = set()
    for movement_name in movement_names:
        key = normalize_name(movement_name)
        movement = by_name.get(key)
        if movement is None or key in seen:
            continue
        seen.add(key)

        variations = movement.variations
        notes.append({
            'movement': movement_name,
            'easier': variations[0] if variations else DEFAULT_EASIER,
            'harder': variations[-1] if variations else DEFAULT_HARDER
        })
    return notes
