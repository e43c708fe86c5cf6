# wod_planner/data/loader.py
import json
import os
from typing import Any, Dict, List, NamedTuple, Tuple

import pandas as pd

from wod_planner.errors import InputError
from wod_planner.utils import as_lower_set, normalize_name


class Movement(NamedTuple):
    """A single entry of the movement library."""
    name: str
    modality: str
    patterns: Tuple[str, ...]
    difficulty: str
    effects: Tuple[str, ...]
    equipment: Tuple[str, ...]
    variations: Tuple[str, ...]

    @property
    def key(self) -> str:
        return normalize_name(self.name)


def load_json(path: str) -> Any:
    """
    Read and decode a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Decoded JSON value
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        raise InputError(f"File not found: {path}")
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON in {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read {path}: {e}")


def movement_from_record(record: Any) -> Movement:
    """
    Build a Movement from a raw library record.

    Args:
        record: Dictionary with name, modality, patterns, difficulty, effects,
            equipment and variations

    Returns:
        Normalized Movement
    """
    if not isinstance(record, dict):
        raise InputError("Movement library entries must be JSON objects.")

    name = str(record.get('name') or '').strip()
    if not name:
        raise InputError("Every movement in the library needs a non-empty 'name'.")

    variations = record.get('variations')
    if not isinstance(variations, list):
        variations = []

    return Movement(
        name=name,
        modality=normalize_name(record.get('modality')),
        patterns=tuple(sorted(as_lower_set(record.get('patterns')))),
        difficulty=normalize_name(record.get('difficulty') or 'intermediate'),
        effects=tuple(sorted(as_lower_set(record.get('effects')))),
        equipment=tuple(sorted(as_lower_set(record.get('equipment')))),
        variations=tuple(v.strip() for v in variations if isinstance(v, str) and v.strip())
    )


def parse_movements(blob: Any) -> List[Movement]:
    """
    Validate a decoded library document and build its movements.

    Args:
        blob: Decoded JSON, expected to be {"movements": [...]}

    Returns:
        Movements in library order
    """
    records = blob.get('movements') if isinstance(blob, dict) else None
    if not isinstance(records, list) or len(records) == 0:
        raise InputError("Movement library must be a JSON object with a non-empty 'movements' list.")

    movements = []
    seen = set()
    for record in records:
        movement = movement_from_record(record)
        if movement.key in seen:
            raise InputError(f"Duplicate movement name in library: {movement.name}")
        seen.add(movement.key)
        movements.append(movement)
    return movements


def load_movements(path: str) -> List[Movement]:
    return parse_movements(load_json(path))


def load_profile(path: str) -> Dict:
    raw_profile = load_json(path)
    if not isinstance(raw_profile, dict):
        raise InputError("Profile JSON must be an object.")
    return raw_profile


def load_history(path: str = None) -> List[Dict]:
    """
    Load training history, keeping only well-formed session records.

    Args:
        path: Path to the history JSON array, or None for no history

    Returns:
        List of session dictionaries
    """
    if not path:
        return []
    raw_history = load_json(path)
    if not isinstance(raw_history, list):
        raise InputError("History JSON must be an array.")
    return [entry for entry in raw_history if isinstance(entry, dict)]


def movement_map(movements: List[Movement]) -> Dict[str, Movement]:
    """Index movements by trimmed, lower-cased name."""
    return {movement.key: movement for movement in movements}


def movement_frame(movements: List[Movement]) -> pd.DataFrame:
    """
    Tabulate the library for ranking, one row per movement in library order.

    'position' indexes the movement list the frame was built from and breaks
    score ties.
    """
    return pd.DataFrame({'position': list(range(len(movements)))})


def save_json(data: Any, path: str) -> None:
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise InputError(f"Could not write {path}: {e}")
