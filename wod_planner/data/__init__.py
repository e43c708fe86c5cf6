"""Data loading modules."""

from wod_planner.data.loader import (
    Movement,
    load_json,
    load_movements,
    load_profile,
    load_history,
    movement_from_record,
    movement_map,
    movement_frame,
    parse_movements,
    save_json
)

__all__ = [
    'Movement',
    'load_json',
    'load_movements',
    'load_profile',
    'load_history',
    'movement_from_record',
    'movement_map',
    'movement_frame',
    'parse_movements',
    'save_json'
]
