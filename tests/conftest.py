"""Shared fixtures for the planner tests."""

from datetime import date

import pytest

from wod_planner.data.loader import movement_from_record
from wod_planner.routines.normalizer import normalize_profile

TODAY = date(2024, 5, 10)


def make_movement(name,
                  modality='gymnastics',
                  patterns=(),
                  difficulty='beginner',
                  effects=(),
                  equipment=('none',),
                  variations=()):
    return movement_from_record({
        'name': name,
        'modality': modality,
        'patterns': list(patterns),
        'difficulty': difficulty,
        'effects': list(effects),
        'equipment': list(equipment),
        'variations': list(variations)
    })


LIBRARY_RECORDS = [
    ('Run', 'monostructural', ['locomotion'], 'beginner', ['engine'], ['none']),
    ('Row', 'monostructural', ['pull', 'hip hinge'], 'beginner', ['engine'], ['rower']),
    ('Jump rope', 'monostructural', ['jump'], 'beginner', ['engine'], ['jump rope']),
    ('Air squat', 'gymnastics', ['squat'], 'beginner', ['engine'], ['none']),
    ('Push-up', 'gymnastics', ['push'], 'beginner', ['strength'], ['none']),
    ('Pull-up', 'gymnastics', ['pull'], 'intermediate', ['strength', 'skill'], ['pull-up bar']),
    ('Burpee', 'gymnastics', ['push', 'squat', 'jump'], 'beginner', ['engine', 'mental'], ['none']),
    ('Hollow rock', 'gymnastics', ['trunk flexion'], 'beginner', ['skill'], ['none']),
    ('Deadlift', 'weightlifting', ['hip hinge'], 'beginner', ['strength'], ['barbell']),
    ('Thruster', 'weightlifting', ['squat', 'push'], 'intermediate', ['engine', 'strength'], ['barbell']),
    ('Dumbbell snatch', 'weightlifting', ['hip hinge', 'overhead'], 'beginner', ['power', 'engine'], ['dumbbell']),
    ('Kettlebell swing', 'odd-object', ['hip hinge'], 'beginner', ['engine', 'power'], ['kettlebell']),
    ('Farmer carry', 'odd-object', ['carry'], 'beginner', ['strength'], ['kettlebell']),
    ('Couch stretch', 'recovery', ['mobility'], 'beginner', ['recovery'], ['none']),
    ('Pigeon stretch', 'recovery', ['mobility'], 'beginner', ['recovery'], ['none']),
    ('Cat-cow', 'recovery', ['mobility'], 'beginner', ['recovery'], ['none'])
]

FULL_EQUIPMENT = ['rower', 'jump rope', 'pull-up bar', 'barbell', 'dumbbell', 'kettlebell']


@pytest.fixture
def library():
    """Small movement library covering every modality."""
    return [
        make_movement(name, modality, patterns, difficulty, effects, equipment,
                      variations=[f"Scaled {name.lower()}", name, f"Heavy {name.lower()}"])
        for name, modality, patterns, difficulty, effects, equipment in LIBRARY_RECORDS
    ]


@pytest.fixture
def by_name(library):
    return {movement.key: movement for movement in library}


@pytest.fixture
def strength_profile():
    return normalize_profile({
        'goal': 'strength',
        'fitness_level': 'intermediate',
        'session_minutes': 60,
        'equipment_available': FULL_EQUIPMENT
    })


@pytest.fixture
def today():
    return TODAY
