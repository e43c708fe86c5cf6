"""Tests for profile normalization."""

import pytest

from wod_planner.errors import InputError
from wod_planner.routines.normalizer import normalize_profile


def test_empty_profile_gets_defaults():
    assert normalize_profile({}) == {
        'goal': 'mixed',
        'fitness_level': 'intermediate',
        'session_minutes': 45,
        'equipment_available': ['none'],
        'limitations': {'avoid_patterns': [], 'avoid_movements': []},
        'preferred_modalities': ['monostructural', 'gymnastics', 'weightlifting', 'odd-object'],
        'wod_type': None,
        'intensity': 'moderate'
    }


@pytest.mark.parametrize('raw, expected', [
    (5, 20),
    (500, 120),
    (60, 60),
    ('50 min', 50),
    ('abc', 45),
    (45.9, 45),
    (float('nan'), 45),
    (None, 45),
    (True, 45)
])
def test_session_minutes_parsed_and_clamped(raw, expected):
    assert normalize_profile({'session_minutes': raw})['session_minutes'] == expected


def test_enum_fields_fall_back():
    profile = normalize_profile({'goal': 'cardio', 'fitness_level': 'elite', 'intensity': 'max'})
    assert profile['goal'] == 'mixed'
    assert profile['fitness_level'] == 'intermediate'
    assert profile['intensity'] == 'moderate'


def test_enum_fields_are_case_insensitive():
    profile = normalize_profile({'goal': ' STRENGTH ', 'fitness_level': 'Advanced', 'intensity': 'High'})
    assert profile['goal'] == 'strength'
    assert profile['fitness_level'] == 'advanced'
    assert profile['intensity'] == 'high'


def test_equipment_cleaned_and_none_forced():
    profile = normalize_profile({'equipment_available': [' Barbell ', 'barbell', '', 3, 'Rower']})
    assert profile['equipment_available'] == ['barbell', 'none', 'rower']


def test_equipment_not_a_list():
    assert normalize_profile({'equipment_available': 'barbell'})['equipment_available'] == ['none']


def test_limitations_defaulted_when_malformed():
    profile = normalize_profile({'limitations': 'bad knee'})
    assert profile['limitations'] == {'avoid_patterns': [], 'avoid_movements': []}


def test_limitations_lowercased_and_deduplicated():
    profile = normalize_profile({
        'limitations': {'avoid_patterns': ['Hip Hinge', 'hip hinge'], 'avoid_movements': ['Burpee']}
    })
    assert profile['limitations'] == {'avoid_patterns': ['hip hinge'], 'avoid_movements': ['burpee']}


def test_preferred_modalities_filtered():
    profile = normalize_profile({'preferred_modalities': ['Recovery', 'yoga', 'gymnastics']})
    assert profile['preferred_modalities'] == ['gymnastics', 'recovery']


def test_preferred_modalities_fall_back_when_nothing_valid():
    profile = normalize_profile({'preferred_modalities': ['yoga']})
    assert profile['preferred_modalities'] == ['monostructural', 'gymnastics', 'weightlifting', 'odd-object']


@pytest.mark.parametrize('raw, expected', [
    (' EMOM ', 'emom'),
    ('for_time', 'for_time'),
    ('tabata', None),
    (5, None),
    (None, None)
])
def test_wod_type(raw, expected):
    assert normalize_profile({'wod_type': raw})['wod_type'] == expected


def test_unknown_keys_dropped():
    assert 'name' not in normalize_profile({'name': 'Sam'})


@pytest.mark.parametrize('raw', [[], 'profile', None, 7])
def test_non_record_rejected(raw):
    with pytest.raises(InputError):
        normalize_profile(raw)
