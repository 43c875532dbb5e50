import pytest

from utils import parse_integer, validate_record_payload


@pytest.mark.parametrize('value, expected', [
    (42, 42),
    ('42', 42),
    (' 7 ', 7),
    (41.0, 41),
    (41.5, None),
    (True, None),
    ('abc', None),
    ('', None),
    (None, None),
    ([1], None),
])
def test_parse_integer(value, expected):
    assert parse_integer(value) == expected


def test_valid_payload_is_cleaned():
    values, errors = validate_record_payload({
        'name': ' Ann ', 'surname': 'Lee', 'age': '30', 'phone_number': '555-1', 'extra': 'ignored',
    })
    assert errors == {}
    assert values == {'name': 'Ann', 'surname': 'Lee', 'age': 30, 'phone_number': '555-1'}


def test_missing_fields_are_all_reported():
    values, errors = validate_record_payload({})
    assert set(errors) == {'name', 'surname', 'age', 'phone_number'}
    assert values == {}


def test_wrong_types_are_reported():
    _, errors = validate_record_payload({'name': 1, 'surname': 'Lee', 'age': True, 'phone_number': '555'})
    assert set(errors) == {'name', 'age'}


def test_age_out_of_range():
    _, errors = validate_record_payload({'name': 'A', 'surname': 'B', 'age': -1, 'phone_number': '555'})
    assert 'between' in errors['age']


def test_overlong_text_is_rejected():
    _, errors = validate_record_payload({'name': 'x' * 201, 'surname': 'B', 'age': 1, 'phone_number': '555'})
    assert set(errors) == {'name'}
