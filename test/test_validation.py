import pytest
from pydantic import BaseModel, ValidationError

from number_ai.validation import (
    COUNT_REQUIRED_ERROR,
    NUMBER_REQUIRED_ERROR,
    format_errors,
    join_errors,
    validate_count,
    validate_pattern_sequence,
    validate_required_number,
)


class _Person(BaseModel):
    name: str
    age: int


def test_format_errors_groups_by_field():
    with pytest.raises(ValidationError) as exc:
        _Person(name=123, age="invalid")
    errors = format_errors(exc.value)
    assert set(errors) == {"name", "age"}
    assert all(isinstance(msgs, list) and msgs for msgs in errors.values())


def test_join_errors():
    assert join_errors({"a": ["x", "y"], "b": ["z"]}) == "a: x, y; b: z"


@pytest.mark.parametrize("sequence", [[1, 2, 3, 4, 5], ["a", "b", "c"], [1, "two", 3, "four"], (1.5, 2)])
def test_valid_sequences(sequence):
    items, error = validate_pattern_sequence(sequence)
    assert error is None
    assert items == list(sequence)


def test_single_item_sequence():
    items, error = validate_pattern_sequence([1])
    assert items is None
    assert error.startswith("sequence: ")
    assert "at least 2" in error


def test_empty_sequence():
    _, error = validate_pattern_sequence([])
    assert "at least 2" in error


def test_bool_items_rejected():
    _, error = validate_pattern_sequence([True, False])
    assert error is not None


@pytest.mark.parametrize("sequence", ["12", 5])
def test_string_and_scalar_are_not_sequences(sequence):
    items, error = validate_pattern_sequence(sequence)
    assert items is None
    assert error.startswith("sequence: ")


def test_one_shot_iterable_is_materialized():
    items, error = validate_pattern_sequence(x for x in [1, 2, 3])
    assert error is None
    assert items == [1, 2, 3]


@pytest.mark.parametrize("count", [None, 0, -1, 2.5, True])
def test_bad_counts(count):
    assert validate_count(count) == COUNT_REQUIRED_ERROR


def test_good_count():
    assert validate_count(1) is None


def test_required_number_accepts_zero():
    assert validate_required_number(0) is None
    assert validate_required_number(None) == NUMBER_REQUIRED_ERROR
