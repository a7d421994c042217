import pytest

from number_ai import prompts
from number_ai.prompts import ARITHMETIC_OPERATORS, Operation


def test_catalog_covers_every_operation():
    assert set(prompts.SYSTEM_PROMPTS) == set(Operation)
    assert set(prompts.RESPONSE_FIELDS) == set(Operation)


@pytest.mark.parametrize("operation", list(Operation))
def test_prompt_names_its_response_field(operation):
    text = prompts.lookup(operation)
    assert f'"{prompts.response_field(operation)}"' in text
    assert "JSON" in text


def test_lookup_outside_enumeration():
    with pytest.raises(KeyError):
        prompts.lookup("not_an_operation")


def test_arithmetic_operators():
    assert len(ARITHMETIC_OPERATORS) == 18
    assert {"+", "log", "sqrt", "mod", "max"} <= set(ARITHMETIC_OPERATORS)
    for op in ARITHMETIC_OPERATORS:
        assert op in prompts.lookup(Operation.ARITHMETIC_OPERATION)
