import pytest

from univeasier.errors import InvalidTypeError, InvalidTypeIndexError
from univeasier.sqltypes import (
    Comparator,
    Logical,
    Operator,
    comparator_to_string,
    logical_to_string,
    operator_to_string,
    to_comparator,
    to_logical,
    to_operator,
    validate_comparator,
    validate_logical,
    validate_operator,
)

COMPARATOR_CASES = [
    (Comparator.EQUAL, "="),
    (Comparator.NOT_EQUAL, "<>"),
    (Comparator.GREATER, ">"),
    (Comparator.GREATER_EQUALS, ">="),
    (Comparator.LESS, "<"),
    (Comparator.LESS_EQUALS, "<="),
    (Comparator.IN, "IN"),
    (Comparator.NOT_IN, "NOT IN"),
]

LOGICAL_CASES = [(Logical.AND, "AND"), (Logical.OR, "OR")]

OPERATOR_CASES = [
    (Operator.SELECT, "SELECT"),
    (Operator.UPDATE, "UPDATE"),
    (Operator.DELETE, "DELETE"),
]


@pytest.mark.parametrize("comparator, text", COMPARATOR_CASES)
def test_comparator_to_string(comparator, text):
    assert comparator_to_string(comparator) == text
    assert validate_comparator(comparator) is comparator


@pytest.mark.parametrize("comparator, text", COMPARATOR_CASES)
def test_to_comparator(comparator, text):
    assert to_comparator(text) is comparator


@pytest.mark.parametrize("value", [100, Comparator.UNKNOWN])
def test_invalid_comparator(value):
    with pytest.raises(InvalidTypeIndexError) as info:
        validate_comparator(value)
    assert info.value.index == int(value)
    with pytest.raises(InvalidTypeIndexError):
        comparator_to_string(value)


def test_unknown_comparator_text():
    with pytest.raises(InvalidTypeError) as info:
        to_comparator("EXIST")
    assert info.value.value == "EXIST"
    assert info.value.type_name == "SQL Comparator"


def test_validate_comparator_accepts_plain_int():
    assert validate_comparator(4) is Comparator.LESS


@pytest.mark.parametrize("logical, text", LOGICAL_CASES)
def test_logical_to_string(logical, text):
    assert logical_to_string(logical) == text
    assert validate_logical(logical) is logical
    assert to_logical(text) is logical


@pytest.mark.parametrize("value", [100, 10, Logical.UNKNOWN])
def test_invalid_logical(value):
    with pytest.raises(InvalidTypeIndexError) as info:
        validate_logical(value)
    assert info.value.type_name == "SQL Logical"
    with pytest.raises(InvalidTypeIndexError):
        logical_to_string(value)


def test_unknown_logical_text():
    with pytest.raises(InvalidTypeError) as info:
        to_logical("NOT")
    assert info.value.value == "NOT"


@pytest.mark.parametrize("operator, text", OPERATOR_CASES)
def test_operator_to_string(operator, text):
    assert operator_to_string(operator) == text
    assert validate_operator(operator) is operator
    assert to_operator(text) is operator


@pytest.mark.parametrize("value", [100, Operator.UNKNOWN])
def test_invalid_operator(value):
    with pytest.raises(InvalidTypeIndexError) as info:
        validate_operator(value)
    assert info.value.type_name == "SQL Operator"
    with pytest.raises(InvalidTypeIndexError):
        operator_to_string(value)


def test_unknown_operator_text():
    with pytest.raises(InvalidTypeError) as info:
        to_operator("REMOVE")
    assert info.value.value == "REMOVE"