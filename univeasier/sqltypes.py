"""Enumerations of SQL comparators, logical connectives and statement kinds."""

from enum import IntEnum

from .errors import InvalidTypeError, InvalidTypeIndexError


class Comparator(IntEnum):
    UNKNOWN = -1
    EQUAL = 0
    NOT_EQUAL = 1
    GREATER = 2
    GREATER_EQUALS = 3
    LESS = 4
    LESS_EQUALS = 5
    IN = 6
    NOT_IN = 7


class Logical(IntEnum):
    UNKNOWN = -1
    AND = 0
    OR = 1


class Operator(IntEnum):
    UNKNOWN = -1
    SELECT = 0
    UPDATE = 1
    DELETE = 2


COMPARATOR_SYMBOLS = ("=", "<>", ">", ">=", "<", "<=", "IN", "NOT IN")
LOGICAL_NAMES = ("AND", "OR")
OPERATOR_NAMES = ("SELECT", "UPDATE", "DELETE")

_COMPARATOR = "SQL Comparator"
_LOGICAL = "SQL Logical"
_OPERATOR = "SQL Operator"


def _index(value, names, type_name):
    index = int(value)
    if not 0 <= index < len(names):
        raise InvalidTypeIndexError(type_name, index)
    return index


def _lookup(text, names, enum_cls, type_name):
    try:
        return enum_cls(names.index(text))
    except ValueError:
        raise InvalidTypeError(type_name, text) from None


def validate_comparator(value):
    """Return the comparator for a value, or raise InvalidTypeIndexError."""
    return Comparator(_index(value, COMPARATOR_SYMBOLS, _COMPARATOR))


def validate_logical(value):
    """Return the logical connective for a value, or raise InvalidTypeIndexError."""
    return Logical(_index(value, LOGICAL_NAMES, _LOGICAL))


def validate_operator(value):
    """Return the statement kind for a value, or raise InvalidTypeIndexError."""
    return Operator(_index(value, OPERATOR_NAMES, _OPERATOR))


def comparator_to_string(value):
    """SQL text of a comparator."""
    return COMPARATOR_SYMBOLS[_index(value, COMPARATOR_SYMBOLS, _COMPARATOR)]


def logical_to_string(value):
    """SQL text of a logical connective."""
    return LOGICAL_NAMES[_index(value, LOGICAL_NAMES, _LOGICAL)]


def operator_to_string(value):
    """SQL keyword of a statement kind."""
    return OPERATOR_NAMES[_index(value, OPERATOR_NAMES, _OPERATOR)]


def to_comparator(text):
    """Comparator named by its SQL text, or raise InvalidTypeError."""
    return _lookup(text, COMPARATOR_SYMBOLS, Comparator, _COMPARATOR)


def to_logical(text):
    """Logical connective named by its SQL text, or raise InvalidTypeError."""
    return _lookup(text, LOGICAL_NAMES, Logical, _LOGICAL)


def to_operator(text):
    """Statement kind named by its SQL keyword, or raise InvalidTypeError."""
    return _lookup(text, OPERATOR_NAMES, Operator, _OPERATOR)