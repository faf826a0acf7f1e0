"""Enumerations stored on people and records: gender, kind of person, status."""

from enum import IntEnum

from .errors import (
    InvalidGenderError,
    InvalidGenderIndexError,
    InvalidPersonError,
    InvalidPersonIndexError,
    InvalidStatusError,
    InvalidStatusIndexError,
)


class Gender(IntEnum):
    UNKNOWN = -1
    MALE = 0
    FEMALE = 1
    OTHER = 2


class PersonType(IntEnum):
    UNKNOWN = -1
    VISITOR = 0
    STUDENT = 1
    GRADUATED = 2
    PROFESSOR = 3


class Status(IntEnum):
    UNKNOWN = -1
    UNVERIFIED = 0
    PENDING = 1
    VERIFIED = 2


GENDER_NAMES = ("MALE", "FEMALE", "OTHER")
PERSON_TYPE_NAMES = ("VISITOR", "STUDENT", "GRADUATED", "PROFESSOR")
STATUS_NAMES = ("UNVERIFIED", "PENDING", "VERIFIED")


def _index(value, names, error_cls):
    index = int(value)
    if not 0 <= index < len(names):
        raise error_cls(index)
    return index


def _lookup(text, names, enum_cls, error_cls):
    try:
        return enum_cls(names.index(text))
    except ValueError:
        raise error_cls(text) from None


def validate_gender(value):
    """Return the gender for a value, or raise InvalidGenderIndexError."""
    return Gender(_index(value, GENDER_NAMES, InvalidGenderIndexError))


def validate_person_type(value):
    """Return the kind of person for a value, or raise InvalidPersonIndexError."""
    return PersonType(_index(value, PERSON_TYPE_NAMES, InvalidPersonIndexError))


def validate_status(value):
    """Return the status for a value, or raise InvalidStatusIndexError."""
    return Status(_index(value, STATUS_NAMES, InvalidStatusIndexError))


def gender_to_string(value):
    """Name of a gender."""
    return GENDER_NAMES[_index(value, GENDER_NAMES, InvalidGenderIndexError)]


def person_type_to_string(value):
    """Name of a kind of person."""
    return PERSON_TYPE_NAMES[_index(value, PERSON_TYPE_NAMES, InvalidPersonIndexError)]


def status_to_string(value):
    """Name of a status."""
    return STATUS_NAMES[_index(value, STATUS_NAMES, InvalidStatusIndexError)]


def to_gender(text):
    """Gender with the given name, or raise InvalidGenderError."""
    return _lookup(text, GENDER_NAMES, Gender, InvalidGenderError)


def to_person_type(text):
    """Kind of person with the given name, or raise InvalidPersonError."""
    return _lookup(text, PERSON_TYPE_NAMES, PersonType, InvalidPersonError)


def to_status(text):
    """Status with the given name, or raise InvalidStatusError."""
    return _lookup(text, STATUS_NAMES, Status, InvalidStatusError)