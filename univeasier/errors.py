"""Exceptions raised by the query builder, the typed values and the models."""

import json


def _quote(text):
    return json.dumps(str(text), ensure_ascii=False)


class UniveasierError(Exception):
    """Base class of every error raised by this package."""


# --- query building -------------------------------------------------------


class InvalidTypeIndexError(UniveasierError, ValueError):
    """An enumerated SQL type holds an index with no associated name."""

    def __init__(self, type_name, index):
        self.type_name = type_name
        self.index = index
        super().__init__(
            f"Could not find a {_quote(type_name)} type associated with the index {index}"
        )


class InvalidTypeError(UniveasierError, ValueError):
    """A text does not name any value of an enumerated SQL type."""

    def __init__(self, type_name, value):
        self.type_name = type_name
        self.value = value
        super().__init__(f"Invalid {_quote(type_name)} type value: {_quote(value)}")


class ValueNotExistError(UniveasierError, LookupError):
    """A value is missing from a named collection."""

    def __init__(self, value, collection_name):
        self.value = value
        self.collection_name = collection_name
        super().__init__(
            f"The value {_quote(value)} does not exist in the collection: "
            f"{_quote(collection_name)}"
        )


class TableNotExistError(UniveasierError, LookupError):
    """The database has no table of the given name."""

    def __init__(self, table_name):
        self.table_name = table_name
        super().__init__(f"The table {_quote(table_name)} does not exist")


class NotEqualsSizeError(UniveasierError, ValueError):
    """Two collections that must pair up have different lengths."""

    def __init__(self, first_collection, second_collection):
        self.first_collection = first_collection
        self.second_collection = second_collection
        super().__init__(
            f"{_quote(first_collection)} and {_quote(second_collection)} "
            "does not have the same size"
        )


class OperationNotSupportedError(UniveasierError):
    """A query method was called on a query of the wrong kind."""

    def __init__(self, method_name, operation):
        self.method_name = method_name
        self.operation = operation
        super().__init__(
            f"The {_quote(method_name)} method is not supported by the "
            f"{_quote(operation)} operation"
        )


class InvalidFirstFilterError(UniveasierError, ValueError):
    """A filter without a logical operator was added after the first one."""

    def __init__(self):
        super().__init__("From the second filter the logical operator is mandatory")


class InvalidFilterError(UniveasierError, ValueError):
    """The first filter of a query was given a logical operator."""

    def __init__(self):
        super().__init__("The first filter can not contain a logical operator")


class EmptyHeaderExpressionError(UniveasierError, ValueError):
    """An UPDATE query sets no column."""

    def __init__(self):
        super().__init__("The UPDATE operation must contain at least one column")


class InvalidHeaderExpressionError(UniveasierError, ValueError):
    """A DELETE query names columns."""

    def __init__(self):
        super().__init__("The DELETE operation must not contain any columns")


# --- models ---------------------------------------------------------------


class NullValueNotAllowedError(UniveasierError, ValueError):
    """A required attribute of a model is null."""

    def __init__(self, attribute):
        self.attribute = attribute
        super().__init__(f"The {_quote(attribute)} attribute can not be NULL")


class InvalidNameError(UniveasierError, ValueError):
    """A name is empty, too long or holds characters other than letters."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid name: {_quote(name)}")


class InvalidLastNameError(UniveasierError, ValueError):
    """A last name is empty or holds characters other than letters."""

    def __init__(self, last_name):
        self.last_name = last_name
        super().__init__(f"Invalid last name: {_quote(last_name)}")


class InvalidEmailError(UniveasierError, ValueError):
    """An e-mail address is empty or malformed."""

    def __init__(self, email):
        self.email = email
        super().__init__(f"Invalid email: {_quote(email)}")


class InvalidGenderError(UniveasierError, ValueError):
    """A text does not name a gender."""

    def __init__(self, gender):
        self.gender = gender
        super().__init__(f"Invalid gender type value: {_quote(gender)}")


class InvalidGenderIndexError(UniveasierError, ValueError):
    """A gender value lies outside the known genders."""

    def __init__(self, index):
        self.index = index
        super().__init__(
            f"Could not find a gender type associated with the index {index}"
        )


class InvalidStatusError(UniveasierError, ValueError):
    """A text does not name a verification status."""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Invalid status type value: {_quote(status)}")


class InvalidStatusIndexError(UniveasierError, ValueError):
    """A status value lies outside the known statuses."""

    def __init__(self, index):
        self.index = index
        super().__init__(
            f"Could not find a status type associated with the index {index}"
        )


class InvalidPersonError(UniveasierError, ValueError):
    """A text does not name a kind of person."""

    def __init__(self, person):
        self.person = person
        super().__init__(f"Invalid person type value: {_quote(person)}")


class InvalidPersonIndexError(UniveasierError, ValueError):
    """A person-kind value lies outside the known kinds."""

    def __init__(self, index):
        self.index = index
        super().__init__(
            f"Could not find a person type associated with the index {index}"
        )


class OverflowError_(UniveasierError, OverflowError):
    """A decoded value does not fit the target data type."""

    def __init__(self, type_name):
        self.type_name = type_name
        super().__init__(
            f"Overflow error converting value to data type {_quote(type_name)}"
        )


class TypeConversionError(UniveasierError, TypeError):
    """A decoded value has a type that cannot be converted to the target."""

    def __init__(self, expected_type, actual_type):
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"Cannot convert {_quote(actual_type)} to {_quote(expected_type)}"
        )