import pytest

from univeasier.errors import (
    EmptyHeaderExpressionError,
    InvalidEmailError,
    InvalidFilterError,
    InvalidFirstFilterError,
    InvalidGenderError,
    InvalidGenderIndexError,
    InvalidHeaderExpressionError,
    InvalidLastNameError,
    InvalidNameError,
    InvalidPersonError,
    InvalidPersonIndexError,
    InvalidStatusError,
    InvalidStatusIndexError,
    InvalidTypeError,
    InvalidTypeIndexError,
    NotEqualsSizeError,
    NullValueNotAllowedError,
    OperationNotSupportedError,
    OverflowError_,
    TableNotExistError,
    TypeConversionError,
    UniveasierError,
    ValueNotExistError,
)


def test_invalid_type_index_message():
    err = InvalidTypeIndexError("SQL Comparator", 100)
    assert err.index == 100
    assert err.type_name == "SQL Comparator"
    assert str(err) == 'Could not find a "SQL Comparator" type associated with the index 100'


def test_table_not_exist_is_lookup_error():
    err = TableNotExistError("tabletest")
    assert isinstance(err, LookupError)
    assert str(err) == 'The table "tabletest" does not exist'


def test_type_conversion_message():
    err = TypeConversionError("Int64", "string")
    assert str(err) == 'Cannot convert "string" to "Int64"'
    assert err.expected_type == "Int64"


@pytest.mark.parametrize(
    "cls, message",
    [
        (InvalidFirstFilterError, "From the second filter the logical operator is mandatory"),
        (InvalidFilterError, "The first filter can not contain a logical operator"),
        (EmptyHeaderExpressionError, "The UPDATE operation must contain at least one column"),
        (InvalidHeaderExpressionError, "The DELETE operation must not contain any columns"),
    ],
)
def test_fixed_messages(cls, message):
    err = cls()
    assert isinstance(err, ValueError)
    assert str(err) == message


@pytest.mark.parametrize(
    "cls, attribute, value",
    [
        (InvalidNameError, "name", "gabriel10"),
        (InvalidLastNameError, "last_name", "ramirez 123"),
        (InvalidEmailError, "email", "a@pe-.12edu"),
        (InvalidGenderError, "gender", "HELLO"),
        (InvalidStatusError, "status", "NONE"),
        (InvalidPersonError, "person", "PEOPLE"),
        (NullValueNotAllowedError, "attribute", "CreatedBy"),
        (TableNotExistError, "table_name", "TEST"),
    ],
)
def test_value_is_kept_and_quoted(cls, attribute, value):
    err = cls(value)
    assert getattr(err, attribute) == value
    assert f'"{value}"' in str(err)


@pytest.mark.parametrize(
    "cls", [InvalidGenderIndexError, InvalidStatusIndexError, InvalidPersonIndexError]
)
def test_index_errors_report_index(cls):
    err = cls(100)
    assert err.index == 100
    assert str(err).endswith("100")


def test_two_field_errors_keep_fields():
    missing = ValueNotExistError("Z", "ColumnNames")
    assert (missing.value, missing.collection_name) == ("Z", "ColumnNames")
    sizes = NotEqualsSizeError("column names", "values")
    assert sizes.first_collection == "column names"
    assert sizes.second_collection == "values"
    unsupported = OperationNotSupportedError("AddColumnHeader", "UPDATE")
    assert '"AddColumnHeader"' in str(unsupported)
    assert '"UPDATE"' in str(unsupported)
    invalid = InvalidTypeError("SQL Operator", "REMOVE")
    assert '"REMOVE"' in str(invalid)


def test_overflow_is_builtin_overflow():
    err = OverflowError_("Int32")
    assert isinstance(err, OverflowError)
    assert err.type_name == "Int32"


@pytest.mark.parametrize(
    "error",
    [
        InvalidTypeIndexError("SQL Logical", 10),
        TableNotExistError("TEST"),
        OperationNotSupportedError("SetColumnsValues", "SELECT"),
        InvalidFilterError(),
        OverflowError_("Float64"),
        TypeConversionError("Time", "float64"),
    ],
)
def test_all_share_base_class(error):
    with pytest.raises(UniveasierError) as info:
        raise error
    assert info.value is error