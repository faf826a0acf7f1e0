"""Stored-procedure calls that store and read records in the database."""

import logging
from contextlib import closing
from datetime import date, datetime, timezone
from enum import IntEnum

from .enums import Gender, PersonType, Status
from .models import Interest, Person, TableTest, TypeUniversity
from .nullable import NullFloat64, NullInt32, NullInt64, NullString, NullTime
from .sqlquery import new_query
from .utils import failed_sql_query

logger = logging.getLogger(__name__)

_NULLABLE = (NullFloat64, NullInt32, NullInt64, NullString, NullTime)
_TEST_TABLE = "tabletest"
_QUERY_FAILED = "The query cannot be done"
_READ_FAILED = "The record cannot be read"


def _call_sql(procedure, count):
    return f"call {procedure}({', '.join(['%s'] * count)})"


def _db_value(value):
    if isinstance(value, _NULLABLE):
        return value.value
    if isinstance(value, IntEnum):
        return int(value)
    return value


def _params(*values):
    return tuple(_db_value(value) for value in values)


def _run(conn, message, statement, params=None, *, commit=False):
    """Execute a statement and return its rows; log and re-raise on failure."""
    try:
        with closing(conn.cursor()) as cursor:
            cursor.execute(statement, params)
            rows = list(cursor.fetchall() or [])
        if commit:
            conn.commit()
    except Exception as exc:
        logger.error("%s info=%s", message, exc)
        raise
    return rows


def _scan(rows, convert):
    records = []
    for row in rows:
        try:
            records.append(convert(row))
        except (TypeError, ValueError) as exc:
            logger.error("%s info=%s", _READ_FAILED, exc)
            raise
    return records


def _scan_one(rows, convert, message):
    if not rows:
        error = LookupError("sql: no rows in result set")
        logger.error("%s info=%s", message, error)
        raise error
    try:
        return convert(rows[0])
    except (TypeError, ValueError) as exc:
        logger.error("%s info=%s", message, exc)
        raise


# --- column conversion ------------------------------------------------------


def _time(value):
    if value is None:
        return NullTime()
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return NullTime(value)
    if isinstance(value, date):
        return NullTime(datetime(value.year, value.month, value.day, tzinfo=timezone.utc))
    raise TypeError(f"cannot convert {type(value).__name__} to a time")


def _bool(value):
    if value is None:
        raise TypeError("converting NULL to bool is unsupported")
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f"cannot convert {value!r} to a bool")


def _int(value):
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"cannot convert {value!r} to an integer")
    return value


def _str(value):
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    if not isinstance(value, str):
        raise TypeError(f"cannot convert {value!r} to a string")
    return value


def _nullable_str(value):
    return NullString(None if value is None else _str(value))


def _enum(enum_cls, value):
    number = _int(value)
    if not -128 <= number <= 127:
        raise ValueError(f"value {number} overflows int8")
    try:
        return enum_cls(number)
    except ValueError:
        return number


def _bytes(value):
    if value is None:
        return None
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"cannot convert {type(value).__name__} to bytes")


def _interest_row(row):
    id_, tag, is_skill, created, modified, created_by = row
    return Interest(
        id=NullInt64(id_),
        tag=_nullable_str(tag),
        is_skill=_bool(is_skill),
        created_date=_time(created),
        last_modified_date=_time(modified),
        created_by=NullInt64(created_by),
    )


def _person_row(row):
    (
        id_, code, gender, first_name, last_name, phone, email, avatar, kind,
        home_city, current_city, ethnic, nationality, birth_date, admission_year,
        period, is_verified, doc_verifier, created, modified,
    ) = row
    return Person(
        id=NullInt64(id_),
        code=_nullable_str(code),
        gender=_enum(Gender, gender),
        first_name=_nullable_str(first_name),
        last_name=_nullable_str(last_name),
        phone=_nullable_str(phone),
        email=_nullable_str(email),
        avatar=_bytes(avatar),
        type=_enum(PersonType, kind),
        home_city=_nullable_str(home_city),
        current_city=_nullable_str(current_city),
        ethnic=NullInt32(ethnic),
        nationality=_nullable_str(nationality),
        birth_date=_time(birth_date),
        admission_year=NullInt32(admission_year),
        period=NullInt32(period),
        is_verified=_enum(Status, is_verified),
        doc_verifier=_bytes(doc_verifier),
        created_date=_time(created),
        last_modified_date=_time(modified),
    )


def _table_test_row(row):
    id_, name, age, email = row
    return TableTest(id=_int(id_), name=_str(name), age=_int(age), email=_str(email))


def _type_university_row(row):
    id_, name, description, is_verified, doc_verifier, created, modified, created_by = row
    return TypeUniversity(
        id=NullInt64(id_),
        name=_nullable_str(name),
        description=_nullable_str(description),
        is_verified=_enum(Status, is_verified),
        doc_verifier=_bytes(doc_verifier),
        created_date=_time(created),
        last_modified_date=_time(modified),
        created_by=NullInt64(created_by),
    )


# --- interests --------------------------------------------------------------


def add_interest(conn, interest):
    """Store an interest through the InsertInterest procedure."""
    params = _params(
        interest.id, interest.tag, interest.is_skill, interest.created_date,
        interest.last_modified_date, interest.created_by,
    )
    _run(conn, failed_sql_query("InsertInterest"),
         _call_sql("InsertInterest", len(params)), params, commit=True)


def get_interest_by_id(conn, interest_id):
    """Read one interest; raise LookupError when there is none."""
    message = failed_sql_query("GetInterestById")
    rows = _run(conn, message, _call_sql("GetInterestById", 1), (interest_id,))
    return _scan_one(rows, _interest_row, message)


def list_interests(conn):
    """Read every interest."""
    rows = _run(conn, failed_sql_query("GetListInterest"), _call_sql("GetListInterest", 0))
    return _scan(rows, _interest_row)


# --- persons ----------------------------------------------------------------


def add_person(conn, person):
    """Store a person through the InsertPerson procedure."""
    params = _params(
        person.id, person.code, person.gender, person.first_name, person.last_name,
        person.phone, person.email, person.avatar, person.type, person.home_city,
        person.current_city, person.ethnic, person.nationality, person.birth_date,
        person.admission_year, person.period, person.is_verified, person.doc_verifier,
        person.created_date, person.last_modified_date,
    )
    _run(conn, failed_sql_query("InsertPerson"),
         _call_sql("InsertPerson", len(params)), params, commit=True)


def get_person_by_id(conn, person_id):
    """Read one person; raise LookupError when there is none."""
    message = failed_sql_query("GetPersonById")
    rows = _run(conn, message, _call_sql("GetPersonById", 1), (person_id,))
    return _scan_one(rows, _person_row, message)


def list_persons(conn):
    """Read every person."""
    rows = _run(conn, failed_sql_query("GetListPerson"), _call_sql("GetListPerson", 0))
    return _scan(rows, _person_row)


# --- test table -------------------------------------------------------------


def add_table_test(conn, record):
    """Store a record in the test table through the AddTest procedure."""
    params = (record.name, record.age, record.email)
    _run(conn, _QUERY_FAILED, _call_sql("AddTest", len(params)), params, commit=True)


def get_table_test(conn, name):
    """Read the test record with the given name; raise LookupError when there is none."""
    rows = _run(conn, _QUERY_FAILED, _call_sql("GetTest", 1), (name,))
    return _scan_one(rows, _table_test_row, _QUERY_FAILED)


def list_table_tests(conn):
    """Read every record of the test table with a built SELECT statement."""
    statement = new_query(conn, _TEST_TABLE, "SELECT").to_sql()
    rows = _run(conn, _QUERY_FAILED, statement)
    return _scan(rows, _table_test_row)


# --- university types -------------------------------------------------------


def add_type_university(conn, type_university):
    """Store a university type through the InsertTypeUniversity procedure."""
    params = _params(
        type_university.id, type_university.name, type_university.description,
        type_university.is_verified, type_university.doc_verifier,
        type_university.created_date, type_university.last_modified_date,
        type_university.created_by,
    )
    _run(conn, failed_sql_query("InsertTypeUniversity"),
         _call_sql("InsertTypeUniversity", len(params)), params, commit=True)


def get_type_university_by_id(conn, type_university_id):
    """Read one university type; raise LookupError when there is none."""
    message = failed_sql_query("GetTypeUniversityById")
    rows = _run(conn, message, _call_sql("GetTypeUniversityById", 1), (type_university_id,))
    return _scan_one(rows, _type_university_row, message)


def list_type_universities(conn):
    """Read every university type."""
    rows = _run(conn, failed_sql_query("GetListTypeUniversity"),
                _call_sql("GetListTypeUniversity", 0))
    return _scan(rows, _type_university_row)