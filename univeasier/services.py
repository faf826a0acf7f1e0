"""Operations behind the API: decode request bodies, validate, and store or read."""

import json
import logging

from . import dao
from .models import Interest, Person, TableTest, TypeUniversity

logger = logging.getLogger(__name__)


def _read_body(body):
    """Text of a request body given as a file-like object, bytes or str."""
    try:
        if hasattr(body, "read"):
            body = body.read()
        if isinstance(body, (bytes, bytearray)):
            body = bytes(body).decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read body info=%s", exc)
        raise
    return body


def _decode(cls, body):
    text = _read_body(body)
    try:
        data = json.loads(text)
        return cls() if data is None else cls.from_dict(data)
    except (ValueError, TypeError, OverflowError) as exc:
        logger.error("Body Unmarshal failed info=%s", exc)
        raise


def _validated(cls, body, label):
    record = _decode(cls, body)
    try:
        record.validate()
    except Exception as exc:
        logger.error("%s info=%s json=%r", label, exc, record)
        raise
    return record


def add_interest(conn, body):
    """Decode, validate and store an interest."""
    dao.add_interest(conn, _validated(Interest, body, "Invalid interest model"))


def get_interest_by_id(conn, interest_id):
    """Interest with the given id."""
    return dao.get_interest_by_id(conn, interest_id)


def list_interests(conn):
    """Every interest."""
    return dao.list_interests(conn)


def add_person(conn, body):
    """Decode, validate and store a person."""
    dao.add_person(conn, _validated(Person, body, "Invalid person model"))


def get_person_by_id(conn, person_id):
    """Person with the given id."""
    return dao.get_person_by_id(conn, person_id)


def list_persons(conn):
    """Every person."""
    return dao.list_persons(conn)


def add_table_test(conn, body):
    """Decode and store a test-table record; it is not validated."""
    dao.add_table_test(conn, _decode(TableTest, body))


def get_table_test(conn, name):
    """Test-table record with the given name."""
    return dao.get_table_test(conn, name)


def list_table_tests(conn):
    """Every test-table record."""
    return dao.list_table_tests(conn)


def add_type_university(conn, body):
    """Decode, validate and store a university type."""
    dao.add_type_university(conn, _validated(TypeUniversity, body, "Invalid model"))


def get_type_university_by_id(conn, type_university_id):
    """University type with the given id."""
    return dao.get_type_university_by_id(conn, type_university_id)


def list_type_universities(conn):
    """Every university type."""
    return dao.list_type_universities(conn)