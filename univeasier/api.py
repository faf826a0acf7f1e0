"""HTTP routes of the API, served by a Flask application."""

import json
import re
from http import HTTPStatus

from flask import Flask, Response, request

from . import services

_ADDED = "The record was added successfully"
_ADDED_OTHER = "The record was successfully added"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**63), 2**63 - 1

_JSON_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _parse_id(text):
    """Decimal integer of a path segment; raise ValueError when it is not one."""
    quoted = json.dumps(text, ensure_ascii=False)
    if _INTEGER.fullmatch(text) is None:
        raise ValueError(f"parsing {quoted}: invalid syntax")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"parsing {quoted}: value out of range")
    return value


def _json_text(payload):
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    for char, escape in _JSON_ESCAPES:
        text = text.replace(char, escape)
    return text


def _text_error(message, status):
    return Response(
        f"{message}\n",
        status=status,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _json_response(payload):
    return Response(
        _json_text(payload), status=HTTPStatus.OK, content_type="application/json"
    )


def _text_response(message):
    return Response(message, status=HTTPStatus.OK, content_type="text/plain")


def _register(app, conn, name, key, parse, get_one, list_all, add, added_message):
    """Add the GET-one, GET-all and POST routes of one resource."""
    path = f"/{name}"

    def get_record(**values):
        try:
            ident = parse(values[key])
        except ValueError as exc:
            return _text_error(str(exc), HTTPStatus.NOT_FOUND)
        try:
            record = get_one(conn, ident)
        except Exception as exc:
            return _text_error(str(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
        return _json_response(record.to_dict())

    def list_records():
        try:
            records = list_all(conn)
        except Exception as exc:
            return _text_error(str(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
        # An empty collection is written as null.
        return _json_response([record.to_dict() for record in records] or None)

    def add_record():
        try:
            add(conn, request.get_data())
        except Exception as exc:
            return _text_error(str(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
        return _text_response(added_message)

    app.add_url_rule(
        f"{path}/<{key}>", f"get_{name}", get_record, methods=["GET"]
    )
    app.add_url_rule(path, f"list_{name}", list_records, methods=["GET"])
    app.add_url_rule(path, f"add_{name}", add_record, methods=["POST"])


def create_app(conn):
    """Flask application serving the API over an open database connection."""
    app = Flask(__name__)
    _register(
        app, conn, "test", "name", str,
        services.get_table_test, services.list_table_tests,
        services.add_table_test, _ADDED_OTHER,
    )
    _register(
        app, conn, "person", "id", _parse_id,
        services.get_person_by_id, services.list_persons,
        services.add_person, _ADDED,
    )
    _register(
        app, conn, "typeUniversity", "id", _parse_id,
        services.get_type_university_by_id, services.list_type_universities,
        services.add_type_university, _ADDED_OTHER,
    )
    _register(
        app, conn, "interest", "id", _parse_id,
        services.get_interest_by_id, services.list_interests,
        services.add_interest, _ADDED,
    )
    return app