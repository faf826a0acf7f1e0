"""Builder for simple SELECT, UPDATE and DELETE statements over one table."""

import logging
from collections.abc import Mapping
from contextlib import closing
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from .errors import (
    EmptyHeaderExpressionError,
    InvalidFilterError,
    InvalidFirstFilterError,
    InvalidHeaderExpressionError,
    InvalidTypeIndexError,
    NotEqualsSizeError,
    OperationNotSupportedError,
    TableNotExistError,
    ValueNotExistError,
)
from .sqltypes import (
    Comparator,
    Logical,
    Operator,
    comparator_to_string,
    logical_to_string,
    operator_to_string,
    to_operator,
    validate_comparator,
    validate_logical,
    validate_operator,
)
from .utils import failed_sql_query, format_time

logger = logging.getLogger(__name__)

_COLUMNS_SQL = (
    "select column_name from information_schema.columns where table_name = %s"
)
_COLLECTION = "ColumnNames"

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(text):
    """Double-quoted text with escapes for quotes, backslashes and control characters."""
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) < 0x10000:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    return '"' + "".join(parts) + '"'


def _format_float(number):
    """Shortest text of a float, switching to exponent form for large or tiny values."""
    if number != number:
        return "NaN"
    if number in (float("inf"), float("-inf")):
        return "+Inf" if number > 0 else "-Inf"
    sign, digits, exponent = Decimal(repr(number)).as_tuple()
    prefix = "-" if sign else ""
    digits = "".join(map(str, digits)).rstrip("0")
    if not digits:
        return prefix + "0"
    exponent += len("".join(map(str, Decimal(repr(number)).as_tuple().digits))) - len(digits)
    count = len(digits)
    point = count + exponent
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
        exp_sign = "+" if exp >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= count:
        return prefix + digits + "0" * (point - count)
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _format_plain(value):
    """Default text of a value, without quoting."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_plain(item) for item in value) + "]"
    return str(value)


@dataclass
class SQLColumn:
    """A table column, with the value it is compared with or set to."""

    name: str = ""
    value: Any = None
    enable: bool = False

    def sql_value(self):
        """SQL literal of the column value."""
        value = self.value
        if isinstance(value, str):
            return _quote(value)
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, datetime):
            return _quote(format_time(value))
        return _format_plain(value)


@dataclass
class SQLFilter:
    """One condition of a WHERE clause, optionally joined by AND or OR."""

    logical: int = Logical.UNKNOWN
    comparator: int = Comparator.UNKNOWN
    column: SQLColumn = field(default_factory=SQLColumn)

    def validate(self):
        """Raise InvalidTypeIndexError when an operator is out of range.

        The unknown logical connective and the unknown comparator are allowed.
        """
        try:
            validate_logical(self.logical)
        except InvalidTypeIndexError:
            if int(self.logical) != Logical.UNKNOWN:
                raise
        try:
            validate_comparator(self.comparator)
        except InvalidTypeIndexError:
            if int(self.comparator) != Comparator.UNKNOWN:
                raise

    def to_sql(self):
        """SQL text of the condition, prefixed by its connective when it has one."""
        self.validate()
        try:
            connective = logical_to_string(self.logical)
        except InvalidTypeIndexError:
            connective = None
        comparator = comparator_to_string(self.comparator)
        text = f"{self.column.name} {comparator} {self.column.sql_value()}"
        return f"{connective} {text}" if connective else text


def new_filter(logical, column_name, comparator, value):
    """Build and validate a filter on a column."""
    sql_filter = SQLFilter(
        logical=logical,
        comparator=comparator,
        column=SQLColumn(name=column_name, value=value),
    )
    sql_filter.validate()
    return sql_filter


@dataclass
class SQLQuery:
    """A statement over one table whose known columns are held in table order."""

    table_name: str
    query_type: int
    columns: Any = field(default_factory=dict)
    filters: list = field(default_factory=list)

    def __post_init__(self):
        self.query_type = validate_operator(self.query_type)
        if isinstance(self.columns, Mapping):
            self.columns = dict(self.columns)
        else:
            self.columns = {name: SQLColumn(name=name) for name in self.columns}

    def _require(self, operator, method_name):
        if self.query_type != operator:
            raise OperationNotSupportedError(
                method_name, operator_to_string(self.query_type)
            )

    def _column(self, name):
        try:
            return self.columns[name]
        except KeyError:
            raise ValueNotExistError(name, _COLLECTION) from None

    def add_column_headers(self, *column_names):
        """Select the given columns; only for SELECT statements."""
        self._require(Operator.SELECT, "add_column_headers")
        for name in column_names:
            self._column(name).enable = True

    def set_column_values(self, column_names, values):
        """Set the given columns to values; only for UPDATE statements."""
        self._require(Operator.UPDATE, "set_column_values")
        column_names = list(column_names)
        values = list(values)
        if len(column_names) != len(values):
            raise NotEqualsSizeError("column names", "values")
        for name, value in zip(column_names, values):
            column = self._column(name)
            column.value = value
            column.enable = True

    def _add_filter(self, logical, column_name, comparator, value):
        self._column(column_name)
        self.filters.append(new_filter(logical, column_name, comparator, value))

    def add_filter(self, column_name, comparator, value):
        """Add the first condition of the WHERE clause."""
        if self.filters:
            raise InvalidFirstFilterError()
        self._add_filter(Logical.UNKNOWN, column_name, comparator, value)

    def add_and_filter(self, column_name, comparator, value):
        """Add a condition joined to the previous ones by AND."""
        if not self.filters:
            raise InvalidFilterError()
        self._add_filter(Logical.AND, column_name, comparator, value)

    def add_or_filter(self, column_name, comparator, value):
        """Add a condition joined to the previous ones by OR."""
        if not self.filters:
            raise InvalidFilterError()
        self._add_filter(Logical.OR, column_name, comparator, value)

    def _used_columns(self):
        return [column for column in self.columns.values() if column.enable]

    def _headers(self):
        used = self._used_columns()
        if self.query_type == Operator.SELECT:
            return ", ".join(column.name for column in used) or "*"
        if self.query_type == Operator.UPDATE:
            if not used:
                raise EmptyHeaderExpressionError()
            return ", ".join(f"{column.name} = {column.sql_value()}" for column in used)
        if used:
            raise InvalidHeaderExpressionError()
        return ""

    def _where(self):
        conditions = " ".join(sql_filter.to_sql() for sql_filter in self.filters)
        return f"WHERE {conditions}" if conditions else ""

    def to_sql(self):
        """SQL text of the whole statement."""
        keyword = operator_to_string(self.query_type)
        if self.query_type == Operator.SELECT:
            text = f"{keyword} {self._headers()} FROM {self.table_name} {self._where()}"
        elif self.query_type == Operator.UPDATE:
            text = f"{keyword} {self.table_name} SET {self._headers()} {self._where()}"
        else:
            self._headers()
            text = f"{keyword} FROM {self.table_name} {self._where()}"
        return text.rstrip(" ")


def _fetch_columns(conn, table_name):
    try:
        with closing(conn.cursor()) as cursor:
            cursor.execute(_COLUMNS_SQL, (table_name,))
            rows = cursor.fetchall()
    except Exception as exc:
        logger.error("%s info=%s", failed_sql_query("GetColumnByTableName"), exc)
        raise
    return [row[0] for row in rows]


def new_query(conn, table_name, query_type):
    """Start a statement of the named kind over a table, reading its columns."""
    operator = to_operator(query_type)
    names = _fetch_columns(conn, table_name)
    if not names:
        raise TableNotExistError(table_name)
    return SQLQuery(table_name=table_name, query_type=operator, columns=names)