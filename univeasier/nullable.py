"""Nullable scalar values that encode to and decode from JSON text."""

import json
import math
from dataclasses import dataclass
from datetime import datetime

from .errors import OverflowError_, TypeConversionError
from .utils import format_time, parse_time

_INT32_RANGE = (-(2**31), 2**31 - 1)
_INT64_RANGE = (-(2**63), 2**63 - 1)


def _reject_constant(name):
    raise ValueError(f"invalid JSON value: {name}")


def _load(data):
    """Decode JSON text given as str or bytes."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    return json.loads(data, parse_constant=_reject_constant)


def _json_type_name(value):
    """Name of the kind of JSON value a decoded object came from."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "float64"
    return ""


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_integer(value, type_name, bounds):
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeConversionError(type_name, type(value).__name__)
    low, high = bounds
    if not low <= value <= high:
        raise OverflowError_(type_name)


def _decode_integer(decoded, type_name, bounds):
    if not _is_number(decoded):
        raise TypeConversionError(type_name, _json_type_name(decoded))
    if not isinstance(decoded, int):
        raise OverflowError_(type_name)
    low, high = bounds
    if not low <= decoded <= high:
        raise OverflowError_(type_name)
    return decoded


@dataclass(frozen=True)
class NullInt32:
    """A 32-bit signed integer that may be null."""

    value: int | None = None

    def __post_init__(self):
        _check_integer(self.value, "Int32", _INT32_RANGE)

    def is_null(self):
        """True when the value is null."""
        return self.value is None

    def to_json(self):
        """JSON text of the value; "null" when it is null."""
        return "null" if self.value is None else str(self.value)

    @classmethod
    def from_json(cls, data):
        """Decode JSON text (str or bytes) into a value of this type."""
        decoded = _load(data)
        if decoded is None:
            return cls()
        return cls(_decode_integer(decoded, "Int32", _INT32_RANGE))


@dataclass(frozen=True)
class NullInt64:
    """A 64-bit signed integer that may be null."""

    value: int | None = None

    def __post_init__(self):
        _check_integer(self.value, "Int64", _INT64_RANGE)

    def is_null(self):
        """True when the value is null."""
        return self.value is None

    def to_json(self):
        """JSON text of the value; "null" when it is null."""
        return "null" if self.value is None else str(self.value)

    @classmethod
    def from_json(cls, data):
        """Decode JSON text (str or bytes) into a value of this type."""
        decoded = _load(data)
        if decoded is None:
            return cls()
        return cls(_decode_integer(decoded, "Int64", _INT64_RANGE))


@dataclass(frozen=True)
class NullFloat64:
    """A double-precision float that may be null."""

    value: float | None = None

    def __post_init__(self):
        if self.value is not None:
            object.__setattr__(self, "value", float(self.value))

    def is_null(self):
        """True when the value is null."""
        return self.value is None

    def to_json(self):
        """JSON text of the value; "null" when it is null."""
        if self.value is None:
            return "null"
        value = self.value
        if not math.isfinite(value):
            raise ValueError(f"unsupported value: {value!r}")
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)

    @classmethod
    def from_json(cls, data):
        """Decode JSON text (str or bytes) into a value of this type."""
        decoded = _load(data)
        if decoded is None:
            return cls()
        if not _is_number(decoded):
            raise TypeConversionError("Float64", _json_type_name(decoded))
        try:
            number = float(decoded)
        except OverflowError:
            raise OverflowError_("Float64") from None
        if math.isinf(number):
            raise OverflowError_("Float64")
        return cls(number)


@dataclass(frozen=True)
class NullString:
    """A text that may be null."""

    value: str | None = None

    def is_null(self):
        """True when the value is null."""
        return self.value is None

    def to_json(self):
        """JSON text of the value; "null" when it is null."""
        if self.value is None:
            return "null"
        return json.dumps(self.value, ensure_ascii=False)

    @classmethod
    def from_json(cls, data):
        """Decode JSON text (str or bytes) into a value of this type."""
        decoded = _load(data)
        if decoded is None:
            return cls()
        if not isinstance(decoded, str):
            raise TypeConversionError("String", _json_type_name(decoded))
        return cls(decoded)


@dataclass(frozen=True)
class NullTime:
    """A timestamp, written as RFC 3339 text, that may be null."""

    value: datetime | None = None

    def is_null(self):
        """True when the value is null."""
        return self.value is None

    def to_json(self):
        """JSON text of the value; "null" when it is null."""
        if self.value is None:
            return "null"
        return json.dumps(format_time(self.value))

    @classmethod
    def from_json(cls, data):
        """Decode JSON text (str or bytes) into a value of this type."""
        decoded = _load(data)
        if decoded is None:
            return cls()
        if not isinstance(decoded, str):
            raise TypeConversionError("Time", _json_type_name(decoded))
        try:
            return cls(parse_time(decoded))
        except ValueError:
            raise OverflowError_("Time") from None