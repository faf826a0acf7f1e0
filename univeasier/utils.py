"""Small helpers shared across the package: messages and RFC 3339 times."""

import json
import re
from datetime import datetime, timedelta, timezone

TRUE_TEXT = "true"
FALSE_TEXT = "false"

EMPTY = ""
QUOTE = "'"
SPACE = " "
DOT = "."
COMMA = ","
SEMICOLON = ";"
OPEN_BRACKET = "("
CLOSE_BRACKET = ")"
OPEN_SQUARE_BRACE = "["
CLOSE_SQUARE_BRACE = "]"
ASTERISK = "*"

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})\Z"
)


def failed_test(number):
    """Message used when a numbered test case fails."""
    return f"Test #{number} failed!"


def failed_sql_query(procedure_name):
    """Message logged when a stored procedure call fails."""
    quoted = json.dumps(str(procedure_name), ensure_ascii=False)
    return f"The procedure {quoted} was not completed successfully"


def format_time(value):
    """Format a datetime as RFC 3339 with second precision.

    A naive datetime is taken to be in UTC; a zero offset is written as "Z".
    """
    offset = value.utcoffset() if value.tzinfo is not None else None
    if offset is None:
        offset = timedelta(0)
    stamp = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    minutes = int(offset.total_seconds()) // 60 if offset >= timedelta(0) else -(
        int(-offset.total_seconds()) // 60
    )
    if minutes == 0:
        return stamp + "Z"
    sign = "+" if minutes > 0 else "-"
    minutes = abs(minutes)
    return f"{stamp}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def parse_time(text):
    """Parse an RFC 3339 timestamp into an aware datetime.

    Raises ValueError when the text is not a valid timestamp.
    """
    match = _RFC3339.match(text) if isinstance(text, str) else None
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()

    if zone == "Z":
        tz = timezone.utc
    else:
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f"invalid time zone offset in {text!r}")
        offset = timedelta(hours=hours, minutes=minutes)
        if zone[0] == "-":
            offset = -offset
        tz = timezone(offset) if offset else timezone.utc

    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            microsecond, tzinfo=tz,
        )
    except ValueError as exc:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}") from exc