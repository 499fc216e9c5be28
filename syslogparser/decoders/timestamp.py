"""TIMESTAMP decoding.

RFC 5424 restricts RFC 3339 timestamps to:

  full-date "T" full-time
  2003-10-11T22:14:15.003Z
  2003-08-24T05:14:15.000003-07:00

The "T" and "Z" must be upper case, leap seconds are not allowed and the
fraction carries at most six digits, which fits a datetime's microseconds
without rounding.
"""

import re
from datetime import datetime, timedelta, timezone

TIMESTAMP_PATTERN = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})"   # full-date: "2003-10-11"
    r"T([0-9]{2}):([0-9]{2}):([0-9]{2})"  # partial-time: "22:14:15"
    r"(?:\.([0-9]{1,6}))?"                # Optional fraction: ".003"
    r"(Z|[+-][0-9]{2}:[0-9]{2})"          # time-offset: "Z" or "-07:00"
)

MAX_FRACTION_DIGITS = 6


def _decode_offset(offset: str) -> timezone:
    if offset == "Z":
        return timezone.utc

    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError(f"time offset out of range: {offset}")

    delta = timedelta(hours=hours, minutes=minutes)
    if offset[0] == "-":
        delta = -delta
    return timezone(delta)


def decode_timestamp(text: str) -> datetime:
    """Decode a TIMESTAMP token into an offset-aware datetime.

    The original offset is kept as the tzinfo, so the wall-clock value
    can be reconstructed. Comparisons between results still compare
    instants, e.g. 05:14:15-07:00 equals 12:14:15Z.

    Args:
        text: The complete TIMESTAMP token

    Returns:
        Aware datetime with exact microseconds

    Raises:
        ValueError: If the token is malformed or names an impossible
            date or time
    """
    match = TIMESTAMP_PATTERN.fullmatch(text)
    if not match:
        raise ValueError(f"malformed timestamp: {text!r}")

    return decode_timestamp_match(match)


def decode_timestamp_match(match: re.Match) -> datetime:
    """Decode an already matched TIMESTAMP_PATTERN."""
    year, month, day, hour, minute, second, fraction, offset = match.groups()

    # "15.003" is 3000 microseconds, "15.000003" is 3
    microsecond = int(fraction.ljust(MAX_FRACTION_DIGITS, "0")) if fraction else 0

    if int(second) > 59:
        raise ValueError(f"second out of range: {second}")

    # datetime() does the calendar check (month 13, Feb 30, ...)
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        microsecond,
        tzinfo=_decode_offset(offset),
    )


def format_timestamp(value: datetime) -> str:
    """Render a datetime back in TIMESTAMP form, keeping its own offset."""
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")

    offset = value.utcoffset()
    if offset is None:
        raise ValueError("timestamp must be offset-aware")
    if offset == timedelta(0):
        return text + "Z"

    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"
