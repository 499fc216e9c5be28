"""Decoders for the TIMESTAMP and PARAM-VALUE productions."""

from syslogparser.decoders.escape import escape_param_value, unescape_param_value
from syslogparser.decoders.timestamp import (
    TIMESTAMP_PATTERN,
    decode_timestamp,
    format_timestamp,
)

__all__ = [
    "TIMESTAMP_PATTERN",
    "decode_timestamp",
    "format_timestamp",
    "escape_param_value",
    "unescape_param_value",
]
