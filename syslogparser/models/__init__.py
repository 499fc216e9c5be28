"""Data models for parsed syslog messages."""

from syslogparser.models.message import (
    FACILITY_NAMES,
    SEVERITY_NAMES,
    Message,
    StructuredDataElement,
)

__all__ = [
    "FACILITY_NAMES",
    "SEVERITY_NAMES",
    "Message",
    "StructuredDataElement",
]
