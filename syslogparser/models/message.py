"""Parsed syslog message records."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Optional

BOM = "\ufeff"

FACILITY_NAMES = [
    "kern", "user", "mail", "daemon", "auth", "syslog",
    "lpr", "news", "uucp", "cron", "authpriv", "ftp",
    "ntp", "audit", "alert", "clock",
    "local0", "local1", "local2", "local3",
    "local4", "local5", "local6", "local7",
]

SEVERITY_NAMES = ["emerg", "alert", "crit", "err", "warning", "notice", "info", "debug"]


@dataclass(frozen=True)
class StructuredDataElement:
    """One SD-ELEMENT, e.g. ``[exampleSDID@32473 iut="3"]``.

    Attributes:
        id: SD-ID, either "name" or "name@enterprise-number"
        params: PARAM-NAME -> decoded PARAM-VALUE, in the order they appeared
    """

    id: str
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy into a read-only view so the record can't be changed later
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((self.id, tuple(self.params.items())))

    @property
    def name(self) -> str:
        """SD-ID without the enterprise number."""
        return self.id.partition("@")[0]

    @property
    def enterprise_number(self) -> Optional[str]:
        """Private enterprise number, None for IANA-registered ids."""
        _, at, number = self.id.partition("@")
        return number if at else None


@dataclass(frozen=True)
class Message:
    """A single parsed RFC 5424 syslog line.

    Absent (NILVALUE) fields are None, never "-".
    """

    prival: int
    version: int
    timestamp: datetime  # Aware, keeps the offset it was written with
    hostname: Optional[str]
    app_name: Optional[str]
    procid: Optional[str]
    msgid: Optional[str]
    structured_data: Optional[tuple[StructuredDataElement, ...]] = None
    msg: Optional[str] = None

    @property
    def facility(self) -> int:
        return self.prival >> 3

    @property
    def severity(self) -> int:
        return self.prival & 0x07

    @property
    def facility_name(self) -> str:
        """Human-readable facility name."""
        if self.facility < len(FACILITY_NAMES):
            return FACILITY_NAMES[self.facility]
        return f"facility{self.facility}"

    @property
    def severity_name(self) -> str:
        """Human-readable severity name."""
        return SEVERITY_NAMES[self.severity]

    @property
    def has_bom(self) -> bool:
        """True if MSG is flagged as UTF-8 by a leading byte order mark."""
        return self.msg is not None and self.msg.startswith(BOM)

    def element(self, sd_id: str) -> Optional[StructuredDataElement]:
        """Return the first structured-data element with the given SD-ID."""
        for element in self.structured_data or ():
            if element.id == sd_id:
                return element
        return None
