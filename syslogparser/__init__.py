"""Parser for RFC 5424 syslog messages."""

from syslogparser.errors import FailureCause, ParseError
from syslogparser.models import Message, StructuredDataElement
from syslogparser.parser import Parser, ParserConfig, parse

__all__ = [
    "FailureCause",
    "Message",
    "ParseError",
    "Parser",
    "ParserConfig",
    "StructuredDataElement",
    "parse",
]
