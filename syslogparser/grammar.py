"""Grammar for RFC 5424 syslog lines.

```
SYSLOG-MSG      ::= HEADER SP STRUCTURED-DATA (SP MSG)?
HEADER          ::= "<" PRIVAL ">" VERSION SP TIMESTAMP SP HOSTNAME
                    SP APP-NAME SP PROCID SP MSGID
STRUCTURED-DATA ::= "-" | SD-ELEMENT+
SD-ELEMENT      ::= "[" SD-ID (SP SD-PARAM)* "]"
SD-PARAM        ::= PARAM-NAME "=" '"' PARAM-VALUE '"'
```

With ``allow_missing_structured_data`` the line may also be
``HEADER SP MSG``, which is what Heroku log drains and some other senders
emit. That form is only tried after the full form fails.

Each production is a method reading from a ``_Scanner``. A mismatch is
raised as ``_Mismatch`` carrying the production and offset, and becomes a
single ``ParseError`` at the top.
"""

import re
from datetime import datetime
from typing import Optional

from syslogparser.decoders.escape import unescape_param_value
from syslogparser.decoders.timestamp import TIMESTAMP_PATTERN, decode_timestamp_match
from syslogparser.errors import FailureCause, ParseError, line_column
from syslogparser.models import Message, StructuredDataElement

SYSLOG_MSG = "HEADER SP STRUCTURED_DATA (SP MSG)?"

SP = " "
NILVALUE = "-"
MAX_PRIVAL = 191

PRIVAL_PATTERN = re.compile(r"[0-9]{1,3}")
VERSION_PATTERN = re.compile(r"[1-9][0-9]{0,2}")

# PRINTUSASCII, %d33-126
TOKEN_PATTERN = re.compile(r"[!-~]+")

# SD-NAME: PRINTUSASCII except '"' (34), '=' (61) and ']' (93)
SD_NAME_PATTERN = re.compile(r"[!#-<>-\\^-~]+")

# '"', '\' and ']' only appear escaped
PARAM_VALUE_PATTERN = re.compile(r'(?:\\.|[^"\\\]])*', re.DOTALL)


class _Mismatch(Exception):
    def __init__(self, production: str, offset: int) -> None:
        super().__init__(production, offset)
        self.production = production
        self.offset = offset


class _Scanner:
    """Cursor over one line of input."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def literal(self, literal: str, production: str) -> None:
        if not self.peek(literal):
            raise _Mismatch(production, self.pos)
        self.pos += len(literal)

    def match(self, pattern: re.Pattern, production: str) -> re.Match:
        match = pattern.match(self.text, self.pos)
        if match is None:
            raise _Mismatch(production, self.pos)
        self.pos = match.end()
        return match

    def rest(self) -> str:
        rest = self.text[self.pos:]
        self.pos = len(self.text)
        return rest


class Grammar:
    """Recognizes one syslog line and builds a Message from it.

    Holds no per-call state, so one instance can be shared between threads.
    """

    def __init__(self, allow_missing_structured_data: bool = False) -> None:
        self.allow_missing_structured_data = allow_missing_structured_data

    def parse(self, text: str) -> Message:
        """Parse a line (without its trailing newline).

        Raises:
            ParseError: If the whole line does not match
        """
        try:
            return self._syslog_msg(_Scanner(text))
        except _Mismatch as e:
            failure = e

        if self.allow_missing_structured_data:
            try:
                return self._syslog_msg_relaxed(_Scanner(text))
            except _Mismatch as e:
                if e.offset > failure.offset:
                    failure = e

        cause = FailureCause(failure.production, *line_column(text, failure.offset))
        raise ParseError(SYSLOG_MSG, *line_column(text, 0), cause=cause)

    def _syslog_msg(self, s: _Scanner) -> Message:
        header = self._header(s)
        s.literal(SP, "SP")
        structured_data = self._structured_data(s)

        msg = None
        if not s.at_end():
            s.literal(SP, "SP")
            msg = s.rest() or None

        return Message(**header, structured_data=structured_data, msg=msg)

    def _syslog_msg_relaxed(self, s: _Scanner) -> Message:
        header = self._header(s)
        s.literal(SP, "SP")
        return Message(**header, structured_data=None, msg=s.rest() or None)

    def _header(self, s: _Scanner) -> dict:
        s.literal("<", "PRI")
        start = s.pos
        prival = int(s.match(PRIVAL_PATTERN, "PRIVAL").group())
        if prival > MAX_PRIVAL:
            raise _Mismatch("PRIVAL", start)
        s.literal(">", "PRI")

        version = int(s.match(VERSION_PATTERN, "VERSION").group())
        s.literal(SP, "SP")
        timestamp = self._timestamp(s)
        s.literal(SP, "SP")
        hostname = self._nil_or_token(s, "HOSTNAME")
        s.literal(SP, "SP")
        app_name = self._nil_or_token(s, "APP_NAME")
        s.literal(SP, "SP")
        procid = self._nil_or_token(s, "PROCID")
        s.literal(SP, "SP")
        msgid = self._nil_or_token(s, "MSGID")

        return {
            "prival": prival,
            "version": version,
            "timestamp": timestamp,
            "hostname": hostname,
            "app_name": app_name,
            "procid": procid,
            "msgid": msgid,
        }

    def _timestamp(self, s: _Scanner) -> datetime:
        start = s.pos
        match = s.match(TIMESTAMP_PATTERN, "TIMESTAMP")
        try:
            return decode_timestamp_match(match)
        except ValueError:
            # Impossible dates are grammar failures like any other
            raise _Mismatch("TIMESTAMP", start) from None

    def _nil_or_token(self, s: _Scanner, production: str) -> Optional[str]:
        value = s.match(TOKEN_PATTERN, production).group()
        return None if value == NILVALUE else value

    def _structured_data(self, s: _Scanner) -> Optional[tuple[StructuredDataElement, ...]]:
        if s.peek(NILVALUE):
            s.literal(NILVALUE, "STRUCTURED_DATA")
            return None

        elements = [self._sd_element(s)]
        while s.peek("["):
            elements.append(self._sd_element(s))
        return tuple(elements)

    def _sd_element(self, s: _Scanner) -> StructuredDataElement:
        s.literal("[", "SD_ELEMENT")
        sd_id = s.match(SD_NAME_PATTERN, "SD_ID").group()

        params = {}
        while s.peek(SP):
            s.literal(SP, "SP")
            name, value = self._sd_param(s)
            # Repeated names within one element: last one wins
            params[name] = value

        s.literal("]", "SD_ELEMENT")
        return StructuredDataElement(sd_id, params)

    def _sd_param(self, s: _Scanner) -> tuple[str, str]:
        name = s.match(SD_NAME_PATTERN, "PARAM_NAME").group()
        s.literal("=", "SD_PARAM")
        s.literal('"', "SD_PARAM")
        raw = s.match(PARAM_VALUE_PATTERN, "PARAM_VALUE").group()
        s.literal('"', "SD_PARAM")
        return name, unescape_param_value(raw)
