"""Entry point for parsing syslog lines."""

from dataclasses import dataclass
from typing import Optional

from syslogparser.grammar import Grammar
from syslogparser.models import Message


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the syslog parser."""

    # Accept "HEADER SP MSG" lines that leave out STRUCTURED-DATA entirely
    allow_missing_structured_data: bool = False


class Parser:
    """RFC 5424 syslog line parser."""

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        """Initialize the parser.

        Args:
            config: Parser configuration, defaults to the strict grammar
        """
        self.config = config or ParserConfig()
        self._grammar = Grammar(
            allow_missing_structured_data=self.config.allow_missing_structured_data,
        )

    def parse(self, line: str) -> Message:
        """Parse one syslog line.

        Args:
            line: The line, with any trailing newline already removed

        Returns:
            The parsed Message

        Raises:
            ParseError: If the line is not a valid syslog message
        """
        return self._grammar.parse(line)


def parse(line: str, config: Optional[ParserConfig] = None) -> Message:
    """Parse one syslog line with a throwaway Parser."""
    return Parser(config).parse(line)
