"""Parse errors."""

from dataclasses import dataclass
from typing import Optional


def line_column(text: str, offset: int) -> tuple[int, int]:
    """Convert a 0-based offset into a 1-based (line, column) pair."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


@dataclass(frozen=True)
class FailureCause:
    """The innermost production that stopped the match, for diagnostics."""

    production: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"Failed to match {self.production} at line {self.line} char {self.column}."


class ParseError(ValueError):
    """A line does not conform to the syslog grammar.

    The message names the top-level production and where its match began.
    ``cause`` points at the furthest position the match got to.
    """

    def __init__(
        self,
        production: str,
        line: int,
        column: int,
        cause: Optional[FailureCause] = None,
    ) -> None:
        super().__init__(
            f"Failed to match sequence ({production}) at line {line} char {column}."
        )
        self.production = production
        self.line = line
        self.column = column
        self.cause = cause
