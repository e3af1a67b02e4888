"""Core value types: source locations, parse errors and page metadata."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = [
    "ErrorSeverity",
    "SourcePosition",
    "SourceRange",
    "ParseError",
    "Namespace",
    "PageInfo",
    "LocatedString",
]


class ErrorSeverity(enum.Enum):
    """How serious a parse problem is."""

    WARNING = "warning"  # parsing continues
    ERROR = "error"  # recoverable
    FATAL = "fatal"  # parsing stops


_SEVERITY_PREFIX = {
    ErrorSeverity.WARNING: "Warning: ",
    ErrorSeverity.ERROR: "Error: ",
    ErrorSeverity.FATAL: "Fatal: ",
}


@dataclass(frozen=True, order=True)
class SourcePosition:
    """A position in source text; line and column are 1-based."""

    line: int = 1
    column: int = 1
    offset: int = 0


@dataclass(frozen=True)
class SourceRange:
    """A half-open range ``[begin, end)`` in source text."""

    begin: SourcePosition = field(default_factory=SourcePosition)
    end: SourcePosition = field(default_factory=SourcePosition)

    def length(self) -> int:
        """Number of characters covered by the range."""
        return self.end.offset - self.begin.offset

    def is_empty(self) -> bool:
        """True if the range covers nothing."""
        return self.begin.offset == self.end.offset

    def contains(self, pos: SourcePosition) -> bool:
        """True if ``pos`` lies within the range (end excluded)."""
        return self.begin.offset <= pos.offset < self.end.offset


@dataclass
class ParseError:
    """Description of a problem found while parsing."""

    message: str
    location: SourceRange = field(default_factory=SourceRange)
    severity: ErrorSeverity = ErrorSeverity.ERROR
    context: str = ""

    def format(self) -> str:
        """Render a human-readable message with location and context."""
        parts = [_SEVERITY_PREFIX[self.severity], self.message]
        begin = self.location.begin
        if begin.line > 0:
            parts.append(f" at line {begin.line}, column {begin.column}")
        if self.context:
            parts.append(f"\n  Context: {self.context}")
        return "".join(parts)


@dataclass
class Namespace:
    """A wiki namespace definition."""

    id: int
    name: str
    canonical_name: str
    is_content: bool = False
    is_talk: bool = False
    allow_subpages: bool = False


@dataclass
class PageInfo:
    """Metadata describing a single page revision."""

    id: int = 0
    title: str = ""
    namespace_id: int = 0
    revision_id: int = 0
    timestamp: str = ""
    redirect_target: str | None = None

    def is_redirect(self) -> bool:
        """True if the page redirects to another page."""
        return self.redirect_target is not None


@dataclass(frozen=True)
class LocatedString:
    """A piece of text together with where it came from."""

    text: str
    location: SourceRange = field(default_factory=SourceRange)

    def is_empty(self) -> bool:
        """True if the text is empty."""
        return not self.text

    def __len__(self) -> int:
        return len(self.text)