"""Text manipulation helpers used throughout wiki markup processing."""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = [
    "trim_left",
    "trim_right",
    "trim",
    "collapse_whitespace",
    "to_lower_ascii",
    "to_upper_ascii",
    "equals_ignore_case_ascii",
    "starts_with",
    "ends_with",
    "starts_with_ignore_case_ascii",
    "split",
    "split_n",
    "split_any",
    "join",
    "replace_all",
    "replace_first",
    "count_occurrences",
    "find_all",
    "parse_int",
    "decode_html_entities",
    "encode_html_entities",
    "strip_tags",
    "split_lines",
    "count_lines",
    "get_line",
]

# ASCII whitespace as understood by the C locale.
_WHITESPACE = " \t\n\v\f\r"
_WHITESPACE_RUN = re.compile(r"[ \t\n\v\f\r]+")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_TAG = re.compile(r"<[^>]*>?|>")
_INTEGER = re.compile(r"-?[0-9]+")

_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_TO_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

_NAMED_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
    "nbsp": " ",
}

_ENCODE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

_MAX_ENTITY_SPAN = 12


# ---------------------------------------------------------------------------
# Trimming
# ---------------------------------------------------------------------------


def trim_left(s: str) -> str:
    """Remove leading ASCII whitespace."""
    return s.lstrip(_WHITESPACE)


def trim_right(s: str) -> str:
    """Remove trailing ASCII whitespace."""
    return s.rstrip(_WHITESPACE)


def trim(s: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return s.strip(_WHITESPACE)


def collapse_whitespace(s: str) -> str:
    """Replace every run of whitespace with a single space."""
    return _WHITESPACE_RUN.sub(" ", s)


# ---------------------------------------------------------------------------
# Case conversion (ASCII only)
# ---------------------------------------------------------------------------


def to_lower_ascii(s: str) -> str:
    """Lowercase ASCII letters only; other characters are left alone."""
    return s.translate(_TO_LOWER)


def to_upper_ascii(s: str) -> str:
    """Uppercase ASCII letters only; other characters are left alone."""
    return s.translate(_TO_UPPER)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def equals_ignore_case_ascii(a: str, b: str) -> bool:
    """Compare two strings ignoring ASCII letter case."""
    return len(a) == len(b) and to_lower_ascii(a) == to_lower_ascii(b)


def starts_with(s: str, prefix: str) -> bool:
    """Return True if ``s`` begins with ``prefix``."""
    return s.startswith(prefix)


def ends_with(s: str, suffix: str) -> bool:
    """Return True if ``s`` ends with ``suffix``."""
    return s.endswith(suffix)


def starts_with_ignore_case_ascii(s: str, prefix: str) -> bool:
    """Return True if ``s`` begins with ``prefix``, ignoring ASCII case."""
    if len(s) < len(prefix):
        return False
    return equals_ignore_case_ascii(s[: len(prefix)], prefix)


# ---------------------------------------------------------------------------
# Splitting and joining
# ---------------------------------------------------------------------------


def split(s: str, delimiter: str) -> list[str]:
    """Split on every occurrence of ``delimiter``; empty parts are kept."""
    if not delimiter:
        return [s]
    return s.split(delimiter)


def split_n(s: str, delimiter: str, max_parts: int) -> list[str]:
    """Split into at most ``max_parts`` parts; the last part holds the rest."""
    if max_parts < 0:
        raise ValueError("max_parts must not be negative")
    if max_parts == 0:
        return []
    if not delimiter:
        return [s]
    return s.split(delimiter, max_parts - 1)


def split_any(s: str, delimiters: str) -> list[str]:
    """Split on any character of ``delimiters``, dropping empty parts."""
    if not delimiters:
        return [s] if s else []
    pattern = "[" + re.escape(delimiters) + "]"
    return [part for part in re.split(pattern, s) if part]


def join(parts: Iterable[str], separator: str) -> str:
    """Join ``parts`` with ``separator``."""
    return separator.join(parts)


# ---------------------------------------------------------------------------
# Search and replace
# ---------------------------------------------------------------------------


def replace_all(s: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old``; an empty ``old`` changes nothing."""
    if not old:
        return s
    return s.replace(old, new)


def replace_first(s: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old``."""
    return s.replace(old, new, 1)


def count_occurrences(s: str, sub: str) -> int:
    """Count non-overlapping occurrences of ``sub``; zero for an empty ``sub``."""
    if not sub:
        return 0
    return s.count(sub)


def find_all(s: str, sub: str) -> list[int]:
    """Return the start positions of non-overlapping occurrences of ``sub``."""
    if not sub:
        return []
    positions = []
    pos = s.find(sub)
    while pos != -1:
        positions.append(pos)
        pos = s.find(sub, pos + len(sub))
    return positions


# ---------------------------------------------------------------------------
# Number parsing
# ---------------------------------------------------------------------------


def parse_int(s: str) -> int | None:
    """Parse a decimal integer surrounded by optional whitespace, or return None."""
    s = trim(s)
    if not _INTEGER.fullmatch(s):
        return None
    return int(s)


# ---------------------------------------------------------------------------
# HTML entities and tags
# ---------------------------------------------------------------------------


def _numeric_entity(entity: str) -> str | None:
    if len(entity) <= 1 or entity[0] != "#":
        return None
    if entity[1] in "xX":
        base, digits = 16, entity[2:]
        valid = "0123456789abcdefABCDEF"
    else:
        base, digits = 10, entity[1:]
        valid = "0123456789"
    codepoint = 0
    for ch in digits:
        if ch in valid:
            codepoint = codepoint * base + int(ch, base)
    if 0 < codepoint < 0x110000:
        return chr(codepoint)
    return None


def decode_html_entities(s: str) -> str:
    """Decode basic named entities and numeric character references."""
    out: list[str] = []
    i = 0
    length = len(s)
    while i < length:
        if s[i] == "&":
            end = s.find(";", i + 1)
            if end != -1 and end - i < _MAX_ENTITY_SPAN:
                entity = s[i + 1 : end]
                decoded = _NAMED_ENTITIES.get(entity)
                if decoded is None:
                    decoded = _numeric_entity(entity)
                if decoded is not None:
                    out.append(decoded)
                    i = end + 1
                    continue
        out.append(s[i])
        i += 1
    return "".join(out)


def encode_html_entities(s: str) -> str:
    """Escape ``& < > " '`` as HTML entities."""
    return s.translate(_ENCODE_TABLE)


def strip_tags(s: str) -> str:
    """Remove anything between ``<`` and ``>``, plus any stray ``>``."""
    return _TAG.sub("", s)


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


def split_lines(s: str) -> list[str]:
    """Split on ``\\n``, ``\\r\\n`` or ``\\r``; the trailing part is always kept."""
    return _LINE_BREAK.split(s)


def count_lines(s: str) -> int:
    """Count lines; an empty string has none."""
    if not s:
        return 0
    return len(split_lines(s))


def get_line(s: str, line_number: int) -> str | None:
    """Return line ``line_number`` (0-based), or None if out of range."""
    if line_number < 0:
        return None
    lines = split_lines(s)
    if line_number < len(lines):
        return lines[line_number]
    return None