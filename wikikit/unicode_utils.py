"""Unicode helpers: UTF-8 handling, case mapping, normalization and titles."""

from __future__ import annotations

import enum
import re
import unicodedata
from collections.abc import Iterator

from wikikit.text import collapse_whitespace, trim

__all__ = [
    "is_valid_utf8",
    "utf8_char_length",
    "count_codepoints",
    "decode_utf8",
    "encode_utf8",
    "to_lower",
    "to_upper",
    "to_title_case",
    "capitalize_first",
    "NormalizationForm",
    "normalize",
    "is_whitespace",
    "is_letter",
    "is_digit",
    "is_alphanumeric",
    "is_punctuation",
    "normalize_title",
    "normalize_for_comparison",
    "title_to_url",
    "url_to_title",
    "Utf8Iterator",
    "utf8_codepoints",
]

REPLACEMENT_CHARACTER = 0xFFFD
_MAX_CODEPOINT = 0x10FFFF

# Code points carrying the Unicode White_Space property.
_WHITE_SPACE = frozenset(
    [*range(0x09, 0x0E), 0x20, 0x85, 0xA0, 0x1680, *range(0x2000, 0x200B),
     0x2028, 0x2029, 0x202F, 0x205F, 0x3000]
)

_URL_SAFE = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~"
)
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")

_WORD = re.compile(r"\w+(?:['\u2019]\w+)*")


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogatepass")
    return bytes(data)


# ---------------------------------------------------------------------------
# UTF-8 validation, decoding and encoding
# ---------------------------------------------------------------------------


def utf8_char_length(first_byte: int) -> int:
    """Byte length (1-4) of a UTF-8 sequence starting with ``first_byte``; 0 if invalid."""
    if isinstance(first_byte, (bytes, bytearray)):
        if len(first_byte) != 1:
            raise ValueError("expected a single byte")
        first_byte = first_byte[0]
    c = first_byte & 0xFF
    if c & 0x80 == 0:
        return 1
    if c & 0xE0 == 0xC0:
        return 2
    if c & 0xF0 == 0xE0:
        return 3
    if c & 0xF8 == 0xF0:
        return 4
    return 0


def is_valid_utf8(data: bytes | bytearray | str) -> bool:
    """True if ``data`` is well-formed UTF-8."""
    raw = _as_bytes(data)
    i = 0
    size = len(raw)
    while i < size:
        c = raw[i]
        length = utf8_char_length(c)
        if length == 0 or i + length > size:
            return False
        if any(b & 0xC0 != 0x80 for b in raw[i + 1 : i + length]):
            return False
        if length == 2:
            if c & 0x1E == 0:
                return False  # overlong
        elif length == 3:
            if c == 0xE0 and raw[i + 1] & 0xE0 == 0x80:
                return False  # overlong
            if c == 0xED and raw[i + 1] & 0xE0 == 0xA0:
                return False  # UTF-16 surrogates
        elif length == 4:
            if c == 0xF0 and raw[i + 1] & 0xF0 == 0x80:
                return False  # overlong
            if c >= 0xF5:
                return False  # beyond Unicode range
        i += length
    return True


def count_codepoints(data: bytes | bytearray | str) -> int:
    """Count code points; each invalid lead byte counts as one."""
    raw = _as_bytes(data)
    count = 0
    i = 0
    while i < len(raw):
        i += utf8_char_length(raw[i]) or 1
        count += 1
    return count


def decode_utf8(data: bytes | bytearray | str, pos: int = 0) -> tuple[int, int] | None:
    """Decode the code point at byte ``pos``.

    Returns ``(codepoint, next_pos)``, or None at the end of input or on an
    invalid or truncated lead byte.
    """
    raw = _as_bytes(data)
    if pos < 0 or pos >= len(raw):
        return None
    first = raw[pos]
    length = utf8_char_length(first)
    if length == 0 or pos + length > len(raw):
        return None
    if length == 1:
        cp = first
    elif length == 2:
        cp = (first & 0x1F) << 6 | raw[pos + 1] & 0x3F
    elif length == 3:
        cp = (first & 0x0F) << 12 | (raw[pos + 1] & 0x3F) << 6 | raw[pos + 2] & 0x3F
    else:
        cp = (
            (first & 0x07) << 18
            | (raw[pos + 1] & 0x3F) << 12
            | (raw[pos + 2] & 0x3F) << 6
            | raw[pos + 3] & 0x3F
        )
    return cp, pos + length


def encode_utf8(codepoint: int) -> bytes:
    """Encode a code point as UTF-8; values above U+10FFFF give empty bytes."""
    if isinstance(codepoint, str):
        codepoint = ord(codepoint)
    if codepoint < 0:
        raise ValueError("code point must not be negative")
    if codepoint <= 0x7F:
        return bytes([codepoint])
    if codepoint <= 0x7FF:
        return bytes([0xC0 | codepoint >> 6, 0x80 | codepoint & 0x3F])
    if codepoint <= 0xFFFF:
        return bytes(
            [0xE0 | codepoint >> 12, 0x80 | codepoint >> 6 & 0x3F, 0x80 | codepoint & 0x3F]
        )
    if codepoint <= _MAX_CODEPOINT:
        return bytes(
            [
                0xF0 | codepoint >> 18,
                0x80 | codepoint >> 12 & 0x3F,
                0x80 | codepoint >> 6 & 0x3F,
                0x80 | codepoint & 0x3F,
            ]
        )
    return b""


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def to_lower(s: str) -> str:
    """Full Unicode lowercase mapping."""
    return s.lower()


def to_upper(s: str) -> str:
    """Full Unicode uppercase mapping (``ß`` becomes ``SS``)."""
    return s.upper()


def to_title_case(s: str) -> str:
    """Uppercase the first letter of each word and lowercase the rest."""
    return _WORD.sub(lambda m: m.group()[0].title() + m.group()[1:].lower(), s)


def _simple_upper(ch: str) -> str:
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _simple_lower(ch: str) -> str:
    lower = ch.lower()
    return lower if len(lower) == 1 else lower[0]


def capitalize_first(s: str) -> str:
    """Uppercase only the first character, leaving the rest untouched."""
    if not s:
        return ""
    return _simple_upper(s[0]) + s[1:]


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


class NormalizationForm(enum.Enum):
    """Unicode normalization forms."""

    NFC = "NFC"
    NFD = "NFD"
    NFKC = "NFKC"
    NFKD = "NFKD"


def normalize(s: str, form: NormalizationForm = NormalizationForm.NFC) -> str:
    """Normalize ``s`` to the given form."""
    return unicodedata.normalize(NormalizationForm(form).value, s)


# ---------------------------------------------------------------------------
# Character classification
# ---------------------------------------------------------------------------


def _char(cp: int | str) -> str | None:
    if isinstance(cp, str):
        if len(cp) != 1:
            raise ValueError("expected a single character")
        return cp
    if 0 <= cp <= _MAX_CODEPOINT:
        return chr(cp)
    return None


def is_whitespace(cp: int | str) -> bool:
    """True for code points with the Unicode White_Space property."""
    ch = _char(cp)
    return ch is not None and ord(ch) in _WHITE_SPACE


def is_letter(cp: int | str) -> bool:
    """True for letters (general category L*)."""
    ch = _char(cp)
    return ch is not None and unicodedata.category(ch).startswith("L")


def is_digit(cp: int | str) -> bool:
    """True for decimal digits (general category Nd)."""
    ch = _char(cp)
    return ch is not None and unicodedata.category(ch) == "Nd"


def is_alphanumeric(cp: int | str) -> bool:
    """True for letters and decimal digits."""
    return is_letter(cp) or is_digit(cp)


def is_punctuation(cp: int | str) -> bool:
    """True for punctuation (general category P*)."""
    ch = _char(cp)
    return ch is not None and unicodedata.category(ch).startswith("P")


# ---------------------------------------------------------------------------
# Page titles
# ---------------------------------------------------------------------------


def normalize_title(title: str) -> str:
    """Normalize a page title the way the wiki does.

    Trims, turns underscores into spaces, collapses whitespace, drops any
    ``#fragment`` and capitalizes the first character.
    """
    result = collapse_whitespace(trim(title).replace("_", " "))
    if "#" in result:
        result = trim(result.split("#", 1)[0])
    return capitalize_first(result)


def normalize_for_comparison(s: str) -> str:
    """Lowercase only the first character, since titles differ only there in case."""
    if not s:
        return ""
    return _simple_lower(s[0]) + s[1:]


def title_to_url(title: str) -> str:
    """Encode a title for use in a URL: spaces become underscores, others are %XX."""
    out: list[str] = []
    for byte in title.encode("utf-8"):
        if byte in _URL_SAFE:
            out.append(chr(byte))
        elif byte == 0x20:
            out.append("_")
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


def url_to_title(url: str) -> str:
    """Decode a URL-encoded title: %XX escapes are decoded, underscores become spaces."""
    raw = url.encode("utf-8")
    out = bytearray()
    i = 0
    while i < len(raw):
        byte = raw[i]
        if (
            byte == 0x25
            and i + 2 < len(raw)
            and raw[i + 1] in _HEX_DIGITS
            and raw[i + 2] in _HEX_DIGITS
        ):
            out.append(int(raw[i + 1 : i + 3], 16))
            i += 3
            continue
        out.append(0x20 if byte == 0x5F else byte)
        i += 1
    return out.decode("utf-8", "replace")


# ---------------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------------


class Utf8Iterator(Iterator[int]):
    """Iterate the code points of UTF-8 data, tracking the byte position.

    ``current()`` is the code point at the present position (0 at the end);
    ``next()`` returns it and moves past it. Malformed bytes yield U+FFFD.
    """

    def __init__(self, data: bytes | bytearray | str, pos: int = 0) -> None:
        self._data = _as_bytes(data)
        self._pos = min(max(pos, 0), len(self._data))

    def __iter__(self) -> Utf8Iterator:
        return self

    def __next__(self) -> int:
        if self._pos >= len(self._data):
            raise StopIteration
        decoded = decode_utf8(self._data, self._pos)
        if decoded is None:
            self._pos += 1
            return REPLACEMENT_CHARACTER
        cp, self._pos = decoded
        return cp

    def current(self) -> int:
        """The code point at the current position, or 0 at the end."""
        if self._pos >= len(self._data):
            return 0
        decoded = decode_utf8(self._data, self._pos)
        return REPLACEMENT_CHARACTER if decoded is None else decoded[0]

    def byte_position(self) -> int:
        """Byte offset of the current code point."""
        return self._pos


def utf8_codepoints(data: bytes | bytearray | str) -> Utf8Iterator:
    """Iterate over the code points of ``data``."""
    return Utf8Iterator(data)