"""Decoding of integer and quoted-string literals.

The grammar calls these to validate literals while parsing (so failures carry
an exact offset); lowering calls them again to build the selector values.
"""

from __future__ import annotations

import re
from typing import Final

from jsonpathpy.diagnostics import (
    PARSER_INTEGER_OUT_OF_RANGE,
    PARSER_INVALID_ESCAPE,
    PARSER_INVALID_INTEGER,
    PARSER_INVALID_STRING_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
)
from jsonpathpy.text import TextRange, TextSize

MAX_SAFE_INTEGER: Final[int] = 2**53 - 1
"""Largest integer magnitude exactly representable as a JSON (IEEE 754 double) number."""

_INTEGER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)")
_HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")
_UPPER_HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789ABCDEF")

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class LiteralError(ValueError):
    """A literal could not be decoded.

    `offset` and `length` are relative to the start of the literal text.
    """

    def __init__(self, spec: DiagnosticSpec, offset: int, length: int, message: str | None = None) -> None:
        self.spec = spec
        self.offset = offset
        self.length = length
        super().__init__(message if message is not None else spec.message)

    def to_diagnostic(self, literal_start: TextSize) -> Diagnostic:
        return Diagnostic.from_spec(
            self.spec,
            TextRange.at(TextSize(literal_start.value + self.offset), TextSize(self.length)),
            message=str(self),
        )


def parse_integer_literal(text: str, *, max_magnitude: int = MAX_SAFE_INTEGER) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise LiteralError(PARSER_INVALID_INTEGER, 0, len(text), f"Invalid integer literal `{text}`")

    digits = text.removeprefix("-")
    # Compare lengths first so absurdly long literals never reach int().
    if len(digits) > len(str(max_magnitude)) or int(digits) > max_magnitude:
        raise LiteralError(
            PARSER_INTEGER_OUT_OF_RANGE,
            0,
            len(text),
            f"Integer literal `{text}` exceeds the maximum magnitude {max_magnitude}",
        )
    return int(text)


def decode_string_literal(raw: str, *, allow_lowercase_hex: bool = True) -> str:
    """Decode a quoted literal, quotes included, into its string value."""
    if len(raw) < 2 or raw[0] not in "'\"" or raw[-1] != raw[0]:
        raise LiteralError(LEXER_UNTERMINATED_STRING, 0, len(raw))

    quote = raw[0]
    end = len(raw) - 1
    parts: list[str] = []
    i = 1
    while i < end:
        ch = raw[i]
        if ch == "\\":
            escape = raw[i + 1] if i + 1 < end else ""
            if escape == quote:
                parts.append(quote)
                i += 2
                continue
            simple = _SIMPLE_ESCAPES.get(escape)
            if simple is not None:
                parts.append(simple)
                i += 2
                continue
            if escape == "u":
                code_point, i = _decode_unicode_escape(raw, i, end, allow_lowercase_hex)
                parts.append(chr(code_point))
                continue
            raise LiteralError(
                PARSER_INVALID_ESCAPE,
                i,
                2 if escape else 1,
                f"Invalid escape sequence `\\{escape}`",
            )

        if ord(ch) < 0x20:
            raise LiteralError(
                PARSER_INVALID_STRING_CHARACTER,
                i,
                1,
                f"Control character U+{ord(ch):04X} must be escaped",
            )
        parts.append(ch)
        i += 1

    return "".join(parts)


def _decode_unicode_escape(raw: str, start: int, end: int, allow_lowercase_hex: bool) -> tuple[int, int]:
    """Decode `\\uXXXX` (or a surrogate pair of them) at `start`; return (code point, next index)."""
    high = _read_hex4(raw, start, end, allow_lowercase_hex)
    position = start + 6

    if 0xDC00 <= high <= 0xDFFF:
        raise LiteralError(PARSER_INVALID_ESCAPE, start, 6, "Unpaired low surrogate in `\\u` escape")

    if 0xD800 <= high <= 0xDBFF:
        if not raw.startswith("\\u", position) or position + 6 > end:
            raise LiteralError(PARSER_INVALID_ESCAPE, start, 6, "Unpaired high surrogate in `\\u` escape")
        low = _read_hex4(raw, position, end, allow_lowercase_hex)
        if not 0xDC00 <= low <= 0xDFFF:
            raise LiteralError(PARSER_INVALID_ESCAPE, start, 12, "Unpaired high surrogate in `\\u` escape")
        return 0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00), position + 6

    return high, position


def _read_hex4(raw: str, start: int, end: int, allow_lowercase_hex: bool) -> int:
    digits = raw[start + 2 : min(start + 6, end)]
    allowed = _HEX_DIGITS if allow_lowercase_hex else _UPPER_HEX_DIGITS
    if len(digits) != 4 or any(d not in allowed for d in digits):
        expected = "four hex digits" if allow_lowercase_hex else "four upper-case hex digits"
        raise LiteralError(
            PARSER_INVALID_ESCAPE,
            start,
            2 + len(digits),
            f"Invalid `\\u` escape: expected {expected}",
        )
    return int(digits, 16)


_ENCODE_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def encode_string_literal(value: str, *, quote: str = "'") -> str:
    """Quote `value` so that `decode_string_literal` returns it unchanged."""
    parts = [quote]
    for ch in value:
        if ch == quote:
            parts.append("\\" + quote)
        elif ch in _ENCODE_ESCAPES:
            parts.append(_ENCODE_ESCAPES[ch])
        elif ord(ch) < 0x20:
            parts.append(f"\\u{ord(ch):04X}")
        else:
            parts.append(ch)
    parts.append(quote)
    return "".join(parts)
