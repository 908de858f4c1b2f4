"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from jsonpathpy.text import TextRange, TextSize


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia
    # -------------------------
    WHITESPACE = 10  # one or more U+0020

    # -------------------------
    # Names / literals
    # -------------------------
    NAME = 20  # unquoted child name characters
    STRING = 21  # single- or double-quoted
    INT = 22  # a NAME run spelled -?[0-9]+
    UNKNOWN = 23  # any character outside the path alphabet

    # -------------------------
    # Punctuation
    # -------------------------
    DOLLAR = 40  # $
    DOT = 41  # .
    DOT_DOT = 42  # ..
    STAR = 43  # *
    COMMA = 44  # ,
    COLON = 45  # :

    LBRACKET = 62  # [
    RBRACKET = 63  # ]

    @property
    def is_trivia(self) -> bool:
        return self == TokenKind.WHITESPACE


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    WAS_QUOTED = 1 << 0
    HAS_ESCAPE = 1 << 1
    UNTERMINATED = 1 << 2


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    @property
    def was_quoted(self) -> bool:
        return bool(self.flags & TokenFlags.WAS_QUOTED)


@dataclass(frozen=True, slots=True)
class Trivia:
    """Whitespace recorded by the TokenSource, owned by the following token."""

    range: TextRange


@dataclass(frozen=True, slots=True)
class TriviaPiece:
    """Compact trivia unit stored in the CST."""

    length: TextSize
