"""Lexer."""

import re

from jsonpathpy.diagnostics import LEXER_UNTERMINATED_STRING, Diagnostic
from jsonpathpy.lexer.tokens import Token, TokenFlags, TokenKind
from jsonpathpy.text import TextRange, TextSize, slice_text_range

_INT_RE = re.compile(r"-?[0-9]+")

_PUNCTUATION: dict[str, TokenKind] = {
    "$": TokenKind.DOLLAR,
    "*": TokenKind.STAR,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}


def is_name_char(ch: str) -> bool:
    """Characters allowed in an unquoted child name."""
    return (
        ch == "-"
        or ch == "_"
        or "0" <= ch <= "9"
        or "a" <= ch <= "z"
        or "A" <= ch <= "Z"
        or ord(ch) >= 0x80
    )


class Lexer:
    """Lossless lexer over a path expression.

    Every character of the source ends up in exactly one token, so the token
    texts concatenate back to the input.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = TextSize.from_int(0)
        self._current_kind = TokenKind.EOF
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def current_flags(self) -> TokenFlags:
        return self._current_flags

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            self._current_kind = TokenKind.EOF
            return Token(TokenKind.EOF, TextRange.empty(self._current_start))

        self._current_kind = self._lex_token()
        return Token(self._current_kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == " ":
            while self._current_char() == " ":
                self._advance(1)
            return TokenKind.WHITESPACE

        if ch == ".":
            if self._peek_char() == ".":
                self._advance(2)
                return TokenKind.DOT_DOT
            self._advance(1)
            return TokenKind.DOT

        if ch == '"' or ch == "'":
            return self._lex_string(ch)

        if is_name_char(ch):
            return self._lex_name()

        kind = _PUNCTUATION.get(ch)
        self._advance(1)
        return kind if kind is not None else TokenKind.UNKNOWN

    def _lex_string(self, quote: str) -> TokenKind:
        # Escapes are validated by the grammar; here we only find the closing quote.
        self._advance(1)
        self._current_flags |= TokenFlags.WAS_QUOTED
        closed = False

        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                closed = True
                break
            if ch == "\\":
                self._current_flags |= TokenFlags.HAS_ESCAPE
                self._advance(1)
                if not self.is_eof:
                    self._advance(1)
                continue
            self._advance(1)

        if not closed:
            self._current_flags |= TokenFlags.UNTERMINATED
            self._diagnostics.append(
                Diagnostic.from_spec(
                    LEXER_UNTERMINATED_STRING,
                    TextRange.new(self._current_start, TextSize.from_int(self._position)),
                )
            )

        return TokenKind.STRING

    def _lex_name(self) -> TokenKind:
        start = self._position
        while not self.is_eof and is_name_char(self._current_char()):
            self._advance(1)
        if _INT_RE.fullmatch(self._source, start, self._position):
            return TokenKind.INT
        return TokenKind.NAME

    def _current_char(self) -> str:
        if self.is_eof:
            return ""
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return ""
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} flags={tok.flags!r} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
