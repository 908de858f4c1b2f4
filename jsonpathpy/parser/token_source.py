"""Token source that hides whitespace and records it separately."""

from jsonpathpy.diagnostics import Diagnostic
from jsonpathpy.lexer import Lexer, TokenFlags, TokenKind, Trivia
from jsonpathpy.text import TextRange, TextSize


class TokenSource:
    """Bridge between lexer and parser that strips trivia but records ownership."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._trivia: list[Trivia] = []
        self._current_kind: TokenKind = TokenKind.EOF
        self._current_range: TextRange = TextRange.empty(TextSize.from_int(0))
        self._current_flags: TokenFlags = TokenFlags.NONE
        self._current_has_preceding_trivia = False
        self._next_non_trivia_token()

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return self._current_range

    @property
    def current_flags(self) -> TokenFlags:
        return self._current_flags

    @property
    def current_text(self) -> str:
        return self.text[self._current_range.start.value : self._current_range.end.value]

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def position(self) -> TextSize:
        return self._current_range.start

    @property
    def trivia(self) -> list[Trivia]:
        return self._trivia

    @property
    def has_preceding_trivia(self) -> bool:
        return self._current_has_preceding_trivia

    def bump(self) -> None:
        if self._current_kind != TokenKind.EOF:
            self._next_non_trivia_token()

    def finish(self) -> tuple[list[Trivia], list[Diagnostic]]:
        return (self._trivia, self._lexer.diagnostics)

    def _next_non_trivia_token(self) -> None:
        saw_trivia = False

        while True:
            token = self._lexer.next_token()

            if token.kind.is_trivia:
                saw_trivia = True
                self._trivia.append(Trivia(token.range))
                continue

            self._current_kind = token.kind
            self._current_range = token.range
            self._current_flags = token.flags
            self._current_has_preceding_trivia = saw_trivia
            break
