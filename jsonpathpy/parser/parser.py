"""Event-based parser core."""

from dataclasses import dataclass

from jsonpathpy.diagnostics import Diagnostic
from jsonpathpy.lexer import TokenFlags, TokenKind
from jsonpathpy.parser.event import Event, StartEvent, TokenEvent
from jsonpathpy.parser.marker import Marker
from jsonpathpy.parser.options import ParserOptions
from jsonpathpy.parser.token_source import TokenSource
from jsonpathpy.syntax import PathSyntaxKind
from jsonpathpy.text import TextRange, TextSize


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    """Event-based parser."""

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._events: list[Event] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def current_text(self) -> str:
        return self._source.current_text

    @property
    def current_flags(self) -> TokenFlags:
        return self._source.current_flags

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def has_preceding_trivia(self) -> bool:
        return self._source.has_preceding_trivia

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def start(self) -> Marker:
        pos = len(self._events)
        self._events.append(StartEvent.pending())
        return Marker(pos=pos, start=self.position)

    def bump(self) -> None:
        if self.current == TokenKind.EOF:
            return
        self._events.append(
            TokenEvent(
                kind=PathSyntaxKind.from_token_kind(self.current),
                end=self.current_range.end,
            )
        )
        self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, diagnostic: Diagnostic) -> bool:
        if self.eat(kind):
            return True
        self.error(diagnostic)
        return False

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == diagnostic.range.start:
                return
        self._diagnostics.append(diagnostic)

    def finish(self) -> tuple[list[Event], list[Diagnostic]]:
        return self._events, self._diagnostics
