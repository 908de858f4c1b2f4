"""Lossless tree sink for parser events."""

from dataclasses import dataclass

from jsonpathpy.cst import GreenNode, TreeBuilder
from jsonpathpy.diagnostics import Diagnostic
from jsonpathpy.lexer import Trivia, TriviaPiece
from jsonpathpy.syntax import PathSyntaxKind
from jsonpathpy.text import TextSize


@dataclass(frozen=True, slots=True)
class ParsedGreenTree:
    root: GreenNode
    diagnostics: list[Diagnostic]


class LosslessTreeSink:
    """Converts parser events plus recorded whitespace into a green CST.

    Whitespace is attached as leading trivia of the token that follows it;
    trailing whitespace ends up on the synthetic EOF token.
    """

    def __init__(
        self,
        text: str,
        trivia: list[Trivia],
        builder: TreeBuilder | None = None,
    ) -> None:
        self._text = text
        self._trivia = trivia
        self._text_pos = TextSize.from_int(0)
        self._trivia_pos = 0
        self._parents_count = 0
        self._builder = builder if builder is not None else TreeBuilder()
        self._needs_eof = True

    def token(self, kind: PathSyntaxKind, end: TextSize) -> None:
        self._do_token(kind, end)

    def start_node(self, kind: PathSyntaxKind) -> None:
        self._builder.start_node(kind)
        self._parents_count += 1

    def finish_node(self) -> None:
        self._parents_count -= 1
        if self._parents_count < 0:
            raise RuntimeError("finish_node called more often than start_node")

        if self._parents_count == 0 and self._needs_eof:
            self._do_token(PathSyntaxKind.EOF, TextSize.of(self._text))

        self._builder.finish_node()

    def finish(self, diagnostics: list[Diagnostic]) -> ParsedGreenTree:
        return ParsedGreenTree(root=self._builder.finish(), diagnostics=diagnostics)

    def _do_token(self, kind: PathSyntaxKind, token_end: TextSize) -> None:
        if kind == PathSyntaxKind.EOF:
            self._needs_eof = False

        leading = self._eat_trivia(token_end)
        token_start = self._text_pos
        self._text_pos = token_end

        self._builder.token(
            kind=kind,
            text=self._text[token_start.value : token_end.value],
            leading=leading,
        )

    def _eat_trivia(self, token_end: TextSize) -> tuple[TriviaPiece, ...]:
        pieces: list[TriviaPiece] = []
        while self._trivia_pos < len(self._trivia):
            trivia = self._trivia[self._trivia_pos]
            if self._text_pos != trivia.range.start:
                break
            if trivia.range.end > token_end:
                break

            pieces.append(TriviaPiece(length=trivia.range.len()))
            self._text_pos = trivia.range.end
            self._trivia_pos += 1
        return tuple(pieces)
