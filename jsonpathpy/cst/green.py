"""Minimal immutable green CST representation."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from jsonpathpy.lexer import TriviaPiece
from jsonpathpy.syntax import PathSyntaxKind
from jsonpathpy.text import TextSize


@dataclass(frozen=True, slots=True)
class GreenToken:
    kind: PathSyntaxKind
    text: str
    leading_trivia: tuple[TriviaPiece, ...]

    @property
    def leading_text(self) -> str:
        # Spaces are the only trivia in a path expression.
        return " " * sum(piece.length.value for piece in self.leading_trivia)

    @property
    def text_with_trivia(self) -> str:
        return self.leading_text + self.text

    @property
    def text_len(self) -> TextSize:
        return TextSize.from_int(len(self.text_with_trivia))


@dataclass(frozen=True, slots=True)
class GreenNode:
    kind: PathSyntaxKind
    children: tuple["GreenElement", ...]

    @property
    def text_len(self) -> TextSize:
        total = 0
        for child in self.children:
            total += child.text_len.value
        return TextSize.from_int(total)

    @property
    def text_with_trivia(self) -> str:
        return "".join(child.text_with_trivia for child in self.children)

    @property
    def text_trimmed(self) -> str:
        """Token texts without any whitespace trivia."""
        return "".join(token.text for token in self.tokens())

    def child_nodes(self) -> Iterator["GreenNode"]:
        for child in self.children:
            if isinstance(child, GreenNode):
                yield child

    def child_tokens(self) -> Iterator[GreenToken]:
        for child in self.children:
            if isinstance(child, GreenToken):
                yield child

    def first_child_node(self, kind: PathSyntaxKind) -> "GreenNode | None":
        for child in self.child_nodes():
            if child.kind == kind:
                return child
        return None

    def tokens(self) -> Iterator[GreenToken]:
        """All tokens below this node, in source order."""
        for child in self.children:
            if isinstance(child, GreenNode):
                yield from child.tokens()
            else:
                yield child


GreenElement: TypeAlias = GreenNode | GreenToken


class TreeBuilder:
    """Stack-based builder producing immutable green nodes."""

    def __init__(self) -> None:
        self._stack: list[tuple[PathSyntaxKind, list[GreenElement]]] = []
        self._roots: list[GreenElement] = []

    def start_node(self, kind: PathSyntaxKind) -> None:
        self._stack.append((kind, []))

    def token(
        self,
        kind: PathSyntaxKind,
        text: str,
        leading: tuple[TriviaPiece, ...],
    ) -> None:
        self._push_element(GreenToken(kind=kind, text=text, leading_trivia=leading))

    def finish_node(self) -> None:
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children = self._stack.pop()
        self._push_element(GreenNode(kind=kind, children=tuple(children)))

    def finish(self) -> GreenNode:
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")

        if len(self._roots) == 1 and isinstance(self._roots[0], GreenNode):
            root = self._roots[0]
            if root.kind == PathSyntaxKind.ROOT:
                return root

        return GreenNode(kind=PathSyntaxKind.ROOT, children=tuple(self._roots))

    def _push_element(self, element: GreenElement) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)
