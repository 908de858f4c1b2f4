"""Unified syntax kinds for parser and CST."""

from enum import IntEnum

from jsonpathpy.lexer import TokenKind


class PathSyntaxKind(IntEnum):
    """Path syntax vocabulary (tokens + nodes).

    Token kinds share their values with `TokenKind`. Node kinds mirror the
    non-silent grammar rules.
    """

    TOMBSTONE = 0
    EOF = 1

    WHITESPACE = 10

    NAME = 20
    STRING = 21
    INT = 22
    UNKNOWN = 23

    DOLLAR = 40
    DOT = 41
    DOT_DOT = 42
    STAR = 43
    COMMA = 44
    COLON = 45

    LBRACKET = 62
    RBRACKET = 63

    # Node kinds
    ROOT = 1000
    ERROR = 1001
    PATH = 1002
    ROOT_SELECTOR = 1003
    NAMED_DOT_CHILD = 1004
    WILDCARDED_DOT_CHILD = 1005
    CHILD_NAME = 1006
    UNION = 1007
    WILDCARDED_INDEX = 1008
    DESCENDANT = 1009
    UNION_CHILD = 1010
    UNION_ARRAY_INDEX = 1011
    UNION_ARRAY_SLICE = 1012
    SLICE_START = 1013
    SLICE_END = 1014
    SLICE_STEP = 1015

    @property
    def is_token(self) -> bool:
        return self != PathSyntaxKind.TOMBSTONE and self.value < PathSyntaxKind.ROOT.value

    @property
    def is_node(self) -> bool:
        return self.value >= PathSyntaxKind.ROOT.value

    @staticmethod
    def from_token_kind(kind: TokenKind) -> "PathSyntaxKind":
        try:
            return PathSyntaxKind(kind.value)
        except ValueError:
            raise ValueError(f"Unsupported TokenKind mapping: {kind!r}") from None
