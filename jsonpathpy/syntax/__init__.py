"""Syntax kinds and literal decoding shared by the parser, CST and lowering."""

from jsonpathpy.syntax.kind import PathSyntaxKind
from jsonpathpy.syntax.literals import (
    MAX_SAFE_INTEGER,
    LiteralError,
    decode_string_literal,
    encode_string_literal,
    parse_integer_literal,
)

__all__ = [
    "MAX_SAFE_INTEGER",
    "LiteralError",
    "PathSyntaxKind",
    "decode_string_literal",
    "encode_string_literal",
    "parse_integer_literal",
]
