"""Lexer."""

from jsonpathpy.lexer.lexer import Lexer, dump_tokens, is_name_char, token_text
from jsonpathpy.lexer.tokens import (
    Token,
    TokenFlags,
    TokenKind,
    Trivia,
    TriviaPiece,
)

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "Trivia",
    "TriviaPiece",
    "dump_tokens",
    "is_name_char",
    "token_text",
]
