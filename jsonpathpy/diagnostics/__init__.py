"""Diagnostics."""

from jsonpathpy.diagnostics.codes import (
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_CHILD_NAME,
    PARSER_EXPECTED_ROOT,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_UNION_ELEMENT,
    PARSER_INTEGER_OUT_OF_RANGE,
    PARSER_INVALID_ESCAPE,
    PARSER_INVALID_INTEGER,
    PARSER_INVALID_STRING_CHARACTER,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNEXPECTED_WHITESPACE,
    PARSER_UNSUPPORTED_SELECTOR,
    DiagnosticSpec,
    Severity,
)
from jsonpathpy.diagnostics.diagnostic import Diagnostic, PathSyntaxError
from jsonpathpy.diagnostics.report import collect_diagnostics, first_error, has_errors

__all__ = [
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_CHILD_NAME",
    "PARSER_EXPECTED_ROOT",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_EXPECTED_UNION_ELEMENT",
    "PARSER_INTEGER_OUT_OF_RANGE",
    "PARSER_INVALID_ESCAPE",
    "PARSER_INVALID_INTEGER",
    "PARSER_INVALID_STRING_CHARACTER",
    "PARSER_UNEXPECTED_TOKEN",
    "PARSER_UNEXPECTED_WHITESPACE",
    "PARSER_UNSUPPORTED_SELECTOR",
    "Diagnostic",
    "DiagnosticSpec",
    "PathSyntaxError",
    "Severity",
    "collect_diagnostics",
    "first_error",
    "has_errors",
]
