"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the same quote character that opened it.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_ROOT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_ROOT",
    message="Expected `$` at the start of the path",
    hint="Every path starts with the root selector, e.g. `$.store`.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_CHILD_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_CHILD_NAME",
    message="Expected a child name or `*`",
    hint="Child names use letters, digits, `-`, `_` or non-ASCII characters; quote anything else: `['a b']`.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_UNION_ELEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_UNION_ELEMENT",
    message="Expected a quoted name, an index or a slice",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_WHITESPACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_WHITESPACE",
    message="Whitespace is not allowed here",
    hint="Remove the space between `.`/`..`/`[` and what follows it.",
    severity="error",
    category="parser",
)

PARSER_INVALID_INTEGER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_INTEGER",
    message="Invalid integer literal",
    hint="Integers have no leading zeros and use `-` as the only sign.",
    severity="error",
    category="parser",
)

PARSER_INTEGER_OUT_OF_RANGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INTEGER_OUT_OF_RANGE",
    message="Integer literal is out of range",
    severity="error",
    category="parser",
)

PARSER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_ESCAPE",
    message="Invalid escape sequence in string literal",
    severity="error",
    category="parser",
)

PARSER_INVALID_STRING_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_STRING_CHARACTER",
    message="Control characters must be escaped in string literals",
    severity="error",
    category="parser",
)

PARSER_UNSUPPORTED_SELECTOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNSUPPORTED_SELECTOR",
    message="Selector is not supported in the active parse mode",
    hint="Descendant search and `[*]` require ParseMode.EXTENDED.",
    severity="error",
    category="parser",
)
