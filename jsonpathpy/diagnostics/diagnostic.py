"""Diagnostics core types."""

from dataclasses import dataclass

from jsonpathpy.diagnostics.codes import DiagnosticSpec, Severity
from jsonpathpy.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    @property
    def offset(self) -> int:
        return self.range.start.value


class PathSyntaxError(ValueError):
    """Raised when a path expression cannot be parsed.

    `offset` is the character offset of the first error; the full list of
    diagnostics is kept on `diagnostics`.
    """

    def __init__(self, text: str, diagnostics: list[Diagnostic]) -> None:
        from jsonpathpy.diagnostics.report import first_error

        first = first_error(diagnostics)
        if first is None:
            raise ValueError("PathSyntaxError requires at least one error diagnostic")
        self.text = text
        self.diagnostics = diagnostics
        self.offset = first.offset
        self.code = first.code
        super().__init__(f"{first.message} at offset {first.offset} in {text!r}")
