"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from jsonpathpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    diagnostics.sort(key=lambda d: d.range)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def first_error(diagnostics: Iterable[Diagnostic]) -> Diagnostic | None:
    errors = [d for d in diagnostics if d.severity == "error"]
    if not errors:
        return None
    return min(errors, key=lambda d: d.range)
