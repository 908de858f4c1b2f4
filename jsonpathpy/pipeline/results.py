"""Pipeline run result carriers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from jsonpathpy.diagnostics import Diagnostic
from jsonpathpy.pipeline.result import JsonPathParseResult

if TYPE_CHECKING:
    from jsonpathpy.evaluate import Node


@dataclass(frozen=True, slots=True)
class QueryRunResult:
    """Result of evaluating one parsed expression against one document.

    `nodes` is empty whenever the expression failed to parse.
    """

    parse: JsonPathParseResult
    nodes: list[Node]
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return self.parse.has_errors

    @property
    def values(self) -> list[Any]:
        return [node.value for node in self.nodes]
