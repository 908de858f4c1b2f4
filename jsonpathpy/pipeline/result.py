"""Parse carrier for parse-once/evaluate-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jsonpathpy.diagnostics import PathSyntaxError, has_errors
from jsonpathpy.parser.options import ParserOptions
from jsonpathpy.parser.tree_sink import ParsedGreenTree

if TYPE_CHECKING:
    from jsonpathpy.ast import JsonPath
    from jsonpathpy.cst import GreenNode
    from jsonpathpy.diagnostics import Diagnostic
    from jsonpathpy.evaluate import Node


@dataclass(slots=True)
class ParseResultBase:
    """Shared parse carrier: CST plus diagnostics for one expression."""

    source_text: str
    parsed: ParsedGreenTree

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    def green_root(self) -> GreenNode:
        return self.parsed.root


@dataclass(slots=True)
class JsonPathParseResult(ParseResultBase):
    """Path expression parse result with a lazily lowered `JsonPath`."""

    options: ParserOptions
    _path: JsonPath | None = field(default=None, init=False, repr=False)

    def path(self) -> JsonPath:
        """Lower once and cache; raises `PathSyntaxError` if parsing failed."""
        if self._path is None:
            if self.has_errors:
                raise PathSyntaxError(self.source_text, self.diagnostics)

            from jsonpathpy.ast.lower import lower_tree

            self._path = lower_tree(self.parsed.root, options=self.options)
        return self._path

    def find(self, document: Any) -> list[Any]:
        return self.path().find(document)

    def find_nodes(self, document: Any) -> list[Node]:
        return self.path().find_nodes(document)
