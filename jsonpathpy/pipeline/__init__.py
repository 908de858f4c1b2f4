"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jsonpathpy.parser.options import ParseMode, ParserOptions
from jsonpathpy.pipeline.result import JsonPathParseResult, ParseResultBase
from jsonpathpy.pipeline.results import QueryRunResult

if TYPE_CHECKING:
    from jsonpathpy.evaluate import Node


def run_query(
    text: str,
    document: Any,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: JsonPathParseResult | None = None,
) -> QueryRunResult:
    from jsonpathpy.pipeline.entrypoints import run_query as _run_query

    return _run_query(text, document, options=options, mode=mode, parse=parse)


def find(
    text: str,
    document: Any,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[Any]:
    from jsonpathpy.pipeline.entrypoints import find as _find

    return _find(text, document, options=options, mode=mode)


def find_nodes(
    text: str,
    document: Any,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[Node]:
    from jsonpathpy.pipeline.entrypoints import find_nodes as _find_nodes

    return _find_nodes(text, document, options=options, mode=mode)


__all__ = [
    "JsonPathParseResult",
    "ParseResultBase",
    "QueryRunResult",
    "find",
    "find_nodes",
    "run_query",
]
