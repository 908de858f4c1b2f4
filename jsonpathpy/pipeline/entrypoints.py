"""Entrypoints that parse once and evaluate against documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from jsonpathpy.ast import parse_path
from jsonpathpy.parser import ParseMode, ParserOptions, parse_result
from jsonpathpy.pipeline.result import JsonPathParseResult
from jsonpathpy.pipeline.results import QueryRunResult

if TYPE_CHECKING:
    from jsonpathpy.evaluate import Node

logger = logging.getLogger(__name__)


def run_query(
    text: str,
    document: Any,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: JsonPathParseResult | None = None,
) -> QueryRunResult:
    """Evaluate `text` against `document`, reporting syntax errors as diagnostics."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    if resolved_parse.has_errors:
        logger.debug(
            "Skipping evaluation of %r: %d diagnostic(s)",
            resolved_parse.source_text,
            len(resolved_parse.diagnostics),
        )
        return QueryRunResult(parse=resolved_parse, nodes=[], diagnostics=resolved_parse.diagnostics)

    nodes = resolved_parse.find_nodes(document)
    return QueryRunResult(parse=resolved_parse, nodes=nodes, diagnostics=resolved_parse.diagnostics)


def find(
    text: str,
    document: Any,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[Any]:
    """Values matched by `text` in `document`; raises `PathSyntaxError` on bad input."""
    return parse_path(text, options=options, mode=mode).find(document)


def find_nodes(
    text: str,
    document: Any,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[Node]:
    return parse_path(text, options=options, mode=mode).find_nodes(document)


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: JsonPathParseResult | None,
) -> JsonPathParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)
