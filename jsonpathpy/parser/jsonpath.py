"""High-level parse entrypoint for path expression text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsonpathpy.diagnostics import Diagnostic, collect_diagnostics
from jsonpathpy.lexer import Lexer, Trivia
from jsonpathpy.parser.event import Event, replay_events
from jsonpathpy.parser.grammar import parse_path_expression
from jsonpathpy.parser.options import ParseMode, ParserOptions
from jsonpathpy.parser.parser import Parser
from jsonpathpy.parser.token_source import TokenSource
from jsonpathpy.parser.tree_sink import LosslessTreeSink, ParsedGreenTree

if TYPE_CHECKING:
    from jsonpathpy.pipeline import JsonPathParseResult


def build_lossless_tree(
    text: str,
    events: list[Event],
    trivia: list[Trivia],
    diagnostics: list[Diagnostic],
) -> ParsedGreenTree:
    sink = LosslessTreeSink(text=text, trivia=trivia)
    replay_events(sink, events)
    return sink.finish(diagnostics)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedGreenTree:
    """Parse `text` into a lossless green tree.

    Never raises on malformed input: problems are reported as diagnostics and
    the offending text is kept under ERROR nodes.
    """
    resolved_options = resolve_options(options=options, mode=mode)

    lexer = Lexer(text)
    source = TokenSource(lexer)
    parser = Parser(source, options=resolved_options)

    parse_path_expression(parser)
    events, parser_diagnostics = parser.finish()
    trivia, lexer_diagnostics = source.finish()
    diagnostics = collect_diagnostics(lexer_diagnostics, parser_diagnostics)

    return build_lossless_tree(
        text=text,
        events=events,
        trivia=trivia,
        diagnostics=diagnostics,
    )


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> JsonPathParseResult:
    from jsonpathpy.pipeline import JsonPathParseResult

    resolved_options = resolve_options(options=options, mode=mode)
    parsed = parse(text, options=resolved_options)
    return JsonPathParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )
