"""Parser infrastructure (token source + event-based parser + tree sink)."""

from jsonpathpy.parser.event import (
    Event,
    FinishEvent,
    StartEvent,
    TokenEvent,
    replay_events,
)
from jsonpathpy.parser.grammar import parse_path_expression
from jsonpathpy.parser.jsonpath import build_lossless_tree, parse, parse_result, resolve_options
from jsonpathpy.parser.marker import CompletedMarker, Marker
from jsonpathpy.parser.options import ParseMode, ParserOptions
from jsonpathpy.parser.parser import Parser, ParserProgress
from jsonpathpy.parser.token_source import TokenSource
from jsonpathpy.parser.tree_sink import LosslessTreeSink, ParsedGreenTree

__all__ = [
    "CompletedMarker",
    "Event",
    "FinishEvent",
    "LosslessTreeSink",
    "Marker",
    "ParseMode",
    "ParsedGreenTree",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "StartEvent",
    "TokenEvent",
    "TokenSource",
    "build_lossless_tree",
    "parse",
    "parse_path_expression",
    "parse_result",
    "replay_events",
    "resolve_options",
]
