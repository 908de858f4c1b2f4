"""JSONPath parser and evaluator with a lossless CST and offset-carrying diagnostics."""

from jsonpathpy.ast import JsonPath, parse_path
from jsonpathpy.diagnostics import Diagnostic, PathSyntaxError
from jsonpathpy.evaluate import Node
from jsonpathpy.parser import ParseMode, ParserOptions, parse, parse_result
from jsonpathpy.pipeline import JsonPathParseResult, QueryRunResult, find, find_nodes, run_query

__all__ = [
    "Diagnostic",
    "JsonPath",
    "JsonPathParseResult",
    "Node",
    "ParseMode",
    "ParserOptions",
    "PathSyntaxError",
    "QueryRunResult",
    "find",
    "find_nodes",
    "parse",
    "parse_path",
    "parse_result",
    "run_query",
]
