import pytest

from jsonpathpy.ast import ChildName, Root
from jsonpathpy.diagnostics import Diagnostic, PathSyntaxError, first_error
from jsonpathpy.parser import ParseMode, ParserOptions, parse, parse_result
from jsonpathpy.text import TextRange


def test_parse_result_exposes_green_diagnostics_and_error_state() -> None:
    result = parse_result("$.a")

    assert result.green_root() is result.parsed.root
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.source_text == "$.a"
    assert result.options == ParserOptions()


def test_parse_result_caches_lowered_path() -> None:
    result = parse_result("$.a")

    first = result.path()
    second = result.path()
    assert first is second
    assert first.selectors == (Root(), ChildName("a"))


def test_parse_result_path_raises_for_invalid_source() -> None:
    result = parse_result("$.")

    assert result.has_errors is True
    with pytest.raises(PathSyntaxError) as exc_info:
        result.path()
    assert exc_info.value.offset == 2


def test_parse_result_find_evaluates_against_documents() -> None:
    result = parse_result("$.a[*]")

    assert result.find({"a": [1, 2]}) == [1, 2]
    assert result.find({"a": {"x": 3}}) == [3]
    assert [node.path for node in result.find_nodes({"a": [1]})] == ["$['a'][0]"]


def test_parse_result_modes_match_parse_contract() -> None:
    source = "$..a"

    extended_result = parse_result(source)
    restricted_result = parse_result(source, mode=ParseMode.RESTRICTED)

    assert extended_result.diagnostics == parse(source).diagnostics
    assert restricted_result.diagnostics == parse(source, mode=ParseMode.RESTRICTED).diagnostics
    assert extended_result.has_errors is False
    assert restricted_result.has_errors is True
    assert restricted_result.options.mode == ParseMode.RESTRICTED


def test_parse_result_for_empty_source() -> None:
    result = parse_result("")

    assert result.has_errors is True
    assert result.diagnostics[0].code == "PARSER_EXPECTED_ROOT"
    assert result.green_root().text_with_trivia == ""


def test_syntax_error_reports_earliest_error_diagnostic() -> None:
    warning = Diagnostic(code="W", message="note", range=TextRange(0, 1), severity="warning")
    later = Diagnostic(code="LATER", message="later", range=TextRange(5, 6))
    earlier = Diagnostic(code="EARLIER", message="earlier", range=TextRange(2, 3))

    assert first_error([warning, later, earlier]) is earlier
    assert first_error([warning]) is None

    error = PathSyntaxError("$.abcdef", [warning, later, earlier])
    assert error.code == "EARLIER"
    assert error.offset == 2
    assert error.diagnostics == [warning, later, earlier]

    with pytest.raises(ValueError, match="at least one error"):
        PathSyntaxError("$", [warning])
