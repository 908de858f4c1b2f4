import logging

import pytest

from jsonpathpy import PathSyntaxError, find, find_nodes, parse_path
from jsonpathpy.parser import ParseMode, ParserOptions, parse_result
from jsonpathpy.pipeline import run_query


def test_run_query_returns_nodes_and_values() -> None:
    result = run_query("$.a[*]", {"a": [1, 2]})

    assert result.has_errors is False
    assert result.diagnostics == []
    assert result.values == [1, 2]
    assert [node.path for node in result.nodes] == ["$['a'][0]", "$['a'][1]"]


def test_run_query_reports_syntax_errors_without_raising() -> None:
    result = run_query("$[1:2:0x]", [1, 2, 3])

    assert result.has_errors is True
    assert result.nodes == []
    assert result.values == []
    assert [d.code for d in result.diagnostics] == ["PARSER_EXPECTED_TOKEN"]
    assert result.diagnostics[0].offset == 6


def test_run_query_reuses_provided_parse_result() -> None:
    parsed = parse_result("$.a")

    first = run_query("ignored", {"a": 1}, parse=parsed)
    second = run_query("ignored", {"a": 2}, parse=parsed)

    assert first.parse is parsed
    assert second.parse is parsed
    assert first.values == [1]
    assert second.values == [2]


def test_run_query_rejects_parse_with_mode_or_options() -> None:
    parsed = parse_result("$.a")

    try:
        run_query("$.a", {}, parse=parsed, mode=ParseMode.RESTRICTED)
    except ValueError as exc:
        assert "Pass either parse or options/mode, not both" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing parse and mode together")

    with pytest.raises(ValueError, match="not both"):
        run_query("$.a", {}, ParserOptions(), parse=parsed)


def test_run_query_respects_mode() -> None:
    result = run_query("$..a", {"a": 1}, mode=ParseMode.RESTRICTED)

    assert result.has_errors is True
    assert result.diagnostics[0].code == "PARSER_UNSUPPORTED_SELECTOR"


def test_find_and_find_nodes_raise_on_syntax_errors() -> None:
    with pytest.raises(PathSyntaxError) as exc_info:
        find("$.", {"a": 1})
    assert exc_info.value.offset == 2

    with pytest.raises(PathSyntaxError):
        find_nodes("$[01]", [1])


def test_find_with_quoted_escape() -> None:
    assert find("$['a b','c']", {"a b": 1, "c": 2}) == [1, 2]


def test_find_nodes_exposes_locations() -> None:
    (node,) = find_nodes("$.a[1]", {"a": [0, 5]})

    assert node.value == 5
    assert node.location == ("a", 1)


def test_parse_path_accepts_mode_keyword() -> None:
    assert parse_path("$[*]", mode=ParseMode.EXTENDED).find([1]) == [1]


def test_rejected_paths_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="jsonpathpy"):
        with pytest.raises(PathSyntaxError):
            parse_path("$.")

    assert any("Rejected path expression" in record.getMessage() for record in caplog.records)


def test_evaluation_match_counts_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="jsonpathpy"):
        find("$.a", {"a": 1})

    assert any("matched 1 node(s)" in record.getMessage() for record in caplog.records)
