"""Centralized path expression cases used across lexer/parser/ast tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathCase:
    name: str
    source: str
    should_parse: bool = True
    # None means RESTRICTED mode agrees with EXTENDED mode.
    restricted_should_parse: bool | None = None
    first_error_code: str | None = None
    first_error_offset: int | None = None

    @property
    def parses_in_restricted_mode(self) -> bool:
        if self.restricted_should_parse is None:
            return self.should_parse
        return self.restricted_should_parse


VALID_CASES: tuple[PathCase, ...] = (
    PathCase(name="root_only", source="$"),
    PathCase(name="dot_child", source="$.store"),
    PathCase(name="chained_dot_children", source="$.store.book.title"),
    PathCase(name="dot_child_made_of_digits", source="$.01"),
    PathCase(name="dot_child_with_dash_and_underscore", source="$.a-b_c"),
    PathCase(name="dot_child_non_ascii", source="$.héllo"),
    PathCase(name="dot_wildcard", source="$.*"),
    PathCase(name="union_single_quoted_name", source="$['a b']"),
    PathCase(name="union_double_quoted_name", source='$["a b"]'),
    PathCase(name="union_mixed_elements", source="$['a',0,1:2]"),
    PathCase(name="union_negative_index", source="$[-1]"),
    PathCase(name="union_negative_zero", source="$[-0]"),
    PathCase(name="union_slice_open_end", source="$[1:]"),
    PathCase(name="union_slice_open_start", source="$[:2]"),
    PathCase(name="union_slice_reverse", source="$[::-1]"),
    PathCase(name="union_slice_zero_step", source="$[::0]"),
    PathCase(name="union_slice_all_defaults", source="$[:]"),
    PathCase(name="union_slice_empty_step", source="$[::]"),
    PathCase(name="union_spaces_around_elements", source="$[ 'a' , 1 : 2 ]"),
    PathCase(name="spaces_around_whole_path", source=" $.a "),
    PathCase(name="space_between_matchers", source="$.a .b"),
    PathCase(name="max_safe_integer_index", source="$[9007199254740991]"),
    PathCase(name="escapes_in_single_quotes", source=r"$['A\n\\\'\/']"),
    PathCase(name="escapes_in_double_quotes", source=r'$["\"\b\f\r\t"]'),
    PathCase(name="double_quote_escape_in_single_quotes", source=r"""$['a\"b']"""),
    PathCase(name="surrogate_pair_escape", source=r"$['\uD83D\uDE00']"),
    PathCase(
        name="lower_case_hex_escape",
        source=r"$['\u00e9']",
        restricted_should_parse=False,
        first_error_code="PARSER_INVALID_ESCAPE",
        first_error_offset=3,
    ),
    PathCase(
        name="wildcard_index",
        source="$[*]",
        restricted_should_parse=False,
        first_error_code="PARSER_UNSUPPORTED_SELECTOR",
        first_error_offset=2,
    ),
    PathCase(
        name="descendant_name",
        source="$..author",
        restricted_should_parse=False,
        first_error_code="PARSER_UNSUPPORTED_SELECTOR",
        first_error_offset=1,
    ),
    PathCase(name="descendant_wildcard", source="$..*", restricted_should_parse=False),
    PathCase(name="descendant_wildcard_index", source="$..[*]", restricted_should_parse=False),
    PathCase(name="descendant_union", source="$..['a',0]", restricted_should_parse=False),
)


INVALID_CASES: tuple[PathCase, ...] = (
    PathCase(
        name="empty_expression",
        source="",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_ROOT",
        first_error_offset=0,
    ),
    PathCase(
        name="missing_root",
        source=".a",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_ROOT",
        first_error_offset=0,
    ),
    PathCase(
        name="dangling_dot",
        source="$.",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_CHILD_NAME",
        first_error_offset=2,
    ),
    PathCase(
        name="dangling_descendant",
        source="$..",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_CHILD_NAME",
        first_error_offset=3,
    ),
    PathCase(
        name="space_after_dot",
        source="$. a",
        should_parse=False,
        first_error_code="PARSER_UNEXPECTED_WHITESPACE",
        first_error_offset=3,
    ),
    PathCase(
        name="space_after_descendant",
        source="$.. a",
        should_parse=False,
        first_error_code="PARSER_UNEXPECTED_WHITESPACE",
        first_error_offset=4,
    ),
    PathCase(
        name="space_inside_wildcard_index",
        source="$[ *]",
        should_parse=False,
        first_error_code="PARSER_UNEXPECTED_WHITESPACE",
        first_error_offset=3,
    ),
    PathCase(
        name="tab_is_not_whitespace",
        source="$.a\t",
        should_parse=False,
        first_error_code="PARSER_UNEXPECTED_TOKEN",
        first_error_offset=3,
    ),
    PathCase(
        name="leading_zero_index",
        source="$[01]",
        should_parse=False,
        first_error_code="PARSER_INVALID_INTEGER",
        first_error_offset=2,
    ),
    PathCase(
        name="trailing_bracket",
        source="$.a]",
        should_parse=False,
        first_error_code="PARSER_UNEXPECTED_TOKEN",
        first_error_offset=3,
    ),
    PathCase(
        name="double_root",
        source="$$",
        should_parse=False,
        first_error_code="PARSER_UNEXPECTED_TOKEN",
        first_error_offset=1,
    ),
    PathCase(
        name="unterminated_string",
        source="$['a",
        should_parse=False,
        first_error_code="LEXER_UNTERMINATED_STRING",
        first_error_offset=2,
    ),
    PathCase(
        name="unterminated_union",
        source="$[1",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_TOKEN",
        first_error_offset=3,
    ),
    PathCase(
        name="empty_union",
        source="$[]",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_UNION_ELEMENT",
        first_error_offset=2,
    ),
    PathCase(
        name="trailing_comma_in_union",
        source="$[1,]",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_UNION_ELEMENT",
        first_error_offset=4,
    ),
    PathCase(
        name="non_integer_slice_step",
        source="$[1:2:0x]",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_TOKEN",
        first_error_offset=6,
    ),
    PathCase(
        name="dot_followed_by_bracket",
        source="$.[0]",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_CHILD_NAME",
        first_error_offset=2,
    ),
    PathCase(
        name="plus_sign_index",
        source="$[+1]",
        should_parse=False,
        first_error_code="PARSER_EXPECTED_UNION_ELEMENT",
        first_error_offset=2,
    ),
    PathCase(
        name="integer_out_of_range",
        source="$[9007199254740992]",
        should_parse=False,
        first_error_code="PARSER_INTEGER_OUT_OF_RANGE",
        first_error_offset=2,
    ),
    PathCase(
        name="unknown_escape",
        source=r"$['\x']",
        should_parse=False,
        first_error_code="PARSER_INVALID_ESCAPE",
        first_error_offset=3,
    ),
    PathCase(
        name="single_quote_escape_in_double_quotes",
        source=r"""$["\'"]""",
        should_parse=False,
        first_error_code="PARSER_INVALID_ESCAPE",
        first_error_offset=3,
    ),
    PathCase(
        name="short_hex_escape",
        source=r"$['\u12']",
        should_parse=False,
        first_error_code="PARSER_INVALID_ESCAPE",
        first_error_offset=3,
    ),
    PathCase(
        name="lone_high_surrogate",
        source=r"$['\uD83D']",
        should_parse=False,
        first_error_code="PARSER_INVALID_ESCAPE",
        first_error_offset=3,
    ),
    PathCase(
        name="lone_low_surrogate",
        source=r"$['\uDE00']",
        should_parse=False,
        first_error_code="PARSER_INVALID_ESCAPE",
        first_error_offset=3,
    ),
    PathCase(
        name="raw_control_character_in_string",
        source="$['a\nb']",
        should_parse=False,
        first_error_code="PARSER_INVALID_STRING_CHARACTER",
        first_error_offset=4,
    ),
)


ALL_PATH_CASES: tuple[PathCase, ...] = VALID_CASES + INVALID_CASES

CASE_BY_NAME: dict[str, PathCase] = {case.name: case for case in ALL_PATH_CASES}


def case_source(name: str) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: PathCase) -> str:
    return case.name
