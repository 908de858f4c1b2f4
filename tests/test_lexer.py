import pytest

from jsonpathpy.lexer import Lexer, Token, TokenFlags, TokenKind, dump_tokens, token_text
from tests._debug import debug_dump_tokens
from tests._shared_cases import ALL_PATH_CASES, PathCase, case_id


def lex(text: str) -> list[Token]:
    return Lexer(text).lex()


def kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in lex(text)]


def test_full_path_token_sequence() -> None:
    src = "$..a[0,'b']"
    tokens = lex(src)
    debug_dump_tokens("full_path_token_sequence", src, tokens)

    assert [t.kind for t in tokens] == [
        TokenKind.DOLLAR,
        TokenKind.DOT_DOT,
        TokenKind.NAME,
        TokenKind.LBRACKET,
        TokenKind.INT,
        TokenKind.COMMA,
        TokenKind.STRING,
        TokenKind.RBRACKET,
        TokenKind.EOF,
    ]
    assert [token_text(src, t) for t in tokens] == ["$", "..", "a", "[", "0", ",", "'b'", "]", ""]


def test_three_dots_lex_as_descendant_then_dot() -> None:
    assert kinds("$...a") == [
        TokenKind.DOLLAR,
        TokenKind.DOT_DOT,
        TokenKind.DOT,
        TokenKind.NAME,
        TokenKind.EOF,
    ]


def test_space_runs_are_single_whitespace_token() -> None:
    tokens = lex("$[   1]")

    assert tokens[2].kind == TokenKind.WHITESPACE
    assert tokens[2].range.as_tuple() == (2, 5)
    assert tokens[2].kind.is_trivia
    assert tokens[3].kind == TokenKind.INT


def test_tab_and_newline_are_unknown_tokens() -> None:
    assert kinds("$\t\n") == [TokenKind.DOLLAR, TokenKind.UNKNOWN, TokenKind.UNKNOWN, TokenKind.EOF]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", TokenKind.INT),
        ("-1", TokenKind.INT),
        ("007", TokenKind.INT),
        ("-", TokenKind.NAME),
        ("1a", TokenKind.NAME),
        ("a1", TokenKind.NAME),
        ("-a", TokenKind.NAME),
        ("héllo", TokenKind.NAME),
    ],
)
def test_name_runs_split_into_int_and_name(text: str, expected: TokenKind) -> None:
    tokens = lex(text)

    assert tokens[0].kind == expected
    assert tokens[0].range.as_tuple() == (0, len(text))
    assert tokens[1].kind == TokenKind.EOF


def test_quoted_string_with_escaped_quote_is_one_token() -> None:
    src = r"$['a\'b']"
    tokens = lex(src)

    string = tokens[2]
    assert string.kind == TokenKind.STRING
    assert token_text(src, string) == r"'a\'b'"
    assert string.was_quoted
    assert string.flags & TokenFlags.HAS_ESCAPE
    assert not string.flags & TokenFlags.UNTERMINATED
    assert tokens[3].kind == TokenKind.RBRACKET


def test_double_quoted_string_may_contain_single_quote() -> None:
    src = "$[\"it's\"]"
    tokens = lex(src)

    assert tokens[2].kind == TokenKind.STRING
    assert token_text(src, tokens[2]) == '"it\'s"'


def test_unterminated_string_reports_lexer_diagnostic() -> None:
    src = "$['ab"
    lexer = Lexer(src)
    tokens = lexer.lex()

    assert tokens[2].kind == TokenKind.STRING
    assert tokens[2].flags & TokenFlags.UNTERMINATED
    assert tokens[3].kind == TokenKind.EOF
    assert len(lexer.diagnostics) == 1
    assert lexer.diagnostics[0].code == "LEXER_UNTERMINATED_STRING"
    assert lexer.diagnostics[0].range.as_tuple() == (2, 5)


def test_backslash_at_end_of_input_does_not_overrun() -> None:
    src = "$['\\"
    lexer = Lexer(src)
    tokens = lexer.lex()

    assert tokens[2].range.as_tuple() == (2, 4)
    assert tokens[-1].kind == TokenKind.EOF
    assert lexer.diagnostics[0].code == "LEXER_UNTERMINATED_STRING"


def test_lexer_exposes_cursor_state() -> None:
    lexer = Lexer("$.a")
    token = lexer.next_token()

    assert token.kind == TokenKind.DOLLAR
    assert lexer.current == TokenKind.DOLLAR
    assert lexer.current_range.as_tuple() == (0, 1)
    assert lexer.position == 1
    assert not lexer.is_eof

    lexer.next_token()
    lexer.next_token()
    assert lexer.is_eof
    assert lexer.next_token().kind == TokenKind.EOF


@pytest.mark.parametrize("case", ALL_PATH_CASES, ids=case_id)
def test_tokens_cover_source_losslessly(case: PathCase) -> None:
    tokens = lex(case.source)
    debug_dump_tokens(f"lossless::{case.name}", case.source, tokens)

    assert tokens[-1].kind == TokenKind.EOF
    assert "".join(token_text(case.source, t) for t in tokens) == case.source
    for previous, current in zip(tokens, tokens[1:]):
        assert previous.range.end == current.range.start


def test_dump_tokens_smoke(capsys: pytest.CaptureFixture[str]) -> None:
    src = "$['a"
    lexer = Lexer(src)
    dump_tokens(lexer.lex(), src, lexer.diagnostics)

    output = capsys.readouterr().out
    assert "DOLLAR" in output
    assert "LEXER_UNTERMINATED_STRING" in output
