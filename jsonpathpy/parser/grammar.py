"""Path grammar routines that emit CST events.

Productions (`@` marks atomic rules, where whitespace is not allowed):

    path            = rootSelector matcher*
    rootSelector    = "$"
    matcher         = @namedDotChild | @wildcardedDotChild | union
                    | @wildcardedIndex | @descendant
    namedDotChild   = "." childName
    wildcardedDotChild = ".*"
    childName       = char+
    union           = "[" element ("," element)* "]"
    element         = unionChild | unionArraySlice | unionArrayIndex
    unionArraySlice = sliceStart? ":" sliceEnd? (":" sliceStep?)?
    wildcardedIndex = "[*]"
    descendant      = ".." (childName | "*" | wildcardedIndex | union)
"""

from jsonpathpy.diagnostics import (
    PARSER_EXPECTED_CHILD_NAME,
    PARSER_EXPECTED_ROOT,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_UNION_ELEMENT,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNEXPECTED_WHITESPACE,
    PARSER_UNSUPPORTED_SELECTOR,
    Diagnostic,
    DiagnosticSpec,
)
from jsonpathpy.lexer import TokenFlags, TokenKind
from jsonpathpy.parser.marker import CompletedMarker
from jsonpathpy.parser.parser import Parser, ParserProgress
from jsonpathpy.syntax import LiteralError, PathSyntaxKind, decode_string_literal, parse_integer_literal

CHILD_NAME_TOKENS: frozenset[TokenKind] = frozenset({TokenKind.NAME, TokenKind.INT})

MATCHER_START_TOKENS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.DOT,
        TokenKind.DOT_DOT,
        TokenKind.LBRACKET,
    }
)


def parse_path_expression(parser: Parser) -> None:
    path = parser.start()

    root = parser.start()
    if parser.expect(TokenKind.DOLLAR, _diagnostic(parser, PARSER_EXPECTED_ROOT)):
        root.complete(parser, PathSyntaxKind.ROOT_SELECTOR)

        progress = ParserProgress()
        while parser.at_set(MATCHER_START_TOKENS):
            progress.assert_progressing(parser)
            parse_matcher(parser)
    else:
        root.complete(parser, PathSyntaxKind.ERROR)

    if not parser.at(TokenKind.EOF):
        # Fail closed: whatever follows the longest valid prefix is an error.
        parser.error(_unexpected_token(parser))
        rest = parser.start()
        while not parser.at(TokenKind.EOF):
            parser.bump()
        rest.complete(parser, PathSyntaxKind.ERROR)

    path.complete(parser, PathSyntaxKind.PATH)


def parse_matcher(parser: Parser) -> CompletedMarker:
    if parser.at(TokenKind.DOT):
        return parse_dot_child(parser)
    if parser.at(TokenKind.DOT_DOT):
        return parse_descendant(parser)
    return parse_bracketed(parser)


def parse_dot_child(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    parser.bump()
    _check_no_whitespace(parser)

    if parser.eat(TokenKind.STAR):
        return marker.complete(parser, PathSyntaxKind.WILDCARDED_DOT_CHILD)

    if parser.at_set(CHILD_NAME_TOKENS):
        parse_child_name(parser)
    else:
        parser.error(_diagnostic(parser, PARSER_EXPECTED_CHILD_NAME))
    return marker.complete(parser, PathSyntaxKind.NAMED_DOT_CHILD)


def parse_child_name(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    parser.bump()
    return marker.complete(parser, PathSyntaxKind.CHILD_NAME)


def parse_descendant(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    if not parser.options.allow_descendant:
        parser.error(_unsupported_selector(parser, "Descendant search (`..`)"))
    parser.bump()
    _check_no_whitespace(parser)

    if parser.at_set(CHILD_NAME_TOKENS):
        parse_child_name(parser)
    elif parser.at(TokenKind.STAR):
        parser.bump()
    elif parser.at(TokenKind.LBRACKET):
        parse_bracketed(parser)
    else:
        parser.error(_diagnostic(parser, PARSER_EXPECTED_CHILD_NAME))
    return marker.complete(parser, PathSyntaxKind.DESCENDANT)


def parse_bracketed(parser: Parser) -> CompletedMarker:
    """Parse `[*]` or a union; both start with `[`, so the kind is chosen after it."""
    marker = parser.start()
    parser.bump()

    if parser.at(TokenKind.STAR):
        if not parser.options.allow_wildcard_index:
            parser.error(_unsupported_selector(parser, "Wildcard index (`[*]`)"))
        _check_no_whitespace(parser)
        parser.bump()
        _check_no_whitespace(parser)
        parser.expect(TokenKind.RBRACKET, _expected_token(parser, TokenKind.RBRACKET))
        return marker.complete(parser, PathSyntaxKind.WILDCARDED_INDEX)

    progress = ParserProgress()
    while True:
        progress.assert_progressing(parser)
        if parse_union_element(parser) is None:
            break
        if parser.eat(TokenKind.COMMA):
            continue
        parser.expect(TokenKind.RBRACKET, _expected_token(parser, TokenKind.RBRACKET))
        break

    return marker.complete(parser, PathSyntaxKind.UNION)


def parse_union_element(parser: Parser) -> CompletedMarker | None:
    if parser.at(TokenKind.STRING):
        return parse_union_child(parser)

    if parser.at(TokenKind.INT):
        index = parse_integer(parser, PathSyntaxKind.UNION_ARRAY_INDEX)
        if not parser.at(TokenKind.COLON):
            return index
        index.change_kind(parser, PathSyntaxKind.SLICE_START)
        return parse_slice_rest(parser, index)

    if parser.at(TokenKind.COLON):
        return parse_slice_rest(parser, None)

    parser.error(_diagnostic(parser, PARSER_EXPECTED_UNION_ELEMENT))
    return None


def parse_slice_rest(parser: Parser, start: CompletedMarker | None) -> CompletedMarker:
    marker = start.precede(parser) if start is not None else parser.start()
    parser.bump()

    if parser.at(TokenKind.INT):
        parse_integer(parser, PathSyntaxKind.SLICE_END)
    if parser.eat(TokenKind.COLON) and parser.at(TokenKind.INT):
        parse_integer(parser, PathSyntaxKind.SLICE_STEP)

    return marker.complete(parser, PathSyntaxKind.UNION_ARRAY_SLICE)


def parse_union_child(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    if not parser.current_flags & TokenFlags.UNTERMINATED:
        try:
            decode_string_literal(
                parser.current_text,
                allow_lowercase_hex=parser.options.allow_lowercase_hex_escapes,
            )
        except LiteralError as exc:
            parser.error(exc.to_diagnostic(parser.position))
    parser.bump()
    return marker.complete(parser, PathSyntaxKind.UNION_CHILD)


def parse_integer(parser: Parser, kind: PathSyntaxKind) -> CompletedMarker:
    marker = parser.start()
    try:
        parse_integer_literal(parser.current_text, max_magnitude=parser.options.max_integer_magnitude)
    except LiteralError as exc:
        parser.error(exc.to_diagnostic(parser.position))
    parser.bump()
    return marker.complete(parser, kind)


def _check_no_whitespace(parser: Parser) -> None:
    if parser.has_preceding_trivia:
        parser.error(_diagnostic(parser, PARSER_UNEXPECTED_WHITESPACE))


def _diagnostic(parser: Parser, spec: DiagnosticSpec) -> Diagnostic:
    return Diagnostic.from_spec(spec, parser.current_range)


def _expected_token(parser: Parser, kind: TokenKind) -> Diagnostic:
    return Diagnostic.from_spec(
        PARSER_EXPECTED_TOKEN,
        parser.current_range,
        message=f"Expected token {kind.name}, found {parser.current.name}",
    )


def _unexpected_token(parser: Parser) -> Diagnostic:
    return Diagnostic.from_spec(
        PARSER_UNEXPECTED_TOKEN,
        parser.current_range,
        message=f"Unexpected token {parser.current.name}",
    )


def _unsupported_selector(parser: Parser, what: str) -> Diagnostic:
    return Diagnostic.from_spec(
        PARSER_UNSUPPORTED_SELECTOR,
        parser.current_range,
        message=f"{what} is not supported in {parser.options.mode} mode",
    )
