"""Lower a path CST into the selector AST."""

from __future__ import annotations

import logging

from jsonpathpy.ast.model import (
    ChildName,
    Descendant,
    DescendantTarget,
    Index,
    JsonPath,
    Name,
    Root,
    Selector,
    Slice,
    Union,
    UnionElement,
    WildcardChild,
    WildcardIndex,
)
from jsonpathpy.cst import GreenNode
from jsonpathpy.diagnostics import PathSyntaxError, has_errors
from jsonpathpy.parser import ParseMode, ParserOptions, parse, resolve_options
from jsonpathpy.syntax import PathSyntaxKind, decode_string_literal, parse_integer_literal

logger = logging.getLogger(__name__)


def parse_path(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> JsonPath:
    """Parse `text` into a `JsonPath`, raising `PathSyntaxError` on any error."""
    resolved_options = resolve_options(options=options, mode=mode)
    parsed = parse(text, options=resolved_options)
    if has_errors(parsed.diagnostics):
        error = PathSyntaxError(text, parsed.diagnostics)
        logger.debug("Rejected path expression %r: %s (%s)", text, error, error.code)
        raise error
    return lower_tree(parsed.root, options=resolved_options)


def lower_tree(root: GreenNode, options: ParserOptions | None = None) -> JsonPath:
    """Lower an error-free CST. ERROR nodes raise `ValueError`."""
    resolved_options = options or ParserOptions()
    path = root.first_child_node(PathSyntaxKind.PATH)
    if path is None:
        raise ValueError("CST has no PATH node")

    selectors: list[Selector] = []
    for child in path.child_nodes():
        selectors.append(_lower_matcher(child, resolved_options))
    return JsonPath(selectors=tuple(selectors))


def _lower_matcher(node: GreenNode, options: ParserOptions) -> Selector:
    match node.kind:
        case PathSyntaxKind.ROOT_SELECTOR:
            return Root()
        case PathSyntaxKind.NAMED_DOT_CHILD:
            return ChildName(name=_child_name(node))
        case PathSyntaxKind.WILDCARDED_DOT_CHILD:
            return WildcardChild()
        case PathSyntaxKind.WILDCARDED_INDEX:
            return WildcardIndex()
        case PathSyntaxKind.UNION:
            return _lower_union(node, options)
        case PathSyntaxKind.DESCENDANT:
            return Descendant(selector=_lower_descendant_target(node, options))
    raise ValueError(f"Cannot lower {node.kind.name} node: {node.text_with_trivia!r}")


def _lower_descendant_target(node: GreenNode, options: ParserOptions) -> DescendantTarget:
    target = next(node.child_nodes(), None)
    if target is None:
        if any(token.kind == PathSyntaxKind.STAR for token in node.child_tokens()):
            return WildcardChild()
        raise ValueError(f"Descendant without target: {node.text_with_trivia!r}")

    match target.kind:
        case PathSyntaxKind.CHILD_NAME:
            return ChildName(name=_token_text(target))
        case PathSyntaxKind.WILDCARDED_INDEX:
            return WildcardIndex()
        case PathSyntaxKind.UNION:
            return _lower_union(target, options)
    raise ValueError(f"Cannot lower {target.kind.name} node: {target.text_with_trivia!r}")


def _lower_union(node: GreenNode, options: ParserOptions) -> Union:
    elements: list[UnionElement] = []
    for child in node.child_nodes():
        match child.kind:
            case PathSyntaxKind.UNION_CHILD:
                elements.append(Name(name=decode_string_literal(_token_text(child))))
            case PathSyntaxKind.UNION_ARRAY_INDEX:
                elements.append(Index(index=_integer(child, options)))
            case PathSyntaxKind.UNION_ARRAY_SLICE:
                elements.append(_lower_slice(child, options))
            case _:
                raise ValueError(f"Cannot lower {child.kind.name} node: {child.text_with_trivia!r}")

    if not elements:
        raise ValueError(f"Union without elements: {node.text_with_trivia!r}")
    return Union(elements=tuple(elements))


def _lower_slice(node: GreenNode, options: ParserOptions) -> Slice:
    bounds: dict[PathSyntaxKind, int] = {}
    for child in node.child_nodes():
        bounds[child.kind] = _integer(child, options)
    return Slice(
        start=bounds.get(PathSyntaxKind.SLICE_START),
        end=bounds.get(PathSyntaxKind.SLICE_END),
        step=bounds.get(PathSyntaxKind.SLICE_STEP),
    )


def _child_name(node: GreenNode) -> str:
    name = node.first_child_node(PathSyntaxKind.CHILD_NAME)
    if name is None:
        raise ValueError(f"Dot child without a name: {node.text_with_trivia!r}")
    return _token_text(name)


def _integer(node: GreenNode, options: ParserOptions) -> int:
    return parse_integer_literal(_token_text(node), max_magnitude=options.max_integer_magnitude)


def _token_text(node: GreenNode) -> str:
    return "".join(token.text for token in node.child_tokens())
