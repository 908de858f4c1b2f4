"""Typed selector AST over the path CST."""

from jsonpathpy.ast.lower import lower_tree, parse_path
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
    render_selector,
)

__all__ = [
    "ChildName",
    "Descendant",
    "DescendantTarget",
    "Index",
    "JsonPath",
    "Name",
    "Root",
    "Selector",
    "Slice",
    "Union",
    "UnionElement",
    "WildcardChild",
    "WildcardIndex",
    "lower_tree",
    "parse_path",
    "render_selector",
]
