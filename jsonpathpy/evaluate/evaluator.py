"""Apply a `JsonPath` to a document by threading a match set through its selectors."""

import logging
from collections.abc import Iterator
from typing import Any

from jsonpathpy.ast import (
    ChildName,
    Descendant,
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
from jsonpathpy.evaluate.node import Node, is_array, is_object

logger = logging.getLogger(__name__)


def evaluate(path: JsonPath, document: Any) -> list[Node]:
    """Return the nodes matched by `path`, in match order.

    Type mismatches and out-of-range access select nothing; this never raises
    for a well-formed `JsonPath`.
    """
    match_set = [Node(value=document)]
    for selector in path.selectors:
        match_set = [matched for node in match_set for matched in select(selector, node)]
        if not match_set:
            break
    logger.debug("Path %s matched %d node(s)", path, len(match_set))
    return match_set


def find(path: JsonPath, document: Any) -> list[Any]:
    return [node.value for node in evaluate(path, document)]


def select(selector: Selector, node: Node) -> Iterator[Node]:
    """Apply one selector to one node."""
    match selector:
        case Root():
            yield node
        case ChildName(name=name):
            yield from _select_name(node, name)
        case WildcardChild() | WildcardIndex():
            yield from _select_children(node)
        case Union(elements=elements):
            for element in elements:
                yield from _select_element(element, node)
        case Descendant(selector=inner):
            for visited in descendants(node):
                yield from select(inner, visited)
        case _:
            raise TypeError(f"Unknown selector: {selector!r}")


def descendants(node: Node) -> Iterator[Node]:
    """Pre-order walk of `node`'s subtree, starting with `node` itself."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        # Reversed so the first child is visited first.
        stack.extend(reversed(list(_select_children(current))))


def _select_element(element: UnionElement, node: Node) -> Iterator[Node]:
    match element:
        case Name(name=name):
            yield from _select_name(node, name)
        case Index(index=index):
            yield from _select_index(node, index)
        case Slice(start=start, end=end, step=step):
            yield from _select_slice(node, start, end, step)
        case _:
            raise TypeError(f"Unknown union element: {element!r}")


def _select_name(node: Node, name: str) -> Iterator[Node]:
    value = node.value
    if is_object(value) and name in value:
        yield node.child(name, value[name])


def _select_children(node: Node) -> Iterator[Node]:
    value = node.value
    if is_object(value):
        for key, member in value.items():
            yield node.child(key, member)
    elif is_array(value):
        for offset, element in enumerate(value):
            yield node.child(offset, element)


def _select_index(node: Node, index: int) -> Iterator[Node]:
    value = node.value
    if not is_array(value):
        return
    length = len(value)
    offset = index + length if index < 0 else index
    if 0 <= offset < length:
        yield node.child(offset, value[offset])


def _select_slice(node: Node, start: int | None, end: int | None, step: int | None) -> Iterator[Node]:
    value = node.value
    if not is_array(value) or step == 0:
        return
    # range slicing normalizes negative bounds and clamps them the same way list slicing does.
    for offset in range(len(value))[slice(start, end, step)]:
        yield node.child(offset, value[offset])
