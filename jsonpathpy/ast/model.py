"""Selector AST for path expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from jsonpathpy.lexer import is_name_char
from jsonpathpy.syntax import encode_string_literal

if TYPE_CHECKING:
    from jsonpathpy.evaluate import Node


@dataclass(frozen=True, slots=True)
class Root:
    """The leading `$`: selects the whole document."""


@dataclass(frozen=True, slots=True)
class ChildName:
    """`.name`: the member called `name` of an object."""

    name: str


@dataclass(frozen=True, slots=True)
class WildcardChild:
    """`.*`: every member value or array element."""


@dataclass(frozen=True, slots=True)
class WildcardIndex:
    """`[*]`: matches exactly like `.*`."""


@dataclass(frozen=True, slots=True)
class Name:
    """Quoted child name inside a union, e.g. `['a b']`."""

    name: str


@dataclass(frozen=True, slots=True)
class Index:
    """Array index inside a union; negative values count from the end."""

    index: int


@dataclass(frozen=True, slots=True)
class Slice:
    """Array slice `start:end:step`; `None` marks an omitted bound."""

    start: int | None = None
    end: int | None = None
    step: int | None = None


UnionElement: TypeAlias = Name | Index | Slice


@dataclass(frozen=True, slots=True)
class Union:
    """Bracketed list of elements applied in order and concatenated."""

    elements: tuple[UnionElement, ...]


DescendantTarget: TypeAlias = ChildName | WildcardChild | WildcardIndex | Union


@dataclass(frozen=True, slots=True)
class Descendant:
    """`..target`: applies `selector` at every node of each subtree, pre-order."""

    selector: DescendantTarget


Selector: TypeAlias = Root | ChildName | WildcardChild | WildcardIndex | Union | Descendant


@dataclass(frozen=True, slots=True)
class JsonPath:
    """A parsed path expression: `Root` followed by the remaining selectors."""

    selectors: tuple[Selector, ...]

    def __post_init__(self) -> None:
        if not self.selectors or not isinstance(self.selectors[0], Root):
            raise ValueError("JsonPath must start with the Root selector")
        if any(isinstance(selector, Root) for selector in self.selectors[1:]):
            raise ValueError("Root may only appear as the first selector")

    def find(self, document: Any) -> list[Any]:
        from jsonpathpy.evaluate import find

        return find(self, document)

    def find_nodes(self, document: Any) -> list[Node]:
        from jsonpathpy.evaluate import evaluate

        return evaluate(self, document)

    def __str__(self) -> str:
        return "".join(render_selector(selector) for selector in self.selectors)


def render_selector(selector: Selector) -> str:
    """Render one selector in canonical form."""
    match selector:
        case Root():
            return "$"
        case ChildName(name=name):
            return "." + name if _is_plain_name(name) else f"[{encode_string_literal(name)}]"
        case WildcardChild():
            return ".*"
        case WildcardIndex():
            return "[*]"
        case Union(elements=elements):
            return "[" + ",".join(_render_element(element) for element in elements) + "]"
        case Descendant(selector=ChildName(name=name)) if _is_plain_name(name):
            return ".." + name
        case Descendant(selector=WildcardChild()):
            return "..*"
        case Descendant(selector=ChildName(name=name)):
            return f"..[{encode_string_literal(name)}]"
        case Descendant(selector=inner):
            return ".." + render_selector(inner)
    raise TypeError(f"Unknown selector: {selector!r}")


def _render_element(element: UnionElement) -> str:
    match element:
        case Name(name=name):
            return encode_string_literal(name)
        case Index(index=index):
            return str(index)
        case Slice(start=start, end=end, step=step):
            text = f"{'' if start is None else start}:{'' if end is None else end}"
            if step is not None:
                text += f":{step}"
            return text
    raise TypeError(f"Unknown union element: {element!r}")


def _is_plain_name(name: str) -> bool:
    return bool(name) and all(is_name_char(ch) for ch in name)


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
    "render_selector",
]
