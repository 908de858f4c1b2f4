"""Matched nodes: a document value plus where it was found."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from jsonpathpy.syntax import encode_string_literal

Location: TypeAlias = tuple[str | int, ...]


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


@dataclass(frozen=True, slots=True)
class Node:
    """A value from the document and its location from the root.

    `location` holds member names (`str`) and non-negative array offsets
    (`int`). The value is the document's own object, never a copy.
    """

    value: Any
    location: Location = ()

    def child(self, key: str | int, value: Any) -> "Node":
        return Node(value=value, location=self.location + (key,))

    @property
    def path(self) -> str:
        """Normalized path, e.g. `$['store']['book'][0]`."""
        parts = ["$"]
        for key in self.location:
            if isinstance(key, int):
                parts.append(f"[{key}]")
            else:
                parts.append(f"[{encode_string_literal(key)}]")
        return "".join(parts)
