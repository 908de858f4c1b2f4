"""Parser events and their replay into a tree sink.

The grammar only ever re-parents one node: a slice start index that turns out
to be followed by `:` is wrapped in a slice node with `precede`. The start
event of the preceded node records the distance to its new parent, and replay
opens that parent first.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from jsonpathpy.syntax import PathSyntaxKind
from jsonpathpy.text import TextSize

if TYPE_CHECKING:
    from jsonpathpy.parser.tree_sink import LosslessTreeSink


@dataclass(frozen=True, slots=True)
class StartEvent:
    # TOMBSTONE until the marker is completed
    kind: PathSyntaxKind
    forward_parent: int | None = None

    @staticmethod
    def pending() -> "StartEvent":
        return StartEvent(kind=PathSyntaxKind.TOMBSTONE)


@dataclass(frozen=True, slots=True)
class FinishEvent:
    pass


@dataclass(frozen=True, slots=True)
class TokenEvent:
    kind: PathSyntaxKind
    end: TextSize


Event: TypeAlias = StartEvent | FinishEvent | TokenEvent


def replay_events(sink: "LosslessTreeSink", events: Sequence[Event]) -> None:
    adopted: set[int] = set()
    for pos, event in enumerate(events):
        match event:
            case StartEvent() if pos in adopted:
                continue
            case StartEvent():
                for kind in _open_order(events, pos, adopted):
                    sink.start_node(kind)
            case FinishEvent():
                sink.finish_node()
            case TokenEvent(kind=kind, end=end):
                sink.token(kind, end)


def _open_order(events: Sequence[Event], pos: int, adopted: set[int]) -> list[PathSyntaxKind]:
    """Kinds to open at `pos`, outermost forward parent first."""
    kinds: list[PathSyntaxKind] = []
    while True:
        event = events[pos]
        if not isinstance(event, StartEvent):
            raise RuntimeError(f"forward_parent must point to a StartEvent, found {event!r} at {pos}")
        if event.kind == PathSyntaxKind.TOMBSTONE:
            raise RuntimeError(f"Marker started at event {pos} was never completed")
        kinds.append(event.kind)
        if event.forward_parent is None:
            return kinds[::-1]
        pos += event.forward_parent
        adopted.add(pos)
