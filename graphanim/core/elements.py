"""Visual element model.

Each drawn node and link keeps three immutable snapshots of its drawing state:

- ``initial``: the value at creation, never changed afterwards (the SVG markup
  is instantiated from it, so every later motion is relative to it);
- ``previous``: the value as of the last committed animation batch;
- ``current``: the value after every buffered mutation.

Regular mutations only ever replace ``current``; the renderer's commit pass is
the only writer of ``previous``.
"""
from __future__ import annotations

import threading
from enum import Enum
from typing import NamedTuple, Optional

from .geometry import Color, Point


class Tag(Enum):
    CREATED = "CREATED"
    SELECTED = "SELECTED"
    DELETED = "DELETED"


# Process-wide element sequence: SVG ids must stay unique when several graphs
# are rendered into the same page.
_SEQ_LOCK = threading.Lock()
_SEQ = 0


def next_uid() -> int:
    global _SEQ
    with _SEQ_LOCK:
        _SEQ += 1
        return _SEQ


class NodeState(NamedTuple):
    center: Point
    pinned: bool
    fill: Color
    stroke: Color
    text: Color
    stroke_width: int
    selected: Optional[Color] = None  # selection color, None when unselected
    tag: Optional[Tag] = None         # lifecycle only: CREATED / DELETED

    def stroke_drawn(self) -> Color:
        return self.selected if self.selected is not None else self.stroke

    def width_drawn(self) -> int:
        return 2 * self.stroke_width if self.selected is not None else self.stroke_width


class LinkState(NamedTuple):
    from_center: Point
    to_center: Point
    stroke: Color
    text: Color
    stroke_width: int
    selected: Optional[Color] = None
    tag: Optional[Tag] = None

    def stroke_drawn(self) -> Color:
        return self.selected if self.selected is not None else self.stroke

    def width_drawn(self) -> int:
        return 2 * self.stroke_width if self.selected is not None else self.stroke_width

    def midpoint(self) -> Point:
        return self.from_center.midpoint(self.to_center)


class _Visual:
    __slots__ = ("uid", "initial", "previous", "current", "labelled")

    prefix = ""

    def __init__(self, uid: int, state):
        self.uid = uid
        self.labelled = False  # set when the markup carries a label
        self.initial = state
        self.previous = state
        self.current = state

    @property
    def svg_id(self) -> str:
        return f"{self.prefix}{self.uid}"

    @property
    def tag(self) -> Optional[Tag]:
        """Lifecycle tag if any, else ``Tag.SELECTED`` for a selected element."""
        if self.current.tag is not None:
            return self.current.tag
        return Tag.SELECTED if self.current.selected is not None else None

    @property
    def created(self) -> bool:
        return self.current.tag is Tag.CREATED

    @property
    def deleted(self) -> bool:
        return self.current.tag is Tag.DELETED

    def update(self, **changes) -> None:
        self.current = self.current._replace(**changes)

    def commit(self) -> None:
        # previous := current, then the creation tag has been consumed
        self.previous = self.current
        if self.current.tag is Tag.CREATED:
            self.current = self.current._replace(tag=None)


class NodeVisual(_Visual):
    __slots__ = ("name",)

    prefix = "n"

    def __init__(self, uid: int, name: str, state: NodeState):
        super().__init__(uid, state)
        self.name = name

    def __repr__(self) -> str:
        return f"NodeVisual({self.name!r}, uid={self.uid}, center={tuple(self.current.center)})"


class LinkVisual(_Visual):
    __slots__ = ("from_name", "to_name", "from_uid", "to_uid", "bidirectional", "value")

    prefix = "l"

    def __init__(self, uid: int, from_node: NodeVisual, to_node: NodeVisual,
                 bidirectional: bool, value: int, state: LinkState):
        super().__init__(uid, state)
        self.from_name = from_node.name
        self.to_name = to_node.name
        self.from_uid = from_node.uid
        self.to_uid = to_node.uid
        self.bidirectional = bidirectional
        self.value = value

    def __repr__(self) -> str:
        arrow = "-" if self.bidirectional else ">"
        return f"LinkVisual({self.from_name!r} {arrow} {self.to_name!r}, uid={self.uid})"
