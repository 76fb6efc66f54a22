"""Visual registry, logical clock and commit pass."""
from __future__ import annotations

from .elements import LinkState, LinkVisual, NodeState, NodeVisual, Tag, next_uid
from .errors import ClockOverflow
from .geometry import Color, Point
from .layout import ForceLayout
from .svg import DEFAULT_BOUNDS, SvgEncoder

# Largest integer a browser SMIL clock represents exactly (ms).
MAX_TOTAL_DURATION = 2 ** 53 - 1


class Renderer:
    """
    Owns every visual element of one graph and turns buffered snapshot changes
    into SVG animation batches.

    Elements are keyed by their unique id; ``_node_ids`` / ``_link_ids`` map
    the *live* public names to ids. A deleted element leaves the name maps at
    once but stays in the registry until the next commit has emitted its
    fade-out, unless it was created after the last commit, in which case it is
    dropped at once.
    """

    def __init__(self, params):
        self.params = params
        self.encoder = SvgEncoder(params)
        self._nodes: dict[int, NodeVisual] = {}
        self._links: dict[int, LinkVisual] = {}
        self._node_ids: dict[str, int] = {}
        self._link_ids: dict[tuple, int] = {}
        self._node_markup: dict[int, str] = {}
        self._link_markup: dict[int, str] = {}
        self._batches: list[str] = []
        self._timeline = []
        self._header = ""
        self.total_duration = 0
        self.batch_count = 0

    # Lookups

    def node(self, name: str) -> NodeVisual:
        return self._nodes[self._node_ids[name]]

    def link(self, a: str, b: str) -> LinkVisual:
        uid = self._link_ids.get((a, b))
        if uid is None:
            uid = self._link_ids[(b, a)]
        return self._links[uid]

    def visuals(self):
        """Every registered element (links first), including ones awaiting purge."""
        return list(self._links.values()) + list(self._nodes.values())

    # Structure

    def add_node(self, name: str, center: Point | None) -> NodeVisual:
        p = self.params
        state = NodeState(
            center=center if center is not None else Point(0, 0),
            pinned=center is not None,
            fill=p.color_node_fill,
            stroke=p.color_node_stroke,
            text=p.color_text,
            stroke_width=p.stroke_width_node,
            tag=Tag.CREATED,
        )
        node = NodeVisual(next_uid(), name, state)
        self._nodes[node.uid] = node
        self._node_ids[name] = node.uid
        self._node_markup[node.uid] = self.encoder.instantiate_node(node)
        return node

    def delete_node(self, name: str) -> None:
        node = self.node(name)
        del self._node_ids[name]
        if node.created:
            self._drop(self._nodes, self._node_markup, node.uid)
        else:
            node.update(tag=Tag.DELETED)

    def add_link(self, from_node: str, to_node: str, bidirectional: bool, value: int) -> LinkVisual:
        src, dst = self.node(from_node), self.node(to_node)
        p = self.params
        state = LinkState(
            from_center=src.current.center,
            to_center=dst.current.center,
            stroke=p.color_link_stroke,
            text=p.color_text,
            stroke_width=p.stroke_width_link,
            tag=Tag.CREATED,
        )
        link = LinkVisual(next_uid(), src, dst, bidirectional, value, state)
        self._links[link.uid] = link
        self._link_ids[(from_node, to_node)] = link.uid
        self._link_markup[link.uid] = self.encoder.instantiate_link(link)
        return link

    def delete_link(self, a: str, b: str) -> None:
        link = self.link(a, b)
        del self._link_ids[(link.from_name, link.to_name)]
        if link.created:
            self._drop(self._links, self._link_markup, link.uid)
        else:
            link.update(tag=Tag.DELETED)

    @staticmethod
    def _drop(registry, markup, uid) -> None:
        # never committed, so never shown: no fade-out, no markup
        del registry[uid]
        del markup[uid]

    # Cosmetics

    def move_node(self, name: str, center: Point, pinned: bool) -> None:
        node = self.node(name)
        node.update(center=center, pinned=pinned)
        for link in self._links.values():
            if link.deleted:
                continue
            if link.from_uid == node.uid:
                link.update(from_center=center)
            if link.to_uid == node.uid:
                link.update(to_center=center)

    def pin_node(self, name: str, pinned: bool) -> None:
        self.node(name).update(pinned=pinned)

    def fill_node(self, name: str, color: Color) -> None:
        self.node(name).update(fill=color)

    def color_node(self, name: str, color: Color) -> None:
        self.node(name).update(stroke=color)

    def color_label(self, name: str, color: Color) -> None:
        self.node(name).update(text=color)

    def select_node(self, name: str, color: Color | None) -> None:
        self.node(name).update(selected=color)

    def color_link(self, a: str, b: str, color: Color) -> None:
        self.link(a, b).update(stroke=color)

    def color_link_label(self, a: str, b: str, color: Color) -> None:
        self.link(a, b).update(text=color)

    def select_link(self, a: str, b: str, color: Color | None) -> None:
        self.link(a, b).update(selected=color)

    # Layout

    def layout(self, adjacency) -> dict:
        """
        Run the force layout on the live nodes and write the result to ``current``.

        Parameters
        ----------
        adjacency : Mapping[str, Iterable[str]]
            Undirected view of the live structure.

        Returns
        -------
        dict[str, Point]
            Positions assigned to the unpinned nodes.
        """
        nodes = {name: self.node(name).current for name in adjacency}
        engine = ForceLayout(self.params.radius_node)
        placed = engine.run(
            adjacency,
            {name: s.center for name, s in nodes.items()},
            {name: s.pinned for name, s in nodes.items()},
        )
        for name, center in placed.items():
            self.move_node(name, center, pinned=False)
        return placed

    # Clock

    def check_clock(self, duration: int) -> None:
        if self.total_duration + duration > MAX_TOTAL_DURATION:
            raise ClockOverflow(
                "advance the animation clock",
                f"{self.total_duration} + {duration} ms exceeds {MAX_TOTAL_DURATION} ms",
            )

    def sleep(self, duration: int) -> None:
        self.total_duration += duration

    # Commit

    def _bounds(self):
        before, after = [], []
        for node in self._nodes.values():
            if node.current.tag is not Tag.CREATED:
                before.append(node.previous.center)
            if node.current.tag is not Tag.DELETED:
                after.append(node.current.center)

        def box(points):
            if not points:
                return None
            xs = [pt.x for pt in points]
            ys = [pt.y for pt in points]
            return min(xs), max(xs), min(ys), max(ys)

        after_box = box(after) or DEFAULT_BOUNDS
        before_box = box(before) or after_box
        return before_box, after_box

    def commit(self, duration: int) -> list:
        """
        Encode every difference between ``previous`` and ``current`` as one batch.

        Every primitive is stamped ``begin = total_duration`` and
        ``dur = duration``; afterwards the clock advances by ``duration``,
        ``previous`` catches up with ``current``, creation tags are cleared and
        deleted elements are purged.

        Returns
        -------
        list[Primitive]
            Primitives of this batch (possibly empty).
        """
        batch = self.batch_count
        begin = self.total_duration

        before, after = self._bounds()
        primitives = []
        if not self._header:
            self._header = self.encoder.header(after)
        else:
            primitives.extend(self.encoder.viewbox_primitives(before, after, batch, begin, duration))
        for link in self._links.values():
            primitives.extend(self.encoder.link_primitives(link, batch, begin, duration))
        for node in self._nodes.values():
            primitives.extend(self.encoder.node_primitives(node, batch, begin, duration))

        self._batches.append("".join(self.encoder.markup(p) for p in primitives))
        self._timeline.extend(primitives)
        self.total_duration += duration
        self.batch_count += 1

        for registry in (self._links, self._nodes):
            for uid in [uid for uid, v in registry.items() if v.deleted]:
                del registry[uid]
            for v in registry.values():
                v.commit()
        return primitives

    # Output

    def render(self) -> str:
        if not self._header:
            return ""
        return "".join([self._header, *self._link_markup.values(), *self._node_markup.values(), *self._batches, "</svg>\n"])

    def timeline(self) -> list:
        return list(self._timeline)
