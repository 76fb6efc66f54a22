import copy
import inspect
import json
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from functools import wraps

import polars as pl

from .errors import (
    AnimationStateMisuse,
    InvalidLoopLink,
    InvalidNodeName,
    LinkAlreadyExists,
    LinkNotFound,
    NodeAlreadyExists,
    NodeNotFound,
)
from .geometry import Color, Point
from .params import RenderParams
from .renderer import Renderer


class AnimState(Enum):
    PAUSED = "PAUSED"
    RESUMED = "RESUMED"


# (operation, state) -> next state; anything missing is a misuse
_TRANSITIONS = {
    ("pause", AnimState.RESUMED): AnimState.PAUSED,
    ("resume", AnimState.PAUSED): AnimState.RESUMED,
}

_TIMELINE_SCHEMA = {
    "batch": pl.Int64,
    "kind": pl.Utf8,
    "name": pl.Utf8,
    "element": pl.Utf8,
    "target": pl.Utf8,
    "attribute": pl.Utf8,
    "begin": pl.Int64,
    "dur": pl.Int64,
    "start": pl.Utf8,
    "end": pl.Utf8,
}

_HISTORY_SCHEMA = {
    "version": pl.Int64,
    "ts_utc": pl.Utf8,
    "mono_ns": pl.Int64,
    "op": pl.Utf8,
    "payload": pl.Utf8,
}


class Graph:
    """
    Graph structure whose every change is rendered as an SVG animation.

    The graph owns an adjacency mapping (node -> neighbour -> link value), the
    single source of structural truth, and a renderer holding one visual element
    per node and link. Every mutation is routed through "buffer now, diff on
    commit": while the graph is *resumed* each mutation is committed at once as
    its own animation batch; while it is *paused* mutations accumulate and are
    committed together by :meth:`step` or :meth:`resume`.

    Parameters
    ----------
    params : RenderParams, optional
        Rendering settings (copied). Defaults to ``RenderParams()``.
    **overrides
        Individual settings applied on top of ``params``.

    Notes
    -----
    - Node names are single printable, non-blank characters.
    - A bidirectional link is stored as two mirrored adjacency entries carrying
      the same value; a one-way link as a single entry. At most one link joins a
      pair of nodes, in either direction.
    - Nodes added without a position are unpinned and placed by the force
      layout; layout passes are deferred while paused.

    See Also
    --------
    add_node, add_link, exchange_nodes, pause, resume, step, render
    """

    def __init__(self, params=None, **overrides):
        self.params = params.copy() if params is not None else RenderParams()
        self.params.update(**overrides)

        self._adja = {}  # node -> {neighbor: value}
        self._renderer = Renderer(self.params)
        self._state = AnimState.RESUMED
        self._layout_owed = False
        self._pending = False   # buffered mutations not committed yet
        self._stepped = False   # explicit step since the last pause

        # History
        self._history_enabled = True
        self._history = []
        self._version = 0
        self._history_clock0 = time.perf_counter_ns()
        self._install_history_hooks()

    # Construction

    @classmethod
    def from_config(cls, text, params=None, **overrides):
        """
        Build a graph from the text description format.

        Parameters
        ----------
        text : str
            Graph description (see :mod:`graphanim.io.config`).
        params : RenderParams, optional
        **overrides
            Rendering settings.

        Returns
        -------
        Graph
        """
        from ..io.config import loads
        return loads(text, graph=cls(params, **overrides))

    def to_config(self):
        """Serialize the structure and pinned positions to the text description format."""
        from ..io.config import dumps
        return dumps(self)

    def copy(self):
        """
        Return a fresh graph with the same structure, pinned positions and params.

        The copy carries no animation: its timeline starts with one batch that
        fades the whole structure in.
        """
        return type(self).from_config(self.to_config(), params=self.params)

    def __str__(self):
        return self.to_config()

    def __repr__(self):
        return f"Graph(order={self.order()}, size={self.size()}, state={self._state.name})"

    def __len__(self):
        return len(self._adja)

    def __contains__(self, name):
        return name in self._adja

    def __iter__(self):
        return iter(self.nodes())

    # Structure

    def add_node(self, name, position=None):
        """
        Add a node.

        Parameters
        ----------
        name : str
            Single printable character, unique in the graph.
        position : Point | tuple[int, int], optional
            Pinned position. When omitted the node is unpinned and the layout
            engine places it.

        Returns
        -------
        str
            The node name.

        Raises
        ------
        InvalidNodeName
            If ``name`` is not a single printable character.
        NodeAlreadyExists
            If the node exists.
        ValueError
            If ``position`` is not an ``(x, y)`` pair.
        """
        self._check_name(name, "add a node")
        if name in self._adja:
            raise NodeAlreadyExists("add a node", f"node '{name}' already exists")
        center = Point.of(position) if position is not None else None

        with self._changes(self.params.duration_add, layout=True):
            self._adja[name] = {}
            self._renderer.add_node(name, center)
        return name

    def delete_node(self, name):
        """
        Delete a node and, first, every link incident to it.

        Raises
        ------
        NodeNotFound
            If the node does not exist.
        """
        self._require_node(name, "delete a node")
        links = self._node_links(name)

        with self._changes(self.params.duration_delete, layout=True):
            for a, b, bidirectional, _ in links:
                self._unlink(a, b, bidirectional)
            del self._adja[name]
            self._renderer.delete_node(name)

    def add_link(self, from_node, to_node, bidirectional=True, value=0):
        """
        Add a link between two existing nodes.

        Parameters
        ----------
        from_node, to_node : str
            Endpoints.
        bidirectional : bool, default True
            Undirected link when True, one-way ``from_node -> to_node`` otherwise.
        value : int, default 0
            Link value; 0 means "no value".

        Returns
        -------
        tuple[str, str]
            ``(from_node, to_node)``.

        Raises
        ------
        NodeNotFound
            If an endpoint does not exist.
        InvalidLoopLink
            If ``from_node == to_node``.
        LinkAlreadyExists
            If the pair is already linked, in either direction.
        ValueError
            If ``value`` is not an integer.
        """
        action = "add a link"
        self._require_node(from_node, action)
        self._require_node(to_node, action)
        if from_node == to_node:
            raise InvalidLoopLink(action, f"link {from_node}{to_node} is a loop")
        if to_node in self._adja[from_node]:
            raise LinkAlreadyExists(action, f"link {from_node}{to_node} already exists")
        if from_node in self._adja[to_node]:
            raise LinkAlreadyExists(action, f"link {to_node}{from_node} already exists")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"link value must be an int, got {type(value).__name__}")

        with self._changes(self.params.duration_add, layout=True):
            self._link(from_node, to_node, bool(bidirectional), value)
        return from_node, to_node

    def delete_link(self, from_node, to_node):
        """
        Delete the link ``from_node -> to_node``.

        A bidirectional link can be deleted from either end; a one-way link only
        in its own direction.

        Raises
        ------
        NodeNotFound
            If an endpoint does not exist.
        LinkNotFound
            If there is no such link.
        """
        self._require_link(from_node, to_node, "delete a link")
        bidirectional = from_node in self._adja[to_node]

        with self._changes(self.params.duration_delete, layout=True):
            self._unlink(from_node, to_node, bidirectional)

    def exchange_nodes(self, a, b):
        """
        Swap two nodes: positions, pinned flags and every incident link.

        The change is animated in three steps: every incident link is deleted,
        the two nodes swap places, then the links are re-created with their
        endpoints remapped. While paused the three steps share one batch.

        The structure after the exchange is the image of the previous one under
        the swap, so the swapped positions are a valid layout as they are: no
        layout pass follows, and unpinned nodes stay where they were swapped to.

        Raises
        ------
        NodeNotFound
            If either node does not exist.
        """
        action = "exchange nodes"
        self._require_node(a, action)
        self._require_node(b, action)
        if a == b:
            return

        links = self._node_links(a)
        seen = {self._link_key(x, y, bi) for x, y, bi, _ in links}
        links += [lk for lk in self._node_links(b) if self._link_key(*lk[:3]) not in seen]
        swap = {a: b, b: a}
        remapped = [(swap.get(x, x), swap.get(y, y), bi, v) for x, y, bi, v in links]

        pos_a = self._renderer.node(a).current
        pos_b = self._renderer.node(b).current
        p = self.params
        self._check_clock(max(1, p.duration_delete) + max(1, p.duration_move) + max(1, p.duration_add))

        with self._changes(p.duration_delete):
            for x, y, bi, _ in links:
                self._unlink(x, y, bi)
        with self._changes(p.duration_move):
            self._renderer.move_node(a, pos_b.center, pos_b.pinned)
            self._renderer.move_node(b, pos_a.center, pos_a.pinned)
        with self._changes(p.duration_add):
            for x, y, bi, v in remapped:
                self._link(x, y, bi, v)

    # Cosmetics

    def move_node(self, name, position, pinned=True):
        """
        Move a node to ``position``.

        Parameters
        ----------
        name : str
        position : Point | tuple[int, int]
        pinned : bool, default True
            Pin the node at its new position. An unpinned node is free to be
            moved again by the next layout pass.
        """
        self._require_node(name, "move a node")
        center = Point.of(position)
        with self._changes(self.params.duration_move, layout=not pinned):
            self._renderer.move_node(name, center, bool(pinned))

    def pin_node(self, name, pinned=True):
        """Pin or unpin a node; unpinning owes a layout pass."""
        self._require_node(name, "pin a node")
        self._renderer.pin_node(name, bool(pinned))
        if not pinned:
            self._need_layout()

    def fill_node(self, name, color):
        """Change the fill color of a node."""
        self._require_node(name, "fill a node")
        color = Color.of(color)
        with self._changes(self.params.duration_color):
            self._renderer.fill_node(name, color)

    def color_node(self, name, color):
        """Change the stroke color of a node."""
        self._require_node(name, "color a node")
        color = Color.of(color)
        with self._changes(self.params.duration_color):
            self._renderer.color_node(name, color)

    def color_label(self, name, color):
        """Change the label color of a node."""
        self._require_node(name, "color a node label")
        color = Color.of(color)
        with self._changes(self.params.duration_color):
            self._renderer.color_label(name, color)

    def select_node(self, name, selected=True, color=None):
        """
        Select or deselect a node.

        A selected node is stroked with ``color`` (default
        ``params.color_tag_selected``) at twice its stroke width.
        """
        self._require_node(name, "select a node")
        tag_color = self._selection(selected, color)
        with self._changes(self.params.duration_select):
            self._renderer.select_node(name, tag_color)

    def color_link(self, a, b, color):
        """Change the stroke color of the link joining ``a`` and ``b``."""
        self._require_any_link(a, b, "color a link")
        color = Color.of(color)
        with self._changes(self.params.duration_color):
            self._renderer.color_link(a, b, color)

    def color_link_label(self, a, b, color):
        """Change the value label color of the link joining ``a`` and ``b``."""
        self._require_any_link(a, b, "color a link label")
        color = Color.of(color)
        with self._changes(self.params.duration_color):
            self._renderer.color_link_label(a, b, color)

    def select_link(self, a, b, selected=True, color=None):
        """Select or deselect the link joining ``a`` and ``b``; see :meth:`select_node`."""
        self._require_any_link(a, b, "select a link")
        tag_color = self._selection(selected, color)
        with self._changes(self.params.duration_select):
            self._renderer.select_link(a, b, tag_color)

    def layout(self):
        """Request a layout pass (run now when resumed, on the next commit when paused)."""
        self._need_layout()

    def set_param(self, name, value):
        """
        Change one rendering setting.

        Applies to elements created, and batches encoded, afterwards.

        Raises
        ------
        KeyError
            Unknown setting.
        ValueError
            Invalid value.
        """
        self.params.update(**{name: value})

    # Animation state

    @property
    def state(self):
        return self._state

    @property
    def paused(self):
        return self._state is AnimState.PAUSED

    @property
    def total_duration(self):
        """Logical clock: total duration (ms) of every committed batch and sleep."""
        return self._renderer.total_duration

    def pause(self):
        """
        Stop committing mutations one by one.

        Raises
        ------
        AnimationStateMisuse
            If the graph is already paused.
        """
        self._transition("pause")
        self._stepped = False

    def resume(self):
        """
        Commit what is pending and go back to committing each mutation at once.

        If no explicit :meth:`step` happened since :meth:`pause`, or mutations
        were buffered after the last one, a ``step(1)`` is performed first.

        Raises
        ------
        AnimationStateMisuse
            If the graph is not paused.
        """
        if self._state is not AnimState.PAUSED:
            self._transition("resume")
        if self._pending or self._layout_owed or not self._stepped:
            self._step(1)
        self._transition("resume")

    def step(self, duration):
        """
        Commit the buffered mutations as one batch of ``duration`` ms, staying paused.

        A deferred layout pass runs first. A duration of 0 counts as 1.

        Raises
        ------
        AnimationStateMisuse
            If the graph is not paused.
        ClockOverflow
            If the clock would pass ``MAX_TOTAL_DURATION``.
        ValueError
            If ``duration`` is negative or not an int.
        """
        if self._state is not AnimState.PAUSED:
            raise AnimationStateMisuse("step animation", "animation has not been paused")
        self._step(duration)

    def sleep(self, duration):
        """Advance the logical clock by ``duration`` ms without animating anything."""
        duration = self._check_duration(duration)
        self._check_clock(duration)
        self._renderer.sleep(duration)

    def _transition(self, op):
        nxt = _TRANSITIONS.get((op, self._state))
        if nxt is None:
            raise AnimationStateMisuse(
                f"{op} animation",
                f"animation is already {self._state.name.lower()}",
            )
        self._state = nxt

    def _step(self, duration):
        duration = max(1, self._check_duration(duration))
        self._check_clock(duration)
        if self._layout_owed:
            self._renderer.layout(self._undirected())
            self._layout_owed = False
        self._renderer.commit(duration)
        self._pending = False
        self._stepped = True

    @contextmanager
    def _changes(self, duration, layout=False):
        # Apply a validated change: commit it at once when resumed, buffer it when paused.
        resumed = self._state is AnimState.RESUMED
        if resumed:
            self._check_clock(max(1, duration) + (max(1, self.params.duration_move) if layout else 0))
        yield
        if resumed:
            self._renderer.commit(max(1, duration))
        else:
            self._pending = True
        if layout:
            self._need_layout()

    def _need_layout(self):
        if self._state is AnimState.RESUMED:
            if all(self._renderer.node(name).current.pinned for name in self._adja):
                return
            self._check_clock(max(1, self.params.duration_move))
            self._renderer.layout(self._undirected())
            self._renderer.commit(max(1, self.params.duration_move))
        else:
            self._layout_owed = True
            self._pending = True

    def _check_clock(self, duration):
        self._renderer.check_clock(duration)

    @staticmethod
    def _check_duration(duration):
        if isinstance(duration, bool) or not isinstance(duration, int):
            raise ValueError(f"duration must be an int (ms), got {type(duration).__name__}")
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        return duration

    # Output

    def render(self):
        """
        Return the SVG animation accumulated so far.

        Returns
        -------
        str
            One ``<svg>`` element: a view-frame declaration, one fragment per
            node and link ever created, one group of animation elements per
            committed batch. Empty until the first commit.
        """
        return self._renderer.render()

    def timeline(self, as_df=False):
        """
        Return every animation primitive emitted so far, in commit order.

        Parameters
        ----------
        as_df : bool, default False
            Return a Polars DF [DataFrame] instead of a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Columns: batch, kind, name, element, target, attribute, begin, dur,
            start, end.
        """
        records = [p._asdict() for p in self._renderer.timeline()]
        if as_df:
            return pl.DataFrame(records, schema=_TIMELINE_SCHEMA)
        return records

    # Queries

    def nodes(self):
        """Sorted list of node names."""
        return sorted(self._adja)

    def has_node(self, name):
        return name in self._adja

    def has_link(self, from_node, to_node):
        """True if ``from_node -> to_node`` can be followed (either direction for bidirectional links)."""
        return from_node in self._adja and to_node in self._adja[from_node]

    def neighbors(self, name):
        """
        Nodes reachable from ``name`` through one link.

        Raises
        ------
        NodeNotFound
        """
        self._require_node(name, "use a node")
        return sorted(self._adja[name])

    def link_value(self, from_node, to_node):
        self._require_link(from_node, to_node, "use a link")
        return self._adja[from_node][to_node]

    def adjacency(self):
        """
        Copy of the adjacency mapping.

        Returns
        -------
        dict[str, dict[str, int]]
            ``{node: {neighbor: value}}`` with sorted keys at both levels.
        """
        return {a: {b: self._adja[a][b] for b in sorted(self._adja[a])} for a in sorted(self._adja)}

    def links(self):
        """
        Every link once, as ``(from, to, bidirectional, value)``.

        Bidirectional links are reported with ``from < to``; the list is sorted.
        """
        out = []
        for a in sorted(self._adja):
            for b, value in sorted(self._adja[a].items()):
                bidirectional = a in self._adja[b]
                if bidirectional and a > b:
                    continue
                out.append((a, b, bidirectional, value))
        return out

    def degrees(self):
        """Degree of every node in the undirected view."""
        return {name: len(nbrs) for name, nbrs in self._undirected().items()}

    def sequence(self):
        """Degrees in decreasing order."""
        return sorted(self.degrees().values(), reverse=True)

    def order(self):
        return len(self._adja)

    def size(self):
        return len(self.links())

    def is_directed(self):
        """True if at least one link is one-way."""
        return any(not bi for _, _, bi, _ in self.links())

    def node_position(self, name):
        """
        Current position of a node's visual element.

        Returns
        -------
        tuple[Point, bool]
            ``(position, pinned)``.
        """
        self._require_node(name, "use a node")
        state = self._renderer.node(name).current
        return state.center, state.pinned

    def positions(self):
        return {name: self._renderer.node(name).current.center for name in self.nodes()}

    def visual(self, name, other=None):
        """Visual element of a node, or of the link joining ``name`` and ``other``."""
        if other is None:
            self._require_node(name, "use a node")
            return self._renderer.node(name)
        self._require_any_link(name, other, "use a link")
        return self._renderer.link(name, other)

    # Internals

    def _undirected(self):
        und = {name: set(nbrs) for name, nbrs in self._adja.items()}
        for a, nbrs in self._adja.items():
            for b in nbrs:
                und[b].add(a)
        return und

    def _node_links(self, name):
        # every link touching `name`, once, as (from, to, bidirectional, value)
        out = []
        for other, value in sorted(self._adja[name].items()):
            out.append((name, other, name in self._adja[other], value))
        for other in sorted(self._adja):
            if other != name and name in self._adja[other] and other not in self._adja[name]:
                out.append((other, name, False, self._adja[other][name]))
        return out

    @staticmethod
    def _link_key(a, b, bidirectional):
        return frozenset((a, b)) if bidirectional else (a, b)

    def _link(self, a, b, bidirectional, value):
        self._adja[a][b] = value
        if bidirectional:
            self._adja[b][a] = value
        self._renderer.add_link(a, b, bidirectional, value)

    def _unlink(self, a, b, bidirectional):
        del self._adja[a][b]
        if bidirectional:
            del self._adja[b][a]
        self._renderer.delete_link(a, b)

    def _selection(self, selected, color):
        if not selected:
            return None
        return Color.of(color) if color is not None else self.params.color_tag_selected

    @staticmethod
    def _check_name(name, action):
        if not isinstance(name, str) or len(name) != 1 or not name.isprintable() or name.isspace():
            raise InvalidNodeName(action, f"{name!r} is not a single printable character")

    def _require_node(self, name, action):
        if name not in self._adja:
            raise NodeNotFound(action, f"node '{name}' does not exist")

    def _require_link(self, from_node, to_node, action):
        self._require_node(from_node, action)
        self._require_node(to_node, action)
        if to_node not in self._adja[from_node]:
            raise LinkNotFound(action, f"link {from_node}{to_node} does not exist")

    def _require_any_link(self, a, b, action):
        self._require_node(a, action)
        self._require_node(b, action)
        if b not in self._adja[a] and a not in self._adja[b]:
            raise LinkNotFound(action, f"no link between {a} and {b}")

    # History

    def _utcnow_iso(self) -> str:
        return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, Enum):
            return x.name
        if isinstance(x, (set, frozenset)):
            return sorted(self._jsonify(v) for v in x)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        return f"<<{type(x).__name__}>>"

    def _log_event(self, op: str, **fields):
        self._version += 1
        if not self._history_enabled:
            return
        evt = {
            "version": self._version,
            "ts_utc": self._utcnow_iso(),
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                result = fn(*args, **kwargs)
                payload = dict(bound.arguments)
                payload["result"] = result
                self._log_event(op, **payload)
                return result
            return wrapper
        return deco

    def _install_history_hooks(self):
        # Mutating methods to wrap. Add here if you add new mutators.
        to_wrap = [
            "add_node", "delete_node", "add_link", "delete_link", "exchange_nodes",
            "move_node", "pin_node", "fill_node", "color_node", "color_label",
            "color_link", "color_link_label", "select_node", "select_link",
            "layout", "set_param", "pause", "resume", "step", "sleep",
        ]
        for name in to_wrap:
            fn = getattr(self, name)
            if getattr(fn, "__wrapped__", None) is None:
                setattr(self, name, self._log_mutation(name)(fn))

    @property
    def version(self):
        """Number of recorded mutations; bumps on every logged change."""
        return self._version

    def history(self, as_df: bool = False):
        """
        Return the append-only mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF [DataFrame] whose ``payload`` column holds
            the call arguments and result as JSON; otherwise a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes: 'version', 'ts_utc' (UTC ISO-8601), 'mono_ns'
            (monotonic nanoseconds since the graph was created), 'op', the
            bound call arguments and 'result'.

        Notes
        -----
        Failed calls raise before they are recorded.
        """
        if not as_df:
            return copy.deepcopy(self._history)
        rows = []
        for evt in self._history:
            core = {k: evt[k] for k in ("version", "ts_utc", "mono_ns", "op")}
            rest = {k: v for k, v in evt.items() if k not in core}
            rows.append({**core, "payload": json.dumps(rest, ensure_ascii=False)})
        return pl.DataFrame(rows, schema=_HISTORY_SCHEMA)

    def export_history(self, path: str):
        """
        Write the mutation history to disk.

        Parameters
        ----------
        path : str
            Output path. Supported extensions: '.parquet', '.ndjson' (a.k.a. '.jsonl'),
            '.json', '.csv'. Unknown extensions default to Parquet by appending '.parquet'.

        Returns
        -------
        int
            Number of events written. Returns 0 if the history is empty.
        """
        if not self._history:
            return 0
        path = str(path)
        p = path.lower()
        if p.endswith(".ndjson") or p.endswith(".jsonl"):
            with open(path, "w", encoding="utf-8") as f:
                for evt in self._history:
                    f.write(json.dumps(evt, ensure_ascii=False) + "\n")
            return len(self._history)
        if p.endswith(".json"):
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self._history, f, ensure_ascii=False)
            return len(self._history)
        df = self.history(as_df=True)
        if p.endswith(".csv"):
            df.write_csv(path)
            return len(df)
        if not p.endswith(".parquet"):
            path += ".parquet"
        df.write_parquet(path)
        return len(df)

    def enable_history(self, flag: bool = True):
        """Enable or disable in-memory mutation logging."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Clear the in-memory mutation log (the version counter keeps going)."""
        self._history.clear()

    def mark(self, label: str):
        """Insert a manual marker (``op='mark'``) into the mutation history."""
        self._log_event("mark", label=label)

    # Lazy NX proxy

    @property
    def nx(self):
        """
        Accessor for the lazy NX (NetworkX) proxy.
        Usage: ``G.nx.shortest_path(G, "A", "C")``, ``G.nx.is_connected(G)``.
        """
        if not hasattr(self, "_nx_proxy"):
            from ..adapters.networkx import LazyNXProxy
            self._nx_proxy = LazyNXProxy(self)
        return self._nx_proxy
