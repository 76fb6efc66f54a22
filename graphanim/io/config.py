"""
Line-oriented text description of a graph structure.

One statement per line, tokens separated by whitespace:

- ``A``          declares node ``A`` (placed by the layout engine);
- ``A x y``      declares node ``A`` pinned at integer coordinates ``(x, y)``
  (``A _ _`` is the same as ``A``);
- ``A - B v``    declares a bidirectional link with integer value ``v``;
- ``A > B v``    declares a one-way link ``A -> B``.

The value of a link is optional; ``_`` (or no token) means "no value" (0).
Blank lines and lines starting with ``#`` are ignored.

Loading only ever goes through the public mutation API of :class:`Graph`. The
whole text is checked before the first mutation, so a bad line leaves the
target graph untouched, and it is applied inside one pause/resume pair so it is
animated as a single batch.

Public entry points:
- loads(text, graph=None) -> Graph
- dumps(graph) -> str
- read(path, graph=None) -> Graph
- write(graph, path) -> None
"""
from __future__ import annotations

from pathlib import Path

from ..core.errors import ConfigError

_ABSENT = "_"
_ACTION = "parse graph description"


def _is_name(token: str) -> bool:
    return len(token) == 1 and token.isprintable() and not token.isspace()


def _int(token: str, what: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise ConfigError(_ACTION, f"'{token}' is an invalid {what}", line_no) from None


def _parse(text: str) -> list:
    """Turn ``text`` into a list of ``(line_no, op, args)`` statements."""
    statements = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields or fields[0].startswith("#"):
            continue

        is_link = len(fields) in (3, 4) and fields[1] in ("-", ">")
        if len(fields) not in (1, 3) and not is_link:
            raise ConfigError(_ACTION, f"line '{line.strip()}' is invalid", line_no)
        for token in (fields[0], fields[2]) if is_link else fields[:1]:
            if not _is_name(token):
                raise ConfigError(_ACTION, f"'{token}' is an invalid node name (single character required)", line_no)

        if is_link:
            value = 0
            if len(fields) == 4 and fields[3] != _ABSENT:
                value = _int(fields[3], "link value", line_no)
            statements.append((line_no, "link", (fields[0], fields[2], fields[1] == "-", value)))
        elif len(fields) == 3:
            _, x, y = fields
            if x == _ABSENT and y == _ABSENT:
                position = None
            else:
                position = (_int(x, f"x coordinate for node {fields[0]}", line_no),
                            _int(y, f"y coordinate for node {fields[0]}", line_no))
            statements.append((line_no, "node", (fields[0], position)))
        else:
            statements.append((line_no, "node", (fields[0], None)))
    return statements


def _check(statements: list, graph) -> None:
    # replay the structural preconditions of Graph on a scratch copy
    nodes = set(graph.nodes())
    pairs = {frozenset((a, b)) for a, b, _, _ in graph.links()}
    for line_no, op, args in statements:
        if op == "node":
            name = args[0]
            if name in nodes:
                raise ConfigError(_ACTION, f"node '{name}' already exists", line_no)
            nodes.add(name)
            continue
        a, b, _, _ = args
        for name in (a, b):
            if name not in nodes:
                raise ConfigError(_ACTION, f"node '{name}' does not exist", line_no)
        if a == b:
            raise ConfigError(_ACTION, f"link {a}{b} is a loop", line_no)
        if frozenset((a, b)) in pairs:
            raise ConfigError(_ACTION, f"link {a}{b} already exists", line_no)
        pairs.add(frozenset((a, b)))


def loads(text: str, graph=None):
    """
    Build (or extend) a graph from its text description.

    Parameters
    ----------
    text : str
        Graph description.
    graph : Graph, optional
        Graph to extend; a new default Graph is created when omitted.

    Returns
    -------
    Graph
        ``graph`` (or the new one).

    Raises
    ------
    ConfigError
        On the first invalid line; ``line_no`` locates it. Nothing is applied.
    """
    if graph is None:
        from ..core.graph import Graph
        graph = Graph()

    statements = _parse(text)
    _check(statements, graph)

    resumed = not graph.paused
    if resumed:
        graph.pause()
    for _, op, args in statements:
        if op == "node":
            graph.add_node(*args)
        else:
            graph.add_link(*args)
    if resumed:
        graph.resume()
    return graph


def dumps(graph) -> str:
    """
    Serialize the structure and pinned positions of ``graph``.

    Nodes come first (sorted, pinned ones with their coordinates), then links
    (sorted, bidirectional links once with the smaller name first). A zero
    value is written as ``_``.
    """
    lines = []
    for name in graph.nodes():
        center, pinned = graph.node_position(name)
        lines.append(f"{name} {center.x} {center.y}" if pinned else name)
    for a, b, bidirectional, value in graph.links():
        lines.append(f"{a} {'-' if bidirectional else '>'} {b} {value if value != 0 else _ABSENT}")
    return "".join(line + "\n" for line in lines)


def read(path, graph=None):
    """Load a graph description file (UTF-8); see :func:`loads`."""
    return loads(Path(path).read_text(encoding="utf-8"), graph=graph)


def write(graph, path) -> None:
    """Write ``dumps(graph)`` to ``path`` (UTF-8)."""
    Path(path).write_text(dumps(graph), encoding="utf-8")
