"""Eulerian path or cycle (Hierholzer), animated on a copy."""
from __future__ import annotations

from ..utils import colors
from ._utils import require_connected

START_COLOR = (0, 255, 0)


def _start(graph, directed):
    # node the walk must start from, or None when no Eulerian walk exists
    nodes = graph.nodes()
    out_deg = {n: len(graph.neighbors(n)) for n in nodes}
    if directed:
        in_deg = dict.fromkeys(nodes, 0)
        for n in nodes:
            for m in graph.neighbors(n):
                in_deg[m] += 1
        surplus = {n: out_deg[n] - in_deg[n] for n in nodes}
        starts = [n for n in nodes if surplus[n] == 1]
        ends = [n for n in nodes if surplus[n] == -1]
        if any(surplus.values()):
            if len(starts) == 1 and len(ends) == 1 and all(abs(s) <= 1 for s in surplus.values()):
                return starts[0]
            return None
    else:
        odd = [n for n in nodes if out_deg[n] % 2]
        if len(odd) == 2:
            return odd[0]
        if odd:
            return None
    return next((n for n in nodes if out_deg[n]), nodes[0])


def hierholzer(graph):
    """
    Eulerian path (or cycle) through every link exactly once.

    In an undirected graph every link is walked once in either direction. As
    soon as one link is one-way the graph is treated as directed: links are
    walked in their direction and a bidirectional link counts as two opposite
    arcs.

    Parameters
    ----------
    graph : Graph
        Source graph (not mutated).

    Returns
    -------
    tuple[Graph, list[str]]
        Animated copy (the start label colored with ``START_COLOR``, walked
        links stroked with successive palette colors) and the walk as a node
        sequence. A cycle ends on its first node. The walk is empty when no
        Eulerian path exists.

    Raises
    ------
    ValueError
        If the graph is not connected (ignoring link direction).
    """
    require_connected(graph, "build an Eulerian path")
    eg = graph.copy()
    if not eg.order():
        return eg, []

    directed = eg.is_directed()
    start = _start(eg, directed)
    if start is None:
        return eg, []

    remaining = {n: eg.neighbors(n) for n in eg.nodes()}
    stack = [start]
    walk = []
    while stack:
        a = stack[-1]
        if remaining[a]:
            b = remaining[a].pop(0)
            if not directed:
                remaining[b].remove(a)
            stack.append(b)
        else:
            walk.append(stack.pop())
    walk.reverse()

    eg.color_label(start, START_COLOR)
    palette = colors.palette()
    for a, b in zip(walk, walk[1:]):
        eg.color_link(a, b, next(palette))
    return eg, walk
