"""
Connected components, animated on a copy of the input graph.

The input graph is never mutated: each function works on ``graph.copy()``
(made undirected when needed), animates the search on it and returns it with
the components. Every component ends stroked with its own palette color.
"""
from __future__ import annotations

from ..utils import colors
from ._utils import batch
from .transform import transpose, undirect

VISIT_FILL = (0, 196, 0)


def _search(cg, order):
    """Animated DFS over ``order``; return the nodes of each tree, in finishing order."""
    palette = colors.palette()
    done = set()
    components = []
    for start in order:
        if start in done:
            continue
        finished = []
        _visit(cg, start, done, finished)
        color = next(palette)
        with batch(cg):
            for node in finished:
                cg.color_node(node, color)
        components.append(finished)
    return components


def _visit(cg, node, done, finished):
    done.add(node)
    cg.fill_node(node, VISIT_FILL)
    for nbr in cg.neighbors(node):
        if nbr not in done:
            _visit(cg, nbr, done, finished)
    finished.append(node)
    with batch(cg):
        cg.fill_node(node, cg.params.color_node_fill)
        cg.color_label(node, VISIT_FILL)


def components(graph):
    """
    Connected components, ignoring link direction.

    Returns
    -------
    tuple[Graph, list[list[str]]]
        Animated copy and the components, each sorted, ordered by their
        smallest node.
    """
    cg = graph.copy()
    if cg.is_directed():
        undirect(cg)
    found = _search(cg, cg.nodes())
    return cg, sorted(sorted(c) for c in found)


def strongly_connected(graph):
    """
    Strongly connected components (Kosaraju).

    A first search records finishing order; the second one runs on the
    transposed copy in decreasing finishing order, then the copy is transposed
    back.

    Returns
    -------
    tuple[Graph, list[list[str]]]
        Animated copy and the components, each sorted, ordered by their
        smallest node.
    """
    cg = graph.copy()
    finished = [node for tree in _search(cg, cg.nodes()) for node in tree]
    with batch(cg):
        for node in cg.nodes():
            cg.color_node(node, colors.DEFAULT)
    transpose(cg)
    found = _search(cg, list(reversed(finished)))
    transpose(cg)
    return cg, sorted(sorted(c) for c in found)
