"""
Animated graph traversals.

Both traversals follow links in their direction (a bidirectional link can be
followed both ways) and animate the visit on the traversed graph: a root is
stroked with ``ROOT_COLOR``, every discovered node is selected and stroked with
the selection color, every tree link is selected, every link leading to an
already visited node is selected with ``CROSS_COLOR``.

Each traversal also builds one spanning tree per root as a new :class:`Graph`.
"""
from __future__ import annotations

from collections import deque

from ..core.errors import NodeNotFound
from ..core.geometry import Color

ROOT_COLOR = Color(0, 255, 0)
CROSS_COLOR = Color(128, 0, 0)


def _roots(graph, start):
    if start is None:
        return graph.nodes()
    if not graph.has_node(start):
        raise NodeNotFound("traverse the graph", f"node '{start}' does not exist")
    return [start]


def _new_tree(graph, root):
    from ..core.graph import Graph
    tree = Graph(params=graph.params)
    tree.add_node(root)
    return tree


def _tree_link(graph, tree, a, b):
    tree.add_node(b)
    tree.add_link(a, b, graph.has_link(b, a), graph.link_value(a, b))


def _discover(graph, a, b):
    graph.select_link(a, b)
    graph.select_node(b)
    graph.color_node(b, graph.params.color_tag_selected)


def _cross(graph, a, b):
    # a tree link seen again from its other end stays as it is
    if graph.visual(a, b).current.selected is None:
        graph.select_link(a, b, color=CROSS_COLOR)


def _visit_root(graph, root):
    graph.color_node(root, ROOT_COLOR)
    graph.select_node(root)


def dfs(graph, start=None):
    """
    Depth-first search.

    Parameters
    ----------
    graph : Graph
        Traversed (and animated) graph.
    start : str, optional
        Only traverse from this node. Otherwise every node, in name order, is
        a root unless already visited.

    Returns
    -------
    tuple[list[str], list[Graph]]
        Visit order and one spanning tree per root.

    Raises
    ------
    NodeNotFound
        If ``start`` does not exist.
    """
    visited = []
    seen = set()
    trees = []

    def visit(a, tree):
        for b in graph.neighbors(a):
            if b in seen:
                _cross(graph, a, b)
                continue
            seen.add(b)
            visited.append(b)
            _discover(graph, a, b)
            _tree_link(graph, tree, a, b)
            visit(b, tree)

    for root in _roots(graph, start):
        if root in seen:
            continue
        seen.add(root)
        visited.append(root)
        _visit_root(graph, root)
        tree = _new_tree(graph, root)
        visit(root, tree)
        trees.append(tree)
    return visited, trees


def bfs(graph, start=None):
    """
    Breadth-first search; same contract as :func:`dfs`.
    """
    visited = []
    seen = set()
    trees = []

    for root in _roots(graph, start):
        if root in seen:
            continue
        seen.add(root)
        visited.append(root)
        _visit_root(graph, root)
        tree = _new_tree(graph, root)
        queue = deque([root])
        while queue:
            a = queue.popleft()
            for b in graph.neighbors(a):
                if b in seen:
                    _cross(graph, a, b)
                    continue
                seen.add(b)
                visited.append(b)
                _discover(graph, a, b)
                _tree_link(graph, tree, a, b)
                queue.append(b)
        trees.append(tree)
    return visited, trees
