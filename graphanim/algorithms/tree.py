"""
Spanning trees, animated on an undirected copy of the input graph.

Public entry points:
- minimal_spanning_tree(graph) -> Graph
- bfs_tree(graph, root) -> Graph
- layout_as_tree(graph, root) -> Graph
"""
from __future__ import annotations

import heapq
from collections import deque

from ..core.errors import NodeNotFound
from ._utils import batch, require_connected
from .transform import undirect

REACHED_COLOR = (0, 255, 0)
TREE_COLOR = (0, 192, 0)
REJECTED_COLOR = (192, 0, 0)


def _undirected_copy(graph, action):
    require_connected(graph, action)
    cg = graph.copy()
    if cg.is_directed():
        undirect(cg)
    return cg


def minimal_spanning_tree(graph):
    """
    Minimal spanning tree by link value (Prim), direction ignored.

    The search grows from the first node. Every accepted link is stroked with
    ``TREE_COLOR``; every link closing a cycle is stroked with
    ``REJECTED_COLOR`` and then deleted.

    Parameters
    ----------
    graph : Graph
        Source graph (not mutated).

    Returns
    -------
    Graph
        The tree: the animated copy with only its tree links left.

    Raises
    ------
    ValueError
        If the graph is not connected.
    """
    tg = _undirected_copy(graph, "build a spanning tree")
    if not tg.order():
        return tg

    start = tg.nodes()[0]
    visited = {start}
    heap = []

    def reach(node):
        tg.color_label(node, REACHED_COLOR)
        for nbr in tg.neighbors(node):
            if nbr not in visited:
                heapq.heappush(heap, (tg.link_value(node, nbr), node, nbr))

    tg.color_node(start, TREE_COLOR)
    reach(start)
    while heap:
        _, a, b = heapq.heappop(heap)
        if b in visited:
            tg.color_link(a, b, REJECTED_COLOR)
            tg.delete_link(a, b)
            continue
        visited.add(b)
        tg.color_link(a, b, TREE_COLOR)
        tg.color_node(b, TREE_COLOR)
        reach(b)
    return tg


def _bfs(graph, root, keep_links):
    if not graph.has_node(root):
        raise NodeNotFound("build a tree", f"node '{root}' does not exist")
    tg = _undirected_copy(graph, "build a tree")

    levels = [[root]]
    depth = {root: 0}
    queued = {root}
    done = set()
    removed = []
    queue = deque([root])
    tg.color_label(root, REACHED_COLOR)
    while queue:
        a = queue.popleft()
        queued.discard(a)
        done.add(a)
        tg.color_node(a, TREE_COLOR)
        for b in tg.neighbors(a):
            if b in done:
                continue
            if b in queued:
                removed.append((a, b, tg.link_value(a, b)))
                tg.color_link(a, b, REJECTED_COLOR)
                tg.delete_link(a, b)
                continue
            tg.color_label(b, REACHED_COLOR)
            depth[b] = depth[a] + 1
            if depth[b] == len(levels):
                levels.append([])
            levels[depth[b]].append(b)
            queued.add(b)
            queue.append(b)

    # one row per depth below the root, each row centred on it
    gap = 3 * tg.params.radius_node
    origin, _ = tg.node_position(root)
    with batch(tg):
        for d, row in enumerate(levels):
            for k, node in enumerate(row):
                x = origin.x + (2 * k - (len(row) - 1)) * gap // 2
                tg.move_node(node, (x, origin.y + d * gap))

    if keep_links:
        with batch(tg):
            for a, b, value in removed:
                tg.add_link(a, b, True, value)
    return tg


def bfs_tree(graph, root):
    """
    Breadth-first spanning tree from ``root``, drawn level by level.

    Links reaching a node already waiting in the queue are stroked with
    ``REJECTED_COLOR`` and deleted. The nodes are then pinned in rows, one
    row per depth below ``root``.

    Parameters
    ----------
    graph : Graph
        Source graph (not mutated).
    root : str
        Root of the tree.

    Returns
    -------
    Graph

    Raises
    ------
    NodeNotFound
        If ``root`` does not exist.
    ValueError
        If the graph is not connected.
    """
    return _bfs(graph, root, keep_links=False)


def layout_as_tree(graph, root):
    """Place the nodes as :func:`bfs_tree` does, then restore the removed links."""
    return _bfs(graph, root, keep_links=True)
