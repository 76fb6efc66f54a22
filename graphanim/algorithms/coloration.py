"""Greedy vertex coloring (Welsh-Powell order), animated on a copy."""
from __future__ import annotations

import math

from ..utils import colors
from ._utils import batch, undirected_neighbors


def greedy(graph, arrange: bool = True):
    """
    Color the nodes so that no link joins two nodes of the same color.

    Nodes are processed by decreasing degree (then name) and each one gets the
    smallest color index unused by its already colored neighbours. Link
    direction is ignored.

    Parameters
    ----------
    graph : Graph
        Source graph (not mutated).
    arrange : bool, default True
        After coloring, move the nodes of each color class next to each other
        on a circle (pinned), one gap between classes.

    Returns
    -------
    tuple[Graph, list[list[str]]]
        Animated copy and the color classes (class ``k`` is stroked with
        ``palette()[k]``), each class in coloring order.
    """
    cg = graph.copy()
    nbrs = undirected_neighbors(cg)
    order = sorted(nbrs, key=lambda n: (-len(nbrs[n]), n))

    assigned = {}
    classes = []
    for node in order:
        used = {assigned[n] for n in nbrs[node] if n in assigned}
        k = next(i for i in range(len(classes) + 1) if i not in used)
        assigned[node] = k
        if k == len(classes):
            classes.append([])
        classes[k].append(node)

        cg.select_node(node)
        with batch(cg):
            cg.color_node(node, colors.palette(k + 1)[k])
            cg.select_node(node, False)

    if arrange and classes:
        _arrange(cg, classes)
    return cg, classes


def _arrange(cg, classes):
    slots = sum(len(c) for c in classes) + len(classes)
    radius = 1.5 * cg.params.radius_node * slots * 2 / (2 * math.pi)
    angle = 2 * math.pi / slots
    i = 0
    with batch(cg):
        for members in classes:
            for node in members:
                cg.move_node(node, (radius * math.cos(i * angle), radius * math.sin(i * angle)))
                i += 1
            i += 1
