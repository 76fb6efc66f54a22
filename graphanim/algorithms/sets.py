"""
Set operations on graphs, animated on a copy of the first operand.

Nodes and links are matched by name. Every link that an operation adds or
changes is selected, every node it adds is selected too.

Public entry points:
- union(graph_1, graph_2) -> Graph
- intersection(graph_1, graph_2) -> Graph
- complementary(graph) -> Graph
"""
from __future__ import annotations

from ._utils import batch


def _relink(g, a, b, bidirectional, value):
    g.delete_link(a, b)
    g.add_link(a, b, bidirectional, value)
    g.select_link(a, b)


def union(graph_1, graph_2):
    """
    Nodes and links of both graphs.

    A link present in both graphs keeps the value of ``graph_1``; it becomes
    bidirectional when the two graphs together link the pair both ways.
    """
    g = graph_1.copy()
    with batch(g):
        for name in graph_2.nodes():
            if g.has_node(name):
                continue
            center, pinned = graph_2.node_position(name)
            g.add_node(name, center if pinned else None)
            g.select_node(name)

        for a, b, bidirectional, value in graph_2.links():
            if g.has_link(a, b) and g.has_link(b, a):
                continue
            if g.has_link(a, b) or g.has_link(b, a):
                x, y = (a, b) if g.has_link(a, b) else (b, a)
                if graph_2.has_link(y, x):
                    _relink(g, x, y, True, g.link_value(x, y))
                continue
            g.add_link(a, b, bidirectional, value)
            g.select_link(a, b)
    return g


def intersection(graph_1, graph_2):
    """
    Nodes and links present in both graphs.

    A bidirectional link of ``graph_1`` that ``graph_2`` only has one way
    becomes one-way; values come from ``graph_1``.
    """
    g = graph_1.copy()
    with batch(g):
        for name in g.nodes():
            if not graph_2.has_node(name):
                g.delete_node(name)

        for a, b, bidirectional, value in g.links():
            forward, backward = graph_2.has_link(a, b), graph_2.has_link(b, a)
            if not bidirectional:
                if not forward:
                    g.delete_link(a, b)
            elif forward and not backward:
                _relink(g, a, b, False, value)
            elif backward and not forward:
                g.delete_link(a, b)
                g.add_link(b, a, False, value)
                g.select_link(b, a)
            elif not forward:
                g.delete_link(a, b)
    return g


def complementary(graph):
    """
    Links missing from ``graph``.

    Unlinked pairs get a bidirectional link, one-way links are reversed and
    bidirectional links are removed. New links carry no value.
    """
    g = graph.copy()
    nodes = g.nodes()
    with batch(g):
        for a, b, _, _ in g.links():
            g.delete_link(a, b)
        for i, a in enumerate(nodes):
            for b in nodes[i + 1:]:
                forward, backward = graph.has_link(a, b), graph.has_link(b, a)
                if forward and backward:
                    continue
                if forward:
                    g.add_link(b, a, False, 0)
                    g.select_link(b, a)
                elif backward:
                    g.add_link(a, b, False, 0)
                    g.select_link(a, b)
                else:
                    g.add_link(a, b, True, 0)
                    g.select_link(a, b)
    return g
