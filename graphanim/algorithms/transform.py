"""In-place structural transforms, animated as one batch each."""
from __future__ import annotations

from ._utils import batch


def undirect(graph):
    """
    Turn every one-way link into a bidirectional one (value kept).

    Returns
    -------
    Graph
        ``graph`` itself.
    """
    one_way = [(a, b, v) for a, b, bidirectional, v in graph.links() if not bidirectional]
    if not one_way:
        return graph
    with batch(graph):
        for a, b, value in one_way:
            graph.delete_link(a, b)
            graph.add_link(a, b, True, value)
    return graph


def transpose(graph):
    """
    Reverse every one-way link (bidirectional links are unchanged).

    Returns
    -------
    Graph
        ``graph`` itself.
    """
    one_way = [(a, b, v) for a, b, bidirectional, v in graph.links() if not bidirectional]
    if not one_way:
        return graph
    with batch(graph):
        for a, b, _ in one_way:
            graph.delete_link(a, b)
        for a, b, value in one_way:
            graph.add_link(b, a, False, value)
    return graph
