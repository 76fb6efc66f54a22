"""Degree sequences (Havel-Hakimi)."""
from __future__ import annotations

from ..utils.names import latin


def _havel_hakimi(sequence, names):
    """Links ``[(a, b), ...]`` of a simple graph with this degree sequence, or ``None``."""
    pending = list(zip(names, sequence))
    links = []
    while pending:
        pending.sort(key=lambda item: -item[1])
        node, degree = pending.pop(0)
        if degree == 0:
            continue
        if degree > len(pending):
            return None
        for k in range(degree):
            other, d = pending[k]
            if d == 0:
                return None
            pending[k] = (other, d - 1)
            links.append((node, other))
    return links


def is_valid(sequence) -> bool:
    """
    True if some simple undirected graph has this degree sequence.

    >>> is_valid([1, 1, 2])
    True
    >>> is_valid([3, 1])
    False
    """
    sequence = list(sequence)
    if any(d < 0 for d in sequence) or sum(sequence) % 2:
        return False
    return _havel_hakimi(sequence, range(len(sequence))) is not None


def complete(order: int) -> list:
    """Degree sequence of the complete graph of ``order`` nodes."""
    return [order - 1] * order


def to_graph(sequence, names=None, params=None):
    """
    Build a graph with the given degree sequence.

    Parameters
    ----------
    sequence : Iterable[int]
        Degrees, in the order of ``names``.
    names : Iterable[str], optional
        Node names; defaults to ``latin(len(sequence))``.
    params : RenderParams, optional
        Rendering settings of the new graph.

    Returns
    -------
    Graph
        Nodes and bidirectional links added in one batch (layout included).

    Raises
    ------
    ValueError
        If the sequence is not graphical, or names and sequence differ in length.
    """
    from ..core.graph import Graph

    sequence = list(sequence)
    names = list(names) if names is not None else latin(len(sequence))
    if len(names) != len(sequence):
        raise ValueError(f"{len(names)} names for a sequence of {len(sequence)} degrees")
    links = None
    if all(d >= 0 for d in sequence) and sum(sequence) % 2 == 0:
        links = _havel_hakimi(sequence, names)
    if links is None:
        raise ValueError(f"sequence {sequence} is not valid")

    graph = Graph(params)
    graph.pause()
    for name in names:
        graph.add_node(name)
    for a, b in links:
        graph.add_link(a, b)
    graph.resume()
    return graph
