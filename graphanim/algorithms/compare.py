"""Graph equality and isomorphism (structure only, nothing is animated)."""
from __future__ import annotations

from networkx.algorithms import isomorphism

from ..adapters.networkx import to_nx


def equal(graph_1, graph_2, values: bool = True) -> bool:
    """
    True if both graphs have the same nodes and the same links.

    Parameters
    ----------
    graph_1, graph_2 : Graph
    values : bool, default True
        Also compare link values.
    """
    adja_1, adja_2 = graph_1.adjacency(), graph_2.adjacency()
    if values:
        return adja_1 == adja_2
    return {n: set(nbrs) for n, nbrs in adja_1.items()} == {n: set(nbrs) for n, nbrs in adja_2.items()}


def isomorphic(graph_1, graph_2):
    """
    Find a bijection between the nodes of two graphs that preserves links.

    Link direction matters (a bidirectional link must map onto a
    bidirectional link); link values are ignored.

    Returns
    -------
    dict[str, str] or None
        ``{node of graph_2: node of graph_1}`` sorted by key, or None when the
        graphs are not isomorphic.
    """
    if graph_1.sequence() != graph_2.sequence():
        return None
    matcher = isomorphism.DiGraphMatcher(to_nx(graph_1), to_nx(graph_2))
    if not matcher.is_isomorphic():
        return None
    return {n2: n1 for n1, n2 in sorted(matcher.mapping.items(), key=lambda kv: kv[1])}
