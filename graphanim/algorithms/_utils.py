from contextlib import contextmanager


@contextmanager
def batch(graph):
    """Group the mutations of the block into one animation batch."""
    if graph.paused:
        yield graph
        return
    graph.pause()
    try:
        yield graph
    finally:
        graph.resume()


def undirected_neighbors(graph) -> dict:
    """``{node: sorted neighbours}`` ignoring link direction."""
    und = {name: set() for name in graph.nodes()}
    for a, b, _, _ in graph.links():
        und[a].add(b)
        und[b].add(a)
    return {name: sorted(nbrs) for name, nbrs in und.items()}


def require_connected(graph, action: str) -> None:
    """Raise ``ValueError`` unless every node is reachable, ignoring link direction."""
    nbrs = undirected_neighbors(graph)
    if not nbrs:
        return
    start = next(iter(nbrs))
    seen = {start}
    stack = [start]
    while stack:
        for b in nbrs[stack.pop()]:
            if b not in seen:
                seen.add(b)
                stack.append(b)
    if len(seen) != len(nbrs):
        raise ValueError(f"cannot {action}: the graph is not connected")
