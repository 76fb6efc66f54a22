try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install networkx"
    ) from e

import inspect
import warnings

from ..core.errors import NodeAlreadyExists


def to_nx(graph, *, directed: bool = True):
    """
    Export a Graph to NetworkX.

    Parameters
    ----------
    graph : Graph
        Source graph instance.
    directed : bool, default True
        If True, export as DiGraph: a bidirectional link becomes two arcs, both
        carrying ``bidirectional=True``. If False, export as an undirected Graph
        (one-way links lose their direction).

    Returns
    -------
    networkx.DiGraph | networkx.Graph
        Node attributes: ``x``, ``y``, ``pinned``. Edge attributes: ``value``,
        ``bidirectional``.
    """
    G = nx.DiGraph() if directed else nx.Graph()
    for name in graph.nodes():
        center, pinned = graph.node_position(name)
        G.add_node(name, x=center.x, y=center.y, pinned=pinned)

    for a, b, bidirectional, value in graph.links():
        G.add_edge(a, b, value=value, bidirectional=bidirectional)
        if directed and bidirectional:
            G.add_edge(b, a, value=value, bidirectional=True)
    return G


def from_nx(nxG, graph=None, *, value: str = "value", use_positions: bool = True):
    """
    Import a NetworkX graph.

    Parameters
    ----------
    nxG : networkx.Graph | networkx.DiGraph | networkx.MultiGraph | networkx.MultiDiGraph
        Source graph. Node labels must be single printable characters.
    graph : Graph, optional
        Target graph (must not contain the imported nodes). A new Graph is
        created when omitted.
    value : str, default "value"
        Edge attribute read as the link value (missing or non-integer -> 0).
    use_positions : bool, default True
        Pin nodes carrying integer ``x``/``y`` attributes with ``pinned`` not False.

    Returns
    -------
    Graph

    Raises
    ------
    NodeAlreadyExists
        If an imported node already exists in ``graph``; nothing is imported.

    Notes
    -----
    The import is one animation batch. Lossy steps emit ``RuntimeWarning``:
    nodes whose label is not a single character, self-loops and parallel
    edges are dropped. In a directed source, a pair of opposite arcs becomes
    one bidirectional link (the value of the first arc wins).
    """
    if graph is None:
        from ..core.graph import Graph
        graph = Graph()

    skipped_nodes = [n for n in nxG.nodes if not (isinstance(n, str) and len(n) == 1 and n.isprintable() and not n.isspace())]
    if skipped_nodes:
        warnings.warn(
            f"{len(skipped_nodes)} node(s) without a single-character label dropped: {skipped_nodes[:5]}",
            RuntimeWarning,
            stacklevel=2,
        )
    skipped = set(skipped_nodes)

    loops = 0
    parallel = 0
    directed = nxG.is_directed()
    seen = set()
    links = []
    for u, v, data in nxG.edges(data=True):
        if u in skipped or v in skipped:
            continue
        if u == v:
            loops += 1
            continue
        if (u, v) in seen:
            parallel += 1
            continue
        if directed and (v, u) in seen:
            # opposite arc already imported; promote it to bidirectional
            for k, (a, b, _, val) in enumerate(links):
                if (a, b) == (v, u):
                    links[k] = (a, b, True, val)
            seen.add((u, v))
            continue
        seen.add((u, v))
        if not directed:
            seen.add((v, u))
        raw = data.get(value, 0)
        links.append((u, v, not directed, raw if isinstance(raw, int) and not isinstance(raw, bool) else 0))

    if loops:
        warnings.warn(f"{loops} self-loop(s) dropped", RuntimeWarning, stacklevel=2)
    if parallel:
        warnings.warn(f"{parallel} parallel edge(s) dropped", RuntimeWarning, stacklevel=2)

    nodes = []
    for n, data in nxG.nodes(data=True):
        if n in skipped:
            continue
        position = None
        if use_positions and data.get("pinned", True):
            x, y = data.get("x"), data.get("y")
            if isinstance(x, int) and not isinstance(x, bool) and isinstance(y, int) and not isinstance(y, bool):
                position = (x, y)
        nodes.append((n, position))

    # imported links only join imported nodes, so a name clash is the only
    # precondition the target graph can break
    clash = sorted(n for n, _ in nodes if graph.has_node(n))
    if clash:
        raise NodeAlreadyExists("import a networkx graph", f"node(s) {clash} already exist")

    paused = graph.paused
    if not paused:
        graph.pause()
    try:
        for n, position in nodes:
            graph.add_node(n, position)
        # a promoted pair may have been listed one-way first
        seen_pairs = set()
        for a, b, bidirectional, val in links:
            key = frozenset((a, b))
            if key in seen_pairs:
                continue
            seen_pairs.add(key)
            graph.add_link(a, b, bidirectional, val)
    finally:
        if not paused:
            graph.resume()
    return graph


class LazyNXProxy:
    """
    Lazy, cached NX (NetworkX) adapter for one Graph.

    - On-demand conversion through :func:`to_nx`; no persistent NX graph.
    - Cache keyed by direction until the graph's ``version`` changes.
    - The Graph instance passed as an argument is replaced by the NX graph.

    Usage: ``G.nx.shortest_path(G, "A", "C")``, ``G.nx.is_connected(G, _nx_directed=False)``.
    """

    def __init__(self, owner):
        self._G = owner
        self._cache = {}  # directed -> {"nxG": nx.Graph, "version": int}
        self.cache_enabled = True

    def clear(self):
        """Drop all cached NX graphs."""
        self._cache.clear()

    def backend(self, *, directed: bool = True):
        """Return the underlying NetworkX graph built by the same cached machinery."""
        return self._get_or_make_nx(directed=directed)

    def __getattr__(self, name: str):
        nx_callable = self._resolve_nx_callable(name)

        def wrapper(*args, **kwargs):
            directed = bool(kwargs.pop("_nx_directed", True))
            nxG = self._get_or_make_nx(directed=directed)
            args = [nxG if a is self._G else a for a in args]
            kwargs = {k: (nxG if v is self._G else v) for k, v in kwargs.items()}
            return nx_callable(*args, **kwargs)

        wrapper.__name__ = name
        wrapper.__doc__ = getattr(nx_callable, "__doc__", None)
        return wrapper

    def _resolve_nx_callable(self, name: str):
        candidates = [
            nx,
            getattr(nx, "algorithms", None),
            getattr(nx.algorithms, "components", None),
            getattr(nx.algorithms, "traversal", None),
            getattr(nx.algorithms, "shortest_paths", None),
            getattr(nx, "classes", None),
        ]
        for mod in (m for m in candidates if m is not None):
            attr = getattr(mod, name, None)
            if callable(attr) and not inspect.isclass(attr):
                return attr
        raise AttributeError(f"networkx has no callable '{name}'")

    def _get_or_make_nx(self, *, directed: bool):
        version = self._G.version
        entry = self._cache.get(directed)
        if self.cache_enabled and entry is not None and entry["version"] == version:
            return entry["nxG"]
        nxG = to_nx(self._G, directed=directed)
        if self.cache_enabled:
            self._cache[directed] = {"nxG": nxG, "version": version}
        return nxG
