from . import coloration, compare, connectivity, eulerian, sequence, sets, transform, traversal, tree

__all__ = [
    "coloration", "compare", "connectivity", "eulerian", "sequence", "sets",
    "transform", "traversal", "tree",
]
