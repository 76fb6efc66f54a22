from . import colors, names

__all__ = ["colors", "names"]
