"""Error taxonomy raised by the graph facade.

Every class derives from :class:`GraphError` and from the built-in exception a
caller would naturally expect (``KeyError`` for lookups, ``ValueError`` for
invalid input, ``RuntimeError`` for state misuse), so both
``except GraphError`` and ``except KeyError`` work.
"""
from __future__ import annotations


class GraphError(Exception):
    """
    Base class for every error raised by ``graphanim``.

    Parameters
    ----------
    action : str
        What the caller tried to do (e.g. ``"add a node"``).
    message : str
        Why it failed.
    """

    def __init__(self, action: str, message: str):
        super().__init__(action, message)
        self.action = action
        self.message = message

    def __str__(self) -> str:
        return f"cannot {self.action}: {self.message}"


class NodeNotFound(GraphError, KeyError):
    pass


class NodeAlreadyExists(GraphError, ValueError):
    pass


class InvalidNodeName(GraphError, ValueError):
    pass


class LinkNotFound(GraphError, KeyError):
    pass


class LinkAlreadyExists(GraphError, ValueError):
    pass


class InvalidLoopLink(GraphError, ValueError):
    pass


class AnimationStateMisuse(GraphError, RuntimeError):
    pass


class ClockOverflow(GraphError, OverflowError):
    pass


class ConfigError(GraphError, ValueError):
    """Raised by the text format parser; ``line_no`` is 1-based (``None`` if unknown)."""

    def __init__(self, action: str, message: str, line_no: int | None = None):
        super().__init__(action, message)
        self.line_no = line_no

    def __str__(self) -> str:
        where = f" (line {self.line_no})" if self.line_no is not None else ""
        return f"cannot {self.action}{where}: {self.message}"
