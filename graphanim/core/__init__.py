from .elements import Tag
from .errors import (
    AnimationStateMisuse,
    ClockOverflow,
    ConfigError,
    GraphError,
    InvalidLoopLink,
    InvalidNodeName,
    LinkAlreadyExists,
    LinkNotFound,
    NodeAlreadyExists,
    NodeNotFound,
)
from .geometry import Color, Point
from .graph import AnimState, Graph
from .params import RenderParams
from .renderer import MAX_TOTAL_DURATION

__all__ = [
    "Graph", "AnimState", "RenderParams", "Point", "Color", "Tag", "MAX_TOTAL_DURATION",
    "GraphError", "NodeNotFound", "NodeAlreadyExists", "InvalidNodeName",
    "LinkNotFound", "LinkAlreadyExists", "InvalidLoopLink",
    "AnimationStateMisuse", "ClockOverflow", "ConfigError",
]
