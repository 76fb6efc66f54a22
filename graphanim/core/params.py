from __future__ import annotations

from .geometry import Color

# name -> default; colors are coerced with Color.of, the rest keep their type
_DEFAULTS = {
    # animation durations (ms)
    "duration_add": 1000,
    "duration_delete": 1000,
    "duration_move": 1000,
    "duration_color": 1000,
    "duration_select": 1000,
    # colors
    "color_node_fill": Color(255, 255, 255),
    "color_node_stroke": Color(128, 139, 150),
    "color_link_stroke": Color(128, 139, 150),
    "color_text": Color(0, 0, 0),
    "color_tag_selected": Color(191, 255, 0),
    "color_tag_deleted": Color(255, 0, 0),
    # geometry
    "radius_node": 20,
    "stroke_width_node": 2,
    "stroke_width_link": 2,
    # labels
    "display_node_label": True,
    "display_link_value": True,
}


class RenderParams:
    """
    Rendering and animation settings of one graph.

    Parameters
    ----------
    **overrides
        Any subset of the settings below; everything else keeps its default.

    Notes
    -----
    - Durations are integers in milliseconds (``duration_add``, ``duration_delete``,
      ``duration_move``, ``duration_color``, ``duration_select``).
    - Colors accept anything :meth:`Color.of` accepts (``color_node_fill``,
      ``color_node_stroke``, ``color_link_stroke``, ``color_text``,
      ``color_tag_selected``, ``color_tag_deleted``).
    - ``radius_node``, ``stroke_width_node`` and ``stroke_width_link`` are
      positive integers; ``display_node_label`` and ``display_link_value`` are
      booleans.

    Raises
    ------
    KeyError
        On an unknown setting name.
    ValueError
        On a value of the wrong type or range.
    """

    def __init__(self, **overrides):
        for name, value in _DEFAULTS.items():
            object.__setattr__(self, name, value)
        self.update(**overrides)

    @staticmethod
    def names() -> list[str]:
        return list(_DEFAULTS)

    def update(self, **values) -> "RenderParams":
        # validate everything first so a bad key leaves the object untouched
        checked = {name: self._check(name, value) for name, value in values.items()}
        for name, value in checked.items():
            object.__setattr__(self, name, value)
        return self

    def __setattr__(self, name, value):
        self.update(**{name: value})

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in _DEFAULTS}

    def copy(self) -> "RenderParams":
        return RenderParams(**self.as_dict())

    def __eq__(self, other):
        if not isinstance(other, RenderParams):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        changed = {k: v for k, v in self.as_dict().items() if v != _DEFAULTS[k]}
        inner = ", ".join(f"{k}={v!r}" for k, v in changed.items())
        return f"RenderParams({inner})"

    @staticmethod
    def _check(name, value):
        if name not in _DEFAULTS:
            raise KeyError(f"Unknown render parameter '{name}'")
        default = _DEFAULTS[name]
        if isinstance(default, Color):
            return Color.of(value)
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a bool, got {type(value).__name__}")
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an int, got {type(value).__name__}")
        if name.startswith("duration_"):
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        elif value <= 0:
            raise ValueError(f"{name} must be > 0, got {value}")
        return value
