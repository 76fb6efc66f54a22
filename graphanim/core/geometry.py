from __future__ import annotations

import math
from typing import NamedTuple, Union


class Point(NamedTuple):
    """Integer position in the SVG user coordinate system."""
    x: int
    y: int

    @classmethod
    def of(cls, value) -> "Point":
        """
        Coerce ``value`` into a ``Point``.

        Parameters
        ----------
        value : Point | tuple[int, int]
            A point or any ``(x, y)`` pair of integers (floats are rounded).

        Raises
        ------
        ValueError
            If ``value`` is not a pair of numbers.
        """
        if isinstance(value, Point):
            return value
        try:
            x, y = value
            return cls(int(round(x)), int(round(y)))
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"invalid position {value!r}, expected (x, y)") from e

    def delta(self, other: "Point") -> tuple[int, int]:
        # vector from `other` to `self`
        return self.x - other.x, self.y - other.y

    def distance(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def midpoint(self, other: "Point") -> "Point":
        return Point((self.x + other.x) // 2, (self.y + other.y) // 2)


ColorLike = Union["Color", tuple, str]


class Color(NamedTuple):
    """RGB triple, each channel in ``[0, 255]``."""
    r: int
    g: int
    b: int

    @classmethod
    def of(cls, value: ColorLike) -> "Color":
        """
        Coerce ``value`` into a ``Color``.

        Accepts a ``Color``, an ``(r, g, b)`` triple, or a ``"#rrggbb"`` string.

        Raises
        ------
        ValueError
            If the value cannot be read as a color or a channel is out of range.
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            s = value.strip()
            if len(s) != 7 or not s.startswith("#"):
                raise ValueError(f"invalid color {value!r}, expected '#rrggbb'")
            try:
                channels = tuple(int(s[i:i + 2], 16) for i in (1, 3, 5))
            except ValueError as e:
                raise ValueError(f"invalid color {value!r}, expected '#rrggbb'") from e
        else:
            try:
                channels = tuple(value)
            except TypeError as e:
                raise ValueError(f"invalid color {value!r}, expected (r, g, b)") from e
        if len(channels) != 3:
            raise ValueError(f"invalid color {value!r}, expected (r, g, b)")
        for c in channels:
            if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
                raise ValueError(f"invalid color channel {c!r} in {value!r}")
        return cls(*channels)

    def svg(self) -> str:
        return f"rgb({self.r},{self.g},{self.b})"

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
