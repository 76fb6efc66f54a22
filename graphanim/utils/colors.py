"""Colors used by the animated algorithms."""
from __future__ import annotations

from itertools import cycle, islice

from ..core.geometry import Color

PALETTE = (
    Color(255, 0, 0),
    Color(255, 127, 0),
    Color(255, 255, 0),
    Color(0, 255, 0),
    Color(0, 0, 255),
    Color(46, 43, 95),
    Color(139, 0, 255),
)

DEFAULT = Color(47, 79, 79)
DISABLED = Color(192, 192, 192)


def palette(count=None):
    """
    Rainbow palette.

    Parameters
    ----------
    count : int, optional
        Number of colors; the palette repeats when ``count`` exceeds it.
        When omitted, an endless iterator is returned.

    Returns
    -------
    list[Color] or Iterator[Color]
    """
    if count is None:
        return cycle(PALETTE)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return list(islice(cycle(PALETTE), count))
