"""Single-character name generators for nodes."""
from __future__ import annotations


def _char_range(first: str, last: str) -> list:
    # skips unassigned code points (e.g. U+03A2 between the Greek capitals)
    return [c for c in map(chr, range(ord(first), ord(last) + 1)) if c.isprintable()]


LATIN = _char_range("A", "Z") + _char_range("a", "z")
GREEK = _char_range("α", "ω") + _char_range("Α", "Ω")
EMOTICON = _char_range("\U0001F600", "\U0001F64F") + _char_range("\U0001F920", "\U0001F9FF")


def _take(alphabet: list, count: int, label: str) -> list:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count > len(alphabet):
        raise ValueError(f"the number of {label} names requested is too high (max {len(alphabet)})")
    return alphabet[:count]


def latin(count: int) -> list:
    """
    First ``count`` letters of the Latin alphabet, upper case first.

    Raises
    ------
    ValueError
        If more than 52 names are requested.
    """
    return _take(LATIN, count, "latin")


def greek(count: int) -> list:
    """First ``count`` letters of the Greek alphabet, lower case first (at most 49)."""
    return _take(GREEK, count, "greek")


def emoticon(count: int) -> list:
    """First ``count`` emoticon characters."""
    return _take(EMOTICON, count, "emoticon")
