"""Text formatting utilities for logging."""

from typing import Iterable

_CELL_GLYPHS = {0: "0", 1: "1", 2: "?"}


def format_candidate(indices: Iterable[int]) -> str:
    """Format a family of subset indices as '[0, 3, 7]'."""
    return "[" + ", ".join(str(i) for i in indices) + "]"


def format_assignment(cells: Iterable[int]) -> str:
    """Format a ternary assignment as a compact string, '?' for undecided cells.

    Position 0 is printed first, so the string reads in visiting order.
    """
    return "".join(_CELL_GLYPHS.get(int(c), "!") for c in cells)
