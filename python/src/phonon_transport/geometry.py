"""Axis-aligned rectangle primitive for 2-D phonon cells.

A rectangle spans [0, length] along x and [0, width] along y in its own
local frame. Cells store phonon coordinates in that frame.
"""


class Rectangle:
    """A rectangle with fixed, read-only extents."""

    def __init__(self, length: float, width: float):
        if not (length > 0.0 and width > 0.0):
            raise ValueError(f"Rectangle extents must be positive, got {length} x {width}")
        self._length = float(length)
        self._width = float(width)

    @property
    def length(self) -> float:
        return self._length

    @property
    def width(self) -> float:
        return self._width

    @property
    def area(self) -> float:
        return self._length * self._width

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) lies strictly inside the rectangle."""
        return 0.0 < x < self._length and 0.0 < y < self._width

