"""
Shared enums and constants for the phonon transport core.

Surface locations index a cell's fixed-size surface array, so their integer
values are part of the layout and must not be reordered:

  left  = 0   (x == 0)
  top   = 1   (y == width)
  right = 2   (x == length)
  bot   = 3   (y == 0)
"""

from enum import IntEnum


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

NUM_SURFACES: int = 4


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class SurfaceLocation(IntEnum):
    """Side of a rectangular cell a surface is attached to."""
    left  = 0
    top   = 1
    right = 2
    bot   = 3

    @property
    def is_vertical(self) -> bool:
        """True for the left/right sides (normal along the x axis)."""
        return self in (SurfaceLocation.left, SurfaceLocation.right)


class Axis(IntEnum):
    X = 0
    Y = 1


def location_axis(location: SurfaceLocation) -> Axis:
    """Axis normal to the given surface."""
    return Axis.X if location.is_vertical else Axis.Y
