"""Phonon state and straight-line drift."""

import math
from typing import Optional

from .rng import PhiloxRNG


class Phonon:
    """A phonon moving in a straight line at constant speed.

    Coordinates are in the local frame of the owning cell. `drift_time`
    is the time budget left in the current step; `active` becomes False
    once the phonon has been absorbed.
    """

    def __init__(self, x: float, y: float, dx: float, dy: float,
                 speed: float, drift_time: float = 0.0, active: bool = True):
        self.x = x
        self.y = y
        self.dx = dx
        self.dy = dy
        self.speed = speed
        self.drift_time = drift_time
        self.active = active

    @classmethod
    def random(cls, rng: PhiloxRNG, x: float, y: float, speed: float,
               drift_time: float = 0.0) -> 'Phonon':
        """Phonon at (x, y) with an isotropically sampled direction."""
        dx, dy = rng.sample_direction()
        return cls(x, y, dx, dy, speed, drift_time)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.dx * self.speed, self.dy * self.speed)

    def drift(self, time: float) -> None:
        """Move along the current direction for `time`; negative drifts backward."""
        self.x += self.dx * self.speed * time
        self.y += self.dy * self.speed * time

    def get_coords(self) -> tuple[float, float]:
        return (self.x, self.y)

    def set_coords(self, x: Optional[float] = None, y: Optional[float] = None) -> None:
        """Set either coordinate; None leaves that axis unchanged."""
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y

    def get_direction(self) -> tuple[float, float]:
        return (self.dx, self.dy)

    def set_direction(self, dx: float, dy: float) -> None:
        if not (math.isfinite(dx) and math.isfinite(dy)):
            raise ValueError(f"Direction must be finite, got ({dx}, {dy})")
        self.dx = dx
        self.dy = dy

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return (f"Phonon(pos=({self.x:.6g}, {self.y:.6g}), "
                f"dir=({self.dx:.6g}, {self.dy:.6g}), speed={self.speed:.6g}, "
                f"drift_time={self.drift_time:.6g}, {state})")
