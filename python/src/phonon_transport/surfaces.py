"""Boundary conditions attached to the sides of a cell.

Three variants share a single operation, `handle_phonon(phonon) -> Cell`,
which applies the physics of the boundary to a phonon sitting exactly on it
and returns the cell that owns the phonon afterwards:

  - ReflectiveSurface: specular reflection (default for every side)
  - TransitionSurface: hands the phonon over to a neighbouring cell
  - EmitSurface:       absorbs the phonon; also a fixed-temperature source
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from .emission import quantize_emission
from .particles import Phonon
from .sensor import Table
from .types import Axis, SurfaceLocation, location_axis

if TYPE_CHECKING:
    from .cell import Cell

logger = logging.getLogger(__name__)


class ReflectiveSurface:
    """Perfectly specular wall. Diffuse reflection is not modelled."""

    def __init__(self, location: SurfaceLocation, cell: Cell):
        self.location = location
        self.cell = cell

    def handle_phonon(self, p: Phonon) -> Cell:
        dx, dy = p.get_direction()
        if location_axis(self.location) == Axis.X:
            p.set_direction(-dx, dy)
        else:
            p.set_direction(dx, -dy)
        return self.cell


class TransitionSurface:
    """Interface to an adjacent cell along the x axis.

    Cells are chained linearly, so only the x coordinate needs to be
    re-expressed in the neighbour's frame: a phonon moving right enters the
    neighbour at x = 0, a phonon moving left enters at x = neighbour.length.
    """

    def __init__(self, location: SurfaceLocation, cell: Cell):
        self.location = location
        self.cell = cell

    def handle_phonon(self, p: Phonon) -> Cell:
        dx, _ = p.get_direction()
        px = 0.0 if dx > 0 else self.cell.length
        p.set_coords(px, None)
        return self.cell


class EmitSurface:
    """Fixed-temperature wall that absorbs incident phonons and emits new ones.

    The wall temperature, emission table and emission-energy constant are
    fixed at construction. `emit_phonons` and `emit_phonons_frac` are
    recomputed every step by `set_emit_phonons`.
    """

    def __init__(self, location: SurfaceLocation, cell: Cell, temp: float):
        self.location = location
        self.cell = cell
        self._temp = temp
        self._emit_table, self._emit_energy = cell.emit_data(temp)
        self.emit_phonons = 0
        self.emit_phonons_frac = 0.0

    @property
    def temp(self) -> float:
        return self._temp

    @property
    def emit_table(self) -> Table:
        return self._emit_table

    @property
    def emit_energy(self) -> float:
        return self._emit_energy

    def handle_phonon(self, p: Phonon) -> Cell:
        p.drift_time = 0.0
        p.active = False
        return self.cell

    def get_emit_energy(self, t_eq: float, sim_time: float, length: float) -> float:
        """Energy emitted through `length` of wall over `sim_time`."""
        return self._emit_energy * length * sim_time / 4 * abs(self.temp - t_eq)

    def set_emit_phonons(self, t_eq: float, eff_energy: float,
                         time_step: float, length: float) -> None:
        energy = self.get_emit_energy(t_eq, time_step, length)
        self.emit_phonons, self.emit_phonons_frac = quantize_emission(energy, eff_energy)
        logger.debug("%s wall at T=%g: %d phonons (+%.4f)", self.location.name,
                     self.temp, self.emit_phonons, self.emit_phonons_frac)


Surface = Union[ReflectiveSurface, TransitionSurface, EmitSurface]
