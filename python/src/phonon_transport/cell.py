"""Rectangular transport cell.

A cell owns one surface per side, the phonons currently resident in it and
the phonons that arrived during the current step. Incoming phonons are kept
apart until `merge_incoming_phonons` so that a phonon moved into a cell
mid-sweep is not advanced twice in the same step.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import numpy.typing as npt

from .emission import EmitSurfaceData
from .errors import InvalidEmitSurfaceError, SurfaceConfigurationError
from .geometry import Rectangle
from .particles import Phonon
from .sensor import Sensor, Table
from .surfaces import EmitSurface, ReflectiveSurface, Surface, TransitionSurface
from .types import NUM_SURFACES, SurfaceLocation

logger = logging.getLogger(__name__)


def _time_to_surface(extent: float, pos: float, vel: float) -> float:
    """Time since the phonon left [0, extent] along one axis, or 0 if it did not."""
    if pos <= 0:
        return pos / vel  # pos <= 0 so vel < 0
    if pos >= extent:
        return (pos - extent) / vel  # pos > extent so vel > 0
    return 0.0


class Cell(Rectangle):
    """A rectangular subdomain with four surfaces and a phonon population."""

    def __init__(self, length: float, width: float, sensor: Sensor):
        super().__init__(length, width)
        self.sensor = sensor
        self.sensor.add_to_area(self.area)
        self.phonons: list[Phonon] = []
        self.incoming_phonons: list[Phonon] = []
        self._surfaces: list[Surface] = [
            ReflectiveSurface(SurfaceLocation(i), self) for i in range(NUM_SURFACES)
        ]

    # ------------------------------------------------------------------
    # Collaborator data
    # ------------------------------------------------------------------

    @property
    def base_table(self) -> Table:
        return self.sensor.base_table

    @property
    def scatter_table(self) -> Table:
        return self.sensor.scatter_table

    @property
    def init_temp(self) -> float:
        return self.sensor.init_temp

    def emit_data(self, temp: float) -> tuple[Table, float]:
        """Emission table and energy constant for a wall at `temp`."""
        return self.sensor.get_emit_data(temp)

    def init_energy(self, t_eq: float) -> float:
        return self.area * self.sensor.heat_capacity * abs(self.sensor.init_temp - t_eq)

    # ------------------------------------------------------------------
    # Surfaces
    # ------------------------------------------------------------------

    @property
    def surfaces(self) -> tuple[Surface, ...]:
        return tuple(self._surfaces)

    def get_surface(self, location: SurfaceLocation) -> Surface:
        return self._surfaces[location]

    def edge_length(self, location: SurfaceLocation) -> float:
        return self.width if location.is_vertical else self.length

    def set_emit_surface(self, location: SurfaceLocation, temp: float) -> EmitSurface:
        if isinstance(self._surfaces[location], TransitionSurface):
            raise InvalidEmitSurfaceError(
                f"Cannot emit from the {location.name} side: it is linked to a neighbouring cell"
            )
        surface = EmitSurface(location, self, temp)
        self._surfaces[location] = surface
        logger.info("Emitting surface at T=%g installed on %s side", temp, location.name)
        return surface

    def set_transition_surface(self, location: SurfaceLocation, cell: Cell) -> TransitionSurface:
        if cell is self:
            raise SurfaceConfigurationError("A cell cannot transition into itself")
        if not location.is_vertical:
            raise SurfaceConfigurationError(
                f"Transition surfaces are only supported on the left/right sides, got {location.name}"
            )
        if cell.width != self.width:
            raise SurfaceConfigurationError(
                f"Neighbour width {cell.width:g} does not match cell width {self.width:g}; "
                "y coordinates pass through transitions unchanged"
            )
        if isinstance(self._surfaces[location], EmitSurface):
            raise SurfaceConfigurationError(
                f"Cannot link the {location.name} side: it is an emitting surface"
            )
        surface = TransitionSurface(location, cell)
        self._surfaces[location] = surface
        logger.info("Transition surface installed on %s side", location.name)
        return surface

    def emit_surfaces(self) -> list[EmitSurface]:
        return [s for s in self._surfaces if isinstance(s, EmitSurface)]

    # ------------------------------------------------------------------
    # Emission accounting
    # ------------------------------------------------------------------

    def emit_energy(self, t_eq: float, sim_time: float) -> float:
        """Total energy emitted by this cell's emitting surfaces over `sim_time`."""
        return sum(
            s.get_emit_energy(t_eq, sim_time, self.edge_length(s.location))
            for s in self.emit_surfaces()
        )

    def set_emit_phonons(self, t_eq: float, eff_energy: float, time_step: float) -> None:
        for s in self.emit_surfaces():
            s.set_emit_phonons(t_eq, eff_energy, time_step, self.edge_length(s.location))

    def emit_phonon_data(self, rand: float) -> list[EmitSurfaceData]:
        """One emission record per emitting surface.

        The same draw `rand` decides the extra fractional phonon on every
        surface of this cell.
        """
        data = []
        for s in self.emit_surfaces():
            emit_phonons = s.emit_phonons
            if s.emit_phonons_frac >= rand:
                emit_phonons += 1
            data.append(EmitSurfaceData(s.emit_table, s.location, s.temp, emit_phonons))
        return data

    # ------------------------------------------------------------------
    # Phonon collections
    # ------------------------------------------------------------------

    def add_phonon(self, p: Phonon) -> None:
        self.phonons.append(p)

    def add_incoming_phonon(self, p: Phonon) -> None:
        self.incoming_phonons.append(p)

    def merge_incoming_phonons(self) -> None:
        self.phonons.extend(self.incoming_phonons)
        self.incoming_phonons.clear()

    def remove_inactive_phonons(self) -> int:
        before = len(self.phonons)
        self.phonons = [p for p in self.phonons if p.active]
        return before - len(self.phonons)

    def positions(self) -> npt.NDArray[np.float64]:
        """(n, 2) array of resident phonon coordinates."""
        if not self.phonons:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([p.get_coords() for p in self.phonons], dtype=np.float64)

    # ------------------------------------------------------------------
    # Boundary resolution
    # ------------------------------------------------------------------

    def move_to_nearest_surface(self, p: Phonon) -> Optional[SurfaceLocation]:
        """Drift `p` for its full drift time and back it up to the first surface crossed.

        Backtracking from the overshoot, rather than stepping forward to the
        surface, keeps the phonon from drifting past the wall through
        accumulated rounding. On a crossing, `p.drift_time` becomes the
        unused time and the crossed coordinate is snapped onto the wall.

        Returns the crossed side, or None if the phonon ended strictly inside.
        """
        p.drift(p.drift_time)
        px, py = p.get_coords()
        vx, vy = p.velocity

        # The longer the overshoot, the earlier the phonon hit that surface
        time_x = _time_to_surface(self.length, px, vx) if vx != 0 else 0.0
        time_y = _time_to_surface(self.width, py, vy) if vy != 0 else 0.0

        backtrack_time = max(time_x, time_y)
        p.drift_time = backtrack_time
        if backtrack_time == 0:
            return None
        p.drift(-backtrack_time)

        # Corner hits resolve on x
        if backtrack_time == time_x:
            if vx < 0:
                p.set_coords(0.0, None)
                return SurfaceLocation.left
            p.set_coords(self.length, None)
            return SurfaceLocation.right
        if vy < 0:
            p.set_coords(None, 0.0)
            return SurfaceLocation.bot
        p.set_coords(None, self.width)
        return SurfaceLocation.top

    def __str__(self) -> str:
        return f"{str(self.sensor):<20} {len(self.phonons):<7} {len(self.incoming_phonons):<7}"
