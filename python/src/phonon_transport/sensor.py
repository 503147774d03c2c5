"""Measurement/material collaborator used by cells for energy formulas.

Cells never look inside a sensor; they only need the emission data for a
wall temperature, a heat capacity and an initial temperature, and they
report their area so that the sensor can normalise its measurements.
Tables are (n, 2) float64 arrays of (value, cumulative probability) rows.
"""

from typing import Callable, Optional, Protocol

import numpy as np
import numpy.typing as npt

Table = npt.NDArray[np.float64]
EmitDataFn = Callable[[float], tuple[Table, float]]


class Sensor(Protocol):
    heat_capacity: float
    init_temp: float

    @property
    def base_table(self) -> Table: ...

    @property
    def scatter_table(self) -> Table: ...

    def add_to_area(self, area: float) -> None: ...

    def get_emit_data(self, temp: float) -> tuple[Table, float]: ...


def as_table(rows) -> Table:
    """Validate and convert rows into an (n, 2) table with a CDF column."""
    table = np.array(rows, dtype=np.float64)
    if table.ndim != 2 or table.shape[1] != 2:
        raise ValueError(f"Table must have shape (n, 2), got {table.shape}")
    cdf = table[:, 1]
    if table.shape[0] and (np.any(np.diff(cdf) < 0.0) or cdf[-1] > 1.0 + 1e-12):
        raise ValueError("Table probability column must be a non-decreasing CDF ending at <= 1")
    table.setflags(write=False)
    return table


class TabulatedSensor:
    """Sensor backed by fixed tables.

    Args:
        heat_capacity: Volumetric heat capacity used for initial energy.
        init_temp: Initial temperature of the cells attached to this sensor.
        base_table: Emission table used when `emit_data` is not given.
        scatter_table: Table used by the driver for scattering.
        emit_energy: Emission-energy constant used when `emit_data` is not given.
        emit_data: Optional callable mapping a wall temperature to
            (table, emission-energy constant).
    """

    def __init__(self, heat_capacity: float, init_temp: float,
                 base_table, scatter_table=None, emit_energy: float = 0.0,
                 emit_data: Optional[EmitDataFn] = None):
        self.heat_capacity = heat_capacity
        self.init_temp = init_temp
        self._base_table = as_table(base_table)
        self._scatter_table = as_table(scatter_table) if scatter_table is not None else self._base_table
        self._emit_energy = emit_energy
        self._emit_data = emit_data
        self.area = 0.0

    @property
    def base_table(self) -> Table:
        return self._base_table

    @property
    def scatter_table(self) -> Table:
        return self._scatter_table

    def add_to_area(self, area: float) -> None:
        self.area += area

    def get_emit_data(self, temp: float) -> tuple[Table, float]:
        if self._emit_data is not None:
            table, emit_energy = self._emit_data(temp)
            return as_table(table), emit_energy
        return self._base_table, self._emit_energy

    def __str__(self) -> str:
        return f"Sensor(T0={self.init_temp:g}, area={self.area:g})"
