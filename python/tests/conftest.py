from __future__ import annotations

import numpy as np
import pytest

from phonon_transport.cell import Cell
from phonon_transport.sensor import TabulatedSensor

TABLE = np.array([[1.0e12, 0.25], [2.0e12, 0.75], [3.0e12, 1.0]])


@pytest.fixture
def sensor():
    return TabulatedSensor(heat_capacity=2.0, init_temp=300.0,
                           base_table=TABLE, emit_energy=8.0)


@pytest.fixture
def make_cell(sensor):
    """Factory for cells sharing one sensor."""
    def _make(length: float = 1.0, width: float = 1.0) -> Cell:
        return Cell(length, width, sensor)
    return _make
