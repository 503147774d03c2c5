"""Tests for emission energy aggregation and phonon quantization."""

from __future__ import annotations

import math

import pytest

from phonon_transport.cell import Cell
from phonon_transport.emission import EmitSurfaceData, quantize_emission
from phonon_transport.errors import EmissionError
from phonon_transport.sensor import TabulatedSensor
from phonon_transport.types import SurfaceLocation


class TestQuantizeEmission:
    def test_count_and_fraction(self):
        count, frac = quantize_emission(7.3, 2.0)
        assert count == 3
        assert isinstance(count, int)
        assert frac == pytest.approx(0.65)

    def test_exact_multiple(self):
        assert quantize_emission(6.0, 2.0) == (3, 0.0)
        assert quantize_emission(0.0, 2.0) == (0, 0.0)

    @pytest.mark.parametrize("energy, eff", [
        (-1.0, 2.0),
        (math.inf, 2.0),
        (math.nan, 2.0),
        (1.0, 0.0),
        (1.0, -2.0),
    ])
    def test_malformed_inputs_fail_fast(self, energy, eff):
        with pytest.raises(EmissionError):
            quantize_emission(energy, eff)


@pytest.fixture
def emitting_cell(make_cell):
    """1 x 1 cell with walls at 320 K (left) and 280 K (right)."""
    cell = make_cell()
    cell.set_emit_surface(SurfaceLocation.left, 320.0)
    cell.set_emit_surface(SurfaceLocation.right, 280.0)
    return cell


class TestCellEmission:
    def test_emit_energy_sums_emitting_surfaces_only(self, emitting_cell):
        # each wall: 8 * 1 * 0.5 / 4 * 20 = 20
        assert emitting_cell.emit_energy(300.0, 0.5) == pytest.approx(40.0)

    def test_reflective_cell_emits_nothing(self, make_cell):
        assert make_cell().emit_energy(300.0, 1.0) == 0.0
        assert make_cell().emit_phonon_data(0.5) == []

    def test_edge_length_follows_side(self, sensor):
        cell = Cell(4.0, 1.0, sensor)
        cell.set_emit_surface(SurfaceLocation.top, 320.0)
        # top wall is 4 long: 8 * 4 * 1 / 4 * 20
        assert cell.emit_energy(300.0, 1.0) == pytest.approx(160.0)

    def test_set_emit_phonons_quantizes_each_surface(self, emitting_cell):
        # 20 / 6 = 3.333...
        emitting_cell.set_emit_phonons(300.0, 6.0, 0.5)
        for surface in emitting_cell.emit_surfaces():
            assert surface.emit_phonons == 3
            assert surface.emit_phonons_frac == pytest.approx(1.0 / 3.0)

    def test_set_emit_phonons_is_recomputed_each_step(self, emitting_cell):
        emitting_cell.set_emit_phonons(300.0, 6.0, 0.5)
        emitting_cell.set_emit_phonons(300.0, 6.0, 0.0)
        for surface in emitting_cell.emit_surfaces():
            assert surface.emit_phonons == 0
            assert surface.emit_phonons_frac == 0.0

    def test_records_use_shared_draw(self, make_cell):
        cell = make_cell()
        left = cell.set_emit_surface(SurfaceLocation.left, 320.0)
        # 8 * 1 * 1 / 4 * 3.65 = 7.3 -> 3 phonons + 0.65 at 2.0 per phonon
        left_energy = left.get_emit_energy(316.35, 1.0, 1.0)
        assert left_energy == pytest.approx(7.3)
        cell.set_emit_phonons(316.35, 2.0, 1.0)
        assert left.emit_phonons == 3
        assert left.emit_phonons_frac == pytest.approx(0.65)

        (record,) = cell.emit_phonon_data(0.5)
        assert record.emit_phonons == 4
        (record,) = cell.emit_phonon_data(0.9)
        assert record.emit_phonons == 3

    def test_record_fields(self, emitting_cell, sensor):
        emitting_cell.set_emit_phonons(300.0, 6.0, 0.5)
        records = emitting_cell.emit_phonon_data(1.0)
        assert [r.location for r in records] == [SurfaceLocation.left, SurfaceLocation.right]
        table, loc, temp, count = records[0]
        assert table is sensor.base_table
        assert loc == SurfaceLocation.left
        assert temp == 320.0
        assert count == 3
        assert isinstance(records[0], EmitSurfaceData)

    def test_emit_table_depends_on_wall_temperature(self):
        def emit_data(temp):
            return [[temp, 1.0]], temp / 100.0

        sensor = TabulatedSensor(1.0, 300.0, [[1.0, 1.0]], emit_data=emit_data)
        cell = Cell(1.0, 1.0, sensor)
        surface = cell.set_emit_surface(SurfaceLocation.left, 350.0)
        assert surface.emit_table.tolist() == [[350.0, 1.0]]
        assert surface.emit_energy == pytest.approx(3.5)
