"""Emission records and continuous-to-discrete phonon quantization."""

import logging
import math
from typing import NamedTuple

from .errors import EmissionError
from .sensor import Table
from .types import SurfaceLocation

logger = logging.getLogger(__name__)


class EmitSurfaceData(NamedTuple):
    """Per-step snapshot of what one emitting surface should generate."""
    table: Table
    location: SurfaceLocation
    temp: float
    emit_phonons: int


def quantize_emission(energy: float, eff_energy: float) -> tuple[int, float]:
    """Split `energy / eff_energy` into an integer count and a fractional remainder.

    The remainder is the probability of emitting one extra phonon, so the
    expected number of phonons reproduces the continuous energy exactly.

    Returns: (count, frac) with 0 <= frac < 1.
    Raises:
        EmissionError: if eff_energy is not positive or the ratio is
            negative or non-finite.
    """
    if not (eff_energy > 0.0) or not math.isfinite(eff_energy):
        raise EmissionError(f"Per-phonon energy must be positive and finite, got {eff_energy}")
    ratio = energy / eff_energy
    if not math.isfinite(ratio) or ratio < 0.0:
        logger.error("Invalid emission ratio %r (energy=%r, eff_energy=%r)",
                     ratio, energy, eff_energy)
        raise EmissionError(f"Emitted phonon count must be finite and non-negative, got {ratio}")
    count = math.floor(ratio)
    return count, ratio - count
