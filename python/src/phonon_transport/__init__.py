"""Geometric transport core for 2-D phonon Monte Carlo simulation."""

from .cell import Cell
from .config import TransportConfig
from .emission import EmitSurfaceData, quantize_emission
from .errors import (
    EmissionError,
    InvalidEmitSurfaceError,
    PhononTransportError,
    SurfaceConfigurationError,
    TransportError,
)
from .particles import Phonon
from .sensor import TabulatedSensor
from .surfaces import EmitSurface, ReflectiveSurface, TransitionSurface
from .transport import StepSummary, advance_cells, transport_phonon
from .types import SurfaceLocation

__all__ = [
    "Cell", "TransportConfig", "EmitSurfaceData", "quantize_emission",
    "EmissionError", "InvalidEmitSurfaceError", "PhononTransportError",
    "SurfaceConfigurationError", "TransportError", "Phonon", "TabulatedSensor",
    "EmitSurface", "ReflectiveSurface", "TransitionSurface", "StepSummary",
    "advance_cells", "transport_phonon", "SurfaceLocation",
]
