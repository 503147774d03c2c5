"""Exception hierarchy for the phonon transport core."""


class PhononTransportError(Exception):
    """Base class for all errors raised by phonon_transport."""


class SurfaceConfigurationError(PhononTransportError):
    """A surface was installed where the cell topology forbids it."""


class InvalidEmitSurfaceError(SurfaceConfigurationError):
    """An emitting surface was requested on a side already linked to a neighbour."""


class EmissionError(PhononTransportError):
    """Emission accounting received malformed energies."""


class TransportError(PhononTransportError):
    """A phonon could not be resolved within the allowed surface events."""
