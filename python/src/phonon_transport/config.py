"""
Transport Configuration
=======================
Global constants and run-time settings for the transport sweep.

Environment overrides:
    PHONON_MAX_SURFACE_EVENTS (int): Surface events allowed per phonon per step.
    PHONON_LOG_LEVEL (str): Logging level name, e.g. "DEBUG".
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from .logging_config import DEFAULT_LOG_LEVEL, setup_logging

# A phonon reflecting in a small cell over a long step can legitimately hit
# many surfaces; this only guards against a resolver that never terminates.
DEFAULT_MAX_SURFACE_EVENTS: int = 10_000

MAX_SURFACE_EVENTS_ENV: str = "PHONON_MAX_SURFACE_EVENTS"
LOG_LEVEL_ENV: str = "PHONON_LOG_LEVEL"


@dataclass(frozen=True)
class TransportConfig:
    """Settings for advancing phonons through cells."""
    max_surface_events: int = DEFAULT_MAX_SURFACE_EVENTS
    log_level: int = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.max_surface_events <= 0:
            raise ValueError(
                f"max_surface_events must be positive, got {self.max_surface_events}"
            )

    @classmethod
    def from_env(cls) -> 'TransportConfig':
        """Build a config from environment variables, falling back to defaults."""
        max_events = int(os.environ.get(MAX_SURFACE_EVENTS_ENV, DEFAULT_MAX_SURFACE_EVENTS))
        level_name = os.environ.get(LOG_LEVEL_ENV, logging.getLevelName(DEFAULT_LOG_LEVEL)).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level in {LOG_LEVEL_ENV}: {level_name!r}")
        return cls(max_surface_events=max_events, log_level=level)

    def configure_logging(self, log_file: Optional[str] = None) -> logging.Logger:
        return setup_logging(self.log_level, log_file)
