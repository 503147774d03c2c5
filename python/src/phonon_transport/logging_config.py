"""
Logging Configuration
Handlers and defaults for the 'phonon_transport' logger.

Transport emits a DEBUG line per step and per emitting wall, so the package
stays at WARNING unless a run asks for more.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME: str = "phonon_transport"
DEFAULT_LOG_LEVEL: int = logging.WARNING
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'


def setup_logging(level: int = DEFAULT_LOG_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attaches a stdout handler (and optionally a file handler) to the package logger.

    Args:
        level: Logging level for the logger and its handlers.
        log_file: Optional path; the file is overwritten on each call.
    Returns:
        The configured 'phonon_transport' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-running a setup must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized at %s.", logging.getLevelName(level))
    return logger
