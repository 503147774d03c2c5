"""Per-step transport sweep over a set of cells.

Each step runs in two phases:
  1. every active resident phonon drifts for the step, bouncing between
     surfaces until its drift time is used up; phonons that end in another
     cell are queued in that cell's incoming list
  2. once all cells have been swept, incoming lists are merged and absorbed
     phonons are dropped
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .cell import Cell
from .config import TransportConfig
from .errors import TransportError
from .particles import Phonon

logger = logging.getLogger(__name__)


@dataclass
class StepSummary:
    """Phonon bookkeeping for one transport step."""
    advanced: int = 0
    transferred: int = 0
    absorbed: int = 0


def transport_phonon(cell: Cell, p: Phonon,
                     config: Optional[TransportConfig] = None) -> Cell:
    """Resolve every surface event of `p` for its remaining drift time.

    If the phonon finishes in a different cell it is added to that cell's
    incoming list; removing it from `cell` is left to the caller.

    Returns: The cell that owns the phonon afterwards.
    Raises:
        TransportError: if more than `config.max_surface_events` surfaces
            are hit in one call.
    """
    config = config or TransportConfig()
    owner = cell
    events = 0
    while p.active:
        location = owner.move_to_nearest_surface(p)
        if location is None:
            break
        events += 1
        if events > config.max_surface_events:
            logger.error("Phonon exceeded %d surface events: %r",
                         config.max_surface_events, p)
            raise TransportError(
                f"Phonon hit more than {config.max_surface_events} surfaces in one step"
            )
        owner = owner.get_surface(location).handle_phonon(p)

    if owner is not cell:
        owner.add_incoming_phonon(p)
    return owner


def advance_cells(cells: Iterable[Cell], time_step: float,
                  config: Optional[TransportConfig] = None) -> StepSummary:
    """Advance every active phonon in `cells` by `time_step`."""
    if time_step < 0.0:
        raise ValueError(f"time_step must be non-negative, got {time_step}")
    config = config or TransportConfig()
    cells = list(cells)
    touched = {id(cell): cell for cell in cells}
    summary = StepSummary()

    for cell in cells:
        staying = []
        for p in cell.phonons:
            if not p.active:
                staying.append(p)
                continue
            p.drift_time = time_step
            owner = transport_phonon(cell, p, config)
            summary.advanced += 1
            if owner is cell:
                staying.append(p)
            else:
                summary.transferred += 1
                touched.setdefault(id(owner), owner)
        cell.phonons = staying

    # Only after the sweep, so that no phonon is advanced twice. Neighbours
    # outside `cells` that received phonons are merged as well.
    for cell in touched.values():
        cell.merge_incoming_phonons()
    summary.absorbed = sum(cell.remove_inactive_phonons() for cell in touched.values())

    logger.debug("Step dt=%g: advanced=%d transferred=%d absorbed=%d",
                 time_step, summary.advanced, summary.transferred, summary.absorbed)
    return summary
