from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from .errors import InvalidProcessSet
from .models import ProcessSpec

logger = logging.getLogger(__name__)

MIN_BURST = 0.1

DEFAULT_PROCESSES = (
    ProcessSpec("P1", arrival=0, burst=5),
    ProcessSpec("P2", arrival=2, burst=3),
    ProcessSpec("P3", arrival=4, burst=1),
)


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def validate_processes(processes: Sequence[ProcessSpec]) -> List[ProcessSpec]:
    """
    Check a process sequence before it reaches a scheduler.

    Processes with a non-positive burst are dropped; everything else that
    cannot be simulated raises InvalidProcessSet. The caller's sequence is
    left untouched and input order is preserved.
    """
    if not processes:
        raise InvalidProcessSet("no processes supplied")

    valid: List[ProcessSpec] = []
    seen_ids: set[str] = set()

    for p in processes:
        if not _is_finite(p.arrival) or p.arrival < 0:
            raise InvalidProcessSet(f"Process {p.id!r} has invalid arrival time {p.arrival!r}")
        if not _is_finite(p.burst):
            raise InvalidProcessSet(f"Process {p.id!r} has invalid burst time {p.burst!r}")

        if p.burst <= 0:
            logger.warning("Dropping process %r with non-positive burst %r", p.id, p.burst)
            continue

        if p.id in seen_ids:
            logger.warning("Duplicate process id %r; ids are expected to be unique", p.id)
        seen_ids.add(p.id)

        valid.append(ProcessSpec(id=p.id, arrival=p.arrival, burst=p.burst))

    if not valid:
        raise InvalidProcessSet("Add at least one process with burst time > 0")

    return valid


def normalize_process(spec: ProcessSpec, default_id: Optional[str] = None) -> ProcessSpec:
    """
    Return a copy of ``spec`` with editor-style fixes applied: missing or
    negative arrivals become 0, unusable bursts become MIN_BURST and an empty
    id falls back to ``default_id``.
    """
    arrival = spec.arrival
    if arrival is None or not _is_finite(arrival):
        arrival = 0
    else:
        arrival = max(0, arrival)

    burst = spec.burst
    if burst is None or not _is_finite(burst) or burst <= 0:
        burst = MIN_BURST

    pid = spec.id or default_id or ""
    return ProcessSpec(id=pid, arrival=arrival, burst=burst)
