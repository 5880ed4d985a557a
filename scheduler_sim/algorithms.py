from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, List, Sequence, Tuple

from .errors import InvalidProcessSet
from .metrics import average_waiting, build_result
from .models import ExecutionSegment, Number, ProcessResult, ProcessSpec, SimulationOutcome
from .validation import validate_processes

logger = logging.getLogger(__name__)


def format_time(value: Number) -> str:
    """
    Render a logical time or burst the way the decision log expects: whole
    numbers without a fractional part, anything else in shortest form.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_clock(value: Number) -> str:
    """
    Two-decimal clock reading; exact halves round up, not to even.
    """
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def sjf_sort_key(p: ProcessSpec) -> Tuple[Number, Number, str]:
    """
    SJF selection order: shortest burst, then earliest arrival, then id.
    """
    return (p.burst, p.arrival, p.id)


def compare_sjf(a: ProcessSpec, b: ProcessSpec) -> int:
    """
    Three-way comparison under ``sjf_sort_key`` (-1, 0 or 1).
    """
    ka, kb = sjf_sort_key(a), sjf_sort_key(b)
    return (ka > kb) - (ka < kb)


def simulate_fcfs(processes: Sequence[ProcessSpec]) -> SimulationOutcome:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Results come back in arrival order; equal arrivals keep their input order.
    """
    if not processes:
        raise InvalidProcessSet("FCFS needs at least one process")

    processes_sorted = sorted(processes, key=lambda p: p.arrival)

    time: Number = 0
    segments: List[ExecutionSegment] = []
    results: List[ProcessResult] = []

    for p in processes_sorted:
        if time < p.arrival:
            time = p.arrival

        start = time
        finish = start + p.burst

        segments.append(ExecutionSegment(process_id=p.id, start=start, finish=finish, burst=p.burst))
        results.append(build_result(p, start, finish))

        time = finish

    logger.debug("FCFS scheduled %d processes, finishing at %s", len(results), format_time(time))
    return SimulationOutcome(
        algorithm="FCFS",
        segments=segments,
        results=results,
        average_waiting=average_waiting(results),
        decision_log=None,
    )


def simulate_sjf(processes: Sequence[ProcessSpec]) -> SimulationOutcome:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and are not yet
    finished, run the one that sorts first under ``sjf_sort_key``. When
    nothing has arrived the clock jumps to the next arrival and the idle gap
    is logged. Every decision is narrated in ``decision_log``.

    Bookkeeping is by input position, so results line up with the input
    sequence even if two processes share an id.
    """
    if not processes:
        raise InvalidProcessSet("SJF needs at least one process")

    # Position-tagged working copy; the caller's sequence is never touched.
    pending: List[Tuple[int, ProcessSpec]] = list(enumerate(processes))
    total = len(pending)
    finished = [False] * total

    time: Number = 0
    completed = 0
    segments: List[ExecutionSegment] = []
    log: List[str] = []
    spans: Dict[int, Tuple[Number, Number]] = {}

    def ready_at(t: Number) -> List[Tuple[int, ProcessSpec]]:
        return [(i, p) for i, p in pending if not finished[i] and p.arrival <= t]

    while completed < total:
        ready = ready_at(time)

        if not ready:
            next_arrival = min(p.arrival for i, p in pending if not finished[i])
            log.append(f"⏳ CPU idle from {format_time(time)} to {format_time(next_arrival)} (no process ready)")
            logger.debug("SJF idle %s -> %s", format_time(time), format_time(next_arrival))
            time = next_arrival
            ready = ready_at(time)

        ready.sort(key=lambda entry: sjf_sort_key(entry[1]))
        idx, chosen = ready[0]

        ready_descr = ", ".join(f"{p.id}(burst={format_time(p.burst)})" for _, p in ready)
        log.append(
            f"🕒 time {format_clock(time)}  → ready: [ {ready_descr} ]  → selected {chosen.id} "
            f"(shortest burst {format_time(chosen.burst)})"
        )

        start = time
        finish = start + chosen.burst
        segments.append(ExecutionSegment(process_id=chosen.id, start=start, finish=finish, burst=chosen.burst))
        spans[idx] = (start, finish)

        finished[idx] = True
        time = finish
        completed += 1

    results = [build_result(p, *spans[i]) for i, p in pending]

    logger.debug("SJF scheduled %d processes with %d log entries", total, len(log))
    return SimulationOutcome(
        algorithm="SJF (non-preemptive)",
        segments=segments,
        results=results,
        average_waiting=average_waiting(results),
        decision_log=log,
    )


ALGORITHMS: Dict[str, Callable[[Sequence[ProcessSpec]], SimulationOutcome]] = {
    "fcfs": simulate_fcfs,
    "sjf": simulate_sjf,
}


def run_algorithm(name: str, processes: Sequence[ProcessSpec]) -> SimulationOutcome:
    """
    Validate ``processes`` and dispatch to the requested scheduler.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    valid = validate_processes(processes)
    logger.info("Running %s on %d processes", name, len(valid))
    return ALGORITHMS[name](valid)

