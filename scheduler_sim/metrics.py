from __future__ import annotations

from typing import List

from .models import Number, OutcomeSummary, ProcessResult, ProcessSpec, SimulationOutcome


def build_result(spec: ProcessSpec, start: Number, finish: Number) -> ProcessResult:
    return ProcessResult(
        id=spec.id,
        arrival=spec.arrival,
        burst=spec.burst,
        start=start,
        finish=finish,
        waiting=start - spec.arrival,
        turnaround=finish - spec.arrival,
    )


def average_waiting(results: List[ProcessResult]) -> float:
    """
    Mean waiting time over ``results``; NaN when there is nothing to average.
    """
    if not results:
        return float("nan")
    return sum(r.waiting for r in results) / len(results)


def summarize_outcome(outcome: SimulationOutcome) -> OutcomeSummary:
    """
    Compute averages, makespan, busy/idle time, CPU utilization and
    throughput for a finished simulation.
    """
    results = outcome.results
    if not results:
        return OutcomeSummary(
            average_waiting=float("nan"),
            average_turnaround=float("nan"),
            makespan=0,
            cpu_busy_time=0,
            idle_time=0,
            cpu_utilization=0.0,
            throughput=0.0,
        )

    n = len(results)
    makespan = max(r.finish for r in results)
    cpu_busy_time = sum(seg.duration for seg in outcome.segments)

    return OutcomeSummary(
        average_waiting=average_waiting(results),
        average_turnaround=sum(r.turnaround for r in results) / n,
        makespan=makespan,
        cpu_busy_time=cpu_busy_time,
        idle_time=makespan - cpu_busy_time,
        cpu_utilization=cpu_busy_time / makespan if makespan > 0 else 0.0,
        throughput=n / makespan if makespan > 0 else 0.0,
    )
