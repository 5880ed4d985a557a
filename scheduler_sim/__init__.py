"""
Scheduler simulation package.

Simulates non-preemptive CPU scheduling (FCFS and SJF) over a list of
processes and reports the execution timeline, per-process metrics and, for
SJF, a trace of every scheduling decision.
"""

from .algorithms import ALGORITHMS, compare_sjf, run_algorithm, simulate_fcfs, simulate_sjf, sjf_sort_key
from .errors import InvalidProcessSet
from .models import ExecutionSegment, OutcomeSummary, ProcessResult, ProcessSpec, SimulationOutcome

__all__ = [
    "ALGORITHMS",
    "ExecutionSegment",
    "InvalidProcessSet",
    "OutcomeSummary",
    "ProcessResult",
    "ProcessSpec",
    "SimulationOutcome",
    "compare_sjf",
    "run_algorithm",
    "simulate_fcfs",
    "simulate_sjf",
    "sjf_sort_key",
]
