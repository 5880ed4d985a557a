from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

Number = Union[int, float]


@dataclass
class ProcessSpec:
    id: str
    arrival: Number
    burst: Number


@dataclass
class ExecutionSegment:
    """
    One contiguous interval during which a single process holds the CPU.
    """

    process_id: str
    start: Number
    finish: Number
    burst: Number

    @property
    def duration(self) -> Number:
        return self.finish - self.start


@dataclass
class ProcessResult:
    id: str
    arrival: Number
    burst: Number
    start: Number
    finish: Number
    waiting: Number
    turnaround: Number


@dataclass
class OutcomeSummary:
    average_waiting: float
    average_turnaround: float
    makespan: Number
    cpu_busy_time: Number
    idle_time: Number
    cpu_utilization: float
    throughput: float


@dataclass
class SimulationOutcome:
    algorithm: str
    segments: List[ExecutionSegment] = field(default_factory=list)
    results: List[ProcessResult] = field(default_factory=list)
    average_waiting: float = float("nan")
    # Only SJF narrates its decisions; FCFS leaves this as None.
    decision_log: Optional[List[str]] = None
