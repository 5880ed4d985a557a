from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm
from .gantt import build_log_panel, build_rich_gantt, build_stats_table, render_gantt
from .metrics import summarize_outcome
from .models import ProcessSpec, SimulationOutcome
from .validation import DEFAULT_PROCESSES, normalize_process
from .workload_io import load_workload

logger = logging.getLogger(__name__)


def _add_normalize_flag(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--normalize",
        action="store_true",
        help="Clamp negative arrivals to 0, replace non-positive bursts with 0.1 and fill blank ids.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scheduler-sim",
        description="Non-preemptive CPU scheduling simulator (FCFS, SJF).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Simulate one scheduling policy on a workload.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        default="fcfs",
        choices=sorted(ALGORITHMS),
        help="Scheduling policy (default: fcfs).",
    )
    run_parser.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Path to JSON or CSV workload file (default: built-in three-process example).",
    )
    _add_normalize_flag(run_parser)
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Draw the Gantt chart as plain text instead of coloured blocks.",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run several policies on the same workload and compare average metrics.",
    )
    compare_parser.add_argument(
        "--workload",
        "-w",
        default=None,
        help="Path to JSON or CSV workload file (default: built-in three-process example).",
    )
    compare_parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        default=list(ALGORITHMS),
        help="Policies to compare (default: fcfs sjf).",
    )
    _add_normalize_flag(compare_parser)

    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_processes(workload: Optional[str], normalize: bool = False) -> List[ProcessSpec]:
    if workload is None:
        logger.info("No workload given; using the built-in example")
        processes = [ProcessSpec(p.id, p.arrival, p.burst) for p in DEFAULT_PROCESSES]
    else:
        processes = load_workload(Path(workload))

    if normalize:
        processes = [normalize_process(p, default_id=f"P{i}") for i, p in enumerate(processes, start=1)]
    return processes


def _print_outcome(outcome: SimulationOutcome, console: Console, plain: bool = False) -> None:
    console.print(f"[bold]Algorithm:[/bold] {outcome.algorithm}")
    console.print()

    if plain:
        console.print(render_gantt(outcome.segments), markup=False, highlight=False)
    else:
        console.print(build_rich_gantt(outcome.segments))
    console.print()

    console.print(build_stats_table(outcome.results, outcome.average_waiting))
    console.print()

    summary = summarize_outcome(outcome)
    sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")
    sys_table.add_row("Avg waiting", f"{summary.average_waiting:.3f}")
    sys_table.add_row("Avg turnaround", f"{summary.average_turnaround:.3f}")
    sys_table.add_row("Makespan", f"{summary.makespan:.2f}")
    sys_table.add_row("CPU idle time", f"{summary.idle_time:.2f}")
    sys_table.add_row("CPU utilization", f"{summary.cpu_utilization*100:.1f}%")
    sys_table.add_row("Throughput (proc/time)", f"{summary.throughput:.3f}")
    console.print(sys_table)

    if outcome.decision_log is not None:
        console.print()
        console.print(build_log_panel(outcome.decision_log))


def _print_comparison(processes: List[ProcessSpec], algorithms: List[str], console: Console) -> None:
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Makespan", justify="right")
    summary_table.add_column("CPU utilization", justify="right")

    for alg in algorithms:
        outcome = run_algorithm(alg, processes)
        summary = summarize_outcome(outcome)
        summary_table.add_row(
            outcome.algorithm,
            f"{summary.average_waiting:.3f}",
            f"{summary.average_turnaround:.3f}",
            f"{summary.makespan:.2f}",
            f"{summary.cpu_utilization*100:.1f}%",
        )

    console.print(summary_table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    console = Console()
    err_console = Console(stderr=True)

    try:
        processes = _load_processes(args.workload, normalize=args.normalize)

        if args.command == "run":
            outcome = run_algorithm(args.algorithm, processes)
            _print_outcome(outcome, console, plain=args.plain)
            return 0

        if args.command == "compare":
            _print_comparison(processes, args.algorithms, console)
            return 0
    except (OSError, ValueError) as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
