from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .algorithms import format_time
from .models import ExecutionSegment, Number, ProcessResult

PALETTE = ["blue", "green", "yellow", "magenta", "cyan", "red"]

EMPTY_LOG_MESSAGE = "No SJF log (FCFS selected or no processes)"


def _width(duration: Number, scale: float, minimum: int = 1) -> int:
    return max(minimum, int(round(duration * scale)))


def _place(marks: str, column: int, text: str) -> str:
    # Marks that would collide with the previous one are dropped.
    if len(marks) > column:
        return marks
    return marks.ljust(column) + text


def render_gantt(segments: List[ExecutionSegment], scale: float = 2.0) -> str:
    """
    Plain-text Gantt chart. Block widths are proportional to the time they
    cover; idle stretches are drawn with dots.
    """
    if not segments:
        return "(no execution)"

    segments = sorted(segments, key=lambda s: (s.start, s.finish))

    line = "|"
    labels = " "
    marks = "0"
    last_time: Number = 0

    for seg in segments:
        idle_gap = seg.start - last_time
        if idle_gap > 0:
            width = _width(idle_gap, scale)
            line += "." * width + "|"
            labels += " " * (width + 1)
            marks = _place(marks, len(line) - 1, format_time(seg.start))

        width = _width(seg.duration, scale, minimum=len(seg.process_id))
        line += "=" * width + "|"
        labels += seg.process_id.center(width) + " "
        marks = _place(marks, len(line) - 1, format_time(seg.finish))
        last_time = seg.finish

    return "\n".join(["Gantt Chart:", line, labels.rstrip(), marks])


def build_rich_gantt(segments: List[ExecutionSegment], scale: float = 2.0) -> Panel:
    """
    Build a Rich Panel with one coloured block per segment, sized by burst and
    labelled with its start-finish interval.
    """
    if not segments:
        return Panel("No execution segments", title="Gantt Chart")

    blocks = Text()
    spans = Text()

    for idx, seg in enumerate(segments):
        color = PALETTE[idx % len(PALETTE)]
        span_label = f"{seg.start:.1f}-{seg.finish:.1f}"
        width = _width(seg.burst, scale, minimum=max(len(seg.process_id), len(span_label)) + 2)

        blocks.append(seg.process_id.center(width), style=f"bold white on {color}")
        spans.append(span_label.center(width), style="dim")

    table = Table.grid(padding=(0, 0))
    table.add_row(blocks)
    table.add_row(spans)

    return Panel.fit(table, title="Gantt Chart")


def build_stats_table(results: List[ProcessResult], average_waiting: float) -> Table:
    table = Table(
        title="Per-process metrics",
        caption=f"Average waiting: {average_waiting:.3f}",
        box=box.SIMPLE_HEAVY,
    )
    table.add_column("ID", justify="center")
    for h in ("Arrival", "Burst", "Waiting", "Turnaround"):
        table.add_column(h, justify="right")

    for r in results:
        table.add_row(
            Text(r.id, style="bold"),
            f"{r.arrival:.1f}",
            f"{r.burst:.1f}",
            f"{r.waiting:.2f}",
            f"{r.turnaround:.2f}",
        )
    return table


def build_log_panel(decision_log: Optional[List[str]]) -> Panel:
    """
    Panel listing the SJF decision trace, one pinned line per entry.
    """
    if not decision_log:
        return Panel(Text(EMPTY_LOG_MESSAGE, style="italic dim"), title="SJF decision log")

    body = Text("\n".join(f"📌 {entry}" for entry in decision_log))
    return Panel(body, title="SJF decision log")
