from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List

from .models import Number, ProcessSpec

# Field names used by older workload files.
_ALIASES = {
    "id": ("id", "pid"),
    "arrival": ("arrival", "arrival_time"),
    "burst": ("burst", "burst_time"),
}


def load_workload(path: str | Path) -> List[ProcessSpec]:
    """
    Load a workload from a JSON or CSV file into a list of ProcessSpec objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[ProcessSpec]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[ProcessSpec]:
    processes: List[ProcessSpec] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def _lookup(mapping, field: str, default=None):
    for key in _ALIASES[field]:
        if key in mapping and mapping[key] not in (None, ""):
            return mapping[key]
    if default is not None:
        return default
    raise KeyError(field)


def _parse_number(value) -> Number:
    if isinstance(value, bool):
        raise TypeError("boolean is not a time value")
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def _process_from_mapping(mapping) -> ProcessSpec:
    try:
        # A blank id is left for the caller to fill in.
        pid = str(_lookup(mapping, "id", default="")).strip()
        arrival = _parse_number(_lookup(mapping, "arrival"))
        burst = _parse_number(_lookup(mapping, "burst"))
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise ValueError(f"Invalid process entry: {mapping!r}") from exc

    return ProcessSpec(id=pid, arrival=arrival, burst=burst)
