from pathlib import Path

import pytest

from scheduler_sim.workload_io import load_workload
from scheduler_sim.models import ProcessSpec


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"id":"A","arrival":0,"burst":3},'
                 '{"id":"B","arrival":1.5,"burst":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], ProcessSpec)
    assert procs[1].arrival == 1.5
    assert procs[0].burst == 3


def test_load_json_legacy_field_names(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0,"burst_time":3,"priority":1}]')
    procs = load_workload(p)
    assert procs == [ProcessSpec("A", 0, 3)]


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("id,arrival,burst\nA,0,3\nB,1,2.5\n")
    procs = load_workload(p)
    assert procs[0].id == "A"
    assert procs[0].arrival == 0 and isinstance(procs[0].arrival, int)
    assert procs[1].burst == 2.5


def test_load_json_not_a_list(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"id":"A"}')
    with pytest.raises(ValueError, match="list of process objects"):
        load_workload(p)


def test_load_invalid_entry(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("id,arrival,burst\nA,soon,3\n")
    with pytest.raises(ValueError, match="Invalid process entry"):
        load_workload(p)


def test_load_missing_field(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"id":"A","arrival":0}]')
    with pytest.raises(ValueError, match="Invalid process entry"):
        load_workload(p)


def test_unsupported_suffix(tmp_path: Path):
    with pytest.raises(ValueError, match="Unsupported workload format"):
        load_workload(tmp_path / "w.yaml")


def test_load_blank_id(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("id,arrival,burst\n,0,3\n")
    assert load_workload(p) == [ProcessSpec("", 0, 3)]
