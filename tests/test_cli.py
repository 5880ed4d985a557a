from pathlib import Path

import pytest

from scheduler_sim.cli import build_parser, main


def test_run_defaults_to_fcfs_on_builtin_workload(capsys):
    assert main(["run", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Algorithm: FCFS" in out
    assert "Average waiting: 2.333" in out
    assert "SJF decision log" not in out


def test_run_sjf_prints_decision_log(capsys):
    assert main(["run", "-a", "sjf"]) == 0
    out = capsys.readouterr().out
    assert "SJF (non-preemptive)" in out
    assert "SJF decision log" in out
    assert "Average waiting: 1.667" in out


def test_run_with_workload_file(tmp_path: Path, capsys):
    p = tmp_path / "w.csv"
    p.write_text("id,arrival,burst\nA,5,2\nB,8,1\n")
    assert main(["run", "-a", "sjf", "-w", str(p)]) == 0
    out = capsys.readouterr().out
    assert "CPU idle from 0 to 5" in out


def test_compare(capsys):
    assert main(["compare"]) == 0
    out = capsys.readouterr().out
    assert "Algorithm comparison" in out
    assert "2.333" in out
    assert "1.667" in out


def test_invalid_workload_reports_error(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text('[{"id":"A","arrival":0,"burst":0}]')
    assert main(["run", "-w", str(p)]) == 1
    assert "burst time > 0" in capsys.readouterr().err


def test_missing_workload_file(tmp_path: Path, capsys):
    assert main(["run", "-w", str(tmp_path / "missing.json")]) == 1
    assert "Error" in capsys.readouterr().err


def test_parser_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "-a", "rr"])


def test_normalize_repairs_editor_style_input(tmp_path: Path, capsys):
    p = tmp_path / "w.csv"
    p.write_text("id,arrival,burst\n,-2,0\nB,1,2\n")
    assert main(["run", "-a", "sjf", "--plain", "-w", str(p)]) == 1
    capsys.readouterr()

    assert main(["run", "-a", "sjf", "--plain", "--normalize", "-w", str(p)]) == 0
    out = capsys.readouterr().out
    assert "P1" in out
    assert "Average waiting: 0.000" in out


def test_compare_accepts_normalize(capsys):
    assert main(["compare", "--normalize"]) == 0
    assert "Algorithm comparison" in capsys.readouterr().out
