import math
import os

import pytest

from matkernels.processes import (
    cosine_points,
    fork_and_report,
    main,
    run_plot_script,
    write_cosine_data,
)


def test_cosine_points_length_and_start():
    points = cosine_points(100)
    assert len(points) == 100
    assert points[0][0] == 0.0
    assert points[0][1] == 1.0


def test_cosine_points_values_are_cosines():
    for x, y in cosine_points(20):
        assert y == math.cos(x)


def test_cosine_points_decreasing_x():
    xs = [x for x, _ in cosine_points(50)]
    assert all(a > b for a, b in zip(xs, xs[1:]))


def test_cosine_points_rejects_too_few():
    with pytest.raises(ValueError):
        cosine_points(1)


def test_write_cosine_data_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    write_cosine_data(path, 30)
    lines = path.read_text().splitlines()
    assert len(lines) == 30
    for line, (x, y) in zip(lines, cosine_points(30)):
        sx, sy = line.split(", ")
        assert math.isclose(float(sx), x, rel_tol=1e-5, abs_tol=1e-12)
        assert math.isclose(float(sy), y, rel_tol=1e-5, abs_tol=1e-5)


def test_run_plot_script_runs_and_deletes(tmp_path):
    data = tmp_path / "data.txt"
    write_cosine_data(data, 10)
    marker = tmp_path / "marker.txt"
    script = tmp_path / "plot.py"
    script.write_text(
        f"import pathlib\n"
        f"lines = pathlib.Path({str(data)!r}).read_text().splitlines()\n"
        f"pathlib.Path({str(marker)!r}).write_text(str(len(lines)))\n"
    )
    assert run_plot_script(script, data) == 0
    assert marker.read_text() == "10"
    assert not data.exists()


def test_run_plot_script_reports_failure_status(tmp_path):
    data = tmp_path / "data.txt"
    data.write_text("x")
    script = tmp_path / "fail.py"
    script.write_text("import sys\nsys.exit(3)\n")
    assert run_plot_script(script, data) == 3
    assert not data.exists()


def test_run_plot_script_missing_data(tmp_path, capsys):
    script = tmp_path / "ok.py"
    script.write_text("pass\n")
    run_plot_script(script, tmp_path / "absent.txt")
    assert "Failed to delete" in capsys.readouterr().err


def test_main_plot(tmp_path):
    data = tmp_path / "data.txt"
    marker = tmp_path / "seen.txt"
    script = tmp_path / "plot.py"
    script.write_text(
        f"import pathlib\n"
        f"n = len(pathlib.Path({str(data)!r}).read_text().splitlines())\n"
        f"pathlib.Path({str(marker)!r}).write_text(str(n))\n"
    )
    argv = ["plot", "--script", str(script), "--data", str(data), "--points", "7"]
    assert main(argv) == 0
    assert marker.read_text() == "7"
    assert not data.exists()


def test_fork_and_report(capfd):
    pid = fork_and_report()
    out = capfd.readouterr().out
    assert f"Printed from child process: {pid}" in out
    assert f"Printed from parent process: {os.getpid()}" in out
    assert pid != os.getpid()