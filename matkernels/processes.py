"""Child-process demonstrations: a plain fork and a data-plotting helper run."""

import argparse
import math
import os
import subprocess
import sys
from pathlib import Path

NUM_POINTS = 100
DEFAULT_DATA = "data.txt"
DEFAULT_SCRIPT = "plot_data.py"


def fork_and_report():
    """Fork; each side prints its own pid. Returns the child's pid in the parent."""
    sys.stdout.flush()
    pid = os.fork()
    if pid == 0:
        print(f"Printed from child process: {os.getpid()}", flush=True)
        os._exit(0)
    print(f"Printed from parent process: {os.getpid()}", flush=True)
    os.waitpid(pid, 0)
    return pid


def cosine_points(num_points=NUM_POINTS):
    """Return ``(x, cos(x))`` pairs with ``x = xmin * i * (xmax - xmin) / (n - 1)``."""
    if num_points < 2:
        raise ValueError("num_points must be at least 2")
    xmin = -2 * math.pi
    xmax = 2 * math.pi
    points = []
    for i in range(num_points):
        x = xmin * i * (xmax - xmin) / (num_points - 1)
        points.append((x, math.cos(x)))
    return points


def write_cosine_data(path, num_points=NUM_POINTS):
    """Write ``x, cos(x)`` lines to ``path``."""
    with open(path, "w", encoding="ascii") as out:
        for x, y in cosine_points(num_points):
            out.write(f"{x:g}, {y:g}\n")


def run_plot_script(script, data_path):
    """Run ``script`` with the Python interpreter, then delete ``data_path``.

    Returns the script's exit status (1 if it could not be started).
    """
    print(f"[child] launching {script}...", flush=True)
    try:
        status = subprocess.run([sys.executable, str(script)], check=False).returncode
    except OSError:
        print("[child] failed to start the script!", file=sys.stderr)
        status = 1
    print("[parent] Python script finished.")

    try:
        Path(data_path).unlink()
    except OSError:
        print(f"[parent] Failed to delete {data_path}", file=sys.stderr)
    else:
        print(f"[parent] Deleted {data_path}")
    return status


def main(argv=None):
    """Run the fork demo or write cosine data and hand it to a plot script."""
    parser = argparse.ArgumentParser(
        prog="processes", description="Child-process demonstrations."
    )
    parser.add_argument("command", nargs="?", choices=("fork", "plot"), default="plot")
    parser.add_argument("--script", default=DEFAULT_SCRIPT)
    parser.add_argument("--data", default=DEFAULT_DATA)
    parser.add_argument("--points", type=int, default=NUM_POINTS)
    args = parser.parse_args(argv)

    if args.command == "fork":
        fork_and_report()
        return 0

    try:
        write_cosine_data(args.data, args.points)
    except OSError:
        print(f"Failed to open {args.data} for writing!", file=sys.stderr)
        return 1
    print(f"[parent] Wrote cosine data to {args.data}")
    run_plot_script(args.script, args.data)
    return 0