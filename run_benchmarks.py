"""Run the DLBTrie benchmarks at a chosen word-list size.

The size is handed to ``test_dlb_trie.py::TestPerformance`` through the
``DLB_BENCH_WORDS`` environment variable; everything after ``--`` goes to
pytest unchanged (e.g. ``-- --benchmark-json=out.json``).
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

SIZES = {"small": 10000, "medium": 50000, "large": 200000}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run DLBTrie benchmarks")
    parser.add_argument("--size", choices=list(SIZES), default="small",
                        help="Synthetic word-list size (default: small)")
    parser.add_argument("--compare", action="store_true",
                        help="Compare against the last saved run")
    parser.add_argument("pytest_args", nargs=argparse.REMAINDER,
                        help="Extra arguments passed to pytest after --")
    args = parser.parse_args(argv)

    cmd = [sys.executable, "-m", "pytest", "test_dlb_trie.py::TestPerformance",
           "--benchmark-only", "--benchmark-autosave", "-v"]
    if args.compare:
        cmd.append("--benchmark-compare")
    cmd.extend(a for a in args.pytest_args if a != "--")

    words = SIZES[args.size]
    print(f"\nRunning benchmarks with {words:,} words...")
    env = dict(os.environ, DLB_BENCH_WORDS=str(words))
    return subprocess.run(cmd, cwd=Path(__file__).parent, env=env).returncode


if __name__ == "__main__":
    sys.exit(main())
