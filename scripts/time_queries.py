#!/usr/bin/env python3
"""Quick perf benchmark for parsing and evaluating compliance-suite queries."""

from __future__ import annotations

import argparse
import cProfile
import io
import json
from pathlib import Path
import pstats
import statistics
import time
from typing import Any

from tqdm import tqdm

from jsonpathpy.pipeline import run_query

DEFAULT_CTS_PATH = Path(__file__).resolve().parent.parent / "tests" / "cts.json"


def _load_cases(path: Path) -> list[dict[str, Any]]:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)["tests"]


def _run_once(
    cases: list[dict[str, Any]],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_matches = 0
    total_rejected = 0
    iterator = tqdm(cases, desc=label, unit="query") if show_progress else cases
    for case in iterator:
        result = run_query(case["selector"], case.get("document"))
        total_matches += len(result.nodes)
        total_rejected += int(result.has_errors)
    duration = time.perf_counter() - start
    return duration, len(cases), total_matches, total_rejected


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark query parse + evaluation throughput")
    parser.add_argument(
        "--cts",
        type=Path,
        default=DEFAULT_CTS_PATH,
        help="Path to a compliance suite JSON file (default: tests/cts.json)",
    )
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument("--repeat", type=int, default=20, help="Repeat the case list N times per run")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    args = parser.parse_args()

    cts_path: Path = args.cts
    if not cts_path.is_file():
        raise SystemExit(f"Invalid --cts: {cts_path}")

    cases = _load_cases(cts_path) * max(args.repeat, 1)
    if not cases:
        raise SystemExit(f"No cases found in {cts_path}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                cases,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        queries = matches = rejected = 0
        for run_idx in range(max(args.runs, 1)):
            duration, queries, matches, rejected = _run_once(
                cases,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, queries, matches, rejected

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, queries, matches, rejected = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, queries, matches, rejected = _benchmark()

    mean = statistics.mean(timings)
    print(f"Suite: {cts_path}")
    print(f"Queries per run: {queries} (rejected: {rejected})")
    print(f"Matches per run: {matches}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Queries/s (mean): {queries / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
