#!/usr/bin/env python3
"""Benchmark dungeon sculpting across area sizes."""

from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path

from delve.util.performance import (
    enable_performance_tracking,
    get_performance_report,
    reset_performance_data,
)
from delve.util.rng import derive
from delve.world.grid import Grid, Material, TileFlags
from delve.worldgen import DungeonSculptor

FLOOR = Material("Floor", "floor")
WALL = Material("Wall", "wall", TileFlags.SOLID)

# (width, height, room count)
CASES: tuple[tuple[int, int, int], ...] = (
    (30, 30, 4),
    (60, 60, 12),
    (100, 80, 25),
    (150, 150, 60),
    (200, 200, 100),
)


class DungeonBenchmark:
    """Times full sculpt() runs, seeded per case and iteration."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        self.results: dict[str, dict[str, float]] = {}

    def _run_case(self, width: int, height: int, rooms: int) -> float:
        """Run one benchmark case and return average sculpt time in milliseconds."""
        elapsed_total = 0.0

        for i in range(self.iterations):
            rng = derive(f"{width}x{height}:{i}", "bench.dungeon")
            sculptor = DungeonSculptor(rooms, ((3, 3), (9, 9)), FLOOR, WALL, rng=rng)
            grid = Grid()

            start = time.perf_counter()
            sculptor.sculpt((0, 0), (width, height), grid)
            elapsed_total += time.perf_counter() - start

        return (elapsed_total / self.iterations) * 1000.0

    def run(self) -> None:
        print("Dungeon Sculpt Benchmark")
        print("=" * 42)
        print(f"Iterations per size: {self.iterations}")
        print()
        print(f"{'Size':>12} {'Rooms':>6} {'Sculpt (ms)':>14}")
        print("-" * 42)

        for width, height, rooms in CASES:
            sculpt_ms = self._run_case(width, height, rooms)

            size_key = f"{width}x{height}"
            self.results[size_key] = {"rooms": rooms, "sculpt_ms": sculpt_ms}

            print(f"{size_key:>12} {rooms:>6} {sculpt_ms:14.2f}")

    def save_results(self, filename: str) -> None:
        with Path(filename).open("w") as f:
            json.dump(self.results, f, indent=2)
        print(f"\nSaved benchmark results to {filename}")

    def compare_with_baseline(self, baseline_file: str) -> None:
        """Compare current run with a saved baseline JSON file."""
        try:
            with Path(baseline_file).open() as f:
                baseline: dict[str, dict[str, float]] = json.load(f)
        except FileNotFoundError:
            print(f"\nBaseline file not found: {baseline_file}")
            return

        print(f"\nComparison vs baseline: {baseline_file}")
        print("=" * 64)

        for size_key, current in self.results.items():
            old_ms = baseline.get(size_key, {}).get("sculpt_ms", 0.0)
            if old_ms <= 0:
                continue

            new_ms = current["sculpt_ms"]
            delta_pct = ((new_ms - old_ms) / old_ms) * 100.0
            speed_ratio = old_ms / new_ms if new_ms > 0 else 0.0
            trend = "faster" if speed_ratio > 1.0 else "slower"

            print(
                f"{size_key:>12}: {new_ms:8.2f}ms "
                f"vs {old_ms:8.2f}ms | {speed_ratio:5.2f}x {trend} "
                f"({delta_pct:+6.1f}%)"
            )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark dungeon sculpting")
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of runs per area size (default: 5)",
    )
    parser.add_argument("--save", type=str, help="Save current results to JSON")
    parser.add_argument(
        "--compare",
        type=str,
        help="Compare current results against baseline JSON",
    )
    parser.add_argument(
        "--stages",
        action="store_true",
        help="Print per-stage timings collected during the run",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.stages:
        reset_performance_data()
        enable_performance_tracking()

    benchmark = DungeonBenchmark(iterations=args.iterations)
    benchmark.run()

    if args.stages:
        print()
        print(get_performance_report(filter_prefix="dungeon."))

    if args.save:
        benchmark.save_results(args.save)

    if args.compare:
        benchmark.compare_with_baseline(args.compare)


if __name__ == "__main__":
    main()
