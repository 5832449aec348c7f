#!/usr/bin/env python3

# Runs dungeon generation many times with different seeds, then reports how long the walk took
# and what the resulting mazes look like (coverage, path lengths, variant balance).

from __future__ import annotations

import argparse
import datetime
import json
import math
import os
import random
import statistics
from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, List

from dungeon_config import DungeonConfig
from dungeon_generator import DungeonGenerator
from maze_graph import dead_end_count, graph_diameter, is_spanning_tree, path_length
from room_rules import build_prototype_rules

DEFAULT_WIDTH = 12
DEFAULT_HEIGHT = 12

PERCENTILES = (5.0, 25.0, 50.0, 75.0, 95.0)


@dataclass
class GenerationRunResult:
    seed: int
    duration: float
    iterations: int
    backtracks: int
    capped: bool
    coverage: float
    rooms: int
    end_room_distance: float
    end_room_path_length: int
    graph_diameter: int
    dead_ends: int
    is_tree: bool
    variant_counts: Counter[Hashable]


def build_config(seed: int, width: int, height: int) -> DungeonConfig:
    return DungeonConfig(
        width=width,
        height=height,
        rules=build_prototype_rules(width, height),
        random_seed=seed,
        collect_metrics=True,
    )


def gini_coefficient(counts: List[int]) -> float:
    """Compute the Gini coefficient for a list of non-negative counts."""
    data = sorted(value for value in counts if value > 0)
    total = sum(data)
    if not data or total <= 0:
        return 0.0
    n = len(data)
    weighted_sum = sum(index * value for index, value in enumerate(data, start=1))
    return (2.0 * weighted_sum) / (n * total) - (n + 1) / n


def percentile(values: List[float], pct: float) -> float:
    if not values:
        return float("nan")
    ordered = sorted(values)
    rank = (len(ordered) - 1) * min(max(pct, 0.0), 100.0) / 100.0
    lower = math.floor(rank)
    upper = math.ceil(rank)
    fraction = rank - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * fraction


def json_safe_number(value: float | int | None) -> float | int | None:
    if value is None:
        return None
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    return value


def run_single_generation(seed: int, width: int, height: int) -> GenerationRunResult:
    """Run one dungeon generation with the provided seed and collect metrics."""
    generator = DungeonGenerator(build_config(seed, width, height))
    layout = generator.generate()
    board = generator.board
    assert board is not None and generator.metrics is not None

    walk = generator.metrics.walk
    duration = sum(phase.total_time for phase in generator.metrics.phases.values())
    return GenerationRunResult(
        seed=seed,
        duration=duration,
        iterations=walk.iterations,
        backtracks=walk.backtracks,
        capped=walk.capped,
        coverage=walk.coverage,
        rooms=len(layout),
        end_room_distance=walk.end_room_distance,
        end_room_path_length=path_length(board, layout.start_index, layout.end_index),
        graph_diameter=graph_diameter(board),
        dead_ends=dead_end_count(board),
        is_tree=is_spanning_tree(board),
        variant_counts=Counter(layout.variant_counts()),
    )


def run_benchmark(num_runs: int, seed: int | None, width: int, height: int) -> List[GenerationRunResult]:
    """Run the generator multiple times and collect run-level metrics."""
    rng = random.Random(seed)
    return [
        run_single_generation(rng.randint(0, 1_000_000), width, height)
        for _ in range(num_runs)
    ]


@dataclass
class MetricDefinition:
    key: str
    name: str
    values: List[float]
    value_formatter: Callable[[float], str] = lambda value: f"{value:.3f}"


def summarize_metric(definition: MetricDefinition) -> Dict[str, Any]:
    values = definition.values
    summary: Dict[str, Any] = {"count": len(values)}
    if values:
        summary.update(
            mean=json_safe_number(statistics.mean(values)),
            median=json_safe_number(statistics.median(values)),
            min=json_safe_number(min(values)),
            max=json_safe_number(max(values)),
            stdev=json_safe_number(statistics.stdev(values)) if len(values) > 1 else None,
        )
    summary["percentiles"] = {
        f"p{int(pct)}": json_safe_number(percentile(values, pct)) for pct in PERCENTILES
    }
    return summary


def report_metric(definition: MetricDefinition) -> None:
    print(definition.name + ":")
    if not definition.values:
        print("  (no data)")
        return
    summary = summarize_metric(definition)
    fmt = definition.value_formatter
    print(
        "  mean {mean}, median {median}, min {min}, max {max}".format(
            mean=fmt(summary["mean"]),
            median=fmt(summary["median"]),
            min=fmt(summary["min"]),
            max=fmt(summary["max"]),
        )
    )
    print(
        "  Percentiles: "
        + ", ".join(
            f"{label}={fmt(value) if value is not None else 'nan'}"
            for label, value in summary["percentiles"].items()
        )
    )


def format_seconds(value: float) -> str:
    if value >= 1.0:
        return f"{value:.3f}s"
    return f"{value * 1000:.2f}ms"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run the maze dungeon generator multiple times and report timing and quality statistics."
    )
    parser.add_argument("-n", "--runs", type=int, default=50, help="Number of generations (default: 50)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional seed for the benchmark harness RNG; keeps run seeds reproducible",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Grid height in cells")
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for the JSON report (default: benchmarks/ next to code/)",
    )
    args = parser.parse_args()

    if args.runs <= 0:
        raise SystemExit("Number of runs must be a positive integer")
    if args.width <= 0 or args.height <= 0:
        raise SystemExit("Grid width and height must be positive")

    results = run_benchmark(args.runs, args.seed, args.width, args.height)

    for idx, result in enumerate(results, start=1):
        print(
            "Run {idx:02d}: {time} (seed {seed}) | rooms {rooms} ({coverage:.0%}) | "
            "iterations {iterations}{capped} | end distance {distance:.2f}, path {path}".format(
                idx=idx,
                time=format_seconds(result.duration),
                seed=result.seed,
                rooms=result.rooms,
                coverage=result.coverage,
                iterations=result.iterations,
                capped=" (capped)" if result.capped else "",
                distance=result.end_room_distance,
                path=result.end_room_path_length,
            )
        )
        if not result.is_tree:
            print(f"  Warning: seed {result.seed} produced a maze that is not a spanning tree")

    total_variants: Counter[Hashable] = Counter()
    for result in results:
        total_variants.update(result.variant_counts)
    diversity = 1.0 - gini_coefficient(list(total_variants.values()))

    metrics = [
        MetricDefinition("generation_time", "Generation time", [r.duration for r in results], format_seconds),
        MetricDefinition("coverage", "Visited coverage", [r.coverage for r in results], lambda v: f"{v:.1%}"),
        MetricDefinition("iterations", "Walk iterations", [float(r.iterations) for r in results], lambda v: f"{v:.0f}"),
        MetricDefinition("backtracks", "Backtracks", [float(r.backtracks) for r in results], lambda v: f"{v:.0f}"),
        MetricDefinition("end_room_distance", "End room distance", [r.end_room_distance for r in results]),
        MetricDefinition(
            "end_room_path_length",
            "End room path length",
            [float(r.end_room_path_length) for r in results],
            lambda v: f"{v:.1f}",
        ),
        MetricDefinition("graph_diameter", "Maze diameter", [float(r.graph_diameter) for r in results], lambda v: f"{v:.1f}"),
        MetricDefinition("dead_ends", "Dead ends", [float(r.dead_ends) for r in results], lambda v: f"{v:.1f}"),
    ]

    print()
    print(f"Config runs: {args.runs}, grid {args.width}x{args.height}")
    print(f"Runs cut off by the iteration ceiling: {sum(1 for r in results if r.capped)}")
    aggregated: Dict[str, Any] = {}
    for metric in metrics:
        print()
        report_metric(metric)
        aggregated[metric.key] = summarize_metric(metric)

    total_rooms = sum(total_variants.values())
    if total_rooms:
        print()
        print(f"Room variant distribution (diversity {diversity:.3f}):")
        for variant, count in total_variants.most_common():
            print(f"  {variant}: {count} rooms ({count / total_rooms:.1%})")

    timestamp = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    output_dir = args.output_dir or os.path.join(script_dir, "..", "benchmarks")
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, f"benchmark-{timestamp.strftime('%Y%m%dT%H%M%SZ')}.json")

    benchmark_data = {
        "benchmark_run_info": {
            "timestamp": timestamp.isoformat().replace("+00:00", "Z"),
            "num_iterations": args.runs,
            "parameters": {"seed": args.seed, "width": args.width, "height": args.height},
        },
        "aggregated_results": aggregated,
        "variant_counts": {str(variant): count for variant, count in total_variants.items()},
        "diversity_score": json_safe_number(diversity),
        "results": [
            {
                "run_id": idx,
                "seed": result.seed,
                "total_time_seconds": result.duration,
                "iterations": result.iterations,
                "capped": result.capped,
                "coverage": result.coverage,
                "end_room_path_length": result.end_room_path_length,
                "graph_diameter": result.graph_diameter,
            }
            for idx, result in enumerate(results, start=1)
        ],
    }

    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump(benchmark_data, handle, indent=2, sort_keys=True)
        handle.write("\n")

    print(f"\nSaved benchmark results to {os.path.relpath(output_path)}")


if __name__ == "__main__":
    main()
