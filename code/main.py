#!/usr/bin/env python3

from __future__ import annotations

import argparse
import random
from typing import List, Optional

from dungeon_config import DungeonConfig
from dungeon_constants import MAX_GENERATED_SEED, RANDOM_SEED
from dungeon_errors import DungeonGenerationError
from dungeon_generator import DungeonGenerator
from room_placement import camera_frame
from room_rules import build_prototype_rules


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze dungeon and print it as ASCII.")
    parser.add_argument("--width", type=int, default=6, help="Grid width in cells (default: 6)")
    parser.add_argument("--height", type=int, default=6, help="Grid height in cells (default: 6)")
    parser.add_argument(
        "--start",
        type=int,
        default=0,
        help="Linear index of the start cell; clamped into the grid (default: 0)",
    )
    parser.add_argument("--seed", type=int, default=RANDOM_SEED, help="Random seed (default: random)")
    parser.add_argument("--no-metrics", action="store_true", help="Skip collecting generation metrics")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    seed = args.seed
    if seed is None:
        # Pick a random seed randomly and print it, so we can reproduce bugs by passing --seed next run.
        seed = random.randint(0, MAX_GENERATED_SEED)
    print(f"Using random seed {seed}")

    try:
        config = DungeonConfig(
            width=args.width,
            height=args.height,
            rules=build_prototype_rules(max(args.width, 1), max(args.height, 1)),
            start_index=args.start,
            random_seed=seed,
            collect_metrics=not args.no_metrics,
        )
        generator = DungeonGenerator(config)
        layout = generator.generate()
    except DungeonGenerationError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc

    layout.print_grid()

    end = layout.end_room
    print(
        f"Start cell {layout.start_index} {layout.start_position.to_tuple()}, "
        f"end room {end.index} {end.position.to_tuple()} ({end.variant_id})"
    )
    frame = camera_frame(config.width, config.height, config.cell_spacing)
    print(f"Camera centre {frame.center}, view size {frame.view_size:.2f}")

    if generator.metrics is not None:
        walk = generator.metrics.walk
        print(
            f"Visited {walk.visited_cells}/{walk.total_cells} cells in {walk.iterations} iterations "
            f"({walk.backtracks} backtracks)"
        )
        if walk.capped:
            print("Warning: the walk hit the iteration ceiling; some cells were left without rooms")


if __name__ == "__main__":
    main()
