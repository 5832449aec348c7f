"""DungeonGenerator runs the maze walk and room assignment for one configuration."""

from __future__ import annotations

import random
from time import perf_counter
from typing import Callable, Optional, TypeVar

from dungeon_config import DungeonConfig
from dungeon_constants import MAX_GENERATED_SEED
from dungeon_models import Board, Layout
from maze_generator import generate_topology
from metrics import GenerationMetrics
from room_assignment import assign_rooms

T = TypeVar("T")


class DungeonGenerator:
    """Owns the generation context and the most recently generated dungeon.

    ``board``, ``layout`` and ``seed`` are only replaced once a run has fully
    succeeded; a run that raises leaves the previous dungeon in place.
    """

    def __init__(self, config: DungeonConfig) -> None:
        self.config = config
        self.board: Optional[Board] = None
        self.layout: Optional[Layout] = None
        self.seed: Optional[int] = None
        self.metrics = GenerationMetrics() if config.collect_metrics else None

    def _run_phase(self, name: str, func: Callable[..., T], *args, **kwargs) -> T:
        if self.metrics is None:
            return func(*args, **kwargs)

        start = perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            self.metrics.record_phase(name, perf_counter() - start)

    def resolve_seed(self, seed: Optional[int] = None) -> int:
        """Return the seed for the next run, drawing a fresh one if none is configured."""
        if seed is not None:
            return seed
        if self.config.random_seed is not None:
            return self.config.random_seed
        # Pick a seed randomly so the run can be reproduced later.
        return random.randint(0, MAX_GENERATED_SEED)

    def generate(self, seed: Optional[int] = None) -> Layout:
        """Generates a new dungeon and makes it the current one."""
        config = self.config
        run_seed = self.resolve_seed(seed)
        rng = random.Random(run_seed)

        board = self._run_phase(
            "topology",
            generate_topology,
            config.width,
            config.height,
            config.start_index,
            rng,
        )
        layout = self._run_phase(
            "room_assignment",
            assign_rooms,
            board,
            config.rules,
            config.start_index,
            rng,
        )

        if self.metrics is not None:
            self.metrics.record_result(board, layout)

        self.board = board
        self.layout = layout
        self.seed = run_seed
        return layout
