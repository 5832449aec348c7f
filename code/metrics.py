"""Helpers for collecting instrumentation data during dungeon generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from dungeon_models import Board, Layout


@dataclass
class PhaseMetrics:
    """Aggregated timing for a single generation phase across invocations."""

    name: str
    invocations: int = 0
    total_time: float = 0.0

    def record(self, duration: float) -> None:
        self.invocations += 1
        self.total_time += duration

    def to_dict(self) -> Dict[str, float | int]:
        average_time = self.total_time / self.invocations if self.invocations else 0.0
        return {
            "invocations": self.invocations,
            "total_time": self.total_time,
            "average_time": average_time,
        }


@dataclass
class WalkMetrics:
    """Statistics of the most recent maze walk."""

    iterations: int = 0
    backtracks: int = 0
    visited_cells: int = 0
    total_cells: int = 0
    capped: bool = False
    rooms_assigned: int = 0
    end_room_distance: float = 0.0

    @property
    def coverage(self) -> float:
        return self.visited_cells / self.total_cells if self.total_cells else 0.0

    def to_dict(self) -> Dict[str, float | int | bool]:
        return {
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "visited_cells": self.visited_cells,
            "total_cells": self.total_cells,
            "coverage": self.coverage,
            "capped": self.capped,
            "rooms_assigned": self.rooms_assigned,
            "end_room_distance": self.end_room_distance,
        }


@dataclass
class GenerationMetrics:
    """Container for phase timings and walk statistics recorded during generation."""

    phases: Dict[str, PhaseMetrics] = field(default_factory=dict)
    walk: WalkMetrics = field(default_factory=WalkMetrics)

    def record_phase(self, name: str, duration: float) -> None:
        metrics = self.phases.get(name)
        if metrics is None:
            metrics = PhaseMetrics(name=name)
            self.phases[name] = metrics
        metrics.record(duration)

    def record_result(self, board: Board, layout: Layout) -> None:
        end = layout.end_room.position
        self.walk = WalkMetrics(
            iterations=board.iterations,
            backtracks=board.backtracks,
            visited_cells=board.visited_count,
            total_cells=len(board),
            capped=board.capped,
            rooms_assigned=len(layout),
            end_room_distance=end.distance_to(layout.start_position),
        )

    def snapshot(self) -> Dict[str, Dict]:
        return {
            "phases": {name: metrics.to_dict() for name, metrics in self.phases.items()},
            "walk": self.walk.to_dict(),
        }
