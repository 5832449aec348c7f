"""Configuration container for maze dungeon generation."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from dungeon_constants import DEFAULT_CELL_SPACING
from dungeon_errors import EmptyRuleSetError, InvalidDimensionsError
from dungeon_models import PlacementRule


def clamp_start_index(start_index: int, width: int, height: int) -> int:
    """Clamp a user-supplied start index into ``[0, width*height)``."""
    return max(0, min(int(start_index), width * height - 1))


@dataclass
class DungeonConfig:
    """Aggregates all tunable parameters for one dungeon generation context."""

    width: int
    height: int
    # Ordered; the first obligatory rule covering a cell wins.
    rules: Sequence[PlacementRule]
    # Clamped into range on construction, as user input is.
    start_index: int = 0
    # World-space distance between neighbouring cells; only the placement layer uses it.
    cell_spacing: Tuple[float, float] = DEFAULT_CELL_SPACING
    random_seed: Optional[int] = None
    collect_metrics: bool = False

    def __post_init__(self) -> None:
        for size in (self.width, self.height):
            # bool is an Integral too, but never a grid size.
            if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
                raise InvalidDimensionsError(self.width, self.height)
        self.width = int(self.width)
        self.height = int(self.height)

        self.rules = tuple(self.rules)
        if not self.rules:
            raise EmptyRuleSetError()

        self.start_index = clamp_start_index(self.start_index, self.width, self.height)

        spacing_x, spacing_y = self.cell_spacing
        self.cell_spacing = (float(spacing_x), float(spacing_y))
        if self.cell_spacing[0] <= 0 or self.cell_spacing[1] <= 0:
            raise ValueError("DungeonConfig cell_spacing must be positive on both axes")

    @property
    def cell_count(self) -> int:
        return self.width * self.height
