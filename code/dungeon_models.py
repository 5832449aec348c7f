"""Core dataclasses used by the maze dungeon generator."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from dungeon_geometry import (
    ALL_SIDES,
    GridPos,
    GridRect,
    Side,
    linear_index,
    position_of,
)
from grid_renderer import GridRendererMixin

OpenSides = Tuple[bool, bool, bool, bool]
CLOSED_SIDES: OpenSides = (False, False, False, False)


@dataclass(frozen=True)
class Cell:
    """One grid position: whether the maze walk reached it, and which sides are doors."""

    visited: bool = False
    open_sides: OpenSides = CLOSED_SIDES

    def __post_init__(self) -> None:
        sides = tuple(bool(value) for value in self.open_sides)
        if len(sides) != len(ALL_SIDES):
            raise ValueError(f"Cell needs exactly {len(ALL_SIDES)} side flags, got {len(sides)}")
        object.__setattr__(self, "open_sides", sides)

    def is_open(self, side: Side) -> bool:
        return self.open_sides[side.value]

    @property
    def door_count(self) -> int:
        return sum(self.open_sides)


@dataclass(frozen=True)
class Board:
    """The result of a maze walk: ``width*height`` cells in linear-index order."""

    width: int
    height: int
    cells: Tuple[Cell, ...]
    iterations: int = 0  # Walk iterations consumed (carves plus backtracks).
    backtracks: int = 0
    capped: bool = False  # True when the walk was cut off by the iteration ceiling.

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != self.width * self.height:
            raise ValueError(
                f"Board of {self.width}x{self.height} needs {self.width * self.height} cells, got {len(cells)}"
            )
        object.__setattr__(self, "cells", cells)

    def __len__(self) -> int:
        return len(self.cells)

    def cell(self, index: int) -> Cell:
        return self.cells[index]

    def index_of(self, x: int, y: int) -> int:
        return linear_index(x, y, self.width)

    def position_of(self, index: int) -> GridPos:
        return position_of(index, self.width)

    def contains_index(self, index: int) -> bool:
        return 0 <= index < len(self.cells)

    def neighbor(self, index: int, side: Side) -> Optional[int]:
        """Return the index adjacent to ``index`` across ``side``, or None at the grid edge."""
        pos = self.position_of(index)
        nx_, ny_ = pos.x + side.dx, pos.y + side.dy
        if not (0 <= nx_ < self.width and 0 <= ny_ < self.height):
            return None
        return self.index_of(nx_, ny_)

    def visited_indices(self) -> List[int]:
        return [index for index, cell in enumerate(self.cells) if cell.visited]

    @property
    def visited_count(self) -> int:
        return sum(1 for cell in self.cells if cell.visited)

    def passages(self) -> Iterator[Tuple[int, int]]:
        """Yield each two-way door once, as ``(index, neighbour)`` going right or down."""
        for index, cell in enumerate(self.cells):
            for side in (Side.RIGHT, Side.DOWN):
                if not cell.is_open(side):
                    continue
                other = self.neighbor(index, side)
                if other is not None and self.cells[other].is_open(side.opposite()):
                    yield index, other

    def mismatched_sides(self) -> List[Tuple[int, Side]]:
        """Return every open side that is not mirrored by the neighbour (or leads off the grid)."""
        mismatched: List[Tuple[int, Side]] = []
        for index, cell in enumerate(self.cells):
            for side in ALL_SIDES:
                if not cell.is_open(side):
                    continue
                other = self.neighbor(index, side)
                if other is None or not self.cells[other].is_open(side.opposite()):
                    mismatched.append((index, side))
        return mismatched


class SpawnChance(Enum):
    """How a placement rule judges a given cell."""

    CANNOT = 0
    MAY = 1
    MUST = 2


@dataclass(frozen=True)
class PlacementRule:
    """A room variant and the inclusive rectangle of cells where it may (or must) appear."""

    variant_id: Hashable
    min_position: GridPos
    max_position: GridPos
    obligatory: bool = False
    _bounds: GridRect = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        min_position = self.min_position
        max_position = self.max_position
        if not isinstance(min_position, GridPos):
            min_position = GridPos.from_tuple(min_position)
            object.__setattr__(self, "min_position", min_position)
        if not isinstance(max_position, GridPos):
            max_position = GridPos.from_tuple(max_position)
            object.__setattr__(self, "max_position", max_position)
        # An inverted rectangle covers no cell but keeps the rule in the fallback draw.
        object.__setattr__(self, "_bounds", GridRect(min_position, max_position))

    @property
    def bounds(self) -> GridRect:
        return self._bounds

    def spawn_chance(self, x: int, y: int) -> SpawnChance:
        if not self._bounds.contains(x, y):
            return SpawnChance.CANNOT
        return SpawnChance.MUST if self.obligatory else SpawnChance.MAY

    @classmethod
    def everywhere(cls, variant_id: Hashable, width: int, height: int, obligatory: bool = False) -> PlacementRule:
        """Build a rule whose rectangle covers a whole ``width x height`` grid."""
        return cls(variant_id, GridPos(0, 0), GridPos(width - 1, height - 1), obligatory)


@dataclass(frozen=True)
class LayoutEntry:
    """The room chosen for one visited cell."""

    index: int
    position: GridPos
    variant_id: Hashable
    open_sides: OpenSides
    is_end_room: bool = False


@dataclass(frozen=True)
class Layout(GridRendererMixin):
    """Final output: one entry per visited cell, in scan order, with a single end room."""

    width: int
    height: int
    start_index: int
    entries: Tuple[LayoutEntry, ...]
    end_index: int
    spawn_index: int  # First visited cell in scan order; where the player is placed.
    _by_index: Dict[int, LayoutEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)
        end_flags = [entry.index for entry in entries if entry.is_end_room]
        if end_flags != [self.end_index]:
            raise ValueError(
                f"Layout must flag exactly cell {self.end_index} as end room, got {end_flags}"
            )
        object.__setattr__(self, "_by_index", {entry.index: entry for entry in entries})

    def __iter__(self) -> Iterator[LayoutEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def entry_at(self, index: int) -> Optional[LayoutEntry]:
        """Return the entry for cell ``index``, or None when the cell holds no room."""
        return self._by_index.get(index)

    @property
    def end_room(self) -> LayoutEntry:
        return self._by_index[self.end_index]

    @property
    def start_position(self) -> GridPos:
        return position_of(self.start_index, self.width)

    def variant_counts(self) -> Dict[Hashable, int]:
        return dict(Counter(entry.variant_id for entry in self.entries))
