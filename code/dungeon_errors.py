"""Exceptions raised when a dungeon cannot be generated from the given input."""

from __future__ import annotations


class DungeonGenerationError(ValueError):
    """Base class for all generation failures."""


class InvalidDimensionsError(DungeonGenerationError):
    """Grid width or height is not a positive integer."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Grid width and height must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class InvalidStartError(DungeonGenerationError):
    """Start index lies outside ``[0, width*height)``."""

    def __init__(self, start_index: int, cell_count: int) -> None:
        super().__init__(
            f"Start index {start_index} is outside the grid of {cell_count} cells"
        )
        self.start_index = start_index
        self.cell_count = cell_count


class EmptyRuleSetError(DungeonGenerationError):
    """Room assignment needs at least one placement rule."""

    def __init__(self) -> None:
        super().__init__("Room assignment requires at least one placement rule")


class NoRoomsGeneratedError(DungeonGenerationError):
    """The board has no visited cell, so there is nothing to assign and no end room."""

    def __init__(self) -> None:
        super().__init__("No cells were visited; the dungeon has no rooms")
