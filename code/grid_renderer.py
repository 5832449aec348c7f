"""Render a generated layout to an ASCII grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, List, Tuple

if TYPE_CHECKING:
    from dungeon_models import LayoutEntry

WALL_CHAR = "#"
DOOR_CHAR = " "
EMPTY_CHAR = "."
START_CHAR = "S"
END_CHAR = "E"


class GridRendererMixin:
    """Provides drawing helpers for visualizing a layout.

    Each cell becomes a 3x3 block: the corners are walls, the edge centres
    are doors or walls, and the centre shows the room variant.
    """

    width: int
    height: int
    start_index: int
    end_index: int
    entries: Tuple["LayoutEntry", ...]

    @staticmethod
    def _variant_char(variant_id: Hashable) -> str:
        text = str(variant_id)
        return text[0] if text else "?"

    def draw_to_grid(self) -> List[List[str]]:
        """Renders every cell of the layout onto a fresh character grid."""
        grid = [[EMPTY_CHAR] * (self.width * 3) for _ in range(self.height * 3)]
        for entry in self.entries:
            x, y = entry.position
            top, left = y * 3, x * 3
            for j in range(3):
                for i in range(3):
                    grid[top + j][left + i] = WALL_CHAR
            up, down, right, left_open = entry.open_sides
            if up:
                grid[top][left + 1] = DOOR_CHAR
            if down:
                grid[top + 2][left + 1] = DOOR_CHAR
            if right:
                grid[top + 1][left + 2] = DOOR_CHAR
            if left_open:
                grid[top + 1][left] = DOOR_CHAR

            if entry.index == self.end_index:
                centre = END_CHAR
            elif entry.index == self.start_index:
                centre = START_CHAR
            else:
                centre = self._variant_char(entry.variant_id)
            grid[top + 1][left + 1] = centre
        return grid

    def render_lines(self, horizontal_sep: str = "") -> List[str]:
        return [horizontal_sep.join(row) for row in self.draw_to_grid()]

    def print_grid(self, horizontal_sep: str = "") -> None:
        """Prints the ASCII grid to the console."""
        for line in self.render_lines(horizontal_sep):
            print(line)
