"""Randomized depth-first maze walk that carves door pairs between grid cells."""

from __future__ import annotations

import random
from typing import List, Union

from dungeon_constants import MAX_WALK_ITERATIONS
from dungeon_errors import InvalidDimensionsError, InvalidStartError
from dungeon_geometry import side_between
from dungeon_models import Board, Cell

RandomSource = Union[random.Random, int, None]


def resolve_rng(rng: RandomSource) -> random.Random:
    """Accept a Random instance, an integer seed, or None (module-level random)."""
    if rng is None:
        return random  # type: ignore[return-value]
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


def validate_grid(width: int, height: int, start_index: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(width, height)
    cell_count = width * height
    if not 0 <= start_index < cell_count:
        raise InvalidStartError(start_index, cell_count)


def unvisited_neighbors(cell: int, width: int, visited: List[bool]) -> List[int]:
    """Return unvisited grid-adjacent cells, always in the order up, down, right, left."""
    cell_count = len(visited)
    neighbors: List[int] = []
    up = cell - width
    if up >= 0 and not visited[up]:
        neighbors.append(up)
    down = cell + width
    if down < cell_count and not visited[down]:
        neighbors.append(down)
    # Horizontal moves must not wrap onto the next or previous row.
    if (cell + 1) % width != 0 and not visited[cell + 1]:
        neighbors.append(cell + 1)
    if cell % width != 0 and not visited[cell - 1]:
        neighbors.append(cell - 1)
    return neighbors


def generate_topology(
    width: int,
    height: int,
    start_index: int,
    rng: RandomSource = None,
) -> Board:
    """Walk the grid from ``start_index`` and return the carved board.

    The walk stops when the backtrack stack runs dry, when it steps onto the
    last linear cell (``width*height - 1``), or after ``MAX_WALK_ITERATIONS``
    iterations, whichever comes first. Stopping on the last cell is part of
    the algorithm and changes which cells end up visited.
    """
    validate_grid(width, height, start_index)
    generator = resolve_rng(rng)

    cell_count = width * height
    last_index = cell_count - 1
    visited = [False] * cell_count
    open_sides = [[False, False, False, False] for _ in range(cell_count)]

    current = start_index
    path: List[int] = []
    iterations = 0
    backtracks = 0
    capped = False

    while iterations < MAX_WALK_ITERATIONS:
        iterations += 1
        visited[current] = True

        if current == last_index:
            break

        neighbors = unvisited_neighbors(current, width, visited)
        if not neighbors:
            if not path:
                break
            current = path.pop()
            backtracks += 1
            continue

        path.append(current)
        chosen = neighbors[generator.randrange(len(neighbors))]
        side = side_between(current, chosen, width)
        open_sides[current][side.value] = True
        open_sides[chosen][side.opposite().value] = True
        current = chosen
    else:
        capped = True

    cells = tuple(
        Cell(visited=visited[index], open_sides=tuple(open_sides[index]))  # type: ignore[arg-type]
        for index in range(cell_count)
    )
    return Board(
        width=width,
        height=height,
        cells=cells,
        iterations=iterations,
        backtracks=backtracks,
        capped=capped,
    )
