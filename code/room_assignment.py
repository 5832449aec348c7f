"""Choose a room variant for each visited cell and designate the end room."""

from __future__ import annotations

import random
from typing import Iterator, List, Optional, Sequence, Tuple

from dungeon_errors import EmptyRuleSetError, InvalidStartError, NoRoomsGeneratedError
from dungeon_geometry import GridPos
from dungeon_models import Board, Layout, LayoutEntry, PlacementRule, SpawnChance
from maze_generator import RandomSource, resolve_rng


def iter_scan_order(board: Board) -> Iterator[Tuple[int, GridPos]]:
    """Yield ``(index, position)`` for every cell, column by column (x outer, y inner)."""
    for x in range(board.width):
        for y in range(board.height):
            yield board.index_of(x, y), GridPos(x, y)


def select_rule_index(
    rules: Sequence[PlacementRule],
    x: int,
    y: int,
    rng: random.Random,
) -> int:
    """Pick the rule that decides the room at ``(x, y)``.

    The first obligatory rule covering the cell wins outright. Otherwise one of
    the covering optional rules is drawn uniformly, and when no rule covers the
    cell at all, any rule may be drawn.
    """
    if not rules:
        raise EmptyRuleSetError()

    candidates: List[int] = []
    for rule_index, rule in enumerate(rules):
        chance = rule.spawn_chance(x, y)
        if chance is SpawnChance.MUST:
            return rule_index
        if chance is SpawnChance.MAY:
            candidates.append(rule_index)

    if candidates:
        return candidates[rng.randrange(len(candidates))]
    return rng.randrange(len(rules))


def find_end_room(board: Board, start_index: int) -> Optional[int]:
    """Return the visited cell farthest (Euclidean) from the start, or None if nothing was visited.

    Ties go to the earliest cell in scan order, since only a strictly greater
    distance replaces the current best.
    """
    start = board.position_of(start_index)
    best_index: Optional[int] = None
    best_distance = -1.0
    for index, position in iter_scan_order(board):
        if not board.cell(index).visited:
            continue
        distance = position.distance_to(start)
        if distance > best_distance:
            best_distance = distance
            best_index = index
    return best_index


def assign_rooms(
    board: Board,
    rules: Sequence[PlacementRule],
    start_index: int,
    rng: RandomSource = None,
) -> Layout:
    """Build the final layout for ``board`` using the ordered placement ``rules``."""
    rules = tuple(rules)
    if not rules:
        raise EmptyRuleSetError()
    if not board.contains_index(start_index):
        raise InvalidStartError(start_index, len(board))

    end_index = find_end_room(board, start_index)
    if end_index is None:
        raise NoRoomsGeneratedError()

    generator = resolve_rng(rng)
    entries: List[LayoutEntry] = []
    for index, position in iter_scan_order(board):
        cell = board.cell(index)
        if not cell.visited:
            continue
        rule = rules[select_rule_index(rules, position.x, position.y, generator)]
        entries.append(
            LayoutEntry(
                index=index,
                position=position,
                variant_id=rule.variant_id,
                open_sides=cell.open_sides,
                is_end_room=index == end_index,
            )
        )

    return Layout(
        width=board.width,
        height=board.height,
        start_index=start_index,
        entries=tuple(entries),
        end_index=end_index,
        spawn_index=entries[0].index,
    )
