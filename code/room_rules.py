"""Prototype placement rules used by the CLI, the benchmark and the tests."""

from __future__ import annotations

from typing import List

from dungeon_geometry import GridPos
from dungeon_models import PlacementRule


def build_prototype_rules(width: int, height: int) -> List[PlacementRule]:
    """Return an ordered rule set sized for a ``width x height`` grid.

    The corner cell always gets the entrance, halls and chambers can go
    anywhere, and crypts are only allowed in the far (bottom-right) quadrant.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Prototype rules need a positive grid size")

    far_corner = GridPos(width - 1, height - 1)
    quadrant_min = GridPos(width // 2, height // 2)
    return [
        PlacementRule("entrance", GridPos(0, 0), GridPos(0, 0), obligatory=True),
        PlacementRule.everywhere("hall", width, height),
        PlacementRule.everywhere("chamber", width, height),
        PlacementRule("crypt", quadrant_min, far_corner),
    ]
