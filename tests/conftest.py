import random
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from dungeon_config import DungeonConfig
from dungeon_geometry import GridPos
from dungeon_models import PlacementRule
from room_rules import build_prototype_rules


class FirstChoiceRandom(random.Random):
    """Random source that always picks the first candidate."""

    def randrange(self, *args, **kwargs) -> int:
        return 0


@pytest.fixture
def first_choice_rng() -> FirstChoiceRandom:
    return FirstChoiceRandom()


@pytest.fixture
def corner_rules() -> list[PlacementRule]:
    """An obligatory rule on (0, 0) plus two optional rules covering a 3x3 grid."""
    return [
        PlacementRule("entrance", GridPos(0, 0), GridPos(0, 0), obligatory=True),
        PlacementRule.everywhere("hall", 3, 3),
        PlacementRule.everywhere("chamber", 3, 3),
    ]


@pytest.fixture
def make_config() -> Callable[..., DungeonConfig]:
    def _make_config(
        *,
        width: int = 5,
        height: int = 5,
        start_index: int = 0,
        random_seed: int | None = 1234,
        collect_metrics: bool = False,
    ) -> DungeonConfig:
        return DungeonConfig(
            width=width,
            height=height,
            rules=build_prototype_rules(width, height),
            start_index=start_index,
            random_seed=random_seed,
            collect_metrics=collect_metrics,
        )

    return _make_config
