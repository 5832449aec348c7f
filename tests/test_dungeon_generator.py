import pytest

from dungeon_config import DungeonConfig, clamp_start_index
from dungeon_errors import EmptyRuleSetError, InvalidDimensionsError, NoRoomsGeneratedError
from dungeon_generator import DungeonGenerator
from maze_graph import is_spanning_tree
import dungeon_generator


def test_generate_populates_board_layout_and_seed(make_config):
    generator = DungeonGenerator(make_config(random_seed=77))

    layout = generator.generate()

    assert generator.layout is layout
    assert generator.board is not None
    assert generator.seed == 77
    assert len(layout) == generator.board.visited_count
    assert layout.entry_at(0).variant_id == "entrance"
    assert is_spanning_tree(generator.board)


def test_generate_is_reproducible_for_a_seed(make_config):
    first = DungeonGenerator(make_config(random_seed=5)).generate()
    second = DungeonGenerator(make_config(random_seed=5)).generate()

    assert first == second


def test_explicit_seed_overrides_config(make_config):
    generator = DungeonGenerator(make_config(random_seed=1))

    from_override = generator.generate(seed=9)
    from_config = DungeonGenerator(make_config(random_seed=9)).generate()

    assert generator.seed == 9
    assert from_override == from_config


def test_unseeded_run_records_the_seed_it_drew(make_config):
    generator = DungeonGenerator(make_config(random_seed=None))

    layout = generator.generate()

    assert generator.seed is not None
    assert DungeonGenerator(make_config(random_seed=generator.seed)).generate() == layout


def test_failed_run_keeps_previous_layout(make_config, monkeypatch):
    generator = DungeonGenerator(make_config(random_seed=3))
    previous_layout = generator.generate()
    previous_board = generator.board

    def _fail(*args, **kwargs):
        raise NoRoomsGeneratedError()

    monkeypatch.setattr(dungeon_generator, "assign_rooms", _fail)

    with pytest.raises(NoRoomsGeneratedError):
        generator.generate(seed=4)

    assert generator.layout is previous_layout
    assert generator.board is previous_board
    assert generator.seed == 3


def test_metrics_are_collected_when_enabled(make_config):
    generator = DungeonGenerator(make_config(collect_metrics=True))

    layout = generator.generate()

    snapshot = generator.metrics.snapshot()
    assert set(snapshot["phases"]) == {"topology", "room_assignment"}
    assert snapshot["phases"]["topology"]["invocations"] == 1
    walk = snapshot["walk"]
    assert walk["rooms_assigned"] == len(layout)
    assert walk["visited_cells"] == generator.board.visited_count
    assert walk["total_cells"] == 25
    assert 0.0 < walk["coverage"] <= 1.0


def test_metrics_are_absent_by_default(make_config):
    generator = DungeonGenerator(make_config())

    generator.generate()

    assert generator.metrics is None


def test_config_clamps_start_index(make_config):
    assert make_config(start_index=-4).start_index == 0
    assert make_config(start_index=99).start_index == 24
    assert clamp_start_index(7, 3, 3) == 7


def test_config_validates_dimensions_and_rules(make_config):
    rules = make_config().rules
    with pytest.raises(InvalidDimensionsError):
        DungeonConfig(width=0, height=3, rules=rules)
    with pytest.raises(EmptyRuleSetError):
        DungeonConfig(width=3, height=3, rules=[])
    with pytest.raises(ValueError):
        DungeonConfig(width=3, height=3, rules=rules, cell_spacing=(0.0, 1.0))


@pytest.mark.parametrize("width,height", [(2.5, 3), (3, 4.0), (True, 3), ("3", 3)])
def test_config_rejects_non_integer_dimensions(make_config, width, height):
    rules = make_config().rules
    with pytest.raises(InvalidDimensionsError):
        DungeonConfig(width=width, height=height, rules=rules)
