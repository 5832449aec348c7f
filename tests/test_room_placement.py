import pytest

from dungeon_geometry import GridPos, Side
from maze_generator import generate_topology
from room_assignment import assign_rooms
from room_placement import (
    EndRoomTrigger,
    apply_open_sides,
    camera_frame,
    instantiate_layout,
    world_position,
)


class FakeRoom:
    def __init__(self, entry, world_pos):
        self.entry = entry
        self.world_pos = world_pos
        self.sides = {}

    def set_side_open(self, side, is_open):
        self.sides[side] = is_open


class FakeSink:
    def __init__(self):
        self.rooms = []

    def place_room(self, entry, world_pos):
        room = FakeRoom(entry, world_pos)
        self.rooms.append(room)
        return room


@pytest.fixture
def layout(first_choice_rng, corner_rules):
    board = generate_topology(3, 3, 0, first_choice_rng)
    return assign_rooms(board, corner_rules, 0, 0)


def test_world_position_negates_rows():
    assert world_position(GridPos(2, 3), (10.0, 5.0)) == (20.0, -15.0)
    assert world_position(GridPos(0, 0), (10.0, 5.0)) == (0.0, 0.0)


def test_camera_frame_centres_on_grid():
    frame = camera_frame(3, 5, (10.0, 4.0))

    assert frame.center == pytest.approx((10.0, -8.0))
    assert frame.view_size == pytest.approx(30.0 * 0.7)


def test_apply_open_sides_toggles_every_side():
    room = FakeRoom(None, (0.0, 0.0))

    apply_open_sides(room, (True, False, False, True))

    assert room.sides == {Side.UP: True, Side.DOWN: False, Side.RIGHT: False, Side.LEFT: True}


def test_instantiate_layout_places_each_entry(layout):
    sink = FakeSink()

    placed = instantiate_layout(layout, sink, (2.0, 2.0))

    assert placed == sink.rooms
    assert [room.entry.index for room in placed] == [entry.index for entry in layout]
    corner = placed[-1]
    assert corner.entry.index == 8
    assert corner.world_pos == (4.0, -4.0)
    assert corner.sides[Side.UP] is True
    assert corner.sides[Side.RIGHT] is False


def test_end_room_trigger_fires_once(layout):
    reached = []
    trigger = EndRoomTrigger(layout, reached.append)

    assert trigger.enter(0) is False
    assert trigger.enter(layout.end_index) is True
    assert trigger.enter(layout.end_index) is False

    assert reached == [layout.end_room]
    assert trigger.triggered
