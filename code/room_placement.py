"""Contracts and helpers for the layer that turns a layout into placed rooms.

The generator never touches presentation objects itself. A host supplies a
``RoomSink`` that builds one room per layout entry and hands back something
that can toggle each side between door and wall.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Protocol, Tuple

from dungeon_constants import CAMERA_FRAME_SCALE
from dungeon_geometry import ALL_SIDES, GridPos, Side
from dungeon_models import Layout, LayoutEntry, OpenSides

WorldPos = Tuple[float, float]


class DoorToggle(Protocol):
    """A placed room that can show a door or a wall on each side."""

    def set_side_open(self, side: Side, is_open: bool) -> None:
        ...


class RoomSink(Protocol):
    """Creates the visual room for a layout entry at a world position."""

    def place_room(self, entry: LayoutEntry, world_pos: WorldPos) -> DoorToggle:
        ...


@dataclass(frozen=True)
class CameraFrame:
    """Where to centre the camera and how much of the world it should show."""

    center: WorldPos
    view_size: float


def world_position(position: GridPos, spacing: Tuple[float, float]) -> WorldPos:
    """Map a cell to world space; rows grow downward, so y is negated."""
    spacing_x, spacing_y = spacing
    return position.x * spacing_x, -position.y * spacing_y


def camera_frame(width: int, height: int, spacing: Tuple[float, float]) -> CameraFrame:
    """Frame the whole ``width x height`` dungeon."""
    spacing_x, spacing_y = spacing
    center = ((width - 1) * spacing_x * 0.5, -(height - 1) * spacing_y * 0.5)
    view_size = max(width * spacing_x, height * spacing_y) * CAMERA_FRAME_SCALE
    return CameraFrame(center=center, view_size=view_size)


def apply_open_sides(room: DoorToggle, open_sides: OpenSides) -> None:
    """Show a door on every open side and a wall on every closed one."""
    for side in ALL_SIDES:
        room.set_side_open(side, open_sides[side.value])


def instantiate_layout(
    layout: Layout,
    sink: RoomSink,
    spacing: Tuple[float, float],
) -> List[DoorToggle]:
    """Place every room of ``layout`` through ``sink``, in layout order."""
    placed: List[DoorToggle] = []
    for entry in layout:
        room = sink.place_room(entry, world_position(entry.position, spacing))
        apply_open_sides(room, entry.open_sides)
        placed.append(room)
    return placed


class EndRoomTrigger:
    """Calls ``on_reached`` the first time the player enters the end room, and never again."""

    def __init__(self, layout: Layout, on_reached: Callable[[LayoutEntry], None]) -> None:
        self.layout = layout
        self.on_reached = on_reached
        self.triggered = False

    def enter(self, index: int) -> bool:
        """Report that the player entered cell ``index``; returns True if this fired the notification."""
        if self.triggered or index != self.layout.end_index:
            return False
        self.triggered = True
        self.on_reached(self.layout.end_room)
        return True
