from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Coord = Tuple[int, int]


class DoorDirection(Enum):
    """Side of a doorway that opens onto the walkway, as a (dr, dc) offset."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def step(self, coord: Coord) -> Coord:
        dr, dc = self.value
        return coord[0] + dr, coord[1] + dc


class CellKind(Enum):
    ROOM = 'room'
    WALKWAY = 'walkway'
    DOOR_UP = 'door_up'
    DOOR_DOWN = 'door_down'
    DOOR_LEFT = 'door_left'
    DOOR_RIGHT = 'door_right'

    @property
    def direction(self) -> Optional[DoorDirection]:
        return _KIND_DIRECTION.get(self)


_KIND_DIRECTION = {
    CellKind.DOOR_UP: DoorDirection.UP,
    CellKind.DOOR_DOWN: DoorDirection.DOWN,
    CellKind.DOOR_LEFT: DoorDirection.LEFT,
    CellKind.DOOR_RIGHT: DoorDirection.RIGHT,
}


@dataclass(frozen=True)
class Cell:
    """One grid position. Equality and hashing are by every field, so two loads of
    the same layout produce equal cells."""
    row: int
    col: int
    code: str  # raw text from the layout file, e.g. 'W', 'K>', 'BN'
    kind: CellKind

    @property
    def coord(self) -> Coord:
        return self.row, self.col

    @property
    def initial(self) -> str:
        return self.code[0]

    @property
    def door_direction(self) -> Optional[DoorDirection]:
        return self.kind.direction

    def is_doorway(self) -> bool:
        return self.kind.direction is not None

    def is_walkway(self) -> bool:
        return self.kind is CellKind.WALKWAY

    def is_room(self) -> bool:
        """True for every non-walkway cell, doorways included. A walkway-coded
        door such as `W>` is therefore a room cell, since its kind is a door."""
        return not self.is_walkway()

    def is_label(self) -> bool:
        return self.kind is CellKind.ROOM and self.code[1:] == 'N'
