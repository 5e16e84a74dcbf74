from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List

from .cell import Cell, Coord, DoorDirection
from .errors import ConfigFormatError
from .layout import Grid

logger = logging.getLogger(__name__)

AdjacencyMap = Dict[Coord, FrozenSet[Cell]]

_ORTHOGONAL = (DoorDirection.UP, DoorDirection.DOWN, DoorDirection.LEFT, DoorDirection.RIGHT)


def orthogonal(grid: Grid, coord: Coord) -> List[Cell]:
    """Gets the in-bounds orthogonal neighbors of a coordinate (no wrap-around)."""
    out: List[Cell] = []
    for d in _ORTHOGONAL:
        r, c = d.step(coord)
        if grid.in_bounds(r, c):
            out.append(grid.at(r, c))
    return out


def _can_enter(source: Cell, candidate: Cell) -> bool:
    """Walkways are always enterable; a doorway only from the side it opens onto."""
    if candidate.is_walkway():
        return True
    direction = candidate.door_direction
    if direction is None:
        return False
    return direction.step(candidate.coord) == source.coord


def neighbors(grid: Grid, cell: Cell) -> FrozenSet[Cell]:
    """Cells reachable from `cell` in one legal step.

    Plain room cells have none. A doorway leads only onto the cell it faces.
    A walkway reaches adjacent walkways and doorways that face it.
    """
    direction = cell.door_direction
    if direction is not None:
        r, c = direction.step(cell.coord)
        if not grid.in_bounds(r, c):
            raise ConfigFormatError(
                f"doorway at {cell.coord} opens {direction.name} off the board")
        return frozenset([grid.at(r, c)])
    if cell.is_room():
        return frozenset()
    return frozenset(o for o in orthogonal(grid, cell.coord) if _can_enter(cell, o))


def build_adjacency(grid: Grid) -> AdjacencyMap:
    """Computes the neighbor set of every cell up front; the map is read-only afterwards."""
    adj: AdjacencyMap = {}
    for coord in grid.coords():
        adj[coord] = neighbors(grid, grid.at(*coord))
    logger.debug("adjacency built for %d cells (%d edges)", len(adj), sum(len(v) for v in adj.values()))
    return adj
