"""
Clue board core Python package.

This package holds the board model and the movement engine used by the
CLI driver and the Flask app.
Modules:
- cell.py: Cell, CellKind, DoorDirection, Coord
- errors.py: configuration and lifecycle errors
- legend.py / layout.py: config file loaders
- adjacency.py: one-step neighbor rules
- targets.py: exact-step target enumeration
- board.py: ClueBoard facade
"""

from .board import ClueBoard
from .cell import Cell, CellKind, Coord, DoorDirection
from .errors import BoardConfigError, BoardStateError, ConfigFormatError, ConfigNotFoundError

__all__ = [
    "ClueBoard",
    "Cell",
    "CellKind",
    "Coord",
    "DoorDirection",
    "BoardConfigError",
    "BoardStateError",
    "ConfigFormatError",
    "ConfigNotFoundError",
]
