from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .cell import Cell, CellKind, Coord
from .config import read_config_lines
from .errors import ConfigFormatError
from .legend import Legend

logger = logging.getLogger(__name__)

MAX_BOARD_SIZE = 50

# Second character of a door cell's code.
DOOR_MARKERS = {
    '^': CellKind.DOOR_UP,
    'v': CellKind.DOOR_DOWN,
    '<': CellKind.DOOR_LEFT,
    '>': CellKind.DOOR_RIGHT,
}


@dataclass(frozen=True)
class Grid:
    """The static board: dimensions and the row-major tuple of cells."""
    rows: int
    cols: int
    cells: Tuple[Cell, ...]  # length == rows * cols

    def index(self, r: int, c: int) -> int:
        return r * self.cols + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def at(self, r: int, c: int) -> Cell:
        """Gets the cell at a row and column. No wrap-around: out of range is an IndexError."""
        if not self.in_bounds(r, c):
            raise IndexError(f"cell ({r}, {c}) outside {self.rows}x{self.cols} board")
        return self.cells[self.index(r, c)]

    def coords(self) -> Iterator[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def pretty(self, start: Optional[Coord] = None, targets: Optional[Set[Coord]] = None) -> str:
        """Plain-text dump: room initials, '.' for walkway, '*' start, 'o' targets."""
        marks = targets or set()
        lines: List[str] = []
        for r in range(self.rows):
            row: List[str] = []
            for c in range(self.cols):
                cell = self.cells[self.index(r, c)]
                if start == (r, c):
                    row.append('*')
                elif (r, c) in marks:
                    row.append('o')
                elif cell.is_walkway():
                    row.append('.')
                elif cell.is_doorway():
                    row.append(cell.initial.lower())
                else:
                    row.append(cell.initial)
            lines.append(' '.join(row))
        return '\n'.join(lines)


def classify(code: str, legend: Legend, source: str = '', line: int = 0) -> CellKind:
    """Derives the cell kind from a one or two character code."""
    if not code or len(code) > 2:
        raise ConfigFormatError(f"bad cell code {code!r}", source, line)
    initial = code[0]
    if initial not in legend:
        raise ConfigFormatError(f"room code {initial!r} is not in the legend", source, line)
    # Door markers win over the walkway code on purpose: `W>` is a doorway.
    door = DOOR_MARKERS.get(code[1:])
    if door is not None:
        return door
    if legend.is_walkway(initial):
        return CellKind.WALKWAY
    # Any other second character ('N' label, repeated initial) is still plain room.
    return CellKind.ROOM


def parse_grid(lines: Iterable[str], legend: Legend, source: str = '') -> Grid:
    """Parses comma separated rows of cell codes into a Grid, checking the legend,
    rectangularity and the size limit."""
    cells: List[Cell] = []
    cols = -1
    r = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        codes = [t.strip() for t in line.split(',')]
        if cols < 0:
            cols = len(codes)
            if cols > MAX_BOARD_SIZE:
                raise ConfigFormatError(f"{cols} columns exceeds maximum {MAX_BOARD_SIZE}", source, lineno)
        elif len(codes) != cols:
            raise ConfigFormatError(
                f"row {r} has {len(codes)} columns, expected {cols}", source, lineno)
        if r >= MAX_BOARD_SIZE:
            raise ConfigFormatError(f"more than {MAX_BOARD_SIZE} rows", source, lineno)
        for c, code in enumerate(codes):
            kind = classify(code, legend, source, lineno)
            cells.append(Cell(row=r, col=c, code=code, kind=kind))
        r += 1
    if r == 0:
        raise ConfigFormatError("layout has no rows", source)
    return Grid(rows=r, cols=cols, cells=tuple(cells))


def load_grid(path: str, legend: Legend) -> Grid:
    grid = parse_grid(read_config_lines(path), legend, source=path)
    logger.info("loaded layout %s: %dx%d", path, grid.rows, grid.cols)
    return grid
