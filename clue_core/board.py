from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Optional, Tuple, Union

from .adjacency import AdjacencyMap, build_adjacency
from .cell import Cell, Coord
from .errors import BoardConfigError, BoardStateError
from .layout import Grid, load_grid
from .legend import Legend, load_legend
from .targets import enumerate_targets, find_example_path

logger = logging.getLogger(__name__)


class ClueBoard:
    """Owns the loaded legend, grid and adjacency map and answers movement queries.

    Construct one, point it at the config files, call initialize() once, then query.
    A failed initialize() leaves the board uninitialized so it can be retried.
    """

    def __init__(self, layout_path: Optional[str] = None, legend_path: Optional[str] = None) -> None:
        self._layout_path = layout_path
        self._legend_path = legend_path
        self._legend: Optional[Legend] = None
        self._grid: Optional[Grid] = None
        self._adjacency: Optional[AdjacencyMap] = None
        self._targets: FrozenSet[Cell] = frozenset()

    def set_config_files(self, layout_path: str, legend_path: str) -> None:
        if self.is_initialized:
            raise BoardStateError("config files cannot change after initialize()")
        self._layout_path = layout_path
        self._legend_path = legend_path

    @property
    def is_initialized(self) -> bool:
        return self._adjacency is not None

    def initialize(self) -> None:
        """Loads the legend, then the layout, then precomputes adjacency."""
        if self.is_initialized:
            raise BoardStateError("board is already initialized")
        if not self._layout_path or not self._legend_path:
            raise BoardStateError("set_config_files() must be called before initialize()")
        try:
            legend = load_legend(self._legend_path)
            grid = load_grid(self._layout_path, legend)
            adjacency = build_adjacency(grid)
        except BoardConfigError as e:
            logger.error("board initialization failed: %s", e)
            raise
        self._legend, self._grid, self._adjacency = legend, grid, adjacency

    def _require(self) -> Tuple[Legend, Grid, AdjacencyMap]:
        if self._legend is None or self._grid is None or self._adjacency is None:
            raise BoardStateError("board is not initialized")
        return self._legend, self._grid, self._adjacency

    # ---------- Queries ----------

    def legend(self) -> Dict[str, str]:
        """Copy of the code -> room name mapping."""
        return self._require()[0].as_dict()

    @property
    def walkway_code(self) -> Optional[str]:
        return self._require()[0].walkway_code

    def card_rooms(self) -> List[str]:
        return self._require()[0].card_rooms()

    def dimensions(self) -> Tuple[int, int]:
        grid = self._require()[1]
        return grid.rows, grid.cols

    @property
    def num_rows(self) -> int:
        return self.dimensions()[0]

    @property
    def num_columns(self) -> int:
        return self.dimensions()[1]

    def cell_at(self, row: int, col: int) -> Cell:
        return self._require()[1].at(row, col)

    def neighbors(self, where: Union[Cell, Coord]) -> FrozenSet[Cell]:
        """Adjacency set for a cell or (row, col) pair."""
        _, grid, adjacency = self._require()
        coord = where.coord if isinstance(where, Cell) else (int(where[0]), int(where[1]))
        if not grid.in_bounds(*coord):
            raise IndexError(f"cell {coord} outside {grid.rows}x{grid.cols} board")
        return adjacency[coord]

    def compute_targets(self, row: int, col: int, steps: int) -> FrozenSet[Cell]:
        """Computes, stores and returns the targets for a move from (row, col)."""
        _, grid, adjacency = self._require()
        start = grid.at(row, col)
        result = frozenset(enumerate_targets(adjacency, start, steps))
        # Only a successful call replaces the stored result.
        self._targets = result
        logger.debug("targets from %s with %d steps: %d cells", start.coord, steps, len(result))
        return result

    def targets(self) -> FrozenSet[Cell]:
        """Result of the most recent compute_targets() call."""
        return self._targets

    def example_path(self, row: int, col: int, dest_row: int, dest_col: int, steps: int) -> Optional[List[Cell]]:
        _, grid, adjacency = self._require()
        return find_example_path(adjacency, grid.at(row, col), grid.at(dest_row, dest_col), steps)

    def render(self, start: Optional[Coord] = None, mark_targets: bool = True) -> str:
        grid = self._require()[1]
        marks = {c.coord for c in self._targets} if mark_targets else set()
        return grid.pretty(start, marks)
