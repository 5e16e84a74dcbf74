from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from flask import Flask, current_app, jsonify, request

from clue_core.board import ClueBoard
from clue_core.cell import Cell
from clue_core.config import BoardConfig
from clue_core.errors import BoardConfigError

logger = logging.getLogger(__name__)


def cell_to_json(cell: Cell) -> Dict[str, Any]:
    return {"row": int(cell.row), "col": int(cell.col), "code": cell.code, "kind": cell.kind.value}


def _cells_to_json(cells) -> list:
    return [cell_to_json(c) for c in sorted(cells, key=lambda c: c.coord)]


def _get_board() -> ClueBoard:
    """Returns the app's board, loading it from the environment config on first use."""
    board: ClueBoard = current_app.extensions["clue_board"]
    if not board.is_initialized:
        logger.info("loading board on first request")
        board.initialize()
    return board


def _int_arg(source: Dict[str, Any], name: str) -> int:
    if name not in source:
        raise ValueError(f"{name} required")
    value = source[name]
    # JSON null, lists, objects and booleans are all rejected, not coerced.
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _coord_from_query() -> Tuple[int, int]:
    return _int_arg(request.args, "row"), _int_arg(request.args, "col")


def create_app(board: Optional[ClueBoard] = None) -> Flask:
    app = Flask(__name__)
    if board is None:
        cfg = BoardConfig.from_env()
        board = ClueBoard(cfg.layout_path, cfg.legend_path)
    app.extensions["clue_board"] = board

    @app.errorhandler(BoardConfigError)
    def _config_error(e: BoardConfigError) -> Any:
        return jsonify({"ok": False, "error": f"board config: {e}"}), 500

    @app.errorhandler(ValueError)
    def _bad_value(e: ValueError) -> Any:
        return jsonify({"ok": False, "error": str(e)}), 400

    @app.errorhandler(IndexError)
    def _bad_index(e: IndexError) -> Any:
        return jsonify({"ok": False, "error": str(e)}), 400

    @app.get("/api/legend")
    def api_legend() -> Any:
        b = _get_board()
        return jsonify({"ok": True, "legend": b.legend(), "walkway": b.walkway_code, "cardRooms": b.card_rooms()})

    @app.get("/api/dimensions")
    def api_dimensions() -> Any:
        rows, cols = _get_board().dimensions()
        return jsonify({"ok": True, "rows": rows, "cols": cols})

    @app.get("/api/cell")
    def api_cell() -> Any:
        b = _get_board()
        r, c = _coord_from_query()
        return jsonify({"ok": True, "cell": cell_to_json(b.cell_at(r, c))})

    @app.get("/api/neighbors")
    def api_neighbors() -> Any:
        b = _get_board()
        return jsonify({"ok": True, "neighbors": _cells_to_json(b.neighbors(_coord_from_query()))})

    @app.post("/api/targets")
    def api_compute_targets() -> Any:
        b = _get_board()
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            return jsonify({"ok": False, "error": "JSON object body required"}), 400
        r, c, steps = _int_arg(body, "row"), _int_arg(body, "col"), _int_arg(body, "steps")
        targets = b.compute_targets(r, c, steps)
        return jsonify({"ok": True, "targets": _cells_to_json(targets)})

    @app.get("/api/targets")
    def api_last_targets() -> Any:
        return jsonify({"ok": True, "targets": _cells_to_json(_get_board().targets())})

    return app


if __name__ == "__main__":
    _cfg = BoardConfig.from_env()
    logging.basicConfig(level=_cfg.log_level(), format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    create_app(ClueBoard(_cfg.layout_path, _cfg.legend_path)).run(debug=_cfg.debug)
