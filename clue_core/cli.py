from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .board import ClueBoard
from .config import BoardConfig
from .errors import BoardConfigError


def _fmt_cells(cells) -> str:
    return ' '.join(f"({c.row},{c.col})" for c in sorted(cells, key=lambda c: c.coord))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Clue board loader and movement target calculator')
    parser.add_argument('--layout', default=None, help='Board layout CSV (default: $CLUE_LAYOUT or data/ClueLayout.csv)')
    parser.add_argument('--legend', default=None, help='Room legend file (default: $CLUE_LEGEND or data/ClueLegend.txt)')
    parser.add_argument('--row', type=int, default=None, help='Start row for a target query')
    parser.add_argument('--col', type=int, default=None, help='Start column for a target query')
    parser.add_argument('--steps', type=int, default=None, help='Number of steps (e.g. a die roll)')
    parser.add_argument('--show-paths', action='store_true', help='Show one example path per target')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    cfg = BoardConfig.from_env(layout=args.layout, legend=args.legend)
    level = logging.DEBUG if args.verbose else cfg.log_level()
    logging.basicConfig(level=level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    board = ClueBoard(cfg.layout_path, cfg.legend_path)
    try:
        board.initialize()
    except BoardConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    rows, cols = board.dimensions()
    print(f"Board {rows}x{cols}")
    print('Legend:')
    for code, name in board.legend().items():
        print(f"  {code}: {name}")

    query = (args.row, args.col, args.steps)
    if all(v is None for v in query):
        print(board.render())
        return 0
    if any(v is None for v in query):
        parser.error('--row, --col and --steps must be given together')
    try:
        targets = board.compute_targets(args.row, args.col, args.steps)
    except (IndexError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(board.render(start=(args.row, args.col)))
    print(f"\n{len(targets)} targets from ({args.row},{args.col}) with {args.steps} steps:")
    print(_fmt_cells(targets))
    if args.show_paths:
        for t in sorted(targets, key=lambda c: c.coord):
            path = board.example_path(args.row, args.col, t.row, t.col, args.steps)
            if path is not None:
                print(f"  ({t.row},{t.col}): {' -> '.join(f'({c.row},{c.col})' for c in path)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
