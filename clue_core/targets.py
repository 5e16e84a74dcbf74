from __future__ import annotations

from typing import Iterator, List, Mapping, Optional, Set, FrozenSet, Tuple

from .cell import Cell, Coord

# (cell, steps left when leaving it, its unexplored neighbors)
_Frame = Tuple[Cell, int, Iterator[Cell]]


def _check_steps(steps: int) -> None:
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")


def enumerate_targets(adjacency: Mapping[Coord, FrozenSet[Cell]], start: Cell, steps: int) -> Set[Cell]:
    """
    Finds every cell a token on `start` can end its move on after `steps` steps.
    Depth First Search over paths that never revisit a cell; reaching a doorway
    ends the path early since entering a room ends movement.
    The walk keeps its own stack, so path length is not limited by the recursion limit.
    """
    _check_steps(steps)
    results: Set[Cell] = set()
    visited: Set[Cell] = set([start])
    stack: List[_Frame] = [(start, steps, iter(adjacency[start.coord]))]

    while stack:
        current, remaining, pending = stack[-1]
        nxt = next(pending, None)
        if nxt is None:
            # Backtrack: current is free again for other branches.
            stack.pop()
            visited.discard(current)
            continue
        if nxt in visited:
            continue
        if remaining == 1 or nxt.is_doorway():
            results.add(nxt)
            continue
        visited.add(nxt)
        stack.append((nxt, remaining - 1, iter(adjacency[nxt.coord])))

    # The start can never be a target: it stays in `visited` until the walk ends.
    return results


def find_example_path(
    adjacency: Mapping[Coord, FrozenSet[Cell]],
    start: Cell,
    dest: Cell,
    steps: int,
) -> Optional[List[Cell]]:
    """Finds one legal path from start to dest using the same rules as enumerate_targets."""
    _check_steps(steps)

    def ordered(cell: Cell) -> Iterator[Cell]:
        return iter(sorted(adjacency[cell.coord], key=lambda c: c.coord))

    visited: Set[Cell] = set([start])
    stack: List[_Frame] = [(start, steps, ordered(start))]

    while stack:
        current, remaining, pending = stack[-1]
        nxt = next(pending, None)
        if nxt is None:
            stack.pop()
            visited.discard(current)
            continue
        if nxt in visited:
            continue
        if remaining == 1 or nxt.is_doorway():
            if nxt == dest:
                return [frame[0] for frame in stack] + [nxt]
            continue
        visited.add(nxt)
        stack.append((nxt, remaining - 1, ordered(nxt)))
    return None
