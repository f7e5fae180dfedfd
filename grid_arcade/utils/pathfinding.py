"""Breadth-first pathfinding over a :class:`Board`.

``find_path`` is shared by the navigation game (path computed once, then
followed) and the chase enemy (path recomputed every tick toward the
player's current position). Neighbours are expanded in the fixed order
UP, DOWN, LEFT, RIGHT and each coordinate is visited at most once, so the
result is deterministic and, by BFS, a shortest path in edge count.
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from grid_arcade.board import Board
from grid_arcade.components import Cell, Position, Tag
from grid_arcade.errors import OutOfRangeError
from grid_arcade.moves import adjacent_positions
from grid_arcade.types import NavigablePredicate

Path = Tuple[Position, ...]


@dataclass(frozen=True)
class PathResult:
    """Outcome of a search.

    Attributes:
        has_path: False when the goal is unreachable.
        path: Start..goal inclusive, or empty when unreachable.
    """

    has_path: bool
    path: Path = ()


NO_PATH = PathResult(has_path=False, path=())


def is_navigable_cell(cell: Cell, pos: Position) -> bool:
    """Default predicate: the cell carries ``Tag.NAVIGABLE``."""
    return cell.has(Tag.NAVIGABLE)


def find_path(
    board: Board,
    start: Position,
    goal: Position,
    is_navigable: NavigablePredicate = is_navigable_cell,
) -> PathResult:
    """Shortest 4-connected path from ``start`` to ``goal``.

    The start cell is never tested against ``is_navigable``; every other cell
    entered, the goal included, must pass it.

    Raises:
        OutOfRangeError: If ``start`` or ``goal`` is outside the board.
    """
    for pos in (start, goal):
        if not board.in_bounds(pos):
            raise OutOfRangeError(pos.row, pos.col, board.rows, board.cols)

    if start == goal:
        return PathResult(has_path=True, path=(start,))

    queue: deque[Position] = deque([start])
    prev: Dict[Position, Position] = {}
    visited = {start}
    found = False

    while queue and not found:
        pos = queue.popleft()
        for nxt in adjacent_positions(pos, board.rows, board.cols):
            if nxt in visited or not is_navigable(board.get(nxt), nxt):
                continue
            prev[nxt] = pos
            visited.add(nxt)
            if nxt == goal:
                found = True
                break
            queue.append(nxt)

    if not found:
        return NO_PATH

    path = [goal]
    while path[-1] != start:
        path.append(prev[path[-1]])
    path.reverse()
    return PathResult(has_path=True, path=tuple(path))


def first_step(path: Sequence[Position]) -> Optional[Position]:
    """The position right after the start, or ``None`` for paths shorter than 2."""
    if len(path) <= 1:
        return None
    return path[1]


def highlight_path(board: Board, path: Sequence[Position], tag: Tag = Tag.ON_PATH) -> Board:
    """Scratch board with the interior of ``path`` tagged (endpoints untouched)."""
    return board.with_cells((pos, board.get(pos).tagged(tag)) for pos in path[1:-1])


def clear_highlights(board: Board, tag: Tag = Tag.ON_PATH) -> Board:
    """Scratch board with ``tag`` removed from every cell."""
    return board.with_cells(
        (pos, board.get(pos).untagged(tag))
        for pos in board.positions()
        if board.get(pos).has(tag)
    )
