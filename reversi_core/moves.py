from __future__ import annotations

from typing import List, Optional, Set, Tuple

from .board import Board, Cell, Coord

Direction = Tuple[int, int]

DIRECTIONS: Tuple[Direction, ...] = (
    (1, 0), (0, 1), (-1, 0), (0, -1),
    (1, 1), (-1, -1), (1, -1), (-1, 1),
)


def step(pos: Coord, direction: Direction) -> Coord:
    return pos[0] + direction[0], pos[1] + direction[1]


def contact_in_direction(board: Board, pos: Coord, direction: Direction, mover: Cell) -> Optional[Coord]:
    """
    Walks outward from pos and returns the mover-coloured anchor closing a capturing run,
    or None if the walk hits the edge or an empty cell first.
    Mover-coloured cells seen before any opponent cell do not end the walk.
    """
    opponent_seen = False
    cur = step(pos, direction)
    while board.in_bounds(cur):
        color = board.at(cur)
        if color is Cell.EMPTY:
            return None
        if color is not mover:
            opponent_seen = True
        elif opponent_seen:
            return cur
        cur = step(cur, direction)
    return None


def contacts(board: Board, pos: Coord, mover: Cell) -> List[Coord]:
    """Anchors for a placement at pos, one per capturing direction, in DIRECTIONS order."""
    results: List[Coord] = []
    for direction in DIRECTIONS:
        anchor = contact_in_direction(board, pos, direction, mover)
        if anchor is not None:
            results.append(anchor)
    return results


def is_capturing_placement(board: Board, pos: Coord, mover: Cell) -> bool:
    """True if pos is an empty on-board cell whose placement closes at least one run."""
    if not board.in_bounds(pos) or board.at(pos) is not Cell.EMPTY:
        return False
    return bool(contacts(board, pos, mover))


def landings_from(board: Board, origin: Coord, mover: Cell) -> List[Coord]:
    """Empty cells reachable from an own piece across at least one opponent piece."""
    found: List[Coord] = []
    for direction in DIRECTIONS:
        opponent_seen = False
        cur = step(origin, direction)
        while board.in_bounds(cur):
            color = board.at(cur)
            if color is Cell.EMPTY:
                if opponent_seen:
                    found.append(cur)
                break
            if color is mover:
                break
            opponent_seen = True
            cur = step(cur, direction)
    return found


def legal_moves(board: Board, mover: Cell) -> List[Coord]:
    """Calculates all legal placements for mover, sorted by (row, col)."""
    dests: Set[Coord] = set()
    for pos in board.coords():
        if board.at(pos) is mover:
            dests.update(landings_from(board, pos, mover))
    return sorted(dests)


def cells_between(start: Coord, end: Coord) -> List[Coord]:
    """Cells strictly between two points on a shared row, column or diagonal."""
    dr = (end[0] > start[0]) - (end[0] < start[0])
    dc = (end[1] > start[1]) - (end[1] < start[1])
    out: List[Coord] = []
    cur = (start[0] + dr, start[1] + dc)
    while cur != end:
        out.append(cur)
        cur = (cur[0] + dr, cur[1] + dc)
    return out
