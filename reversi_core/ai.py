from __future__ import annotations

from typing import List, Tuple

from .board import Coord
from .engine import GameEngine
from .errors import NoMovesAvailable
from .moves import contacts
from .settings import debug


def move_value(engine: GameEngine, pos: Coord) -> int:
    """
    Scores a legal placement by the row distance to each anchor it closes on.
    Column distance only counts while the running total is still exactly zero.
    """
    engine.assert_placeable(pos)
    value = 0
    for anchor in contacts(engine.board, pos, engine.to_move):
        value += abs(anchor[0] - pos[0])
        if value == 0:
            value += abs(anchor[1] - pos[1])
    return value


def best_step(engine: GameEngine) -> Coord:
    """Picks the greedy one-ply move for the side to move; earliest legal move wins ties."""
    if engine.is_finished():
        raise NoMovesAvailable('The game is already finished')
    scored: List[Tuple[Coord, int]] = [(pos, move_value(engine, pos)) for pos in engine.legal_moves()]
    best = scored[0]
    for item in scored:
        if item[1] > best[1]:
            best = item
    debug('ai', f"picked {best[0]} value={best[1]} of {len(scored)} moves")
    return best[0]
