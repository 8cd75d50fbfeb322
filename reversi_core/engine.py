from __future__ import annotations

from typing import List, Optional, Tuple

from .board import Board, Cell, Coord
from .errors import CellOccupied, IllegalMove, OutOfBounds
from .moves import cells_between, contacts, legal_moves


class GameEngine:
    """
    Owns one board and the side to move. Black moves first.
    There is no pass rule: a side with no legal move ends the game.
    """

    def __init__(self, width: int = 8):
        self.board = Board(width)
        self.to_move = Cell.BLACK

    @property
    def width(self) -> int:
        return self.board.width

    def legal_moves(self) -> List[Coord]:
        return legal_moves(self.board, self.to_move)

    def assert_placeable(self, pos: Coord) -> None:
        """Raises OutOfBounds, CellOccupied or IllegalMove if pos cannot be played now."""
        if not self.board.in_bounds(pos):
            raise OutOfBounds(f'step out of bound: {pos[0]}, {pos[1]}')
        if self.board.at(pos) is not Cell.EMPTY:
            raise CellOccupied(f'place {pos[0]}, {pos[1]} has already been taken')
        if tuple(pos) not in set(self.legal_moves()):
            raise IllegalMove(tuple(pos))

    def apply(self, pos: Coord) -> List[Coord]:
        """Plays pos for the side to move and returns the flipped cells."""
        pos = (int(pos[0]), int(pos[1]))
        self.assert_placeable(pos)
        mover = self.to_move
        flipped: List[Coord] = []
        for anchor in contacts(self.board, pos, mover):
            for cell in cells_between(pos, anchor):
                if self.board.at(cell) is not mover:
                    self.board.set(cell, mover)
                    flipped.append(cell)
        self.board.set(pos, mover)
        self.to_move = mover.opponent()
        return flipped

    def is_finished(self) -> bool:
        return not self.legal_moves()

    def score(self) -> Tuple[int, int]:
        """Returns (white, black) piece counts."""
        return self.board.count(Cell.WHITE), self.board.count(Cell.BLACK)

    def winner(self) -> Optional[Cell]:
        white, black = self.score()
        if white > black:
            return Cell.WHITE
        if black > white:
            return Cell.BLACK
        return None

    def snapshot(self) -> Tuple[Tuple[Tuple[Cell, ...], ...], Cell]:
        return self.board.rows(), self.to_move
