from __future__ import annotations

from typing import Tuple


class ReversiError(ValueError):
    """Base class for every recoverable game error; the message is shown to the player as-is."""


class InvalidConfiguration(ReversiError):
    pass


class OutOfBounds(ReversiError):
    pass


class CellOccupied(ReversiError):
    pass


class IllegalMove(ReversiError):
    def __init__(self, pos: Tuple[int, int]):
        self.pos = pos
        super().__init__(f"You can't place a piece at {pos[0]}, {pos[1]}")


class NoMovesAvailable(ReversiError):
    pass


class BadCommand(ReversiError):
    pass
