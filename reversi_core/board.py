from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from .errors import InvalidConfiguration, OutOfBounds

Coord = Tuple[int, int]


class Cell(Enum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2

    def opponent(self) -> 'Cell':
        if self is Cell.WHITE:
            return Cell.BLACK
        if self is Cell.BLACK:
            return Cell.WHITE
        raise ValueError('EMPTY has no opponent')


class Board:
    """Square grid of cells with the standard four-piece opening in the centre."""

    def __init__(self, width: int = 8):
        if not isinstance(width, int) or isinstance(width, bool):
            raise InvalidConfiguration(f'width must be an integer, got {width!r}')
        if width < 2 or width % 2 != 0:
            raise InvalidConfiguration(f'width must be an even number >= 2, got {width}')
        self.width = width
        self._grid: List[List[Cell]] = [[Cell.EMPTY] * width for _ in range(width)]
        c = width // 2
        self._grid[c - 1][c - 1] = Cell.WHITE
        self._grid[c][c] = Cell.WHITE
        self._grid[c][c - 1] = Cell.BLACK
        self._grid[c - 1][c] = Cell.BLACK

    def in_bounds(self, pos: Coord) -> bool:
        r, c = pos
        return 0 <= r < self.width and 0 <= c < self.width

    def _check(self, pos: Coord) -> None:
        if not self.in_bounds(pos):
            raise OutOfBounds(f'step out of bound: {pos[0]}, {pos[1]}')

    def at(self, pos: Coord) -> Cell:
        self._check(pos)
        return self._grid[pos[0]][pos[1]]

    def set(self, pos: Coord, cell: Cell) -> None:
        self._check(pos)
        self._grid[pos[0]][pos[1]] = cell

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates in row-major order."""
        for r in range(self.width):
            for c in range(self.width):
                yield (r, c)

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self._grid)

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    def copy(self) -> 'Board':
        other = Board.__new__(Board)
        other.width = self.width
        other._grid = [list(row) for row in self._grid]
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.width == other.width and self._grid == other._grid

    def __repr__(self) -> str:
        return f'Board(width={self.width})'
