from __future__ import annotations

# Facade module that re-exports the Reversi core.
# Used by the Flask app and tests; single-responsibility modules live under reversi_core/*.

from reversi_core.board import Board, Cell, Coord
from reversi_core.errors import (
    ReversiError,
    InvalidConfiguration,
    OutOfBounds,
    CellOccupied,
    IllegalMove,
    NoMovesAvailable,
    BadCommand,
)
from reversi_core.moves import (
    DIRECTIONS,
    contact_in_direction,
    contacts,
    is_capturing_placement,
    landings_from,
    legal_moves,
    cells_between,
)
from reversi_core.engine import GameEngine
from reversi_core.ai import move_value, best_step
from reversi_core.render import render, render_engine, glyph_for
from reversi_core.session import SessionStore
from reversi_core.dispatch import Command, Dispatcher, parse_command
from reversi_core.settings import Settings, load_settings


def main() -> None:
    # Console driver delegated to reversi_core.cli
    from reversi_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
