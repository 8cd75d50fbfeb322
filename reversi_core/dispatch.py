from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from .ai import best_step
from .board import Cell, Coord
from .engine import GameEngine
from .errors import BadCommand
from .render import glyph_for, render_engine
from .session import SessionStore
from .settings import debug

_SPLIT = re.compile(r"[\s,，、]+")

HELP = (
    "Commands:\n"
    "/begin or /reset - start a new game\n"
    "/show - show the board\n"
    "/step ROW COL (or just ROW COL) - place a piece, 1-based\n"
)


@dataclass(frozen=True)
class Command:
    kind: str  # 'reset' | 'show' | 'help' | 'step'
    pos: Optional[Coord] = None


def parse_command(raw: str) -> Command:
    """Parses one chat message; move coordinates come in 1-based and leave 0-based."""
    tokens = [t for t in _SPLIT.split(raw.strip()) if t]
    if not tokens:
        raise BadCommand('Empty message. Send /help for the list of commands.')
    word = tokens[0].lstrip('/').lower()
    if word in ('begin', 'reset'):
        return Command('reset')
    if word in ('show', 'help'):
        return Command(word)
    if word == 'step':
        tokens = tokens[1:]
    if len(tokens) != 2:
        raise BadCommand(f"Could not understand {raw.strip()!r}. Send a move as 'ROW COL', e.g. '3 5'.")
    try:
        row, col = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise BadCommand(f"Could not understand {raw.strip()!r}. Send a move as 'ROW COL', e.g. '3 5'.") from None
    return Command('step', (row - 1, col - 1))


class Dispatcher:
    """Runs chat commands against the per-session engines held by a SessionStore."""

    def __init__(self, store: SessionStore, style: str = 'emoji'):
        self.store = store
        self.style = style

    def handle(self, key: str, raw: str) -> str:
        cmd = parse_command(raw)
        debug('dispatch', f"key={key!r} command={cmd}")
        if cmd.kind == 'help':
            return HELP
        with self.store.locked(key):
            if cmd.kind == 'reset':
                return render_engine(self.store.reset(key), self.style)
            if cmd.kind == 'show':
                return render_engine(self.store.get(key), self.style)
            assert cmd.pos is not None
            return self._play(key, cmd.pos)

    def _glyph(self, cell: Cell) -> str:
        return glyph_for(cell, self.style)

    def _score_line(self, engine: GameEngine) -> str:
        white, black = engine.score()
        return f"Current Score: {self._glyph(Cell.BLACK)} {black}, {self._glyph(Cell.WHITE)} {white}"

    def _step(self, who: str, engine: GameEngine, pos: Coord, out: List[str]) -> None:
        mover = self._glyph(engine.to_move)
        engine.apply(pos)
        out.append(f"{who} {mover} chose to step on {pos[0] + 1}, {pos[1] + 1}")
        out.append(self._score_line(engine))
        out.append(render_engine(engine, self.style))

    def _play(self, key: str, pos: Coord) -> str:
        engine = self.store.get(key)
        out: List[str] = []
        if not engine.is_finished():
            self._step('User', engine, pos, out)
            if not engine.is_finished():
                self._step('AI', engine, best_step(engine), out)
        if engine.is_finished():
            white, black = engine.score()
            winner = engine.winner()
            out.append(f"Game finished, Score: {self._glyph(Cell.BLACK)} {black}, {self._glyph(Cell.WHITE)} {white}")
            out.append(f"Winner: {self._glyph(winner)}" if winner is not None else "Draw")
            out.append("The game board is reset, please start a new game.")
            self.store.reset(key)
        return "\n".join(out)
