from __future__ import annotations

from typing import Dict, Iterable, List, Set

from .board import Board, Cell, Coord

EMOJI = {
    'corner': '\u23f9\ufe0f',
    'empty': '⬜',
    'legal': '➕',
    Cell.WHITE: '⚪',
    Cell.BLACK: '⚫',
}

ASCII = {
    'corner': ' ',
    'empty': '.',
    'legal': '+',
    Cell.WHITE: 'O',
    Cell.BLACK: 'X',
}

STYLES: Dict[str, dict] = {'emoji': EMOJI, 'ascii': ASCII}


def _glyphs(style: str) -> dict:
    try:
        return STYLES[style]
    except KeyError:
        raise ValueError(f"unknown render style: {style!r}") from None


def numeral(n: int, style: str = 'emoji') -> str:
    """Row/column label; keycap emoji for 1-9, plain digits otherwise."""
    if style == 'emoji' and 0 <= n <= 9:
        return f"{n}\ufe0f\u20e3"
    return str(n)


def glyph_for(cell: Cell, style: str = 'emoji') -> str:
    glyphs = _glyphs(style)
    if cell is Cell.EMPTY:
        return glyphs['empty']
    return glyphs[cell]


def render(board: Board, legal: Iterable[Coord] = (), style: str = 'emoji') -> str:
    """Renders the board with a column header and row labels, highlighting legal destinations."""
    glyphs = _glyphs(style)
    highlight: Set[Coord] = set(legal)
    sep = ' ' if style == 'ascii' else ''
    lines: List[str] = []
    header = [glyphs['corner']] + [numeral(c + 1, style) for c in range(board.width)]
    lines.append(sep.join(header))
    for r, row in enumerate(board.rows()):
        cells = [numeral(r + 1, style)]
        for c, cell in enumerate(row):
            if cell is Cell.EMPTY:
                cells.append(glyphs['legal'] if (r, c) in highlight else glyphs['empty'])
            else:
                cells.append(glyphs[cell])
        lines.append(sep.join(cells))
    return "\n".join(lines) + "\n"


def render_engine(engine, style: str = 'emoji') -> str:
    return render(engine.board, engine.legal_moves(), style)
