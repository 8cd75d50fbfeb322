"""
Reversi core Python package.

Pure game logic plus the chat glue that drives it.
Modules:
- board.py: Cell, Coord, Board
- moves.py: capture walks, contacts and the legal-move set
- engine.py: GameEngine (apply, is_finished, score)
- ai.py: greedy one-ply move picker
- render.py: emoji / ASCII board text
- session.py, dispatch.py: per-conversation engines and chat commands
"""
