import sys
sys.path.append('.')
import game  # type: ignore


def brute_score(board):
    white = black = 0
    for pos in board.coords():
        cell = board.at(pos)
        if cell is game.Cell.WHITE:
            white += 1
        elif cell is game.Cell.BLACK:
            black += 1
    return white, black


def play_one(width):
    engine = game.GameEngine(width)
    plies = 0
    problems = 0
    while not engine.is_finished():
        mover = engine.to_move
        # An occupied centre cell must be rejected without touching the state.
        before = engine.snapshot()
        try:
            engine.apply((width // 2, width // 2))
            problems += 1
        except game.ReversiError:
            pass
        if engine.snapshot() != before:
            problems += 1
        engine.apply(game.best_step(engine))
        plies += 1
        if engine.to_move is mover:
            problems += 1
        if engine.score() != brute_score(engine.board):
            problems += 1
    return plies, engine.score(), problems


def main():
    total_problems = 0
    for width in (2, 4, 6, 8, 10):
        plies, (white, black), problems = play_one(width)
        total_problems += problems
        print(f"width={width} plies={plies} white={white} black={black} problems={problems}")
    print(f"Checked 5 widths, problems={total_problems}")
    return 1 if total_problems else 0


if __name__ == '__main__':
    sys.exit(main())
