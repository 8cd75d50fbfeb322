from __future__ import annotations

import argparse

from .dispatch import Dispatcher, HELP
from .errors import ReversiError
from .render import render_engine
from .session import SessionStore
from .settings import load_settings

CONSOLE_KEY = 'console'


def main(argv=None) -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Play Reversi against the greedy engine')
    parser.add_argument('--width', type=int, default=settings.width, help='Board width (even, >= 2)')
    parser.add_argument('--ascii', action='store_true', help='Render with ASCII glyphs instead of emoji')
    args = parser.parse_args(argv)

    style = 'ascii' if args.ascii or settings.glyphs == 'ascii' else 'emoji'
    try:
        store = SessionStore(width=args.width)
        engine = store.get(CONSOLE_KEY)
    except ReversiError as e:
        parser.error(str(e))
    dispatcher = Dispatcher(store, style=style)

    print(HELP)
    print(render_engine(engine, style))
    while True:
        try:
            text = input('> ').strip()
        except EOFError:
            break
        if text.lower() in ('quit', 'exit', '/quit', '/exit'):
            break
        if not text:
            continue
        try:
            print(dispatcher.handle(CONSOLE_KEY, text))
        except ReversiError as e:
            print(f"error: {e}")


if __name__ == '__main__':
    main()
