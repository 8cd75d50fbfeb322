from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import InvalidConfiguration

_TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0', env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    return env.get(name, default).lower() in _TRUTHY


def env_int(name: str, default: int, env: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if env is None else env
    raw = env.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f'{name} must be an integer, got {raw!r}') from None


def debug(tag: str, msg: str) -> None:
    """Prints a trace line when REVERSI_DEBUG is set."""
    if env_flag('REVERSI_DEBUG'):
        print(f"[{tag}] {msg}")


@dataclass(frozen=True)
class Settings:
    width: int = 8
    glyphs: str = 'emoji'
    host: str = '127.0.0.1'
    port: int = 5000
    flask_debug: bool = False


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Reads configuration from the process environment, or from env when given."""
    env = os.environ if env is None else env
    glyphs = env.get('REVERSI_GLYPHS', 'emoji').lower()
    if glyphs not in ('emoji', 'ascii'):
        raise InvalidConfiguration(f"REVERSI_GLYPHS must be 'emoji' or 'ascii', got {glyphs!r}")
    width = env_int('REVERSI_WIDTH', 8, env)
    if width < 2 or width % 2 != 0:
        raise InvalidConfiguration(f'REVERSI_WIDTH must be an even number >= 2, got {width}')
    return Settings(
        width=width,
        glyphs=glyphs,
        host=env.get('HOST', '127.0.0.1'),
        port=env_int('PORT', 5000, env),
        flask_debug=env_flag('FLASK_DEBUG', env.get('DEBUG', '0'), env),
    )
