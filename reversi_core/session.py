from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from .engine import GameEngine
from .settings import debug


class SessionStore:
    """
    Maps a conversation key to its GameEngine.
    Callers must hold the key's lock (via `locked`) while they read or mutate that engine.
    """

    def __init__(self, width: int = 8):
        self.width = width
        self._engines: Dict[str, GameEngine] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    @contextmanager
    def locked(self, key: str) -> Iterator[None]:
        with self._lock_for(key):
            yield

    def get(self, key: str) -> GameEngine:
        """Returns the engine for key, creating one on first use."""
        engine = self._engines.get(key)
        if engine is None:
            engine = self.reset(key)
        return engine

    def reset(self, key: str) -> GameEngine:
        engine = GameEngine(self.width)
        self._engines[key] = engine
        debug('session', f"new engine for key={key!r} width={self.width}")
        return engine

    def discard(self, key: str) -> None:
        self._engines.pop(key, None)

    def keys(self) -> List[str]:
        return sorted(self._engines)

    def __contains__(self, key: object) -> bool:
        return key in self._engines

    def __len__(self) -> int:
        return len(self._engines)
