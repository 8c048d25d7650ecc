from __future__ import annotations

import asyncio
from collections import OrderedDict
from typing import Protocol

from pydantic import BaseModel

from .config import MAX_GAMES
from .models.state import GameState


class GameRecord(BaseModel):
    id: str
    state: GameState
    seed: int | None = None


class GameStore(Protocol):
    async def get(self, gid: str) -> GameRecord | None: ...
    async def set(self, rec: GameRecord) -> None: ...
    async def delete(self, gid: str) -> None: ...
    async def all(self) -> list[GameRecord]: ...
    def lock(self, gid: str) -> asyncio.Lock: ...


class MemoryGameStore:
    """In-process store; games live as long as the worker, LRU-capped at max_games.

    `lock(gid)` serializes moves against one game: hold it across read-apply-write.
    """

    def __init__(self, max_games: int = MAX_GAMES) -> None:
        self.max_games = max_games
        self._data: OrderedDict[str, GameRecord] = OrderedDict()
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock = asyncio.Lock()

    def lock(self, gid: str) -> asyncio.Lock:
        """Lock of a stored game; KeyError for ids the store does not hold."""
        if gid not in self._data:
            raise KeyError(gid)
        return self._locks.setdefault(gid, asyncio.Lock())

    async def get(self, gid: str) -> GameRecord | None:
        async with self._lock:
            rec = self._data.get(gid)
            if rec is not None:
                self._data.move_to_end(gid)
            return rec

    async def set(self, rec: GameRecord) -> None:
        async with self._lock:
            self._data[rec.id] = rec
            self._data.move_to_end(rec.id)
            while len(self._data) > self.max_games:
                evicted, _ = self._data.popitem(last=False)
                self._locks.pop(evicted, None)
                logs.drop(evicted)

    async def delete(self, gid: str) -> None:
        async with self._lock:
            self._data.pop(gid, None)
            self._locks.pop(gid, None)
            logs.drop(gid)

    async def all(self) -> list[GameRecord]:
        async with self._lock:
            return list(reversed(self._data.values()))


class ActionLogStore:
    """Per-game action log of JSON lines, newest last."""

    def __init__(self) -> None:
        self._data: dict[str, list[str]] = {}

    def append(self, gid: str, line: str) -> None:
        self._data.setdefault(gid, []).append(line)

    def list(self, gid: str, limit: int) -> list[str]:
        return self._data.get(gid, [])[-limit:]

    def drop(self, gid: str) -> None:
        self._data.pop(gid, None)


logs = ActionLogStore()
store: GameStore = MemoryGameStore()
