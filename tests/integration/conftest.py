# In-process API fixtures: each test gets an empty game store and log.
from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from contagion import config, store
from contagion.app import app
from contagion.models.enums import Owner

logger = logging.getLogger(__name__)


@pytest.fixture()
def fresh_store(monkeypatch: pytest.MonkeyPatch) -> store.MemoryGameStore:
    mem = store.MemoryGameStore(max_games=config.MAX_GAMES)
    monkeypatch.setattr(store, "store", mem)
    monkeypatch.setattr(store, "logs", store.ActionLogStore())
    return mem


@pytest.fixture()
def client(fresh_store) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def no_ai(monkeypatch: pytest.MonkeyPatch) -> None:
    """Both sides are driven by the test."""
    monkeypatch.setattr(config, "AI_PLAYER", None)


@pytest.fixture()
def ai_player2(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "AI_PLAYER", Owner.PLAYER2)
