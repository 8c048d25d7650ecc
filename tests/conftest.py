# Shared fixtures: an engine on a private event bus plus a recorder of what it emits.

import logging
from dataclasses import dataclass, field
from typing import Any

import pytest

from contagion.engine.core import ContagionEngine
from contagion.events import (
    CaptureEvent,
    EventBus,
    GameOverEvent,
    MoveEvent,
    TurnChangedEvent,
)

logger = logging.getLogger(__name__)


@dataclass
class EventRecorder:
    events: list[Any] = field(default_factory=list)

    def __call__(self, ev: Any) -> None:
        logger.debug("[tests] event %s", ev)
        self.events.append(ev)

    def of(self, event_type: type) -> list[Any]:
        return [e for e in self.events if isinstance(e, event_type)]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def recorder(bus: EventBus) -> EventRecorder:
    rec = EventRecorder()
    for et in (MoveEvent, CaptureEvent, TurnChangedEvent, GameOverEvent):
        bus.subscribe(et, rec)
    return rec


@pytest.fixture()
def engine(bus: EventBus) -> ContagionEngine:
    return ContagionEngine(bus=bus)
