from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from contagion.models.board import Cell
    from contagion.models.enums import ActionLogResult, Owner
    from contagion.models.state import Move


@dataclass
class CaptureEvent:
    mover: Owner
    captured_cells: list[Cell]  # scan order, y then x
    game_id: str | None = None


@dataclass
class TurnChangedEvent:
    new_player: Owner
    skipped: Owner | None = None
    game_id: str | None = None


@dataclass
class GameOverEvent:
    winner: Owner | None  # None on a draw
    score_player1: int
    score_player2: int
    game_id: str | None = None

    @property
    def draw(self) -> bool:
        return self.winner is None


@dataclass
class MoveEvent:
    game_id: str | None
    turn: int
    player: Owner
    move: Move
    result: ActionLogResult
    message: str | None = None
    captured: list[tuple[int, int]] = field(default_factory=list)


T = TypeVar("T")


class EventBus:
    def __init__(self) -> None:
        self._subs: dict[type[Any], list[object]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.setdefault(event_type, [])
        lst.append(cast("object", handler))

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.get(event_type, [])
        if handler in lst:
            lst.remove(handler)

    def emit(self, event: Any) -> None:
        et = type(event)
        for h in list(self._subs.get(et, [])):
            # Let exceptions propagate; callers decide how to handle them
            cast("Callable[[Any], None]", h)(event)


# Global bus instance
event_bus = EventBus()
