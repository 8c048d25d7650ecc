from __future__ import annotations

from typing import TYPE_CHECKING

from ...events import EventBus, MoveEvent, event_bus
from ...models.enums import ActionLogResult

if TYPE_CHECKING:
    from ...models.board import Cell
    from ...models.enums import Owner
    from ...models.state import Move


def log_event(
    bus: EventBus | None,
    game_id: str | None,
    turn: int,
    player: Owner,
    move: Move,
    result: ActionLogResult,
    message: str | None = None,
    captured: list[Cell] | None = None,
) -> None:
    (bus or event_bus).emit(
        MoveEvent(
            game_id=game_id,
            turn=turn,
            player=player,
            move=move,
            result=result,
            message=message,
            captured=[c.pos for c in captured or []],
        )
    )


def log_illegal(
    bus: EventBus | None,
    game_id: str | None,
    turn: int,
    player: Owner,
    move: Move,
    explanation: str,
) -> None:
    log_event(bus, game_id, turn, player, move, ActionLogResult.ILLEGAL, explanation)


def log_error(
    bus: EventBus | None,
    game_id: str | None,
    turn: int,
    player: Owner,
    move: Move,
    error: Exception,
) -> None:
    log_event(bus, game_id, turn, player, move, ActionLogResult.ERROR, str(error))
