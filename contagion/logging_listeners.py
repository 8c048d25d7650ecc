from __future__ import annotations

import logging

from . import store
from .events import CaptureEvent, GameOverEvent, MoveEvent, TurnChangedEvent, event_bus
from .models.api import ActionLogEntry
from .models.enums import ActionLogResult

logger = logging.getLogger("contagion.events")

_registered = False


def _on_move_event(ev: MoveEvent) -> None:
    if ev.game_id:
        # Convert event to ActionLogEntry JSON for the per-game log
        entry = ActionLogEntry(
            game_id=ev.game_id,
            turn=ev.turn,
            player=ev.player,
            move=ev.move,
            result=ev.result,
            message=ev.message,
            captured=ev.captured or None,
        )
        store.logs.append(ev.game_id, entry.model_dump_json())
    level = logging.INFO if ev.result == ActionLogResult.APPLIED else logging.WARNING
    logger.log(
        level,
        "[%s] turn %d %s %s %s->%s: %s",
        ev.game_id or "-",
        ev.turn,
        ev.player.value,
        ev.result.value,
        ev.move.src,
        ev.move.dst,
        ev.message,
    )


def _on_capture(ev: CaptureEvent) -> None:
    logger.info(
        "[%s] %s captured %s",
        ev.game_id or "-",
        ev.mover.value,
        [c.pos for c in ev.captured_cells],
    )


def _on_turn_changed(ev: TurnChangedEvent) -> None:
    if ev.skipped:
        logger.info(
            "[%s] %s has no move, %s plays again",
            ev.game_id or "-",
            ev.skipped.value,
            ev.new_player.value,
        )


def _on_game_over(ev: GameOverEvent) -> None:
    logger.info(
        "[%s] game over: %s (%d-%d)",
        ev.game_id or "-",
        "draw" if ev.draw else ev.winner.value,
        ev.score_player1,
        ev.score_player2,
    )


def register_listeners() -> None:
    global _registered
    if _registered:
        return
    event_bus.subscribe(MoveEvent, _on_move_event)
    event_bus.subscribe(CaptureEvent, _on_capture)
    event_bus.subscribe(TurnChangedEvent, _on_turn_changed)
    event_bus.subscribe(GameOverEvent, _on_game_over)
    _registered = True
