from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any

from ..events import (
    CaptureEvent,
    EventBus,
    GameOverEvent,
    MoveEvent,
    TurnChangedEvent,
    event_bus,
)
from ..models.api import EvaluateResponse, MoveResult
from ..models.enums import ActionLogResult, Owner
from ..models.state import GameState, Move
from . import ai
from .actions.move import MoveHandler
from .errors import IllegalMoveError, InvalidCoordinateError
from .generator import generate_board
from .logging.logger import log_error, log_illegal
from .systems import turn, victory

if TYPE_CHECKING:
    from ..models.board import Cell

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 6


class ContagionEngine:
    def __init__(self, bus: EventBus | None = None, handler: MoveHandler | None = None):
        self.bus: EventBus = bus or event_bus
        self.handler = handler or MoveHandler()

    # ---------- Setup ----------

    def init_game(self, size: int = DEFAULT_SIZE, rng_seed: int | None = None) -> GameState:
        board = generate_board(size, random.Random(rng_seed))
        logger.debug("new %dx%d game (seed=%s)\n%s", size, size, rng_seed, board.pretty())
        return GameState(board=board)

    # ---------- Moves ----------

    def evaluate(self, state: GameState, move: Move) -> EvaluateResponse:
        ok, why = self.handler.evaluate(state, move)
        return EvaluateResponse(legal=ok, explanation=why)

    def legal_moves(self, state: GameState, player: Owner | None = None) -> list[Move]:
        player = player or state.current_player
        if state.game_over:
            return []
        return list(ai.candidate_moves(state.board, player))

    def apply_move(
        self, state: GameState, move: Move, *, game_id: str | None = None
    ) -> MoveResult:
        """Validate, apply, infect and hand the turn over as one step.

        Raises IllegalMoveError with the board untouched when the move is refused.
        Events go out only once the state is final; a failing subscriber is
        logged and recorded as an ERROR entry, it never undoes the move.
        """
        mover = state.current_player
        played_turn = state.turn
        ok, why = self.handler.evaluate(state, move)
        if not ok:
            log_illegal(self.bus, game_id, played_turn, mover, move, why)
            raise IllegalMoveError(why)
        kind, captured = self.handler.apply(state, move)
        outcome = turn.end_turn(state)
        captured = [c.model_copy() for c in captured]

        events: list[Any] = [
            MoveEvent(
                game_id=game_id, turn=played_turn, player=mover, move=move,
                result=ActionLogResult.APPLIED,
                message=f"{kind.value} {move.src}->{move.dst}",
                captured=[c.pos for c in captured],
            )
        ]
        if captured:
            events.append(CaptureEvent(mover=mover, captured_cells=captured, game_id=game_id))
        if outcome.game_over:
            p1, p2 = victory.scores(state.board)
            events.append(
                GameOverEvent(
                    winner=outcome.winner, score_player1=p1, score_player2=p2,
                    game_id=game_id,
                )
            )
        else:
            events.append(
                TurnChangedEvent(
                    new_player=outcome.next_player, skipped=outcome.skipped,
                    game_id=game_id,
                )
            )
        for ev in events:
            try:
                self.bus.emit(ev)
            except Exception as e:
                logger.exception(
                    "[%s] subscriber failed on %s", game_id or "-", type(ev).__name__
                )
                if not isinstance(ev, MoveEvent):
                    log_error(self.bus, game_id, played_turn, mover, move, e)

        return MoveResult(
            move=move,
            mover=mover,
            kind=kind,
            captured=captured,
            next_player=outcome.next_player,
            skipped=outcome.skipped,
            game_over=outcome.game_over,
            winner=outcome.winner,
        )

    def choose_ai_move(self, state: GameState, player: Owner | None = None) -> Move | None:
        if state.game_over:
            return None
        return ai.choose_move(state.board, player or state.current_player)

    # ---------- Accessors ----------

    def cell_at(self, state: GameState, x: int, y: int) -> Cell:
        if not state.board.in_bounds((x, y)):
            raise InvalidCoordinateError(x, y, state.board.size)
        return state.board.cell((x, y))

    def score_of(self, state: GameState, player: Owner) -> int:
        return state.board.count(player)

    def current_player(self, state: GameState) -> Owner:
        return state.current_player

    def is_game_over(self, state: GameState) -> bool:
        return state.game_over

    def winner(self, state: GameState) -> Owner | None:
        return state.winner
