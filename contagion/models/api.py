from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .board import Board, Cell
from .enums import ActionLogResult, GameStatus, MoveKind, Owner
from .state import GameState, Move

# ----- Engine results -----


class MoveResult(BaseModel):
    move: Move
    mover: Owner
    kind: MoveKind
    captured: list[Cell] = Field(default_factory=list)
    next_player: Owner
    skipped: Owner | None = None  # player who had no move and lost the turn
    game_over: bool = False
    winner: Owner | None = None


# ----- API IO -----


class CreateGameRequest(BaseModel):
    size: int | None = Field(default=None, ge=5)
    seed: int | None = None


class RestartGameRequest(BaseModel):
    seed: int | None = None


class Scores(BaseModel):
    player1: int
    player2: int


class GameView(BaseModel):
    id: str
    board: Board
    current_player: Owner
    game_over: bool
    winner: Owner | None = None
    status: GameStatus
    turn: int
    scores: Scores

    @classmethod
    def of(cls, gid: str, state: GameState) -> GameView:
        b = state.board
        return cls(
            id=gid,
            board=b,
            current_player=state.current_player,
            game_over=state.game_over,
            winner=state.winner,
            status=state.status,
            turn=state.turn,
            scores=Scores(
                player1=b.count(Owner.PLAYER1), player2=b.count(Owner.PLAYER2)
            ),
        )


class MoveRequest(BaseModel):
    move: Move


class EvaluateResponse(BaseModel):
    legal: bool
    explanation: str


class ApplyMoveResponse(BaseModel):
    applied: list[MoveResult]
    game: GameView


class LegalMovesResponse(BaseModel):
    player: Owner
    moves: list[Move]


# ----- Action Log -----


class ActionLogEntry(BaseModel):
    ts: datetime = Field(default_factory=datetime.now)
    game_id: str
    turn: int
    player: Owner | None = None
    move: Move | None = None
    result: ActionLogResult = ActionLogResult.APPLIED
    message: str | None = None
    captured: list[tuple[int, int]] | None = None


class ActionLogResponse(BaseModel):
    entries: list[ActionLogEntry]
