from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...models.enums import Owner, opponent
from . import victory
from .geometry import MOVE_RANGE, cells_within

if TYPE_CHECKING:
    from ...models.board import Board
    from ...models.state import GameState


@dataclass(frozen=True)
class TurnOutcome:
    next_player: Owner
    skipped: Owner | None = None
    game_over: bool = False
    winner: Owner | None = None


def has_legal_moves(board: Board, player: Owner) -> bool:
    for cell in board.owned_by(player):
        for c in cells_within(board, cell.pos, MOVE_RANGE):
            if c.owner == Owner.EMPTY:
                return True
    return False


def finish(state: GameState) -> TurnOutcome:
    state.game_over = True
    state.winner = victory.compute_winner(state.board)
    return TurnOutcome(
        next_player=state.current_player, game_over=True, winner=state.winner
    )


def end_turn(state: GameState) -> TurnOutcome:
    """Hand the turn over after a move.

    The next player is skipped when stuck; the game ends when a side is wiped
    out, the board is full, or neither side can move.
    """
    if state.game_over:
        return TurnOutcome(
            next_player=state.current_player, game_over=True, winner=state.winner
        )
    board = state.board
    state.current_player = opponent(state.current_player)
    state.turn += 1
    if victory.check_game_over(board):
        return finish(state)
    if has_legal_moves(board, state.current_player):
        return TurnOutcome(next_player=state.current_player)

    stuck = state.current_player
    state.current_player = opponent(stuck)
    if not has_legal_moves(board, state.current_player):
        return finish(state)
    return TurnOutcome(next_player=state.current_player, skipped=stuck)
