from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.enums import MoveKind, Owner
from ..systems import infection

if TYPE_CHECKING:
    from ...models.board import Cell
    from ...models.state import GameState, Move


class MoveHandler:
    def evaluate(self, state: GameState, move: Move) -> tuple[bool, str]:
        board = state.board
        if state.game_over:
            return False, "game is over"
        if not board.in_bounds(move.src):
            return False, "source out of bounds"
        if not board.in_bounds(move.dst):
            return False, "destination out of bounds"
        src = board.cell(move.src)
        dst = board.cell(move.dst)
        if src.owner != state.current_player:
            return False, f"source not owned by {state.current_player.value}"
        if dst.owner != Owner.EMPTY:
            return False, "destination not empty"
        kind = move.kind
        if kind is None:
            return False, f"distance {move.distance} not in (1, 2)"
        preview = infection.capture_targets(board, dst, state.current_player)
        return True, f"ok (kind={kind.value}, would_capture={len(preview)})"

    def apply(self, state: GameState, move: Move) -> tuple[MoveKind, list[Cell]]:
        """Mutate the board for a move `evaluate` accepted."""
        board = state.board
        mover = state.current_player
        kind = move.kind
        board.cell(move.dst).owner = mover
        if kind == MoveKind.LEAP:
            board.cell(move.src).owner = Owner.EMPTY
        captured = infection.resolve(board, board.cell(move.dst), mover)
        return kind, captured
