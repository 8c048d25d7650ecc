from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.enums import Owner

if TYPE_CHECKING:
    from ...models.board import Board


def scores(board: Board) -> tuple[int, int]:
    return board.count(Owner.PLAYER1), board.count(Owner.PLAYER2)


def check_game_over(board: Board) -> bool:
    p1, p2 = scores(board)
    if p1 == 0 or p2 == 0:
        return True
    return not any(c.owner == Owner.EMPTY for c in board.iter_cells())


def compute_winner(board: Board) -> Owner | None:
    """Strictly more cells wins; equal counts is a draw (None)."""
    p1, p2 = scores(board)
    if p1 > p2:
        return Owner.PLAYER1
    if p2 > p1:
        return Owner.PLAYER2
    return None
