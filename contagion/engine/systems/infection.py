from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.enums import Owner
from .geometry import cells_within

if TYPE_CHECKING:
    from ...models.board import Board, Cell

BOOST_RANGE = 2
BASE_RANGE = 1


def capture_range(cell: Cell) -> int:
    return BOOST_RANGE if cell.is_boost else BASE_RANGE


def capture_targets(board: Board, landed: Cell, mover: Owner) -> list[Cell]:
    """Cells that landing on `landed` would convert, in scan order. Does not mutate."""
    out: list[Cell] = []
    for c in cells_within(board, landed.pos, capture_range(landed)):
        if c.owner.is_player and c.owner != mover:
            out.append(c)
    return out


def resolve(board: Board, landed: Cell, mover: Owner) -> list[Cell]:
    victims = capture_targets(board, landed, mover)
    for v in victims:
        v.owner = mover
    return victims
