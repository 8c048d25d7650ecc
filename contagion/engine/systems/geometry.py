from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ...models.board import Board, Cell

Coord = tuple[int, int]

MOVE_RANGE = 2


def chebyshev(a: Coord, b: Coord) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def square(center: Coord, r: int) -> Iterator[Coord]:
    """Bounding box of radius r around center, dy outer and dx inner, both ascending."""
    cx, cy = center
    for dy in range(-r, r + 1):
        for dx in range(-r, r + 1):
            yield (cx + dx, cy + dy)


def cells_within(board: Board, center: Coord, r: int) -> Iterator[Cell]:
    for c in square(center, r):
        if board.in_bounds(c):
            yield board.cell(c)
