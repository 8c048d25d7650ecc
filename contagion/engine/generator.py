from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.board import Board
from ..models.enums import Coord, Owner

if TYPE_CHECKING:
    import random

OBSTACLE_CHANCE = 0.3
DOUBLE_OBSTACLE_CHANCE = 0.5
BOOST_CHANCE = 0.4
MAX_START_PAIRS = 3


def mirror(c: Coord, size: int) -> Coord:
    x, y = c
    return (size - 1 - y, size - 1 - x)


def start_candidates(size: int) -> list[Coord]:
    return [(0, 0), (1, 0), (0, 1), (size - 1, 1), (size - 2, 0)]


def _draw_obstacles(size: int, rng: random.Random) -> list[Coord]:
    if rng.random() >= OBSTACLE_CHANCE:
        return []
    count = 2 if rng.random() < DOUBLE_OBSTACLE_CHANCE else 1
    lo, hi = size // 2 - 1, size // 2
    out: list[Coord] = []
    # Coinciding draws are redrawn so `count` distinct obstacles are placed.
    while len(out) < count:
        c = (rng.randint(lo, hi), rng.randint(lo, hi))
        if c not in out:
            out.append(c)
    return out


def _draw_boost(size: int, rng: random.Random, blocked: list[Coord]) -> Coord | None:
    if rng.random() >= BOOST_CHANCE:
        return None
    while True:
        c = (rng.randint(1, size - 2), rng.randint(1, size - 2))
        if c not in blocked:
            return c


def place_starting_tokens(board: Board, rng: random.Random) -> None:
    candidates = start_candidates(board.size)
    rng.shuffle(candidates)
    for p in candidates[: rng.randint(1, MAX_START_PAIRS)]:
        for c, owner in ((p, Owner.PLAYER1), (mirror(p, board.size), Owner.PLAYER2)):
            cell = board.cell(c)
            if cell.owner != Owner.OBSTACLE:
                cell.owner = owner


def generate_board(size: int, rng: random.Random) -> Board:
    """Build a fresh board: central obstacles, an optional boost, mirrored tokens."""
    if size < 5:
        raise ValueError(f"board size must be at least 5, got {size}")
    board = Board.empty(size)
    obstacles = _draw_obstacles(size, rng)
    for c in obstacles:
        board.cell(c).owner = Owner.OBSTACLE
    boost = _draw_boost(size, rng, obstacles)
    if boost is not None:
        board.cell(boost).is_boost = True
    place_starting_tokens(board, rng)
    return board
