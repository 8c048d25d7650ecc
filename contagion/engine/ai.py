from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..models.enums import Owner
from ..models.state import Move
from .systems import infection
from .systems.geometry import MOVE_RANGE, chebyshev

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..models.board import Board


@dataclass(frozen=True)
class AIScoringWeights:
    """Weights for the one-ply greedy heuristic."""

    per_capture: float = 1.0
    clone_bonus: float = 1.1  # growing beats relocating at equal captures


DEFAULT_WEIGHTS = AIScoringWeights()


def candidate_moves(board: Board, player: Owner) -> Iterator[Move]:
    """Owned cells row-major, then offsets dy -2..2 outer, dx -2..2 inner."""
    for cell in board.owned_by(player):
        for dy in range(-MOVE_RANGE, MOVE_RANGE + 1):
            for dx in range(-MOVE_RANGE, MOVE_RANGE + 1):
                dst = (cell.x + dx, cell.y + dy)
                if not board.in_bounds(dst):
                    continue
                if board.cell(dst).owner != Owner.EMPTY:
                    continue
                yield Move(src=cell.pos, dst=dst)


def score_move(
    board: Board,
    player: Owner,
    move: Move,
    weights: AIScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    landed = board.cell(move.dst)
    s = weights.per_capture * len(infection.capture_targets(board, landed, player))
    if chebyshev(move.src, move.dst) == 1:
        s += weights.clone_bonus
    return s


def choose_move(
    board: Board,
    player: Owner,
    *,
    weights: AIScoringWeights = DEFAULT_WEIGHTS,
) -> Move | None:
    """Pick the highest scoring move; the first one enumerated wins ties.

    Works on a private copy so the caller's board is never touched.
    """
    snapshot = board.model_copy(deep=True)
    best_score = float("-inf")
    best: Move | None = None
    for mv in candidate_moves(snapshot, player):
        s = score_move(snapshot, player, mv, weights)
        if s > best_score:
            best_score = s
            best = mv
    return best
