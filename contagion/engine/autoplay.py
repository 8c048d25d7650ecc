from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # typing-only imports
    from ..models.api import MoveResult
    from ..models.enums import Owner
    from ..models.state import GameState
    from .core import ContagionEngine


def ai_autoplay(
    engine: ContagionEngine,
    state: GameState,
    ai_player: Owner,
    max_chain: int = 6,
    *,
    game_id: str | None = None,
) -> tuple[int, list[MoveResult]]:
    """Apply up to max_chain AI-chosen moves while ai_player holds the turn.

    The AI keeps the turn when its opponent is stuck, hence the loop.
    Returns (number of moves applied, their results).
    """
    results: list[MoveResult] = []
    while len(results) < max_chain:
        if state.game_over or state.current_player != ai_player:
            break
        move = engine.choose_ai_move(state)
        if move is None:
            break
        results.append(engine.apply_move(state, move, game_id=game_id))
    return len(results), results
