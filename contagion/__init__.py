"""Contagion game-rules engine.

Board generation, move legality and application, infection, the turn state
machine and a greedy AI. Presentation layers subscribe to the events in
`contagion.events` and drive the game through the functions below, which
delegate to a module-level `ContagionEngine` on the global event bus.
"""

from .engine.core import ContagionEngine
from .engine.errors import ContagionError, IllegalMoveError, InvalidCoordinateError
from .events import CaptureEvent, EventBus, GameOverEvent, TurnChangedEvent, event_bus
from .models.board import Board, Cell
from .models.enums import Owner
from .models.state import GameState, Move

_engine = ContagionEngine()

init_game = _engine.init_game
legal_moves = _engine.legal_moves
apply_move = _engine.apply_move
choose_ai_move = _engine.choose_ai_move
cell_at = _engine.cell_at
score_of = _engine.score_of
current_player = _engine.current_player
is_game_over = _engine.is_game_over
winner = _engine.winner

__all__ = [
    "Board",
    "CaptureEvent",
    "Cell",
    "ContagionEngine",
    "ContagionError",
    "EventBus",
    "GameOverEvent",
    "GameState",
    "IllegalMoveError",
    "InvalidCoordinateError",
    "Move",
    "Owner",
    "TurnChangedEvent",
    "apply_move",
    "cell_at",
    "choose_ai_move",
    "current_player",
    "event_bus",
    "init_game",
    "is_game_over",
    "legal_moves",
    "score_of",
    "winner",
]
