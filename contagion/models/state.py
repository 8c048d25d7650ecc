from pydantic import BaseModel

from .board import Board
from .enums import Coord, GameStatus, MoveKind, Owner


class Move(BaseModel):
    src: Coord
    dst: Coord

    @property
    def distance(self) -> int:
        """Chebyshev distance between source and destination."""
        return max(abs(self.src[0] - self.dst[0]), abs(self.src[1] - self.dst[1]))

    @property
    def kind(self) -> MoveKind | None:
        d = self.distance
        if d == 1:
            return MoveKind.CLONE
        if d == 2:
            return MoveKind.LEAP
        return None


class GameState(BaseModel):
    board: Board
    current_player: Owner = Owner.PLAYER1
    game_over: bool = False
    winner: Owner | None = None
    turn: int = 1

    @property
    def status(self) -> GameStatus:
        if not self.game_over:
            return GameStatus.IN_PROGRESS
        if self.winner == Owner.PLAYER1:
            return GameStatus.PLAYER1_WON
        if self.winner == Owner.PLAYER2:
            return GameStatus.PLAYER2_WON
        return GameStatus.DRAW
