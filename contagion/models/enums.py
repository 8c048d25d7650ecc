from enum import Enum

Coord = tuple[int, int]  # (x, y)


class Owner(str, Enum):
    EMPTY = "EMPTY"
    PLAYER1 = "PLAYER1"
    PLAYER2 = "PLAYER2"
    OBSTACLE = "OBSTACLE"

    @property
    def is_player(self) -> bool:
        return self in (Owner.PLAYER1, Owner.PLAYER2)


PLAYERS = (Owner.PLAYER1, Owner.PLAYER2)


def opponent(player: Owner) -> Owner:
    if player == Owner.PLAYER1:
        return Owner.PLAYER2
    if player == Owner.PLAYER2:
        return Owner.PLAYER1
    raise ValueError(f"{player.value} is not a player")


class MoveKind(str, Enum):
    """
    How a token reaches its destination:
    - CLONE: distance 1, the source keeps its token
    - LEAP: distance 2, the source is vacated
    """

    CLONE = "CLONE"
    LEAP = "LEAP"


class GameStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    PLAYER1_WON = "PLAYER1_WON"
    PLAYER2_WON = "PLAYER2_WON"
    DRAW = "DRAW"


class ActionLogResult(str, Enum):
    APPLIED = "APPLIED"
    ILLEGAL = "ILLEGAL"
    ERROR = "ERROR"
