from __future__ import annotations


class ContagionError(Exception):
    """Base class for recoverable engine errors; raising one never mutates state."""


class IllegalMoveError(ContagionError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidCoordinateError(ContagionError, IndexError):
    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"coordinate ({x}, {y}) outside [0, {size})")
        self.x = x
        self.y = y
        self.size = size
