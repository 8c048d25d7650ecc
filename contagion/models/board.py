from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from .enums import Coord, Owner

if TYPE_CHECKING:
    from collections.abc import Iterator


class Cell(BaseModel):
    x: int
    y: int
    owner: Owner = Owner.EMPTY
    is_boost: bool = False

    @property
    def pos(self) -> Coord:
        return (self.x, self.y)


class Board(BaseModel):
    size: int
    cells: list[list[Cell]]  # cells[y][x]

    @classmethod
    def empty(cls, size: int) -> Board:
        return cls(
            size=size,
            cells=[[Cell(x=x, y=y) for x in range(size)] for y in range(size)],
        )

    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, c: Coord) -> Cell:
        x, y = c
        return self.cells[y][x]

    def iter_cells(self) -> Iterator[Cell]:
        """Row-major: y ascending, then x ascending."""
        for row in self.cells:
            yield from row

    def owned_by(self, owner: Owner) -> list[Cell]:
        return [c for c in self.iter_cells() if c.owner == owner]

    def count(self, owner: Owner) -> int:
        return sum(1 for c in self.iter_cells() if c.owner == owner)

    def boost_cell(self) -> Cell | None:
        return next((c for c in self.iter_cells() if c.is_boost), None)

    def pretty(self) -> str:
        glyphs = {
            Owner.EMPTY: ".",
            Owner.PLAYER1: "1",
            Owner.PLAYER2: "2",
            Owner.OBSTACLE: "#",
        }
        lines: list[str] = []
        for row in self.cells:
            out: list[str] = []
            for c in row:
                if c.is_boost and c.owner == Owner.EMPTY:
                    out.append("+")
                else:
                    out.append(glyphs[c.owner])
            lines.append(" ".join(out))
        return "\n".join(lines)
