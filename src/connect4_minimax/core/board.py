from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

from connect4_minimax.config import ROWS, COLS
from connect4_minimax.types import Cell, Player, Move

_SYMBOLS = {".": None, "X": "X", "O": "O"}


class IllegalMove(ValueError):
    """Placement into a full column."""


class OutOfRangeColumn(IllegalMove):
    """Column index outside the board."""


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, top row first, using "." for empty
        cells and "X"/"O" for pieces. Spaces are ignored.
        """
        lines = [r.replace(" ", "") for r in rows]
        if len(lines) != ROWS or any(len(r) != COLS for r in lines):
            raise ValueError(f"Expected {ROWS} rows of {COLS} cells.")

        grid: List[List[Cell]] = []
        for line in lines:
            try:
                grid.append([_SYMBOLS[ch] for ch in line])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r}.") from None

        board = cls(grid=grid)
        for c in range(COLS):
            for r in range(ROWS - 1):
                if grid[r][c] is not None and grid[r + 1][c] is None:
                    raise ValueError(f"Floating piece in column {c + 1}.")
        return board

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        return b

    def mirrored(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[::-1] for row in self.grid]
        return b

    def is_valid_move(self, col: int) -> bool:
        return 0 <= col < self.cols and self.grid[0][col] is None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def piece_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def drop(self, col: Move, player: Player) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise OutOfRangeColumn("Column out of range.")
        if self.grid[0][c] is not None:
            raise IllegalMove("Column is full.")

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = player
                return r

        raise IllegalMove("Column is full.")

    def to_rows(self) -> List[str]:
        return ["".join(cell or "." for cell in row) for row in self.grid]
