# src/connect4_minimax/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col), row 0 is the top
