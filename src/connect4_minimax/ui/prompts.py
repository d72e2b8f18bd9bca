from __future__ import annotations
from typing import Optional, Union

from connect4_minimax.config import MAX_DIFFICULTY, MIN_DIFFICULTY
from connect4_minimax.types import Move

QUIT = "quit"
RESET = "reset"

Command = Union[Move, str]


def parse_move(raw: str, cols: int) -> Command:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return QUIT
    if s in {"r", "reset", "new"}:
        return RESET
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number, r or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)


def parse_difficulty(raw: str, default: int) -> Optional[int]:
    s = raw.strip()
    if not s:
        return default
    if not s.isdigit():
        return None
    d = int(s)
    if d < MIN_DIFFICULTY or d > MAX_DIFFICULTY:
        return None
    return d
