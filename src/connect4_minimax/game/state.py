from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from connect4_minimax.core.board import Board
from connect4_minimax.types import Coord, Player


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player
    last_status: str = "Your turn! Pick a column."
    game_over: bool = False
    thinking: bool = False
    winning_line: List[Coord] = field(default_factory=list)
    winner: Optional[Player] = None
