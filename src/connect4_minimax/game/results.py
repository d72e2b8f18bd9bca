from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from connect4_minimax.types import Coord, Move, Player


@dataclass(frozen=True)
class Outcome:
    winner: Optional[Player] = None
    draw: bool = False
    winning_line: Tuple[Coord, ...] = ()

    @property
    def finished(self) -> bool:
        return self.winner is not None or self.draw


@dataclass(frozen=True)
class MoveReport:
    accepted: bool
    player: Optional[Player] = None
    move: Optional[Move] = None
    outcome: Outcome = field(default_factory=Outcome)
    reason: str = ""
