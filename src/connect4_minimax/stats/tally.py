from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SessionTally:
    human_wins: int = 0
    ai_wins: int = 0
    draws: int = 0

    # search diagnostics, summed over every AI move of the session
    moves: int = 0
    nodes: int = 0
    time_ms: int = 0

    # nodes analysed for the most recent AI move
    last_nodes: int = 0

    @property
    def games(self) -> int:
        return self.human_wins + self.ai_wins + self.draws

    def add_search(self, nodes: int, time_ms: int) -> None:
        self.moves += 1
        self.nodes += nodes
        self.time_ms += time_ms
        self.last_nodes = nodes


def avg_nodes_per_move(t: SessionTally) -> float:
    return (t.nodes / t.moves) if t.moves else 0.0


def avg_ms_per_move(t: SessionTally) -> float:
    return (t.time_ms / t.moves) if t.moves else 0.0
