from __future__ import annotations

import csv
import logging
import os
import time
from dataclasses import dataclass
from typing import Dict, List, Sequence

from connect4_minimax.ai.minimax_agent import MinimaxAgent
from connect4_minimax.config import MAX_DIFFICULTY, RESULTS_DIR
from connect4_minimax.core.board import Board
from connect4_minimax.ui.colors import BOLD, DIM, FG_GREEN, c, hr

logger = logging.getLogger(__name__)

CSV_FIELDS = ["position", "depth", "move", "value", "nodes", "time_ms", "pieces"]

# Named positions, top row first
POSITIONS: Dict[str, Sequence[str]] = {
    "empty": [
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
    ],
    "opening": [
        ".......",
        ".......",
        ".......",
        ".......",
        "...O...",
        "..XXO..",
    ],
    "win_in_one": [
        ".......",
        ".......",
        ".......",
        ".......",
        "XX.....",
        "OOO.X..",
    ],
    "must_block": [
        ".......",
        ".......",
        ".......",
        "...X...",
        "..OX...",
        "..OXO..",
    ],
    "midgame": [
        ".......",
        ".......",
        "..XO...",
        "..XO...",
        ".OXXO..",
        "XOOXXO.",
    ],
}


@dataclass(frozen=True)
class BenchRow:
    position: str
    depth: int
    move: int | None
    value: int
    nodes: int
    time_ms: int
    pieces: int


def run_bench(positions: Dict[str, Sequence[str]] = POSITIONS, max_depth: int = MAX_DIFFICULTY) -> List[BenchRow]:
    agent = MinimaxAgent(name="Bench")
    rows: List[BenchRow] = []

    for name, layout in positions.items():
        board = Board.from_rows(layout)
        for d in range(1, max_depth + 1):
            res = agent.search(board, depth=d)
            rows.append(
                BenchRow(
                    position=name,
                    depth=d,
                    move=(int(res.move) if res.move is not None else None),
                    value=res.value,
                    nodes=res.nodes,
                    time_ms=res.time_ms,
                    pieces=board.piece_count(),
                )
            )
            logger.debug("bench %s d=%d nodes=%d %dms", name, d, res.nodes, res.time_ms)

    return rows


def export_csv(rows: Sequence[BenchRow], out_dir: str = RESULTS_DIR) -> str:
    os.makedirs(out_dir, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    path = os.path.join(out_dir, f"bench_results_{ts}.csv")

    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow({
                "position": r.position,
                "depth": r.depth,
                "move": "" if r.move is None else r.move + 1,
                "value": r.value,
                "nodes": r.nodes,
                "time_ms": r.time_ms,
                "pieces": r.pieces,
            })

    return path


def print_rows(rows: Sequence[BenchRow]) -> None:
    print(c(f"{'position':<12} {'d':>2} {'move':>4} {'value':>7} {'nodes':>9} {'ms':>7}", BOLD))
    print(c(hr(46), DIM))
    for r in rows:
        move = "-" if r.move is None else str(r.move + 1)
        print(f"{r.position:<12} {r.depth:>2} {move:>4} {r.value:>7} {r.nodes:>9} {r.time_ms:>7}")
    print(c(hr(46), DIM))


def main(max_depth: int = MAX_DIFFICULTY, export: bool = True) -> None:
    start = time.perf_counter()
    rows = run_bench(max_depth=max_depth)
    print_rows(rows)

    if export:
        path = export_csv(rows)
        print(c(f"Saved: {path}", FG_GREEN))

    print(c(f"Total runtime: {time.perf_counter() - start:0.3f}s", BOLD))


if __name__ == "__main__":
    main()
