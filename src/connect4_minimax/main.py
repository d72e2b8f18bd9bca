from __future__ import annotations

import logging
import os
import time

from connect4_minimax.config import (
    DEFAULT_DIFFICULTY,
    LOG_LEVEL_ENV,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    RANKING_TOP_N,
    SessionConfig,
)
from connect4_minimax.game.controller import run_game
from connect4_minimax.game.session import GameSession
from connect4_minimax.ui.prompts import parse_difficulty
from connect4_minimax.ui.render import ConsoleView, render_scoreboard


def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def ask_difficulty(current: int) -> int:
    raw = input(f"Difficulty {MIN_DIFFICULTY}-{MAX_DIFFICULTY} (default {current}): ")
    d = parse_difficulty(raw, current)
    if d is None:
        print(f"Invalid difficulty. Keeping {current}.")
        return current
    return d


def main() -> None:
    configure_logging()

    session = GameSession(SessionConfig(difficulty=DEFAULT_DIFFICULTY))
    view = ConsoleView()

    while True:
        print()
        print("Select mode:")
        print(f"1) Human vs Minimax AI (difficulty {session.difficulty})")
        print("2) Change difficulty")
        print("3) Show ranking")
        print("4) Run search benchmark")
        print("q) Quit")

        choice = input("Choice: ").strip().lower()

        if choice == "1":
            print("\nGame starts in 1 second...\n")
            time.sleep(1)
            run_game(session, view)
            continue

        if choice == "2":
            session.set_difficulty(ask_difficulty(session.difficulty))
            continue

        if choice == "3":
            render_scoreboard(session.top(RANKING_TOP_N), session.tally)
            continue

        if choice == "4":
            from connect4_minimax.scripts.bench import main as bench_main

            bench_main(max_depth=ask_difficulty(MAX_DIFFICULTY))
            continue

        if choice in {"q", "quit", "exit"}:
            return

        print("\nInvalid choice.")


if __name__ == "__main__":
    main()
