# src/connect4_minimax/config.py

from __future__ import annotations

from dataclasses import dataclass

from connect4_minimax.types import Player

ROWS = 6
COLS = 7
CONNECT_N = 4

# Sides. The AI is always the maximizing side.
HUMAN: Player = "X"
AI: Player = "O"

HUMAN_NAME = "Human Player"
AI_NAME = "Minimax AI"

# Window credit by piece count (1..4), same magnitude for both sides
WINDOW_WEIGHTS = {4: 1000, 3: 100, 2: 10, 1: 1}
WIN_SCORE = WINDOW_WEIGHTS[4]

# Difficulty = search depth in plies
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 6
DEFAULT_DIFFICULTY = 4

# Ranking points
WIN_POINTS = 3
DRAW_POINTS = 1
RANKING_TOP_N = 5

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.5  # short pause so AI moves aren’t instant

# Benchmark output
RESULTS_DIR = "data/results"
LOG_LEVEL_ENV = "CONNECT4_LOG_LEVEL"


@dataclass(frozen=True)
class SessionConfig:
    difficulty: int = DEFAULT_DIFFICULTY
    human_name: str = HUMAN_NAME
    ai_name: str = AI_NAME
    win_points: int = WIN_POINTS
    draw_points: int = DRAW_POINTS
