from __future__ import annotations
import sys
import time

from connect4_minimax.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def ai_thinking(label: str = "AI is thinking", delay_sec: float = AI_THINK_DELAY_SEC) -> None:
    """
    Short user-visible pause before the AI reply so it does not land
    instantly. Pure pacing: the search itself runs after this returns.
    """
    if delay_sec <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(delay_sec)
        return

    frames = ["|", "/", "-", "\\"]
    start = time.time()
    i = 0
    while (time.time() - start) < delay_sec:
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
