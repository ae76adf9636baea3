"""
Terminal rendering for feedback.

EXACT letters print bright green, PRESENT letters bright yellow, ABSENT
letters as the plain character. With color=False the tiles fall back to
brackets so the feedback is still readable in a log: [c] exact, (c) present.
"""

from __future__ import annotations

from wordle.engine import Guess, Mark

# ANSI escape sequences
RESET = "\033[0m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"


def render_letter(ch: str, mark: Mark, color: bool = True) -> str:
    if mark is Mark.EXACT:
        return f"{GREEN}{ch}{RESET}" if color else f"[{ch}]"
    if mark is Mark.PRESENT:
        return f"{YELLOW}{ch}{RESET}" if color else f"({ch})"
    return ch if color else f" {ch} "


def render_guess(guess: Guess, color: bool = True) -> str:
    return "".join(render_letter(ch, m, color) for ch, m in zip(guess.word, guess.feedback))


def render_error(message: str, color: bool = True) -> str:
    return f"{RED}{message}{RESET}" if color else message
