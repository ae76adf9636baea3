"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - Mark.EXACT   ('G') : correct letter in the correct position
  - Mark.PRESENT ('Y') : letter occurs in the answer, but not here
  - Mark.ABSENT  ('-') : no unaccounted occurrence of this letter is left

Algorithm (two-pass):
  1) First pass marks every exact position and counts the answer letters
     that were NOT matched exactly. That count is the letter budget.
  2) Second pass walks left to right over the non-exact positions and
     marks PRESENT only while the letter still has budget.

So for any letter L, the number of EXACT + PRESENT marks never exceeds
the number of times L occurs in the answer.

score() is a pure function: safe to call from anywhere.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple


class Mark(str, Enum):
    EXACT = "G"
    PRESENT = "Y"
    ABSENT = "-"


# One Mark per position of the guess.
Feedback = Tuple[Mark, ...]


def score(guess: str, answer: str) -> Feedback:
    """
    Compute the feedback for `guess` against `answer`.

    Note the order: the guess comes first and the hidden word second, so
    feedback is always indexed by guess position. Pass them by keyword
    (score(guess=..., answer=...)) where the call site could be misread.

    Preconditions:
      - len(guess) == len(answer); both already normalized (the Game
        trims and lowercases before calling)

    Examples:
      pattern(score("belle", "level")) -> "-GYYY"
      pattern(score("lemon", "level")) -> "GG---"
    """
    if len(guess) != len(answer):
        raise ValueError(
            f"guess and answer must be the same length; got {len(guess)} and {len(answer)}")

    marks = [Mark.ABSENT] * len(guess)

    # Pass 1: exact positions, budget from whatever is left over
    budget: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            marks[i] = Mark.EXACT
        else:
            budget[a] += 1

    # Pass 2: present letters, capped by the budget
    for i, g in enumerate(guess):
        if marks[i] is Mark.EXACT:
            continue
        if budget[g] > 0:
            marks[i] = Mark.PRESENT
            budget[g] -= 1

    return tuple(marks)


def pattern(feedback: Iterable[Mark]) -> str:
    """Compact 'G'/'Y'/'-' string for a feedback tuple, e.g. 'GY--G'."""
    return "".join(m.value for m in feedback)


def is_solved(feedback: Iterable[Mark]) -> bool:
    return all(m is Mark.EXACT for m in feedback)
