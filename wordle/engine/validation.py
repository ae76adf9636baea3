"""
Guess validation.

This module answers the question: "Is this guess acceptable at all?"
A guess is acceptable iff:
  - after trimming it has exact length N
  - it is a member of the lexicon

Checks run in that order and the first failure wins, so a 4-letter
nonsense word reports the length problem, not the lexicon one.

Whether the game still accepts guesses is the Game's concern, checked
after these (see engine.game).
"""

from __future__ import annotations

from typing import Container

from wordle.errors import WordNotFiveChars, WordNotInWordlist


def normalize_word(word: str) -> str:
    """Trim surrounding whitespace/newlines and lowercase."""
    return word.strip().lower()


def check_guess(word: str, allowed: Container[str], N: int) -> str:
    """
    Return the normalized guess, or raise the matching InvalidGuess.

    Args:
      word    : raw guess text (may carry a trailing newline)
      allowed : the lexicon (anything supporting `in`)
      N       : required word length

    Raises:
      WordNotFiveChars  : wrong length
      WordNotInWordlist : right length, unknown word
    """
    w = normalize_word(word)

    if len(w) != N:
        raise WordNotFiveChars(w, N)

    if w not in allowed:
        raise WordNotInWordlist(w)

    return w
