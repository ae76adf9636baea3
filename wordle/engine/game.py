"""
Game state and the turn policy.

A Game owns the hidden target, a reference to the lexicon, the history of
scored guesses and the status. Status moves exactly once:

    IN_PROGRESS --(guess == target)-----------------> WON
    IN_PROGRESS --(miss, history reaches the limit)--> LOST
    IN_PROGRESS --(miss, turns left)-----------------> IN_PROGRESS

WON and LOST are terminal; any later Game.score raises GameIsOver.

A Game is not thread-safe. Call it only from the single loop that owns it.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from wordle.datasets.lexicon import Lexicon
from wordle.errors import GameIsOver
from .config import DEFAULT_CONFIG, GameConfig
from .scoring import Feedback, is_solved, pattern, score
from .validation import check_guess

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Guess:
    """A submitted word and the feedback it received."""
    word: str
    feedback: Feedback

    @property
    def pattern(self) -> str:
        return pattern(self.feedback)

    @property
    def is_win(self) -> bool:
        return is_solved(self.feedback)


class Game:
    def __init__(self, word: str, lexicon: Lexicon, config: GameConfig = DEFAULT_CONFIG):
        word = word.strip().lower()
        if len(word) != config.word_length:
            raise ValueError(
                f"target must have {config.word_length} letters; got {word!r}")
        self.word = word
        self.lexicon = lexicon
        self.config = config
        self.status = Status.IN_PROGRESS
        self._history: List[Guess] = []

    @classmethod
    def new(cls, lexicon: Lexicon, rng: random.Random | None = None,
            config: GameConfig = DEFAULT_CONFIG) -> "Game":
        """Start a game with a target drawn uniformly from `lexicon`."""
        rng = rng or random.Random()
        return cls(lexicon.random_member(rng), lexicon, config)

    @property
    def history(self) -> Tuple[Guess, ...]:
        return tuple(self._history)

    @property
    def remaining(self) -> int:
        return self.config.max_guesses - len(self._history)

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def score(self, text: str) -> Guess:
        """
        Validate, score and record one guess.

        Raises (first failure wins):
          WordNotFiveChars, WordNotInWordlist : rejected, no turn used
          GameIsOver                          : game already decided
        """
        word = check_guess(text, self.lexicon, self.config.word_length)
        if self.is_over:
            raise GameIsOver(f"game is already {self.status.value}")

        guess = Guess(word, score(guess=word, answer=self.word))
        self._history.append(guess)

        if word == self.word:
            self.status = Status.WON
        elif len(self._history) == self.config.max_guesses:
            self.status = Status.LOST

        logger.debug("turn %d: %s -> %s (%s)", len(self._history), word,
                     guess.pattern, self.status.value)
        return guess
