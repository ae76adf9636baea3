from __future__ import annotations

from dataclasses import dataclass

# Classic rules: five letters, six tries.
WORD_LENGTH = 5
MAX_GUESSES = 6


@dataclass(frozen=True)
class GameConfig:
    """Size knobs for a game. Defaults match the classic game."""
    word_length: int = WORD_LENGTH
    max_guesses: int = MAX_GUESSES

    def __post_init__(self):
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {self.max_guesses}")


DEFAULT_CONFIG = GameConfig()
