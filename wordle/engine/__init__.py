from .scoring import Mark, Feedback, score, pattern, is_solved
from .validation import check_guess, normalize_word
from .config import GameConfig, DEFAULT_CONFIG, WORD_LENGTH, MAX_GUESSES
from .game import Game, Guess, Status

__all__ = [
    "Mark", "Feedback", "score", "pattern", "is_solved",
    "check_guess", "normalize_word",
    "GameConfig", "DEFAULT_CONFIG", "WORD_LENGTH", "MAX_GUESSES",
    "Game", "Guess", "Status",
]
