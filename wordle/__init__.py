from .errors import (
    WordleError, LoadError, EmptyLexiconError,
    InvalidGuess, WordNotFiveChars, WordNotInWordlist, GameIsOver,
)
from .datasets import Lexicon
from .engine import Game, GameConfig, Guess, Mark, Status, score

__version__ = "0.1.0"
