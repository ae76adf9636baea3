"""
Error taxonomy for the game.

Two families:
  - setup errors (LoadError, EmptyLexiconError): no game can start, the
    CLI reports them and exits.
  - per-guess errors (InvalidGuess and subclasses): the guess is rejected
    without consuming a turn and the loop reprompts.

GameIsOver sits on its own: scoring after the game is decided is a bug in
the caller's loop, not something to retry.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for every error raised by this package."""


class LoadError(WordleError):
    """The word list source could not be read."""


class EmptyLexiconError(WordleError):
    """A target was requested from a lexicon with no words."""


class InvalidGuess(WordleError):
    """A guess was rejected; the player should try again."""

    def __init__(self, word: str, message: str):
        super().__init__(message)
        self.word = word


class WordNotFiveChars(InvalidGuess):
    def __init__(self, word: str, N: int = 5):
        super().__init__(word, f"The word is not {N} characters")
        self.N = N


class WordNotInWordlist(InvalidGuess):
    def __init__(self, word: str):
        super().__init__(word, "The word was not found in the wordlist")


class GameIsOver(WordleError):
    """Scoring was attempted after the game reached WON or LOST."""
