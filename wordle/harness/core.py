"""
Game loop primitives.

- play_game:  drive one Game from any guess source until it is decided
              (or the source gives up).
- run_script: replay a fixed list of guesses against many targets.

A guess source is any callable taking the Game and returning the next raw
guess string, or None to abandon. The interactive CLI passes one that
reads stdin; tests and batch runs pass one backed by a list.

These functions are UI-agnostic; printing happens in the optional
on_guess / on_reject callbacks.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

from wordle.datasets.lexicon import Lexicon
from wordle.engine import DEFAULT_CONFIG, Game, GameConfig, Guess, Status
from wordle.errors import InvalidGuess

logger = logging.getLogger(__name__)

GuessSource = Callable[[Game], Optional[str]]


def play_game(
        game: Game,
        next_guess: GuessSource,
        *,
        on_guess: Callable[[Game, Guess], None] | None = None,
        on_reject: Callable[[Game, InvalidGuess], None] | None = None,
) -> Dict:
    """
    Ask for guesses until the game is won, lost, or abandoned.

    Rejected guesses (wrong length, unknown word) are reported through
    `on_reject` and the source is asked again without using a turn.
    The status is checked before every scoring call, so GameIsOver can only
    escape from here if the Game is shared with another loop.

    Returns:
        dict with keys:
            answer, status, success (bool), guesses (int), rejected (int),
            time_ms (float), history (list[(word, pattern)])
    """
    rejected = 0
    t0 = time.perf_counter()

    while not game.is_over:
        text = next_guess(game)
        if text is None:
            logger.info("guess source gave up after %d guess(es)", len(game.history))
            break
        try:
            guess = game.score(text)
        except InvalidGuess as e:
            rejected += 1
            logger.debug("rejected %r: %s", e.word, e)
            if on_reject:
                on_reject(game, e)
            continue
        if on_guess:
            on_guess(game, guess)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": game.word,
        "status": game.status.value,
        "success": game.status is Status.WON,
        "guesses": len(game.history),
        "rejected": rejected,
        "time_ms": dt,
        "history": [(g.word, g.pattern) for g in game.history],
    }


def scripted(guesses: Iterable[str]) -> GuessSource:
    """Guess source that hands out `guesses` in order, then gives up."""
    it = iter(list(guesses))

    def _next(_game: Game) -> Optional[str]:
        return next(it, None)

    return _next


def run_script(
        lexicon: Lexicon,
        answers: Iterable[str],
        guesses: List[str],
        *,
        config: GameConfig = DEFAULT_CONFIG,
        on_result: Callable[[Dict], None] | None = None,
) -> List[Dict]:
    """
    Replay the same guess list against every target in `answers`.

    Useful for checking how far a fixed opener sequence gets. A game ends
    as soon as one of the guesses hits its target; when the list runs out
    first, the game is reported with status "in_progress".

    `on_result` is called with each game's result as soon as it finishes
    (the replay CLI advances its progress bar from it).
    """
    out: List[Dict] = []
    for ans in answers:
        game = Game(ans, lexicon, config)
        r = play_game(game, scripted(guesses))
        if on_result:
            on_result(r)
        out.append(r)
    return out
