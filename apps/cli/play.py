# apps/cli/play.py
"""
Interactive terminal game.

Loads the word list, draws a target and reads one guess per line from stdin
until the word is found or the guesses run out. Setup failures (missing or
empty word list) end the program with a message and exit status 1.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --words my_words.txt --seed 7 --no-color
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional

from wordle.datasets import DEFAULT_WORDLIST, Lexicon
from wordle.engine import Game, GameConfig, Guess, Status
from wordle.errors import EmptyLexiconError, InvalidGuess, LoadError
from wordle.harness import play_game
from wordle.render import render_error, render_guess

BANNER = r"""
 __          __           _ _
 \ \        / /          | | |
  \ \  /\  / /__  _ __ __| | | ___
   \ \/  \/ / _ \| '__/ _` | |/ _ \
    \  /\  / (_) | | | (_| | |  __/
     \/  \/ \___/|_|  \__,_|_|\___|
"""


def _stdin_guess(game: Game) -> Optional[str]:
    """Prompt and read one line; None on EOF (Ctrl-D)."""
    sys.stdout.write(f"You have {game.remaining} guesses left. Take a guess: ")
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        sys.stdout.write("\n")
        return None
    return line.strip()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle: guess the hidden word")
    ap.add_argument("--words", default=str(DEFAULT_WORDLIST),
                    help="word list, one word per line (default: bundled list)")
    ap.add_argument("--seed", type=int, help="RNG seed for a reproducible target")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--max-guesses", type=int, default=6, help="guess budget")
    ap.add_argument("--no-color", action="store_true", help="plain output, no ANSI colors")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")
    color = not args.no_color

    try:
        config = GameConfig(word_length=args.length, max_guesses=args.max_guesses)
        lexicon = Lexicon.load(args.words, word_length=config.word_length)
        game = Game.new(lexicon, random.Random(args.seed), config)
    except (LoadError, EmptyLexiconError, ValueError) as e:
        print(render_error(f"error: {e}", color), file=sys.stderr)
        return 1

    print(BANNER)

    def on_guess(_game: Game, guess: Guess) -> None:
        print(render_guess(guess, color))

    def on_reject(_game: Game, err: InvalidGuess) -> None:
        print(render_error(str(err), color))

    play_game(game, _stdin_guess, on_guess=on_guess, on_reject=on_reject)

    if game.status is Status.WON:
        print(f'You guessed the word "{game.word}". Congrats!')
    else:
        print(f'You didn\'t guess the word. The word was "{game.word}".')
    return 0


if __name__ == "__main__":
    sys.exit(main())
