"""
The lexicon: the immutable set of legal words.

One lexicon serves two purposes:
  - the pool the hidden target is drawn from (random_member)
  - the validity filter for guesses (contains / `in`)

Words are normalized (stripped, lowercased) once at construction. Only
words of exactly `word_length` characters are kept, so every member
satisfies the length invariant regardless of what the source file holds.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Tuple

from wordle.errors import EmptyLexiconError, LoadError
from .io import read_lines

logger = logging.getLogger(__name__)


class Lexicon:
    __slots__ = ("word_length", "_words", "_ordered")

    def __init__(self, words: Iterable[str], word_length: int = 5):
        kept = set()
        skipped = 0
        for raw in words:
            w = raw.strip().lower()
            if not w:
                continue
            if len(w) != word_length:
                skipped += 1
                continue
            kept.add(w)
        if skipped:
            logger.warning("skipped %d word(s) that are not %d characters long",
                           skipped, word_length)

        self.word_length = word_length
        self._words: FrozenSet[str] = frozenset(kept)
        # sorted so a seeded rng picks the same target on every run
        self._ordered: Tuple[str, ...] = tuple(sorted(kept))

    @classmethod
    def from_words(cls, words: Iterable[str], word_length: int = 5) -> "Lexicon":
        return cls(words, word_length)

    @classmethod
    def load(cls, source: Path | str, word_length: int = 5) -> "Lexicon":
        """
        Read a newline-delimited UTF-8 word list.

        Raises LoadError if the file is missing, unreadable or not UTF-8.
        An empty file loads fine; it only fails later, in random_member.
        """
        try:
            lines = read_lines(source)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"could not read word list {source}: {e}") from e

        lex = cls.from_words(lines, word_length)
        logger.info("loaded %d words from %s", len(lex), source)
        return lex

    def contains(self, word: str) -> bool:
        w = word.strip().lower()
        return len(w) == self.word_length and w in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def random_member(self, rng: random.Random) -> str:
        if not self._ordered:
            raise EmptyLexiconError("cannot pick a word from an empty lexicon")
        return rng.choice(self._ordered)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __repr__(self) -> str:
        return f"Lexicon({len(self)} words, word_length={self.word_length})"
