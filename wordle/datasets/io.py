"""
Plain-text word list I/O.

Word lists are UTF-8, one word per line, no header. Helpers here never
validate content; that is the lexicon's and the validator's job.
"""

from __future__ import annotations
from pathlib import Path
from typing import Callable, Iterable, List, Optional

# Word list that ships with the package (one lowercase word per line).
DEFAULT_WORDLIST = Path(__file__).parent / "data" / "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a word list into a list of lines, without line terminators.
    Raises FileNotFoundError if the path doesn't exist and
    UnicodeDecodeError if it is not UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").splitlines()


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """Write one word per line (trailing newline included); returns the path."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def unique_preserve_order(words: Iterable[str],
                          key: Optional[Callable[[str], str]] = None) -> List[str]:
    """Drop repeats, keeping the first occurrence and the original order."""
    seen, out = set(), []
    for w in words:
        k = key(w) if key else w
        if k not in seen:
            seen.add(k)
            out.append(w)
    return out
