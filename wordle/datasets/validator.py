"""
Word list validator.

What this module does:
- Check a word list file against the format the lexicon expects
  (lowercase a-z only, exact length N, one per line).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for run manifests) and a one-line summary.

The lexicon itself is lenient (it normalizes case and skips bad lengths);
this report is for catching a broken list before playing with it.

Typical use:
    from wordle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "wordle/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordlistReport:
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID lines
    unique_count: int    # valid words after dedupe
    invalid_lines: int   # lines failing the format rules
    sha256: str          # SHA-256 of raw file bytes (empty if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Split lines into valid words and an invalid count.

    A line is valid iff it is already lowercase, alphabetic and of length N
    once surrounding whitespace is removed. Blank lines are invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for length N.

    Returns a JSON-serializable dict (see WordlistReport). `passed` is strict:
    the file must exist, hold at least one word, and have no invalid lines.
    Duplicates are reported as an issue but do not fail the check, since
    the lexicon collapses them anyway.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N, path, False, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    try:
        words, invalid = _load_and_check(p, N)
    except UnicodeDecodeError:
        rep = WordlistReport(N, str(p), True, 0, 0, 0, _sha256_file(p), False,
                             ["word list is not valid UTF-8"])
        return asdict(rep)

    issues: List[str] = []
    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
