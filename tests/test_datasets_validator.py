from pathlib import Path
from wordle.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words_5.txt"
    _write(p, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["invalid_lines"] == 0
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'RAISER' not lowercase
    p = tmp_path / "words_6.txt"
    p.write_text("raiser\ncrane\n???\nRAISER\n", encoding="utf-8")

    rep = validate_wordlist(6, str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlist_reports_duplicates(tmp_path: Path):
    p = tmp_path / "words_5.txt"
    _write(p, ["crane", "crane", "stare"])

    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is True
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "missing.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_empty_file(tmp_path: Path):
    p = tmp_path / "words_5.txt"
    p.write_text("", encoding="utf-8")
    rep = validate_wordlist(5, str(p))
    assert rep["passed"] is False
    assert any("0 valid" in msg for msg in rep["issues"])
