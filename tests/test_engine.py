from collections import Counter

import pytest
from wordle.engine import Mark, check_guess, pattern, score
from wordle.errors import WordNotFiveChars, WordNotInWordlist

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("scoop","scoop","GGGGG"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
    ("erase","speed","Y--YY"),
    ("error","level","Y----"),
    ("sleep","steel","GYGG-"),
    ("speed","abide","--Y-Y"),
    ("eerie","crane","--Y-G"),
])
def test_score_n5_golden(guess, answer, expected):
    assert pattern(score(guess, answer)) == expected

# --- other lengths work too ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","-GGGYY"),
    ("little","letter","G-GG-Y"),
    ("planet","palate","GYY-YY"),
    ("kitten","tinket","YGYYGY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert pattern(score(guess, answer)) == expected

def test_score_returns_one_mark_per_position():
    fb = score("erase", "speed")
    assert len(fb) == 5
    assert all(isinstance(m, Mark) for m in fb)

def test_score_is_deterministic():
    assert score("belle", "level") == score("belle", "level")

def test_exact_wins_over_earlier_present():
    # the only 'e' of the answer is matched exactly at the end, so the
    # earlier e's get nothing even though they are scanned first
    fb = score("eerie", "crane")
    assert fb[4] is Mark.EXACT
    assert fb[0] is Mark.ABSENT and fb[1] is Mark.ABSENT

@pytest.mark.parametrize("guess,answer", [
    ("erase","speed"), ("error","level"), ("belle","level"),
    ("geese","sheep"), ("llama","hello"), ("mamma","maxim"),
])
def test_marks_per_letter_never_exceed_answer_count(guess, answer):
    fb = score(guess, answer)
    hits = Counter(g for g, m in zip(guess, fb) if m is not Mark.ABSENT)
    want = Counter(answer)
    for letter, n in hits.items():
        assert n <= want[letter]
    exact = sum(1 for m in fb if m is Mark.EXACT)
    assert exact == sum(1 for g, a in zip(guess, answer) if g == a)

def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("cranes", "crane")

def test_check_guess_n5():
    allowed = {"crane","raise","stare"}
    assert check_guess(" CRANE\n", allowed, N=5) == "crane"
    with pytest.raises(WordNotFiveChars):
        check_guess("cranes", allowed, N=5)
    with pytest.raises(WordNotFiveChars):
        check_guess("cran", allowed, N=5)
    with pytest.raises(WordNotInWordlist):
        check_guess("zzzzz", allowed, N=5)

def test_check_guess_length_reported_before_membership():
    with pytest.raises(WordNotFiveChars):
        check_guess("???", {"crane"}, N=5)

def test_score_by_keyword_matches_positional():
    # guess first, answer second: feedback follows the guess letters
    assert score(guess="raise", answer="crane") == score("raise", "crane")
    assert pattern(score(answer="crane", guess="raise")) == "YY--G"
