import csv
import json

from wordle.datasets import Lexicon
from wordle.engine import Game, Status
from wordle.harness import play_game, run_script, scripted, write_csv, write_manifest

WORDS = ["crane", "raise", "stare", "trace", "cared", "slate", "level"]


def test_play_game_skips_rejected_guesses():
    lex = Lexicon.from_words(WORDS)
    game = Game("crane", lex)
    rejects, played = [], []
    r = play_game(game, scripted(["cat", "zzzzz", "raise", "crane"]),
                  on_guess=lambda g, guess: played.append(guess.word),
                  on_reject=lambda g, err: rejects.append(err.word))
    assert r["success"] is True and r["status"] == "won"
    assert r["guesses"] == 2 and r["rejected"] == 2
    assert r["history"] == [("raise", "YY--G"), ("crane", "GGGGG")]
    assert rejects == ["cat", "zzzzz"] and played == ["raise", "crane"]


def test_play_game_stops_at_loss():
    lex = Lexicon.from_words(WORDS)
    game = Game("crane", lex)
    script = ["raise", "stare", "trace", "cared", "slate", "level", "crane"]
    r = play_game(game, scripted(script))
    assert r["status"] == "lost" and r["success"] is False
    assert r["guesses"] == 6
    assert game.status is Status.LOST


def test_play_game_source_gives_up():
    lex = Lexicon.from_words(WORDS)
    r = play_game(Game("crane", lex), scripted(["raise"]))
    assert r["status"] == "in_progress" and r["guesses"] == 1


def test_run_script_and_outputs(tmp_path):
    lex = Lexicon.from_words(WORDS)
    results = run_script(lex, ["crane", "stare"], ["stare", "crane"])
    assert [r["guesses"] for r in results] == [2, 1]
    assert all(r["success"] for r in results)

    csv_path = write_csv(results, str(tmp_path / "out.csv"), max_guesses=6, N=5)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["answer"] == "crane"
    assert rows[0]["patt_1"] == "'--GYG"
    assert rows[1]["guess_2"] == ""

    m = write_manifest({"num_cases": 2}, str(tmp_path / "m.json"))
    with open(m, encoding="utf-8") as f:
        assert json.load(f)["num_cases"] == 2


def test_run_script_reports_each_game_as_it_finishes():
    lex = Lexicon.from_words(WORDS)
    seen = []
    results = run_script(lex, ["crane", "stare", "level"], ["stare", "crane"],
                         on_result=lambda r: seen.append(r["answer"]))
    assert seen == ["crane", "stare", "level"]
    assert [r["status"] for r in results] == ["won", "won", "in_progress"]
