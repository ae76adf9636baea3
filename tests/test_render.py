from wordle.engine import Guess, Mark, score
from wordle.render import GREEN, RESET, YELLOW, render_error, render_guess


def test_render_guess_colors_by_mark():
    g = Guess("raise", score("raise", "crane"))  # YY--G
    out = render_guess(g)
    assert out == f"{YELLOW}r{RESET}{YELLOW}a{RESET}is{GREEN}e{RESET}"


def test_render_guess_plain():
    g = Guess("raise", (Mark.EXACT, Mark.PRESENT, Mark.ABSENT, Mark.ABSENT, Mark.ABSENT))
    assert render_guess(g, color=False) == "[r](a) i  s  e "


def test_render_error():
    assert render_error("nope", color=False) == "nope"
    assert "nope" in render_error("nope")
