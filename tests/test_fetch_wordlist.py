from script.fetch_wordlist import parse_answers

PAGE = """
<html><body>
<table>
<tr><td>2024-03-02 (Sat)</td><td>987</td><td>CRANE</td></tr>
<tr><td>2024-03-01 (Fri)</td><td>986</td><td>SLATE</td></tr>
<tr><td>2023-01-05 (Thu)</td><td>565</td><td>CRANE</td></tr>
</table>
<p>Not a row: TODAY'S WORDLE</p>
</body></html>
"""


def test_parse_answers_keeps_calendar_order_without_repeats():
    assert parse_answers(PAGE) == ["crane", "slate"]
