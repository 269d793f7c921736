"""Tests for splitting match lines into team scores."""

from __future__ import annotations

import pytest

from league_table.models.score import TeamScore
from league_table.parsing.lexer import MalformedLineError, lex


def test_lex_simple_line() -> None:
    pair = lex("Lions 3, Snakes 3")
    assert pair.team1 == TeamScore(name="Lions", score=3)
    assert pair.team2 == TeamScore(name="Snakes", score=3)


def test_lex_multi_word_name() -> None:
    pair = lex("Tarantulas 1, FC Awesome 0")
    assert (pair.team1.name, pair.team1.score) == ("Tarantulas", 1)
    assert (pair.team2.name, pair.team2.score) == ("FC Awesome", 0)


def test_lex_collapses_internal_whitespace() -> None:
    pair = lex("  FC    Awesome   2 ,\tReal  Snakes 10  ")
    assert pair.team1.name == "FC Awesome"
    assert pair.team2.name == "Real Snakes"
    assert pair.team2.score == 10


@pytest.mark.parametrize(
    "line",
    [
        "Lions 3 Snakes 3",
        "Lions 3, Snakes 3, Grouches 1",
        "Lions 3, Snakes 3,",
        ", Snakes 3",
        "Lions 3,   ",
        "Lions x, Snakes 3",
        "Lions 3, Snakes",
        "Lions -1, Snakes 3",
        "Lions +1, Snakes 3",
        "Lions 1.0, Snakes 3",
        "3, Snakes 3",
        "Lions " + "9" * 5000 + ", Snakes 1",
    ],
)
def test_lex_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        lex(line)
    assert excinfo.value.line == line
    assert excinfo.value.line_number is None


def test_malformed_line_error_at_line() -> None:
    error = MalformedLineError("bad", "missing comma")
    tagged = error.at_line(4)
    assert tagged.line_number == 4
    assert tagged.reason == "missing comma"
    assert "4" in str(tagged)
    assert isinstance(tagged, ValueError)


def test_lex_very_long_score_is_malformed() -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        lex("Lions " + "9" * 5000 + ", Snakes 1")
    assert "5000 digits" in excinfo.value.reason
