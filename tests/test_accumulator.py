"""Tests for the running points table."""

from __future__ import annotations

from league_table.calculation.accumulator import League, PointsScheme, accumulate
from league_table.config.settings import AppSettings
from league_table.models.outcome import Draw, Win


def test_win_awards_three_and_inserts_loser_at_zero() -> None:
    league = League()
    league.record(Win(winner="Lions", loser="Snakes"))
    assert league.as_dict() == {"Lions": 3, "Snakes": 0}


def test_loss_does_not_reset_existing_points() -> None:
    league = League()
    league.record(Draw(team_a="Lions", team_b="Snakes"))
    league.record(Win(winner="Tarantulas", loser="Snakes"))
    assert league.points("Snakes") == 1
    assert league.points("Tarantulas") == 3


def test_draw_awards_one_each() -> None:
    league = accumulate(League(), Draw(team_a="A", team_b="B"))
    accumulate(league, Draw(team_a="B", team_b="C"))
    assert league.as_dict() == {"A": 1, "B": 2, "C": 1}
    assert "C" in league
    assert len(league) == 3


def test_replay_is_deterministic() -> None:
    outcomes = [
        Win(winner="A", loser="B"),
        Draw(team_a="B", team_b="C"),
        Win(winner="C", loser="A"),
    ]
    first, second = League(), League()
    for outcome in outcomes:
        first.record(outcome)
    for outcome in outcomes:
        second.record(outcome)
    assert first.as_dict() == second.as_dict() == {"A": 3, "B": 1, "C": 4}


def test_points_scheme_from_settings() -> None:
    scheme = PointsScheme.from_settings(
        AppSettings(win_points=2, draw_points=1, loss_points=0)
    )
    league = League(scheme)
    league.record(Win(winner="A", loser="B"))
    assert league.points("A") == 2
