from typing import Dict, Iterator, Optional, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from league_table.config.settings import AppSettings, settings
from league_table.models.outcome import Draw, MatchOutcome, Win


class PointsScheme(BaseModel):
    """Points awarded per result. Defaults are standard football scoring."""

    model_config = ConfigDict(frozen=True)

    win: int = Field(3, ge=0)
    draw: int = Field(1, ge=0)
    loss: int = Field(0, ge=0)

    @classmethod
    def from_settings(cls, app_settings: Optional[AppSettings] = None) -> "PointsScheme":
        app_settings = app_settings or settings
        return cls(
            win=app_settings.win_points,
            draw=app_settings.draw_points,
            loss=app_settings.loss_points,
        )


class League:
    """Running points total per team for a single run.

    Teams are added on first mention and never removed. The only mutation
    path is ``record``.
    """

    def __init__(self, scheme: Optional[PointsScheme] = None):
        self.scheme = scheme or PointsScheme()
        self._points: Dict[str, int] = {}

    def _award(self, team: str, points: int) -> None:
        # Insert-or-increment: a first mention creates the entry with `points`.
        self._points[team] = self._points.get(team, 0) + points

    def record(self, outcome: MatchOutcome) -> None:
        """Applies one match outcome to the table."""
        if isinstance(outcome, Win):
            self._award(outcome.winner, self.scheme.win)
            self._award(outcome.loser, self.scheme.loss)
        elif isinstance(outcome, Draw):
            self._award(outcome.team_a, self.scheme.draw)
            self._award(outcome.team_b, self.scheme.draw)
        else:
            raise TypeError(f"Unsupported match outcome: {outcome!r}")
        logger.debug(f"Recorded {outcome.kind.value}: {outcome}")

    def points(self, team: str) -> int:
        return self._points[team]

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._points.items())

    def as_dict(self) -> Dict[str, int]:
        return dict(self._points)

    def __contains__(self, team: object) -> bool:
        return team in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self):
        return f"League(teams={len(self._points)}, scheme={self.scheme!r})"


def accumulate(league: League, outcome: MatchOutcome) -> League:
    """Records ``outcome`` into ``league`` in place and returns it."""
    league.record(outcome)
    return league
