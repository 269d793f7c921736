# league_table/models/score.py
from pydantic import BaseModel, ConfigDict, Field


class TeamScore(BaseModel):
    """One side of a match line: a team name and the goals it scored."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    score: int = Field(..., ge=0)


class ScorePair(BaseModel):
    """Both sides of a match line, in the order they were written."""

    model_config = ConfigDict(frozen=True)

    team1: TeamScore
    team2: TeamScore
