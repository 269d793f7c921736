from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from .enums import OutcomeKind


class Win(BaseModel):
    """A decided match. Names the winning and losing team."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[OutcomeKind.WIN] = OutcomeKind.WIN
    winner: str
    loser: str


class Draw(BaseModel):
    """A level match between two teams."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[OutcomeKind.DRAW] = OutcomeKind.DRAW
    team_a: str
    team_b: str


MatchOutcome = Union[Win, Draw]
