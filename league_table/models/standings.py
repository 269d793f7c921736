from pydantic import BaseModel, ConfigDict, Field, computed_field


class StandingsRow(BaseModel):
    """One ranked line of the final table."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1)
    team: str
    points: int = Field(..., ge=0)

    @computed_field  # type: ignore[misc]
    @property
    def unit(self) -> str:
        """Singular only for exactly one point."""
        return "pt" if self.points == 1 else "pts"

    def render(self) -> str:
        return f"{self.rank}. {self.team} {self.points} {self.unit}\n"
