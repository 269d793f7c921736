from typing import Iterable, List

from rich.table import Table

from league_table.calculation.accumulator import League
from league_table.models.standings import StandingsRow


def rank_league(league: League) -> List[StandingsRow]:
    """Orders teams by points (descending), then by name (ascending).

    The key is a total order, so the result does not depend on the
    mapping's iteration order.
    """
    ordered = sorted(league.items(), key=lambda item: (-item[1], item[0]))
    return [
        StandingsRow(rank=position, team=team, points=points)
        for position, (team, points) in enumerate(ordered, start=1)
    ]


def render_table(rows: Iterable[StandingsRow]) -> str:
    """Plain text table, one newline-terminated line per row."""
    return "".join(row.render() for row in rows)


def render_rich_table(rows: Iterable[StandingsRow], title: str = "Standings") -> Table:
    """Builds a rich Table for terminal display."""
    table = Table(title=title)
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("Team", style="bold")
    table.add_column("Points", justify="right", style="green")
    for row in rows:
        table.add_row(str(row.rank), row.team, f"{row.points} {row.unit}")
    return table
