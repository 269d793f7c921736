from league_table.models.outcome import Draw, MatchOutcome, Win
from league_table.models.score import ScorePair


def classify(pair: ScorePair) -> MatchOutcome:
    """Turns a lexed score pair into a Win or Draw."""
    team1, team2 = pair.team1, pair.team2
    if team1.score > team2.score:
        return Win(winner=team1.name, loser=team2.name)
    if team1.score < team2.score:
        return Win(winner=team2.name, loser=team1.name)
    return Draw(team_a=team1.name, team_b=team2.name)
