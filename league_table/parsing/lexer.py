import re
from typing import List, Optional

from loguru import logger

from league_table.models.score import ScorePair, TeamScore

SEPARATOR = ","

# Scores are plain ASCII digits: no sign, no decimal point, no unicode digits.
_SCORE_RE = re.compile(r"[0-9]+")


class MalformedLineError(ValueError):
    """Raised when an input line cannot be lexed into two team scores."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            message = f"Malformed line {line!r}: {reason}"
        else:
            message = f"Malformed line {line_number} {line!r}: {reason}"
        super().__init__(message)

    def at_line(self, line_number: int) -> "MalformedLineError":
        """Returns a copy of this error tagged with a 1-indexed line number."""
        return MalformedLineError(self.line, self.reason, line_number)


def _lex_half(line: str, half: str) -> TeamScore:
    parts = half.split()
    if not parts:
        raise MalformedLineError(line, "empty team entry")
    if len(parts) < 2:
        raise MalformedLineError(line, f"missing team name in {half.strip()!r}")

    # Joining on a single space collapses internal whitespace runs in the name.
    name = " ".join(parts[:-1])
    score_token = parts[-1]
    if not _SCORE_RE.fullmatch(score_token):
        raise MalformedLineError(line, f"invalid score {score_token!r}")

    try:
        score = int(score_token)
    except ValueError as e:
        # Digit strings past the interpreter's int conversion limit.
        raise MalformedLineError(
            line, f"score too long ({len(score_token)} digits)"
        ) from e

    return TeamScore(name=name, score=score)


def lex(line: str) -> ScorePair:
    """Splits one match line into its two (team, score) halves.

    Args:
        line: Text of the form ``"<Team A> <score>, <Team B> <score>"``.

    Returns:
        A ScorePair with both halves in source order.

    Raises:
        MalformedLineError: If the line does not have exactly two halves, a
            half is empty or lacks a team name, or a score is not a
            non-negative integer.
    """
    halves: List[str] = line.split(SEPARATOR)
    if len(halves) != 2:
        raise MalformedLineError(
            line, f"expected 2 comma-separated entries, found {len(halves)}"
        )

    team1, team2 = (_lex_half(line, half) for half in halves)
    logger.debug(f"Lexed {team1.name} {team1.score} vs {team2.name} {team2.score}")
    return ScorePair(team1=team1, team2=team2)
