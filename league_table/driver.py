from typing import Iterable, Optional

from loguru import logger

from league_table.calculation.accumulator import League, PointsScheme
from league_table.calculation.classifier import classify
from league_table.parsing.lexer import MalformedLineError, lex
from league_table.rendering.table import rank_league, render_table


def build_league(lines: Iterable[str], scheme: Optional[PointsScheme] = None) -> League:
    """Accumulates match lines into a League.

    Reading stops at the first blank line or when ``lines`` is exhausted;
    both are normal termination. Nothing after a blank line is consumed.

    Raises:
        MalformedLineError: On the first line that fails to lex, tagged with
            its 1-indexed line number. No partial league is returned.
    """
    league = League(scheme)
    matches = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            logger.debug(f"Blank line at {line_number}, stopping input.")
            break

        try:
            pair = lex(line)
        except MalformedLineError as e:
            logger.debug(f"Invalid input on line {line_number}: {e.reason}")
            raise e.at_line(line_number) from e

        league.record(classify(pair))
        matches += 1

    logger.info(f"Processed {matches} matches across {len(league)} teams.")
    return league


def football_league(lines: Iterable[str], scheme: Optional[PointsScheme] = None) -> str:
    """Reads match lines and returns the rendered standings table."""
    league = build_league(lines, scheme)
    return render_table(rank_league(league))
