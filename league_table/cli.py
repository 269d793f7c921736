import sys
import argparse
from typing import List, Optional, TextIO

from loguru import logger
from rich.console import Console
from rich.markup import escape

from league_table.calculation.accumulator import PointsScheme
from league_table.config.settings import VALID_LOG_LEVELS
from league_table.driver import build_league
from league_table.logging.setup import setup_logging
from league_table.parsing.lexer import MalformedLineError
from league_table.rendering.table import rank_league, render_rich_table, render_table

EXIT_OK = 0
EXIT_MALFORMED_LINE = 1
EXIT_UNREADABLE_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="league-table",
        description="Compute a football league table from match results.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File of match results, one per line ('-' or omitted reads stdin).",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render the table with rich instead of plain text.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Override the configured log level for this run.",
    )
    return parser


def _standings(stream: TextIO, pretty: bool, out: TextIO) -> None:
    league = build_league(stream, PointsScheme.from_settings())
    rows = rank_league(league)
    if pretty:
        Console(file=out).print(render_rich_table(rows))
    else:
        out.write(render_table(rows))


def run(argv: Optional[List[str]] = None) -> int:
    """Command line entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    err_console = Console(stderr=True)

    try:
        if args.input == "-":
            _standings(sys.stdin, args.pretty, sys.stdout)
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                _standings(f, args.pretty, sys.stdout)
    except MalformedLineError as e:
        err_console.print(
            f"[bold red]Error:[/bold red] invalid input on line: {e.line_number}",
            highlight=False,
        )
        return EXIT_MALFORMED_LINE
    except UnicodeDecodeError as e:
        # Decoding happens a buffer at a time, so no reliable line number.
        logger.debug(f"Undecodable input {args.input}: {e}")
        err_console.print(
            f"[bold red]Error:[/bold red] cannot decode {escape(args.input)}: "
            f"byte {e.start} is not valid {e.encoding}",
            highlight=False,
            soft_wrap=True,
        )
        return EXIT_UNREADABLE_INPUT
    except OSError as e:
        logger.debug(f"Could not read input {args.input}: {e}")
        err_console.print(
            f"[bold red]Error:[/bold red] cannot read {escape(args.input)}: {e.strerror}",
            highlight=False,
            soft_wrap=True,
        )
        return EXIT_UNREADABLE_INPUT

    return EXIT_OK
