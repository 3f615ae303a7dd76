"""High-level orchestration: load ticket records, analyze one route and print the report.

Usage patterns:

1. Default route and input file from settings / .env:
   ticket-stats

2. Explicit file and route:
   ticket-stats data/tickets.json --origin VVO --destination TLV
"""
import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from ticketstats.config import settings
from ticketstats.errors import InputAccessError, ParseError
from ticketstats.logging_config import LOG_LEVELS, setup_logging
from ticketstats.models import Route, TicketReport
from ticketstats.processing.analyzer import TicketAnalyzer
from ticketstats.processing.parser import parse_tickets
from ticketstats.report import render_report

logger = logging.getLogger(__name__)


def load_ticket_records(path: Path) -> list[dict[str, Any]]:
    """Return the raw `tickets` array of a JSON document.

    Raises InputAccessError when the file cannot be read or decoded. A document without a
    `tickets` list is treated as holding no tickets.
    """
    try:
        with open(path, 'rt', encoding='utf-8') as f:
            document = json.load(f)
    except OSError as e:
        raise InputAccessError(path, e.strerror or str(e)) from e
    except ValueError as e:
        raise InputAccessError(path, f"invalid JSON ({e})") from e

    records = document.get('tickets') if isinstance(document, dict) else None
    if not isinstance(records, list):
        logger.warning("No 'tickets' array in %s, treating as empty", path)
        return []
    logger.info(f"Loaded {len(records)} ticket records from {path}")
    return records


def run_pipeline(
        path: Path,
        route: Route,
        legacy_integer_median: bool = False,
        show_progress: bool = False,
) -> TicketReport:
    records = load_ticket_records(path)
    tickets = parse_tickets(records, show_progress=show_progress)
    analyzer = TicketAnalyzer(route, legacy_integer_median=legacy_integer_median)
    return analyzer.analyze(tickets)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Per-carrier flight time and price statistics for one route")
    p.add_argument("path", nargs="?", type=Path, default=settings.tickets_file,
                   help=f"JSON file with a 'tickets' array (default: {settings.tickets_file})")
    p.add_argument("--origin", default=settings.route_origin, help="Origin airport IATA code")
    p.add_argument("--destination", default=settings.route_destination, help="Destination airport IATA code")
    p.add_argument("--legacy-median", action=argparse.BooleanOptionalAction, default=settings.legacy_integer_median,
                   help="Average the two central prices with integer division (older report output)")
    p.add_argument("--progress", action="store_true", help="Show a progress bar while parsing")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level)
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    route = Route(origin=args.origin, destination=args.destination)
    try:
        report = run_pipeline(
            args.path,
            route,
            legacy_integer_median=args.legacy_median,
            show_progress=args.progress,
        )
    except InputAccessError as e:
        logger.error("Error reading the JSON file: %s", e)
        return 1
    except ParseError as e:
        logger.error("Malformed ticket data, no report produced: %s", e)
        return 1

    print(render_report(report), end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
