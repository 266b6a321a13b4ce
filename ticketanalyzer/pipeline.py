"""High-level orchestration: load -> filter -> enrich -> aggregate -> report.

Usage::

    ticket-analyzer tickets.json
    ticket-analyzer tickets.json --origin VVO --destination TLV --html report.html
"""
import argparse
import logging
import sys
from os import PathLike
from pathlib import Path
from typing import Sequence

from ticketanalyzer.config import settings
from ticketanalyzer.errors import LoadError
from ticketanalyzer.loader import load_tickets
from ticketanalyzer.logging_config import setup_logging
from ticketanalyzer.models import RouteReport, TicketSet
from ticketanalyzer.processing.aggregation import min_duration_by_carrier, price_statistics
from ticketanalyzer.processing.duration import enrich_with_durations
from ticketanalyzer.processing.filtering import filter_by_route
from ticketanalyzer.report import render_html, render_text

USAGE_HINT = "Please provide the path to the tickets.json file"


def build_report(tickets: TicketSet, origin: str, destination: str) -> RouteReport | None:
    """Aggregate the route tickets; None when no ticket flies the route."""
    route_tickets = filter_by_route(tickets, origin, destination)
    logging.info(f"{len(route_tickets)} of {len(tickets)} tickets fly {origin} -> {destination}")
    if not route_tickets:
        return None

    enriched = enrich_with_durations(route_tickets)
    first = enriched[0]
    return RouteReport(
        origin=origin,
        destination=destination,
        min_durations=min_duration_by_carrier(enriched),
        prices=price_statistics(enriched),
        ticket_count=len(enriched),
        origin_name=first.origin_name,
        destination_name=first.destination_name,
    )


def run_pipeline(
        tickets_file: str | PathLike[str],
        origin: str = "VVO",
        destination: str = "TLV",
        html_output: Path | None = None,
) -> RouteReport | None:
    tickets = load_tickets(tickets_file)
    report = build_report(tickets, origin, destination)
    if report is None:
        return None

    if html_output is not None:
        html_output.write_text(render_html(report), encoding="utf-8")
        logging.info(f"HTML report written to {html_output}")
    return report


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Minimum flight time per carrier and average/median price gap for a route")
    p.add_argument("tickets_file", nargs="?", type=Path, default=settings.tickets_file,
                   help="Path to tickets.json (env TICKETS_FILE)")
    p.add_argument("--origin", default=settings.origin, help="Origin IATA code (env ROUTE_ORIGIN)")
    p.add_argument("--destination", default=settings.destination, help="Destination IATA code (env ROUTE_DESTINATION)")
    p.add_argument("--html", type=Path, default=settings.output_html, help="Also write an HTML report (env OUTPUT_HTML)")
    p.add_argument("--log-level", default=settings.log_level)
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.tickets_file is None:
        print(USAGE_HINT)
        parser.print_usage()
        return 0

    try:
        setup_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    try:
        report = run_pipeline(args.tickets_file, args.origin, args.destination, html_output=args.html)
    except LoadError as e:
        print(f"Error while processing the file: {e}", file=sys.stderr)
        return 1
    except Exception:  # noqa: BLE001
        logging.exception("Analysis failed")
        return 1

    if report is None:
        print(f"No tickets found between {args.origin} and {args.destination}")
        return 0

    print(render_text(report), end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
