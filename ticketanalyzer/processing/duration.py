"""Flight duration calculation.

A ticket with a malformed date or time does not stop the run: its duration
falls back to 0 minutes and a warning is logged.
"""
import calendar
import logging
import re
from collections.abc import Iterable
from datetime import date, datetime, time

from tqdm import tqdm

from ..models import DurationResult, Ticket, TicketSet

# Two-digit years always belong to this century: "24" -> 2024, "99" -> 2099
TWO_DIGIT_YEAR_BASE = 2000

_DATE_RE = re.compile(r'(\d{2})\.(\d{2})\.(\d{2})', re.ASCII)
# Optional sign and ASCII digits only; whitespace and underscores are malformed
_TIME_PART_RE = re.compile(r'[+-]?\d+', re.ASCII)


def parse_date(date_str: str) -> date:
    """Parse ``dd.mm.yy``. Raises ValueError on anything else.

    A day past the end of its month (``31.04.24``) resolves to the month's last day,
    while day 0, day 32+ or an unknown month are rejected.
    """
    match = _DATE_RE.fullmatch(date_str)
    if match is None:
        raise ValueError(f"Date string '{date_str}' is not in dd.mm.yy format")
    day, month, year = (int(part) for part in match.groups())
    year += TWO_DIGIT_YEAR_BASE
    if not 1 <= month <= 12:
        raise ValueError(f"Date string '{date_str}' has an invalid month {month}")
    if not 1 <= day <= 31:
        raise ValueError(f"Date string '{date_str}' has an invalid day {day}")
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def parse_time(time_str: str) -> time:
    """Parse ``HH:MM``; extra ``:``-separated parts are ignored. Raises ValueError."""
    parts = time_str.split(':')
    if len(parts) < 2:
        raise ValueError(f"Time string '{time_str}' is not in HH:MM format")
    if not all(_TIME_PART_RE.fullmatch(part) for part in parts[:2]):
        raise ValueError(f"Time string '{time_str}' has a non-numeric hour or minute")
    hour, minute = int(parts[0]), int(parts[1])
    try:
        return time(hour, minute)
    except ValueError as e:
        raise ValueError(f"Time string '{time_str}' is not a valid time: {e}") from e


def calculate_duration(departure_date: str, departure_time: str,
                       arrival_date: str, arrival_time: str) -> DurationResult:
    """Signed minutes between departure and arrival wall-clock timestamps.

    Never raises: on malformed input the result is 0 minutes with a warning attached.
    """
    try:
        departure = datetime.combine(parse_date(departure_date), parse_time(departure_time))
        arrival = datetime.combine(parse_date(arrival_date), parse_time(arrival_time))
    except ValueError as e:
        return DurationResult(0, str(e))
    return DurationResult(int((arrival - departure).total_seconds()) // 60)


def ticket_duration(ticket: Ticket) -> DurationResult:
    return calculate_duration(ticket.departure_date, ticket.departure_time,
                              ticket.arrival_date, ticket.arrival_time)


def enrich_with_durations(tickets: Iterable[Ticket]) -> TicketSet:
    enriched = []
    for index, ticket in enumerate(tqdm(tickets, desc='Calculating durations', leave=False, disable=None)):
        result = ticket_duration(ticket)
        if not result.ok:
            logging.warning('Cannot compute duration of ticket #%d (%s %s -> %s), using 0: %s',
                            index, ticket.carrier, ticket.origin, ticket.destination, result.warning)
        enriched.append(ticket.with_duration(result.minutes))
    return enriched
