from collections.abc import Iterable

from ..models import Ticket, TicketSet


def filter_by_route(tickets: Iterable[Ticket], origin: str, destination: str) -> TicketSet:
    """Keep tickets flying exactly origin -> destination (case-sensitive), in input order."""
    return [t for t in tickets if t.origin == origin and t.destination == destination]
