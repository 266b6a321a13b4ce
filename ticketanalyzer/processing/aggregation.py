import statistics
from collections.abc import Iterable

from ..models import CarrierMinDuration, PriceStats, Ticket


def min_duration_by_carrier(tickets: Iterable[Ticket]) -> CarrierMinDuration:
    """Minimum flight duration (minutes) per carrier; tickets not yet enriched count as 0."""
    minimums: CarrierMinDuration = {}
    for ticket in tickets:
        duration = ticket.duration or 0
        current = minimums.get(ticket.carrier)
        if current is None or duration < current:
            minimums[ticket.carrier] = duration
    return minimums


def price_statistics(tickets: Iterable[Ticket]) -> PriceStats:
    """Mean and median ticket price.

    The median of an even count is the float average of the two central prices.
    An empty input gives zeros.
    """
    prices = sorted(t.price for t in tickets)
    if not prices:
        return PriceStats(mean=0.0, median=0.0)
    return PriceStats(mean=statistics.fmean(prices), median=float(statistics.median(prices)))


def price_difference(tickets: Iterable[Ticket]) -> float:
    return price_statistics(tickets).difference
