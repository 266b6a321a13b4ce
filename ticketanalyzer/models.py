from dataclasses import dataclass, field, replace
from typing import NamedTuple, TypeAlias


@dataclass(frozen=True, slots=True)
class Ticket:
    """Single ticket as found in the ``tickets`` array of the input file.

    origin / destination are IATA codes; *_name keep optional human-readable city names.
    Dates use ``dd.mm.yy`` and times ``HH:MM``; they stay raw strings because a malformed
    value only degrades the duration of that ticket instead of rejecting the whole file.
    duration (minutes) is derived after filtering, never read from the input.
    """
    origin: str
    destination: str
    carrier: str
    departure_date: str
    departure_time: str
    arrival_date: str
    arrival_time: str
    price: int
    origin_name: str | None = None
    destination_name: str | None = None
    stops: int | None = None
    duration: int | None = field(default=None, compare=False)

    def with_duration(self, minutes: int) -> "Ticket":
        return replace(self, duration=minutes)


TicketSet: TypeAlias = list[Ticket]
CarrierMinDuration: TypeAlias = dict[str, int]


class DurationResult(NamedTuple):
    """Duration in minutes plus the warning explaining a fallback to 0, if any."""
    minutes: int
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return self.warning is None


@dataclass(frozen=True, slots=True)
class PriceStats:
    mean: float
    median: float

    @property
    def difference(self) -> float:
        return self.mean - self.median


@dataclass(frozen=True, slots=True)
class RouteReport:
    """Aggregated results for one origin -> destination route."""
    origin: str
    destination: str
    min_durations: CarrierMinDuration
    prices: PriceStats
    ticket_count: int
    origin_name: str | None = None
    destination_name: str | None = None

    @property
    def route_label(self) -> str:
        origin = f"{self.origin_name} ({self.origin})" if self.origin_name else self.origin
        destination = f"{self.destination_name} ({self.destination})" if self.destination_name else self.destination
        return f"{origin} -> {destination}"

    def sorted_carriers(self) -> list[tuple[str, int]]:
        return sorted(self.min_durations.items())
