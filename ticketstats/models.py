from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawTicket:
    """Ticket record exactly as it comes from the JSON document.

    Date / time fields are still strings; price may be a JSON number or a numeric string.
    Unknown keys (origin_name, stops, ...) are dropped when the record is loaded with dacite.
    """
    origin: str
    destination: str
    carrier: str
    departure_date: str
    departure_time: str
    arrival_date: str
    arrival_time: str
    price: int | str


@dataclass(frozen=True, slots=True)
class Ticket:
    """Parsed ticket. flight_duration_minutes is derived from departure / arrival instants."""
    origin: str
    destination: str
    carrier: str
    price: int
    flight_duration_minutes: int


@dataclass(frozen=True, slots=True)
class Route:
    origin: str
    destination: str

    def matches(self, ticket: Ticket) -> bool:
        return ticket.origin == self.origin and ticket.destination == self.destination

    def __str__(self) -> str:
        return f"{self.origin}->{self.destination}"


@dataclass(frozen=True, slots=True)
class CarrierMinimum:
    carrier: str
    minutes: int


@dataclass(frozen=True, slots=True)
class PriceStatistics:
    average: float
    median: float
    difference: float
    count: int


@dataclass(frozen=True, slots=True)
class TicketReport:
    """Result of one analysis run.

    price_statistics is None when no ticket matched the route; carrier_minimums is then empty.
    """
    route: Route
    carrier_minimums: tuple[CarrierMinimum, ...]
    price_statistics: PriceStatistics | None
    ticket_count: int
    matched_count: int

    @property
    def has_price_data(self) -> bool:
        return self.price_statistics is not None
