import logging
from collections import defaultdict
from typing import TypeAlias

from ..models import CarrierMinimum, PriceStatistics, Route, Ticket, TicketReport
from .stats import mean, median

CarrierGroups: TypeAlias = dict[str, list[Ticket]]

logger = logging.getLogger(__name__)


class TicketAnalyzer:
    """Per-carrier minimum flight time and price statistics for a single route."""

    def __init__(self, route: Route, legacy_integer_median: bool = False):
        self.route = route
        self.legacy_integer_median = legacy_integer_median

    # ---------------- Filtering / grouping -----------------
    def filter_by_route(self, tickets: list[Ticket]) -> list[Ticket]:
        return [t for t in tickets if self.route.matches(t)]

    @staticmethod
    def group_by_carrier(tickets: list[Ticket]) -> CarrierGroups:
        grouped: CarrierGroups = defaultdict(list)
        for ticket in tickets:
            grouped[ticket.carrier].append(ticket)
        return dict(grouped)

    # ---------------- Statistics -----------------
    @staticmethod
    def carrier_minimums(groups: CarrierGroups) -> tuple[CarrierMinimum, ...]:
        return tuple(
            CarrierMinimum(carrier=carrier, minutes=min(t.flight_duration_minutes for t in tickets))
            for carrier, tickets in groups.items()
        )

    def price_statistics(self, tickets: list[Ticket]) -> PriceStatistics | None:
        prices = [t.price for t in tickets]
        if not prices:
            logger.warning("No prices available for route %s", self.route)
            return None
        average = mean(prices)
        middle = median(prices, legacy_integer_division=self.legacy_integer_median)
        return PriceStatistics(average=average, median=middle, difference=average - middle, count=len(prices))

    # ---------------- public API -----------------
    def analyze(self, tickets: list[Ticket]) -> TicketReport:
        matched = self.filter_by_route(tickets)
        logger.info("%d of %d tickets match route %s", len(matched), len(tickets), self.route)
        groups = self.group_by_carrier(matched)
        return TicketReport(
            route=self.route,
            carrier_minimums=self.carrier_minimums(groups),
            price_statistics=self.price_statistics(matched),
            ticket_count=len(tickets),
            matched_count=len(matched),
        )
