"""Turn processor: advances an airline by one simulated day."""

import logging
from decimal import Decimal
from typing import List, Optional

from .config import (
    REPUTATION_DRIFT_DIVISOR,
    REPUTATION_FLOOR_TARGET,
    REPUTATION_TARGETS,
)
from .errors import InvalidStateError
from .event_generator import EventGenerator
from .models.airline import Airline
from .models.event import GameEvent
from .models.summary import DailyOperationsSummary, RouteDailyResult
from .route_economics import compute_daily_result
from .utils import format_cost, to_money

logger = logging.getLogger(__name__)


def reputation_drift(reputation: int, passengers_carried: int) -> int:
    """
    Change in reputation from one day of service.

    Busy days pull reputation toward a higher target, quiet days toward a
    lower one, a tenth of the gap at a time.

    Args:
        reputation: Current reputation
        passengers_carried: Passengers flown today

    Returns:
        Reputation delta, truncated toward zero
    """
    target = REPUTATION_FLOOR_TARGET
    for passengers_above, target_reputation in REPUTATION_TARGETS:
        if passengers_carried > passengers_above:
            target = target_reputation
            break
    return int((target - reputation) / REPUTATION_DRIFT_DIVISOR)


class TurnProcessor:
    """Runs the fixed daily sequence: calendar, event, ledger, routes, cash, reputation."""

    def __init__(self, event_generator: Optional[EventGenerator] = None):
        """
        Initialize the turn processor.

        Args:
            event_generator: Source of random events; a fresh unseeded one if omitted
        """
        self.event_generator = event_generator or EventGenerator()

    def process_day(self, airline: Optional[Airline]) -> DailyOperationsSummary:
        """
        Simulate one day of operations.

        Args:
            airline: Airline to advance

        Returns:
            Summary of the day

        Raises:
            InvalidStateError: If there is no airline
        """
        if airline is None:
            raise InvalidStateError("Cannot process a day without an airline")

        day = airline.advance_day()

        new_events = []
        event_impact = Decimal("0")
        event = self.event_generator.try_generate_event(day, airline)
        if event is not None:
            event_impact = self._apply_new_event(airline, event)
            new_events.append(event)

        expired = airline.event_ledger.expire(day)
        for old_event in expired:
            logger.debug(f"Day {day}: event '{old_event.title}' ended")

        demand_modifier = airline.event_ledger.demand_modifier()
        cost_modifier = airline.event_ledger.cost_modifier()

        route_results: List[RouteDailyResult] = []
        revenue = Decimal("0")
        costs = Decimal("0")
        passengers = 0
        for route in airline.active_routes:
            if route.assigned_aircraft is None:
                continue
            result = compute_daily_result(route, demand_modifier, cost_modifier, airline.reputation)
            route.record_performance(result.passengers, result.load_factor, result.profit)
            route.assigned_aircraft.add_flight_hours(route.flight_time_hours * result.flights)
            route_results.append(result)
            revenue += result.revenue
            costs += result.costs
            passengers += result.passengers

        profit = revenue - costs
        airline.adjust_cash(profit)
        airline.total_passengers_carried += passengers
        airline.total_revenue = to_money(airline.total_revenue + revenue)
        airline.total_costs = to_money(airline.total_costs + costs)

        airline.adjust_reputation(reputation_drift(airline.reputation, passengers))

        summary = DailyOperationsSummary(
            day=day,
            revenue=revenue,
            costs=costs,
            profit=profit,
            event_impact=event_impact,
            net_cash_change=profit + event_impact,
            passengers_carried=passengers,
            cash_balance=airline.cash,
            reputation=airline.reputation,
            demand_modifier=demand_modifier,
            cost_modifier=cost_modifier,
            route_results=route_results,
            new_events=new_events,
            expired_events=expired,
        )

        logger.info(
            f"Day {day}: revenue {format_cost(revenue)}, costs {format_cost(costs)}, "
            f"{passengers} passengers, cash {format_cost(airline.cash)}, "
            f"reputation {airline.reputation}, active events {len(airline.event_ledger)}"
        )
        return summary

    @staticmethod
    def _apply_new_event(airline: Airline, event: GameEvent) -> Decimal:
        """Add the event to the ledger and apply its one-time effects."""
        airline.event_ledger.append(event)
        airline.adjust_cash(event.financial_impact)
        airline.adjust_reputation(event.reputation_delta)
        logger.info(
            f"Day {event.day_occurred}: {event.severity.value} {event.category.value} event "
            f"'{event.title}' ({event.effects_summary()})"
        )
        return event.financial_impact
