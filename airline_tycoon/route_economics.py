"""Route economics: demand, revenue and operating cost of one route for one day."""

import logging
from decimal import Decimal

from .config import (
    CREW_COST_PER_HOUR,
    DEFAULT_REPUTATION,
    FUEL_PRICE_PER_GALLON,
    MAINTENANCE_COST_FACTOR,
    MARKET_SIZE_DEMAND,
    MAX_LOAD_FACTOR,
)
from .models.aircraft import AircraftType
from .models.airport import Airport
from .models.route import Route
from .models.summary import RouteDailyResult
from .utils import to_money

logger = logging.getLogger(__name__)


def calculate_base_demand(origin: Airport, destination: Airport) -> int:
    """
    Potential daily passengers between two markets, before any modifiers.

    Args:
        origin: Departure airport
        destination: Arrival airport

    Returns:
        Mean of the two markets' demand values
    """
    origin_value = MARKET_SIZE_DEMAND.get(origin.market_size.value, MARKET_SIZE_DEMAND["small"])
    destination_value = MARKET_SIZE_DEMAND.get(destination.market_size.value, MARKET_SIZE_DEMAND["small"])
    return (origin_value + destination_value) // 2


def reputation_modifier(reputation: int) -> float:
    """0.5x demand at reputation 0 up to 1.5x at 100."""
    return 0.5 + reputation / 100.0


def calculate_fuel_cost(aircraft_type: AircraftType, flight_hours: float, flights: int) -> Decimal:
    gallons = Decimal(aircraft_type.fuel_consumption_per_hour) * Decimal(str(flight_hours)) * flights
    return gallons * FUEL_PRICE_PER_GALLON


def calculate_crew_cost(flight_hours: float, flights: int) -> Decimal:
    return Decimal(str(flight_hours)) * flights * CREW_COST_PER_HOUR


def calculate_airport_fees(origin: Airport, destination: Airport, flights: int) -> Decimal:
    """Landing fees are charged at both ends of every flight."""
    return (origin.landing_fee + destination.landing_fee) * flights


def calculate_maintenance_cost(aircraft_type: AircraftType, flight_hours: float, flights: int) -> Decimal:
    return aircraft_type.operating_cost_per_hour * Decimal(str(flight_hours)) * flights * MAINTENANCE_COST_FACTOR


def calculate_base_cost(route: Route) -> Decimal:
    """
    Unmodified operating cost of flying the route's schedule for a day.

    Args:
        route: Route with an assigned aircraft

    Returns:
        Fuel + crew + airport fees + maintenance
    """
    aircraft_type = route.assigned_aircraft.aircraft_type
    hours = route.flight_time_hours
    flights = route.daily_flights
    return (
        calculate_fuel_cost(aircraft_type, hours, flights)
        + calculate_crew_cost(hours, flights)
        + calculate_airport_fees(route.origin, route.destination, flights)
        + calculate_maintenance_cost(aircraft_type, hours, flights)
    )


def compute_daily_result(
    route: Route,
    demand_modifier: float = 1.0,
    cost_modifier: float = 1.0,
    reputation: int = DEFAULT_REPUTATION,
) -> RouteDailyResult:
    """
    Simulate one day of a route.

    Pure: neither the route nor its aircraft is modified.

    Args:
        route: Route to simulate
        demand_modifier: Product of active events' demand multipliers
        cost_modifier: Product of active events' cost multipliers
        reputation: Airline reputation, scales demand

    Returns:
        Passengers, revenue, cost and profit for the day; all zero when the
        route is closed or has no aircraft
    """
    if not route.is_operating or route.daily_flights <= 0:
        return RouteDailyResult.empty(route)

    aircraft_type = route.assigned_aircraft.aircraft_type
    base_demand = calculate_base_demand(route.origin, route.destination)
    demand = max(0, int(base_demand * reputation_modifier(reputation) * demand_modifier))

    capacity = aircraft_type.capacity * route.daily_flights
    # A flight never sells every seat; excess demand is lost
    sellable_seats = int(capacity * MAX_LOAD_FACTOR)
    passengers = min(demand, sellable_seats)

    revenue = to_money(route.ticket_price * passengers)
    costs = to_money(calculate_base_cost(route) * Decimal(str(cost_modifier)))
    profit = revenue - costs

    logger.debug(
        f"{route.name}: demand={demand} boarded={passengers}/{capacity} "
        f"revenue={revenue} costs={costs}"
    )

    return RouteDailyResult(
        route_id=route.id,
        route_name=route.name,
        flights=route.daily_flights,
        demand=demand,
        passengers=passengers,
        revenue=revenue,
        costs=costs,
        profit=profit,
        load_factor=passengers / capacity,
    )
