"""Airline aggregate: cash, reputation, fleet, route network, and active events."""

import logging
import uuid
from decimal import Decimal
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator

from .aircraft import Aircraft, AircraftType
from .airport import Airport
from .event import ActiveEventLedger
from .route import Route
from ..config import (
    DAILY_FIXED_COSTS,
    DAYS_PER_MONTH,
    DEFAULT_REPUTATION,
    LEASE_TERMINATION_MONTHS,
    MAX_REPUTATION,
    MIN_REPUTATION,
    RESALE_RATE,
)
from ..errors import AssignmentError, InsufficientFundsError, ReferenceNotFoundError
from ..utils import format_cost, to_money

logger = logging.getLogger(__name__)


class Airline(BaseModel):
    """
    The player's airline.

    Cash may go negative; bankruptcy is derived from it rather than stored.
    Reputation is clamped to [0, 100] whenever it is assigned.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    home_hub: Airport
    cash: Decimal
    reputation: int = DEFAULT_REPUTATION
    current_day: int = 0
    fleet: List[Aircraft] = Field(default_factory=list)
    routes: List[Route] = Field(default_factory=list)
    event_ledger: ActiveEventLedger = Field(default_factory=ActiveEventLedger)
    total_passengers_carried: int = 0
    total_revenue: Decimal = Decimal("0")
    total_costs: Decimal = Decimal("0")
    next_registration: int = 10001

    model_config = {"validate_assignment": True}

    @field_validator("reputation")
    @classmethod
    def _clamp_reputation(cls, value: int) -> int:
        return max(MIN_REPUTATION, min(MAX_REPUTATION, value))

    def model_post_init(self, __context: Any) -> None:
        # Routes and fleet are serialized separately; point each route back at
        # the fleet instance so assignments stay shared after a load.
        by_id = {aircraft.id: aircraft for aircraft in self.fleet}
        for route in self.routes:
            if route.assigned_aircraft is None:
                continue
            aircraft = by_id.get(route.assigned_aircraft.id)
            if aircraft is None:
                route.assigned_aircraft = None
                continue
            route.assigned_aircraft = aircraft
            aircraft.assigned_route_id = route.id

    @property
    def net_profit(self) -> Decimal:
        return self.total_revenue - self.total_costs

    @property
    def active_routes(self) -> List[Route]:
        return [route for route in self.routes if route.is_active]

    @property
    def daily_lease_costs(self) -> Decimal:
        total = sum(
            (aircraft.monthly_lease_payment for aircraft in self.fleet if aircraft.is_leased),
            Decimal("0"),
        )
        return to_money(total / DAYS_PER_MONTH)

    @property
    def daily_operating_cost(self) -> Decimal:
        """Standing cost of running the airline for a day, before any flying."""
        return self.daily_lease_costs + DAILY_FIXED_COSTS

    @property
    def is_bankrupt(self) -> bool:
        return self.cash < 0 and self.daily_operating_cost > 0

    def advance_day(self) -> int:
        self.current_day += 1
        return self.current_day

    def adjust_cash(self, amount: Decimal) -> None:
        self.cash = to_money(self.cash + amount)

    def adjust_reputation(self, delta: int) -> None:
        self.reputation = self.reputation + delta

    def find_route(self, route_id: str) -> Optional[Route]:
        return next((route for route in self.routes if route.id == route_id), None)

    def find_aircraft(self, aircraft_id: str) -> Optional[Aircraft]:
        """Look up a fleet member by id or registration."""
        return next(
            (a for a in self.fleet if a.id == aircraft_id or a.registration == aircraft_id),
            None,
        )

    def require_route(self, route_id: str) -> Route:
        route = self.find_route(route_id)
        if route is None:
            raise ReferenceNotFoundError(f"Route {route_id} not found", {"route_id": route_id})
        return route

    def require_aircraft(self, aircraft_id: str) -> Aircraft:
        aircraft = self.find_aircraft(aircraft_id)
        if aircraft is None:
            raise ReferenceNotFoundError(f"Aircraft {aircraft_id} not in fleet", {"aircraft_id": aircraft_id})
        return aircraft

    def _next_registration(self) -> str:
        registration = f"N{self.next_registration}"
        self.next_registration += 1
        return registration

    def open_route(
        self,
        origin: Airport,
        destination: Airport,
        distance_nm: int,
        ticket_price: Decimal,
        daily_flights: int = 1,
    ) -> Route:
        """
        Open a new route and add it to the network.

        Args:
            origin: Departure airport
            destination: Arrival airport
            distance_nm: Great-circle distance in nautical miles
            ticket_price: One-way fare
            daily_flights: Flights per day once an aircraft is assigned

        Returns:
            The new, unassigned route

        Raises:
            AssignmentError: If both ends are the same airport or the pair is already served
        """
        if origin.code == destination.code:
            raise AssignmentError(f"Cannot open a route from {origin.code} to itself")
        for route in self.active_routes:
            if route.origin.code == origin.code and route.destination.code == destination.code:
                raise AssignmentError(f"Route {route.name} is already open", {"route_id": route.id})

        route = Route(
            origin=origin,
            destination=destination,
            distance_nm=distance_nm,
            ticket_price=to_money(ticket_price),
            daily_flights=daily_flights,
            opened_on_day=self.current_day,
        )
        self.routes.append(route)
        logger.info(f"{self.name} opened route {route.name} at {format_cost(route.ticket_price)}")
        return route

    def close_route(self, route: Route) -> None:
        """Deactivate a route and release its aircraft; the route stays in history."""
        route.unassign()
        route.is_active = False
        logger.info(f"{self.name} closed route {route.name}")

    def assign_aircraft(self, route: Route, aircraft: Aircraft) -> None:
        if not any(member is aircraft for member in self.fleet):
            raise AssignmentError(f"{aircraft.display_name} is not part of the fleet")
        if not route.is_active:
            raise AssignmentError(f"Route {route.name} is closed", {"route_id": route.id})
        route.assign(aircraft)

    def unassign_aircraft(self, route: Route) -> Optional[Aircraft]:
        return route.unassign()

    def lease_aircraft(self, aircraft_type: AircraftType) -> Aircraft:
        aircraft = Aircraft.create_leased(aircraft_type, self._next_registration(), self.current_day)
        self.fleet.append(aircraft)
        logger.info(
            f"{self.name} leased {aircraft.display_name} "
            f"for {format_cost(aircraft.monthly_lease_payment)}/month"
        )
        return aircraft

    def purchase_aircraft(self, aircraft_type: AircraftType) -> Aircraft:
        """
        Buy an aircraft outright.

        Raises:
            InsufficientFundsError: If cash does not cover the purchase price
        """
        if self.cash < aircraft_type.purchase_price:
            raise InsufficientFundsError(
                f"Insufficient funds to purchase {aircraft_type.name}. "
                f"Need {format_cost(aircraft_type.purchase_price)}, have {format_cost(self.cash)}",
                {"required": str(aircraft_type.purchase_price), "available": str(self.cash)},
            )
        self.adjust_cash(-aircraft_type.purchase_price)
        aircraft = Aircraft.create_owned(aircraft_type, self._next_registration(), self.current_day)
        self.fleet.append(aircraft)
        logger.info(f"{self.name} purchased {aircraft.display_name}")
        return aircraft

    def sell_aircraft(self, aircraft: Aircraft) -> Decimal:
        """
        Sell an owned, unassigned aircraft for 70% of its purchase price.

        Returns:
            Sale proceeds
        """
        if aircraft.is_leased:
            raise AssignmentError(
                f"Cannot sell leased aircraft {aircraft.registration}; return it instead"
            )
        if aircraft.assigned_route_id is not None:
            raise AssignmentError(
                f"Cannot sell {aircraft.registration} while it is assigned to a route; unassign first"
            )
        proceeds = to_money(aircraft.aircraft_type.purchase_price * RESALE_RATE)
        self.adjust_cash(proceeds)
        self.fleet.remove(aircraft)
        logger.info(f"{self.name} sold {aircraft.display_name} for {format_cost(proceeds)}")
        return proceeds

    def return_leased_aircraft(self, aircraft: Aircraft) -> Decimal:
        """
        Hand a leased aircraft back early, paying two months of lease as a penalty.

        Returns:
            Penalty paid
        """
        if not aircraft.is_leased:
            raise AssignmentError(
                f"Cannot return owned aircraft {aircraft.registration}; sell it instead"
            )
        if aircraft.assigned_route_id is not None:
            raise AssignmentError(
                f"Cannot return {aircraft.registration} while it is assigned to a route; unassign first"
            )
        penalty = to_money(aircraft.monthly_lease_payment * LEASE_TERMINATION_MONTHS)
        if self.cash < penalty:
            raise InsufficientFundsError(
                f"Insufficient funds to pay early termination penalty. "
                f"Need {format_cost(penalty)}, have {format_cost(self.cash)}",
                {"required": str(penalty), "available": str(self.cash)},
            )
        self.adjust_cash(-penalty)
        self.fleet.remove(aircraft)
        logger.info(f"{self.name} returned {aircraft.display_name}, penalty {format_cost(penalty)}")
        return penalty
