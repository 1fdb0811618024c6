"""Game session controller: lifecycle, win/loss latches, and player commands."""

import logging
from decimal import Decimal
from enum import Enum
from typing import Optional

from .config import Config
from .data_loader import ReferenceData
from .errors import InvalidStateError
from .event_generator import EventGenerator
from .models.aircraft import Aircraft
from .models.airline import Airline
from .models.route import Route
from .models.scenario import Scenario
from .models.summary import DailyOperationsSummary
from .objectives import check_objectives
from .turn_processor import TurnProcessor

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    WON = "won"
    LOST = "lost"


class GameSession:
    """
    One game of airline management.

    Winning and losing are one-way latches: once set they stay set for the
    rest of the session. Winning does not stop play; losing does.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        reference_data: Optional[ReferenceData] = None,
        event_generator: Optional[EventGenerator] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize a session with no airline.

        Args:
            config: Settings; loaded from the environment if omitted
            reference_data: Airport and aircraft catalog; loaded from the configured CSVs if omitted
            event_generator: Event source; built from ``seed`` or the configured seed if omitted
            seed: Seed for the event generator's random source
        """
        self.config = config or Config()
        self.reference_data = reference_data or ReferenceData.from_config(self.config)
        if event_generator is None:
            event_generator = EventGenerator(
                seed=seed if seed is not None else self.config.RANDOM_SEED,
                probability=self.config.EVENT_PROBABILITY,
            )
        self.turn_processor = TurnProcessor(event_generator)

        self._airline: Optional[Airline] = None
        self._scenario: Optional[Scenario] = None
        self._running = False
        self._paused = False
        self._has_won = False
        self._has_lost = False
        self._last_summary: Optional[DailyOperationsSummary] = None

    @property
    def event_generator(self) -> EventGenerator:
        return self.turn_processor.event_generator

    @property
    def player_airline(self) -> Optional[Airline]:
        return self._airline

    @property
    def current_scenario(self) -> Optional[Scenario]:
        return self._scenario

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def has_won(self) -> bool:
        return self._has_won

    @property
    def has_lost(self) -> bool:
        return self._has_lost

    @property
    def last_summary(self) -> Optional[DailyOperationsSummary]:
        return self._last_summary

    @property
    def state(self) -> SessionState:
        if self._has_lost:
            return SessionState.LOST
        if self._has_won:
            return SessionState.WON
        if self._paused:
            return SessionState.PAUSED
        if self._running:
            return SessionState.RUNNING
        return SessionState.NOT_STARTED

    # Lifecycle

    def start_new_game(self, name: Optional[str] = None, home_hub: Optional[str] = None) -> Airline:
        """
        Start free play with the default starting position.

        Args:
            name: Airline name
            home_hub: Home airport code

        Returns:
            The new airline

        Raises:
            ReferenceNotFoundError: If the hub or starter aircraft type is unknown
        """
        airline = self._create_airline(
            name or self.config.DEFAULT_AIRLINE_NAME,
            home_hub or self.config.DEFAULT_HOME_HUB,
            self.config.STARTING_CASH,
            self.config.STARTING_REPUTATION,
        )
        self._begin(airline, None)
        logger.info(f"New game started: {airline.name} at {airline.home_hub.code}")
        return airline

    def start_scenario(self, scenario: Scenario) -> Airline:
        airline = self._create_airline(
            scenario.airline_name,
            scenario.home_hub,
            scenario.starting_cash,
            scenario.starting_reputation,
        )
        self._begin(airline, scenario)
        logger.info(f"Scenario '{scenario.name}' started with {len(scenario.objectives)} objectives")
        return airline

    def start_with_airline(self, airline: Airline, scenario: Optional[Scenario] = None) -> None:
        """Start a session around an airline the caller has already set up."""
        self._begin(airline, scenario)

    def load_from_save(self, airline: Airline, scenario: Optional[Scenario], has_won: bool) -> None:
        """
        Resume a saved game.

        The win latch comes from the save. Bankruptcy is not stored; it is
        derived from the loaded cash, so a bankrupt save loads as lost.
        """
        self._begin(airline, scenario)
        self._has_won = has_won
        self._check_loss()
        logger.info(f"Loaded {airline.name} on day {airline.current_day}")

    def pause(self) -> None:
        self._require_running()
        self._paused = True
        logger.info("Game paused")

    def resume(self) -> None:
        if not self._running or not self._paused:
            raise InvalidStateError("Only a paused game can be resumed", {"state": self.state.value})
        self._paused = False
        logger.info("Game resumed")

    def stop(self) -> None:
        self._running = False
        self._paused = False
        logger.info("Game stopped")

    def process_day(self) -> DailyOperationsSummary:
        """
        Advance the game by one day, then check for a win or a loss.

        Returns:
            Summary of the day

        Raises:
            InvalidStateError: If the game is not running, is paused, or has no airline
        """
        self._require_running()
        if self._paused:
            raise InvalidStateError("Cannot process a day while paused", {"state": self.state.value})

        summary = self.turn_processor.process_day(self._airline)
        self._last_summary = summary
        self._check_win()
        self._check_loss()
        return summary

    # Player commands

    def open_route(
        self,
        origin: str,
        destination: str,
        ticket_price: Optional[Decimal] = None,
        aircraft_id: Optional[str] = None,
    ) -> Route:
        """
        Open a route between two airport codes.

        Args:
            origin: Origin airport code
            destination: Destination airport code
            ticket_price: Fare; suggested from distance when omitted
            aircraft_id: Fleet member to assign straight away

        Returns:
            The new route
        """
        airline = self._require_airline()
        origin_airport = self.reference_data.require_airport(origin)
        destination_airport = self.reference_data.require_airport(destination)
        distance = self.reference_data.distance_between(origin_airport.code, destination_airport.code)
        if ticket_price is None:
            ticket_price = self.reference_data.suggested_ticket_price(distance)
        route = airline.open_route(origin_airport, destination_airport, distance, ticket_price)
        if aircraft_id is not None:
            airline.assign_aircraft(route, airline.require_aircraft(aircraft_id))
        return route

    def close_route(self, route_id: str) -> None:
        airline = self._require_airline()
        airline.close_route(airline.require_route(route_id))

    def lease_aircraft(self, type_code: str) -> Aircraft:
        airline = self._require_airline()
        return airline.lease_aircraft(self.reference_data.require_aircraft_type(type_code))

    def purchase_aircraft(self, type_code: str) -> Aircraft:
        airline = self._require_airline()
        return airline.purchase_aircraft(self.reference_data.require_aircraft_type(type_code))

    def assign_aircraft(self, route_id: str, aircraft_id: str) -> None:
        airline = self._require_airline()
        airline.assign_aircraft(airline.require_route(route_id), airline.require_aircraft(aircraft_id))

    def unassign_aircraft(self, route_id: str) -> Optional[Aircraft]:
        airline = self._require_airline()
        return airline.unassign_aircraft(airline.require_route(route_id))

    def sell_aircraft(self, aircraft_id: str) -> Decimal:
        airline = self._require_airline()
        return airline.sell_aircraft(airline.require_aircraft(aircraft_id))

    def return_leased_aircraft(self, aircraft_id: str) -> Decimal:
        airline = self._require_airline()
        return airline.return_leased_aircraft(airline.require_aircraft(aircraft_id))

    def perform_maintenance(self, aircraft_id: str, level: float = 1.0) -> Decimal:
        """Service an aircraft and pay for it."""
        airline = self._require_airline()
        aircraft = airline.require_aircraft(aircraft_id)
        cost = aircraft.perform_maintenance(level)
        airline.adjust_cash(-cost)
        return cost

    # Internals

    def _create_airline(self, name: str, hub_code: str, cash: Decimal, reputation: int) -> Airline:
        hub = self.reference_data.require_airport(hub_code)
        starter_type = self.reference_data.require_aircraft_type(self.config.STARTER_AIRCRAFT_TYPE)
        airline = Airline(name=name, home_hub=hub, cash=cash, reputation=reputation)

        fleet = [airline.lease_aircraft(starter_type) for _ in range(self.config.STARTER_AIRCRAFT_COUNT)]

        destinations = [
            code for code in self.config.STARTER_DESTINATIONS
            if code.upper() != hub.code and self.reference_data.find_airport(code) is not None
        ]
        for aircraft, destination_code in zip(fleet, destinations):
            destination = self.reference_data.require_airport(destination_code)
            distance = self.reference_data.distance_between(hub.code, destination.code)
            route = airline.open_route(
                hub, destination, distance, self.reference_data.suggested_ticket_price(distance)
            )
            airline.assign_aircraft(route, aircraft)

        return airline

    def _begin(self, airline: Airline, scenario: Optional[Scenario]) -> None:
        self._airline = airline
        self._scenario = scenario
        self._running = True
        self._paused = False
        self._has_won = False
        self._has_lost = False
        self._last_summary = None

    def _require_airline(self) -> Airline:
        if self._airline is None:
            raise InvalidStateError("No game in progress")
        return self._airline

    def _require_running(self) -> None:
        if not self._running:
            raise InvalidStateError("Game is not running", {"state": self.state.value})
        self._require_airline()

    def _check_win(self) -> None:
        # A scenario without objectives has nothing to win
        if self._has_won or self._scenario is None or not self._scenario.objectives:
            return
        if check_objectives(self._airline, self._scenario.objectives):
            self._has_won = True
            logger.info(f"Scenario '{self._scenario.name}' won on day {self._airline.current_day}")

    def _check_loss(self) -> None:
        if self._has_lost:
            return
        if self._airline.is_bankrupt:
            self._has_lost = True
            self._running = False
            logger.warning(f"{self._airline.name} is bankrupt on day {self._airline.current_day}")
