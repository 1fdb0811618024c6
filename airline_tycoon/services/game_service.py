"""Service holding the process-wide game session for the HTTP layer."""

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from ..config import Config, GAME_NAME, GAME_VERSION
from ..data_loader import ReferenceData
from ..errors import InvalidStateError, ReferenceNotFoundError
from ..game_session import GameSession
from ..logger import JSONLogger
from ..models.summary import DailyOperationsSummary
from ..objectives import objective_progress
from ..persistence import SaveGameService
from ..scenarios import BUILTIN_SCENARIOS, get_scenario
from ..simulation_runner import SimulationRunner
from ..utils import format_cost

logger = logging.getLogger(__name__)


class GameService:
    """Owns one game session plus its save slots and day log."""

    def __init__(self, config: Optional[Config] = None, day_log_file: Optional[str] = None):
        """
        Initialize game service.

        Args:
            config: Settings; loaded from the environment if omitted
            day_log_file: JSON lines file for day summaries; none when omitted
        """
        self.config = config or Config()
        self.reference_data = ReferenceData.from_config(self.config)
        self.save_service = SaveGameService(config=self.config, reference_data=self.reference_data)
        self.session = self._new_session()
        self.day_log: List[Dict] = []
        self.day_logger = JSONLogger(day_log_file) if day_log_file else None

    def _new_session(self) -> GameSession:
        return GameSession(config=self.config, reference_data=self.reference_data)

    def new_game(self, name: Optional[str] = None, home_hub: Optional[str] = None) -> Dict:
        self.session = self._new_session()
        self.day_log = []
        self.session.start_new_game(name, home_hub)
        return self.get_status()

    def start_scenario(self, scenario_id: str) -> Dict:
        scenario = get_scenario(scenario_id)
        if scenario is None:
            raise ReferenceNotFoundError(f"Unknown scenario: {scenario_id}", {"scenario_id": scenario_id})
        self.session = self._new_session()
        self.day_log = []
        self.session.start_scenario(scenario)
        return self.get_status()

    def process_day(self) -> DailyOperationsSummary:
        summary = self.session.process_day()
        self._record(summary.to_log_entry())
        return summary

    def advance(self, days: int) -> Dict:
        """Run several days through the simulation runner."""
        if not self.session.is_running or self.session.is_paused:
            raise InvalidStateError("Game is not running", {"state": self.session.state.value})
        runner = SimulationRunner(self.session)
        report = runner.run(days)
        for entry in runner.day_log:
            self._record(entry)
        return report

    def _record(self, entry: Dict) -> None:
        self.day_log.append(entry)
        if self.day_logger is not None:
            self.day_logger.log_day(entry)

    def pause(self) -> Dict:
        self.session.pause()
        return self.get_status()

    def resume(self) -> Dict:
        self.session.resume()
        return self.get_status()

    def _require_airline(self):
        airline = self.session.player_airline
        if airline is None:
            raise InvalidStateError("No game in progress")
        return airline

    def get_status(self) -> Dict:
        """
        Current session status.

        Returns:
            Status dictionary with formatted cash and objective progress
        """
        airline = self.session.player_airline
        scenario = self.session.current_scenario
        status = {
            "game": GAME_NAME,
            "version": GAME_VERSION,
            "state": self.session.state.value,
            "is_running": self.session.is_running,
            "has_won": self.session.has_won,
            "has_lost": self.session.has_lost,
            "airline": None,
            "scenario": scenario.name if scenario else None,
            "objectives": [],
        }
        if airline is not None:
            status["airline"] = {
                "name": airline.name,
                "home_hub": airline.home_hub.code,
                "day": airline.current_day,
                "cash": str(airline.cash),
                "cash_formatted": format_cost(airline.cash),
                "reputation": airline.reputation,
                "fleet_size": len(airline.fleet),
                "active_routes": len(airline.active_routes),
                "total_passengers_carried": airline.total_passengers_carried,
                "net_profit": str(airline.net_profit),
                "daily_operating_cost": str(airline.daily_operating_cost),
            }
            if scenario is not None:
                status["objectives"] = objective_progress(airline, scenario.objectives)
        return status

    def get_events(self) -> Dict:
        airline = self._require_airline()
        return {
            "demand_modifier": airline.event_ledger.demand_modifier(),
            "cost_modifier": airline.event_ledger.cost_modifier(),
            "events": [
                {
                    **entry.event.model_dump(mode="json"),
                    "remaining_days": entry.remaining_days,
                    "effects": entry.event.effects_summary(),
                }
                for entry in airline.event_ledger.entries
            ],
        }

    def get_routes(self) -> Dict:
        airline = self._require_airline()
        return {
            "routes": [
                {
                    "id": route.id,
                    "name": route.name,
                    "distance_nm": route.distance_nm,
                    "ticket_price": str(route.ticket_price),
                    "daily_flights": route.daily_flights,
                    "is_active": route.is_active,
                    "aircraft": route.assigned_aircraft.display_name if route.assigned_aircraft else None,
                    "load_factor": route.load_factor,
                    "daily_profit": str(route.daily_profit),
                    "total_passengers": route.total_passengers,
                }
                for route in airline.routes
            ],
            "fleet": [
                {
                    "id": aircraft.id,
                    "registration": aircraft.registration,
                    "type": aircraft.aircraft_type.code,
                    "is_leased": aircraft.is_leased,
                    "assigned_route_id": aircraft.assigned_route_id,
                    "condition": aircraft.condition,
                    "is_available": aircraft.is_available,
                }
                for aircraft in airline.fleet
            ],
        }

    def open_route(self, origin: str, destination: str, ticket_price: Optional[Decimal], aircraft_id: Optional[str]) -> Dict:
        route = self.session.open_route(origin, destination, ticket_price, aircraft_id)
        return {"id": route.id, "name": route.name, "ticket_price": str(route.ticket_price)}

    def close_route(self, route_id: str) -> None:
        self.session.close_route(route_id)

    def acquire_aircraft(self, type_code: str, lease: bool) -> Dict:
        if lease:
            aircraft = self.session.lease_aircraft(type_code)
        else:
            aircraft = self.session.purchase_aircraft(type_code)
        return {"id": aircraft.id, "registration": aircraft.registration, "is_leased": aircraft.is_leased}

    def list_scenarios(self) -> List[Dict]:
        return [
            {
                "id": scenario.id,
                "name": scenario.name,
                "description": scenario.description,
                "home_hub": scenario.home_hub,
                "starting_cash": str(scenario.starting_cash),
                "objectives": [objective.description for objective in scenario.objectives],
            }
            for scenario in BUILTIN_SCENARIOS
        ]

    def save(self, save_name: str) -> str:
        return str(self.save_service.save_game(self.session, save_name))

    def list_saves(self) -> List[Dict]:
        return [info.model_dump(mode="json") for info in self.save_service.list_saves()]

    def load(self, save_name: str) -> Dict:
        self.session = self.save_service.load_game(save_name)
        self.day_log = []
        return self.get_status()

    def get_day_log(self, limit: Optional[int] = None) -> List[Dict]:
        if limit:
            return self.day_log[-limit:]
        return list(self.day_log)
