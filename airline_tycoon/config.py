"""Configuration module for constants, probability tables, and settings."""

from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from pydantic_settings import BaseSettings


# Game constants
GAME_NAME = "Airline Tycoon"
GAME_VERSION = "1.0.0"
MIN_REPUTATION = 0
MAX_REPUTATION = 100
DEFAULT_REPUTATION = 50


# Event occurrence - roughly one event every 8 days
BASE_EVENT_PROBABILITY = 0.12

# Cumulative upper bounds, checked in order. Category weights: 30/20/20/15/7/8
EVENT_CATEGORY_WEIGHTS: List[Tuple[str, float]] = [
    ("weather", 0.30),
    ("economic", 0.50),
    ("market", 0.70),
    ("operational", 0.85),
    ("positive_pr", 0.92),
    ("negative_pr", 1.00),
]

# Severity weights: 50/30/15/5, rarer events hit harder
EVENT_SEVERITY_WEIGHTS: List[Tuple[str, float]] = [
    ("minor", 0.50),
    ("moderate", 0.80),
    ("major", 0.95),
    ("critical", 1.00),
]

SEVERITY_MULTIPLIERS: Dict[str, int] = {
    "minor": 1,
    "moderate": 2,
    "major": 4,
    "critical": 8,
}

# Share of current cash lost per severity multiplier for weather/market events
WEALTH_IMPACT_RATE = Decimal("0.02")


# Route economics
# Daily potential passengers contributed by each market size
MARKET_SIZE_DEMAND: Dict[str, int] = {
    "small": 100,
    "medium": 300,
    "large": 600,
    "very_large": 1000,
}

CRUISE_SPEED_KNOTS = 450.0
MAX_LOAD_FACTOR = 0.95  # a flight never sells every seat
FUEL_PRICE_PER_GALLON = Decimal("3.00")
CREW_COST_PER_HOUR = Decimal("500")
MAINTENANCE_COST_FACTOR = Decimal("0.15")
DAILY_FIXED_COSTS = Decimal("10000")  # office, staff, overhead


# Fleet economics
LEASE_RATE_MONTHLY = Decimal("0.012")  # of purchase price
DAYS_PER_MONTH = 30
RESALE_RATE = Decimal("0.70")
LEASE_TERMINATION_MONTHS = 2
MAINTENANCE_BASE_RATE = Decimal("0.02")  # of purchase price for a full overhaul
MIN_SERVICEABLE_CONDITION = 0.3


# Ticket pricing for newly opened routes
BASE_FARE = Decimal("75")
FARE_PER_NAUTICAL_MILE = Decimal("0.12")
DEFAULT_ROUTE_DISTANCE_NM = 1000


# Reputation drift targets: (passengers carried above, target reputation)
REPUTATION_TARGETS: List[Tuple[int, int]] = [
    (1000, 70),
    (500, 60),
]
REPUTATION_FLOOR_TARGET = 40
REPUTATION_DRIFT_DIVISOR = 10


# Bundled reference data
DATA_DIR = Path(__file__).resolve().parent / "data"
AIRPORTS_CSV = str(DATA_DIR / "airports.csv")
AIRCRAFT_TYPES_CSV = str(DATA_DIR / "aircraft_types.csv")
ROUTE_DISTANCES_CSV = str(DATA_DIR / "route_distances.csv")


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # New game defaults
    STARTING_CASH: Decimal = Decimal("5000000")
    STARTING_REPUTATION: int = DEFAULT_REPUTATION
    DEFAULT_AIRLINE_NAME: str = "SkyWings Airlines"
    DEFAULT_HOME_HUB: str = "JFK"
    STARTER_AIRCRAFT_TYPE: str = "B738"
    STARTER_AIRCRAFT_COUNT: int = 2
    STARTER_DESTINATIONS: List[str] = ["BOS", "ORD", "ATL", "MIA"]

    # Event generation
    EVENT_PROBABILITY: float = BASE_EVENT_PROBABILITY
    RANDOM_SEED: Optional[int] = None

    # Reference data
    AIRPORTS_CSV: str = AIRPORTS_CSV
    AIRCRAFT_TYPES_CSV: str = AIRCRAFT_TYPES_CSV
    ROUTE_DISTANCES_CSV: str = ROUTE_DISTANCES_CSV

    # Persistence
    SAVES_DIR: str = "saves"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "simulation.log"
    DAY_LOG_FILE: str = "days.jsonl"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
