"""Data loader module for parsing reference CSV files."""

import logging
from decimal import Decimal
from typing import Dict, Optional, Tuple
import pandas as pd

from .config import (
    BASE_FARE,
    Config,
    DEFAULT_ROUTE_DISTANCE_NM,
    FARE_PER_NAUTICAL_MILE,
)
from .errors import ReferenceNotFoundError
from .models.aircraft import AircraftCategory, AircraftType
from .models.airport import Airport, MarketSize
from .utils import to_money

logger = logging.getLogger(__name__)

DistanceTable = Dict[Tuple[str, str], int]


def _require_columns(df: pd.DataFrame, columns, source: str) -> None:
    for col in columns:
        if col not in df.columns:
            raise ValueError(f"Missing required column in {source}: {col}")


def _parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def load_airports(csv_path: str) -> Dict[str, Airport]:
    """
    Parse the airports CSV and produce Airport instances.

    Args:
        csv_path: Path to airports CSV file

    Returns:
        Dictionary mapping airport code to Airport instance
    """
    airports = {}

    try:
        df = pd.read_csv(csv_path)
        logger.info(f"Loaded airports CSV with {len(df)} rows")
        _require_columns(df, ["code", "name", "market_size", "landing_fee"], csv_path)

        for _, row in df.iterrows():
            code = str(row["code"]).strip().upper()
            airports[code] = Airport(
                code=code,
                name=str(row["name"]),
                city=str(row.get("city", "")),
                market_size=MarketSize(str(row["market_size"]).strip().lower()),
                landing_fee=Decimal(str(row["landing_fee"])),
                is_hub=_parse_bool(row.get("is_hub", False)),
            )

        logger.info(f"Parsed {len(airports)} airports")
        return airports

    except FileNotFoundError:
        logger.warning(f"Airports CSV not found: {csv_path}, using empty dict")
        return {}
    except Exception as e:
        logger.error(f"Error loading airports: {e}")
        raise


def load_aircraft_types(csv_path: str) -> Dict[str, AircraftType]:
    """
    Parse the aircraft types CSV.

    Args:
        csv_path: Path to aircraft types CSV file

    Returns:
        Dictionary mapping type code to AircraftType instance
    """
    aircraft_types = {}

    try:
        df = pd.read_csv(csv_path)
        logger.info(f"Loaded aircraft types CSV with {len(df)} rows")
        _require_columns(df, ["code", "name", "capacity", "purchase_price"], csv_path)

        for _, row in df.iterrows():
            code = str(row["code"]).strip().upper()
            aircraft_types[code] = AircraftType(
                code=code,
                name=str(row["name"]),
                category=AircraftCategory(str(row.get("category", "narrow_body")).strip().lower()),
                capacity=int(row["capacity"]),
                range_nm=int(row.get("range_nm", 0)),
                purchase_price=Decimal(str(row["purchase_price"])),
                operating_cost_per_hour=Decimal(str(row.get("operating_cost_per_hour", 0))),
                fuel_consumption_per_hour=int(row.get("fuel_consumption_per_hour", 0)),
            )

        logger.info(f"Parsed {len(aircraft_types)} aircraft types")
        return aircraft_types

    except FileNotFoundError:
        logger.warning(f"Aircraft types CSV not found: {csv_path}, using empty dict")
        return {}
    except Exception as e:
        logger.error(f"Error loading aircraft types: {e}")
        raise


def load_route_distances(csv_path: str) -> DistanceTable:
    """
    Parse the route distance table.

    Each row is stored under both (origin, destination) and the reverse pair.

    Args:
        csv_path: Path to distances CSV file

    Returns:
        Dictionary mapping airport code pairs to nautical miles
    """
    distances: DistanceTable = {}

    try:
        df = pd.read_csv(csv_path)
        _require_columns(df, ["origin", "destination", "distance_nm"], csv_path)

        for _, row in df.iterrows():
            origin = str(row["origin"]).strip().upper()
            destination = str(row["destination"]).strip().upper()
            distance = int(row["distance_nm"])
            distances[(origin, destination)] = distance
            distances[(destination, origin)] = distance

        logger.info(f"Parsed {len(df)} route distances")
        return distances

    except FileNotFoundError:
        logger.warning(f"Route distances CSV not found: {csv_path}, using empty dict")
        return {}
    except Exception as e:
        logger.error(f"Error loading route distances: {e}")
        raise


class ReferenceData:
    """Airport, aircraft type, and distance lookups."""

    def __init__(
        self,
        airports: Dict[str, Airport],
        aircraft_types: Dict[str, AircraftType],
        distances: Optional[DistanceTable] = None,
    ):
        self.airports = airports
        self.aircraft_types = aircraft_types
        self.distances = distances or {}

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "ReferenceData":
        """Load the CSV files named in the configuration."""
        config = config or Config()
        return cls(
            airports=load_airports(config.AIRPORTS_CSV),
            aircraft_types=load_aircraft_types(config.AIRCRAFT_TYPES_CSV),
            distances=load_route_distances(config.ROUTE_DISTANCES_CSV),
        )

    def find_airport(self, code: str) -> Optional[Airport]:
        return self.airports.get(code.strip().upper())

    def find_aircraft_type(self, code: str) -> Optional[AircraftType]:
        return self.aircraft_types.get(code.strip().upper())

    def require_airport(self, code: str) -> Airport:
        airport = self.find_airport(code)
        if airport is None:
            raise ReferenceNotFoundError(f"Unknown airport code: {code}", {"code": code})
        return airport

    def require_aircraft_type(self, code: str) -> AircraftType:
        aircraft_type = self.find_aircraft_type(code)
        if aircraft_type is None:
            raise ReferenceNotFoundError(f"Unknown aircraft type: {code}", {"code": code})
        return aircraft_type

    def distance_between(self, origin: str, destination: str) -> int:
        """
        Distance in nautical miles between two airports.

        Args:
            origin: Origin airport code
            destination: Destination airport code

        Returns:
            Table distance, or 1000 nm for pairs missing from the table
        """
        key = (origin.strip().upper(), destination.strip().upper())
        return self.distances.get(key, DEFAULT_ROUTE_DISTANCE_NM)

    @staticmethod
    def suggested_ticket_price(distance_nm: int) -> Decimal:
        """Base fare plus a per-mile component."""
        return to_money(BASE_FARE + FARE_PER_NAUTICAL_MILE * distance_nm)
