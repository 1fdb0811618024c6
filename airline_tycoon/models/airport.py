"""Airport model."""

from decimal import Decimal
from enum import Enum
from pydantic import BaseModel


class MarketSize(str, Enum):
    """Size of the market an airport serves; drives passenger demand."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    VERY_LARGE = "very_large"


class Airport(BaseModel):
    """Represents an airport airlines can fly between."""

    code: str
    name: str
    city: str
    market_size: MarketSize
    landing_fee: Decimal  # per flight operation
    is_hub: bool = False

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "code": "JFK",
                "name": "John F. Kennedy International Airport",
                "city": "New York",
                "market_size": "very_large",
                "landing_fee": "2500",
                "is_hub": True,
            }
        },
    }
