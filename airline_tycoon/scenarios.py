"""Built-in scenarios."""

from decimal import Decimal
from typing import Dict, List, Optional

from .models.scenario import Objective, ObjectiveKind, Scenario

BUILTIN_SCENARIOS: List[Scenario] = [
    Scenario(
        id="regional-startup",
        name="Regional Startup",
        description="Grow a small New England carrier into a regional player.",
        airline_name="Liberty Air",
        home_hub="BOS",
        starting_cash=Decimal("3000000"),
        objectives=[
            Objective(kind=ObjectiveKind.PASSENGERS, threshold=Decimal("50000")),
            Objective(kind=ObjectiveKind.ROUTES, threshold=Decimal("4")),
        ],
    ),
    Scenario(
        id="coast-to-coast",
        name="Coast to Coast",
        description="Build a profitable transcontinental network out of Los Angeles.",
        airline_name="Pacific Crest Airways",
        home_hub="LAX",
        starting_cash=Decimal("8000000"),
        objectives=[
            Objective(kind=ObjectiveKind.PROFIT, threshold=Decimal("2000000")),
            Objective(kind=ObjectiveKind.ROUTES, threshold=Decimal("6")),
        ],
    ),
    Scenario(
        id="comeback",
        name="The Comeback",
        description="Restore the reputation of a struggling Chicago airline.",
        airline_name="Lakeshore Airlines",
        home_hub="ORD",
        starting_cash=Decimal("2000000"),
        starting_reputation=25,
        objectives=[
            Objective(kind=ObjectiveKind.REPUTATION, threshold=Decimal("60")),
            Objective(kind=ObjectiveKind.PROFIT, threshold=Decimal("500000")),
        ],
    ),
]

_BY_ID: Dict[str, Scenario] = {scenario.id: scenario for scenario in BUILTIN_SCENARIOS}


def get_scenario(scenario_id: str) -> Optional[Scenario]:
    return _BY_ID.get(scenario_id)
