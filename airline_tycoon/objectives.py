"""Scenario objective evaluation.

Each objective kind maps to a function that reads the matching metric off an
airline. Evaluation compares that metric against the objective's threshold,
so supporting a new kind means registering one metric function.
"""

from decimal import Decimal
from typing import Callable, Dict, Iterable, List

from .models.airline import Airline
from .models.scenario import Objective, ObjectiveKind

MetricFn = Callable[[Airline], Decimal]

OBJECTIVE_METRICS: Dict[ObjectiveKind, MetricFn] = {}


def register_metric(kind: ObjectiveKind) -> Callable[[MetricFn], MetricFn]:
    def decorator(fn: MetricFn) -> MetricFn:
        OBJECTIVE_METRICS[kind] = fn
        return fn
    return decorator


@register_metric(ObjectiveKind.PASSENGERS)
def _passengers(airline: Airline) -> Decimal:
    return Decimal(airline.total_passengers_carried)


@register_metric(ObjectiveKind.PROFIT)
def _profit(airline: Airline) -> Decimal:
    return airline.net_profit


@register_metric(ObjectiveKind.ROUTES)
def _routes(airline: Airline) -> Decimal:
    return Decimal(len(airline.active_routes))


@register_metric(ObjectiveKind.REPUTATION)
def _reputation(airline: Airline) -> Decimal:
    return Decimal(airline.reputation)


def current_value(objective: Objective, airline: Airline) -> Decimal:
    """
    Read the airline metric an objective is measured against.

    Raises:
        KeyError: If no metric is registered for the objective's kind
    """
    return OBJECTIVE_METRICS[objective.kind](airline)


def evaluate_objective(objective: Objective, airline: Airline) -> bool:
    return current_value(objective, airline) >= objective.threshold


def check_objectives(airline: Airline, objectives: Iterable[Objective]) -> bool:
    """
    Whether every objective is met. An empty list is met trivially.

    Args:
        airline: Airline to inspect; not modified
        objectives: Objectives to check

    Returns:
        True if all objectives are satisfied
    """
    return all(evaluate_objective(objective, airline) for objective in objectives)


def objective_progress(airline: Airline, objectives: Iterable[Objective]) -> List[Dict]:
    """Per-objective progress for display."""
    progress = []
    for objective in objectives:
        value = current_value(objective, airline)
        if objective.threshold > 0:
            fraction = float(min(Decimal("1"), max(Decimal("0"), value / objective.threshold)))
        else:
            fraction = 1.0 if value >= objective.threshold else 0.0
        progress.append(
            {
                "kind": objective.kind.value,
                "description": objective.description,
                "threshold": str(objective.threshold),
                "current": str(value),
                "completed": value >= objective.threshold,
                "progress": fraction,
            }
        )
    return progress
