"""Random event generation from the fixed probability and template tables."""

import logging
import random
from decimal import Decimal
from typing import List, Optional, Tuple

from .config import (
    BASE_EVENT_PROBABILITY,
    EVENT_CATEGORY_WEIGHTS,
    EVENT_SEVERITY_WEIGHTS,
    SEVERITY_MULTIPLIERS,
    WEALTH_IMPACT_RATE,
)
from .event_catalog import WEALTH_SCALED_CATEGORIES, EventTemplate, templates_for
from .models.airline import Airline
from .models.event import EventCategory, EventSeverity, GameEvent
from .utils import to_money

logger = logging.getLogger(__name__)


def _select(roll: float, table: List[Tuple[str, float]]) -> str:
    for name, upper_bound in table:
        if roll < upper_bound:
            return name
    return table[-1][0]


def select_category(roll: float) -> EventCategory:
    """
    Map a uniform roll in [0, 1) onto the cumulative category table.

    Examples:
        >>> select_category(0.29)
        <EventCategory.WEATHER: 'weather'>
        >>> select_category(0.30)
        <EventCategory.ECONOMIC: 'economic'>
    """
    return EventCategory(_select(roll, EVENT_CATEGORY_WEIGHTS))


def select_severity(roll: float) -> EventSeverity:
    """Map a uniform roll in [0, 1) onto the cumulative severity table."""
    return EventSeverity(_select(roll, EVENT_SEVERITY_WEIGHTS))


def wealth_scaled_impact(cash: Decimal, severity: EventSeverity) -> Decimal:
    """One-time impact for weather and market events: -2% of cash per severity step."""
    return to_money(-cash * WEALTH_IMPACT_RATE * SEVERITY_MULTIPLIERS[severity.value])


class EventGenerator:
    """
    Rolls for at most one event per day.

    Three independent draws decide whether an event happens, its category and
    its severity; a fourth picks a template for that pair. All randomness
    comes from the injected ``random.Random`` so a seed reproduces a run.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        probability: float = BASE_EVENT_PROBABILITY,
    ):
        """
        Initialize the generator.

        Args:
            rng: Random source to draw from; takes precedence over ``seed``
            seed: Seed for a new private random source
            probability: Chance of an event on any given day
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.probability = probability

    def try_generate_event(self, day: int, airline: Airline) -> Optional[GameEvent]:
        """
        Roll for today's event.

        Args:
            day: Day the event would occur on
            airline: Airline snapshot; only its cash is read

        Returns:
            A new event, or None on a quiet day
        """
        if self.rng.random() >= self.probability:
            return None

        category = select_category(self.rng.random())
        severity = select_severity(self.rng.random())
        templates = templates_for(category, severity)
        template = templates[self.rng.randrange(len(templates))]

        event = self._build_event(template, category, severity, day, airline.cash)
        logger.debug(
            f"Day {day}: generated {severity.value} {category.value} event '{event.title}'"
        )
        return event

    @staticmethod
    def _build_event(
        template: EventTemplate,
        category: EventCategory,
        severity: EventSeverity,
        day: int,
        cash: Decimal,
    ) -> GameEvent:
        if category in WEALTH_SCALED_CATEGORIES:
            financial_impact = wealth_scaled_impact(cash, severity)
        else:
            financial_impact = to_money(template.financial_impact)

        # At most one event originates per day, so the day keys it
        return GameEvent(
            id=f"evt-{day}-{category.value}-{severity.value}",
            category=category,
            severity=severity,
            title=template.title,
            description=template.description,
            day_occurred=day,
            duration_days=template.duration_days,
            demand_multiplier=template.demand_multiplier,
            cost_multiplier=template.cost_multiplier,
            financial_impact=financial_impact,
            reputation_delta=template.reputation_delta,
        )
