"""Fixed tables of event templates, keyed by (category, severity)."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, FrozenSet, Tuple

from .models.event import EventCategory, EventSeverity


@dataclass(frozen=True)
class EventTemplate:
    """Numbers and copy for one kind of event; stamped into a GameEvent on use."""

    title: str
    description: str
    demand_multiplier: float
    cost_multiplier: float
    duration_days: int
    reputation_delta: int = 0
    financial_impact: Decimal = Decimal("0")


# Categories whose one-time financial impact scales with the airline's cash
# instead of coming from the template.
WEALTH_SCALED_CATEGORIES: FrozenSet[EventCategory] = frozenset(
    {EventCategory.WEATHER, EventCategory.MARKET}
)

W, E, O, M = EventCategory.WEATHER, EventCategory.ECONOMIC, EventCategory.OPERATIONAL, EventCategory.MARKET
PP, NP = EventCategory.POSITIVE_PR, EventCategory.NEGATIVE_PR
MINOR, MODERATE, MAJOR, CRITICAL = (
    EventSeverity.MINOR,
    EventSeverity.MODERATE,
    EventSeverity.MAJOR,
    EventSeverity.CRITICAL,
)


def _weather(severity: EventSeverity, *rows: Tuple[str, str, float, float, int]) -> Tuple[EventTemplate, ...]:
    # Worse weather costs more reputation: 0 for minor down to -3 for critical
    return tuple(EventTemplate(*row, reputation_delta=-severity.ordinal) for row in rows)


def _templates(*rows: tuple) -> Tuple[EventTemplate, ...]:
    return tuple(
        EventTemplate(*row[:6], Decimal(row[6])) if len(row) > 6 else EventTemplate(*row)
        for row in rows
    )


EVENT_TEMPLATES: Dict[Tuple[EventCategory, EventSeverity], Tuple[EventTemplate, ...]] = {
    (W, MINOR): _weather(
        MINOR,
        ("Light Fog Delays", "Morning fog causes minor delays at several airports", 0.95, 1.05, 1),
        ("Windy Conditions", "Strong winds increase fuel consumption slightly", 0.98, 1.08, 1),
        ("Rain Delays", "Rain showers cause some flight delays", 0.97, 1.03, 1),
    ),
    (W, MODERATE): _weather(
        MODERATE,
        ("Severe Thunderstorms", "Thunderstorms force cancellations across the network", 0.80, 1.15, 2),
        ("Heavy Snow", "Snowstorm disrupts operations at northern airports", 0.75, 1.20, 3),
        ("Heat Wave", "Extreme heat reduces aircraft performance", 0.90, 1.18, 2),
    ),
    (W, MAJOR): _weather(
        MAJOR,
        ("Hurricane Warning", "Major hurricane threatens coastal routes", 0.60, 1.30, 4),
        ("Blizzard", "Severe blizzard shuts down multiple airports", 0.50, 1.40, 5),
        ("Ice Storm", "Ice storm causes widespread cancellations", 0.55, 1.35, 4),
    ),
    (W, CRITICAL): _weather(
        CRITICAL,
        ("Category 5 Hurricane", "Catastrophic hurricane forces mass cancellations", 0.30, 1.60, 7),
        ("Volcanic Ash Cloud", "Volcanic eruption grounds flights across region", 0.20, 1.50, 10),
    ),
    (E, MINOR): _templates(
        ("Fuel Price Increase", "Oil prices rise slightly", 1.0, 1.10, 5, 0),
        ("Dollar Strengthens", "Strong dollar helps international routes", 1.05, 0.98, 3, 0),
        ("Tourism Tax Credit", "New tax credit boosts leisure travel", 1.08, 1.0, 7, 0),
    ),
    (E, MODERATE): _templates(
        ("Fuel Crisis", "Oil shortage drives up fuel costs significantly", 0.90, 1.30, 10, 0),
        ("Economic Slowdown", "Recession fears reduce business travel", 0.85, 1.05, 14, 0),
        ("Currency Fluctuation", "Exchange rates impact international demand", 0.92, 1.15, 8, 0),
    ),
    (E, MAJOR): _templates(
        ("Fuel Price Spike", "OPEC cuts production, fuel prices soar", 0.80, 1.50, 15, 0),
        ("Recession", "Economic recession hits travel demand hard", 0.70, 1.10, 30, -3),
        ("Inflation Surge", "High inflation increases all operating costs", 0.95, 1.35, 20, 0),
    ),
    (E, CRITICAL): _templates(
        ("Fuel Crisis Emergency", "Fuel shortage threatens operations", 0.60, 2.00, 21, -5),
        ("Market Crash", "Stock market crash devastates travel demand", 0.50, 1.20, 30, -5),
    ),
    (O, MINOR): _templates(
        ("IT System Glitch", "Brief computer system issues cause delays", 0.98, 1.05, 1, -1, "-5000"),
        ("Catering Delay", "Food service delays hold up some departures", 0.99, 1.03, 1, -1, "-2000"),
        ("Minor Maintenance", "Routine checks find small issues fleet-wide", 1.0, 1.08, 2, 0, "-8000"),
    ),
    (O, MODERATE): _templates(
        ("Ground Crew Strike", "Ground workers strike for better pay", 0.85, 1.20, 3, -3, "-25000"),
        ("Equipment Failure", "Key equipment fails, disrupting operations", 0.80, 1.15, 2, -2, "-35000"),
        ("Security Scare", "Security incident causes delays and screening backups", 0.90, 1.12, 2, -2, "-15000"),
    ),
    (O, MAJOR): _templates(
        ("Pilot Strike", "Pilots union stages major work stoppage", 0.60, 1.30, 5, -5, "-100000"),
        ("System-Wide Outage", "Computer systems crash, grounding flights", 0.50, 1.25, 3, -8, "-150000"),
        ("Maintenance Crisis", "Safety inspection grounds part of fleet", 0.70, 1.40, 7, -4, "-200000"),
    ),
    (O, CRITICAL): _templates(
        ("Major Strike", "All unionized employees walk out", 0.30, 1.50, 10, -10, "-500000"),
        ("Safety Grounding", "FAA grounds entire fleet for safety review", 0.20, 1.60, 14, -15, "-1000000"),
    ),
    (M, MINOR): _templates(
        ("Convention Season", "Business conventions boost demand", 1.12, 1.0, 5, 1),
        ("Sports Tournament", "Major sporting event increases travel", 1.10, 1.0, 3, 1),
        ("Long Weekend", "Holiday weekend drives leisure travel", 1.15, 1.0, 3, 0),
    ),
    (M, MODERATE): _templates(
        ("Tourism Campaign", "Destination marketing boosts routes", 1.25, 1.0, 10, 2),
        ("Competitor Exits", "Rival airline closes routes, opening opportunity", 1.30, 0.95, 15, 3),
        ("Festival Season", "Cultural festivals attract international visitors", 1.20, 1.0, 7, 2),
    ),
    (M, MAJOR): _templates(
        ("World Event", "Global event (Olympics, World Cup) surges demand", 1.50, 1.10, 14, 5),
        ("Competitor Bankruptcy", "Major competitor goes out of business", 1.40, 1.0, 30, 4),
        ("Tourism Boom", "Destination becomes viral travel trend", 1.45, 1.05, 21, 3),
    ),
    (M, CRITICAL): _templates(
        ("Mega Event", "Once-in-a-lifetime event creates unprecedented demand", 1.80, 1.15, 21, 10),
        ("Market Monopoly", "All competitors exit, leaving you dominant", 1.70, 0.90, 60, 8),
    ),
    (PP, MINOR): _templates(
        ("Positive Review", "Travel blogger praises your service", 1.05, 1.0, 3, 2, "5000"),
        ("Social Media Buzz", "Viral video showcases great customer service", 1.08, 1.0, 5, 3, "10000"),
        ("Local Award", "Local business group recognizes your airline", 1.03, 1.0, 2, 2, "3000"),
    ),
    (PP, MODERATE): _templates(
        ("Industry Award", "Win major airline industry award", 1.15, 0.98, 10, 5, "25000"),
        ("Celebrity Endorsement", "Celebrity posts about great flight experience", 1.20, 1.0, 7, 6, "50000"),
        ("Media Feature", "Major publication features your airline positively", 1.12, 1.0, 8, 4, "30000"),
    ),
    (PP, MAJOR): _templates(
        ("Best Airline Award", "Named best airline in customer satisfaction", 1.30, 0.95, 15, 10, "100000"),
        ("Heroic Crew", "Your crew's heroic actions make national news", 1.25, 1.0, 12, 12, "75000"),
        ("Innovation Award", "Recognized for industry-leading innovation", 1.22, 0.98, 14, 8, "90000"),
    ),
    (PP, CRITICAL): _templates(
        ("Airline of the Year", "Win prestigious Airline of the Year award", 1.50, 0.90, 30, 20, "250000"),
        ("Viral Success", "Unprecedented viral marketing success", 1.45, 0.95, 21, 15, "200000"),
    ),
    (NP, MINOR): _templates(
        ("Customer Complaint", "Viral complaint video gets attention", 0.97, 1.0, 2, -2, "-5000"),
        ("Baggage Issue", "Lost luggage incident reported in media", 0.98, 1.02, 3, -2, "-8000"),
        ("Delay Complaints", "Social media complaints about delays", 0.96, 1.0, 2, -3, "-6000"),
    ),
    (NP, MODERATE): _templates(
        ("Service Scandal", "Poor service incident goes viral", 0.85, 1.05, 5, -6, "-35000"),
        ("Safety Concern", "Minor safety concern reported by media", 0.80, 1.08, 7, -8, "-50000"),
        ("Customer Lawsuit", "High-profile customer files lawsuit", 0.90, 1.10, 5, -5, "-75000"),
    ),
    (NP, MAJOR): _templates(
        ("PR Crisis", "Major PR disaster requires damage control", 0.70, 1.15, 10, -12, "-150000"),
        ("Regulatory Fine", "FAA fines airline for violations", 0.85, 1.20, 8, -10, "-250000"),
        ("Class Action", "Class action lawsuit filed over practices", 0.75, 1.12, 14, -15, "-300000"),
    ),
    (NP, CRITICAL): _templates(
        ("Major Scandal", "Devastating scandal rocks company", 0.50, 1.30, 21, -25, "-750000"),
        ("Criminal Investigation", "Federal investigation launched", 0.40, 1.40, 30, -30, "-1000000"),
    ),
}


def templates_for(category: EventCategory, severity: EventSeverity) -> Tuple[EventTemplate, ...]:
    return EVENT_TEMPLATES[(category, severity)]
