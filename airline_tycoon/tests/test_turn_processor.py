"""Tests for the turn processor."""

from decimal import Decimal

import pytest

from airline_tycoon.errors import InvalidStateError
from airline_tycoon.event_generator import EventGenerator
from airline_tycoon.models.event import EventCategory, EventSeverity
from airline_tycoon.turn_processor import TurnProcessor, reputation_drift

from conftest import ScriptedEventGenerator, make_event


def quiet_processor():
    return TurnProcessor(EventGenerator(probability=0.0))


def test_process_day_requires_airline():
    with pytest.raises(InvalidStateError):
        quiet_processor().process_day(None)


def test_day_advances_by_exactly_one(flying_airline):
    processor = quiet_processor()
    for expected in range(1, 11):
        summary = processor.process_day(flying_airline)
        assert summary.day == expected
        assert flying_airline.current_day == expected


def test_quiet_day_cash_change_equals_route_profit(flying_airline):
    start_cash = flying_airline.cash
    summary = quiet_processor().process_day(flying_airline)

    assert summary.new_events == []
    assert summary.profit == Decimal("9659.00")
    assert flying_airline.cash - start_cash == sum(r.profit for r in summary.route_results)
    assert summary.net_cash_change == flying_airline.cash - start_cash
    assert summary.passengers_carried == 153
    assert flying_airline.total_passengers_carried == 153
    assert flying_airline.net_profit == Decimal("9659.00")


def test_route_performance_and_aircraft_hours_recorded(flying_airline):
    quiet_processor().process_day(flying_airline)
    route = flying_airline.routes[0]

    assert route.total_passengers == 153
    assert route.daily_profit == Decimal("9659.00")
    assert route.load_factor == pytest.approx(153 / 162)
    assert route.assigned_aircraft.total_flight_hours == 1
    assert route.assigned_aircraft.condition < 1.0


def test_route_without_aircraft_contributes_nothing(airline, jfk, bos):
    airline.open_route(jfk, bos, 162, Decimal("100"))
    start_cash = airline.cash
    summary = quiet_processor().process_day(airline)

    assert summary.revenue == Decimal("0")
    assert summary.costs == Decimal("0")
    assert summary.passengers_carried == 0
    assert airline.cash == start_cash


def test_one_time_impact_applied_once(airline):
    """Test the event's cash and reputation hit lands on day 1 only."""
    generator = ScriptedEventGenerator({1: make_event(duration=3, impact="-50000", reputation=-5)})
    processor = TurnProcessor(generator)

    summary = processor.process_day(airline)
    assert summary.event_impact == Decimal("-50000")
    assert len(summary.new_events) == 1
    assert airline.cash == Decimal("4950000.00")
    # 50 - 5, then drift toward 40 truncates to zero
    assert airline.reputation == 45

    for _ in range(2):
        summary = processor.process_day(airline)
        assert summary.new_events == []
        assert summary.event_impact == Decimal("0")
        assert airline.cash == Decimal("4950000.00")
        assert airline.reputation == 45

    assert len(airline.event_ledger) == 1
    processor.process_day(airline)
    assert len(airline.event_ledger) == 0


def test_event_modifiers_apply_on_creation_day(flying_airline):
    generator = ScriptedEventGenerator({1: make_event(duration=1, demand=0.1, cost=1.2, impact="0", reputation=0)})
    summary = TurnProcessor(generator).process_day(flying_airline)

    assert summary.demand_modifier == pytest.approx(0.1)
    assert summary.cost_modifier == pytest.approx(1.2)
    assert summary.passengers_carried == 80
    assert summary.costs == Decimal("6769.20")


def test_event_modifiers_gone_after_duration(flying_airline):
    generator = ScriptedEventGenerator({1: make_event(duration=1, demand=0.1, cost=1.2, impact="0", reputation=0)})
    processor = TurnProcessor(generator)
    processor.process_day(flying_airline)
    summary = processor.process_day(flying_airline)

    assert summary.demand_modifier == 1.0
    assert summary.cost_modifier == 1.0
    assert len(summary.expired_events) == 1


def test_reputation_stays_in_bounds_under_stacked_events(airline):
    disaster = make_event(duration=30, impact="0", reputation=-30, severity=EventSeverity.CRITICAL)
    processor = TurnProcessor(ScriptedEventGenerator(every_day=disaster))
    for _ in range(10):
        summary = processor.process_day(airline)
        assert 0 <= airline.reputation <= 100
        assert 0 <= summary.reputation <= 100
    # Floored at 0 by the event, then the daily drift toward 40 adds 4
    assert airline.reputation == 4

    triumph = make_event(
        duration=30, demand=1.5, cost=0.9, impact="0", reputation=20,
        category=EventCategory.POSITIVE_PR, severity=EventSeverity.CRITICAL,
    )
    processor = TurnProcessor(ScriptedEventGenerator(every_day=triumph))
    for _ in range(10):
        processor.process_day(airline)
        assert 0 <= airline.reputation <= 100


def test_seeded_runs_are_identical(jfk, bos, b738):
    """Test the same seed gives the same events, cash and days."""
    from airline_tycoon.models.airline import Airline

    def run(seed):
        airline = Airline(name="Seeded", home_hub=jfk, cash=Decimal("5000000"))
        route = airline.open_route(jfk, bos, 162, Decimal("100"))
        airline.assign_aircraft(route, airline.lease_aircraft(b738))
        processor = TurnProcessor(EventGenerator(seed=seed))
        history = []
        for _ in range(200):
            summary = processor.process_day(airline)
            history.append(
                (summary.day, airline.cash, [event.title for event in summary.new_events])
            )
        return history

    assert run(42) == run(42)


@pytest.mark.parametrize(
    "reputation,passengers,expected",
    [
        (50, 1500, 2),   # toward 70
        (50, 800, 1),    # toward 60
        (50, 0, -1),     # toward 40
        (45, 0, 0),      # -0.5 truncates to 0
        (100, 0, -6),
        (0, 2000, 7),
    ],
)
def test_reputation_drift(reputation, passengers, expected):
    assert reputation_drift(reputation, passengers) == expected
