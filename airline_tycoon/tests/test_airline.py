"""Tests for the airline aggregate, routes and aircraft."""

from decimal import Decimal

import pytest

from airline_tycoon.errors import AssignmentError, InsufficientFundsError
from airline_tycoon.models.airline import Airline


def test_reputation_clamped_on_assignment(airline):
    airline.reputation = 150
    assert airline.reputation == 100
    airline.adjust_reputation(-500)
    assert airline.reputation == 0


def test_reputation_clamped_on_creation(jfk):
    airline = Airline(name="X", home_hub=jfk, cash=Decimal("1"), reputation=-20)
    assert airline.reputation == 0


def test_registrations_are_sequential(airline, b738):
    first = airline.lease_aircraft(b738)
    second = airline.lease_aircraft(b738)
    assert first.registration == "N10001"
    assert second.registration == "N10002"


def test_lease_payment_and_daily_costs(airline, b738):
    aircraft = airline.lease_aircraft(b738)
    # 1.2% of 90,000,000
    assert aircraft.monthly_lease_payment == Decimal("1080000.00")
    assert airline.daily_lease_costs == Decimal("36000.00")
    assert airline.daily_operating_cost == Decimal("46000.00")


def test_bankruptcy_is_derived_from_cash(airline):
    assert not airline.is_bankrupt
    airline.adjust_cash(Decimal("-5000000.01"))
    assert airline.cash == Decimal("-0.01")
    assert airline.is_bankrupt


def test_purchase_requires_funds(airline, reference_data):
    a380 = reference_data.require_aircraft_type("A388")
    with pytest.raises(InsufficientFundsError):
        airline.purchase_aircraft(a380)
    assert airline.fleet == []


def test_purchase_and_sell(airline, reference_data):
    e175 = reference_data.require_aircraft_type("E175")
    airline.cash = Decimal("40000000")
    aircraft = airline.purchase_aircraft(e175)
    assert airline.cash == Decimal("10000000.00")
    assert not aircraft.is_leased

    proceeds = airline.sell_aircraft(aircraft)
    assert proceeds == Decimal("21000000.00")
    assert airline.cash == Decimal("31000000.00")
    assert airline.fleet == []


def test_cannot_sell_leased_or_assigned(flying_airline, b738):
    leased = flying_airline.fleet[0]
    with pytest.raises(AssignmentError):
        flying_airline.sell_aircraft(leased)


def test_return_leased_aircraft_pays_penalty(airline, b738):
    aircraft = airline.lease_aircraft(b738)
    penalty = airline.return_leased_aircraft(aircraft)
    assert penalty == Decimal("2160000.00")
    assert airline.cash == Decimal("2840000.00")
    assert airline.fleet == []


def test_return_requires_funds(airline, b738):
    aircraft = airline.lease_aircraft(b738)
    airline.cash = Decimal("1000")
    with pytest.raises(InsufficientFundsError):
        airline.return_leased_aircraft(aircraft)
    assert len(airline.fleet) == 1


def test_cannot_return_assigned_aircraft(flying_airline):
    with pytest.raises(AssignmentError):
        flying_airline.return_leased_aircraft(flying_airline.fleet[0])


def test_open_route_validation(airline, jfk, bos):
    with pytest.raises(AssignmentError):
        airline.open_route(jfk, jfk, 0, Decimal("100"))
    airline.open_route(jfk, bos, 162, Decimal("100"))
    with pytest.raises(AssignmentError):
        airline.open_route(jfk, bos, 162, Decimal("120"))


def test_route_name_and_flight_time(flying_airline):
    route = flying_airline.routes[0]
    assert route.name == "JFK → BOS"
    assert route.flight_time_hours == pytest.approx(0.36)


def test_aircraft_cannot_fly_two_routes(flying_airline, jfk, reference_data):
    ord_airport = reference_data.require_airport("ORD")
    second = flying_airline.open_route(jfk, ord_airport, 636, Decimal("150"))
    with pytest.raises(AssignmentError):
        flying_airline.assign_aircraft(second, flying_airline.fleet[0])


def test_reassigning_route_releases_previous_aircraft(flying_airline, b738):
    route = flying_airline.routes[0]
    old = route.assigned_aircraft
    new = flying_airline.lease_aircraft(b738)
    flying_airline.assign_aircraft(route, new)

    assert route.assigned_aircraft is new
    assert new.assigned_route_id == route.id
    assert old.assigned_route_id is None


def test_close_route_deactivates_and_releases(flying_airline):
    route = flying_airline.routes[0]
    aircraft = route.assigned_aircraft
    flying_airline.close_route(route)

    assert route in flying_airline.routes
    assert not route.is_active
    assert route.assigned_aircraft is None
    assert aircraft.is_available
    assert flying_airline.active_routes == []


def test_cannot_assign_to_closed_route(flying_airline):
    route = flying_airline.routes[0]
    aircraft = route.assigned_aircraft
    flying_airline.close_route(route)
    with pytest.raises(AssignmentError):
        flying_airline.assign_aircraft(route, aircraft)


def test_aircraft_wear_and_maintenance(airline, b738):
    aircraft = airline.lease_aircraft(b738)
    aircraft.add_flight_hours(5000)
    assert aircraft.total_flight_hours == 5000
    assert aircraft.condition == pytest.approx(0.5)

    cost = aircraft.perform_maintenance(0.5)
    assert cost == Decimal("900000.00")
    assert aircraft.condition == pytest.approx(0.75)


def test_maintenance_level_validated(airline, b738):
    aircraft = airline.lease_aircraft(b738)
    with pytest.raises(ValueError):
        aircraft.perform_maintenance(1.5)


def test_worn_aircraft_is_unavailable(airline, b738):
    aircraft = airline.lease_aircraft(b738)
    aircraft.add_flight_hours(8000)
    assert not aircraft.is_available


def test_find_aircraft_by_registration(flying_airline):
    aircraft = flying_airline.fleet[0]
    assert flying_airline.find_aircraft(aircraft.registration) is aircraft
    assert flying_airline.find_aircraft(aircraft.id) is aircraft
    assert flying_airline.find_aircraft("nope") is None
