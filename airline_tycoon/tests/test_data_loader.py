"""Tests for data loader module."""

from decimal import Decimal

import pytest

from airline_tycoon.data_loader import (
    ReferenceData,
    load_aircraft_types,
    load_airports,
    load_route_distances,
)
from airline_tycoon.errors import ReferenceNotFoundError
from airline_tycoon.models.aircraft import AircraftCategory
from airline_tycoon.models.airport import MarketSize


def test_load_airports_empty_file(tmp_path):
    """Test loading airports with a header-only CSV."""
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text("code,name,city,market_size,landing_fee,is_hub\n")

    airports = load_airports(str(csv_path))

    assert isinstance(airports, dict)
    assert len(airports) == 0


def test_load_airports_with_data(tmp_path):
    """Test loading airports with sample data."""
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text(
        "code,name,city,market_size,landing_fee,is_hub\n"
        "jfk,John F. Kennedy,New York,very_large,2500,True\n"
        "BTV,Burlington,Burlington,small,400,False\n"
    )

    airports = load_airports(str(csv_path))

    assert set(airports) == {"JFK", "BTV"}
    assert airports["JFK"].code == "JFK"
    assert airports["JFK"].is_hub is True
    assert airports["JFK"].market_size == MarketSize.VERY_LARGE
    assert airports["BTV"].landing_fee == Decimal("400")
    assert airports["BTV"].is_hub is False


def test_load_airports_missing_file(tmp_path):
    """Test that a missing file yields an empty table."""
    assert load_airports(str(tmp_path / "nope.csv")) == {}


def test_load_airports_missing_column(tmp_path):
    csv_path = tmp_path / "airports.csv"
    csv_path.write_text("code,name\nJFK,Kennedy\n")

    with pytest.raises(ValueError):
        load_airports(str(csv_path))


def test_load_aircraft_types(tmp_path):
    csv_path = tmp_path / "aircraft.csv"
    csv_path.write_text(
        "code,name,category,capacity,range_nm,purchase_price,"
        "operating_cost_per_hour,fuel_consumption_per_hour\n"
        "E175,Embraer E175,regional,76,2200,30000000,2500,450\n"
    )

    types = load_aircraft_types(str(csv_path))

    e175 = types["E175"]
    assert e175.category == AircraftCategory.REGIONAL
    assert e175.capacity == 76
    assert e175.purchase_price == Decimal("30000000")
    assert e175.fuel_consumption_per_hour == 450


def test_load_aircraft_types_missing_file(tmp_path):
    assert load_aircraft_types(str(tmp_path / "nope.csv")) == {}


def test_route_distances_are_symmetric(tmp_path):
    csv_path = tmp_path / "distances.csv"
    csv_path.write_text("origin,destination,distance_nm\nJFK,BOS,162\n")

    distances = load_route_distances(str(csv_path))

    assert distances[("JFK", "BOS")] == 162
    assert distances[("BOS", "JFK")] == 162


def test_bundled_reference_data(reference_data):
    """Test the packaged CSV files load and cover the starter network."""
    assert reference_data.require_airport("JFK").is_hub
    assert reference_data.require_aircraft_type("B738").capacity == 162
    for code in ("BOS", "ORD", "ATL", "MIA", "LAX"):
        assert reference_data.find_airport(code) is not None


def test_lookups_normalise_codes(reference_data):
    assert reference_data.find_airport(" jfk ").code == "JFK"
    assert reference_data.find_aircraft_type("b738").code == "B738"


def test_require_unknown_codes(reference_data):
    with pytest.raises(ReferenceNotFoundError):
        reference_data.require_airport("XXX")
    with pytest.raises(ReferenceNotFoundError):
        reference_data.require_aircraft_type("C172")


def test_distance_between(reference_data):
    assert reference_data.distance_between("JFK", "LAX") == 2144
    assert reference_data.distance_between("lax", "jfk") == 2144
    # Pairs missing from the table fall back to 1000 nm
    assert ReferenceData({}, {}).distance_between("JFK", "LAX") == 1000


def test_suggested_ticket_price():
    assert ReferenceData.suggested_ticket_price(2144) == Decimal("332.28")
    assert ReferenceData.suggested_ticket_price(0) == Decimal("75.00")
