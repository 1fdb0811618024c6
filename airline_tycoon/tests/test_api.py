"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from airline_tycoon.main import app
from airline_tycoon.services.game_service import GameService
from airline_tycoon.services.singleton import get_game_service, set_game_service


@pytest.fixture
def client(config):
    set_game_service(GameService(config=config))
    yield TestClient(app)
    set_game_service(None)


def new_game(client, **body):
    response = client.post("/api/game/new", json=body)
    assert response.status_code == 200
    return response.json()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "version" in response.json()


def test_day_before_game_is_conflict(client):
    response = client.post("/api/game/day")
    assert response.status_code == 409


def test_status_without_game(client):
    response = client.get("/api/status")
    assert response.status_code == 200
    body = response.json()
    assert body["state"] == "not_started"
    assert body["airline"] is None


def test_new_game_and_first_day(client):
    status = new_game(client, name="SkyWings", home_hub="JFK")
    assert status["state"] == "running"
    assert status["airline"]["name"] == "SkyWings"
    assert status["airline"]["cash_formatted"] == "$5,000,000"
    assert status["airline"]["fleet_size"] == 2

    response = client.post("/api/game/day")
    assert response.status_code == 200
    summary = response.json()
    assert summary["day"] == 1
    assert len(summary["route_results"]) == 2
    assert summary["new_events"] == []

    assert client.get("/api/status").json()["airline"]["day"] == 1


def test_unknown_hub_is_not_found(client):
    response = client.post("/api/game/new", json={"home_hub": "XXX"})
    assert response.status_code == 404


def test_routes_and_fleet_listing(client):
    new_game(client)
    body = client.get("/api/routes").json()

    assert len(body["routes"]) == 2
    assert len(body["fleet"]) == 2
    assert body["routes"][0]["name"].startswith("JFK")
    assert body["routes"][0]["aircraft"] is not None
    # Starter aircraft all fly a route
    assert [aircraft["is_available"] for aircraft in body["fleet"]] == [False, False]

    client.post("/api/fleet", json={"type_code": "E175"})
    fleet = client.get("/api/routes").json()["fleet"]
    assert fleet[-1]["is_available"] is True


def test_open_and_close_route(client):
    new_game(client)
    response = client.post("/api/routes", json={"origin": "JFK", "destination": "LAX"})
    assert response.status_code == 200
    route = response.json()["data"]
    assert route["ticket_price"] == "332.28"

    duplicate = client.post("/api/routes", json={"origin": "JFK", "destination": "LAX"})
    assert duplicate.status_code == 400

    assert client.delete(f"/api/routes/{route['id']}").status_code == 200
    assert client.delete("/api/routes/missing").status_code == 404


def test_acquire_aircraft(client):
    new_game(client)
    leased = client.post("/api/fleet", json={"type_code": "E175"})
    assert leased.status_code == 200
    assert leased.json()["data"]["is_leased"] is True

    # An A380 costs far more than the starting cash
    too_expensive = client.post("/api/fleet", json={"type_code": "A388", "lease": False})
    assert too_expensive.status_code == 400

    unknown = client.post("/api/fleet", json={"type_code": "C172"})
    assert unknown.status_code == 404


def test_advance_days(client):
    new_game(client)
    response = client.post("/api/game/advance", json={"days": 5})
    assert response.status_code == 200
    report = response.json()
    assert report["days_completed"] == 5
    assert report["current_day"] == 5
    assert report["state"] == "running"


def test_advance_validates_day_count(client):
    new_game(client)
    assert client.post("/api/game/advance", json={"days": 0}).status_code == 422


def test_pause_blocks_days(client):
    new_game(client)
    assert client.post("/api/game/pause").json()["state"] == "paused"
    assert client.post("/api/game/day").status_code == 409
    assert client.post("/api/game/advance", json={"days": 2}).status_code == 409
    assert client.post("/api/game/resume").json()["state"] == "running"
    assert client.post("/api/game/day").status_code == 200


def test_events_endpoint(client):
    new_game(client)
    body = client.get("/api/events").json()
    assert body["events"] == []
    assert body["demand_modifier"] == 1.0


def test_scenarios(client):
    scenarios = client.get("/api/scenarios").json()["scenarios"]
    assert len(scenarios) == 3

    response = client.post("/api/game/scenario", json={"scenario_id": "regional-startup"})
    assert response.status_code == 200
    status = response.json()
    assert status["scenario"] is not None
    assert len(status["objectives"]) == 2


def test_unknown_scenario(client):
    response = client.post("/api/game/scenario", json={"scenario_id": "nope"})
    assert response.status_code == 404


def test_save_list_and_load(client):
    new_game(client, name="Saver Air")
    client.post("/api/game/advance", json={"days": 3})

    saved = client.post("/api/saves", json={"save_name": "slot1"})
    assert saved.status_code == 200
    assert saved.json()["file_path"].endswith("slot1.json")

    saves = client.get("/api/saves").json()["saves"]
    assert [save["save_name"] for save in saves] == ["slot1"]

    client.post("/api/game/advance", json={"days": 2})
    loaded = client.post("/api/saves/load", json={"save_name": "slot1"})
    assert loaded.status_code == 200
    assert loaded.json()["airline"]["day"] == 3
    assert loaded.json()["airline"]["name"] == "Saver Air"


def test_load_missing_save(client):
    response = client.post("/api/saves/load", json={"save_name": "ghost"})
    assert response.status_code == 404


def test_save_without_game(client):
    assert client.post("/api/saves", json={"save_name": "x"}).status_code == 409


def test_logs(client):
    new_game(client)
    client.post("/api/game/day")
    client.post("/api/game/advance", json={"days": 4})

    body = client.get("/api/logs", params={"limit": 2}).json()
    assert body["total_days"] == 5
    assert [day["day"] for day in body["days"]] == [4, 5]

    everything = client.get("/api/logs", params={"limit": 0}).json()
    assert len(everything["days"]) == 5


def test_new_game_clears_log(client):
    new_game(client)
    client.post("/api/game/day")
    new_game(client)
    assert get_game_service().day_log == []


def test_service_day_log_file(config):
    """Test the service appends each processed day to its JSON lines file."""
    service = GameService(config=config, day_log_file=config.DAY_LOG_FILE)
    service.new_game()
    service.process_day()
    service.advance(2)
    service.day_logger.close()

    with open(config.DAY_LOG_FILE, encoding="utf-8") as f:
        assert len(f.read().splitlines()) == 3
