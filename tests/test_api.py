"""Tests for the HTTP interface."""

import pytest
from fastapi.testclient import TestClient
from route_finder.api import create_app


@pytest.fixture
def client(cycle_graph):
    return TestClient(create_app(cycle_graph))


def test_health_check(client):
    """Test the root endpoint reports the service is up."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "Route Finder", "stations": 4}


def test_routes_default_search(client):
    """Test routes are returned with the query echoed back."""
    response = client.get("/routes", params={"from": "a", "to": "c"})
    assert response.status_code == 200
    assert response.json() == {
        "from": "a",
        "to": "c",
        "count": 2,
        "routes": [["A", "B", "C"], ["A", "D", "C"]],
    }


def test_routes_max_depth(client):
    """Test a small depth bound gives an empty result, not an error."""
    response = client.get("/routes", params={"from": "A", "to": "C", "maxdepth": 1})
    assert response.status_code == 200
    assert response.json()["count"] == 0
    assert response.json()["routes"] == []


def test_routes_max_routes(client):
    """Test the number of routes can be limited."""
    response = client.get("/routes", params={"from": "A", "to": "C", "maxroutes": 1})
    assert response.json()["routes"] == [["A", "B", "C"]]


def test_routes_shortest_mode(client):
    """Test the shortest mode returns only minimum-length routes."""
    response = client.get("/routes", params={"from": "A", "to": "B", "mode": "shortest"})
    assert response.status_code == 200
    assert response.json()["routes"] == [["A", "B"]]


def test_routes_missing_parameters(client):
    """Test both stations are required."""
    response = client.get("/routes", params={"from": "A"})
    assert response.status_code == 400


def test_routes_unknown_station(client):
    """Test an unknown station is a 404."""
    response = client.get("/routes", params={"from": "A", "to": "Nowhere"})
    assert response.status_code == 404
    assert "Nowhere" in response.json()["detail"]


def test_routes_invalid_depth(client):
    """Test a non-numeric depth is rejected."""
    response = client.get("/routes", params={"from": "A", "to": "C", "maxdepth": "deep"})
    assert response.status_code == 422


def test_list_stations(client):
    """Test all stations are listed with their lines."""
    response = client.get("/stations")
    data = response.json()
    assert data["count"] == 4
    assert data["stations"][0] == {"name": "A", "lines": ["North", "South"]}


def test_list_stations_by_line(client):
    """Test stations can be filtered by line name."""
    response = client.get("/stations", params={"line": "north"})
    names = [s["name"] for s in response.json()["stations"]]
    assert names == ["A", "B", "C"]
