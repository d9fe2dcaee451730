"""Shared fixtures for route finder tests."""

import json

import pytest

from route_finder.routing import build_graph


def make_line(name, *stops):
    """A raw line whose nodes are the given stop names."""
    return {"name": name, "color": "", "nodes": [{"name": stop, "coords": []} for stop in stops]}


@pytest.fixture
def cycle_network():
    """Four stations in a ring: A-B-C on one line, C-D-A on another."""
    return {"lines": [make_line("North", "A", "B", "C"), make_line("South", "C", "D", "A")]}


@pytest.fixture
def cycle_graph(cycle_network):
    return build_graph(cycle_network)


@pytest.fixture
def grid_network():
    """A 3x3 grid of stations S00..S22 with one line per row and per column."""
    lines = []
    for i in range(3):
        lines.append(make_line(f"Row {i}", *(f"S{i}{j}" for j in range(3))))
        lines.append(make_line(f"Column {i}", *(f"S{j}{i}" for j in range(3))))
    return {"lines": lines}


@pytest.fixture
def network_file(tmp_path, cycle_network):
    """The ring network written to a JSON file."""
    path = tmp_path / "network.json"
    path.write_text(json.dumps(cycle_network), encoding="utf-8")
    return path
