"""Station names and the raw network data structure."""

from __future__ import annotations

import string
from typing import Optional

from pydantic import BaseModel, Field


class Position(BaseModel):
    """Geographic position of a station."""
    lat: float = 0.0
    lon: float = 0.0


class StationInfo(BaseModel):
    """Display metadata for a station, keyed by station id in the source file."""
    label: str = ""
    position: Optional[Position] = None


class RawNode(BaseModel):
    """A point on a line drawing.

    Nodes without a name are schematic-only waypoints (bends in the drawn
    line) and are not stations.
    """
    name: Optional[str] = ""
    coords: list[float] = Field(default_factory=list)

    @property
    def is_station(self) -> bool:
        return bool(self.name and self.name.strip())


class RawLine(BaseModel):
    """A transit line as an ordered sequence of nodes."""
    name: str = ""
    color: str = ""
    nodes: list[RawNode] = Field(default_factory=list)


class RawNetwork(BaseModel):
    """Top-level shape of a network data file."""
    stations: dict[str, StationInfo] = Field(default_factory=dict)
    lines: list[RawLine] = Field(default_factory=list)


def normalize_station_name(name: str) -> str:
    """Canonical station key for a name.

    Collapses whitespace (including line breaks used to wrap labels on the
    map) and title-cases each word, so "  UPPER\\nHILL " becomes "Upper Hill".
    """
    return string.capwords(name)


def station_lookup_key(name: str) -> str:
    """Case-insensitive lookup form of a station name."""
    return normalize_station_name(name).casefold()
