"""Errors raised while loading a network or answering route queries.

Loading errors are fatal: nothing can be answered without a graph.
``StationNotFoundError`` is an ordinary query outcome and adapters turn it
into a user-facing message.
"""

from __future__ import annotations


class RouteFinderError(Exception):
    """Base class for route finder errors."""


class NetworkLoadError(RouteFinderError, OSError):
    """The network data file could not be read."""


class NetworkParseError(RouteFinderError, ValueError):
    """The network data does not have the expected line/stop shape."""


class StationNotFoundError(RouteFinderError, LookupError):
    """One or more station names matched no station in the graph."""

    def __init__(self, *names: str):
        self.names = list(names)
        super().__init__(f"Station not found: {', '.join(names)}")
