"""Transit graph construction and route search."""

from __future__ import annotations

import logging
from collections import deque
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Union

from pydantic import ValidationError

from .errors import NetworkParseError, StationNotFoundError
from .stations import RawNetwork, normalize_station_name, station_lookup_key

logger = logging.getLogger(__name__)

Route = list[str]


class TransitGraph:
    """Undirected, unweighted connectivity graph of a transit network.

    Vertices are normalized station names. The graph is read-only once
    constructed, so a single instance can serve any number of concurrent
    queries.
    """

    def __init__(
        self,
        adjacency: Mapping[str, Iterable[str]],
        station_lines: Mapping[str, Iterable[str]] | None = None,
    ):
        self._adjacency = MappingProxyType(
            {station: tuple(neighbors) for station, neighbors in adjacency.items()}
        )
        station_lines = station_lines or {}
        self._station_lines = MappingProxyType(
            {station: tuple(station_lines.get(station, ())) for station in self._adjacency}
        )
        self._lookup: dict[str, tuple[str, ...]] = {}
        for station in self._adjacency:
            key = station_lookup_key(station)
            self._lookup[key] = self._lookup.get(key, ()) + (station,)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, station: object) -> bool:
        return station in self._adjacency

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitGraph):
            return NotImplemented
        return dict(self._adjacency) == dict(other._adjacency)

    @property
    def adjacency(self) -> Mapping[str, tuple[str, ...]]:
        return self._adjacency

    @property
    def stations(self) -> list[str]:
        return list(self._adjacency)

    def neighbors(self, station: str) -> tuple[str, ...]:
        return self._adjacency.get(station, ())

    def lines_at(self, station: str) -> tuple[str, ...]:
        """Names of the lines that stop at a station."""
        return self._station_lines.get(station, ())

    def resolve(self, name: str) -> list[str]:
        """All station keys matching a user-supplied name, ignoring case.

        An empty list means the station is unknown; it is up to the caller
        to decide whether that is an error.
        """
        return list(self._lookup.get(station_lookup_key(name), ()))

    def _resolve_endpoints(self, from_name: str, to_name: str) -> tuple[list[str], set[str]]:
        start_keys = self.resolve(from_name)
        target_keys = self.resolve(to_name)
        missing = [name for name, keys in ((from_name, start_keys), (to_name, target_keys)) if not keys]
        if missing:
            raise StationNotFoundError(*missing)
        return start_keys, set(target_keys)

    def find_bounded_routes(
        self, from_name: str, to_name: str, max_depth: int, max_routes: int
    ) -> list[Route]:
        """Enumerate simple paths of at most ``max_depth`` hops, depth first.

        Routes come back in discovery order. The search stops as soon as
        ``max_routes`` routes have been found, including part way through
        the traversal from one start station.

        Raises:
            StationNotFoundError: If either name matches no station.
        """
        start_keys, targets = self._resolve_endpoints(from_name, to_name)
        routes: list[Route] = []
        if max_depth < 0:
            return routes

        for start in start_keys:
            if len(routes) >= max_routes:
                break
            self._depth_first(start, targets, max_depth, max_routes, routes)

        logger.debug(
            "Bounded search %s -> %s (depth %d): %d route(s)",
            from_name, to_name, max_depth, len(routes),
        )
        return routes

    def _depth_first(
        self, start: str, targets: set[str], max_depth: int, max_routes: int, routes: list[Route]
    ) -> None:
        if start in targets:
            routes.append([start])
            return

        path = [start]
        on_path = {start}
        # Each frame: remaining hops from this station, unexplored neighbors.
        stack = [(max_depth, iter(self.neighbors(start)))]

        while stack:
            if len(routes) >= max_routes:
                return

            remaining, neighbors = stack[-1]
            next_station = None
            if remaining > 0:
                next_station = next((n for n in neighbors if n not in on_path), None)

            if next_station is None:
                stack.pop()
                on_path.discard(path.pop())
                continue

            if next_station in targets:
                routes.append(path + [next_station])
                continue

            path.append(next_station)
            on_path.add(next_station)
            stack.append((remaining - 1, iter(self.neighbors(next_station))))

    def find_shortest_routes(self, from_name: str, to_name: str, max_routes: int) -> list[Route]:
        """All minimum-hop simple paths between two stations, breadth first.

        Raises:
            StationNotFoundError: If either name matches no station.
        """
        start_keys, targets = self._resolve_endpoints(from_name, to_name)
        routes: list[Route] = []
        queue = deque([start] for start in start_keys)
        best_depth = {start: 1 for start in start_keys}
        shortest: int | None = None

        while queue and len(routes) < max_routes:
            path = queue.popleft()
            # Paths leave the queue in non-decreasing length, so once one is
            # longer than the first route found, none of the rest can tie it.
            if shortest is not None and len(path) > shortest:
                break

            station = path[-1]
            if station in targets:
                shortest = len(path)
                routes.append(path)
                continue

            depth = len(path) + 1
            for neighbor in self.neighbors(station):
                if neighbor in path:
                    continue
                known = best_depth.get(neighbor)
                if known is not None and depth > known:
                    continue
                best_depth[neighbor] = depth
                queue.append(path + [neighbor])

        logger.debug("Shortest search %s -> %s: %d route(s)", from_name, to_name, len(routes))
        return routes


def build_graph(raw: Union[RawNetwork, Mapping[str, Any]]) -> TransitGraph:
    """Build the station graph from line data.

    Consecutive named stops on a line are linked; unnamed schematic nodes
    between them are skipped without breaking the link.

    Raises:
        NetworkParseError: If ``raw`` does not have the line/stop shape.
    """
    if not isinstance(raw, RawNetwork):
        try:
            raw = RawNetwork.model_validate(raw)
        except ValidationError as e:
            raise NetworkParseError(f"Invalid network data: {e}") from e

    # dicts keep neighbors unique and in first-seen order
    adjacency: dict[str, dict[str, None]] = {}
    station_lines: dict[str, dict[str, None]] = {}

    for line in raw.lines:
        previous = None
        for node in line.nodes:
            if not node.is_station:
                continue
            station = normalize_station_name(node.name)
            adjacency.setdefault(station, {})
            if line.name:
                station_lines.setdefault(station, {})[line.name] = None
            if previous is not None and previous != station:
                adjacency[previous][station] = None
                adjacency[station][previous] = None
            previous = station

    return TransitGraph(adjacency, station_lines)


def resolve_station(graph: TransitGraph, name: str) -> list[str]:
    """Station keys in ``graph`` matching ``name``, ignoring case."""
    return graph.resolve(name)


def find_bounded_routes(
    graph: TransitGraph, from_name: str, to_name: str, max_depth: int, max_routes: int
) -> list[Route]:
    """Up to ``max_routes`` routes of at most ``max_depth`` hops."""
    return graph.find_bounded_routes(from_name, to_name, max_depth, max_routes)


def find_shortest_routes(
    graph: TransitGraph, from_name: str, to_name: str, max_routes: int
) -> list[Route]:
    """Up to ``max_routes`` routes with the fewest hops."""
    return graph.find_shortest_routes(from_name, to_name, max_routes)
