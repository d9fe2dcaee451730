#!/usr/bin/env python3
"""Command-line interface for the route finder.

Usage:
    route-finder --from "Nairobi Central" --to "Syokimau"
    route-finder --from "Nairobi Central" --to "Syokimau" --shortest --json
    route-finder --list-stations
"""

import argparse
import json
import logging
import sys

from .config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ROUTES, GRAPH_PATH, LOG_FORMAT, LOG_LEVEL
from .errors import NetworkLoadError, NetworkParseError, StationNotFoundError
from .loader import load_graph
from .routing import TransitGraph

logger = logging.getLogger(__name__)

USAGE = "Usage: route-finder --from='Station A' --to='Station B' [--json]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="route-finder",
        description="Find routes between two stations of a transit network.",
    )
    parser.add_argument("--from", dest="from_station", default="", help="Source station")
    parser.add_argument("--to", dest="to_station", default="", help="Destination station")
    parser.add_argument(
        "--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
        help=f"Maximum number of hops per route (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--max-routes", type=int, default=DEFAULT_MAX_ROUTES,
        help=f"Maximum number of routes to return (default: {DEFAULT_MAX_ROUTES})",
    )
    parser.add_argument(
        "--shortest", action="store_true",
        help="Return only the routes with the fewest stops",
    )
    parser.add_argument("--json", action="store_true", help="Output results in JSON format")
    parser.add_argument("--data", default=str(GRAPH_PATH), help="Network data file")
    parser.add_argument("--list-stations", action="store_true", help="List all stations and exit")
    return parser


def format_route(stations: list[str]) -> str:
    return " -> ".join(stations)


def print_stations(graph: TransitGraph) -> None:
    for station in sorted(graph.stations):
        lines = ", ".join(graph.lines_at(station))
        print(f"{station} ({lines})" if lines else station)


def main(argv=None) -> int:
    """Run the command-line route finder. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    if not args.list_stations and (not args.from_station or not args.to_station):
        print(USAGE)
        return 1

    try:
        graph = load_graph(args.data)
    except (NetworkLoadError, NetworkParseError) as e:
        logger.error("Failed to load graph: %s", e)
        return 2

    if args.list_stations:
        print_stations(graph)
        return 0

    try:
        if args.shortest:
            routes = graph.find_shortest_routes(args.from_station, args.to_station, args.max_routes)
        else:
            routes = graph.find_bounded_routes(
                args.from_station, args.to_station, args.max_depth, args.max_routes
            )
    except StationNotFoundError as e:
        print(e)
        return 1

    if args.json:
        output = {
            "from": args.from_station,
            "to": args.to_station,
            "routes": routes,
            "count": len(routes),
        }
        print(json.dumps(output, indent=2))
    else:
        print(f"Found {len(routes)} route(s):")
        for i, route in enumerate(routes):
            print(f"Route {i+1}: {format_route(route)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
