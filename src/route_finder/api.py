"""FastAPI web interface for the route finder."""

import logging
from enum import Enum
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ROUTES, GRAPH_PATH, HOST, LOG_FORMAT, LOG_LEVEL, PORT
from .errors import StationNotFoundError
from .loader import load_graph
from .routing import TransitGraph

logger = logging.getLogger(__name__)


class SearchMode(str, Enum):
    dfs = "dfs"
    shortest = "shortest"


class RoutesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_station: str = Field(alias="from")
    to_station: str = Field(alias="to")
    count: int
    routes: list[list[str]]


def get_graph(request: Request) -> TransitGraph:
    return request.app.state.graph


def create_app(graph: TransitGraph) -> FastAPI:
    """Build the application around an already loaded graph."""
    app = FastAPI(
        title="Route Finder",
        description="Routes between stations of a transit network",
        version="0.1.0",
    )
    app.state.graph = graph

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["Content-Type"],
    )

    @app.get("/")
    def root(graph: TransitGraph = Depends(get_graph)):
        """Health check endpoint."""
        return {"status": "ok", "service": "Route Finder", "stations": len(graph)}

    @app.get("/routes", response_model=RoutesResponse)
    def get_routes(
        from_station: Optional[str] = Query(None, alias="from"),
        to_station: Optional[str] = Query(None, alias="to"),
        maxdepth: int = DEFAULT_MAX_DEPTH,
        maxroutes: int = DEFAULT_MAX_ROUTES,
        mode: SearchMode = SearchMode.dfs,
        graph: TransitGraph = Depends(get_graph),
    ):
        """Find routes between two stations."""
        if not from_station or not to_station:
            raise HTTPException(
                status_code=400, detail="`from` and `to` query parameters are required"
            )

        try:
            if mode is SearchMode.shortest:
                routes = graph.find_shortest_routes(from_station, to_station, maxroutes)
            else:
                routes = graph.find_bounded_routes(from_station, to_station, maxdepth, maxroutes)
        except StationNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

        return RoutesResponse(
            from_station=from_station, to_station=to_station, count=len(routes), routes=routes
        )

    @app.get("/stations")
    def list_stations(line: Optional[str] = None, graph: TransitGraph = Depends(get_graph)):
        """List all stations, optionally filtered by line."""
        stations = sorted(graph.stations)

        if line:
            stations = [
                s for s in stations
                if line.lower() in (name.lower() for name in graph.lines_at(s))
            ]

        return {
            "count": len(stations),
            "stations": [
                {"name": s, "lines": list(graph.lines_at(s))}
                for s in stations
            ],
        }

    return app


def run_server(host: str = HOST, port: int = PORT):
    """Load the network and run the FastAPI server."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    graph = load_graph(GRAPH_PATH)
    logger.info("Server running at http://%s:%d", host, port)
    uvicorn.run(create_app(graph), host=host, port=port)


if __name__ == "__main__":
    run_server()
