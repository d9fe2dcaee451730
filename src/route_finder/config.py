"""Configuration settings for the route finder."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
GRAPH_PATH = Path(os.getenv("ROUTE_FINDER_DATA", DATA_DIR / "network.json"))

# Search bounds
DEFAULT_MAX_DEPTH = int(os.getenv("ROUTE_FINDER_MAX_DEPTH", "30"))
DEFAULT_MAX_ROUTES = int(os.getenv("ROUTE_FINDER_MAX_ROUTES", "10"))

# HTTP server
HOST = os.getenv("ROUTE_FINDER_HOST", "0.0.0.0")
PORT = int(os.getenv("ROUTE_FINDER_PORT", "8080"))

# Logging
LOG_LEVEL = os.getenv("ROUTE_FINDER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
