"""Loading network data files into a transit graph."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .errors import NetworkLoadError, NetworkParseError
from .routing import TransitGraph, build_graph
from .stations import RawNetwork

logger = logging.getLogger(__name__)


def read_network(path: Union[str, Path]) -> RawNetwork:
    """Read and decode a network JSON file.

    The file holds an optional ``stations`` mapping and a list of
    ``lines``, each with a ``name``, a ``color`` and ordered ``nodes``.

    Args:
        path: Location of the JSON file

    Returns:
        The decoded network

    Raises:
        NetworkLoadError: If the file cannot be read
        NetworkParseError: If the content is not a valid network document
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise NetworkLoadError(f"Could not read network data from {path}: {e}") from e

    try:
        return RawNetwork.model_validate(json.loads(data))
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise NetworkParseError(f"Invalid network data in {path}: {e}") from e


def load_graph(path: Union[str, Path]) -> TransitGraph:
    """Build the transit graph from a network JSON file."""
    raw = read_network(path)
    graph = build_graph(raw)
    logger.info("Loaded %d stations on %d lines from %s", len(graph), len(raw.lines), path)
    return graph
