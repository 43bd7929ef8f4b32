"""Map-based Levy walk traces for network simulation experiments."""

from mapwalk.errors import (
    ConfigurationError,
    DisconnectedGraphError,
    EmptyGraphError,
    LoadError,
    MapWalkError,
    NotPlacedError,
    SamplingInvariantError,
)

__all__ = [
    "MapWalkError",
    "ConfigurationError",
    "LoadError",
    "EmptyGraphError",
    "DisconnectedGraphError",
    "NotPlacedError",
    "SamplingInvariantError",
]
