"""Map-constrained mobility models."""

from mapwalk.mobility.filters import NodeTypeFilter
from mapwalk.mobility.levy_walk import MapBasedLevyWalk, generate_path, initial_location
from mapwalk.mobility.path import Path
from mapwalk.mobility.selector import select_next

__all__ = [
    "MapBasedLevyWalk",
    "NodeTypeFilter",
    "Path",
    "generate_path",
    "initial_location",
    "select_next",
]
