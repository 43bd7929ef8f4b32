"""Road map model, reader and loader."""

from mapwalk.map.connectivity import check_connectedness
from mapwalk.map.node import Coord, MapNode
from mapwalk.map.sim_map import SimMap
from mapwalk.map.store import DEFAULT_CACHE, GraphStore, MapCache
from mapwalk.map.wkt_reader import WKTMapReader

__all__ = [
    "Coord",
    "MapNode",
    "SimMap",
    "WKTMapReader",
    "check_connectedness",
    "GraphStore",
    "MapCache",
    "DEFAULT_CACHE",
]
