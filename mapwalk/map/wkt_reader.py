"""Reader for road maps stored as WKT line geometries.

A map file holds one WKT geometry per line. Only line geometries
(``LINESTRING``, ``MULTILINESTRING`` and the lines inside a
``GEOMETRYCOLLECTION``) contribute to the map. Every point becomes a map
node, consecutive points of a line are joined by an undirected edge, and
points with identical coordinates collapse into one node, also across
files. A z coordinate is ignored. Other geometries (``POINT``,
``POLYGON``...) are skipped.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List

from shapely import wkt
from shapely.geometry.base import BaseGeometry

from .node import Coord, MapNode
from .sim_map import SimMap

logger = logging.getLogger(__name__)

_LINE_TYPES = ("LineString", "LinearRing")
_COLLECTION_TYPES = ("MultiLineString", "GeometryCollection")


class WKTMapReader:
    """Accumulates line geometries from one or more files into a SimMap.

    Malformed WKT raises ``shapely.errors.ShapelyError``.
    """

    def __init__(self) -> None:
        self._nodes: Dict[Coord, MapNode] = {}

    def add_paths(self, path: str, map_type: int) -> None:
        """Read every line geometry of ``path`` tagging nodes with ``map_type``."""
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        self.add_paths_from_text(text, map_type)

    def add_paths_from_text(self, text: str, map_type: int) -> None:
        lines = 0
        for row in text.splitlines():
            row = row.strip()
            if not row:
                continue
            for points in _line_points(wkt.loads(row)):
                self._add_line(points, map_type)
                lines += 1
        logger.debug("Read %d lines for map type %d", lines, map_type)

    def _add_line(self, points: List[Coord], map_type: int) -> None:
        prev = None
        for point in points:
            node = self._nodes.get(point)
            if node is None:
                node = MapNode(point)
                self._nodes[point] = node
            node.add_type(map_type)
            if prev is not None:
                prev.add_neighbor(node)
            prev = node

    def get_map(self) -> SimMap:
        return SimMap(list(self._nodes.values()))


def _line_points(geom: BaseGeometry) -> Iterator[List[Coord]]:
    """Yield the 2D points of every line in ``geom``."""
    if geom.geom_type in _LINE_TYPES:
        yield [(float(c[0]), float(c[1])) for c in geom.coords]
    elif geom.geom_type in _COLLECTION_TYPES:
        for part in geom.geoms:
            yield from _line_points(part)
    else:
        logger.debug("Skipping %s geometry", geom.geom_type)
