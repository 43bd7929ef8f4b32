"""Container for a loaded road map and its spatial metadata."""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .node import Coord, MapNode


class SimMap:
    """Owns the map nodes and keeps their bounding box up to date."""

    def __init__(self, nodes: Sequence[MapNode]) -> None:
        self.nodes: List[MapNode] = list(nodes)
        self.min_bound: Optional[Coord] = None
        self.max_bound: Optional[Coord] = None
        self._coords = np.empty((0, 2), dtype=float)
        self.calc_bounds()

    def __len__(self) -> int:
        return len(self.nodes)

    def calc_bounds(self) -> None:
        """Recompute the coordinate array and the min/max bounds."""
        self._coords = np.array([n.location for n in self.nodes], dtype=float).reshape(-1, 2)
        if not len(self._coords):
            self.min_bound = self.max_bound = None
            return
        lo = self._coords.min(axis=0)
        hi = self._coords.max(axis=0)
        self.min_bound = (float(lo[0]), float(lo[1]))
        self.max_bound = (float(hi[0]), float(hi[1]))

    def _apply(self, coords: np.ndarray) -> None:
        for node, (x, y) in zip(self.nodes, coords):
            node.location = (float(x), float(y))
        self.calc_bounds()

    def mirror(self) -> None:
        """Reflect the map over the x axis (y' = -y)."""
        self._apply(self._coords * np.array([1.0, -1.0]))

    def translate(self, dx: float, dy: float) -> None:
        self._apply(self._coords + np.array([dx, dy]))

    def nearest_node(self, coord: Coord) -> Optional[MapNode]:
        """Map node closest to ``coord``; the first one wins ties."""
        if not self.nodes:
            return None
        d2 = ((self._coords - np.asarray(coord, dtype=float)) ** 2).sum(axis=1)
        return self.nodes[int(np.argmin(d2))]

    def __repr__(self) -> str:
        return f"SimMap(nodes={len(self.nodes)}, min={self.min_bound}, max={self.max_bound})"
