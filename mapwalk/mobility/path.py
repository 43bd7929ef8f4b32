"""Waypoint sequence handed to the simulator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from ..map.node import Coord


@dataclass(frozen=True)
class Path:
    waypoints: Tuple[Coord, ...]
    speed: float

    def __post_init__(self) -> None:
        if not self.waypoints:
            raise ValueError("Path needs at least one waypoint")

    def __len__(self) -> int:
        return len(self.waypoints)

    @property
    def length(self) -> float:
        """Travelled distance along the waypoints."""
        return sum(math.dist(a, b) for a, b in zip(self.waypoints, self.waypoints[1:]))

    def to_dict(self) -> dict:
        coords: List[List[float]] = [[x, y] for x, y in self.waypoints]
        return {"speed": self.speed, "waypoints": coords}
