"""Bearings between map nodes.

Bearings are ``degrees(atan2(dx, dy))``: measured from the vertical axis
rather than the usual horizontal one, in (-180, 180]. Errors against a
heading are plain absolute differences and are not wrapped around 360.
"""

from __future__ import annotations

import math

from ..map.node import MapNode


def angle(own: MapNode, other: MapNode) -> float:
    dx = other.location[0] - own.location[0]
    dy = other.location[1] - own.location[1]
    return math.degrees(math.atan2(dx, dy))


def angular_error(heading: float, own: MapNode, other: MapNode) -> float:
    return abs(angle(own, other) - heading)
