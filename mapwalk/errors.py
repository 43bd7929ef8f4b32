"""Exception types raised by the map-based mobility package."""

from __future__ import annotations

from typing import Any


class MapWalkError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(MapWalkError, ValueError):
    """A setting is out of range or cannot be satisfied."""

    def __init__(self, setting: str, value: Any, expected: str) -> None:
        self.setting = setting
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid value {value!r} for setting '{setting}' (expected {expected})")


class MapBoundsError(ConfigurationError):
    """A map node lies outside the configured world."""

    def __init__(self, location, world_size) -> None:
        max_x, max_y = world_size
        super().__init__(
            "world_size",
            tuple(world_size),
            f"map node {location} to fit in x: 0...{max_x} y: 0...{max_y}",
        )
        self.location = location


class LoadError(MapWalkError):
    """A map source could not be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Could not load map file '{source}': {reason}")


class GraphError(MapWalkError):
    """Structural defect in a loaded map."""


class EmptyGraphError(GraphError):
    def __init__(self) -> None:
        super().__init__("No map nodes in the given map")


class DisconnectedGraphError(GraphError):
    """Some map nodes cannot be reached from the start node."""

    def __init__(self, reachable: int, total: int, start, unreachable) -> None:
        self.reachable = reachable
        self.total = total
        self.start = start
        self.unreachable = unreachable
        super().__init__(
            f"Map is not fully connected. Only {reachable} out of {total} map nodes "
            f"can be reached from {start}. E.g. {unreachable} can't be reached"
        )


class NotPlacedError(MapWalkError, RuntimeError):
    """A path was requested before the agent got an initial location."""

    def __init__(self) -> None:
        super().__init__("Tried to get a path before placement")


class SamplingInvariantError(MapWalkError, ArithmeticError):
    """A Lévy sample fell below its guaranteed floor of 1."""

    def __init__(self, value: float, draw: float, lam: float) -> None:
        self.value = value
        self.draw = draw
        self.lam = lam
        super().__init__(f"Levy sample {value!r} < 1 (draw={draw!r}, lambda={lam!r})")


__all__ = [
    "MapWalkError",
    "ConfigurationError",
    "MapBoundsError",
    "LoadError",
    "GraphError",
    "EmptyGraphError",
    "DisconnectedGraphError",
    "NotPlacedError",
    "SamplingInvariantError",
]
