"""Road-network vertices."""

from __future__ import annotations

from typing import Iterable, List, Tuple

Coord = Tuple[float, float]


class MapNode:
    """A vertex of the road map with a location, neighbors and type bits.

    Types are small integers in ``[MIN_TYPE, MAX_TYPE]``. The map reader
    sets type ``i`` on every node read from the ``i``-th map file, so a node
    shared by two files carries both.
    """

    MIN_TYPE = 1
    MAX_TYPE = 31

    __slots__ = ("location", "neighbors", "type_bits")

    def __init__(self, location: Coord, types: Iterable[int] = ()) -> None:
        self.location: Coord = (float(location[0]), float(location[1]))
        self.neighbors: List["MapNode"] = []
        self.type_bits = 0
        for t in types:
            self.add_type(t)

    def add_type(self, map_type: int) -> None:
        if not self.MIN_TYPE <= map_type <= self.MAX_TYPE:
            raise ValueError(f"Map node type {map_type} out of range [{self.MIN_TYPE}, {self.MAX_TYPE}]")
        self.type_bits |= 1 << map_type

    @property
    def types(self) -> Tuple[int, ...]:
        return tuple(t for t in range(self.MIN_TYPE, self.MAX_TYPE + 1) if self.type_bits & (1 << t))

    def is_type(self, types: Iterable[int]) -> bool:
        """True when any of ``types`` is set on this node."""
        return any(self.type_bits & (1 << t) for t in types)

    def add_neighbor(self, other: "MapNode") -> None:
        """Link ``other`` both ways; self-loops and duplicates are ignored."""
        if other is self:
            return
        if other not in self.neighbors:
            self.neighbors.append(other)
        if self not in other.neighbors:
            other.neighbors.append(self)

    def __repr__(self) -> str:
        x, y = self.location
        return f"MapNode({x:.2f}, {y:.2f})"
