from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

import pytest

from mapwalk.map import MapCache, MapNode, SimMap


def _build(
    coords: Sequence[Tuple[float, float]],
    edges: Iterable[Tuple[int, int]],
    types: Dict[int, Sequence[int]] | None = None,
) -> Tuple[SimMap, List[MapNode]]:
    types = types or {}
    nodes = [MapNode(c, types.get(i, (1,))) for i, c in enumerate(coords)]
    for a, b in edges:
        nodes[a].add_neighbor(nodes[b])
    return SimMap(nodes), nodes


@pytest.fixture
def make_map():
    """Factory: ``make_map(coords, edges, types)`` -> ``(SimMap, nodes)``."""
    return _build


@pytest.fixture
def square(make_map):
    """N1-N2-N3-N4-N1 square, all type 1."""
    return make_map([(0, 0), (0, 10), (10, 10), (10, 0)], [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def star(make_map):
    """Center node with N, E, S, W neighbors added in that order."""
    return make_map([(0, 0), (0, 10), (10, 0), (0, -10), (-10, 0)], [(0, 1), (0, 2), (0, 3), (0, 4)])


@pytest.fixture
def cache() -> MapCache:
    return MapCache()
