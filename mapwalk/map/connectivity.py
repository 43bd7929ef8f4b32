"""Map connectedness check."""

from __future__ import annotations

from collections import deque
from typing import Sequence

from ..errors import DisconnectedGraphError, EmptyGraphError
from .node import MapNode


def check_connectedness(nodes: Sequence[MapNode]) -> None:
    """Raise unless every node can be reached from every other node.

    Breadth-first search from the first node over the undirected neighbor
    relation. The error carries the reachable count and one node that could
    not be reached.
    """
    if not nodes:
        raise EmptyGraphError()

    first = nodes[0]
    visited = {first}
    queue = deque([first])
    while queue:
        node = queue.popleft()
        for n in node.neighbors:
            if n not in visited:
                visited.add(n)
                queue.append(n)

    if len(visited) != len(nodes):
        disconnected = next((n for n in nodes if n not in visited), None)
        raise DisconnectedGraphError(len(visited), len(nodes), first, disconnected)
