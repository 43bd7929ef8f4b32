"""Map-based Lévy walk movement.

Paths follow the roads of a :class:`SimMap`. The number of edges a path
traverses is drawn from a power law, and at every crossing the walker
prefers the road whose bearing is closest to a heading picked at the start
of the path, so paths tend to keep going the same way instead of zig-zagging
through the map.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence, Tuple

from ..config import GroupConfig
from ..errors import ConfigurationError, NotPlacedError
from ..map.node import Coord, MapNode
from ..map.sim_map import SimMap
from ..map.store import GraphStore
from .filters import NodeTypeFilter
from .path import Path
from .sampling import sample_heading, sample_speed, sample_step_budget
from .selector import select_next

logger = logging.getLogger(__name__)


def generate_path(
    cursor: Optional[MapNode],
    rng: random.Random,
    settings: GroupConfig,
    node_filter: NodeTypeFilter,
    speed: float,
) -> Tuple[Path, MapNode]:
    """Build one path starting at ``cursor``.

    Returns the path and the node it ends on, which is the cursor for the
    next call. The path has ``step budget + 1`` waypoints.
    """
    if cursor is None:
        raise NotPlacedError()

    current = previous = cursor
    heading = sample_heading(rng)
    waypoints = [current.location]
    steps = sample_step_budget(rng, settings.levy_lambda, settings.min_path_length)

    for _ in range(steps):
        nxt, heading = select_next(
            current,
            previous,
            heading,
            settings.back_allowed,
            node_filter,
            settings.permissible_error,
            rng,
            settings.max_heading_resamples,
        )
        previous, current = current, nxt
        waypoints.append(current.location)

    return Path(tuple(waypoints), speed), current


def initial_location(
    sim_map: SimMap,
    node_filter: NodeTypeFilter,
    rng: random.Random,
    max_attempts: int = 10000,
) -> Tuple[Coord, MapNode]:
    """Random point on a road: between an OK node and one of its neighbors.

    Returns the point and the OK node, which becomes the agent's cursor.
    """
    nodes = sim_map.nodes
    if not nodes:
        raise ConfigurationError("map.files", "<empty map>", "a map with nodes")
    fraction = rng.random()

    node = None
    for _ in range(max_attempts):
        candidate = nodes[rng.randrange(len(nodes))]
        if node_filter.admits(candidate):
            node = candidate
            break
    if node is None:
        ok_nodes = node_filter.select(nodes)
        if not ok_nodes:
            raise ConfigurationError("ok_maps", sorted(node_filter.types), "map types present in the loaded map")
        logger.warning("No OK node after %d random draws, choosing among %d OK nodes", max_attempts, len(ok_nodes))
        node = rng.choice(ok_nodes)

    if not node.neighbors:
        return node.location, node

    other = node.neighbors[rng.randrange(len(node.neighbors))]
    x, y = node.location
    ox, oy = other.location
    placement = (x + fraction * (ox - x), y + fraction * (oy - y))
    return placement, node


class MapBasedLevyWalk:
    """Movement model handing out Lévy walk paths along a road map."""

    def __init__(
        self,
        settings: GroupConfig,
        sim_map: SimMap,
        nrof_map_files: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        settings.validate()
        self.settings = settings
        self.map = sim_map
        self.nrof_map_files = nrof_map_files
        self.node_filter = NodeTypeFilter.from_setting(
            settings.ok_maps, nrof_map_files, setting=f"groups.{settings.group_id}.ok_maps"
        )
        self.rng = rng if rng is not None else random.Random()
        self.last_map_node: Optional[MapNode] = None

    @classmethod
    def from_config(
        cls,
        settings: GroupConfig,
        world_size: Tuple[float, float],
        map_files: Sequence[str],
        rng: Optional[random.Random] = None,
        store: Optional[GraphStore] = None,
    ) -> "MapBasedLevyWalk":
        store = store if store is not None else GraphStore(world_size)
        sim_map = store.load(map_files)
        return cls(settings, sim_map, store.nrof_files_read, rng)

    @property
    def ok_map_node_types(self):
        if self.node_filter.types is None:
            return None
        return sorted(self.node_filter.types)

    def generate_speed(self) -> float:
        return sample_speed(self.rng, self.settings.speed_m_s)

    def get_initial_location(self) -> Coord:
        location, self.last_map_node = initial_location(
            self.map, self.node_filter, self.rng, self.settings.max_placement_attempts
        )
        return location

    def get_path(self) -> Path:
        speed = self.generate_speed()
        path, self.last_map_node = generate_path(self.last_map_node, self.rng, self.settings, self.node_filter, speed)
        return path

    def get_last_location(self) -> Optional[Coord]:
        if self.last_map_node is None:
            return None
        return self.last_map_node.location

    def set_location(self, coord: Coord) -> None:
        """Move the cursor to the map node nearest to ``coord``."""
        self.last_map_node = self.map.nearest_node(coord)

    def is_ready(self) -> bool:
        return True

    def replicate(self, rng: Optional[random.Random] = None) -> "MapBasedLevyWalk":
        """Copy sharing map, filter and settings, without a cursor."""
        clone = object.__new__(type(self))
        clone.settings = self.settings
        clone.map = self.map
        clone.nrof_map_files = self.nrof_map_files
        clone.node_filter = self.node_filter
        clone.rng = rng if rng is not None else self.rng
        clone.last_map_node = None
        return clone
