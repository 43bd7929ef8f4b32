"""Generates Lévy walk traces for every node of a configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config import SimulationConfig
from ..environment import SimulationEnvironment
from ..map.node import Coord
from ..map.store import GraphStore, MapCache
from ..mobility import MapBasedLevyWalk, Path

logger = logging.getLogger(__name__)


@dataclass
class NodeTrace:
    node_id: str
    group_id: str
    initial_location: Coord
    paths: List[Path] = field(default_factory=list)


@dataclass
class TraceResult:
    name: str
    seed: int
    world_size: tuple
    traces: Dict[str, NodeTrace] = field(default_factory=dict)


class TraceRunner:
    """Places every configured node on the map and collects its paths."""

    def __init__(self, config: SimulationConfig, cache: Optional[MapCache] = None) -> None:
        config.validate()
        self.config = config
        self.store = GraphStore(config.world_size, cache=cache)

    def run(self, name: str = "run", paths_per_node: Optional[int] = None) -> TraceResult:
        cfg = self.config
        count = cfg.paths_per_node if paths_per_node is None else paths_per_node
        env = SimulationEnvironment(seed=cfg.seed)
        sim_map = self.store.load(cfg.map.files)
        result = TraceResult(name=name, seed=cfg.seed, world_size=tuple(cfg.world_size))

        for group in cfg.groups:
            # one prototype per group so ok_maps is validated once
            prototype = MapBasedLevyWalk(group, sim_map, self.store.nrof_files_read, env.rng_for(group.group_id))
            for idx in range(group.count):
                node_id = f"{group.group_id}:{idx}"
                model = prototype.replicate(env.rng_for(node_id))
                trace = NodeTrace(node_id, group.group_id, model.get_initial_location())
                for _ in range(count):
                    trace.paths.append(model.get_path())
                result.traces[node_id] = trace
            logger.info("Group %s: %d node(s), %d path(s) each", group.group_id, group.count, count)

        return result
