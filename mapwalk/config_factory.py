"""Factory helpers to build trace configurations for scenarios."""

from __future__ import annotations

import os
from typing import List

from .config import GroupConfig, MapConfig, SimulationConfig, load_config

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
CONFIG_DIR = os.path.join(os.path.dirname(__file__), "configs")

SCENARIOS = ("baseline", "pedestrians_only", "backtracking", "narrow_heading")


def default_map_files() -> List[str]:
    return [os.path.join(DATA_DIR, "roads.wkt"), os.path.join(DATA_DIR, "main_roads.wkt")]


def load_named_config(name: str = "default") -> SimulationConfig:
    return load_config(os.path.join(CONFIG_DIR, f"{name}.yaml"))


def make_config(scenario: str = "baseline", node_count: int = 6, seed: int = 0) -> SimulationConfig:
    if scenario not in SCENARIOS:
        raise ValueError(f"Unknown scenario '{scenario}', expected one of {SCENARIOS}")

    walkers = max(1, node_count - node_count // 3)
    groups = [
        GroupConfig(
            group_id="p",
            count=walkers,
            speed_m_s=(0.5, 1.5),
            ok_maps=[1],  # side streets only
            min_path_length=2,
        ),
        GroupConfig(
            group_id="c",
            count=node_count - walkers,
            speed_m_s=(2.7, 13.9),
            min_path_length=5,
            levy_lambda=1.5,
        ),
    ]

    config = SimulationConfig(
        world_size=(500, 500),
        map=MapConfig(files=default_map_files()),
        groups=groups,
        seed=seed,
        paths_per_node=10,
    )

    if scenario == "pedestrians_only":
        config.groups = [groups[0]]
        groups[0].count = node_count
    elif scenario == "backtracking":
        for group in config.groups:
            group.back_allowed = True
    elif scenario == "narrow_heading":
        # only roads within 45 degrees of the heading are taken
        for group in config.groups:
            group.permissible_error = 45.0

    config.validate()
    return config
