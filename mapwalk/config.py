"""Configuration dataclasses for map-based Lévy walk traces."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import yaml

from .errors import ConfigurationError
from .map.node import MapNode


@dataclass
class MapConfig:
    files: List[str]  # one WKT file per map type, type i is files[i - 1]


@dataclass
class GroupConfig:
    group_id: str
    count: int = 1
    speed_m_s: Tuple[float, float] = (0.5, 1.5)
    ok_maps: Union[None, str, List[int]] = None  # None: every map type is OK
    min_path_length: int = 10
    max_path_length: int = 100
    levy_lambda: float = 1.2
    permissible_error: float = 180.0  # degrees
    back_allowed: bool = False
    max_heading_resamples: int = 1000
    max_placement_attempts: int = 10000

    def validate(self) -> None:
        prefix = f"groups.{self.group_id}"
        if not self.group_id or ":" in self.group_id:
            raise ConfigurationError(prefix, self.group_id, "a non-empty group id without ':'")
        if self.count < 0:
            raise ConfigurationError(f"{prefix}.count", self.count, "a non-negative integer")
        lo, hi = self.speed_m_s
        if lo < 0 or hi < lo:
            raise ConfigurationError(f"{prefix}.speed_m_s", self.speed_m_s, "0 <= min <= max")
        if self.min_path_length < 1:
            raise ConfigurationError(f"{prefix}.min_path_length", self.min_path_length, "a positive integer")
        if self.max_path_length < self.min_path_length:
            raise ConfigurationError(
                f"{prefix}.max_path_length", self.max_path_length, f">= min_path_length ({self.min_path_length})"
            )
        if not self.levy_lambda > 0 or math.isinf(self.levy_lambda):
            raise ConfigurationError(f"{prefix}.levy_lambda", self.levy_lambda, "a positive finite number")
        if not self.permissible_error > 0:
            raise ConfigurationError(f"{prefix}.permissible_error", self.permissible_error, "degrees > 0")
        if self.max_heading_resamples < 0:
            raise ConfigurationError(
                f"{prefix}.max_heading_resamples", self.max_heading_resamples, "a non-negative integer"
            )
        if self.max_placement_attempts < 1:
            raise ConfigurationError(
                f"{prefix}.max_placement_attempts", self.max_placement_attempts, "a positive integer"
            )


@dataclass
class SimulationConfig:
    world_size: Tuple[float, float]
    map: MapConfig
    groups: List[GroupConfig]
    seed: int = 0
    paths_per_node: int = 10

    def validate(self) -> None:
        max_x, max_y = self.world_size
        if max_x <= 0 or max_y <= 0:
            raise ConfigurationError("world_size", self.world_size, "two positive numbers")
        if not self.map.files:
            raise ConfigurationError("map.files", self.map.files, "at least one map file")
        if len(self.map.files) > MapNode.MAX_TYPE:
            raise ConfigurationError("map.files", len(self.map.files), f"at most {MapNode.MAX_TYPE} map files")
        if self.paths_per_node < 0:
            raise ConfigurationError("paths_per_node", self.paths_per_node, "a non-negative integer")
        seen = set()
        for group in self.groups:
            if group.group_id in seen:
                raise ConfigurationError("groups", group.group_id, "unique group ids")
            seen.add(group.group_id)
            group.validate()


def _as_pair(name: str, value: Any) -> Tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigurationError(name, value, "a [x, y] pair")
    try:
        return float(value[0]), float(value[1])
    except (TypeError, ValueError):
        raise ConfigurationError(name, value, "a pair of numbers") from None


_INT_SETTINGS = ("count", "min_path_length", "max_path_length", "max_heading_resamples", "max_placement_attempts")
_FLOAT_SETTINGS = ("levy_lambda", "permissible_error")


def _as_number(name: str, value: Any, kind: type) -> Union[int, float]:
    """Coerce ``value`` to ``kind``; YAML 1.1 reads values like ``1e-1`` as strings."""
    if isinstance(value, bool):
        raise ConfigurationError(name, value, "a number, not a boolean")
    if kind is int and isinstance(value, (int, str)):
        try:
            return int(value)
        except ValueError:
            pass
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(name, value, "a number") from None
    if kind is int:
        if not number.is_integer():
            raise ConfigurationError(name, value, "an integer")
        return int(number)
    return number


def config_from_dict(data: Dict[str, Any], base_dir: Optional[str] = None) -> SimulationConfig:
    """Build and validate a :class:`SimulationConfig` from plain data.

    Relative map file paths are resolved against ``base_dir`` when given.
    """
    if not isinstance(data, dict):
        raise ConfigurationError("<root>", data, "a mapping")
    try:
        map_data = data["map"]
        raw_groups: Sequence[Dict[str, Any]] = data.get("groups") or []
        world_size = _as_pair("world_size", data["world_size"])
    except KeyError as e:
        raise ConfigurationError(str(e.args[0]), None, "a value") from None

    files = list(map_data.get("files") or []) if isinstance(map_data, dict) else []
    if base_dir is not None:
        files = [f if os.path.isabs(f) else os.path.join(base_dir, f) for f in files]

    groups = []
    for idx, raw in enumerate(raw_groups):
        raw = dict(raw)
        group_id = str(raw.pop("group_id", f"group{idx}"))
        if "speed_m_s" in raw:
            raw["speed_m_s"] = _as_pair(f"groups.{group_id}.speed_m_s", raw["speed_m_s"])
        for key in _INT_SETTINGS + _FLOAT_SETTINGS:
            if key in raw:
                kind = int if key in _INT_SETTINGS else float
                raw[key] = _as_number(f"groups.{group_id}.{key}", raw[key], kind)
        if "back_allowed" in raw and not isinstance(raw["back_allowed"], bool):
            raise ConfigurationError(f"groups.{group_id}.back_allowed", raw["back_allowed"], "true or false")
        try:
            groups.append(GroupConfig(group_id=group_id, **raw))
        except TypeError as e:
            raise ConfigurationError(f"groups.{group_id}", sorted(raw), f"known group settings ({e})") from None

    config = SimulationConfig(
        world_size=world_size,
        map=MapConfig(files=files),
        groups=groups,
        seed=_as_number("seed", data.get("seed", 0), int),
        paths_per_node=_as_number("paths_per_node", data.get("paths_per_node", 10), int),
    )
    config.validate()
    return config


def load_config(path: str) -> SimulationConfig:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError("config", path, f"a valid YAML document ({e})") from e
    return config_from_dict(data, base_dir=os.path.dirname(os.path.abspath(path)))
