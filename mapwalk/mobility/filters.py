"""Restricts which map node types a node group may traverse."""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Sequence, Union

from ..errors import ConfigurationError
from ..map.node import MapNode

OkMapsSetting = Union[None, str, int, Sequence[int]]


class NodeTypeFilter:
    """Admits map nodes of the configured types, or all nodes if unset."""

    def __init__(self, types: Optional[Iterable[int]] = None) -> None:
        self.types: Optional[FrozenSet[int]] = frozenset(types) if types is not None else None

    @classmethod
    def from_setting(cls, value: OkMapsSetting, nrof_map_files: int, setting: str = "ok_maps") -> "NodeTypeFilter":
        """Build a filter from an ``ok_maps`` style setting.

        ``value`` may be ``None`` (everything allowed), a comma separated
        string such as ``"1,3"`` or a sequence of ints. Each type must lie in
        ``[1, 31]`` and must not exceed the number of map files read.
        """
        if value is None:
            return cls()
        if isinstance(value, str):
            raw: List = [v.strip() for v in value.split(",") if v.strip()]
        elif isinstance(value, int):
            raw = [value]
        else:
            raw = list(value)

        types = []
        for item in raw:
            try:
                t = int(item)
            except (TypeError, ValueError):
                raise ConfigurationError(setting, item, "comma separated integers") from None
            if isinstance(item, float) and t != item:
                raise ConfigurationError(setting, item, "comma separated integers")
            if t < MapNode.MIN_TYPE or t > MapNode.MAX_TYPE:
                raise ConfigurationError(setting, t, f"a map type in [{MapNode.MIN_TYPE}, {MapNode.MAX_TYPE}]")
            if t > nrof_map_files:
                raise ConfigurationError(
                    setting, t, f"a map type <= {nrof_map_files} because only {nrof_map_files} map files are read"
                )
            types.append(t)
        return cls(types)

    @property
    def unrestricted(self) -> bool:
        return self.types is None

    def admits(self, node: MapNode) -> bool:
        return self.types is None or node.is_type(self.types)

    def select(self, nodes: Iterable[MapNode]) -> List[MapNode]:
        return [n for n in nodes if self.admits(n)]

    def __repr__(self) -> str:
        if self.types is None:
            return "NodeTypeFilter(all)"
        return f"NodeTypeFilter({sorted(self.types)})"
