"""Map loading with a single-slot, process-wide cache."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Sequence, Tuple

from shapely.errors import ShapelyError

from ..errors import ConfigurationError, LoadError, MapBoundsError
from .connectivity import check_connectedness
from .node import MapNode
from .sim_map import SimMap
from .wkt_reader import WKTMapReader

logger = logging.getLogger(__name__)


class MapCache:
    """Holds the most recently loaded map and the files it came from.

    Only one map is kept. A lookup hits when the requested file list matches
    the cached one exactly (same length, order and names); storing replaces
    the slot wholesale.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files: Optional[Tuple[str, ...]] = None
        self._map: Optional[SimMap] = None

    def lookup(self, files: Sequence[str]) -> Optional[SimMap]:
        with self._lock:
            if self._map is None or self._files != tuple(files):
                return None
            return self._map

    def store(self, files: Sequence[str], sim_map: SimMap) -> None:
        with self._lock:
            self._files = tuple(files)
            self._map = sim_map

    def clear(self) -> None:
        with self._lock:
            self._files = None
            self._map = None

    @property
    def files(self) -> Optional[Tuple[str, ...]]:
        return self._files


DEFAULT_CACHE = MapCache()


class GraphStore:
    """Loads, validates and normalizes road maps.

    ``reader_factory`` must return a fresh reader exposing
    ``add_paths(path, map_type)`` and ``get_map()``.
    """

    def __init__(
        self,
        world_size: Tuple[float, float],
        reader_factory: Callable[[], WKTMapReader] = WKTMapReader,
        cache: Optional[MapCache] = None,
    ) -> None:
        self.world_size = world_size
        self.reader_factory = reader_factory
        self.cache = cache if cache is not None else DEFAULT_CACHE
        self.nrof_files_read = 0

    def load(self, files: Sequence[str]) -> SimMap:
        files = list(files)
        if not files:
            raise ConfigurationError("map.files", files, "at least one map file")
        if len(files) > MapNode.MAX_TYPE:
            raise ConfigurationError("map.files", len(files), f"at most {MapNode.MAX_TYPE} map files")

        cached = self.cache.lookup(files)
        if cached is not None:
            logger.debug("Map cache hit for %s", files)
            self.nrof_files_read = len(files)
            return cached

        reader = self.reader_factory()
        for index, path in enumerate(files, start=1):
            try:
                reader.add_paths(path, index)
            except OSError as e:
                raise LoadError(path, str(e)) from e
            except (ValueError, ShapelyError) as e:
                raise LoadError(path, f"parse error: {e}") from e

        sim_map = reader.get_map()
        sim_map.calc_bounds()
        check_connectedness(sim_map.nodes)
        # mirror so y grows downwards, then move the upper left corner to origin
        sim_map.mirror()
        min_x, min_y = sim_map.min_bound
        sim_map.translate(-min_x, -min_y)
        self.check_coord_validity(sim_map)

        self.nrof_files_read = len(files)
        self.cache.store(files, sim_map)
        logger.info("Loaded map from %d file(s) with %d nodes, bounds %s", len(files), len(sim_map), sim_map.max_bound)
        return sim_map

    def check_coord_validity(self, sim_map: SimMap) -> None:
        """Raise if a node lies outside ``[0, max_x] x [0, max_y]``."""
        max_x, max_y = self.world_size
        for n in sim_map.nodes:
            x, y = n.location
            if x < 0 or x > max_x or y < 0 or y > max_y:
                raise MapBoundsError(n.location, self.world_size)
