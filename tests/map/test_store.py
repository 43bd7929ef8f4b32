"""Tests for mapwalk.map.store."""

from __future__ import annotations

import pytest
from shapely.errors import ShapelyError

from mapwalk.errors import ConfigurationError, DisconnectedGraphError, LoadError, MapBoundsError
from mapwalk.map import DEFAULT_CACHE, GraphStore, MapCache, WKTMapReader

MAPS = {
    "a.wkt": "LINESTRING (0 0, 10 0, 10 10)",
    "b.wkt": "LINESTRING (10 10, 20 10)",
    "c.wkt": "LINESTRING (0 0, 0 10)",
}


class CountingReader(WKTMapReader):
    """Reads from MAPS instead of the file system and counts reads."""

    calls = 0

    def add_paths(self, path: str, map_type: int) -> None:
        type(self).calls += 1
        if path not in MAPS:
            raise FileNotFoundError(path)
        self.add_paths_from_text(MAPS[path], map_type)


@pytest.fixture(autouse=True)
def reset_counter():
    CountingReader.calls = 0


@pytest.fixture
def store(cache: MapCache) -> GraphStore:
    return GraphStore((100, 100), reader_factory=CountingReader, cache=cache)


class TestCache:
    def test_same_files_return_cached_instance(self, store: GraphStore) -> None:
        first = store.load(["a.wkt", "b.wkt"])
        assert CountingReader.calls == 2
        second = store.load(["a.wkt", "b.wkt"])
        assert second is first
        assert CountingReader.calls == 2
        assert store.nrof_files_read == 2

    def test_cache_shared_between_stores(self, cache: MapCache) -> None:
        one = GraphStore((100, 100), reader_factory=CountingReader, cache=cache)
        two = GraphStore((100, 100), reader_factory=CountingReader, cache=cache)
        assert one.load(["a.wkt"]) is two.load(["a.wkt"])
        assert CountingReader.calls == 1

    @pytest.mark.parametrize(
        "second_request",
        [["b.wkt", "a.wkt"], ["a.wkt"], ["a.wkt", "c.wkt"], ["a.wkt", "b.wkt", "c.wkt"]],
    )
    def test_different_request_reloads(self, store: GraphStore, cache: MapCache, second_request) -> None:
        first = store.load(["a.wkt", "b.wkt"])
        second = store.load(second_request)
        assert second is not first
        assert cache.files == tuple(second_request)
        assert CountingReader.calls == 2 + len(second_request)
        assert store.nrof_files_read == len(second_request)

    def test_default_cache_used_when_none_given(self) -> None:
        assert GraphStore((1, 1)).cache is DEFAULT_CACHE

    def test_clear(self, store: GraphStore, cache: MapCache) -> None:
        store.load(["a.wkt"])
        cache.clear()
        assert cache.lookup(["a.wkt"]) is None


class TestLoad:
    def test_mirrored_and_moved_to_origin(self, tmp_path, cache: MapCache) -> None:
        path = tmp_path / "roads.wkt"
        path.write_text("LINESTRING (10 20, 30 20, 30 60)", encoding="utf-8")
        sim_map = GraphStore((100, 100), cache=cache).load([str(path)])
        locations = [n.location for n in sim_map.nodes]
        assert locations == [(0.0, 40.0), (20.0, 40.0), (20.0, 0.0)]
        assert sim_map.min_bound == (0.0, 0.0)
        assert sim_map.max_bound == (20.0, 40.0)

    def test_nodes_tagged_by_file_index(self, store: GraphStore) -> None:
        sim_map = store.load(["a.wkt", "b.wkt"])
        types = sorted(n.types for n in sim_map.nodes)
        assert types == [(1,), (1,), (1, 2), (2,)]

    def test_out_of_world_bounds(self, cache: MapCache) -> None:
        store = GraphStore((5, 5), reader_factory=CountingReader, cache=cache)
        with pytest.raises(MapBoundsError) as info:
            store.load(["a.wkt"])
        assert isinstance(info.value, ConfigurationError)
        assert cache.files is None

    def test_missing_file(self, tmp_path, cache: MapCache) -> None:
        with pytest.raises(LoadError) as info:
            GraphStore((100, 100), cache=cache).load([str(tmp_path / "nope.wkt")])
        assert isinstance(info.value.__cause__, OSError)

    def test_parse_error(self, tmp_path, cache: MapCache) -> None:
        path = tmp_path / "broken.wkt"
        path.write_text("LINESTRING (0 0, x 1)", encoding="utf-8")
        with pytest.raises(LoadError, match="broken.wkt") as info:
            GraphStore((100, 100), cache=cache).load([str(path)])
        assert isinstance(info.value.__cause__, ShapelyError)

    def test_loads_3d_lines(self, tmp_path, cache: MapCache) -> None:
        path = tmp_path / "roads3d.wkt"
        path.write_text("LINESTRING Z (0 0 5, 10 0 5, 10 10 5)\n", encoding="utf-8")
        sim_map = GraphStore((100, 100), cache=cache).load([str(path)])
        assert len(sim_map) == 3

    def test_disconnected_map(self, store: GraphStore) -> None:
        MAPS["far.wkt"] = "LINESTRING (50 50, 60 60)"
        try:
            with pytest.raises(DisconnectedGraphError):
                store.load(["a.wkt", "far.wkt"])
        finally:
            del MAPS["far.wkt"]

    def test_no_files(self, store: GraphStore) -> None:
        with pytest.raises(ConfigurationError):
            store.load([])

    def test_too_many_files(self, store: GraphStore) -> None:
        with pytest.raises(ConfigurationError):
            store.load(["a.wkt"] * 32)
