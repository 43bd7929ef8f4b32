"""Tests for trace runs, export and the command line."""

from __future__ import annotations

import csv
import json
from dataclasses import replace

import pytest

from mapwalk.cli import build_parser, main
from mapwalk.config_factory import make_config
from mapwalk.environment import SimulationEnvironment
from mapwalk.experiments import TraceRunner
from mapwalk.map import MapCache
from mapwalk.utils import export_traces, summarize


@pytest.fixture
def result(cache: MapCache):
    return TraceRunner(make_config("baseline", node_count=3, seed=5), cache=cache).run("baseline", paths_per_node=3)


class TestTraceRunner:
    def test_every_node_gets_paths(self, result) -> None:
        assert sorted(result.traces) == ["c:0", "p:0", "p:1"]
        for trace in result.traces.values():
            assert len(trace.paths) == 3
            assert trace.paths[1].waypoints[0] == trace.paths[0].waypoints[-1]
            assert trace.paths[2].waypoints[0] == trace.paths[1].waypoints[-1]

    def test_same_seed_same_traces(self, result) -> None:
        again = TraceRunner(make_config("baseline", node_count=3, seed=5), cache=MapCache()).run(
            "baseline", paths_per_node=3
        )
        for node_id, trace in result.traces.items():
            assert again.traces[node_id].paths == trace.paths
            assert again.traces[node_id].initial_location == trace.initial_location

    def test_other_seed_differs(self, result, cache: MapCache) -> None:
        other = TraceRunner(make_config("baseline", node_count=3, seed=6), cache=cache).run(
            "baseline", paths_per_node=3
        )
        assert any(other.traces[n].paths != t.paths for n, t in result.traces.items())

    def test_group_ids_sharing_a_prefix_keep_every_node(self, cache: MapCache) -> None:
        config = make_config("baseline", node_count=2)
        walker = config.groups[0]
        config.groups = [replace(walker, group_id="p", count=11), replace(walker, group_id="p1", count=1)]
        result = TraceRunner(config, cache=cache).run(paths_per_node=1)
        assert len(result.traces) == 12
        assert result.traces["p:10"].group_id == "p"
        assert result.traces["p1:0"].group_id == "p1"

    def test_map_loaded_once(self, cache: MapCache) -> None:
        config = make_config("baseline", node_count=2)
        runner = TraceRunner(config, cache=cache)
        runner.run(paths_per_node=0)
        first = cache.lookup(config.map.files)
        runner.run(paths_per_node=0)
        assert cache.lookup(config.map.files) is first


def test_named_streams_are_independent() -> None:
    env = SimulationEnvironment(seed=1)
    a = env.rng_for("a")
    assert env.rng_for("a") is a
    first = a.random()
    other = SimulationEnvironment(seed=1)
    other.rng_for("b").random()
    assert other.rng_for("a").random() == first


def test_summarize(result) -> None:
    summary = summarize(result)
    assert summary.nodes == 3
    assert summary.paths == 9
    assert summary.max_edges >= 2
    assert summary.mean_length > 0


def test_export(result, tmp_path) -> None:
    written = export_traces(result, str(tmp_path))
    with open(written["json"], encoding="utf-8") as f:
        data = json.load(f)
    assert data["run_meta"]["seed"] == 5
    assert {n["id"] for n in data["nodes"]} == {"c:0", "p:0", "p:1"}
    with open(written["csv"], newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    waypoints = sum(len(p) for t in result.traces.values() for p in t.paths)
    assert rows[0][0] == "node"
    assert len(rows) == waypoints + 1


def test_cli_exports(tmp_path) -> None:
    assert main(["--scenario", "narrow_heading", "--nodes", "2", "--paths", "2", "--out", str(tmp_path)]) == 0
    assert len(list(tmp_path.glob("traces-narrow_heading-*.json"))) == 1


def test_cli_reports_config_errors(tmp_path) -> None:
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1


def test_cli_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit) as info:
        main(["--log-level", "loud"])
    assert info.value.code == 2


def test_cli_log_level_is_case_insensitive() -> None:
    assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"
