"""Export generated traces to JSON/CSV."""

from __future__ import annotations

import csv
import datetime
import json
import os
from typing import Any, Dict

from ..experiments.runner import TraceResult


def export_traces(result: TraceResult, directory: str = "exports", run_meta: Dict[str, Any] | None = None) -> Dict[str, str]:
    """
    Write ``result`` as one JSON document plus a flat waypoint CSV.

    Returns paths of the JSON and CSV files written.
    """
    os.makedirs(directory, exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")

    run_meta = dict(run_meta or {})
    run_meta.setdefault("seed", result.seed)

    data = {
        "timestamp": ts,
        "name": result.name,
        "world_size": list(result.world_size),
        "run_meta": run_meta,
        "nodes": [
            {
                "id": trace.node_id,
                "group": trace.group_id,
                "initial_location": list(trace.initial_location),
                "paths": [p.to_dict() for p in trace.paths],
            }
            for trace in result.traces.values()
        ],
    }

    json_path = os.path.join(directory, f"traces-{result.name}-{ts}.json")
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    csv_path = os.path.join(directory, f"traces-{result.name}-{ts}.csv")
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["node", "group", "path", "waypoint", "x", "y", "speed"])
        for trace in result.traces.values():
            for p_idx, path in enumerate(trace.paths):
                for w_idx, (x, y) in enumerate(path.waypoints):
                    writer.writerow([trace.node_id, trace.group_id, p_idx, w_idx, x, y, path.speed])

    return {"json": json_path, "csv": csv_path}
