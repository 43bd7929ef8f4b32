"""Statistical helper functions."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..experiments.runner import TraceResult


@dataclass
class TraceSummary:
    """Summary statistics for a completed trace run."""
    name: str
    nodes: int
    paths: int
    mean_edges: float
    max_edges: int
    mean_length: float
    mean_speed: float


def summarize(result: TraceResult) -> TraceSummary:
    """Compute summary statistics over every path of a run."""
    paths = [p for trace in result.traces.values() for p in trace.paths]
    if not paths:
        return TraceSummary(
            name=result.name,
            nodes=len(result.traces),
            paths=0,
            mean_edges=0.0,
            max_edges=0,
            mean_length=0.0,
            mean_speed=0.0,
        )

    edges = np.array([len(p) - 1 for p in paths])
    return TraceSummary(
        name=result.name,
        nodes=len(result.traces),
        paths=len(paths),
        mean_edges=float(edges.mean()),
        max_edges=int(edges.max()),
        mean_length=float(np.mean([p.length for p in paths])),
        mean_speed=float(np.mean([p.speed for p in paths])),
    )


__all__ = ["summarize", "TraceSummary"]
