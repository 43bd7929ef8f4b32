"""Trace generation runs."""

from mapwalk.experiments.runner import NodeTrace, TraceResult, TraceRunner

__all__ = ["NodeTrace", "TraceResult", "TraceRunner"]
