"""Utility helpers for trace runs."""

from .exporter import export_traces
from .stats import TraceSummary, summarize

__all__ = [
    "export_traces",
    "summarize",
    "TraceSummary",
]
