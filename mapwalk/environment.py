"""Seeded random streams shared by the models of one run.

Each movement model gets its own ``random.Random`` derived from the run seed
and a stream name, so one node's draws never shift another node's sequence
and a run can be replayed exactly from its seed.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict


@dataclass
class SimulationEnvironment:
    """Hands out named, reproducible random streams for a run."""

    seed: int = 0

    def __post_init__(self) -> None:
        self._streams: Dict[str, random.Random] = {}

    def rng_for(self, name: str) -> random.Random:
        """Random stream for ``name``; the same name returns the same stream."""
        stream = self._streams.get(name)
        if stream is None:
            stream = random.Random(f"{self.seed}:{name}")
            self._streams[name] = stream
        return stream
