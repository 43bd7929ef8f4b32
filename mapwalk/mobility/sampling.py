"""Random draws used by the Lévy walk: heading, step budget and speed."""

from __future__ import annotations

import math
import random
from typing import Tuple

from ..errors import SamplingInvariantError

LEVY_CAP = 10000


def sample_heading(rng: random.Random) -> float:
    """Whole-degree compass heading, uniform over [0, 360)."""
    return float(rng.randrange(360))


def levy_value(rng: random.Random, lam: float) -> float:
    """Draw ``u ** (-1/lam)`` for a uniform ``u``, clamped to ``LEVY_CAP``.

    The result is never below 1 for ``u`` in [0, 1) and ``lam`` > 0; anything
    else means the random source or the arithmetic is broken and raises
    :class:`SamplingInvariantError`.
    """
    u = rng.random()
    value = math.inf if u == 0.0 else u ** (-1.0 / lam)
    if not value >= 1.0:
        raise SamplingInvariantError(value, u, lam)
    return min(value, float(LEVY_CAP))


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def sample_step_budget(rng: random.Random, lam: float, min_path_length: int) -> int:
    """Number of edges for the next path: ``round(min_path_length * levy)``."""
    return min(round_half_up(min_path_length * levy_value(rng, lam)), LEVY_CAP)


def sample_speed(rng: random.Random, speed_range: Tuple[float, float]) -> float:
    lo, hi = speed_range
    return lo + (hi - lo) * rng.random()
