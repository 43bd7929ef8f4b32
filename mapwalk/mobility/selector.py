"""Heading-biased choice of the next map node."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

from ..map.node import MapNode
from .filters import NodeTypeFilter
from .geometry import angular_error
from .sampling import sample_heading

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESAMPLES = 1000


def minimum_error_node(heading: float, candidates: Sequence[MapNode], own: MapNode) -> MapNode:
    """Candidate whose bearing is closest to ``heading``; first one wins ties."""
    best = candidates[0]
    best_error = angular_error(heading, own, best)
    for n in candidates[1:]:
        error = angular_error(heading, own, n)
        if error < best_error:
            best, best_error = n, error
    return best


def select_next(
    current: MapNode,
    previous: MapNode,
    heading: float,
    back_allowed: bool,
    node_filter: NodeTypeFilter,
    permissible_error: float,
    rng: random.Random,
    max_resamples: int = DEFAULT_MAX_RESAMPLES,
) -> Tuple[MapNode, float]:
    """Pick the neighbor of ``current`` that best follows ``heading``.

    Returns the chosen node and the heading in effect after the choice,
    which differs from ``heading`` when no neighbor was within
    ``permissible_error`` and the heading had to be redrawn. After
    ``max_resamples`` fruitless redraws the minimal-error neighbor under the
    latest heading is taken.
    """
    candidates: List[MapNode] = list(current.neighbors)
    if not back_allowed and previous in candidates:
        candidates.remove(previous)
    candidates = node_filter.select(candidates)

    if not candidates:
        # stuck; going back is always allowed
        return previous, heading

    resamples = 0
    while True:
        possible = [n for n in candidates if angular_error(heading, current, n) < permissible_error]
        if possible:
            return minimum_error_node(heading, possible, current), heading
        if resamples >= max_resamples:
            logger.warning(
                "No neighbor of %s within %.1f degrees after %d heading draws; taking the closest one",
                current,
                permissible_error,
                resamples,
            )
            return minimum_error_node(heading, candidates, current), heading
        heading = sample_heading(rng)
        resamples += 1
