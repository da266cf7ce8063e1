"""Weighted random sampling over a catalog tree.

Each level of the tree gets a chance to put one of its own items into a
candidate pool. The chance starts at the caller's threshold and shrinks by a
random decay factor for every branch level descended. One item is then drawn
uniformly from everything collected.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, TYPE_CHECKING

import config
from models import Item
from utils import RandomProvider

if TYPE_CHECKING:
    from catalog import Catalog

logger = logging.getLogger(__name__)


def decay_threshold(threshold: float, decay: float) -> float:
    """Apply one level of decay to a threshold.

    The product is clamped to [0, 1] and rounded half away from zero to
    config.THRESHOLD_PRECISION decimal places. A NaN product counts as 0.0.
    """
    scale = 10 ** config.THRESHOLD_PRECISION
    product = threshold * decay
    if math.isnan(product):
        return 0.0
    clamped = min(max(product, 0.0), 1.0)
    # clamped >= 0, so floor(x + 0.5) rounds half away from zero
    return math.floor(clamped * scale + 0.5) / scale


class WeightedSampler:
    """Picks at most one item from a catalog subtree.

    The order of random draws is fixed so that a seeded provider replays
    exactly:
        1. random() against the threshold, only if the node owns items,
           followed by choice() over its items when the draw succeeds
        2. when nesting > 0, for each branch in insertion order: uniform()
           for the decay factor, then the branch's own draws
        3. choice() over the candidate pool, only if it is non-empty
    """

    def __init__(self, random_provider: RandomProvider) -> None:
        self.random_provider = random_provider

    def pick(self, node: Catalog, nesting: int, threshold: float) -> Optional[Item]:
        """Pick an item from node and up to `nesting` levels of its branches.

        Args:
            node: Subtree to sample
            nesting: Remaining number of branch levels to descend
            threshold: Probability that node's own items join the pool

        Returns:
            The catalog's item (not a copy), or None if the pool stayed empty
        """
        pool: List[Item] = []

        if node.items and self.random_provider.random() < threshold:
            pool.append(self.random_provider.choice(node.items))

        if nesting > 0:
            for name, branch in node.branches.items():
                decay = self.random_provider.uniform(config.DECAY_MIN, config.DECAY_MAX)
                branch_threshold = decay_threshold(threshold, decay)
                candidate = self.pick(branch, nesting - 1, branch_threshold)
                if candidate is not None:
                    logger.debug("Branch %r offered %s (threshold %.2f)", name, candidate.name, branch_threshold)
                    pool.append(candidate)

        if not pool:
            return None
        return self.random_provider.choice(pool)
