"""Loot roll evaluation.

This module turns a list of drops into a concrete reward list: one weighted
pick per drop, a random stack size, and optional item modification.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, TYPE_CHECKING

from models import Drop, Item
from paths import resolve_strict
from sampler import WeightedSampler
from utils import RandomProvider

if TYPE_CHECKING:
    from catalog import Catalog

logger = logging.getLogger(__name__)


class DropCalculator:
    """Evaluates drops against a catalog with a single randomness source.

    The sampler, stack sizes and modifier choices all draw from
    `random_provider`, so one seeded provider reproduces a whole evaluation.
    """

    def __init__(self, random_provider: RandomProvider) -> None:
        self.random_provider = random_provider
        self.sampler = WeightedSampler(random_provider)

    def loot(self, root: Catalog, drops: Sequence[Drop]) -> List[Item]:
        """Roll every drop in order and collect the rewards.

        Args:
            root: Node the drops are evaluated on; its modifiers are the only
                ones consulted, whichever branch a drop targets
            drops: Drops to evaluate, in order

        Returns:
            Reward copies, in drop order then copy order

        Raises:
            PathNotFoundError: A drop names a branch that does not exist
        """
        rewards: List[Item] = []
        for drop in drops:
            rewards.extend(self.roll_drop(root, drop))
        return rewards

    def roll_drop(self, root: Catalog, drop: Drop) -> List[Item]:
        """Evaluate a single drop; an empty list means nothing was found."""
        target = root if drop.path is None else resolve_strict(root, drop.path)

        picked = self.sampler.pick(target, drop.depth, drop.luck)
        if picked is None:
            logger.debug("Drop %r found nothing", drop)
            return []

        low, high = drop.stack
        stack = self.random_provider.randint(low, high)

        copies: List[Item] = []
        for _ in range(stack):
            reward = picked.copy()
            if drop.modify and root.modifiers:
                modifier = self.random_provider.choice(root.modifiers)
                reward = modifier(reward)
            copies.append(reward)

        logger.debug("Drop %r yielded %d x %s", drop, stack, picked.name)
        return copies
