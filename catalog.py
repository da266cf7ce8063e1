"""Catalog trees: items organised into named branches.

A Catalog is one node of the tree. It owns its items, its child branches and
the modifiers registered on it, and is the entry point for rolling and
looting.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

import config
from drop_calculator import DropCalculator
from models import Drop, Item, Modifier
from paths import resolve, resolve_strict
from sampler import WeightedSampler
from ui import format_catalog
from utils import DefaultRandomProvider, RandomProvider

logger = logging.getLogger(__name__)


class Catalog:
    """A loot bag: items at this level plus named sub-bags.

    Example:
        bag = Catalog([Item("Staff")])
        bag.attach("weapons", Catalog([Item("Bat"), Item("Uzi")]))
        bag.loot([Drop(path="weapons", stack=(1, 3))])
    """

    def __init__(self, items: Optional[Iterable[Item]] = None) -> None:
        self._items: List[Item] = list(items or [])
        self._branches: Dict[str, Catalog] = {}
        self._modifiers: List[Modifier] = []

    def __repr__(self) -> str:
        return f"Catalog(items={self.self_count()}, branches={list(self._branches)})"

    def __str__(self) -> str:
        return format_catalog(self)

    @property
    def items(self) -> List[Item]:
        return self._items

    @property
    def branches(self) -> Dict[str, Catalog]:
        return self._branches

    @property
    def modifiers(self) -> List[Modifier]:
        return self._modifiers

    def self_count(self) -> int:
        return len(self._items)

    def all_count(self) -> int:
        return self.self_count() + sum(branch.all_count() for branch in self._branches.values())

    def all_items(self) -> List[Item]:
        """Every item here and below: this level first, then each branch in order."""
        collected = list(self._items)
        for branch in self._branches.values():
            collected.extend(branch.all_items())
        return collected

    def contains(self, node: Catalog) -> bool:
        """Whether `node` is this node or any node below it."""
        pending = [self]
        while pending:
            current = pending.pop()
            if current is node:
                return True
            pending.extend(current.branches.values())
        return False

    # -- mutation ---------------------------------------------------------

    def add(self, item: Item) -> Catalog:
        self._items.append(item)
        return self

    def add_in(self, item: Item, path: str) -> Catalog:
        """Add an item to an existing branch.

        Raises:
            PathNotFoundError: The branch does not exist
        """
        resolve_strict(self, path).add(item)
        return self

    def attach(self, name: str, subtree: Catalog) -> Catalog:
        """Attach a subtree under `name`, replacing any branch already there.

        Raises:
            ValueError: `subtree` is this node or already contains it
        """
        if subtree.contains(self):
            raise ValueError(f"Cannot attach {name!r}: the subtree contains this node")
        if name in self._branches:
            logger.debug("Replacing branch %r", name)
        self._branches[name] = subtree
        return self

    def add_modifier(self, modifier: Modifier) -> Catalog:
        self._modifiers.append(modifier)
        return self

    # -- lookup -----------------------------------------------------------

    def branch(self, path: str) -> Optional[Catalog]:
        """Return the branch at `path`, or None if it does not exist.

        Raises:
            PathNotFoundError: An intermediate segment of a multi-segment path
                is missing
        """
        return resolve(self, path)

    # -- rolling ----------------------------------------------------------

    def roll(
        self,
        path: Optional[str] = None,
        depth: int = config.DEFAULT_DROP_DEPTH,
        threshold: float = config.DEFAULT_DROP_LUCK,
        random_provider: Optional[RandomProvider] = None,
    ) -> Optional[Item]:
        """Pick one random item.

        Args:
            path: Branch to roll in, or None for this node
            depth: Maximum number of branch levels to descend
            threshold: Starting chance for a level's items to be candidates
            random_provider: Source of randomness; process entropy if omitted

        Returns:
            A copy of the picked item, or None if nothing was found
        """
        target = self if path is None else resolve_strict(self, path)
        sampler = WeightedSampler(_provider_or_default(random_provider))
        picked = sampler.pick(target, depth, threshold)
        return picked.copy() if picked is not None else None

    def roll_any(self, random_provider: Optional[RandomProvider] = None) -> Optional[Item]:
        """Pick from anywhere in this subtree, with every level eligible."""
        return self.roll(None, config.MAX_DEPTH, 1.0, random_provider)

    def loot(
        self,
        drops: Sequence[Drop],
        random_provider: Optional[RandomProvider] = None,
    ) -> List[Item]:
        """Roll against a loot table and return the rewards.

        Modifiers registered on this node apply to every drop flagged
        `modify`, whatever branch the drop targets.
        """
        calculator = DropCalculator(_provider_or_default(random_provider))
        return calculator.loot(self, drops)


def _provider_or_default(random_provider: Optional[RandomProvider]) -> RandomProvider:
    if random_provider is None:
        return DefaultRandomProvider()
    return random_provider
