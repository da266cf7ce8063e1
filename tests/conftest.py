"""Shared fixtures for the catalog tests."""

from typing import Any, List, Sequence

import pytest

from catalog import Catalog
from models import Item
from utils import SeededRandomProvider


def build_stocked_catalog() -> Catalog:
    """Root `Staff`; weapons; equipment -> leather -> Scraps."""
    catalog = Catalog([Item("Staff")])
    catalog.attach("weapons", Catalog([Item("Bat"), Item("Uzi")]))
    catalog.attach("equipment", Catalog([Item("Gloves"), Item("Boots")]))
    catalog.branch("equipment").attach("leather", Catalog([Item("Jacket"), Item("Pads")]))
    catalog.branch("equipment/leather").attach("Scraps", Catalog([Item("ArmBand"), Item("Patch")]))
    return catalog


class RecordingRandomProvider:
    """Wraps a seeded provider and logs the name of every draw."""

    def __init__(self, seed: int = 0) -> None:
        self._inner = SeededRandomProvider(seed)
        self.calls: List[str] = []

    def random(self) -> float:
        self.calls.append("random")
        return self._inner.random()

    def uniform(self, a: float, b: float) -> float:
        self.calls.append("uniform")
        return self._inner.uniform(a, b)

    def randint(self, a: int, b: int) -> int:
        self.calls.append("randint")
        return self._inner.randint(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        self.calls.append("choice")
        return self._inner.choice(seq)


@pytest.fixture
def stocked() -> Catalog:
    return build_stocked_catalog()


@pytest.fixture
def recorder() -> RecordingRandomProvider:
    return RecordingRandomProvider()
