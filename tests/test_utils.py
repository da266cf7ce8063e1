"""Tests for the randomness providers."""

import pytest

from utils import DefaultRandomProvider, SeededRandomProvider


def draw_sequence(provider, count=20):
    return [
        (provider.random(), provider.uniform(0.0001, 1.0), provider.randint(1, 6), provider.choice("abcdef"))
        for _ in range(count)
    ]


class TestSeededRandomProvider:

    def test_same_seed_same_sequence(self):
        assert draw_sequence(SeededRandomProvider(123)) == draw_sequence(SeededRandomProvider(123))

    def test_different_seed_different_sequence(self):
        assert draw_sequence(SeededRandomProvider(1)) != draw_sequence(SeededRandomProvider(2))

    def test_uniform_bounds(self):
        provider = SeededRandomProvider(5)
        for _ in range(1000):
            assert 0.0001 <= provider.uniform(0.0001, 1.0) <= 1.0

    def test_randint_inclusive(self):
        provider = SeededRandomProvider(5)
        assert {provider.randint(1, 3) for _ in range(300)} == {1, 2, 3}

    def test_fork_is_reproducible_and_independent(self):
        base = SeededRandomProvider(7)
        assert draw_sequence(base.fork("chests")) == draw_sequence(SeededRandomProvider(7).fork("chests"))
        assert draw_sequence(base.fork("chests")) != draw_sequence(base.fork("monsters"))

    def test_fork_requires_seed(self):
        with pytest.raises(ValueError):
            SeededRandomProvider().fork("chests")

    def test_entropy_seeded(self):
        provider = SeededRandomProvider()
        assert provider.seed is None
        assert 0.0 <= provider.random() < 1.0


class TestDefaultRandomProvider:

    def test_draws_in_range(self):
        provider = DefaultRandomProvider()
        assert 0.0 <= provider.random() < 1.0
        assert 2 <= provider.randint(2, 4) <= 4
        assert provider.choice([1, 2, 3]) in (1, 2, 3)
        assert 0.5 <= provider.uniform(0.5, 0.75) <= 0.75
