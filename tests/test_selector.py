"""Tests for randomized candidate selection."""

from __future__ import annotations

import random

from fitplan.engine.selector import choose_one, make_rng, select_candidates, shuffled


class TestSelectCandidates:
    """Tests for sampling without replacement."""

    def test_returns_k_distinct_items(self, rng):
        """Selection returns k items with no repeats."""
        pool = list(range(10))
        picked = select_candidates(pool, 4, rng)
        assert len(picked) == 4
        assert len(set(picked)) == 4
        assert set(picked) <= set(pool)

    def test_k_larger_than_pool(self, rng):
        """Asking for more than available returns the whole pool."""
        picked = select_candidates(["a", "b"], 5, rng)
        assert sorted(picked) == ["a", "b"]

    def test_empty_pool_and_zero_k(self, rng):
        """Empty pools and non-positive k give an empty result."""
        assert select_candidates([], 3, rng) == []
        assert select_candidates([1, 2, 3], 0, rng) == []

    def test_does_not_mutate_pool(self, rng):
        """The input sequence keeps its order."""
        pool = [1, 2, 3, 4, 5]
        select_candidates(pool, 3, rng)
        assert pool == [1, 2, 3, 4, 5]

    def test_same_seed_same_result(self):
        """A seed reproduces the selection exactly."""
        pool = list(range(20))
        first = select_candidates(pool, 5, random.Random(7))
        second = select_candidates(pool, 5, random.Random(7))
        assert first == second


class TestHelpers:
    """Tests for RNG helpers."""

    def test_make_rng_prefers_injected(self):
        """An injected generator wins over a seed."""
        injected = random.Random(1)
        assert make_rng(seed=99, rng=injected) is injected

    def test_make_rng_seeded(self):
        """Seeded generators produce identical streams."""
        assert make_rng(3).random() == make_rng(3).random()

    def test_shuffled_is_permutation(self, rng):
        """Shuffling keeps every element."""
        assert sorted(shuffled((3, 1, 2), rng)) == [1, 2, 3]

    def test_choose_one_empty(self, rng):
        """Choosing from nothing returns None."""
        assert choose_one([], rng) is None
