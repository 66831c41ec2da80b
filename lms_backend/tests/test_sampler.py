"""
Tests for the question sampler.
"""

import random
from collections import Counter
from unittest.mock import MagicMock

import pytest

from lms_backend.assessments.sampler import QuestionSampler, seeded_random_factory
from lms_backend.common.exceptions import InvalidArgumentError


CANDIDATES = list(range(10))


class TestSmallPool:
    """Pools no larger than the requested count are returned whole."""

    def test_count_equal_to_pool_returns_all_in_order(self):
        assert QuestionSampler().sample(CANDIDATES, 10) == CANDIDATES

    def test_count_larger_than_pool_returns_all_in_order(self):
        assert QuestionSampler().sample(CANDIDATES, 50) == CANDIDATES

    def test_empty_pool(self):
        assert QuestionSampler().sample([], 5) == []

    def test_returns_new_list(self):
        pool = [1, 2, 3]
        result = QuestionSampler().sample(pool, 3)
        assert result == pool
        assert result is not pool


class TestDraw:
    """Pools larger than the requested count are sampled."""

    def test_returns_exact_count_of_distinct_candidates(self):
        sampler = QuestionSampler()
        for count in range(0, 10):
            result = sampler.sample(CANDIDATES, count, rng=random.Random(count))
            assert len(result) == count
            assert len(set(result)) == count
            assert set(result) <= set(CANDIDATES)

    def test_zero_count_returns_empty(self):
        assert QuestionSampler().sample(CANDIDATES, 0) == []

    def test_does_not_mutate_candidates(self):
        pool = list(CANDIDATES)
        QuestionSampler().sample(pool, 3, rng=random.Random(7))
        assert pool == CANDIDATES

    def test_same_seed_gives_same_draw(self):
        sampler = QuestionSampler(seeded_random_factory(99))
        assert sampler.sample(CANDIDATES, 4) == sampler.sample(CANDIDATES, 4)

    def test_explicit_rng_matches_shuffle_then_take(self):
        expected = list(CANDIDATES)
        random.Random(5).shuffle(expected)
        assert QuestionSampler().sample(CANDIDATES, 3, rng=random.Random(5)) == expected[:3]

    def test_new_generator_per_call(self):
        factory = MagicMock(side_effect=lambda: random.Random(1))
        sampler = QuestionSampler(factory)

        sampler.sample(CANDIDATES, 2)
        sampler.sample(CANDIDATES, 2)

        assert factory.call_count == 2

    def test_small_pool_does_not_consume_generator(self):
        factory = MagicMock()
        QuestionSampler(factory).sample(CANDIDATES, 10)
        factory.assert_not_called()

    def test_every_element_drawn_with_similar_frequency(self):
        sampler = QuestionSampler()
        rng = random.Random(1234)
        trials = 3000
        counts = Counter()

        for _ in range(trials):
            counts.update(sampler.sample(CANDIDATES, 3, rng=rng))

        expected = trials * 3 / len(CANDIDATES)
        for element in CANDIDATES:
            assert abs(counts[element] - expected) < 150, counts


class TestInvalidCount:

    @pytest.mark.parametrize("count", [-1, -10])
    def test_negative_count_rejected(self, count):
        with pytest.raises(InvalidArgumentError):
            QuestionSampler().sample(CANDIDATES, count)

    @pytest.mark.parametrize("count", [1.5, "3", None, True])
    def test_non_integer_count_rejected(self, count):
        with pytest.raises(InvalidArgumentError):
            QuestionSampler().sample(CANDIDATES, count)

    def test_negative_count_rejected_even_for_empty_pool(self):
        with pytest.raises(InvalidArgumentError):
            QuestionSampler().sample([], -1)
