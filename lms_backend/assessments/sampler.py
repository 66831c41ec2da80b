"""
Question Sampler

Draws a bounded random subset of candidate exercises for an assessment.
"""

import random
from typing import Callable, List, Optional, Sequence, TypeVar

from lms_backend.common.exceptions import InvalidArgumentError
from lms_backend.common.logger import app_logger

logger = app_logger.getChild("assessments.sampler")

T = TypeVar('T')

RandomFactory = Callable[[], random.Random]


def seeded_random_factory(seed: Optional[int] = None) -> RandomFactory:
    """
    Build a factory producing one fresh generator per sampling call.

    Args:
        seed: Fixed seed for reproducible draws, or None to seed every
            generator from system entropy

    Returns:
        Zero-argument callable returning a new ``random.Random``
    """
    if seed is None:
        return random.Random
    return lambda: random.Random(seed)


class QuestionSampler:
    """
    Selects ``count`` distinct candidates uniformly at random.

    A generator is never shared between calls: each call either receives one
    explicitly or asks the factory for a new instance.
    """

    def __init__(self, rng_factory: Optional[RandomFactory] = None):
        """
        Initialize the sampler.

        Args:
            rng_factory: Factory for per-call generators; defaults to
                entropy-seeded ``random.Random``
        """
        self.rng_factory = rng_factory or random.Random

    def sample(
        self,
        candidates: Sequence[T],
        count: int,
        rng: Optional[random.Random] = None
    ) -> List[T]:
        """
        Return at most ``count`` distinct candidates.

        When the pool is no larger than ``count`` every candidate is returned
        in its original order. Otherwise a shuffled copy of the pool is cut
        to its first ``count`` elements, so every subset and every ordering of
        that size is equally likely.

        Args:
            candidates: The full candidate pool
            count: Number of candidates requested, non-negative
            rng: Generator to draw from; a new one is created if omitted

        Returns:
            New list holding the selected candidates

        Raises:
            InvalidArgumentError: If count is not a non-negative integer
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidArgumentError(
                f"sample count must be a non-negative integer, got {count!r}",
                errors={"count": count}
            )

        pool = list(candidates)
        if len(pool) <= count:
            return pool

        generator = rng if rng is not None else self.rng_factory()
        # random.shuffle is an in-place Fisher-Yates shuffle
        generator.shuffle(pool)
        logger.debug(f"Sampled {count} of {len(candidates)} candidates")
        return pool[:count]
