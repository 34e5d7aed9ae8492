"""
Random number picker.

The only non-deterministic helper of the engine, so it lives apart from the
pure formula modules. Pass an explicit random.Random to make draws
reproducible.
"""
import random
from typing import List, Optional

from plainly.app.utils.validation_utils import OutOfRangeError


def generate_random_numbers(
    minimum: int,
    maximum: int,
    count: int = 1,
    allow_duplicates: bool = True,
    rng: Optional[random.Random] = None
    ) -> List[int]:
    """
    Draw uniform integers in [minimum, maximum].

    Without duplicates, count is capped at the size of the range.

    Args:
        minimum: Lowest value (inclusive)
        maximum: Highest value (inclusive)
        count: How many numbers to draw (>= 1)
        allow_duplicates: If False, every drawn number is distinct
        rng: Random source, defaults to a fresh OS-seeded generator

    Raises:
        OutOfRangeError: If maximum < minimum or count < 1

    Example:
        >>> generate_random_numbers(1, 6, 3, rng=random.Random(42))  # three dice, reproducible
    """
    if maximum < minimum:
        raise OutOfRangeError(f"maximum ({maximum}) must be >= minimum ({minimum})", field="maximum")
    if count < 1:
        raise OutOfRangeError(f"count must be at least 1, got {count}", field="count")

    rng = rng or random.Random()
    if allow_duplicates:
        return [rng.randint(minimum, maximum) for _ in range(count)]

    range_size = maximum - minimum + 1
    return rng.sample(range(minimum, maximum + 1), min(count, range_size))
