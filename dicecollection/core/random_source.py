"""Process-wide random source shared by every die."""
import logging
import random
from typing import Optional

from ..config import DEFAULT_SEED

logger = logging.getLogger(__name__)

_rng = random.Random(DEFAULT_SEED)


def get_rng() -> random.Random:
    """Return the shared generator."""
    return _rng


def reseed(seed: Optional[int] = None):
    """Replace the shared generator, seeded for reproducible runs when a seed is given."""
    global _rng
    _rng = random.Random(seed)
    logger.debug("Random source reseeded (seed=%s)", seed)


def draw(high: int) -> int:
    """Draw one integer uniformly from [1, high]."""
    return _rng.randint(1, high)
