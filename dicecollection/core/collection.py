import logging
import time
from numbers import Integral
from typing import Iterable, List, Tuple

import numpy as np

from .die import Die, validate_sides
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)


class DiceCollection:
    """An ordered, fixed set of dice with sum statistics and histogram sampling.

    The collection never changes size after construction. Front ends that let
    the user reconfigure the dice build a new collection instead.
    """

    def __init__(self, face_counts: Iterable[int]):
        try:
            face_counts = list(face_counts)
        except TypeError:
            raise InvalidConfiguration(f"Face counts must be a sequence of integers, got {face_counts!r}")
        if not face_counts:
            raise InvalidConfiguration("A dice collection needs at least 1 die")

        # Validate everything first so a bad entry leaves no dice behind
        sides = [validate_sides(count) for count in face_counts]
        self._dice: Tuple[Die, ...] = tuple(Die(s) for s in sides)
        logger.debug("Created dice collection with sides %s", sides)

    @property
    def dice(self) -> Tuple[Die, ...]:
        """The dice in construction order."""
        return self._dice

    @property
    def face_counts(self) -> List[int]:
        """Sides of each die, in order."""
        return [die.sides for die in self._dice]

    def __len__(self) -> int:
        return len(self._dice)

    def sum_up_sides(self) -> int:
        """Sum of the faces currently showing."""
        return sum(die.up_side for die in self._dice)

    def minimum_sum(self) -> int:
        """Sum when every die shows 1."""
        return len(self._dice)

    def maximum_sum(self) -> int:
        """Sum when every die shows its highest face."""
        return sum(die.sides for die in self._dice)

    def roll_all(self):
        """Roll each die once."""
        for die in self._dice:
            die.roll()

    def describe(self) -> str:
        """Report every die's state followed by the minimum, maximum and current sums."""
        lines = [f"Die {i} {die}" for i, die in enumerate(self._dice, start=1)]
        lines.append("")
        lines.append(f"Min sum of roll: {self.minimum_sum()}")
        lines.append(f"Max sum of roll: {self.maximum_sum()}")
        lines.append(f"Sum of current roll: {self.sum_up_sides()}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"DiceCollection({self.face_counts})"

    def histogram(self, trials: int) -> np.ndarray:
        """Roll the whole collection ``trials`` times and count each sum.

        Args:
            trials: Number of full rolls to perform, at least 1.

        Returns:
            Array of length ``maximum_sum()`` where slot ``i`` counts the
            trials that summed to ``i + 1``. The dice are left showing the
            final trial.

        Raises:
            InvalidConfiguration: If ``trials`` is not a positive integer.
        """
        if isinstance(trials, bool) or not isinstance(trials, Integral):
            raise InvalidConfiguration(f"Trials must be an integer, got {trials!r}")
        if trials < 1:
            raise InvalidConfiguration(f"Need at least 1 trial, got {trials}")

        tracker = np.zeros(self.maximum_sum(), dtype=np.int64)
        started = time.perf_counter()
        for _ in range(trials):
            self.roll_all()
            # Faces start at 1, so the smallest possible sum lands in slot 0
            tracker[self.sum_up_sides() - 1] += 1

        logger.info(
            "Rolled %d dice %d times in %.2fs",
            len(self._dice), trials, time.perf_counter() - started
        )
        return tracker
