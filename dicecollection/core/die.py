from numbers import Integral

from .errors import InvalidConfiguration
from . import random_source


MIN_SIDES = 2


def validate_sides(sides) -> int:
    """Check a face count and return it as a plain int."""
    if isinstance(sides, bool) or not isinstance(sides, Integral):
        raise InvalidConfiguration(f"Die sides must be an integer, got {sides!r}")
    if sides < MIN_SIDES:
        raise InvalidConfiguration(f"A die needs at least {MIN_SIDES} sides, got {sides}")
    return int(sides)


class Die:
    """A single die showing one of its faces 1..sides."""

    def __init__(self, sides: int):
        self._sides = validate_sides(sides)
        self._up_side = random_source.draw(self._sides)

    @property
    def sides(self) -> int:
        """Number of faces on this die."""
        return self._sides

    @property
    def up_side(self) -> int:
        """Face currently showing."""
        return self._up_side

    def roll(self):
        """Roll the die once."""
        self._up_side = random_source.draw(self._sides)

    def __str__(self) -> str:
        return f"has {self._sides} sides - Current up side: {self._up_side}"

    def __repr__(self) -> str:
        return f"Die(sides={self._sides}, up_side={self._up_side})"
