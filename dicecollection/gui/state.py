"""State behind the graphical form, kept free of any widget toolkit."""
import logging
from typing import List, Optional

import numpy as np

from ..config import DEFAULT_BULK_ROLLS, DEFAULT_FORM_MAX_DICE, DEFAULT_FORM_MAX_SIDES
from ..core import DiceCollection

logger = logging.getLogger(__name__)


def parse_positive_integer(text: str) -> Optional[int]:
    """Return the value of a digits-only field, or None for anything else."""
    text = text.strip()
    if not text or not text.isdigit():
        return None
    value = int(text)
    return value if value > 0 else None


class FormState:
    """Validated inputs, the current collection and the last histogram of the form.

    Once the bulk roll has been run, every valid change to the inputs
    builds a new collection and reruns it. The rerun happens synchronously
    in the caller, so a form blocks for the length of one bulk roll.
    """

    def __init__(
        self,
        rolls: int = DEFAULT_BULK_ROLLS,
        max_dice: int = DEFAULT_FORM_MAX_DICE,
        max_sides: int = DEFAULT_FORM_MAX_SIDES,
    ):
        self.rolls = rolls
        self.max_dice = max_dice
        self.max_sides = max_sides
        self.error = ""
        self.sides: List[int] = []  # 0 marks a field without a valid value
        self.dice_collection: Optional[DiceCollection] = None
        self.tracker: Optional[np.ndarray] = None
        self.has_rolled_once = False

    @property
    def buttons_enabled(self) -> bool:
        return self.dice_collection is not None

    @property
    def info_text(self) -> str:
        return self.dice_collection.describe() if self.dice_collection else ""

    def set_dice_count(self, text: str):
        """Handle an edit of the number-of-dice field."""
        self.error = ""
        self.sides = []
        self.dice_collection = None

        count = parse_positive_integer(text)
        if count is None:
            self.error = "Please enter a positive integer"
        elif count > self.max_dice:
            self.error = f"Please enter a positive integer smaller than {self.max_dice + 1}"
        else:
            self.sides = [0] * count

    def set_sides(self, index: int, text: str):
        """Handle an edit of the sides field of die ``index`` (0-based)."""
        self.error = ""
        value = parse_positive_integer(text)
        if value is None:
            self.error = f"Please enter a positive integer as\nthe sides of die number {index + 1}"
        elif value < 2:
            self.error = f"Die number {index + 1} needs at least 2 sides"
        elif value > self.max_sides:
            self.error = f"Die number {index + 1} should only have\nless than {self.max_sides + 1} sides"

        if self.error:
            logger.debug("Rejected sides %r for die %d", text, index + 1)
            self.sides[index] = 0
            self.dice_collection = None
            return

        self.sides[index] = value
        if all(self.sides):
            self.dice_collection = DiceCollection(self.sides)
            if self.has_rolled_once:
                self.roll_bulk()

    def roll_once(self):
        """Clear the chart and roll every die once."""
        self.tracker = None
        self.dice_collection.roll_all()

    def roll_bulk(self):
        """Run the histogram and remember that it has been run."""
        self.tracker = self.dice_collection.histogram(self.rolls)
        self.has_rolled_once = True
