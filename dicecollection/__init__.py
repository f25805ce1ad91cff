"""Dice Collection - roll a set of dice and chart the distribution of their sums."""
from .core import Die, DiceCollection, InvalidConfiguration

__version__ = "1.0.0"

__all__ = [
    "Die",
    "DiceCollection",
    "InvalidConfiguration",
]
