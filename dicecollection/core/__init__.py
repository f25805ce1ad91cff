"""Core dice simulation for Dice Collection."""
from .errors import InvalidConfiguration
from .die import Die
from .collection import DiceCollection
from .random_source import get_rng, reseed

__all__ = [
    "Die",
    "DiceCollection",
    "InvalidConfiguration",
    "get_rng",
    "reseed",
]
