"""Pytest configuration and fixtures."""

import io

import pytest
from rich.console import Console

from dicecollection.core import DiceCollection, reseed


@pytest.fixture(autouse=True)
def seeded_rng():
    """Seed the shared random source so every test sees the same rolls."""
    reseed(20240611)
    yield
    reseed(None)


@pytest.fixture
def two_coins():
    """Two 2-sided dice."""
    return DiceCollection([2, 2])


@pytest.fixture
def mixed_dice():
    """A 4, 6 and 8 sided die."""
    return DiceCollection([4, 6, 8])


@pytest.fixture
def quiet_console():
    """A rich console writing into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=120, color_system=None)
