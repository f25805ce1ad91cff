"""Exact sum distributions for uniform dice, laid out like a histogram."""
from typing import Iterable

import numpy as np

from ..core.die import validate_sides
from ..core.errors import InvalidConfiguration


def exact_distribution(face_counts: Iterable[int]) -> np.ndarray:
    """Probability of every total for the given dice.

    The result has the same shape as ``DiceCollection.histogram``: length is
    the maximum sum and slot ``i`` holds the probability of rolling ``i + 1``.
    """
    sides = [validate_sides(count) for count in face_counts]
    if not sides:
        raise InvalidConfiguration("A dice collection needs at least 1 die")

    # Index 0 of the running pmf is a total of 0
    pmf = np.array([1.0])
    for s in sides:
        face = np.concatenate(([0.0], np.full(s, 1.0 / s)))
        pmf = np.convolve(pmf, face)
    return pmf[1:]


def expected_counts(face_counts: Iterable[int], trials: int) -> np.ndarray:
    """Expected histogram counts for ``trials`` rolls."""
    if trials < 1:
        raise InvalidConfiguration(f"Need at least 1 trial, got {trials}")
    return exact_distribution(face_counts) * trials


def total_variation(tracker, probabilities) -> float:
    """Total variation distance between an observed histogram and a distribution."""
    counts = np.asarray(tracker, dtype=float)
    probabilities = np.asarray(probabilities, dtype=float)
    if counts.shape != probabilities.shape:
        raise InvalidConfiguration(
            f"Histogram length {counts.shape[0]} does not match distribution length {probabilities.shape[0]}"
        )
    total = counts.sum()
    if total == 0:
        raise InvalidConfiguration("Cannot compare an empty histogram")
    return 0.5 * float(np.abs(counts / total - probabilities).sum())
