"""Seeded sampling and distribution helpers for synthetic data generation."""

from collections.abc import Mapping, Sequence
from datetime import date, timedelta
from typing import Any, Optional, Union

import numpy as np

WeightedOptions = Union[Mapping[Any, float], Sequence[tuple[Any, float]]]


def _as_pairs(options: WeightedOptions) -> list[tuple[Any, float]]:
    if isinstance(options, Mapping):
        return list(options.items())
    return list(options)


def weighted_pick(draw: float, pairs: Sequence[tuple[Any, float]]) -> Any:
    """Walk cumulative weights and return the first bucket whose sum exceeds draw.

    ``draw`` is expected in [0, total weight). Floating-point drift can leave it
    at or above the final cumulative sum, in which case the last bucket wins.
    """
    if not pairs:
        raise ValueError("weighted_pick needs at least one option")
    cumulative = 0.0
    for value, weight in pairs:
        cumulative += weight
        if draw < cumulative:
            return value
    return pairs[-1][0]


class SeededSampler:
    """Deterministic random source owned by exactly one generator.

    Two samplers built from the same seed produce the same sequence of draws.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def reseed(self, seed: Optional[int] = None) -> None:
        """Reset the stream, optionally switching to a new seed."""
        if seed is not None:
            self.seed = seed
        self.rng = np.random.default_rng(self.seed)

    def random(self) -> float:
        return float(self.rng.random())

    def uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def integer(self, low: int, high: int) -> int:
        """Integer in [low, high)."""
        return int(self.rng.integers(low, high))

    def choice(self, items: Sequence[Any]) -> Any:
        return items[self.integer(0, len(items))]

    def sample(self, items: Sequence[Any], k: int) -> list[Any]:
        """Pick k distinct items, in draw order."""
        available = list(items)
        picked = []
        for _ in range(min(k, len(available))):
            picked.append(available.pop(self.integer(0, len(available))))
        return picked

    def weighted_choice(self, options: WeightedOptions) -> Any:
        """Pick from weighted options, e.g. {"Male": 48, "Female": 47, ...}."""
        pairs = _as_pairs(options)
        total = sum(weight for _, weight in pairs)
        return weighted_pick(self.random() * total, pairs)


def normal_clipped(rng: np.random.Generator, mean: float, std: float,
                   low: float, high: float, size: int = 1) -> np.ndarray:
    """Normal distribution clipped to [low, high]."""
    values = rng.normal(mean, std, size=size)
    return np.clip(values, low, high)


def random_date_between(rng: np.random.Generator, start: date, end: date,
                        size: int = 1) -> list[date]:
    """Generate random dates uniformly in [start, end)."""
    delta_days = (end - start).days
    if delta_days <= 0:
        return [start] * size
    offsets = rng.integers(0, delta_days, size=size)
    return [start + timedelta(days=int(d)) for d in offsets]


def birth_date_from_age(rng: np.random.Generator, reference_date: date,
                        mean_age: float = 32.0, std_age: float = 8.0,
                        min_age: float = 21.0, max_age: float = 62.0,
                        size: int = 1) -> list[date]:
    """Generate birth dates based on age distribution at a reference date."""
    ages = normal_clipped(rng, mean_age, std_age, min_age, max_age, size=size)
    return [reference_date - timedelta(days=int(a * 365.25)) for a in ages]
