"""Greedy solution of the fractional knapsack problem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Item:
    """An item with a positive size and a non-negative value."""

    size: float
    value: float

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"item size must be positive, got {self.size}")
        if self.value < 0:
            raise ValueError(f"item value must be non-negative, got {self.value}")

    @property
    def density(self) -> float:
        return self.value / self.size


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Greatest value that fits in ``capacity`` when items may be split."""
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    remaining = capacity
    total = 0.0
    for item in sorted(items, key=lambda it: it.density, reverse=True):
        if remaining <= 0:
            break
        if item.size <= remaining:
            total += item.value
            remaining -= item.size
        else:
            total += item.value * remaining / item.size
            remaining = 0
    return total