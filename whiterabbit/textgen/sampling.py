from __future__ import annotations

import random
from typing import Iterable, TypeVar

T = TypeVar("T")


def weighted_choice(pairs: Iterable[tuple[T, float]], rng: random.Random | None = None) -> T | None:
    """Pick an item proportionally to its weight.

    Returns None for empty input and the first item when every weight is zero.
    """
    items: list[T] = []
    weights: list[float] = []
    for item, weight in pairs:
        items.append(item)
        weights.append(max(0.0, float(weight)))
    if not items:
        return None
    total = sum(weights)
    if total <= 0:
        return items[0]

    r = (rng or random).random() * total
    for item, weight in zip(items, weights):
        r -= weight
        if r < 0:
            return item
    return items[-1]


def randint_between(bounds: tuple[int, int], rng: random.Random | None = None) -> int:
    low, high = bounds
    if high < low:
        low, high = high, low
    return (rng or random).randint(low, high)
