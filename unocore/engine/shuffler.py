"""Shufflers: pluggable in-place permutations of a card sequence.

A shuffler is any callable taking the mutable list of cards and permuting it
in place. Piles and hands take one as a parameter so tests can swap the
randomness for a fixed or recorded order.
"""

import random
from collections import Counter
from typing import Callable, Iterable, List, Optional, Sequence

from unocore.engine.card import Card

Shuffler = Callable[[List[Card]], None]


def standard_shuffler(cards: List[Card]) -> None:
    """Fisher-Yates shuffle using the module-level random source."""
    random.shuffle(cards)


def seeded_shuffler(seed: Optional[int] = None) -> Shuffler:
    """Return a reproducible Fisher-Yates shuffler driven by ``random.Random(seed)``."""
    rng = random.Random(seed)

    def shuffle(cards: List[Card]) -> None:
        rng.shuffle(cards)

    return shuffle


def identity_shuffler(cards: List[Card]) -> None:
    """Leave the order unchanged."""


class RecordingShuffler:
    """Delegates to another shuffler and keeps every resulting order."""

    def __init__(self, inner: Shuffler = standard_shuffler):
        self._inner = inner
        self.orders: List[List[Card]] = []

    def __call__(self, cards: List[Card]) -> None:
        self._inner(cards)
        self.orders.append(list(cards))


class ReplayingShuffler:
    """Rearranges the cards into pre-recorded orders, one per call.

    Each order must be a permutation of the cards being shuffled. Once the
    recorded orders run out the shuffler leaves the sequence as it is.
    """

    def __init__(self, orders: Iterable[Sequence[Card]]):
        self._orders = [list(order) for order in orders]
        self.calls = 0

    def __call__(self, cards: List[Card]) -> None:
        index = self.calls
        self.calls += 1
        if index >= len(self._orders):
            return
        order = self._orders[index]
        if Counter(order) != Counter(cards):
            raise ValueError(
                f"Replayed order #{index} is not a permutation of the {len(cards)} cards given"
            )
        cards[:] = order
