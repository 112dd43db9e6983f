"""Piles of cards and the standard deck."""

from typing import Iterable, Iterator, List, Optional, Tuple

from unocore.engine.card import ACTION_TYPES, Card, Color
from unocore.engine.shuffler import Shuffler


class Pile:
    """An ordered pile of cards.

    ``deal`` takes from the front, ``push`` and ``top`` work on the back, so
    the back of a discard pile is the most recently played card.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: List[Card] = list(cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __bool__(self) -> bool:
        return bool(self._cards)

    def shuffle(self, shuffler: Shuffler) -> None:
        shuffler(self._cards)

    def deal(self) -> Optional[Card]:
        """Remove and return the front card, or None when the pile is empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def top(self) -> Optional[Card]:
        """Return the most recently pushed card without removing it."""
        return self._cards[-1] if self._cards else None

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def pop_top(self) -> Optional[Card]:
        return self._cards.pop() if self._cards else None

    def take_all(self) -> List[Card]:
        """Empty the pile and return its cards in order."""
        cards, self._cards = self._cards, []
        return cards

    def __repr__(self) -> str:
        return f"Pile({len(self._cards)} cards, top={self.top()})"


def create_empty_pile() -> Pile:
    return Pile()


def create_initial_deck() -> Pile:
    """Create the standard, unshuffled 108-card UNO deck.

    - 4 colors x (one 0, two each of 1-9): 76 cards
    - 4 colors x two each of Skip, Reverse, Draw Two: 24 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    """
    cards: List[Card] = []

    for color in Color:
        cards.append(Card.numbered(color, 0))
        for number in range(1, 10):
            cards.append(Card.numbered(color, number))
            cards.append(Card.numbered(color, number))

    for color in Color:
        for card_type in ACTION_TYPES:
            cards.append(Card(card_type, color))
            cards.append(Card(card_type, color))

    for _ in range(4):
        cards.append(Card.wild())
    for _ in range(4):
        cards.append(Card.wild_draw())

    return Pile(cards)
