"""UNO rules: card matching and scoring."""

from typing import Iterable, Optional, Sequence

from unocore.engine.card import ACTION_TYPES, Card, CardType

ACTION_POINTS = 20
WILD_POINTS = 50


def card_matches(card: Card, top: Card) -> bool:
    """Check if a card can be played on top of another by color, number or type."""
    if card.is_wild:
        return True
    if card.color is not None and card.color == top.color:
        return True
    if card.type == CardType.NUMBERED and top.type == CardType.NUMBERED:
        return card.number == top.number
    return card.type == top.type and card.type != CardType.NUMBERED


def is_playable(card: Card, held: Sequence[Card], top: Optional[Card]) -> bool:
    """Check if ``card`` from the hand ``held`` may go on ``top``.

    A Wild Draw Four is only allowed while the player holds nothing of the
    top card's color.
    """
    if top is None:
        return True
    if card.type == CardType.WILD_DRAW:
        if any(c.color is not None and c.color == top.color for c in held):
            return False
    return card_matches(card, top)


def card_points(card: Card) -> int:
    if card.type == CardType.NUMBERED:
        return card.number
    if card.type in ACTION_TYPES:
        return ACTION_POINTS
    return WILD_POINTS


def score_cards(hands: Iterable[Iterable[Card]]) -> int:
    """Sum the points of every card left in the given player hands."""
    return sum(card_points(card) for cards in hands for card in cards)
