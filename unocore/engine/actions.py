"""Actions a player can take on their turn."""

from dataclasses import dataclass
from typing import List, Optional, Union

from unocore.engine.card import Card, Color
from unocore.engine.hand import Hand


@dataclass
class PlayCard:
    """Action: play the card at ``card_index``. For wilds, chosen_color is required.

    With ``say_uno`` the player declares UNO right after the card leaves
    their hand.
    """

    card_index: int
    chosen_color: Optional[Color] = None
    say_uno: bool = False


@dataclass
class DrawCard:
    """Action: draw a card."""

    pass


Action = Union[PlayCard, DrawCard]


def get_legal_actions(hand: Hand) -> List[Action]:
    """Return all legal actions for the player in turn."""
    if hand.has_ended():
        return []

    held = hand.player_hand(hand.player_in_turn())
    actions: List[Action] = []
    for index, card in enumerate(held):
        if not hand.can_play(index):
            continue
        if card.is_wild:
            for color in Color:
                actions.append(PlayCard(card_index=index, chosen_color=color))
        else:
            actions.append(PlayCard(card_index=index))

    # Drawing is always allowed
    actions.append(DrawCard())
    return actions


def apply_action(hand: Hand, action: Action) -> Card:
    """Apply an action for the player in turn.

    Returns the played card, or the drawn card for a draw.
    """
    player = hand.player_in_turn()
    if isinstance(action, DrawCard):
        return hand.draw()

    card = hand.play(action.card_index, action.chosen_color)
    if action.say_uno:
        hand.say_uno(player)
    return card
