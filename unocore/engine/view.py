"""What a single seat may see of a hand."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from unocore.engine.card import Card
from unocore.engine.hand import Hand


@dataclass
class PlayerView:
    """Filtered hand state visible to a single player.

    Contains only that player's cards and public info.
    """

    player_index: int
    my_hand: List[Card]
    top_discard: Optional[Card]
    player_in_turn: int
    direction: int
    dealer: int
    players: Tuple[str, ...]
    num_cards_per_player: Tuple[int, ...]
    uno_called: Tuple[bool, ...]
    has_ended: bool

    @classmethod
    def from_hand(cls, hand: Hand, player_index: int) -> "PlayerView":
        """Create a player view from a hand, hiding other players' cards."""
        seats = range(hand.player_count)
        return cls(
            player_index=player_index,
            my_hand=hand.player_hand(player_index),
            top_discard=hand.discard_pile.top(),
            player_in_turn=hand.player_in_turn(),
            direction=hand.direction,
            dealer=hand.dealer,
            players=hand.players,
            num_cards_per_player=tuple(len(hand.player_hand(i)) for i in seats),
            uno_called=tuple(hand.has_called_uno(i) for i in seats),
            has_ended=hand.has_ended(),
        )

    def catchable_players(self) -> List[int]:
        """Other seats holding one card without having said UNO."""
        return [
            i
            for i, count in enumerate(self.num_cards_per_player)
            if i != self.player_index and count == 1 and not self.uno_called[i]
        ]
