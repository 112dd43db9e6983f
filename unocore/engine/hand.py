"""A single hand (round) of UNO: deal, turns, special cards, UNO calls, scoring."""

import logging
from enum import Enum
from typing import List, Optional, Sequence, Set, Tuple, Union

from unocore.engine.card import Card, CardType, Color
from unocore.engine.deck import Pile, create_initial_deck
from unocore.engine.errors import (
    DeckExhausted,
    IllegalPlay,
    InvalidCardIndex,
    InvalidConfiguration,
    InvalidPlayerIndex,
    RoundEnded,
)
from unocore.engine.rules import is_playable, score_cards
from unocore.engine.shuffler import Shuffler, standard_shuffler

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 10
DEFAULT_CARDS_PER_PLAYER = 7
DRAW_PENALTY = 2
WILD_DRAW_PENALTY = 4
UNO_PENALTY = 4
WILD_COUNT = 8


class LastAction(str, Enum):
    """What a seat did on its most recent turn.

    Only the most recent actor keeps a non-NONE value; it is reset as soon as
    a different seat acts. Used to time UNO accusations, nothing else.
    """

    NONE = "none"
    PLAYED = "played"
    DREW = "drew"


class Hand:
    """One round of UNO, from the deal until a player empties their hand.

    All state lives on the instance and is only changed through ``play``,
    ``draw``, ``say_uno`` and ``catch_uno_failure``.
    """

    def __init__(
        self,
        players: Sequence[str],
        dealer: int,
        shuffler: Shuffler = standard_shuffler,
        cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
    ):
        players = tuple(players)
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise InvalidConfiguration(
                f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {len(players)}"
            )
        if not 0 <= dealer < len(players):
            raise InvalidConfiguration(f"Dealer index {dealer} out of bounds")

        deck = create_initial_deck()
        # Leave room for the opening card, every wild and an opening draw penalty
        needed = cards_per_player * len(players) + 1 + WILD_COUNT + DRAW_PENALTY
        if cards_per_player < 0 or needed > deck.size:
            raise InvalidConfiguration(
                f"Cannot deal {cards_per_player} cards to {len(players)} players"
            )

        self._players: Tuple[str, ...] = players
        self._dealer = dealer
        self._shuffler = shuffler
        self._direction = 1
        self._uno_called: Set[int] = set()
        self._last_actions: List[LastAction] = [LastAction.NONE] * len(players)
        self._last_actor: Optional[int] = None
        self._winner: Optional[int] = None

        deck.shuffle(shuffler)
        self._hands: List[List[Card]] = [
            [deck.deal() for _ in range(cards_per_player)] for _ in players
        ]

        # Opening discard must carry a color
        first = deck.deal()
        while first.is_wild:
            deck.push(first)
            deck.shuffle(shuffler)
            first = deck.deal()

        self._discard_pile = Pile([first])
        self._draw_pile = deck

        n = len(players)
        self._current = (dealer + 1) % n
        if first.type == CardType.REVERSE:
            if n > 2:
                self._direction = -1
            self._current = (dealer - 1) % n
        elif first.type == CardType.SKIP:
            self._current = (dealer + 2) % n
        elif first.type == CardType.DRAW:
            self._give(self._current, DRAW_PENALTY)

        logger.debug(
            "Dealt %d cards to %d players, dealer=%d, first card %s, %s starts",
            cards_per_player, n, dealer, first, players[self._current],
        )

    # === Queries ==============================================================

    @property
    def players(self) -> Tuple[str, ...]:
        return self._players

    @property
    def player_count(self) -> int:
        return len(self._players)

    @property
    def dealer(self) -> int:
        return self._dealer

    @property
    def direction(self) -> int:
        """1 = clockwise, -1 = counter-clockwise."""
        return self._direction

    @property
    def draw_pile(self) -> Pile:
        return self._draw_pile

    @property
    def discard_pile(self) -> Pile:
        return self._discard_pile

    def player_in_turn(self) -> int:
        return self._current

    def player(self, index: int) -> str:
        self._check_player(index)
        return self._players[index]

    def player_hand(self, index: int) -> List[Card]:
        """Return a copy of the cards held by a player."""
        self._check_player(index)
        return list(self._hands[index])

    def last_action(self, index: int) -> LastAction:
        self._check_player(index)
        return self._last_actions[index]

    def has_called_uno(self, index: int) -> bool:
        self._check_player(index)
        return index in self._uno_called

    def has_ended(self) -> bool:
        return self._winner is not None

    def winner(self) -> Optional[int]:
        return self._winner

    def score(self) -> Optional[int]:
        """Points left in all players' hands, once the hand has ended."""
        if not self.has_ended():
            return None
        return score_cards(self._hands)

    def can_play(self, card_index: int) -> bool:
        if self.has_ended():
            return False
        held = self._hands[self._current]
        if not 0 <= card_index < len(held):
            return False
        return is_playable(held[card_index], held, self._discard_pile.top())

    def can_play_any(self) -> bool:
        if self.has_ended():
            return False
        return any(self.can_play(i) for i in range(len(self._hands[self._current])))

    # === Moves ================================================================

    def play(self, card_index: int, chosen_color: Union[Color, str, None] = None) -> Card:
        """Play a card of the current player.

        ``chosen_color`` is required for wild cards and forbidden for all
        others. Returns the card as it now lies on the discard pile.
        """
        if self.has_ended():
            raise RoundEnded("The hand has already ended")
        held = self._hands[self._current]
        if not 0 <= card_index < len(held):
            raise InvalidCardIndex(f"Card index {card_index} out of range (0-{len(held) - 1})")

        card = held[card_index]
        if not self.can_play(card_index):
            raise IllegalPlay(f"{card} cannot be played on {self._discard_pile.top()}")
        if card.is_wild:
            if chosen_color is None:
                raise IllegalPlay(f"{card} requires a color")
            played = card.with_color(_parse_color(chosen_color))
        else:
            if chosen_color is not None:
                raise IllegalPlay(f"{card} is colored, no color may be chosen")
            played = card

        player = self._current
        del held[card_index]
        self._discard_pile.push(played)
        self._record_action(player, LastAction.PLAYED)
        logger.debug("%s played %s", self._players[player], played)

        if not held:
            self._winner = player
            logger.debug("%s won the hand, score %d", self._players[player], self.score())
            return played

        n = len(self._players)
        if card.type == CardType.SKIP:
            self._current = (player + 2 * self._direction) % n
        elif card.type == CardType.REVERSE:
            if n > 2:
                self._direction = -self._direction
            self._current = (player + self._direction) % n
        elif card.type == CardType.DRAW:
            self._give(self._next_seat(player), DRAW_PENALTY)
            self._current = (player + 2 * self._direction) % n
        elif card.type == CardType.WILD_DRAW:
            self._give(self._next_seat(player), WILD_DRAW_PENALTY)
            self._current = (player + 2 * self._direction) % n
        else:
            self._current = self._next_seat(player)
        return played

    def draw(self) -> Card:
        """Draw one card for the current player.

        The turn passes on unless the drawn card can be played right away.
        """
        if self.has_ended():
            raise RoundEnded("The hand has already ended")
        player = self._current
        card = self._give(player, 1)[0]
        self._record_action(player, LastAction.DREW)
        logger.debug("%s drew %s", self._players[player], card)

        if not self.can_play(len(self._hands[player]) - 1):
            self._current = self._next_seat(player)
        return card

    def say_uno(self, player_index: int) -> None:
        """Declare UNO for a player holding exactly one card; otherwise ignored."""
        self._check_player(player_index)
        if self.has_ended() or len(self._hands[player_index]) != 1:
            return
        self._uno_called.add(player_index)
        logger.debug("%s says UNO", self._players[player_index])

    def catch_uno_failure(self, accuser: int, accused: int) -> bool:
        """Accuse a player of not declaring UNO.

        Succeeds while the accused holds one undeclared card and no other
        seat has acted since their last move. The accused then draws 4.
        """
        self._check_player(accuser)
        self._check_player(accused)
        if (
            self.has_ended()
            or len(self._hands[accused]) != 1
            or accused in self._uno_called
            or self._last_actions[accused] == LastAction.NONE
        ):
            return False
        self._give(accused, UNO_PENALTY)
        logger.debug(
            "%s caught %s without UNO", self._players[accuser], self._players[accused]
        )
        return True

    # === Internals ============================================================

    def _check_player(self, index: int) -> None:
        if not 0 <= index < len(self._players):
            raise InvalidPlayerIndex(f"Player index {index} out of bounds")

    def _next_seat(self, player: int) -> int:
        return (player + self._direction) % len(self._players)

    def _record_action(self, player: int, action: LastAction) -> None:
        if self._last_actor is not None and self._last_actor != player:
            self._last_actions[self._last_actor] = LastAction.NONE
        self._last_actions[player] = action
        self._last_actor = player

    def _give(self, player: int, count: int) -> List[Card]:
        cards = [self._take_from_draw_pile() for _ in range(count)]
        self._hands[player].extend(cards)
        self._uno_called.discard(player)
        return cards

    def _take_from_draw_pile(self) -> Card:
        card = self._draw_pile.deal()
        if card is None:
            self._reclaim_discards()
            card = self._draw_pile.deal()
        if card is None:
            logger.error("No cards left in draw or discard pile")
            raise DeckExhausted("Draw and discard piles are both empty")
        return card

    def _reclaim_discards(self) -> None:
        """Turn all discards but the top card into a fresh, shuffled draw pile."""
        top = self._discard_pile.pop_top()
        reclaimed = Pile(card.without_color() for card in self._discard_pile.take_all())
        reclaimed.shuffle(self._shuffler)
        self._draw_pile = reclaimed
        if top is not None:
            self._discard_pile.push(top)
        logger.debug("Reshuffled %d discards into the draw pile", reclaimed.size)

    def __repr__(self) -> str:
        return (
            f"Hand(players={list(self._players)}, turn={self._current}, "
            f"direction={self._direction}, top={self._discard_pile.top()}, "
            f"winner={self._winner})"
        )


def _parse_color(color: Union[Color, str]) -> Color:
    if isinstance(color, Color):
        return color
    try:
        return Color(str(color).lower())
    except ValueError:
        raise IllegalPlay(f"Unknown color: {color}") from None
