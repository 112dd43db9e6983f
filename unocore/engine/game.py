"""A match of UNO: hands played one after another until a target score."""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from unocore.engine.errors import (
    GameOver,
    HandInProgress,
    InvalidConfiguration,
    InvalidPlayerIndex,
)
from unocore.engine.hand import DEFAULT_CARDS_PER_PLAYER, MAX_PLAYERS, MIN_PLAYERS, Hand
from unocore.engine.shuffler import Shuffler, standard_shuffler

logger = logging.getLogger(__name__)

DEFAULT_TARGET_SCORE = 500


class Game:
    """Sequences hands and accumulates each hand winner's score.

    The first hand starts on construction. After a hand ends, call
    ``update_scores`` to credit its winner and deal the next one.
    """

    def __init__(
        self,
        players: Sequence[str],
        target_score: int = DEFAULT_TARGET_SCORE,
        shuffler: Shuffler = standard_shuffler,
        cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
        dealer: Optional[int] = None,
    ):
        players = tuple(players)
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise InvalidConfiguration(
                f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {len(players)}"
            )
        if target_score <= 0:
            raise InvalidConfiguration(f"Target score must be greater than 0, got {target_score}")
        if dealer is None:
            dealer = random.randrange(len(players))
        elif not 0 <= dealer < len(players):
            raise InvalidConfiguration(f"Dealer index {dealer} out of bounds")

        self._players: Tuple[str, ...] = players
        self._target_score = target_score
        self._shuffler = shuffler
        self._cards_per_player = cards_per_player
        self._dealer = dealer
        self._scores: List[int] = [0] * len(players)
        self._hands: List[Hand] = []
        self._ended = False
        self._winner: Optional[int] = None

        self.start_new_hand(dealer)

    @property
    def players(self) -> Tuple[str, ...]:
        return self._players

    @property
    def player_count(self) -> int:
        return len(self._players)

    @property
    def target_score(self) -> int:
        return self._target_score

    @property
    def dealer(self) -> int:
        """Dealer of the current hand."""
        return self._dealer

    @property
    def hands(self) -> Tuple[Hand, ...]:
        return tuple(self._hands)

    @property
    def scores(self) -> Tuple[int, ...]:
        return tuple(self._scores)

    def player(self, index: int) -> str:
        self._check_player(index)
        return self._players[index]

    def score(self, player_index: int) -> int:
        self._check_player(player_index)
        return self._scores[player_index]

    def current_hand(self) -> Hand:
        return self._hands[-1]

    def winner(self) -> Optional[int]:
        """First player, in seat order, at or above the target score."""
        if self._ended:
            return self._winner
        for index, total in enumerate(self._scores):
            if total >= self._target_score:
                self._winner = index
                self._ended = True
                logger.debug("%s wins the match with %d points", self._players[index], total)
                break
        return self._winner

    def has_ended(self) -> bool:
        self.winner()
        return self._ended

    def end_game(self) -> None:
        self._ended = True

    def start_new_hand(self, dealer: Optional[int] = None) -> Hand:
        """Deal a new hand; by default the deal passes one seat to the left."""
        if self.has_ended():
            raise GameOver("The match has ended")
        if dealer is None:
            dealer = (self._dealer + 1) % len(self._players)
        elif not 0 <= dealer < len(self._players):
            raise InvalidConfiguration(f"Dealer index {dealer} out of bounds")
        self._dealer = dealer
        hand = Hand(self._players, dealer, self._shuffler, self._cards_per_player)
        self._hands.append(hand)
        logger.debug("Started hand %d, dealer %s", len(self._hands), self._players[dealer])
        return hand

    def update_scores(self) -> None:
        """Credit the finished hand to its winner and deal the next hand."""
        if self.has_ended():
            raise GameOver("The match has ended")
        hand = self.current_hand()
        if not hand.has_ended():
            raise HandInProgress("The current hand is still being played")

        hand_winner = hand.winner()
        hand_score = hand.score()
        self._scores[hand_winner] += hand_score
        logger.debug(
            "%s scores %d, totals %s", self._players[hand_winner], hand_score, self._scores
        )

        if not self.has_ended():
            self.start_new_hand()

    def _check_player(self, index: int) -> None:
        if not 0 <= index < len(self._players):
            raise InvalidPlayerIndex(f"Player index {index} out of bounds")
