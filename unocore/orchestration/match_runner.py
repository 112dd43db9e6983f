"""Match runner - drives agents through a Game until someone wins."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from unocore.engine import (
    Game,
    PlayerView,
    Shuffler,
    apply_action,
    get_legal_actions,
    standard_shuffler,
)
from unocore.engine.actions import DrawCard
from unocore.engine.game import DEFAULT_TARGET_SCORE
from unocore.engine.hand import DEFAULT_CARDS_PER_PLAYER, Hand

if TYPE_CHECKING:
    from unocore.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 5000


@dataclass
class MatchResult:
    """Result of a match."""

    winner: Optional[int]
    scores: tuple[int, ...]
    player_names: tuple[str, ...]
    hands_played: int
    num_turns: int
    completed: bool

    @property
    def winner_name(self) -> Optional[str]:
        return None if self.winner is None else self.player_names[self.winner]


class MatchRunner:
    """Runs a UNO match to completion."""

    def __init__(
        self,
        agents: Sequence["AgentProtocol"],
        target_score: int = DEFAULT_TARGET_SCORE,
        shuffler: Shuffler = standard_shuffler,
        cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
        dealer: Optional[int] = None,
        max_turns: int = DEFAULT_MAX_TURNS,
    ):
        self._agents = list(agents)
        self._target_score = target_score
        self._shuffler = shuffler
        self._cards_per_player = cards_per_player
        self._dealer = dealer
        self._max_turns = max_turns

    def run(self) -> MatchResult:
        """Run the match and return the result."""
        names = [agent.name for agent in self._agents]
        game = Game(
            names,
            target_score=self._target_score,
            shuffler=self._shuffler,
            cards_per_player=self._cards_per_player,
            dealer=self._dealer,
        )
        num_turns = 0
        completed = True

        while game.winner() is None:
            hand = game.current_hand()
            while not hand.has_ended() and num_turns < self._max_turns:
                self._take_turn(hand)
                num_turns += 1
                self._offer_catches(hand)
            if not hand.has_ended():
                logger.warning("Stopping after %d turns without a match winner", num_turns)
                completed = False
                break
            game.update_scores()

        return MatchResult(
            winner=game.winner(),
            scores=game.scores,
            player_names=game.players,
            hands_played=len(game.hands),
            num_turns=num_turns,
            completed=completed,
        )

    def _take_turn(self, hand: Hand) -> None:
        seat = hand.player_in_turn()
        legal = get_legal_actions(hand)
        view = PlayerView.from_hand(hand, seat)
        action = self._agents[seat].get_action(view, legal, seat)
        if action is None:
            action = next(a for a in legal if isinstance(a, DrawCard))
        apply_action(hand, action)

    def _offer_catches(self, hand: Hand) -> None:
        if hand.has_ended():
            return
        for seat, agent in enumerate(self._agents):
            accused = agent.catch_uno(PlayerView.from_hand(hand, seat), seat)
            if accused is not None and hand.catch_uno_failure(seat, accused):
                logger.info("%s caught %s without UNO", agent.name, hand.player(accused))
