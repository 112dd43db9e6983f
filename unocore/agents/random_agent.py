"""Random agent - plays a random legal card, for simulations and tests."""

import random
from typing import Optional

from unocore.engine import Action, PlayerView
from unocore.engine.actions import DrawCard, PlayCard


class RandomAgent:
    """Picks a random legal play, drawing only when nothing can be played.

    ``uno_rate`` is the chance of remembering to say UNO; ``catch_rate`` the
    chance of accusing an eligible player.
    """

    def __init__(
        self,
        name: str = "random",
        seed: Optional[int] = None,
        uno_rate: float = 1.0,
        catch_rate: float = 1.0,
    ):
        self._name = name
        self._rng = random.Random(seed)
        self._uno_rate = uno_rate
        self._catch_rate = catch_rate

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        if not legal_actions:
            return None

        # Prefer playing over drawing to make game progress
        play_actions = [a for a in legal_actions if isinstance(a, PlayCard)]
        if not play_actions:
            return next(a for a in legal_actions if isinstance(a, DrawCard))

        action = self._rng.choice(play_actions)
        if len(player_view.my_hand) == 2:
            action.say_uno = self._rng.random() < self._uno_rate
        return action

    def catch_uno(self, player_view: PlayerView, player_index: int) -> Optional[int]:
        for seat in player_view.catchable_players():
            if self._rng.random() < self._catch_rate:
                return seat
        return None
