"""Agent protocol - interface that human and scripted players implement."""

from typing import Optional, Protocol

from unocore.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            legal_actions: List of valid actions to choose from.
            player_index: This agent's seat.

        Returns:
            One of the legal actions, or None to draw.
        """
        ...

    def catch_uno(self, player_view: PlayerView, player_index: int) -> Optional[int]:
        """Called after every move; return a seat to accuse of not saying UNO, or None."""
        ...
