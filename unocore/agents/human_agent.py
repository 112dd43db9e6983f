"""Human agent - reads actions from terminal."""

from typing import Optional

from unocore.engine import Action, PlayerView
from unocore.engine.actions import DrawCard, PlayCard


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

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

        hand = player_view.my_hand
        print(f"\n--- {self._name}'s turn ---")
        print("Your hand:", " ".join(str(c) for c in hand))
        print("Top discard:", player_view.top_discard)
        others = ", ".join(
            f"{name}: {count}"
            for i, (name, count) in enumerate(zip(player_view.players, player_view.num_cards_per_player))
            if i != player_index
        )
        print("Other players:", others)
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            if isinstance(a, DrawCard):
                print(f"  {i}: DRAW")
            else:
                extra = f" (choose color: {a.chosen_color.value})" if a.chosen_color else ""
                print(f"  {i}: PLAY {hand[a.card_index]}{extra}")

        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    break
            except (ValueError, EOFError):
                pass
            print("Invalid. Try again.")

        action = legal_actions[idx]
        if isinstance(action, PlayCard) and len(hand) == 2:
            action.say_uno = self._ask("Say UNO? [y/N]: ")
        return action

    def catch_uno(self, player_view: PlayerView, player_index: int) -> Optional[int]:
        for seat in player_view.catchable_players():
            name = player_view.players[seat]
            if self._ask(f"[{self._name}] {name} has one card. Catch them? [y/N]: "):
                return seat
        return None

    @staticmethod
    def _ask(prompt: str) -> bool:
        try:
            return input(prompt).strip().lower() in ("y", "yes")
        except EOFError:
            return False
