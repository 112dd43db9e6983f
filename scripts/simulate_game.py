"""Simulate a match with random agents."""

import logging

from unocore.agents import RandomAgent
from unocore.engine import seeded_shuffler
from unocore.orchestration import MatchRunner


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Bot4 forgets to say UNO half of the time
    agents = [
        RandomAgent("Bot1", seed=1),
        RandomAgent("Bot2", seed=2),
        RandomAgent("Bot3", seed=3),
        RandomAgent("Bot4", seed=4, uno_rate=0.5),
    ]

    runner = MatchRunner(agents, target_score=200, shuffler=seeded_shuffler(42), dealer=0)
    result = runner.run()

    print(f"Match finished! Winner: {result.winner_name}")
    print(f"Hands: {result.hands_played}  Turns: {result.num_turns}")
    for name, score in zip(result.player_names, result.scores):
        print(f"  {name}: {score}")


if __name__ == "__main__":
    main()
