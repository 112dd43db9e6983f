"""Tournament - run many matches and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Callable, Sequence

from unocore.engine.shuffler import seeded_shuffler
from unocore.orchestration.match_runner import MatchRunner


def run_tournament(
    agent_factory: Callable[[int], Sequence[Any]],
    num_matches: int = 100,
    seed: int | None = None,
    dealer: int = 0,
    **match_options: Any,
) -> dict[str, int]:
    """Run a series of matches and count wins per player.

    ``agent_factory`` is called with a per-match seed and returns the agents
    for that match. Match ``m`` is first dealt by seat ``(dealer + m) % n``, so
    the opening deal rotates; ``match_options`` go straight to ``MatchRunner``.

    Returns:
        Dict mapping player name to number of match wins.
    """
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for m in range(num_matches):
        match_seed = rng.randint(0, 2**31 - 1)
        agents = agent_factory(match_seed)
        runner = MatchRunner(
            agents,
            shuffler=seeded_shuffler(match_seed),
            dealer=(dealer + m) % len(agents),
            **match_options,
        )
        result = runner.run()
        if result.winner_name is not None:
            wins[result.winner_name] += 1

    return dict(wins)
