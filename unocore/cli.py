"""CLI entry point."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO matches between human and random players")


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        "-l",
        envvar="UNO_LOG_LEVEL",
        case_sensitive=False,
        help="Logging level",
    ),
) -> None:
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_agents(agent_specs: str, seed: Optional[int]) -> list["AgentProtocol"]:
    from unocore.agent.protocol import AgentProtocol
    from unocore.agents.human_agent import HumanAgent
    from unocore.agents.random_agent import RandomAgent

    parts = [s.strip() for s in agent_specs.split(",") if s.strip()]
    agents: list[AgentProtocol] = []
    for i, part in enumerate(parts):
        if ":" in part:
            kind, name = part.split(":", 1)
        else:
            kind, name = part, f"player_{i}"

        kind = kind.lower()
        if kind == "human":
            agents.append(HumanAgent(name=name))
        elif kind == "random":
            agents.append(RandomAgent(name=name, seed=None if seed is None else seed + i))
        else:
            raise typer.BadParameter(f"Unknown agent type: {kind}. Use 'human' or 'random'.")
    return agents


@app.command()
def play(
    agents: str = typer.Option(
        "human,random,random",
        "--agents",
        "-a",
        help="Comma-separated: human, random, or kind:name (e.g. human:alice,random:bot)",
    ),
    target_score: int = typer.Option(500, "--target-score", "-t", envvar="UNO_TARGET_SCORE"),
    cards_per_player: int = typer.Option(7, "--cards", "-c", envvar="UNO_CARDS_PER_PLAYER"),
    dealer: Optional[int] = typer.Option(None, "--dealer", "-d", help="Seat of the first dealer"),
    max_turns: int = typer.Option(5000, "--max-turns", envvar="UNO_MAX_TURNS"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
) -> None:
    """Run a single UNO match."""
    from unocore.engine import UnoError, seeded_shuffler
    from unocore.orchestration.match_runner import MatchRunner

    agent_list = _parse_agents(agents, seed)
    try:
        runner = MatchRunner(
            agent_list,
            target_score=target_score,
            shuffler=seeded_shuffler(seed),
            cards_per_player=cards_per_player,
            dealer=dealer,
            max_turns=max_turns,
        )
        result = runner.run()
    except UnoError as e:
        raise typer.BadParameter(str(e)) from e

    typer.echo(f"Winner: {result.winner_name or 'None (unfinished)'}")
    typer.echo(f"Hands: {result.hands_played}  Turns: {result.num_turns}")
    for name, score in zip(result.player_names, result.scores):
        typer.echo(f"  {name}: {score}")


@app.command()
def simulate(
    players: int = typer.Option(4, "--players", "-n", help="Number of random players"),
    matches: int = typer.Option(100, "--matches", "-g", help="Number of matches"),
    target_score: int = typer.Option(500, "--target-score", "-t", envvar="UNO_TARGET_SCORE"),
    cards_per_player: int = typer.Option(7, "--cards", "-c", envvar="UNO_CARDS_PER_PLAYER"),
    max_turns: int = typer.Option(5000, "--max-turns", envvar="UNO_MAX_TURNS"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
) -> None:
    """Run many matches between random players."""
    from unocore.agents.random_agent import RandomAgent
    from unocore.engine import UnoError
    from unocore.orchestration.tournament import run_tournament

    def make_agents(match_seed: int) -> list[RandomAgent]:
        return [RandomAgent(name=f"player_{i}", seed=match_seed + i) for i in range(players)]

    try:
        wins = run_tournament(
            make_agents,
            num_matches=matches,
            seed=seed,
            target_score=target_score,
            cards_per_player=cards_per_player,
            max_turns=max_turns,
        )
    except UnoError as e:
        raise typer.BadParameter(str(e)) from e

    typer.echo("Simulation results:")
    for name, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {w} wins")


if __name__ == "__main__":
    app()
