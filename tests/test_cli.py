"""Tests for the typer CLI."""

from typer.testing import CliRunner

from unocore.cli import app

runner = CliRunner()


def test_simulate() -> None:
    result = runner.invoke(app, ["simulate", "--players", "3", "--matches", "2", "--seed", "5",
                                 "--target-score", "50"])
    assert result.exit_code == 0, result.output
    assert "Simulation results:" in result.output


def test_play_with_random_agents() -> None:
    result = runner.invoke(app, ["play", "--agents", "random:ann,random:bob", "--seed", "1",
                                 "--target-score", "50", "--dealer", "0"])
    assert result.exit_code == 0, result.output
    assert "Winner: " in result.output
    assert "ann:" in result.output


def test_play_rejects_unknown_agent() -> None:
    result = runner.invoke(app, ["play", "--agents", "robot,random"])
    assert result.exit_code != 0


def test_play_rejects_single_player() -> None:
    result = runner.invoke(app, ["play", "--agents", "random", "--seed", "1"])
    assert result.exit_code != 0


def test_log_level_is_case_insensitive() -> None:
    result = runner.invoke(app, ["--log-level", "debug", "simulate", "--players", "2",
                                 "--matches", "1", "--seed", "3", "--target-score", "30"])
    assert result.exit_code == 0, result.output


def test_unknown_log_level_is_a_usage_error() -> None:
    result = runner.invoke(app, ["--log-level", "loud", "simulate", "--matches", "1"])
    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
