"""Match orchestration."""

from unocore.orchestration.match_runner import MatchResult, MatchRunner
from unocore.orchestration.tournament import run_tournament

__all__ = ["MatchResult", "MatchRunner", "run_tournament"]
