"""Built-in agents."""

from unocore.agents.human_agent import HumanAgent
from unocore.agents.random_agent import RandomAgent

__all__ = ["HumanAgent", "RandomAgent"]
