"""
Random agent.

Plays a uniformly random legal action, including ones that shoot its own
units. It serves as a baseline and as the rollout policy of Monte Carlo
tree search.
"""
import random
from typing import Optional

from skirmish_ai.agents.base import Agent, legal_actions_or_raise
from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield


class RandomAgent(Agent):
    """Agent that selects actions randomly using its own random generator."""

    def __init__(self, seed: Optional[int] = None, name: str = "Random Agent"):
        """
        Initialize the random agent.

        Args:
            seed: Seed for the agent's random generator (None = unseeded)
            name: Name of the agent
        """
        self.name = name
        self.rng = random.Random(seed)

    def play(self, battlefield: Battlefield, side: int) -> Action:
        return self.rng.choice(legal_actions_or_raise(battlefield, side))
