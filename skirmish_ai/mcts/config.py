"""
Configuration for Monte Carlo Tree Search (MCTS).

This module defines the configuration parameters for the MCTS algorithm:
the number of iterations, the exploration constant and the length of the
random playouts.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from skirmish_ai.core.constants import (
    DEFAULT_MCTS_EXPLORATION, DEFAULT_MCTS_ITERATIONS, DEFAULT_ROLLOUT_ROUNDS
)


@dataclass
class MCTSConfig:
    """
    Configuration parameters for Monte Carlo Tree Search.

    The search runs a fixed amount of work per decision; there is no time
    budget.
    """
    # Search parameters
    iterations: int = DEFAULT_MCTS_ITERATIONS
    """Number of select/expand/simulate/backpropagate iterations per move"""

    exploration_weight: float = DEFAULT_MCTS_EXPLORATION
    """Weight of the exploration term of the UCB1 score"""

    # Simulation parameters
    rollout_rounds: int = DEFAULT_ROLLOUT_ROUNDS
    """Round cap of each random playout"""

    seed: Optional[int] = None
    """Seed for the random playout agents (None = unseeded)"""

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.iterations <= 0:
            raise ValueError("iterations must be positive")

        if self.exploration_weight < 0:
            raise ValueError("exploration_weight must be non-negative")

        if self.rollout_rounds <= 0:
            raise ValueError("rollout_rounds must be positive")

    @classmethod
    def default(cls) -> 'MCTSConfig':
        """
        Get the default configuration.

        Returns:
            Default MCTSConfig object
        """
        return cls()

    @classmethod
    def fast(cls) -> 'MCTSConfig':
        """
        Get a configuration optimized for speed (fewer iterations, shorter playouts).

        Returns:
            Fast MCTSConfig object
        """
        return cls(iterations=100, rollout_rounds=20)

    @classmethod
    def deep(cls) -> 'MCTSConfig':
        """
        Get a configuration optimized for deep search.

        Returns:
            Deep MCTSConfig object
        """
        return cls(
            iterations=5000,
            exploration_weight=0.8,  # Slightly less exploration
            rollout_rounds=100,
        )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'MCTSConfig':
        """
        Create a configuration from a dictionary.

        Args:
            config_dict: Dictionary of configuration parameters

        Returns:
            MCTSConfig object
        """
        # Filter out any keys that aren't valid parameters
        valid_params = {k: v for k, v in config_dict.items()
                        if k in cls.__dataclass_fields__}
        return cls(**valid_params)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the configuration to a dictionary.

        Returns:
            Dictionary of configuration parameters
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __str__(self) -> str:
        params = ", ".join(f"{name}={value}" for name, value in self.to_dict().items())
        return f"MCTSConfig({params})"
