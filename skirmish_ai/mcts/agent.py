"""
Monte Carlo Tree Search Agent for the skirmish game.

This module provides the MCTSAgent class, a ready-to-use agent that uses
Monte Carlo Tree Search to select actions, and provides statistics about its
search process.
"""
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console

from skirmish_ai.agents.base import Agent, legal_actions_or_raise
from skirmish_ai.agents.random_agent import RandomAgent
from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.evaluation.evaluators import Evaluator
from skirmish_ai.evaluation.presets import unit_count_double
from skirmish_ai.mcts.config import MCTSConfig
from skirmish_ai.mcts.node import MCTSNode
from skirmish_ai.mcts.search import (
    mcts_search, get_action_statistics, get_principal_variation
)

logger = logging.getLogger(__name__)
console = Console()


class MCTSAgent(Agent):
    """
    Monte Carlo Tree Search agent.

    The injected evaluator only decides which untried action is expanded
    next; the value of a node comes from random playouts.
    """

    def __init__(
        self,
        evaluator: Evaluator,
        config: Optional[MCTSConfig] = None,
        name: str = "MCTS Agent",
        verbose: bool = False
    ):
        """
        Initialize an MCTS agent.

        Args:
            evaluator: Evaluator used to prioritise expansions
            config: MCTS configuration parameters
            name: Name of the agent
            verbose: Whether to print information about each search
        """
        self.evaluator = evaluator
        self.config = config or MCTSConfig()
        self.name = name
        self.verbose = verbose

        # The agent owns its playout agents and their random generators
        seed = self.config.seed
        self.rollout_agents = (
            RandomAgent(seed=seed, name=f"{name} rollout 0"),
            RandomAgent(seed=None if seed is None else seed + 1, name=f"{name} rollout 1"),
        )

        # Statistics from the most recent search
        self.last_stats: Dict[str, Any] = {}

        # History of all actions and their statistics
        self.action_history: List[Tuple[Action, Dict[str, Any]]] = []

        # Root node of the last search
        self.last_root: Optional[MCTSNode] = None

    def play(self, battlefield: Battlefield, side: int) -> Action:
        """
        Select an action using Monte Carlo Tree Search.

        Args:
            battlefield: Current battlefield
            side: Side making the decision

        Returns:
            Selected action
        """
        valid_actions = legal_actions_or_raise(battlefield, side)

        # If there's only one valid action, no need to search
        if len(valid_actions) == 1:
            self.last_stats = {"iterations": 0, "forced_move": True}
            self.last_root = None
            return valid_actions[0]

        start_time = time.time()
        action, stats, root = mcts_search(
            battlefield, side, self.evaluator, self.config, self.rollout_agents
        )
        stats["total_time"] = time.time() - start_time

        self.last_stats = stats
        self.last_root = root
        self.action_history.append((action, stats))

        if self.verbose:
            self._print_search_info(action, stats)

        return action

    def _print_search_info(self, action: Action, stats: Dict[str, Any]) -> None:
        """
        Print information about the search.

        Args:
            action: Selected action
            stats: Search statistics
        """
        console.print(f"\n[bold]{self.name}[/bold] selected: {action}")
        console.print(f"Iterations: {stats['iterations']}")
        console.print(f"Time: {stats['time_elapsed']:.3f}s ({stats['iterations_per_second']:.1f} it/s)")
        console.print(f"Nodes: {stats['node_count']}")
        console.print(f"Max depth: {stats['max_depth']}")

        # Print top actions by number of playouts
        console.print("\nTop actions:")
        by_games = sorted(stats["action_games"].items(), key=lambda x: x[1], reverse=True)
        for i, (action_str, games) in enumerate(by_games[:5]):
            win_rate = stats["action_win_rates"].get(action_str, 0.0)
            console.print(f"{i + 1}. {action_str} - {games} games, {win_rate:.3f} win rate")

    def get_principal_variation(self) -> List[Tuple[Action, float]]:
        """
        Get the principal variation from the last search.

        Returns:
            List of (action, win rate) pairs
        """
        if self.last_root is None:
            return []
        return get_principal_variation(self.last_root)

    def get_action_statistics(self) -> Dict[str, Dict[str, float]]:
        """
        Get statistics for all root actions from the last search.

        Returns:
            Dictionary mapping action strings to statistics
        """
        if self.last_root is None:
            return {}
        return get_action_statistics(self.last_root, self.config.exploration_weight)

    def get_last_statistics(self) -> Dict[str, Any]:
        return self.last_stats

    def reset_statistics(self) -> None:
        """Reset all statistics."""
        self.last_stats = {}
        self.action_history = []
        self.last_root = None

    def __str__(self) -> str:
        return f"{self.name} (MCTS, {self.config.iterations} iterations)"


class MCTSAgentFactory:
    """
    Factory for creating MCTS agents with different configurations.

    Agents use the double unit counting evaluator unless told otherwise.
    """

    @staticmethod
    def create_fast(evaluator: Optional[Evaluator] = None) -> MCTSAgent:
        """
        Create a fast MCTS agent with fewer iterations.

        Returns:
            MCTSAgent
        """
        return MCTSAgent(evaluator or unit_count_double(), MCTSConfig.fast(), name="Fast MCTS")

    @staticmethod
    def create_standard(evaluator: Optional[Evaluator] = None) -> MCTSAgent:
        return MCTSAgent(evaluator or unit_count_double(), MCTSConfig.default(), name="Standard MCTS")

    @staticmethod
    def create_strong(evaluator: Optional[Evaluator] = None) -> MCTSAgent:
        return MCTSAgent(evaluator or unit_count_double(), MCTSConfig.deep(), name="Strong MCTS")

    @staticmethod
    def create_custom(
        evaluator: Optional[Evaluator] = None,
        iterations: int = 1000,
        exploration_weight: float = 1.0,
        rollout_rounds: int = 50,
        seed: Optional[int] = None,
        name: str = "Custom MCTS"
    ) -> MCTSAgent:
        """
        Create a custom MCTS agent.

        Args:
            evaluator: Evaluator used to prioritise expansions
            iterations: Number of MCTS iterations
            exploration_weight: UCB1 exploration weight
            rollout_rounds: Round cap of the random playouts
            seed: Seed for the playout agents
            name: Name of the agent

        Returns:
            MCTSAgent
        """
        config = MCTSConfig(
            iterations=iterations,
            exploration_weight=exploration_weight,
            rollout_rounds=rollout_rounds,
            seed=seed,
        )
        return MCTSAgent(evaluator or unit_count_double(), config=config, name=name)
