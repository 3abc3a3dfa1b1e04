"""
Monte Carlo Tree Search (MCTS) algorithm for the skirmish game.

This module implements the core MCTS algorithm with the four standard phases:
1. Selection: Descend the tree with UCB1 until a node with untried actions
2. Expansion: Add the child reached by the best scoring untried action
3. Simulation: Play a random match from the new child
4. Backpropagation: Record the winner on every node of the selected path
"""
from __future__ import annotations
from collections import defaultdict
import logging
import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

from skirmish_ai.agents.base import Agent
from skirmish_ai.agents.random_agent import RandomAgent
from skirmish_ai.arena.match import resolve_match
from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.evaluation.evaluators import Evaluator
from skirmish_ai.mcts.config import MCTSConfig
from skirmish_ai.mcts.node import MCTSNode

logger = logging.getLogger(__name__)


def mcts_search(
    battlefield: Battlefield,
    side: int,
    evaluator: Evaluator,
    config: Optional[MCTSConfig] = None,
    rollout_agents: Optional[Sequence[Agent]] = None,
) -> Tuple[Optional[Action], Dict[str, Any], MCTSNode]:
    """
    Run Monte Carlo Tree Search to find the best action.

    Args:
        battlefield: Current battlefield
        side: Side making the decision
        evaluator: Evaluator used to pick which untried action to expand
        config: MCTS configuration parameters
        rollout_agents: Agents playing side 0 and side 1 in the playouts
            (two random agents by default)

    Returns:
        Tuple of (best action or None if the side cannot move, search
        statistics, root node)
    """
    # Use default config if none provided
    if config is None:
        config = MCTSConfig()

    if rollout_agents is None:
        seed = config.seed
        rollout_agents = (
            RandomAgent(seed=seed, name="Rollout 0"),
            RandomAgent(seed=None if seed is None else seed + 1, name="Rollout 1"),
        )

    root = MCTSNode(battlefield, side)

    # Track statistics
    stats: Dict[str, Any] = {
        "iterations": 0,
        "max_depth": 0,
        "terminal_hits": 0,
        "time_elapsed": 0.0,
        "action_games": defaultdict(int),
        "action_win_rates": defaultdict(float),
    }

    start_time = time.time()

    if root.is_terminal():
        stats["node_count"] = 1
        return None, stats, root

    # Main MCTS loop
    for _ in range(config.iterations):
        # 1-2. Selection & Expansion
        path = select_node(root, evaluator, config.exploration_weight)
        leaf = path[-1]

        # 3. Simulation
        if leaf.is_terminal():
            winner = 1 - leaf.side
            stats["terminal_hits"] += 1
        else:
            winner = simulate_game(leaf, rollout_agents, config.rollout_rounds)

        # 4. Backpropagation
        backpropagate(path, winner)

        stats["iterations"] += 1
        stats["max_depth"] = max(stats["max_depth"], len(path) - 1)

    best_action = root.best_action()

    # Record statistics about each action
    for child in root.children:
        action_str = str(child.action)
        stats["action_games"][action_str] = child.games
        stats["action_win_rates"][action_str] = 1.0 - child.win_ratio

    stats["node_count"] = count_nodes(root)
    stats["time_elapsed"] = time.time() - start_time
    stats["iterations_per_second"] = stats["iterations"] / max(0.001, stats["time_elapsed"])

    logger.debug(
        "MCTS for side %d: %d iterations, %d nodes, depth %d, %.3fs",
        side, stats["iterations"], stats["node_count"], stats["max_depth"], stats["time_elapsed"],
    )
    return best_action, stats, root


def select_node(root: MCTSNode, evaluator: Evaluator, exploration_weight: float) -> List[MCTSNode]:
    """
    Select a node for simulation.

    This function implements the selection and expansion phases of MCTS.
    It descends the tree using UCB1 until it reaches a node with untried
    actions, which it expands, or a terminal node.

    Args:
        root: Root node of the MCTS tree
        evaluator: Evaluator used to choose the action to expand
        exploration_weight: Weight of the UCB1 exploration term

    Returns:
        Path of nodes from the root to the node selected for simulation
    """
    path = [root]
    current = root
    while True:
        if current.has_untried_actions():
            path.append(expand_node(current, evaluator))
            return path
        if not current.children:
            # Terminal node: nothing to expand or select
            return path
        current = current.select_child(exploration_weight)
        path.append(current)


def expand_node(node: MCTSNode, evaluator: Evaluator) -> MCTSNode:
    """
    Expand a node by adding a child.

    This is a wrapper around the node's expand method.

    Args:
        node: Node to expand
        evaluator: Evaluator used to choose the action to expand

    Returns:
        New child node
    """
    return node.expand(evaluator)


def simulate_game(node: MCTSNode, agents: Sequence[Agent], rounds: int) -> int:
    """
    Run a random playout from a node.

    The match starts with the node's side to move and uses the same rules as
    the arena.

    Args:
        node: Node to simulate from
        agents: Agents for side 0 and side 1
        rounds: Round cap of the playout

    Returns:
        Winning side
    """
    return resolve_match(node.battlefield, agents, rounds, first_side=node.side)


def backpropagate(path: Sequence[MCTSNode], winner: int) -> None:
    """
    Update statistics along the selected path.

    Each node credits the result to its own side to move, so the win and
    loss counts swap from one level to the next.

    Args:
        path: Nodes from the root to the simulated node
        winner: Winning side of the playout
    """
    for node in reversed(path):
        node.update(winner)


def count_nodes(node: MCTSNode) -> int:
    """
    Count the total number of nodes in the tree.

    Args:
        node: Root node of the tree

    Returns:
        Total number of nodes
    """
    count = 1
    for child in node.children:
        count += count_nodes(child)
    return count


def get_principal_variation(root: MCTSNode, max_depth: int = 10) -> List[Tuple[Action, float]]:
    """
    Get the principal variation from the root.

    At each level the child with the best win ratio for the side to move is
    followed. This is useful for analysis and debugging.

    Args:
        root: Root node of the MCTS tree
        max_depth: Maximum depth to explore

    Returns:
        List of (action, win rate for the side playing it) pairs
    """
    result = []
    current = root

    while current.children and len(result) < max_depth:
        best_child = current.best_child()
        result.append((best_child.action, 1.0 - best_child.win_ratio))
        current = best_child

    return result


def get_action_statistics(root: MCTSNode, exploration_weight: float = 0.0) -> Dict[str, Dict[str, float]]:
    """
    Get statistics for all actions from the root.

    Args:
        root: Root node of the MCTS tree
        exploration_weight: Weight used for the reported UCB1 score

    Returns:
        Dictionary mapping action strings to statistics
    """
    result = {}
    if not root.children:
        return result

    scores = root.ucb_scores(exploration_weight)
    for child, score in zip(root.children, scores):
        result[str(child.action)] = {
            "games": child.games,
            "wins": child.losses,
            "value": 1.0 - child.win_ratio,
            "ucb": float(score),
        }

    return result
