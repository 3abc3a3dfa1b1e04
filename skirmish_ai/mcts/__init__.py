"""
Monte Carlo Tree Search (MCTS) implementation for the skirmish game.

The MCTS agent works by repeating, a fixed number of times:

1. Selection: Starting from the root node, select child nodes using UCB1 until
   reaching a node that hasn't been fully expanded.
2. Expansion: Create a new child node for the untried action that the agent's
   evaluator scores best.
3. Simulation: From the new node, play a random match with a round cap.
4. Backpropagation: Update the win/loss statistics of all nodes in the path.

The move played is the root child with the best win ratio.
"""

from skirmish_ai.mcts.config import MCTSConfig
from skirmish_ai.mcts.node import MCTSNode
from skirmish_ai.mcts.search import (
    mcts_search,
    select_node,
    expand_node,
    simulate_game,
    backpropagate
)
from skirmish_ai.mcts.agent import MCTSAgent, MCTSAgentFactory

# Default configuration
DEFAULT_CONFIG = MCTSConfig(
    iterations=1000,          # Number of MCTS iterations per move
    exploration_weight=1.0,   # Weight of the UCB1 exploration term
    rollout_rounds=50,        # Round cap of each random playout
)

__all__ = [
    'MCTSAgent',
    'MCTSAgentFactory',
    'MCTSNode',
    'MCTSConfig',
    'mcts_search',
    'select_node',
    'expand_node',
    'simulate_game',
    'backpropagate',
    'DEFAULT_CONFIG'
]
