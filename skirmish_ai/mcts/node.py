"""
Monte Carlo Tree Search Node for the skirmish game.

This module defines the MCTSNode class which represents a node in the MCTS
tree. Each node holds a battlefield, the side to move, the actions not yet
explored and win/loss statistics. Parents own their children; there are no
references back up the tree, backpropagation walks the path recorded during
selection instead.
"""
from __future__ import annotations
from typing import List, Optional

import numpy as np

from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.evaluation.evaluators import Evaluator


class MCTSNode:
    """
    A node in the Monte Carlo Tree Search.

    Wins and losses are counted for :attr:`side`, the side to move at this
    node. A parent therefore reads its children's losses as its own wins.
    """

    def __init__(self, battlefield: Battlefield, side: int, action: Optional[Action] = None):
        """
        Initialize an MCTS node.

        Args:
            battlefield: The battlefield this node represents
            side: Side to move at this node
            action: The action that led to this node (None for root)
        """
        self.battlefield = battlefield
        self.side = side
        self.action = action

        # Node statistics
        self.wins = 0
        self.losses = 0
        self.children: List[MCTSNode] = []

        # Legal actions not expanded yet, in enumeration order
        self.untried_actions: List[Action] = battlefield.legal_actions(side)
        self._action_count = len(self.untried_actions)

    @property
    def games(self) -> int:
        """Number of playouts that went through this node."""
        return self.wins + self.losses

    @property
    def win_ratio(self) -> float:
        """Share of playouts won by this node's side (0 if never played)."""
        return self.wins / self.games if self.games else 0.0

    def has_untried_actions(self) -> bool:
        return bool(self.untried_actions)

    def is_terminal(self) -> bool:
        """
        Check if the side to move has no legal action.

        Returns:
            True if the side to move is out of units or blocked
        """
        return self._action_count == 0

    def is_fully_expanded(self) -> bool:
        return not self.untried_actions

    def update(self, winner: int) -> None:
        """
        Record the result of a playout.

        Args:
            winner: Side that won the playout
        """
        if winner == self.side:
            self.wins += 1
        else:
            self.losses += 1

    def ucb_scores(self, exploration_weight: float) -> np.ndarray:
        """
        Calculate the UCB1 score of every child from this node's point of view.

        UCB1 = losses(child) / games(child)
               + exploration_weight * sqrt(ln(2 * games(self)) / games(child))

        Args:
            exploration_weight: Weight of the exploration term

        Returns:
            Array of scores aligned with :attr:`children`
        """
        games = np.array([child.games for child in self.children], dtype=float)
        losses = np.array([child.losses for child in self.children], dtype=float)

        # Every child has been played out once when it was expanded
        exploitation = losses / games
        exploration = np.sqrt(np.log(2.0 * max(self.games, 1)) / games)
        return exploitation + exploration_weight * exploration

    def select_child(self, exploration_weight: float) -> MCTSNode:
        """
        Select the child with the highest UCB1 score.

        Ties go to the child expanded first.

        Args:
            exploration_weight: Weight of the exploration term

        Returns:
            Selected child node
        """
        if not self.children:
            raise ValueError("Cannot select child from node with no children")
        return self.children[int(np.argmax(self.ucb_scores(exploration_weight)))]

    def expand(self, evaluator: Evaluator) -> MCTSNode:
        """
        Expand the tree by adding a new child node.

        The untried action is not drawn at random: each one is applied and
        the result scored with ``evaluator`` for this node's side, and the
        best one (first on ties) is expanded.

        Args:
            evaluator: Evaluator used to prioritise the untried actions

        Returns:
            The new child node
        """
        if not self.untried_actions:
            raise ValueError("Cannot expand a node without untried actions")

        best_index = 0
        best_score = None
        best_battlefield = None
        for index, action in enumerate(self.untried_actions):
            battlefield = self.battlefield.apply_action(action)
            score = evaluator.evaluate(battlefield, self.side)
            if best_score is None or score > best_score:
                best_index, best_score, best_battlefield = index, score, battlefield

        action = self.untried_actions.pop(best_index)
        child = MCTSNode(best_battlefield, 1 - self.side, action)
        self.children.append(child)
        return child

    def best_child(self) -> MCTSNode:
        """
        Select the child with the best win ratio for this node's side.

        Returns:
            Best child node
        """
        if not self.children:
            raise ValueError("Cannot select child from node with no children")
        ratios = np.array([1.0 - child.win_ratio for child in self.children])
        return self.children[int(np.argmax(ratios))]

    def best_action(self) -> Optional[Action]:
        """
        Get the best action from this node.

        This is called at the root node to determine the final move.

        Returns:
            The best action, or None if no children
        """
        if not self.children:
            return None
        return self.best_child().action

    def __str__(self) -> str:
        return (f"MCTSNode(side={self.side}, "
                f"wins={self.wins}, losses={self.losses}, "
                f"children={len(self.children)}, "
                f"untried={len(self.untried_actions)})")
