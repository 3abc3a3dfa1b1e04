"""
NegaMax agent.

A depth-bounded minimax search written in its negamax form: the score of a
position for one side is taken to be the opposite of its score for the
other side, so every level maximises the negated value of its children
instead of alternating between min and max.
"""
import logging

from skirmish_ai.agents.base import Agent, legal_actions_or_raise
from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.core.constants import DEFAULT_NEGAMAX_DEPTH
from skirmish_ai.evaluation.evaluators import Evaluator

logger = logging.getLogger(__name__)


class NegaMaxAgent(Agent):
    """
    Minimax agent using sign inversion between the two sides.

    The same evaluator scores both sides, which is only sound when it is
    antisymmetric (``eval(b, s) == -eval(b, 1 - s)``). A
    :class:`~skirmish_ai.evaluation.evaluators.CombinedEvaluator` with the
    same evaluators on its ally and enemy lists is; a bare
    :class:`~skirmish_ai.evaluation.evaluators.AliveUnitsEvaluator` is not,
    and makes the search favour positions that are merely good for both.
    """

    def __init__(self, evaluator: Evaluator, depth: int = DEFAULT_NEGAMAX_DEPTH,
                 name: str = "NegaMax Agent"):
        """
        Initialize the agent.

        Args:
            evaluator: Evaluator used at the leaves
            depth: Search depth; 0 scores each action exactly like the
                naive agent, 1 scores it from the opponent's side and every
                further level adds one ply of replies
            name: Name of the agent
        """
        if depth < 0:
            raise ValueError("depth must be non-negative")
        self.evaluator = evaluator
        self.depth = depth
        self.name = name

    def negamax(self, battlefield: Battlefield, side: int, depth: int) -> int:
        """
        Score a battlefield for the side to move.

        Args:
            battlefield: Battlefield to score
            side: Side to move
            depth: Remaining search depth

        Returns:
            Best achievable score for ``side``
        """
        if depth == 0 or battlefield.is_terminal(side):
            return self.evaluator.evaluate(battlefield, side)

        actions = battlefield.legal_actions(side)
        if not actions:
            # Units left but all blocked: score it as a leaf
            return self.evaluator.evaluate(battlefield, side)

        return max(
            -self.negamax(battlefield.apply_action(action), 1 - side, depth - 1)
            for action in actions
        )

    def play(self, battlefield: Battlefield, side: int) -> Action:
        best_action = None
        best_value = None
        for action in legal_actions_or_raise(battlefield, side):
            child = battlefield.apply_action(action)
            if self.depth == 0:
                value = self.evaluator.evaluate(child, side)
            else:
                value = -self.negamax(child, 1 - side, self.depth - 1)
            if best_value is None or value > best_value:
                best_action, best_value = action, value
        logger.debug("%s chose %s (value %s)", self.name, best_action, best_value)
        return best_action

    def __str__(self) -> str:
        return f"{self.name} (NegaMax, depth {self.depth})"
