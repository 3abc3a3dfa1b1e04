"""
Naive agent.

Looks one action ahead: every legal action is applied and the resulting
battlefield scored, and the best scoring action is played. This is the
same as a minimax search of depth one.
"""
from skirmish_ai.agents.base import Agent, legal_actions_or_raise
from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.evaluation.evaluators import Evaluator


class NaiveAgent(Agent):
    """One-ply greedy agent driven by an evaluator."""

    def __init__(self, evaluator: Evaluator, name: str = "Naive Agent"):
        self.evaluator = evaluator
        self.name = name

    def play(self, battlefield: Battlefield, side: int) -> Action:
        """
        Play the action whose resulting battlefield scores best for ``side``.

        Ties are broken in favour of the first action enumerated.
        """
        best_action = None
        best_score = None
        for action in legal_actions_or_raise(battlefield, side):
            score = self.evaluator.evaluate(battlefield.apply_action(action), side)
            if best_score is None or score > best_score:
                best_action, best_score = action, score
        return best_action
