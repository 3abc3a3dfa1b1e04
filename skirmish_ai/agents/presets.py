"""
Ready-made agents for comparing evaluators.
"""
from typing import List

from skirmish_ai.agents.naive import NaiveAgent
from skirmish_ai.evaluation.presets import all_evaluators


def all_naive_agents() -> List[NaiveAgent]:
    """
    Build one naive agent per evaluator preset.

    Each agent is named after the evaluator it uses, so a round-robin between
    them compares the heuristics themselves.

    Returns:
        List of freshly built agents
    """
    return [NaiveAgent(evaluator, name=label) for label, evaluator in all_evaluators()]
