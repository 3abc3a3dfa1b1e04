"""
Agents for the skirmish game.

Every agent implements ``play(battlefield, side) -> Action``:

1. RandomAgent plays a uniformly random legal action
2. NaiveAgent plays the action whose outcome its evaluator scores best
3. NegaMaxAgent searches a fixed number of plies with negamax

The Monte Carlo tree search agent lives in :mod:`skirmish_ai.mcts`.
"""

from skirmish_ai.agents.base import Agent, legal_actions_or_raise
from skirmish_ai.agents.random_agent import RandomAgent
from skirmish_ai.agents.naive import NaiveAgent
from skirmish_ai.agents.negamax import NegaMaxAgent
from skirmish_ai.agents.presets import all_naive_agents

__all__ = [
    'Agent', 'legal_actions_or_raise',
    'RandomAgent', 'NaiveAgent', 'NegaMaxAgent',
    'all_naive_agents',
]
