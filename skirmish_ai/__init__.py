"""
Skirmish AI - Adversarial search agents for a two-player grid combat game.

This package provides the rules of a small tactical game played with
infantry, gunners and mobile towers, several AI agents (random, one-ply
greedy, negamax and Monte Carlo tree search) and an arena to compare them
over many randomly generated battles.
"""

__version__ = "0.1.0"
__author__ = "Skirmish AI Team"

# Make key components available at package level
from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.core.units import Position, Unit
from skirmish_ai.core.actions import Action
from skirmish_ai.core.constants import UnitType
from skirmish_ai.evaluation.evaluators import (
    Evaluator, AliveUnitsEvaluator, InfluenceEvaluator, CombinedEvaluator
)
from skirmish_ai.agents import Agent, RandomAgent, NaiveAgent, NegaMaxAgent
from skirmish_ai.mcts import MCTSAgent, MCTSConfig
from skirmish_ai.arena import Arena, ArenaConfig, FightResult

# Version info as a tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split('.')))

# Default configuration
DEFAULT_CONFIG = {
    "grid_size": 10,
    "units_per_side": 6,
    "max_rounds": 100,
    "mcts_iterations": 1000,
    "rollout_rounds": 50,
}
