#!/usr/bin/env python
"""
Tests for the random, naive and negamax agents.
"""
import random
import unittest

from skirmish_ai.agents import (
    Agent, NaiveAgent, NegaMaxAgent, RandomAgent, all_naive_agents, legal_actions_or_raise
)
from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.core.constants import UnitType
from skirmish_ai.core.units import Position, Unit
from skirmish_ai.evaluation import AliveUnitsEvaluator, Evaluator
from skirmish_ai.evaluation.presets import influence_double, unit_count_double


def unit(unit_type: UnitType, x: int, y: int, side: int) -> Unit:
    return Unit(unit_type, Position(x, y), side)


class ConstantEvaluator(Evaluator):
    """Scores every battlefield the same."""

    def evaluate(self, battlefield, side):
        return 7


def gunner_facing_infantry() -> Battlefield:
    return Battlefield(10, 10, [
        [unit(UnitType.GUNNER, 0, 0, 0)],
        [unit(UnitType.INFANTRY, 0, 2, 1)],
    ])


class TestRandomAgent(unittest.TestCase):
    """Test case for the random agent."""

    def setUp(self):
        self.battlefield = Battlefield.random(10, 10, 6, random.Random(5))

    def test_plays_legal_actions(self):
        agent = RandomAgent(seed=1)
        for side in (0, 1):
            legal = self.battlefield.legal_actions(side)
            for _ in range(20):
                self.assertIn(agent.play(self.battlefield, side), legal)

    def test_seed_is_reproducible(self):
        first = RandomAgent(seed=3)
        second = RandomAgent(seed=3)
        for _ in range(10):
            self.assertEqual(first.play(self.battlefield, 0), second.play(self.battlefield, 0))

    def test_no_legal_action_raises(self):
        with self.assertRaises(ValueError):
            RandomAgent(seed=0).play(gunner_facing_infantry().remove_units(0, 1), 0)

    def test_action_callback(self):
        agent = RandomAgent(seed=2)
        callback = agent.get_action_callback()
        self.assertIn(callback(self.battlefield, 1), self.battlefield.legal_actions(1))

    def test_is_an_agent(self):
        agent = RandomAgent(name="Baseline")
        self.assertIsInstance(agent, Agent)
        self.assertEqual(str(agent), "Baseline")


class TestLegalActionsOrRaise(unittest.TestCase):

    def test_blocked_side(self):
        battlefield = Battlefield(2, 1, [
            [unit(UnitType.GUNNER, 0, 0, 0)],
            [unit(UnitType.GUNNER, 1, 0, 1)],
        ])
        with self.assertRaises(ValueError):
            legal_actions_or_raise(battlefield, 0)


class TestNaiveAgent(unittest.TestCase):
    """Test case for the one-ply greedy agent."""

    def test_ties_go_to_first_action(self):
        battlefield = Battlefield.random(10, 10, 6, random.Random(8))
        agent = NaiveAgent(ConstantEvaluator())
        self.assertEqual(agent.play(battlefield, 0), battlefield.legal_actions(0)[0])
        self.assertEqual(agent.play(battlefield, 1), battlefield.legal_actions(1)[0])

    def test_takes_the_kill(self):
        agent = NaiveAgent(unit_count_double())
        action = agent.play(gunner_facing_infantry(), 0)
        self.assertEqual(action, Action(Position(0, 0), Position(0, 1), Position(0, 2)))

    def test_no_legal_action_raises(self):
        battlefield = gunner_facing_infantry().remove_units(0, 1)
        with self.assertRaises(ValueError):
            NaiveAgent(unit_count_double()).play(battlefield, 0)

    def test_all_naive_agents(self):
        agents = all_naive_agents()
        self.assertEqual(len(agents), 6)
        self.assertEqual(len({agent.name for agent in agents}), 6)


class TestNegaMaxAgent(unittest.TestCase):
    """Test case for the negamax agent."""

    def test_negative_depth_raises(self):
        with self.assertRaises(ValueError):
            NegaMaxAgent(unit_count_double(), depth=-1)

    def test_depth_zero_plays_like_naive(self):
        for evaluator in (unit_count_double(), influence_double(), AliveUnitsEvaluator()):
            naive = NaiveAgent(evaluator)
            negamax = NegaMaxAgent(evaluator, depth=0)
            for seed in range(5):
                battlefield = Battlefield.random(6, 6, 3, random.Random(seed))
                for side in (0, 1):
                    self.assertEqual(negamax.play(battlefield, side), naive.play(battlefield, side))

    def test_depth_zero_with_one_sided_evaluator(self):
        # Own unit count ignores the enemy, so every action ties and the first one is played
        battlefield = Battlefield(10, 10, [
            [unit(UnitType.INFANTRY, 0, 0, 0)],
            [unit(UnitType.INFANTRY, 1, 0, 1)],
        ])
        evaluator = AliveUnitsEvaluator()
        expected = Action(Position(0, 0), Position(0, 1), Position(0, 1))
        self.assertEqual(NaiveAgent(evaluator).play(battlefield, 0), expected)
        self.assertEqual(NegaMaxAgent(evaluator, depth=0).play(battlefield, 0), expected)

    def test_takes_the_kill(self):
        agent = NegaMaxAgent(unit_count_double(), depth=1)
        action = agent.play(gunner_facing_infantry(), 0)
        self.assertEqual(action.target, Position(0, 2))

    def test_avoids_stepping_into_range(self):
        # One column: the gunner at (0, 5) can hit (0, 3) and (0, 4)
        battlefield = Battlefield(1, 6, [
            [unit(UnitType.INFANTRY, 0, 2, 0)],
            [unit(UnitType.GUNNER, 0, 5, 1)],
        ])

        # Every action keeps one unit a side, so one ply takes the first: into range
        naive_action = NaiveAgent(unit_count_double()).play(battlefield, 0)
        self.assertEqual(naive_action.destination, Position(0, 3))
        one_ply = NegaMaxAgent(unit_count_double(), depth=1).play(battlefield, 0)
        self.assertEqual(one_ply, naive_action)

        # Looking at the gunner's reply keeps the infantry out of range
        action = NegaMaxAgent(unit_count_double(), depth=2).play(battlefield, 0)
        self.assertEqual(action, Action(Position(0, 2), Position(0, 1), Position(0, 3)))

    def test_negamax_value(self):
        agent = NegaMaxAgent(unit_count_double(), depth=1)
        battlefield = gunner_facing_infantry()
        # Shooting the infantry leaves side 0 one unit ahead
        self.assertEqual(agent.negamax(battlefield, 0, 1), 1)
        # Side 0 without units is scored without searching
        empty = battlefield.remove_units(0, 1)
        self.assertEqual(agent.negamax(empty, 0, 3), -1)

    def test_str(self):
        self.assertEqual(str(NegaMaxAgent(unit_count_double(), depth=2, name="NM")), "NM (NegaMax, depth 2)")


if __name__ == "__main__":
    unittest.main()
