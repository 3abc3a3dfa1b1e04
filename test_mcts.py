#!/usr/bin/env python
"""
Tests for the Monte Carlo Tree Search agent.

Checks the node bookkeeping, the search loop and the agent wrapper on
small battlefields where the right move is known.
"""
import random
import unittest

from skirmish_ai.agents import Agent, RandomAgent
from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.core.constants import UnitType
from skirmish_ai.core.units import Position, Unit
from skirmish_ai.evaluation.presets import unit_count_double
from skirmish_ai.mcts import (
    DEFAULT_CONFIG, MCTSAgent, MCTSAgentFactory, MCTSConfig, MCTSNode,
    backpropagate, mcts_search, select_node, simulate_game
)
from skirmish_ai.mcts.search import count_nodes, get_action_statistics, get_principal_variation


def unit(unit_type: UnitType, x: int, y: int, side: int) -> Unit:
    return Unit(unit_type, Position(x, y), side)


def gunner_facing_infantry() -> Battlefield:
    return Battlefield(10, 10, [
        [unit(UnitType.GUNNER, 0, 0, 0)],
        [unit(UnitType.INFANTRY, 0, 2, 1)],
    ])


KILL = Action(Position(0, 0), Position(0, 1), Position(0, 2))


class TestMCTSConfig(unittest.TestCase):
    """Test case for the MCTS configuration."""

    def test_defaults(self):
        config = MCTSConfig()
        self.assertEqual(config.iterations, 1000)
        self.assertEqual(config.exploration_weight, 1.0)
        self.assertEqual(config.rollout_rounds, 50)
        self.assertEqual(DEFAULT_CONFIG.to_dict(), config.to_dict())

    def test_validation(self):
        with self.assertRaises(ValueError):
            MCTSConfig(iterations=0)
        with self.assertRaises(ValueError):
            MCTSConfig(exploration_weight=-0.5)
        with self.assertRaises(ValueError):
            MCTSConfig(rollout_rounds=0)

    def test_presets(self):
        self.assertLess(MCTSConfig.fast().iterations, MCTSConfig.default().iterations)
        self.assertGreater(MCTSConfig.deep().iterations, MCTSConfig.default().iterations)

    def test_from_dict_ignores_unknown_keys(self):
        config = MCTSConfig.from_dict({"iterations": 12, "temperature": 3.0})
        self.assertEqual(config.iterations, 12)
        self.assertEqual(MCTSConfig.from_dict(config.to_dict()), config)


class TestMCTSNode(unittest.TestCase):
    """Test case for MCTS nodes."""

    def setUp(self):
        self.root = MCTSNode(gunner_facing_infantry(), 0)

    def test_new_node(self):
        self.assertEqual(self.root.games, 0)
        self.assertEqual(self.root.win_ratio, 0.0)
        self.assertEqual(len(self.root.untried_actions), 8)
        self.assertFalse(self.root.is_terminal())
        self.assertFalse(self.root.is_fully_expanded())

    def test_update(self):
        self.root.update(0)
        self.root.update(0)
        self.root.update(1)
        self.assertEqual((self.root.wins, self.root.losses), (2, 1))
        self.assertAlmostEqual(self.root.win_ratio, 2 / 3)

    def test_expand_picks_best_scoring_action(self):
        child = self.root.expand(unit_count_double())

        self.assertEqual(child.action, KILL)
        self.assertEqual(child.side, 1)
        self.assertTrue(child.battlefield.is_terminal(1))
        self.assertTrue(child.is_terminal())
        self.assertEqual(self.root.children, [child])
        self.assertEqual(len(self.root.untried_actions), 7)
        self.assertNotIn(KILL, self.root.untried_actions)

    def test_expand_without_untried_actions_raises(self):
        node = MCTSNode(gunner_facing_infantry().remove_units(0, 1), 0)
        self.assertTrue(node.is_terminal())
        with self.assertRaises(ValueError):
            node.expand(unit_count_double())

    def test_selection_and_best_child_use_parent_perspective(self):
        evaluator = unit_count_double()
        first = self.root.expand(evaluator)
        second = self.root.expand(evaluator)

        # Counts are kept for the child's side to move, side 1
        first.wins, first.losses = 3, 1
        second.wins, second.losses = 1, 3
        self.root.wins, self.root.losses = 4, 4

        self.assertIs(self.root.select_child(0.0), second)
        self.assertIs(self.root.best_child(), second)
        self.assertEqual(self.root.best_action(), second.action)

    def test_best_child_ties_go_to_first(self):
        evaluator = unit_count_double()
        first = self.root.expand(evaluator)
        second = self.root.expand(evaluator)
        for child in (first, second):
            child.wins, child.losses = 1, 1
        self.assertIs(self.root.best_child(), first)

    def test_select_without_children_raises(self):
        with self.assertRaises(ValueError):
            self.root.select_child(1.0)
        self.assertIsNone(self.root.best_action())


class TestSearchFunctions(unittest.TestCase):
    """Test case for the phases of the search."""

    def test_select_node_expands_root_first(self):
        root = MCTSNode(gunner_facing_infantry(), 0)
        path = select_node(root, unit_count_double(), 1.0)
        self.assertEqual(len(path), 2)
        self.assertIs(path[0], root)
        self.assertEqual(path[1].action, KILL)

    def test_backpropagate_alternates_perspective(self):
        root = MCTSNode(gunner_facing_infantry(), 0)
        child = root.expand(unit_count_double())
        backpropagate([root, child], winner=0)
        self.assertEqual((root.wins, root.losses), (1, 0))
        self.assertEqual((child.wins, child.losses), (0, 1))

    def test_simulate_game_returns_a_side(self):
        battlefield = Battlefield.random(6, 6, 3, random.Random(2))
        node = MCTSNode(battlefield, 1)
        agents = (RandomAgent(seed=0), RandomAgent(seed=1))
        for _ in range(5):
            self.assertIn(simulate_game(node, agents, 10), (0, 1))

    def test_search_finds_the_kill(self):
        config = MCTSConfig(iterations=60, rollout_rounds=10, seed=4)
        action, stats, root = mcts_search(gunner_facing_infantry(), 0, unit_count_double(), config)

        self.assertEqual(action, KILL)
        self.assertEqual(stats["iterations"], 60)
        self.assertEqual(root.games, 60)
        self.assertEqual(stats["node_count"], count_nodes(root))
        self.assertGreater(stats["terminal_hits"], 0)
        self.assertEqual(stats["action_win_rates"][str(KILL)], 1.0)

    def test_search_from_blocked_side(self):
        battlefield = Battlefield(2, 1, [
            [unit(UnitType.GUNNER, 0, 0, 0)],
            [unit(UnitType.GUNNER, 1, 0, 1)],
        ])
        action, stats, root = mcts_search(battlefield, 0, unit_count_double(), MCTSConfig(iterations=5))
        self.assertIsNone(action)
        self.assertEqual(stats["iterations"], 0)

    def test_analysis_helpers(self):
        config = MCTSConfig(iterations=40, rollout_rounds=5, seed=0)
        _, _, root = mcts_search(gunner_facing_infantry(), 0, unit_count_double(), config)

        variation = get_principal_variation(root)
        self.assertEqual(variation[0], (KILL, 1.0))

        statistics = get_action_statistics(root, 1.0)
        self.assertEqual(len(statistics), len(root.children))
        self.assertEqual(set(statistics[str(KILL)]), {"games", "wins", "value", "ucb"})


class TestMCTSAgent(unittest.TestCase):
    """Test case for the MCTS agent."""

    def test_plays_legal_action(self):
        battlefield = Battlefield.random(6, 6, 3, random.Random(9))
        agent = MCTSAgent(unit_count_double(), MCTSConfig(iterations=30, rollout_rounds=5, seed=1))
        self.assertIsInstance(agent, Agent)

        action = agent.play(battlefield, 1)
        self.assertIn(action, battlefield.legal_actions(1))
        self.assertEqual(agent.get_last_statistics()["iterations"], 30)
        self.assertEqual(len(agent.action_history), 1)
        self.assertTrue(agent.get_action_statistics())

        agent.reset_statistics()
        self.assertEqual(agent.get_last_statistics(), {})
        self.assertEqual(agent.get_principal_variation(), [])

    def test_forced_move_skips_search(self):
        battlefield = Battlefield(1, 2, [[unit(UnitType.INFANTRY, 0, 0, 0)], []])
        agent = MCTSAgent(unit_count_double(), MCTSConfig(iterations=10))

        action = agent.play(battlefield, 0)

        self.assertEqual(action, Action(Position(0, 0), Position(0, 1), Position(0, 1)))
        self.assertTrue(agent.last_stats["forced_move"])
        self.assertIsNone(agent.last_root)

    def test_no_legal_action_raises(self):
        agent = MCTSAgent(unit_count_double(), MCTSConfig(iterations=10))
        with self.assertRaises(ValueError):
            agent.play(gunner_facing_infantry().remove_units(0, 1), 0)

    def test_seeded_agents_agree(self):
        battlefield = Battlefield.random(6, 6, 3, random.Random(1))
        config = MCTSConfig(iterations=25, rollout_rounds=5, seed=7)
        first = MCTSAgent(unit_count_double(), config)
        second = MCTSAgent(unit_count_double(), config)
        self.assertEqual(first.play(battlefield, 0), second.play(battlefield, 0))

    def test_factory(self):
        self.assertEqual(MCTSAgentFactory.create_fast().config.iterations, 100)
        self.assertEqual(MCTSAgentFactory.create_standard().config.iterations, 1000)
        self.assertEqual(MCTSAgentFactory.create_strong().config.iterations, 5000)

        agent = MCTSAgentFactory.create_custom(iterations=12, seed=3, name="Tiny")
        self.assertEqual(agent.config.iterations, 12)
        self.assertEqual(str(agent), "Tiny (MCTS, 12 iterations)")


if __name__ == "__main__":
    unittest.main()
