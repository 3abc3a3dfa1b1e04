#!/usr/bin/env python
"""
Tests for the battlefield evaluators and their presets.
"""
import random
import unittest

from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.core.constants import UnitType
from skirmish_ai.core.units import Position, Unit
from skirmish_ai.evaluation import (
    AliveUnitsEvaluator, CombinedEvaluator, Evaluator, InfluenceEvaluator
)
from skirmish_ai.evaluation.presets import (
    all_combined, all_evaluators, influence_double, unit_count_double, unit_count_weighted
)


def unit(unit_type: UnitType, x: int, y: int, side: int) -> Unit:
    return Unit(unit_type, Position(x, y), side)


class TestAliveUnitsEvaluator(unittest.TestCase):
    """Test case for unit counting."""

    def setUp(self):
        self.battlefield = Battlefield(10, 10, [
            [
                unit(UnitType.MOBILE_TOWER, 0, 0, 0),
                unit(UnitType.GUNNER, 1, 0, 0),
                unit(UnitType.INFANTRY, 2, 0, 0),
            ],
            [unit(UnitType.INFANTRY, 9, 9, 1)],
        ])

    def test_unweighted(self):
        evaluator = AliveUnitsEvaluator()
        self.assertEqual(evaluator.evaluate(self.battlefield, 0), 3)
        self.assertEqual(evaluator.evaluate(self.battlefield, 1), 1)

    def test_weighted(self):
        self.assertEqual(unit_count_weighted().evaluate(self.battlefield, 0), 9)
        self.assertEqual(unit_count_weighted().evaluate(self.battlefield, 1), 1)

    def test_empty_side(self):
        self.assertEqual(AliveUnitsEvaluator().evaluate(Battlefield(4, 4), 0), 0)

    def test_callable(self):
        evaluator = AliveUnitsEvaluator()
        self.assertEqual(evaluator(self.battlefield, 0), evaluator.evaluate(self.battlefield, 0))


class TestInfluenceEvaluator(unittest.TestCase):
    """Test case for the shooting range heuristic."""

    def test_infantry_in_corner(self):
        battlefield = Battlefield(10, 10, [[unit(UnitType.INFANTRY, 0, 0, 0)], []])
        self.assertEqual(InfluenceEvaluator().evaluate(battlefield, 0), 2)

    def test_gunner_in_corner(self):
        battlefield = Battlefield(10, 10, [[unit(UnitType.GUNNER, 0, 0, 0)], []])
        self.assertEqual(InfluenceEvaluator().evaluate(battlefield, 0), 4)

    def test_targets_are_counted_once(self):
        # Both infantry units can shoot at (1, 0)
        battlefield = Battlefield(10, 10, [
            [unit(UnitType.INFANTRY, 0, 0, 0), unit(UnitType.INFANTRY, 2, 0, 0)],
            [],
        ])
        # (0, 1), (1, 0) for the first; (2, 1), (1, 0), (3, 0) for the second
        self.assertEqual(InfluenceEvaluator().evaluate(battlefield, 0), 4)

    def test_blocked_side_has_no_influence(self):
        battlefield = Battlefield(1, 1, [[unit(UnitType.INFANTRY, 0, 0, 0)], []])
        self.assertEqual(InfluenceEvaluator().evaluate(battlefield, 0), 0)


class TestCombinedEvaluator(unittest.TestCase):
    """Test case for combinations of evaluators."""

    def setUp(self):
        self.battlefield = Battlefield(10, 10, [
            [unit(UnitType.GUNNER, 0, 0, 0), unit(UnitType.INFANTRY, 4, 4, 0),
             unit(UnitType.MOBILE_TOWER, 2, 7, 0)],
            [unit(UnitType.INFANTRY, 9, 9, 1)],
        ])

    def test_empty_combination(self):
        self.assertEqual(CombinedEvaluator().evaluate(self.battlefield, 0), 0)

    def test_chaining_returns_same_instance(self):
        evaluator = CombinedEvaluator()
        self.assertIs(evaluator.add_ally(AliveUnitsEvaluator()), evaluator)
        self.assertIs(evaluator.add_enemy(AliveUnitsEvaluator()), evaluator)
        self.assertEqual(len(evaluator.allies), 1)
        self.assertEqual(len(evaluator.enemies), 1)

    def test_unit_difference(self):
        evaluator = unit_count_double()
        self.assertEqual(evaluator.evaluate(self.battlefield, 0), 2)
        self.assertEqual(evaluator.evaluate(self.battlefield, 1), -2)

    def test_constructor_lists(self):
        evaluator = CombinedEvaluator(allies=[AliveUnitsEvaluator(2, 2, 2)],
                                      enemies=[AliveUnitsEvaluator()])
        self.assertEqual(evaluator.evaluate(self.battlefield, 0), 5)

    def test_symmetric_presets_are_antisymmetric(self):
        for seed in range(5):
            battlefield = Battlefield.random(8, 8, 4, random.Random(seed))
            battlefield = battlefield.remove_units(0, seed % 3)
            for evaluator in (unit_count_double(), influence_double(), all_combined()):
                self.assertEqual(evaluator.evaluate(battlefield, 0),
                                 -evaluator.evaluate(battlefield, 1))

    def test_mirrored_battlefield_scores_zero(self):
        battlefield = Battlefield.random(10, 10, 6, random.Random(42))
        self.assertEqual(all_combined().evaluate(battlefield, 0), 0)


class TestPresets(unittest.TestCase):
    """Test case for the evaluator presets."""

    def test_all_evaluators(self):
        evaluators = all_evaluators()
        self.assertEqual(len(evaluators), 6)

        labels = [label for label, _ in evaluators]
        self.assertEqual(len(set(labels)), 6)
        self.assertIn("double unit counting", labels)
        for _, evaluator in evaluators:
            self.assertIsInstance(evaluator, Evaluator)

    def test_fresh_instances(self):
        first = dict(all_evaluators())
        second = dict(all_evaluators())
        self.assertIsNot(first["all combined"], second["all combined"])


if __name__ == "__main__":
    unittest.main()
