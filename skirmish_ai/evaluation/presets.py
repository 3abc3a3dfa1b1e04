"""
Ready-made evaluators.

These are the heuristics compared against each other when tuning the
strategies. In experiments the double unit counting was the best overall,
while the all-combined evaluator did better against weak opponents.
"""
from typing import List, Tuple

from skirmish_ai.evaluation.evaluators import (
    AliveUnitsEvaluator, CombinedEvaluator, Evaluator, InfluenceEvaluator
)


def influence_simple() -> Evaluator:
    """Range covered by our units."""
    return InfluenceEvaluator()


def influence_double() -> Evaluator:
    """Range covered by our units minus the range of the enemy units."""
    return CombinedEvaluator().add_ally(InfluenceEvaluator()).add_enemy(InfluenceEvaluator())


def unit_count_same() -> Evaluator:
    """Number of our units still alive."""
    return AliveUnitsEvaluator(1, 1, 1)


def unit_count_weighted() -> Evaluator:
    """Alive units, counting a tower as 5 and a gunner as 3."""
    return AliveUnitsEvaluator(tower_weight=5, infantry_weight=1, gunner_weight=3)


def unit_count_double() -> Evaluator:
    """Our alive units minus the enemy's."""
    return (CombinedEvaluator()
            .add_ally(AliveUnitsEvaluator(1, 1, 1))
            .add_enemy(AliveUnitsEvaluator(1, 1, 1)))


def all_combined() -> Evaluator:
    """Unit difference weighted by 10 plus influence difference."""
    return (CombinedEvaluator()
            .add_ally(AliveUnitsEvaluator(10, 10, 10))
            .add_enemy(AliveUnitsEvaluator(10, 10, 10))
            .add_ally(InfluenceEvaluator())
            .add_enemy(InfluenceEvaluator()))


def all_evaluators() -> List[Tuple[str, Evaluator]]:
    """
    Get every preset with a descriptive label.

    Returns:
        List of (label, evaluator) pairs; each call builds fresh instances
    """
    return [
        ("double sided influence", influence_double()),
        ("simple sided influence", influence_simple()),
        ("unit counting without coef", unit_count_same()),
        ("unit counting with coef", unit_count_weighted()),
        ("double unit counting", unit_count_double()),
        ("all combined", all_combined()),
    ]
