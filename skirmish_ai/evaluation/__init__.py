"""
Battlefield evaluation.

Evaluators score a battlefield from one side's point of view. They are
injected into the search strategies and can be combined freely.
"""

from skirmish_ai.evaluation.evaluators import (
    Evaluator, AliveUnitsEvaluator, InfluenceEvaluator, CombinedEvaluator
)
from skirmish_ai.evaluation.presets import (
    influence_simple, influence_double,
    unit_count_same, unit_count_weighted, unit_count_double,
    all_combined, all_evaluators
)

__all__ = [
    'Evaluator', 'AliveUnitsEvaluator', 'InfluenceEvaluator', 'CombinedEvaluator',
    'influence_simple', 'influence_double',
    'unit_count_same', 'unit_count_weighted', 'unit_count_double',
    'all_combined', 'all_evaluators',
]
