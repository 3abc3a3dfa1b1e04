"""
Evaluators for skirmish battlefields.

An evaluator gives an integer score to a battlefield from one side's point
of view. Evaluators are small policy objects composed when a strategy is
built and never modified afterwards:

- AliveUnitsEvaluator: weighted count of the side's surviving units
- InfluenceEvaluator: number of distinct cells the side can shoot at
- CombinedEvaluator: sum of "ally" evaluators minus the sum of "enemy"
  evaluators computed for the opposite side
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from skirmish_ai.core.battlefield import Battlefield
from skirmish_ai.core.constants import UnitType


class Evaluator(ABC):
    """
    Abstract base class for battlefield evaluators.

    Subclasses implement :meth:`evaluate`; instances can also be called
    directly.
    """

    @abstractmethod
    def evaluate(self, battlefield: Battlefield, side: int) -> int:
        """
        Score a battlefield.

        Args:
            battlefield: Battlefield to score
            side: Side whose point of view is taken

        Returns:
            Score, higher is better for ``side``
        """
        pass

    def __call__(self, battlefield: Battlefield, side: int) -> int:
        return self.evaluate(battlefield, side)


class AliveUnitsEvaluator(Evaluator):
    """Counts the summed value of a side's surviving units."""

    def __init__(self, tower_weight: int = 1, infantry_weight: int = 1, gunner_weight: int = 1):
        """
        Initialize the evaluator with the estimated value of each unit type.

        Args:
            tower_weight: Value of a mobile tower
            infantry_weight: Value of an infantry unit
            gunner_weight: Value of a gunner
        """
        self.weights = {
            UnitType.MOBILE_TOWER: tower_weight,
            UnitType.INFANTRY: infantry_weight,
            UnitType.GUNNER: gunner_weight,
        }

    def evaluate(self, battlefield: Battlefield, side: int) -> int:
        return sum(self.weights[unit.unit_type] for unit in battlefield.units_of(side))

    def __repr__(self) -> str:
        return (f"AliveUnitsEvaluator(tower_weight={self.weights[UnitType.MOBILE_TOWER]}, "
                f"infantry_weight={self.weights[UnitType.INFANTRY]}, "
                f"gunner_weight={self.weights[UnitType.GUNNER]})")


class InfluenceEvaluator(Evaluator):
    """Counts the cells a side can currently shoot at."""

    def evaluate(self, battlefield: Battlefield, side: int) -> int:
        # Several actions share a target; each cell counts once.
        return len({action.target for action in battlefield.legal_actions(side)})

    def __repr__(self) -> str:
        return "InfluenceEvaluator()"


class CombinedEvaluator(Evaluator):
    """
    Linear combination of other evaluators.

    Ally evaluators are computed for the evaluated side and added; enemy
    evaluators are computed for the opposite side and subtracted. Using the
    same evaluators on both lists yields a score that is antisymmetric in the
    side, as needed by :class:`~skirmish_ai.agents.negamax.NegaMaxAgent`.
    """

    def __init__(
        self,
        allies: Optional[Iterable[Evaluator]] = None,
        enemies: Optional[Iterable[Evaluator]] = None,
    ):
        self.allies: List[Evaluator] = list(allies or [])
        self.enemies: List[Evaluator] = list(enemies or [])

    def add_ally(self, evaluator: Evaluator) -> CombinedEvaluator:
        """
        Add an evaluator scored for the evaluated side.

        Returns:
            This evaluator, for chaining
        """
        self.allies.append(evaluator)
        return self

    def add_enemy(self, evaluator: Evaluator) -> CombinedEvaluator:
        """
        Add an evaluator scored for the opposite side and subtracted.

        Returns:
            This evaluator, for chaining
        """
        self.enemies.append(evaluator)
        return self

    def evaluate(self, battlefield: Battlefield, side: int) -> int:
        ally_score = sum(e.evaluate(battlefield, side) for e in self.allies)
        enemy_score = sum(e.evaluate(battlefield, 1 - side) for e in self.enemies)
        return ally_score - enemy_score

    def __repr__(self) -> str:
        return f"CombinedEvaluator(allies={self.allies!r}, enemies={self.enemies!r})"
