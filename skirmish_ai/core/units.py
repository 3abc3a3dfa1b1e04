"""
Positions and units for the skirmish game.

This module defines the Position value type and the Unit class, which knows
how its type moves and shoots and which actions it can take on a grid.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
import random
from typing import AbstractSet, List, Optional, Tuple

from skirmish_ai.core.constants import MOVE_OFFSETS, SHOOT_OFFSETS, Offset, UnitType
from skirmish_ai.core.actions import Action


@dataclass(frozen=True)
class Position:
    """
    A cell of the battlefield grid.

    Coordinates are never negative; offsets that would leave the grid on the
    low side are reported by :meth:`offset` returning ``None``.
    """
    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position coordinates must be non-negative, got ({self.x}, {self.y})")

    def offset(self, dx: int, dy: int) -> Optional[Position]:
        """
        Get the position moved by the given offset.

        Args:
            dx: Horizontal offset
            dy: Vertical offset

        Returns:
            The offset position, or None if a coordinate would become negative
        """
        x, y = self.x + dx, self.y + dy
        if x < 0 or y < 0:
            return None
        return Position(x, y)

    def in_bounds(self, width: int, height: int) -> bool:
        """Check whether the position lies on a ``width`` x ``height`` grid."""
        return self.x < width and self.y < height

    def mirrored(self, width: int, height: int) -> Position:
        """Get the point-reflected position on a ``width`` x ``height`` grid."""
        return Position(width - 1 - self.x, height - 1 - self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Unit:
    """
    A unit standing on the battlefield.

    Units are immutable: moving one produces a new Unit, so battlefields can
    share them freely between copies.
    """
    unit_type: UnitType
    position: Position
    side: int

    def move_offsets(self) -> Tuple[Offset, ...]:
        """Get the relative cells this unit can move to."""
        return MOVE_OFFSETS[self.unit_type]

    def shoot_offsets(self) -> Tuple[Offset, ...]:
        """Get the relative cells this unit can shoot at."""
        return SHOOT_OFFSETS[self.unit_type]

    @property
    def symbol(self) -> str:
        return self.unit_type.symbol

    def moved_to(self, position: Position) -> Unit:
        """Get a copy of this unit standing on ``position``."""
        return replace(self, position=position)

    def mirrored(self, width: int, height: int) -> Unit:
        """
        Get the symmetrical unit for the other side.

        Args:
            width: Width of the grid
            height: Height of the grid

        Returns:
            A unit of the same type at the point-reflected position, owned by
            the opposite side
        """
        return Unit(self.unit_type, self.position.mirrored(width, height), 1 - self.side)

    @classmethod
    def random(
        cls,
        x_start: int,
        x_end: int,
        height: int,
        side: int,
        rng: random.Random,
    ) -> Unit:
        """
        Create a unit of random type at a random position.

        Args:
            x_start: Lowest x coordinate (inclusive)
            x_end: Highest x coordinate (exclusive)
            height: Height of the grid; y is drawn in ``[0, height)``
            side: Side owning the unit
            rng: Random generator to draw from

        Returns:
            New random unit
        """
        unit_type = rng.choice([UnitType.GUNNER, UnitType.MOBILE_TOWER, UnitType.INFANTRY])
        position = Position(rng.randrange(x_start, x_end), rng.randrange(0, height))
        return cls(unit_type, position, side)

    def actions(self, width: int, height: int, occupied: AbstractSet[Position]) -> List[Action]:
        """
        Get every move-and-shoot action available to this unit.

        The unit moves to a free in-bounds cell and fires from the cell it
        stands on before moving, at any in-bounds cell in its range. The
        target does not have to be occupied.

        Args:
            width: Width of the grid
            height: Height of the grid
            occupied: Positions already taken by units of either side

        Returns:
            List of actions, ordered by move offset then shoot offset
        """
        targets = []
        for dx, dy in self.shoot_offsets():
            target = self.position.offset(dx, dy)
            if target is not None and target.in_bounds(width, height):
                targets.append(target)

        actions = []
        for dx, dy in self.move_offsets():
            destination = self.position.offset(dx, dy)
            if destination is None or not destination.in_bounds(width, height):
                continue
            if destination in occupied:
                continue
            for target in targets:
                actions.append(Action(self.position, destination, target))
        return actions

    def __str__(self) -> str:
        return f"{self.unit_type.name.title()}@{self.position} (side {self.side})"
