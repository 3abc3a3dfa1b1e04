"""
Battlefield state for the skirmish game.

This module defines the Battlefield class: the complete position of every
unit of both sides on a rectangular grid. It provides legal action
generation, action application and the terminal check used by the
strategies and the arena.

A battlefield is treated as a value: applying an action or removing units
returns a new Battlefield and leaves the original untouched.
"""
from __future__ import annotations
import logging
import random
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from skirmish_ai.core.actions import Action
from skirmish_ai.core.constants import MAX_PLACEMENT_ATTEMPTS, NUM_SIDES, SIDES
from skirmish_ai.core.units import Position, Unit

logger = logging.getLogger(__name__)


def _check_side(side: int) -> None:
    if side not in SIDES:
        raise ValueError(f"side must be 0 or 1, got {side}")


def _relative(origin: Position, position: Position) -> Tuple[int, int]:
    return position.x - origin.x, position.y - origin.y


class Battlefield:
    """
    The state of a battle at a point in time.

    Invariants: every unit lies within the grid, is listed under its own
    side, and no two units share a cell.
    """

    def __init__(self, width: int, height: int, sides: Optional[Sequence[Iterable[Unit]]] = None):
        """
        Create a battlefield from explicit unit lists.

        Args:
            width: Width of the grid
            height: Height of the grid
            sides: Units of side 0 and side 1 (defaults to two empty sides)
        """
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")

        self._width = width
        self._height = height

        if sides is None:
            sides = ([], [])
        if len(sides) != NUM_SIDES:
            raise ValueError(f"Expected {NUM_SIDES} unit lists, got {len(sides)}")
        self._sides: Tuple[Tuple[Unit, ...], ...] = tuple(tuple(units) for units in sides)

        seen: Set[Position] = set()
        for side, units in enumerate(self._sides):
            for unit in units:
                if unit.side != side:
                    raise ValueError(f"{unit} is listed with side {side}")
                if not unit.position.in_bounds(width, height):
                    raise ValueError(f"{unit} is outside the {width}x{height} grid")
                if unit.position in seen:
                    raise ValueError(f"Two units share the cell {unit.position}")
                seen.add(unit.position)

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        units_per_side: int,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ) -> Battlefield:
        """
        Create a symmetrical random battlefield.

        Side 0 units are drawn in the left half of the grid, rejecting occupied
        cells; each one is mirrored into side 1 at the point-reflected cell.

        Args:
            width: Width of the grid
            height: Height of the grid
            units_per_side: Number of units for each side
            rng: Random generator (a fresh unseeded one if omitted)
            max_attempts: Number of draws allowed for a single unit before giving up

        Returns:
            New battlefield
        """
        rng = rng or random.Random()
        half = width // 2
        capacity = half * height
        if units_per_side < 0:
            raise ValueError("units_per_side must be non-negative")
        if units_per_side > capacity:
            raise ValueError(
                f"Cannot place {units_per_side} units in the left half of a "
                f"{width}x{height} grid (room for {capacity})"
            )

        own: List[Unit] = []
        mirrored: List[Unit] = []
        taken: Set[Position] = set()
        for _ in range(units_per_side):
            for attempt in range(max_attempts):
                unit = Unit.random(0, half, height, 0, rng)
                if unit.position not in taken:
                    break
            else:
                raise ValueError(
                    f"Could not find a free cell after {max_attempts} attempts "
                    f"({len(own)} of {units_per_side} units placed)"
                )
            if attempt:
                logger.debug("Placed unit at %s after %d rejected draws", unit.position, attempt)
            taken.add(unit.position)
            own.append(unit)
            mirrored.append(unit.mirrored(width, height))

        return cls(width, height, (own, mirrored))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def units_of(self, side: int) -> List[Unit]:
        """
        Get the units of a side.

        Args:
            side: Side to look up (0 or 1)

        Returns:
            A new list of that side's units
        """
        _check_side(side)
        return list(self._sides[side])

    def unit_count(self, side: Optional[int] = None) -> int:
        """Count the units of ``side``, or of both sides when omitted."""
        if side is None:
            return sum(len(units) for units in self._sides)
        _check_side(side)
        return len(self._sides[side])

    def occupied_positions(self) -> Set[Position]:
        """Get the positions taken by units of either side."""
        return {unit.position for units in self._sides for unit in units}

    def unit_at(self, position: Position) -> Optional[Unit]:
        """Get the unit standing on ``position``, if any."""
        for units in self._sides:
            for unit in units:
                if unit.position == position:
                    return unit
        return None

    def is_free(self, position: Position) -> bool:
        return self.unit_at(position) is None

    def legal_actions(self, side: int) -> List[Action]:
        """
        Get every action available to a side.

        Only one unit moves and shoots per turn, so this is the concatenation
        of each unit's actions, in unit order.

        Args:
            side: Side to move

        Returns:
            List of legal actions (empty when the side has no unit or every
            unit is blocked)
        """
        _check_side(side)
        occupied = self.occupied_positions()
        actions: List[Action] = []
        for unit in self._sides[side]:
            actions.extend(unit.actions(self._width, self._height, occupied))
        return actions

    def apply_action(self, action: Action, side: Optional[int] = None) -> Battlefield:
        """
        Apply an action and return the resulting battlefield.

        The shot is resolved first: whichever unit stands on the target cell
        is removed, friend or foe. The acting unit then moves to the
        destination.

        Args:
            action: Action to apply; it must match the moving unit's move and
                shoot offsets, as every action from :meth:`legal_actions` does
            side: Side expected to own the acting unit (not checked if None)

        Returns:
            New battlefield
        """
        mover = self.unit_at(action.source)
        if mover is None:
            raise ValueError(f"No unit stands on {action.source}")
        if side is not None and mover.side != side:
            raise ValueError(f"The unit on {action.source} belongs to side {mover.side}, not {side}")
        if not action.destination.in_bounds(self._width, self._height):
            raise ValueError(f"Destination {action.destination} is outside the grid")
        if not self.is_free(action.destination):
            raise ValueError(f"Destination {action.destination} is occupied")
        if _relative(action.source, action.destination) not in mover.move_offsets():
            raise ValueError(f"{mover} cannot move to {action.destination}")
        if (_relative(action.source, action.target) not in mover.shoot_offsets()
                or not action.target.in_bounds(self._width, self._height)):
            raise ValueError(f"{mover} cannot shoot at {action.target}")

        sides = []
        for units in self._sides:
            remaining = []
            for unit in units:
                if unit.position == action.target:
                    continue
                if unit.position == action.source:
                    unit = unit.moved_to(action.destination)
                remaining.append(unit)
            sides.append(remaining)
        return Battlefield(self._width, self._height, sides)

    def is_terminal(self, side: int) -> bool:
        """Check whether ``side`` has lost all of its units."""
        _check_side(side)
        return not self._sides[side]

    def remove_units(self, side: int, count: int) -> Battlefield:
        """
        Remove the most recently placed units of a side.

        Args:
            side: Side losing units
            count: Number of units to remove

        Returns:
            New battlefield
        """
        _check_side(side)
        if count < 0 or count > len(self._sides[side]):
            raise ValueError(
                f"Cannot remove {count} units from side {side} "
                f"which has {len(self._sides[side])}"
            )
        sides = [list(units) for units in self._sides]
        del sides[side][len(sides[side]) - count:]
        return Battlefield(self._width, self._height, sides)

    def copy(self) -> Battlefield:
        """Get an independent copy of the battlefield."""
        return Battlefield(self._width, self._height, self._sides)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Battlefield):
            return NotImplemented
        return (self._width, self._height, self._sides) == (other._width, other._height, other._sides)

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._sides))

    def __repr__(self) -> str:
        return (f"Battlefield(width={self._width}, height={self._height}, "
                f"units={[len(units) for units in self._sides]})")

    def __str__(self) -> str:
        """
        Render the grid as text, one row per y coordinate.

        Side 0 units are shown with an upper-case symbol, side 1 units with a
        lower-case one and empty cells with a dot.
        """
        cells = {}
        for side, units in enumerate(self._sides):
            for unit in units:
                cells[unit.position] = unit.symbol if side == 0 else unit.symbol.lower()
        rows = []
        for y in range(self._height):
            rows.append(" ".join(cells.get(Position(x, y), ".") for x in range(self._width)))
        return "\n".join(rows)
