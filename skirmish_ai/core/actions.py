"""
Actions for the skirmish game.

A turn consists of a single unit moving to a nearby cell and shooting at a
cell in its range. An Action records both fully resolved to absolute grid
positions, so applying it needs no further lookups.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from skirmish_ai.core.units import Position


@dataclass(frozen=True)
class Action:
    """
    A move-and-shoot order for one unit.

    Attributes:
        source: Position of the acting unit
        destination: Position the unit ends up on
        target: Cell that is shot at; any unit standing there is removed
    """
    source: Position
    destination: Position
    target: Position

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the action to a plain dictionary.

        Returns:
            Dictionary with ``(x, y)`` tuples for each position
        """
        return {
            "source": (self.source.x, self.source.y),
            "destination": (self.destination.x, self.destination.y),
            "target": (self.target.x, self.target.y),
        }

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}, shoot {self.target}"
