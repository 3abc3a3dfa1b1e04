"""
Constants for the skirmish game.

This module defines the game constants used throughout the implementation,
including unit types, their movement and shooting patterns, and the default
parameters of the search strategies and the arena.
"""
from enum import Enum
from typing import Dict, Final, List, Tuple


Offset = Tuple[int, int]


class UnitType(Enum):
    """Enum representing the different units that can take part in a battle."""
    INFANTRY = "I"      # Moves a lot but does not shoot far
    GUNNER = "G"        # Moves slowly but shoots far
    MOBILE_TOWER = "T"  # Moves slowly, shoots far all around

    @property
    def symbol(self) -> str:
        """One-letter symbol used when printing a battlefield."""
        return self.value


def _straight_lines(reach: int) -> List[Offset]:
    # Order is significant: strategies break ties on enumeration order.
    offsets = []
    for i in range(1, reach + 1):
        offsets.extend([(0, i), (0, -i), (-i, 0), (i, 0)])
    return offsets


def _star(reach: int) -> List[Offset]:
    offsets = []
    for i in range(1, reach + 1):
        offsets.extend([
            (0, i), (0, -i), (i, 0), (-i, 0),
            (i, i), (i, -i), (-i, i), (-i, -i),
        ])
    return offsets


# Relative cells a unit can move to
MOVE_OFFSETS: Final[Dict[UnitType, Tuple[Offset, ...]]] = {
    UnitType.INFANTRY: tuple(_straight_lines(2)),
    UnitType.GUNNER: tuple(_straight_lines(1)),
    UnitType.MOBILE_TOWER: tuple(_straight_lines(1)),
}

# Relative cells a unit can shoot at
SHOOT_OFFSETS: Final[Dict[UnitType, Tuple[Offset, ...]]] = {
    UnitType.INFANTRY: tuple(_straight_lines(1)),
    UnitType.GUNNER: tuple(_straight_lines(2)),
    UnitType.MOBILE_TOWER: tuple(_star(2)),
}

# Sides
NUM_SIDES: Final[int] = 2
SIDES: Final[Tuple[int, int]] = (0, 1)

# Random placement gives up after this many rejected draws for a single unit
MAX_PLACEMENT_ATTEMPTS: Final[int] = 10_000

# Arena defaults
DEFAULT_GRID_SIZE: Final[int] = 10
DEFAULT_GAME_NUMBER: Final[int] = 15
DEFAULT_UNITS_PER_SIDE: Final[int] = 6
DEFAULT_MAX_ROUNDS: Final[int] = 100

# Search defaults
DEFAULT_NEGAMAX_DEPTH: Final[int] = 1
DEFAULT_MCTS_ITERATIONS: Final[int] = 1000
DEFAULT_MCTS_EXPLORATION: Final[float] = 1.0
DEFAULT_ROLLOUT_ROUNDS: Final[int] = 50
