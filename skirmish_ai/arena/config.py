"""
Configuration for the arena.

This module defines the parameters of an experiment between two agents:
the size of the generated battlefields, how many of them are played, the
round cap and the progression of the unit handicap.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from skirmish_ai.core.constants import (
    DEFAULT_GAME_NUMBER, DEFAULT_GRID_SIZE, DEFAULT_MAX_ROUNDS, DEFAULT_UNITS_PER_SIDE
)


@dataclass
class ArenaConfig:
    """
    Configuration parameters for the arena.

    Battlefields are always square grids of ``grid_size`` cells per side.
    """
    grid_size: int = DEFAULT_GRID_SIZE
    """Width and height of the generated battlefields"""

    game_number: int = DEFAULT_GAME_NUMBER
    """Number of battlefields generated; each one is played twice"""

    units_per_side: int = DEFAULT_UNITS_PER_SIDE
    """Starting units of each side before any handicap"""

    max_rounds: int = DEFAULT_MAX_ROUNDS
    """Round cap of a match"""

    verbose: bool = False
    """Whether to print the winner of every match"""

    # Progression of the difficulty
    progression_step: int = 1
    """Every this many battlefields, the unit difference between the sides grows"""

    progression_units: int = 0
    """Number of units added to the handicap at each progression step"""

    seed: Optional[int] = None
    """Seed for battlefield generation (None = unseeded)"""

    show_progress: bool = False
    """Whether to show a progress bar during a fight"""

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.grid_size < 2:
            raise ValueError("grid_size must be at least 2")

        if self.game_number < 0:
            raise ValueError("game_number must be non-negative")

        if self.units_per_side <= 0:
            raise ValueError("units_per_side must be positive")

        capacity = (self.grid_size // 2) * self.grid_size
        if self.units_per_side > capacity:
            raise ValueError(
                f"units_per_side ({self.units_per_side}) does not fit in the left half "
                f"of a {self.grid_size}x{self.grid_size} grid ({capacity} cells)"
            )

        if self.max_rounds < 0:
            raise ValueError("max_rounds must be non-negative")

        if self.progression_step <= 0:
            raise ValueError("progression_step must be positive")

        if self.progression_units < 0:
            raise ValueError("progression_units must be non-negative")

    @classmethod
    def default(cls) -> 'ArenaConfig':
        """
        Get the default configuration.

        Returns:
            Default ArenaConfig object
        """
        return cls()

    @classmethod
    def benchmark(cls) -> 'ArenaConfig':
        """
        Get the configuration used to compare strategies.

        Fifteen 10x10 battlefields with six units a side, and one more unit
        of handicap every four battlefields.

        Returns:
            Benchmark ArenaConfig object
        """
        return cls(
            grid_size=10,
            game_number=15,
            units_per_side=6,
            max_rounds=100,
            progression_step=4,
            progression_units=1,
        )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ArenaConfig':
        """
        Create a configuration from a dictionary.

        Args:
            config_dict: Dictionary of configuration parameters

        Returns:
            ArenaConfig object
        """
        valid_params = {k: v for k, v in config_dict.items()
                        if k in cls.__dataclass_fields__}
        return cls(**valid_params)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
