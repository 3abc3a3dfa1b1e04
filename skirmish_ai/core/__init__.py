"""
Skirmish AI Core Package

This package contains the core game logic, including:
- Grid positions and units
- Move-and-shoot actions
- The battlefield state, legal action generation and action application
- Constants and enums

All core components can be imported directly from this package.
"""

# Constants
from skirmish_ai.core.constants import (
    UnitType, MOVE_OFFSETS, SHOOT_OFFSETS, SIDES, MAX_PLACEMENT_ATTEMPTS
)

# Actions
from skirmish_ai.core.actions import Action

# Units
from skirmish_ai.core.units import Position, Unit

# Battlefield
from skirmish_ai.core.battlefield import Battlefield

__all__ = [
    # Battlefield
    'Battlefield',

    # Units
    'Position', 'Unit',

    # Actions
    'Action',

    # Constants
    'UnitType', 'MOVE_OFFSETS', 'SHOOT_OFFSETS', 'SIDES', 'MAX_PLACEMENT_ATTEMPTS',
]
