"""
Arena for running experiments between agents.

The arena generates symmetrical random battlefields, plays every one twice
with the agents swapping sides, and tallies the wins. The match resolution
routine is also used by Monte Carlo tree search for its random playouts.
"""

from skirmish_ai.arena.match import EndReason, MatchOutcome, play_match, resolve_match
from skirmish_ai.arena.config import ArenaConfig
from skirmish_ai.arena.arena import Arena, FightResult, Handicap, MatchRecord

__all__ = [
    'Arena', 'ArenaConfig', 'FightResult', 'Handicap', 'MatchRecord',
    'EndReason', 'MatchOutcome', 'play_match', 'resolve_match',
]
