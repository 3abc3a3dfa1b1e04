"""
Match resolution.

This module plays a single match between two agents from a given
battlefield until one side is eliminated, one side cannot move, or the
round cap is reached. It is shared by the arena and by the random
playouts of Monte Carlo tree search.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
import logging
from typing import Sequence, Tuple

from skirmish_ai.agents.base import Agent
from skirmish_ai.core.battlefield import Battlefield

logger = logging.getLogger(__name__)


class EndReason(Enum):
    """Enum representing how a match was decided."""
    ELIMINATION = auto()  # The loser had no unit left
    NO_MOVES = auto()     # The loser had units but no legal action
    ROUND_CAP = auto()    # Decided on unit count after the round cap


@dataclass(frozen=True)
class MatchOutcome:
    """
    Result of one match.

    Attributes:
        winner: Winning side
        rounds: Number of completed rounds
        end_reason: How the match was decided
        units_left: Units of side 0 and side 1 at the end
    """
    winner: int
    rounds: int
    end_reason: EndReason
    units_left: Tuple[int, int]


def play_match(
    battlefield: Battlefield,
    agents: Sequence[Agent],
    max_rounds: int,
    first_side: int = 0,
) -> MatchOutcome:
    """
    Play a match to its end.

    ``agents[i]`` plays side ``i``. In every round each side acts once,
    starting with ``first_side``. A side with no unit or no legal action
    when its turn comes loses at once. The round counter is never reset,
    and once it exceeds ``max_rounds`` the side with strictly more units
    wins; equal counts go to ``first_side``.

    Args:
        battlefield: Starting battlefield (left untouched)
        agents: Agents for side 0 and side 1
        max_rounds: Round cap
        first_side: Side acting first in every round

    Returns:
        Outcome of the match
    """
    if len(agents) != 2:
        raise ValueError(f"A match needs exactly 2 agents, got {len(agents)}")
    if first_side not in (0, 1):
        raise ValueError(f"first_side must be 0 or 1, got {first_side}")

    order = (first_side, 1 - first_side)
    rounds = 0
    while True:
        for side in order:
            if battlefield.is_terminal(side):
                return _outcome(battlefield, 1 - side, rounds, EndReason.ELIMINATION)
            if not battlefield.legal_actions(side):
                return _outcome(battlefield, 1 - side, rounds, EndReason.NO_MOVES)
            action = agents[side].play(battlefield, side)
            battlefield = battlefield.apply_action(action, side)

        rounds += 1
        if rounds > max_rounds:
            break

    counts = (battlefield.unit_count(0), battlefield.unit_count(1))
    if counts[0] == counts[1]:
        winner = first_side
    else:
        winner = 0 if counts[0] > counts[1] else 1
    return _outcome(battlefield, winner, rounds, EndReason.ROUND_CAP)


def _outcome(battlefield: Battlefield, winner: int, rounds: int, reason: EndReason) -> MatchOutcome:
    outcome = MatchOutcome(
        winner=winner,
        rounds=rounds,
        end_reason=reason,
        units_left=(battlefield.unit_count(0), battlefield.unit_count(1)),
    )
    logger.debug("Match over after %d rounds: side %d wins (%s)", rounds, winner, reason.name)
    return outcome


def resolve_match(
    battlefield: Battlefield,
    agents: Sequence[Agent],
    max_rounds: int,
    first_side: int = 0,
) -> int:
    """
    Play a match and return the winning side.

    See :func:`play_match` for the rules.
    """
    return play_match(battlefield, agents, max_rounds, first_side).winner
