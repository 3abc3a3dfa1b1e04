"""
Arena for pitting two agents against each other.

The arena generates symmetrical random battlefields and has two agents play
each one twice, once from each side, so that the advantage of moving first
cancels out. The schedule can also widen the unit difference between the
sides as the experiment goes on.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass, field, replace
import logging
import random
from typing import Any, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd
from rich.console import Console
from tqdm import tqdm

from skirmish_ai.agents.base import Agent
from skirmish_ai.arena.config import ArenaConfig
from skirmish_ai.arena.match import EndReason, MatchOutcome, play_match
from skirmish_ai.core.battlefield import Battlefield

logger = logging.getLogger(__name__)
console = Console()


@dataclass
class Handicap:
    """
    Unit handicap of one fight.

    ``advantage[1]`` extra units are generated for each side, then side 0
    loses ``advantage[0]`` of them.
    """
    advantage: List[int] = field(default_factory=lambda: [0, 0])

    def units_for(self, units_per_side: int) -> Tuple[int, int]:
        """Get the starting units of side 0 and side 1."""
        generated = units_per_side + self.advantage[1]
        return generated - self.advantage[0], generated

    def advance(self, units_per_side: int, grid_size: int, delta: int) -> None:
        """
        Widen the handicap by ``delta`` units.

        Side 0 always keeps at least one unit and side 1 never gets more
        than a third of the grid's cells.
        """
        max_removed = max(units_per_side - 1, 0)
        self.advantage[0] = max(self.advantage[0], min(self.advantage[0] + delta, max_removed))

        max_added = max(grid_size * grid_size // 3 - units_per_side, 0)
        self.advantage[1] = max(self.advantage[1], min(self.advantage[1] + delta, max_added))


@dataclass(frozen=True)
class MatchRecord:
    """
    One match played during a fight.

    Agents are numbered as passed to :meth:`Arena.fight` (0 for the first one).

    Attributes:
        game: Index of the battlefield (starting at 1)
        side0_agent: Agent playing side 0, which moves first
        winner: Winning agent
        end_reason: How the match was decided
        rounds: Number of completed rounds
        units_start: Starting units of side 0 and side 1
        units_left: Remaining units of side 0 and side 1
    """
    game: int
    side0_agent: int
    winner: int
    end_reason: EndReason
    rounds: int
    units_start: Tuple[int, int]
    units_left: Tuple[int, int]


@dataclass
class FightResult:
    """
    Aggregated result of :meth:`Arena.fight`.

    Iterating over a result yields the two win counts, so it can be unpacked
    as ``wins_a, wins_b = arena.fight(a, b)``.
    """
    wins: Tuple[int, int]
    names: Tuple[str, str] = ("Agent 1", "Agent 2")
    records: List[MatchRecord] = field(default_factory=list)

    def __iter__(self) -> Iterator[int]:
        return iter(self.wins)

    def __getitem__(self, index: int) -> int:
        return self.wins[index]

    @property
    def total(self) -> int:
        """Total number of matches played."""
        return sum(self.wins)

    def win_rates(self) -> np.ndarray:
        """
        Get the share of matches won by each agent.

        Returns:
            Array of two rates (zeros if nothing was played)
        """
        wins = np.array(self.wins, dtype=float)
        if not self.total:
            return np.zeros(2)
        return wins / self.total

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert the match records to a DataFrame.

        Returns:
            One row per match, with the agent names and end reason spelled out
        """
        rows = []
        for record in self.records:
            row = asdict(record)
            row["end_reason"] = record.end_reason.name
            row["side0_name"] = self.names[record.side0_agent]
            row["winner_name"] = self.names[record.winner]
            rows.append(row)
        columns = [f.name for f in MatchRecord.__dataclass_fields__.values()]
        return pd.DataFrame(rows, columns=columns + ["side0_name", "winner_name"])

    def __str__(self) -> str:
        return f"{self.names[0]}: {self.wins[0]} wins, {self.names[1]}: {self.wins[1]} wins"


class Arena:
    """
    Runs experiments between two agents.

    An arena drives one sequential experiment at a time; it is not meant to
    be shared between concurrent runs.
    """

    def __init__(self, config: Optional[ArenaConfig] = None, **overrides: Any):
        """
        Initialize an arena.

        Args:
            config: Arena configuration (defaults to ``ArenaConfig()``)
            **overrides: Configuration fields to override
        """
        config = config or ArenaConfig()
        if overrides:
            config = replace(config, **overrides)
        self.config = config

    def progression(self, step: int, units: int) -> Arena:
        """
        Set the progression of the unit difference between the sides.

        Every ``step`` battlefields, the handicap grows by ``units``.

        Returns:
            This arena, for chaining
        """
        self.config = replace(self.config, progression_step=step, progression_units=units)
        return self

    def _play_both_sides(
        self,
        battlefield: Battlefield,
        agent_a: Agent,
        agent_b: Agent,
    ) -> List[Tuple[int, MatchOutcome]]:
        """Play a battlefield twice, each agent taking side 0 once."""
        results = []
        for side0_agent, agents in ((0, (agent_a, agent_b)), (1, (agent_b, agent_a))):
            outcome = play_match(battlefield, agents, self.config.max_rounds)
            results.append((side0_agent, outcome))
        return results

    def rounds(self, battlefield: Battlefield, agent_a: Agent, agent_b: Agent) -> Tuple[int, int]:
        """
        Play a battlefield twice with the agents swapping sides.

        Args:
            battlefield: Starting battlefield
            agent_a: First agent
            agent_b: Second agent

        Returns:
            Tuple of the wins of the first and second agent
        """
        wins = [0, 0]
        for side0_agent, outcome in self._play_both_sides(battlefield, agent_a, agent_b):
            wins[_winning_agent(side0_agent, outcome)] += 1
        return wins[0], wins[1]

    def fight(self, agent_a: Agent, agent_b: Agent) -> FightResult:
        """
        Run a fight between two agents.

        ``game_number`` random battlefields are generated and each is played
        twice, once with each agent moving first. Every ``progression_step``
        battlefields the handicap against side 0 grows by
        ``progression_units``.

        Args:
            agent_a: First agent
            agent_b: Second agent

        Returns:
            Win counts of both agents and the record of every match
        """
        config = self.config
        rng = random.Random(config.seed)
        handicap = Handicap()
        names = (str(agent_a), str(agent_b))
        wins = [0, 0]
        records: List[MatchRecord] = []

        games = range(1, config.game_number + 1)
        for game in tqdm(games, desc=f"{names[0]} vs {names[1]}", disable=not config.show_progress):
            units = handicap.units_for(config.units_per_side)
            battlefield = Battlefield.random(config.grid_size, config.grid_size, units[1], rng)
            battlefield = battlefield.remove_units(0, units[1] - units[0])

            if game % config.progression_step == 0:
                handicap.advance(config.units_per_side, config.grid_size, config.progression_units)

            for side0_agent, outcome in self._play_both_sides(battlefield, agent_a, agent_b):
                winner = _winning_agent(side0_agent, outcome)
                wins[winner] += 1
                records.append(MatchRecord(
                    game=game,
                    side0_agent=side0_agent,
                    winner=winner,
                    end_reason=outcome.end_reason,
                    rounds=outcome.rounds,
                    units_start=units,
                    units_left=outcome.units_left,
                ))
                logger.debug("Game %d: %s won (%s)", game, names[winner], outcome.end_reason.name)
                if config.verbose:
                    console.print(f"{names[winner]} won")

            if config.verbose:
                console.print(f" {game} ---------------------------------------------")

        result = FightResult(wins=(wins[0], wins[1]), names=names, records=records)
        logger.info("Fight over: %s", result)
        if config.verbose:
            console.print(f"[bold]{names[0]}[/bold]: {wins[0]} wins.")
            console.print(f"[bold]{names[1]}[/bold]: {wins[1]} wins.")
        return result


def _winning_agent(side0_agent: int, outcome: MatchOutcome) -> int:
    # Side 0 is played by agent `side0_agent`, side 1 by the other one
    return side0_agent if outcome.winner == 0 else 1 - side0_agent
