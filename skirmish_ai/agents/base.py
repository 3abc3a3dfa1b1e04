"""
Base class for skirmish agents.

Every strategy, from the uniform random baseline to Monte Carlo tree search,
implements the same single capability: given a battlefield and the side to
move, return one legal action. The arena, the tree search rollouts and any
interactive controller drive agents through this interface only.
"""
from abc import ABC, abstractmethod
from typing import Callable, List

from skirmish_ai.core.actions import Action
from skirmish_ai.core.battlefield import Battlefield


class Agent(ABC):
    """
    Abstract base class for all agents.

    Subclasses set :attr:`name` and implement :meth:`play`.
    """

    name: str = "Agent"

    @abstractmethod
    def play(self, battlefield: Battlefield, side: int) -> Action:
        """
        Select an action for the side to move.

        Args:
            battlefield: Current battlefield
            side: Side making the decision

        Returns:
            A legal action for ``side``
        """
        pass

    def get_action_callback(self) -> Callable[[Battlefield, int], Action]:
        """
        Get a callback function for selecting actions.

        Returns:
            Callback function that takes a battlefield and a side and returns an action
        """
        return lambda battlefield, side: self.play(battlefield, side)

    def __str__(self) -> str:
        return self.name


def legal_actions_or_raise(battlefield: Battlefield, side: int) -> List[Action]:
    """
    Get the legal actions of a side, failing if there are none.

    Asking an agent to move for a side that cannot move is a programming
    error: callers must check for the terminal condition first.

    Args:
        battlefield: Current battlefield
        side: Side to move

    Returns:
        Non-empty list of legal actions
    """
    actions = battlefield.legal_actions(side)
    if not actions:
        raise ValueError(f"No legal actions for side {side}")
    return actions
