from typing import Protocol, TypeVar
from minimax_playground.state import GameState

MoveType = TypeVar("MoveType")


class Agent(Protocol[MoveType]):
    """Protocol for agents that can play games.

    Agents are handed the current state on every call and keep no search tree
    between calls. Examples: Minimax, RandomAgent.
    """

    def __call__(self, state: GameState[MoveType]) -> MoveType:
        """Select a move for `state.current_player`."""
        ...
