from typing import Protocol, List, Self, TypeVar
from minimax_playground.types import Player

MoveType = TypeVar("MoveType")


class GameState(Protocol[MoveType]):
    """Base protocol for all (game) states searchable by minimax.

    States are immutable values: every transition returns a new instance, so
    branches of the search tree never share mutable state.
    """
    current_player: Player

    def legal_moves(self) -> List[MoveType]:
        """Return every legal move. The order must be the same for identical states."""
        ...

    def apply(self, move: MoveType) -> Self:
        """Return the state after `move` is played by the current player.
        Raises IllegalMoveError if the move is not legal. Does not modify the state.
        """
        ...

    def is_terminal(self) -> bool:
        """True iff a player has won or no legal moves remain."""
        ...

    def terminal_score(self, depth: int) -> float:
        """Score of a terminal state reached `depth` moves below the search root.
        Positive if the maximizer won, negative if the minimizer won, 0 for a draw.
        """
        ...


def depth_penalized_score(winner: Player | None, depth: int, win_magnitude: int) -> float:
    """Score a finished game so that faster wins and slower losses are preferred.

    `win_magnitude` must exceed every reachable depth, otherwise a deep win
    could score like a draw or a loss.
    """
    if depth >= win_magnitude:
        raise ValueError(f"Depth {depth} must be smaller than the win magnitude {win_magnitude}")
    if winner is None:
        return 0.0
    if winner == Player.MAXIMIZER:
        return float(win_magnitude - depth)
    return float(depth - win_magnitude)
