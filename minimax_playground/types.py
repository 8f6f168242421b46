from enum import IntEnum
from typing import TypeVar

# Type variables for game-specific types
MoveType = TypeVar('MoveType')  # Type of moves in the game, e.g. a (row, col) board coordinate


class Player(IntEnum):
    """The two alternating players. The value doubles as the sign used to canonicalize scores."""
    MAXIMIZER = 1
    MINIMIZER = -1

    @property
    def opponent(self) -> "Player":
        return Player(-self.value)


def opponent_of(player: Player | int) -> Player:
    """Return the player who moves after `player`. Accepts plain +1/-1 as well."""
    try:
        return Player(player).opponent
    except ValueError:
        raise ValueError(f"Player must be +1 or -1, got {player!r}") from None
