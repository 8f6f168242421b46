from minimax_playground.agent import Agent
from minimax_playground.state import GameState
from minimax_playground.errors import NoLegalMoveError
from minimax_playground.types import MoveType
import random

class RandomAgent(Agent[MoveType]):
    """Agent that selects moves uniformly at random."""

    def __init__(self, seed: int | None = None):
        """Initialize the agent with its own random generator, so seeded agents are reproducible."""
        self.rng = random.Random(seed)

    def __call__(self, state: GameState[MoveType]) -> MoveType:
        moves = state.legal_moves()
        if len(moves) == 0:
            raise NoLegalMoveError(f"No legal moves in state:\n{state}")
        return self.rng.choice(moves)
