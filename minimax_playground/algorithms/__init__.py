from .Minimax import Minimax, MinimaxConfig, MinimaxValue, minimax, decide, evaluate, scored_moves
from .RandomAgent import RandomAgent

__all__ = [
    "Minimax",
    "MinimaxConfig",
    "MinimaxValue",
    "minimax",
    "decide",
    "evaluate",
    "scored_moves",
    "RandomAgent",
]
