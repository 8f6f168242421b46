# Public API for the minimax_playground package ---------------------------------------
"""Top-level convenience imports.

The goal is that downstream code can simply do::

    import minimax_playground as mp
    move = mp.decide(mp.TicTacToeState(), mp.Player.MAXIMIZER)

without having to navigate the internal module hierarchy.
"""

# ---------------------------------------------------------------------------
# Core protocols & types
# ---------------------------------------------------------------------------
from .types import Player, opponent_of
from .state import GameState, depth_penalized_score
from .agent import Agent
from .errors import SearchError, IllegalMoveError, EmptyChildSetError, NoLegalMoveError

# ---------------------------------------------------------------------------
# Games (OpenSpielState lives in games.open_spiel_state_wrapper, it needs open_spiel)
# ---------------------------------------------------------------------------
from .games.tic_tac_toe import TicTacToeState, TicTacToeMove

# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------
from .algorithms.Minimax import (
    Minimax,
    MinimaxConfig,
    MinimaxValue,
    minimax,
    decide,
    evaluate,
    scored_moves,
)
from .algorithms.RandomAgent import RandomAgent

# ---------------------------------------------------------------------------
# Misc utilities (simulation, evaluation)
# ---------------------------------------------------------------------------
from .simulation import GameRecord, simulate_game, benchmark
from .evaluation import Evaluator, StandardWinLossTieEvaluator

# ---------------------------------------------------------------------------
# Package export list
# ---------------------------------------------------------------------------
__all__ = [
    # Core
    "Player",
    "opponent_of",
    "GameState",
    "depth_penalized_score",
    "Agent",
    "SearchError",
    "IllegalMoveError",
    "EmptyChildSetError",
    "NoLegalMoveError",
    # Games
    "TicTacToeState",
    "TicTacToeMove",
    # Algorithms
    "Minimax",
    "MinimaxConfig",
    "MinimaxValue",
    "minimax",
    "decide",
    "evaluate",
    "scored_moves",
    "RandomAgent",
    # Misc utilities
    "GameRecord",
    "simulate_game",
    "benchmark",
    "Evaluator",
    "StandardWinLossTieEvaluator",
]
