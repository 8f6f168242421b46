from typing import Dict, Callable, Protocol
from dataclasses import dataclass
import logging
import numpy as np
from .state import GameState
from .agent import Agent
from .simulation import benchmark
from .types import MoveType

class Evaluator(Protocol[MoveType]):
    """Scores a main agent by letting it play against a fixed set of opponents."""

    def __call__(
        self,
        main_agent: Agent[MoveType],
        logger: logging.Logger | None = None
    ) -> Dict[str, Dict[str, float]]:
        """Map every opponent name to summary statistics of the main agent's results."""
        ...

@dataclass
class StandardWinLossTieEvaluator(Evaluator[MoveType]):
    """
    Summarizes benchmark rewards (+1 win, 0 draw, -1 loss) as mean, std and win/loss/tie rates.
    """
    initial_state_creator: Callable[[], GameState[MoveType]]
    opponents: Dict[str, Agent[MoveType]]
    num_games: int

    def __post_init__(self):
        if self.num_games < 1:
            raise ValueError(f"num_games must be at least 1, got {self.num_games}")

    def __call__(self,
        main_agent: Agent[MoveType],
        logger: logging.Logger | None = None
    ) -> Dict[str, Dict[str, float]]:
        rewards_per_opponent = benchmark(self.initial_state_creator, main_agent, self.opponents, self.num_games, logger)
        results = {}
        for opponent_name, rewards in rewards_per_opponent.items():
            rewards = np.asarray(rewards, dtype=float)
            results[opponent_name] = {
                "mean": float(rewards.mean()),
                "std": float(rewards.std()),
                "win_rate": float(np.mean(rewards > 0)),
                "loss_rate": float(np.mean(rewards < 0)),
                "tie_rate": float(np.mean(rewards == 0)),
            }
        return results
