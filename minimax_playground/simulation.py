from typing import Dict, List, Callable, Generic
from dataclasses import dataclass
from .state import GameState
from .agent import Agent
from .types import MoveType, Player
import logging


@dataclass
class GameRecord(Generic[MoveType]):
    initial_state: GameState[MoveType]
    moves: List[MoveType]
    final_state: GameState[MoveType]

    @property
    def score(self) -> float:
        """Terminal score of the final state, with the number of moves played as depth."""
        return self.final_state.terminal_score(len(self.moves))

    @property
    def winner(self) -> Player | None:
        score = self.score
        if score > 0:
            return Player.MAXIMIZER
        if score < 0:
            return Player.MINIMIZER
        return None


def simulate_game(
    state: GameState[MoveType],
    players: Dict[Player, Agent[MoveType]],
    logger: logging.Logger = logging.getLogger(__name__)
) -> GameRecord[MoveType]:
    """Play from `state` until the game ends, asking the agent of the player to move for every move."""
    if set(players) != set(Player):
        raise ValueError(f"Expected an agent for both players, got {list(players)}")
    logger.debug(f"Simulating game with players {players}.")
    initial_state = state
    moves: List[MoveType] = []
    while not state.is_terminal():
        logger.debug(f"Game state:\n{state}")
        player = state.current_player
        move = players[player](state)
        logger.debug(f"Player {player.name} took move {move}")
        state = state.apply(move)
        moves.append(move)
    logger.debug(f"Game terminal state reached after {len(moves)} moves:\n{state}")
    return GameRecord(initial_state=initial_state, moves=moves, final_state=state)


def benchmark(
    initial_state_creator: Callable[[], GameState[MoveType]],
    main_agent: Agent[MoveType],
    opponents: Dict[str, Agent[MoveType]],
    num_games: int,
    logger: logging.Logger | None = None
) -> Dict[str, List[float]]:
    """
    Benchmark the performance of a main agent against a set of opponents.

    The main agent plays the maximizer in even games and the minimizer in odd games.
    Returns, per opponent, the reward of every game from the main agent's point of view:
    1.0 for a win, 0.0 for a draw and -1.0 for a loss.
    """
    logger = logger if logger is not None else logging.getLogger(__name__)
    results: Dict[str, List[float]] = {opponent_name: [] for opponent_name in opponents}
    for opponent_name, opponent in opponents.items():
        for game in range(num_games):
            logger.debug(f"Simulating game {game + 1} of {num_games} against {opponent_name}...")
            main_player = Player.MAXIMIZER if game % 2 == 0 else Player.MINIMIZER
            players = {main_player: main_agent, main_player.opponent: opponent}
            record = simulate_game(initial_state_creator(), players, logger)
            if record.winner is None:
                reward = 0.0
            else:
                reward = 1.0 if record.winner == main_player else -1.0
            results[opponent_name].append(reward)
    return results
