from minimax_playground.agent import Agent
from minimax_playground.state import GameState
from minimax_playground.errors import EmptyChildSetError, NoLegalMoveError
from minimax_playground.types import MoveType, Player, opponent_of
from dataclasses import dataclass, field
from multiprocessing import Pool
from typing import Generic, List, Tuple, Any
import logging


@dataclass
class MinimaxConfig:
    processes: int = 1  # Worker processes for the root's successors. Above 1, states must be picklable.

    def __post_init__(self):
        if self.processes < 1:
            raise ValueError(f"processes must be at least 1, got {self.processes}")


@dataclass
class MinimaxValue(Generic[MoveType]):
    player: Player
    value: float  # From the maximizer's point of view, like minimax()
    best_moves: List[MoveType] = field(default_factory=list)


def minimax(state: GameState[Any], player_to_move: Player | int, depth: int = 0) -> float:
    """
    Game-theoretic value of `state` under optimal play by both sides.

    Exhaustive search without pruning or caching, so only viable for small games like TicTacToe.
    Depth is passed to the terminal scores so that faster wins and slower losses are preferred.
    """
    if state.is_terminal():
        return float(state.terminal_score(depth))
    opponent = opponent_of(player_to_move)
    child_values = [minimax(state.apply(move), opponent, depth + 1) for move in state.legal_moves()]
    if len(child_values) == 0:
        raise EmptyChildSetError(f"Non-terminal state has no legal moves:\n{state}")
    if player_to_move == Player.MAXIMIZER:
        return max(child_values)
    return min(child_values)


def _successor_value(successor: GameState[Any], opponent: Player) -> float:
    # Module level so that it can be sent to worker processes
    return minimax(successor, opponent, 1)


def scored_moves(
    state: GameState[MoveType],
    player_to_move: Player | int,
    config: MinimaxConfig | None = None,
    logger: logging.Logger = logging.getLogger(__name__),
) -> List[Tuple[MoveType, float]]:
    """
    Pair every legal move with its canonical score, in the order given by `state.legal_moves()`.

    The canonical score is the minimax value of the successor multiplied by the
    player's sign, so higher is always better for `player_to_move`.
    """
    config = config if config is not None else MinimaxConfig()
    player = Player(player_to_move)
    opponent = player.opponent
    moves = state.legal_moves()
    if len(moves) == 0:
        raise NoLegalMoveError(f"No legal moves for player {player.name} in state:\n{state}")
    successors = [state.apply(move) for move in moves]
    if config.processes > 1 and len(successors) == 1:
        logger.warning(f"Ignoring processes={config.processes}: the state has a single legal move.")
    if config.processes > 1 and len(successors) > 1:
        with Pool(min(config.processes, len(successors))) as pool:
            values = pool.starmap(_successor_value, [(successor, opponent) for successor in successors])
    else:
        values = [_successor_value(successor, opponent) for successor in successors]
    return [(move, int(player) * value) for move, value in zip(moves, values)]


def evaluate(
    state: GameState[MoveType],
    player_to_move: Player | int,
    config: MinimaxConfig | None = None,
) -> MinimaxValue[MoveType]:
    """Value of `state` together with every move that attains it, in enumeration order."""
    player = Player(player_to_move)
    if state.is_terminal():
        return MinimaxValue(player=player, value=float(state.terminal_score(0)))
    if len(state.legal_moves()) == 0:
        raise EmptyChildSetError(f"Non-terminal state has no legal moves:\n{state}")
    scores = scored_moves(state, player, config)
    best_score = max(score for _, score in scores)
    best_moves = [move for move, score in scores if score == best_score]
    return MinimaxValue(player=player, value=int(player) * best_score, best_moves=best_moves)


def decide(
    state: GameState[MoveType],
    player_to_move: Player | int,
    config: MinimaxConfig | None = None,
    logger: logging.Logger = logging.getLogger(__name__),
) -> MoveType:
    """Best move for `player_to_move`. Ties go to the first move in enumeration order."""
    scores = scored_moves(state, player_to_move, config, logger)
    best_move, best_score = scores[0]
    for move, score in scores[1:]:
        if score > best_score:
            best_move, best_score = move, score
    logger.debug(f"Canonical scores for player {int(player_to_move):+d}: {scores}")
    logger.debug(f"Player {int(player_to_move):+d} chose move {best_move} with score {best_score}")
    return best_move


class Minimax(Agent[MoveType], Generic[MoveType]):
    """
    Agent that plays the minimax move for the player to move in the state it is given.

    Every call searches the whole tree below the state again; nothing is kept between calls.
    """
    def __init__(
        self,
        config: MinimaxConfig | None = None,
        logger: logging.Logger = logging.getLogger(__name__),
    ):
        self.config = config if config is not None else MinimaxConfig()
        self.logger = logger

    def __call__(self, state: GameState[MoveType]) -> MoveType:
        return decide(state, state.current_player, self.config, self.logger)
