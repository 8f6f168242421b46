from minimax_playground.state import GameState, depth_penalized_score
from minimax_playground.errors import IllegalMoveError, SearchError
from minimax_playground.types import Player
from typing import List, Self
import pyspiel


class OpenSpielState(GameState[int]):
    """Simple wrapper for OpenSpiel's State class.

    Only two-player, sequential, deterministic, perfect-information, zero-sum games with strictly
    alternating turns are supported. OpenSpiel's player 0 is the maximizer.
    Games that can give a player two moves in a row (e.g. dots_and_boxes) pass the construction
    checks, so `apply` raises SearchError as soon as a move does not hand the turn to the opponent.
    """
    def __init__(self, open_spiel_state):
        """
        Args:
            open_spiel_state: OpenSpiel's State class. It is never modified by the wrapper.
        """
        game = open_spiel_state.get_game()
        game_type = game.get_type()
        if game.num_players() != 2:
            raise ValueError(f"{game_type.short_name} has {game.num_players()} players, minimax needs 2")
        if game_type.dynamics != pyspiel.GameType.Dynamics.SEQUENTIAL:
            raise ValueError(f"{game_type.short_name} is not a sequential game")
        if game_type.chance_mode != pyspiel.GameType.ChanceMode.DETERMINISTIC:
            raise ValueError(f"{game_type.short_name} has chance nodes")
        if game_type.information != pyspiel.GameType.Information.PERFECT_INFORMATION:
            raise ValueError(f"{game_type.short_name} does not have perfect information")
        if game_type.utility != pyspiel.GameType.Utility.ZERO_SUM:
            raise ValueError(f"{game_type.short_name} is not zero-sum")
        self.spiel_state = open_spiel_state
        self.win_magnitude = game.max_game_length() + 1

    @classmethod
    def new_game(cls, name: str) -> Self:
        """Initial state of the OpenSpiel game called `name`, e.g. "tic_tac_toe"."""
        return cls(pyspiel.load_game(name).new_initial_state())

    @property
    def current_player(self) -> Player:
        if self.spiel_state.is_terminal():
            # OpenSpiel reports a sentinel id here, so fall back on strict alternation
            return Player.MAXIMIZER if len(self.spiel_state.history()) % 2 == 0 else Player.MINIMIZER
        return Player.MAXIMIZER if self.spiel_state.current_player() == 0 else Player.MINIMIZER

    def legal_moves(self) -> List[int]:
        return list(self.spiel_state.legal_actions())

    def apply(self, move: int) -> Self:
        if move not in self.spiel_state.legal_actions():
            raise IllegalMoveError(f"Action {move} is not legal in state:\n{self}")
        child = self.spiel_state.clone()
        child.apply_action(move)
        if not child.is_terminal() and child.current_player() == self.spiel_state.current_player():
            raise SearchError(f"Action {move} gives player {child.current_player()} another move, turns must alternate")
        return type(self)(child)

    def is_terminal(self) -> bool:
        return self.spiel_state.is_terminal()

    def terminal_score(self, depth: int) -> float:
        if not self.spiel_state.is_terminal():
            raise SearchError(f"Terminal score requested for a non-terminal state:\n{self}")
        maximizer_return = self.spiel_state.returns()[0]
        if maximizer_return > 0:
            winner = Player.MAXIMIZER
        elif maximizer_return < 0:
            winner = Player.MINIMIZER
        else:
            winner = None
        return depth_penalized_score(winner, depth, self.win_magnitude)

    def __eq__(self, other):
        if not isinstance(other, OpenSpielState):
            return False
        return self.spiel_state.serialize() == other.spiel_state.serialize()

    def __hash__(self):
        return hash(self.spiel_state.serialize())

    def __str__(self):
        return str(self.spiel_state)
