# OpenSpielState needs the optional open_spiel dependency, import it from
# minimax_playground.games.open_spiel_state_wrapper directly.
from .tic_tac_toe import TicTacToeState, TicTacToeMove, winning_lines

__all__ = [
    "TicTacToeState",
    "TicTacToeMove",
    "winning_lines",
]
