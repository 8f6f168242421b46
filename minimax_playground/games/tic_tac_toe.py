from typing import List, Tuple, Optional, Sequence, Self
from functools import lru_cache
from math import isqrt
from minimax_playground.state import GameState, depth_penalized_score
from minimax_playground.errors import IllegalMoveError, SearchError
from minimax_playground.types import Player

# Define TicTacToeMove as a type alias
TicTacToeMove = Tuple[int, int]
Board = Tuple[Tuple[int, ...], ...]

EMPTY = 0
SYMBOLS = {EMPTY: ' ', Player.MAXIMIZER: 'X', Player.MINIMIZER: 'O'}


@lru_cache(maxsize=None)
def winning_lines(size: int) -> Tuple[Tuple[TicTacToeMove, ...], ...]:
    """Rows, columns and both diagonals of a size x size board."""
    rows = [tuple((i, j) for j in range(size)) for i in range(size)]
    columns = [tuple((i, j) for i in range(size)) for j in range(size)]
    diagonals = [
        tuple((i, i) for i in range(size)),
        tuple((i, size - 1 - i) for i in range(size)),
    ]
    return tuple(rows + columns + diagonals)


class TicTacToeState(GameState[TicTacToeMove]):
    """Immutable Tic-Tac-Toe position on a size x size board, where size in a row wins.

    Cells hold 0 (empty), +1 (X, the maximizer) or -1 (O, the minimizer).
    X moves first, so when `current_player` is omitted it is inferred from the piece counts.
    """

    def __init__(
        self,
        board: Optional[Sequence[Sequence[int]]] = None,
        current_player: Player | int | None = None,
        size: int = 3,
    ):
        if board is None:
            board = [[EMPTY] * size for _ in range(size)]
        self.board: Board = tuple(tuple(int(cell) for cell in row) for row in board)
        self.size = len(self.board)
        if self.size == 0 or any(len(row) != self.size for row in self.board):
            raise ValueError(f"Board must be square and non-empty, got {board!r}")
        cells = [cell for row in self.board for cell in row]
        if any(cell not in (EMPTY, Player.MAXIMIZER, Player.MINIMIZER) for cell in cells):
            raise ValueError(f"Cells must be 0, 1 or -1, got {board!r}")

        if current_player is None:
            x_count = cells.count(Player.MAXIMIZER)
            o_count = cells.count(Player.MINIMIZER)
            if x_count == o_count:
                current_player = Player.MAXIMIZER
            elif x_count == o_count + 1:
                current_player = Player.MINIMIZER
            else:
                raise ValueError(f"Cannot infer player to move from {x_count} X and {o_count} O pieces")
        self.current_player = Player(current_player)
        self.win_magnitude = self.size * self.size + 1
        self._empty_count = cells.count(EMPTY)
        self._winner = self._get_winner()

    @classmethod
    def _successor(cls, board: Board, current_player: Player, empty_count: int) -> Self:
        # Skips validation: only called with boards derived from a valid state
        state = cls.__new__(cls)
        state.board = board
        state.size = len(board)
        state.current_player = current_player
        state.win_magnitude = state.size * state.size + 1
        state._empty_count = empty_count
        state._winner = state._get_winner()
        return state

    @classmethod
    def from_string(cls, text: str, current_player: Player | int | None = None) -> Self:
        """Parse a row-major comma-separated board such as "1,1,0,-1,-1,0,0,0,0"."""
        try:
            cells = [int(cell) for cell in text.split(',')]
        except ValueError:
            raise ValueError(f"Board must be comma-separated integers, got {text!r}") from None
        size = isqrt(len(cells))
        if size * size != len(cells):
            raise ValueError(f"Board must have a square number of cells, got {len(cells)}")
        return cls([cells[i * size:(i + 1) * size] for i in range(size)], current_player)

    def legal_moves(self) -> List[TicTacToeMove]:
        """Return empty positions as (row, col) tuples in row-major order; none once the game is won."""
        if self._winner is not None:
            return []
        return [(i, j) for i in range(self.size) for j in range(self.size) if self.board[i][j] == EMPTY]

    def apply(self, move: TicTacToeMove) -> Self:
        """Return new state after the current player marks `move`."""
        try:
            row, col = move
        except (TypeError, ValueError):
            raise IllegalMoveError(f"Move must be a (row, col) pair, got {move!r}") from None
        if not (isinstance(row, int) and isinstance(col, int)):
            raise IllegalMoveError(f"Position {move} must have integer coordinates")
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IllegalMoveError(f"Position {move} is off the board")
        if self.board[row][col] != EMPTY:
            raise IllegalMoveError(f"Position {move} is already occupied")
        if self._winner is not None:
            raise IllegalMoveError(f"Game is already won by {SYMBOLS[self._winner]}")
        new_row = self.board[row][:col] + (int(self.current_player),) + self.board[row][col + 1:]
        new_board = self.board[:row] + (new_row,) + self.board[row + 1:]
        return self._successor(new_board, self.current_player.opponent, self._empty_count - 1)

    def is_terminal(self) -> bool:
        return self._winner is not None or self._empty_count == 0

    def terminal_score(self, depth: int) -> float:
        if not self.is_terminal():
            raise SearchError(f"Terminal score requested for a non-terminal state:\n{self}")
        return depth_penalized_score(self._winner, depth, self.win_magnitude)

    @property
    def winner(self) -> Player | None:
        return self._winner

    def _get_winner(self) -> Player | None:
        """Return the player owning a complete line, or None."""
        winners = set()
        for line in winning_lines(self.size):
            total = sum(self.board[i][j] for i, j in line)
            if total == self.size:
                winners.add(Player.MAXIMIZER)
            elif total == -self.size:
                winners.add(Player.MINIMIZER)
        if len(winners) > 1:
            raise ValueError(f"Both players have a complete line:\n{self}")
        return winners.pop() if winners else None

    def __str__(self) -> str:
        """Return string representation of board."""
        rows = []
        for i, row in enumerate(self.board):
            rows.append(' | '.join(SYMBOLS[cell] for cell in row))
            if i < self.size - 1:
                rows.append('-' * (4 * self.size - 3))
        return '\n'.join(rows)

    def __repr__(self) -> str:
        return f"TicTacToeState(board={self.board!r}, current_player={self.current_player!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TicTacToeState):
            return False
        return self.board == other.board and self.current_player == other.current_player

    def __hash__(self) -> int:
        return hash((self.board, self.current_player))
