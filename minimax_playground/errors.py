class SearchError(Exception):
    """Base class for violations of the game state / search contract."""


class IllegalMoveError(SearchError, ValueError):
    """A move was applied that is not legal in the current state."""


class EmptyChildSetError(SearchError):
    """A non-terminal state has no legal moves. The game state implementation is broken."""


class NoLegalMoveError(SearchError):
    """A move was requested from a state without legal moves."""
