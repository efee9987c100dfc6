"""
Exceptions raised by the TicTacToe engine.
"""


class TicTacToeError(Exception):
    """Base class for engine errors."""


class InvalidBoard(TicTacToeError, ValueError):
    """The board is not 9 cells of X, O or EMPTY."""


class IllegalState(TicTacToeError, RuntimeError):
    """The engine was asked for something that cannot exist (e.g. a move on a finished board)."""
