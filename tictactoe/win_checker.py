"""
Win checker for TicTacToe.
Decides whether a board is won, drawn, or still in progress.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .board import LINES, Board, Line, Mark, validate_board

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass(frozen=True)
class InProgress:
    """No line completed and at least one empty cell."""


@dataclass(frozen=True)
class Win:
    """A player completed a line."""
    mark: Mark      # X or O
    line: Line      # The winning triple of indices


@dataclass(frozen=True)
class Draw:
    """Board is full and nobody completed a line."""


Outcome = Union[InProgress, Win, Draw]


def is_terminal(outcome: Outcome) -> bool:
    """True for Win and Draw."""
    return not isinstance(outcome, InProgress)


def evaluate(board: Board) -> Outcome:
    """
    Evaluate a board.

    Lines are checked in the fixed LINES order and the first completed
    line is reported, so the result is deterministic.

    Args:
        board: 9 cells of Mark.

    Returns:
        Win(mark, line), Draw() or InProgress().

    Raises:
        InvalidBoard: if the board is malformed.
    """
    validate_board(board)
    return evaluate_unchecked(board)


def evaluate_unchecked(board: Board) -> Outcome:
    """evaluate() without validating the board first. Used inside the search."""
    for line in LINES:
        a, b, c = line
        mark = board[a]
        if mark is not Mark.EMPTY and mark is board[b] and mark is board[c]:
            return Win(mark, line)

    if all(cell is not Mark.EMPTY for cell in board):
        return Draw()

    return InProgress()


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = LINES

    def evaluate(self, board: Board) -> Outcome:
        """Same as the module level evaluate()."""
        return evaluate(board)

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        outcome = evaluate(board)
        if isinstance(outcome, Win):
            return outcome.mark
        return None

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """Get the winning line if there is one."""
        outcome = evaluate(board)
        if isinstance(outcome, Win):
            return outcome.line
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no winner."""
        return isinstance(evaluate(board), Draw)

    def update_game_state(self, game_state: "GameState") -> "GameState":
        """
        Record the board's outcome on the game state.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        game_state.outcome = evaluate(game_state.board)
        return game_state
