"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import CELL_COUNT, Mark
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Can only place on an empty cell of the board
    3. Only the player whose turn it is may move
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        mark: Optional[Mark] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to mark (0-8).
            mark: Who is moving. None means the player whose turn it is.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not isinstance(index, int) or isinstance(index, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell must be a whole number, got {index!r}"
            )

        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index + 1}. Must be 1-{CELL_COUNT}."
            )

        occupant = game_state.board[index]
        if occupant is not Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index + 1} is already taken by {occupant.value}"
            )

        if mark is not None and mark != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {game_state.current_player.value}'s turn, not {mark.value}'s"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell indices.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
