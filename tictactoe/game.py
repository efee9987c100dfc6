"""
Game controller for TicTacToe.

Ties together:
- Game state (board, turn, countdown)
- Move validation
- Win checking
- The computer opponent

The controller has no clock and never sleeps. Front ends call tick()
as time passes and decide how long the computer "thinks".
"""

import logging
from typing import Optional

from .ai_player import AIPlayer
from .board import Mark
from .config import TicTacToeConfig, get_config
from .game_state import GameMode, GameState
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

HUMAN_MARK = Mark.X
COMPUTER_MARK = Mark.O


class TicTacToeGame:
    """
    Main controller for a TicTacToe session.

    Game flow (single player):
    1. Human (X) picks a cell
    2. Outcome is checked
    3. Computer (O) replies with the minimax move
    4. Repeat until someone wins or it's a draw

    In two player mode both marks are played through play().
    """

    def __init__(self, config: Optional[TicTacToeConfig] = None):
        """
        Args:
            config: Settings to use. Defaults to the global configuration.
        """
        self.config = config or get_config()

        mode = GameMode.SINGLE_PLAYER if self.config.game.single_player else GameMode.TWO_PLAYER
        turn_seconds = self.config.game.turn_seconds
        self.game_state = GameState(mode=mode, turn_seconds=turn_seconds, time_left=turn_seconds)

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(COMPUTER_MARK, self.config.engine)

    @property
    def mode(self) -> GameMode:
        return self.game_state.mode

    @property
    def needs_computer_move(self) -> bool:
        """True when the computer should move next."""
        state = self.game_state
        return (
            state.mode == GameMode.SINGLE_PLAYER
            and not state.is_game_over
            and state.current_player == COMPUTER_MARK
        )

    def play(self, index: int) -> ValidationResult:
        """
        Play a human move for the side whose turn it is.

        Args:
            index: Cell index (0-8).

        Returns:
            ValidationResult. Invalid moves leave the state unchanged.
        """
        if self.needs_computer_move:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the computer to move"
            )

        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            logger.info("Rejected move %s: %s", index, result.error_message)
            return result

        self._apply(index)
        return result

    def play_computer(self) -> Optional[int]:
        """
        Let the computer make its move.

        Returns:
            The index played, or None if it's not the computer's turn.
        """
        if not self.needs_computer_move:
            return None

        index = self.ai.get_best_move(self.game_state)
        if index is None:
            return None

        self._apply(index)
        return index

    def tick(self, seconds: int = 1) -> bool:
        """Advance the turn countdown. Returns True if the turn expired."""
        return self.game_state.tick(seconds)

    def restart(self, mode: Optional[GameMode] = None):
        """Start a new game, optionally in another mode."""
        self.game_state.restart(mode)
        logger.info("New %s game", self.game_state.mode.value)

    def set_mode(self, mode: GameMode):
        """Switch mode. Always starts a new game."""
        self.restart(mode)

    def _apply(self, index: int):
        mark = self.game_state.current_player
        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        logger.debug("%s played cell %d", mark.value, index)

        if self.game_state.winner is not None:
            logger.info("%s wins on %s", self.game_state.winner.value, self.game_state.winning_line)
        elif self.game_state.is_draw:
            logger.info("Game drawn")
