"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the turn countdown, and the result.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .board import Board, Line, Mark, empty_cells, new_board
from .win_checker import Draw, InProgress, Outcome, Win, is_terminal

logger = logging.getLogger(__name__)

DEFAULT_TURN_SECONDS = 10


class GameMode(Enum):
    """Who plays O."""
    SINGLE_PLAYER = "single"    # Human X vs computer O
    TWO_PLAYER = "two"          # Two humans share the board


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # 0 for the first move of the game


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The board (9 cells)
    - Current player (X always starts)
    - Time left on the current turn
    - Move history
    - Outcome (in progress, won, draw)

    The countdown only moves when tick() is called, so the state has no
    timer of its own.
    """

    board: Board = field(default_factory=new_board)

    current_player: Mark = Mark.X

    mode: GameMode = GameMode.SINGLE_PLAYER

    # Turn countdown
    turn_seconds: int = DEFAULT_TURN_SECONDS
    time_left: int = DEFAULT_TURN_SECONDS

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result, set by WinChecker.update_game_state
    outcome: Outcome = field(default_factory=InProgress)

    @property
    def is_game_over(self) -> bool:
        return is_terminal(self.outcome)

    @property
    def winner(self) -> Optional[Mark]:
        if isinstance(self.outcome, Win):
            return self.outcome.mark
        return None

    @property
    def winning_line(self) -> Optional[Line]:
        if isinstance(self.outcome, Win):
            return self.outcome.line
        return None

    @property
    def is_draw(self) -> bool:
        return isinstance(self.outcome, Draw)

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark and pass the turn.

        The outcome is not checked here (see WinChecker.update_game_state).

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            logger.info("Game is already over!")
            return False

        if not isinstance(index, int) or isinstance(index, bool):
            logger.info("Cell %r is not a whole number", index)
            return False

        if not 0 <= index < len(self.board):
            logger.info("Cell %s is off the board", index)
            return False

        if self.board[index] is not Mark.EMPTY:
            logger.info("Cell %d is already occupied!", index)
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            mark=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))

        self.current_player = self.current_player.opposite()
        self.time_left = self.turn_seconds

        return True

    def tick(self, seconds: int = 1) -> bool:
        """
        Count down the current turn.

        When the countdown runs out the turn passes to the other player
        and the countdown starts over. Time beyond the expiry is not
        carried into the next turn.

        Returns:
            True if the turn expired.
        """
        if self.is_game_over or seconds <= 0:
            return False

        self.time_left -= seconds
        if self.time_left > 0:
            return False

        logger.info("%s ran out of time", self.current_player.value)
        self.current_player = self.current_player.opposite()
        self.time_left = self.turn_seconds
        return True

    def restart(self, mode: Optional[GameMode] = None):
        """Clear the board for a new game, optionally switching mode."""
        if mode is not None:
            self.mode = mode
        self.board = new_board()
        self.current_player = Mark.X
        self.moves = []
        self.outcome = InProgress()
        self.time_left = self.turn_seconds

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices."""
        return empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            mode=self.mode,
            turn_seconds=self.turn_seconds,
            time_left=self.time_left,
            moves=list(self.moves),
            outcome=self.outcome
        )
