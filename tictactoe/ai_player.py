"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from .board import Board, Mark, empty_cells, validate_board
from .config import EngineSettings
from .errors import IllegalState, InvalidBoard
from .win_checker import Draw, Outcome, Win, evaluate_unchecked

if TYPE_CHECKING:
    from .game_state import GameState

logger = logging.getLogger(__name__)

WIN_SCORE = 10
DRAW_SCORE = 0


@dataclass(frozen=True)
class MoveCandidate:
    """A cell index and its minimax score (positive favors the maximizer).

    index is None when the board was already finished.
    """
    index: Optional[int]
    score: int


class MoveSearch:
    """
    Exhaustive minimax over the remaining game tree.

    Candidates are tried in cell-index order and only a strictly better
    score replaces the current best, so among equal moves the lowest
    index is chosen. Alpha-beta pruning, when enabled, keeps that choice.
    """

    def __init__(
        self,
        maximizer: Mark = Mark.O,
        use_pruning: bool = False,
        prefer_faster_wins: bool = False
    ):
        """
        Args:
            maximizer: The mark whose wins score positive.
            use_pruning: Cut branches that cannot change the result.
            prefer_faster_wins: Score a win at depth d as 10 - d
                (and a loss as d - 10) instead of a flat +/-10.
        """
        if maximizer not in (Mark.X, Mark.O):
            raise ValueError(f"maximizer must be X or O, got {maximizer}")
        self.maximizer = maximizer
        self.use_pruning = use_pruning
        self.prefer_faster_wins = prefer_faster_wins

        # How many positions the last call visited
        self.positions_evaluated = 0

    def best_move(self, board: Board, side_to_move: Mark) -> MoveCandidate:
        """
        Find the optimal move for side_to_move.

        The caller's board is not modified. On a won or drawn board
        there is nothing to play: the result has index None and the
        leaf score.

        Raises:
            InvalidBoard: malformed board or side_to_move is EMPTY.
            IllegalState: an unfinished board with no empty cell.
        """
        work = self._prepare(board, side_to_move)
        index, score = self._minimax(work, side_to_move, 0, float('-inf'), float('inf'))
        return MoveCandidate(index, score)

    def score(self, board: Board, side_to_move: Mark) -> int:
        """Minimax value of a board, terminal boards included."""
        work = self._prepare(board, side_to_move)
        _, score = self._minimax(work, side_to_move, 0, float('-inf'), float('inf'))
        return score

    def _prepare(self, board: Board, side_to_move: Mark) -> Board:
        validate_board(board)
        if side_to_move not in (Mark.X, Mark.O):
            raise InvalidBoard(f"side_to_move must be X or O, got {side_to_move}")
        self.positions_evaluated = 0
        return list(board)

    def _leaf_score(self, outcome: Outcome, depth: int) -> Optional[int]:
        """Score for a finished game, None if the game goes on."""
        if isinstance(outcome, Win):
            score = WIN_SCORE - depth if self.prefer_faster_wins else WIN_SCORE
            return score if outcome.mark is self.maximizer else -score
        if isinstance(outcome, Draw):
            return DRAW_SCORE
        return None

    def _minimax(
        self,
        board: Board,
        player: Mark,
        depth: int,
        alpha: float,
        beta: float
    ) -> Tuple[Optional[int], int]:
        """
        Minimax with optional alpha-beta pruning.

        Args:
            board: Working board, filled and restored in place.
            player: Mark to move at this node.
            depth: Plies from the root.
            alpha: Best score the maximizer is assured of.
            beta: Best score the minimizer is assured of.

        Returns:
            (index, score). index is None at a finished game.
        """
        self.positions_evaluated += 1

        leaf = self._leaf_score(evaluate_unchecked(board), depth)
        if leaf is not None:
            return None, leaf

        maximizing = player is self.maximizer
        best_index = None
        best_score = 0

        for index in empty_cells(board):
            board[index] = player
            try:
                _, score = self._minimax(board, player.opposite(), depth + 1, alpha, beta)
            finally:
                board[index] = Mark.EMPTY

            if best_index is None or (score > best_score if maximizing else score < best_score):
                best_index = index
                best_score = score

            if self.use_pruning:
                if maximizing:
                    alpha = max(alpha, score)
                else:
                    beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune

        if best_index is None:
            # A non-terminal board always has an empty cell
            raise IllegalState("No empty cell on an unfinished board")

        return best_index, best_score


def best_move(board: Board, side_to_move: Mark, maximizer: Mark = Mark.O) -> MoveCandidate:
    """Plain minimax best move for side_to_move, with maximizer scoring positive."""
    return MoveSearch(maximizer=maximizer).best_move(board, side_to_move)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays optimally: it takes a forced win when it has one,
    blocks when it must, and never loses from a drawn position.
    """

    def __init__(self, player: Mark = Mark.O, settings: Optional[EngineSettings] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI controls (default: O)
            settings: Search options (default: plain minimax)
        """
        settings = settings or EngineSettings()
        self.player = player
        self.search = MoveSearch(
            maximizer=player,
            use_pruning=settings.use_pruning,
            prefer_faster_wins=settings.prefer_faster_wins
        )

    @property
    def moves_evaluated(self) -> int:
        return self.search.positions_evaluated

    def get_best_move(self, game_state: "GameState") -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Cell index of the best move, or None if it's not the AI's move.
        """
        if game_state.is_game_over:
            logger.warning("Game is over, %s has no move", self.player.value)
            return None

        if game_state.current_player != self.player:
            logger.warning("It's not %s's turn!", self.player.value)
            return None

        candidate = self.search.best_move(game_state.board, self.player)

        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %d)",
            self.moves_evaluated, candidate.index, candidate.score
        )
        return candidate.index
