"""
TicTacToe
=========
Tic-Tac-Toe for one player against the computer or two players on one
terminal. The computer searches the full game tree with Minimax and
never loses.

Core API:
    evaluate(board)                  -> InProgress | Win(mark, line) | Draw
    best_move(board, side_to_move)   -> MoveCandidate(index, score)
"""

__version__ = "1.0.0"

from .board import Mark, LINES, new_board, parse_board, format_board
from .errors import TicTacToeError, InvalidBoard, IllegalState
from .win_checker import evaluate, is_terminal, InProgress, Win, Draw, WinChecker
from .ai_player import best_move, MoveCandidate, MoveSearch, AIPlayer
from .game_state import GameState, GameMode
from .move_validator import MoveValidator
from .game import TicTacToeGame
