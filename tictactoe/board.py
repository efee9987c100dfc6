"""
Board representation for TicTacToe.
The board is a flat list of 9 cells, indexed row-major:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import Enum
from typing import List, Tuple

from .errors import InvalidBoard


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Mark(Enum):
    """What a cell holds."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opposite")


Board = List[Mark]
Line = Tuple[int, int, int]

# All possible winning lines. Order matters: the first match is reported.
LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

# Characters accepted by parse_board for an empty cell
_EMPTY_CHARS = " .-_"


def new_board() -> Board:
    """Create an empty board."""
    return [Mark.EMPTY for _ in range(CELL_COUNT)]


def validate_board(board: Board) -> None:
    """
    Make sure a board has 9 cells and only holds marks.

    Raises:
        InvalidBoard: if the board is malformed.
    """
    try:
        size = len(board)
    except TypeError:
        raise InvalidBoard(f"Board must be a sequence, got {type(board).__name__}")

    if size != CELL_COUNT:
        raise InvalidBoard(f"Board must have {CELL_COUNT} cells, got {size}")

    for index, cell in enumerate(board):
        if not isinstance(cell, Mark):
            raise InvalidBoard(f"Cell {index} holds {cell!r}, expected a Mark")


def empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells, in ascending order."""
    return [index for index, cell in enumerate(board) if cell is Mark.EMPTY]


def parse_board(text: str) -> Board:
    """
    Build a board from a 9 character string, e.g. "XX.OO....".

    X and O are marks; space, '.', '-' and '_' are empty cells.
    Newlines and '|' separators are ignored so a drawn grid also works.
    """
    cells = [ch for ch in text if ch not in "\n|"]
    board = []
    for ch in cells:
        if ch.upper() == "X":
            board.append(Mark.X)
        elif ch.upper() == "O":
            board.append(Mark.O)
        elif ch in _EMPTY_CHARS:
            board.append(Mark.EMPTY)
        else:
            raise InvalidBoard(f"Unknown cell character {ch!r}")

    validate_board(board)
    return board


def format_board(board: Board, show_numbers: bool = True) -> str:
    """
    Render the board as a text grid.

    Args:
        board: The board to draw.
        show_numbers: Show 1-9 in empty cells (what the player types).

    Returns:
        Multi-line string.
    """
    rows = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            mark = board[index]
            if mark is Mark.EMPTY and show_numbers:
                cells.append(str(index + 1))
            else:
                cells.append(mark.value)
        rows.append(" " + " | ".join(cells))

    return "\n---+---+---\n".join(rows)
