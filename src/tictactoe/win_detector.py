"""
Win detection: a player wins when they own all three cells of any row, column or diagonal.

Pure predicate over whatever board it is given. It does not check that the board is reachable by legal play.
"""

from typing import Optional

from src.core.shared_types import Player
from src.tictactoe.board import Board, Position

Line = tuple[Position, Position, Position]

ROWS: list[Line] = [
    (Position(row, 0), Position(row, 1), Position(row, 2)) for row in range(3)
]
COLUMNS: list[Line] = [
    (Position(0, col), Position(1, col), Position(2, col)) for col in range(3)
]
DIAGONALS: list[Line] = [
    (Position(0, 0), Position(1, 1), Position(2, 2)),  # top-left -> bottom-right
    (Position(0, 2), Position(1, 1), Position(2, 0)),  # top-right -> bottom-left
]

LINES: list[Line] = ROWS + COLUMNS + DIAGONALS


def is_winning_line(board: Board, line: Line, player: Player) -> bool:
    """All three cells owned, and all by the same player. Empty cells never count."""
    return all(board.cell(pos.row, pos.col) == player for pos in line)


def winning_line(board: Board, player: Player) -> Optional[Line]:
    return next((line for line in LINES if is_winning_line(board, line, player)), None)


def has_winner(board: Board, player: Player) -> bool:
    return winning_line(board, player) is not None
