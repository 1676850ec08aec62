"""Text rendering of the board. Presentation only: no game state is read or written beyond the board given."""

from src.tictactoe.board import Board, Cell

EMPTY_GLYPH = "---"


def cell_glyph(cell: Cell) -> str:
    return EMPTY_GLYPH if cell is None else f" {cell.symbol} "


def print_board(board: Board) -> str:
    """Rows joined by newlines, cells within a row joined by '|'."""
    return "\n".join("|".join(cell_glyph(cell) for cell in row) for row in board.cells)
