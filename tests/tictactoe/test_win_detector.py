"""Unit tests for /src/tictactoe/win_detector.py"""

from itertools import combinations, product

import pytest

from src.core.shared_types import Player
from src.tictactoe.board import Board
from src.tictactoe.win_detector import (
    COLUMNS,
    DIAGONALS,
    LINES,
    ROWS,
    Line,
    has_winner,
    winning_line,
)


def board_with(line: Line, player: Player) -> Board:
    board = Board.empty()
    for position in line:
        board.set_cell(position.row, position.col, player)
    return board


def test_eight_lines() -> None:
    assert len(ROWS) == 3
    assert len(COLUMNS) == 3
    assert len(DIAGONALS) == 2
    assert len(LINES) == 8
    assert len(set(LINES)) == 8


@pytest.mark.parametrize("line", LINES)
@pytest.mark.parametrize("player", list(Player))
def test_every_line_wins(line: Line, player: Player) -> None:
    board = board_with(line, player)
    assert has_winner(board, player)
    assert not has_winner(board, player.opponent)
    assert winning_line(board, player) == line


def test_empty_board_has_no_winner() -> None:
    board = Board.empty()
    assert not has_winner(board, Player.CROSSES)
    assert not has_winner(board, Player.CIRCLES)
    assert winning_line(board, Player.CROSSES) is None


@pytest.mark.parametrize(
    "cells", list(combinations(product(range(3), range(3)), 2))
)
def test_fewer_than_three_cells_never_win(cells: tuple[tuple[int, int], ...]) -> None:
    board = Board.empty()
    for row, col in cells:
        board.set_cell(row, col, Player.CROSSES)
    assert not has_winner(board, Player.CROSSES)
    assert not has_winner(board, Player.CIRCLES)


def test_mixed_line_does_not_win() -> None:
    board = Board.from_rows([["X", "X", "O"], ["", "", ""], ["", "", ""]])
    assert not has_winner(board, Player.CROSSES)
    assert not has_winner(board, Player.CIRCLES)


def test_no_winner_on_busy_board() -> None:
    board = Board.from_rows([["X", "", "O"], ["X", "O", "O"], ["", "", ""]])
    assert not has_winner(board, Player.CROSSES)
    assert not has_winner(board, Player.CIRCLES)


def test_winner_on_busy_board() -> None:
    board = Board.from_rows([["X", "X", "X"], ["", "", ""], ["O", "", ""]])
    assert has_winner(board, Player.CROSSES)
    assert not has_winner(board, Player.CIRCLES)


def test_predicate_does_not_enforce_legal_play() -> None:
    """Both players can 'win' on an unreachable board. It is a pure predicate."""
    board = Board.from_rows([["X", "X", "X"], ["O", "O", "O"], ["", "", ""]])
    assert has_winner(board, Player.CROSSES)
    assert has_winner(board, Player.CIRCLES)


def test_full_board_without_winner() -> None:
    board = Board.from_rows([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]])
    assert board.is_full()
    assert not has_winner(board, Player.CROSSES)
    assert not has_winner(board, Player.CIRCLES)
