"""The Game board: a fixed 3x3 grid where every cell is either empty or owned by exactly one player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError, IllegalMoveError
from src.core.shared_types import Player

# Tic-tac-toe is always played on 3x3
BOARD_DIMENSIONS = (3, 3)

Cell = Optional[Player]

SYMBOL_TO_PLAYER: dict[str, Player] = {player.symbol: player for player in Player}


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )


@dataclass
class Board:
    cells: list[list[Cell]]

    @classmethod
    def empty(cls) -> Self:
        return cls([[None] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])])

    @classmethod
    def from_rows(cls, rows: list[list[str]]) -> Self:
        """Rebuild a board from its boundary representation ("X", "O" or "" per cell)."""
        if len(rows) != BOARD_DIMENSIONS[0] or any(
            len(row) != BOARD_DIMENSIONS[1] for row in rows
        ):
            raise GameStateError(
                f"Stored board must be {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]}, got {rows!r}"
            )
        try:
            cells = [
                [SYMBOL_TO_PLAYER[symbol] if symbol else None for symbol in row]
                for row in rows
            ]
        except KeyError as err:
            raise GameStateError(f"Unknown cell symbol in stored board: {err.args[0]!r}") from err
        return cls(cells)

    def to_rows(self) -> list[list[str]]:
        return [[cell.symbol if cell is not None else "" for cell in row] for row in self.cells]

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        return self.cell(row, col) is not None

    def set_cell(self, row: int, col: int, player: Player) -> None:
        """
        Assign the cell to the player (in place).
        ---

        Cells are never cleared or overwritten: out-of-range coordinates and occupied cells raise IllegalMoveError.
        """
        if not Position(row, col).is_within_bounds():
            raise IllegalMoveError(f"Cell ({row}, {col}) is not on the board.")
        if self.is_occupied(row, col):
            raise IllegalMoveError(
                f"Cell ({row}, {col}) is already taken by {self.cell(row, col).name.lower()}."
            )
        self.cells[row][col] = player

    def empty_positions(self) -> list[Position]:
        return [
            Position(row, col)
            for row in range(BOARD_DIMENSIONS[0])
            for col in range(BOARD_DIMENSIONS[1])
            if self.cells[row][col] is None
        ]

    def is_full(self) -> bool:
        return not self.empty_positions()
