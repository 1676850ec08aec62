"""
Events accepted by the game's state machine.

External: PlayerJoin, PlayerLeave, Move, Winner.
Internal (raised by the machine itself after a move): CheckWinner, CheckDraw.
"""

from dataclasses import dataclass

from src.core.shared_types import Player


@dataclass(frozen=True)
class PlayerJoin:
    participant_id: str


@dataclass(frozen=True)
class PlayerLeave:
    player: Player


@dataclass(frozen=True)
class Move:
    row: int
    col: int


@dataclass(frozen=True)
class Winner:
    """Out of band win. Trusted at face value: the caller already verified it."""

    player: Player


@dataclass(frozen=True)
class CheckWinner:
    player: Player


@dataclass(frozen=True)
class CheckDraw:
    pass


Event = PlayerJoin | PlayerLeave | Move | Winner | CheckWinner | CheckDraw
