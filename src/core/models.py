"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerName = str  # "crosses" / "circles"
ParticipantId = str
CellSymbol = str  # "X", "O" or "" for an empty cell


@dataclass
class GameModel:
    """Transport-safe snapshot of a tic-tac-toe game used between API, Service, DB, and Game layers.

    NOTE: only the current snapshot is kept. There is no move history.
    """

    board: list[list[CellSymbol]]
    turn: int
    starting_player: PlayerName
    registered_players: dict[PlayerName, ParticipantId]
    status: str
    winner: Optional[PlayerName] = None
