"""
Type definitions used across layers
"""

from enum import IntEnum, StrEnum


class State(StrEnum):
    WAITING = "waiting"
    PLAYING = "playing"
    ENDED = "ended"


# --- Player values double as turn parity: (turn + starting_player) % 2 gives the mover directly.
class Player(IntEnum):
    CROSSES = 0
    CIRCLES = 1

    @property
    def opponent(self) -> "Player":
        return Player.CIRCLES if self == Player.CROSSES else Player.CROSSES

    @property
    def symbol(self) -> str:
        return "X" if self == Player.CROSSES else "O"


AVAILABLE_PLAYER_NAMES = [player.name for player in Player]
