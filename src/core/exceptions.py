"""Custom exceptions. Every layer raises (a subclass of) GameError so callers can catch a single top-level type."""


class GameError(Exception):
    """Base class for everything that can go wrong while playing a game."""


class GameStateError(GameError):
    """The game is not in a state that accepts the requested event."""


class NoSlotAvailableError(GameStateError):
    """Both player slots are already taken."""


class IllegalMoveError(GameError):
    """Coordinates out of range or the cell is already occupied."""


class NotYourTurnError(GameError):
    """A participant attempted to move while it is the opponent's turn."""


class InvalidRequestError(GameError):
    """Request did not pass validation at the API boundary."""


class RepositoryError(GameError):
    """Game record could not be found (or stored)."""
