"""
Custom exceptions used across layers.

The rules predicates themselves never raise for an empty square or a piece of the wrong color (they simply return False / no moves).
Exceptions are reserved for contract violations (bad coordinates, malformed boards) and for session/service level errors.
"""


class ChessError(Exception):
    """Base class for every error raised by this package."""


# --- DOMAIN: BOARD / RULES ---
class InvalidCoordinateError(ChessError, ValueError):
    """A square outside of the board was passed in."""


class InvalidBoardError(ChessError, ValueError):
    """Grid is not 8x8, or a board diagram cannot be interpreted."""


class EmptySquareError(ChessError):
    """Tried to move a piece from a square that does not hold one."""


# --- DOMAIN: SESSION ---
class GameError(ChessError):
    """Errors raised while playing a session."""


class IllegalMoveError(GameError):
    """Destination is not among the possible moves of the piece."""


class NotYourTurnError(GameError):
    """The piece that should move does not belong to the player whose turn it is."""


# --- BOUNDARY / SERVICE ---
class InvalidRequestError(ChessError):
    """Raised by request model validation. (Not a ValueError: pydantic lets it propagate as is)"""


class SessionNotFoundError(ChessError):
    """No session stored under the requested id."""
