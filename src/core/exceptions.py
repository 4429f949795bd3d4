"""
Custom exceptions shared by all layers.

Domain errors derive from GameError, so a caller can catch everything the engine raises in one place.
"""


class GameError(Exception):
    """Base class for anything the corridor engine raises on purpose."""


class ParseError(GameError, ValueError):
    """A square, wall or history label does not follow the notation."""


class CorruptHistoryError(GameError):
    """
    Replaying the history broke an invariant (pawn off the board, both pawns on one square).

    The engine did not produce such a history, so it refuses to repair it.
    """


class IllegalMoveError(GameError):
    """Raised by the service layer when asked to play a move that is not in the legal set."""


class InvalidRequestError(GameError):
    """
    Request model validation failed.

    NOTE: deliberately not a ValueError. pydantic wraps ValueErrors into its own ValidationError,
    other exceptions propagate as they are.
    """
