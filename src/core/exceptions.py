"""Exceptions shared across layers"""


class GameError(Exception):
    """Base class for everything the game engine raises on purpose."""


class InvalidMoveError(GameError):
    """The requested target is not among the valid destinations of the marker. Recoverable: ask for another move."""


class BoardConstructionError(GameError):
    """A tile table does not fill the grid. Programmer error, never retried."""


class InvalidRequestError(GameError):
    """Input coming from a presentation layer could not be interpreted."""
