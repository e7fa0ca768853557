"""Exceptions raised by the tournament services."""


class TournamentError(Exception):
    """Base exception for all tournament errors.

    The HTTP layer maps each subclass to a status code; anything else
    calling the services can catch this one to handle them all.
    """

    pass


class InvalidArgument(TournamentError):
    """Raised when an argument is out of range (group count, scores, names)."""

    pass


class NotFound(TournamentError):
    """Raised when a player, group or match id does not exist."""

    pass


class StorageUnavailable(TournamentError):
    """Raised when the database cannot be reached. Never retried."""

    pass
