"""Exceptions raised by the whist game model."""


class WhistError(Exception):
    """Base class for every error raised by the game model."""


class IllegalValueError(WhistError, ValueError):
    """An argument lies outside the range the game allows."""


class DuplicateError(WhistError):
    """The same object was added twice to a collection."""


class DuplicateNameError(DuplicateError):
    """A player with the same name is already in the game."""


class FullError(WhistError):
    """A collection has no free place left."""


class NotFoundError(WhistError, LookupError):
    """The requested player or card is not where it was looked for."""


class InsufficientPlayersError(WhistError):
    """There are fewer players than the game needs."""


class InsufficientCardsError(WhistError):
    """The deck holds too few cards for the operation."""


class IllegalBidError(WhistError, ValueError):
    """A bid that the rules do not allow."""


class IncorrectNameError(WhistError, ValueError):
    """A player name that does not meet the naming rules."""