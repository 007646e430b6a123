"""Errors and warnings raised by the playground core."""


class PlaygroundError(Exception):
    """Base class for playground errors."""


class InvalidInputError(PlaygroundError, ValueError):
    """Raised when a control value or dataset request is out of contract."""


class DegenerateFitWarning(RuntimeWarning):
    """Issued when the least-squares line is undefined and a flat line is used."""
