"""Exceptions raised at the package boundary."""


class RifeError(Exception):
    """Base class for game_of_rife errors."""


class InvalidInputError(RifeError, ValueError):
    """Malformed external input, such as an odd-length coordinate array.

    Subclasses ValueError so callers validating arguments the usual way
    still catch it.
    """
