"""Exception classes for conslist."""


class ConsListError(Exception):
    """Base exception for all conslist errors."""


class ListIndexError(ConsListError, IndexError):
    """Raised when subscripting a list with an index outside 0..len-1."""
