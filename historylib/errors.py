"""Exceptions raised by histories.

Every error derives from :class:`HistoryError` and from the builtin
exception a caller would already expect for the same situation, so
``except ValueError`` keeps working for a bad capacity.
"""


class HistoryError(Exception):
    """Base class for all history errors."""


class InvalidCapacityError(HistoryError, ValueError):
    """Raised when a history is constructed with a capacity below 1."""


class HistoryStateError(HistoryError, RuntimeError):
    """Raised by undo() or redo() when the move is not possible.

    The history is left exactly as it was.
    """


class EmptyHistoryError(HistoryError, LookupError):
    """Raised when the current element is requested but there is none."""


class ConcurrentModificationError(HistoryError, RuntimeError):
    """Raised by an iterator whose history was modified while it was live."""
