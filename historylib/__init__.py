"""historylib - A bounded undo/redo history container."""

from .base import History
from .constants import HistoryConstants
from .errors import (
    ConcurrentModificationError,
    EmptyHistoryError,
    HistoryError,
    HistoryStateError,
    InvalidCapacityError,
)
from .history import BoundedHistory
from .synchronized import SynchronizedHistory, synchronized_history

__all__ = [
    'History',
    'BoundedHistory',
    'SynchronizedHistory',
    'synchronized_history',
    'HistoryConstants',
    'HistoryError',
    'InvalidCapacityError',
    'HistoryStateError',
    'EmptyHistoryError',
    'ConcurrentModificationError',
]
