"""Bounded undo/redo history."""

from __future__ import annotations

import logging
import operator
from collections import deque
from itertools import chain
from typing import Iterator, TypeVar

from .base import History
from .constants import HistoryConstants
from .errors import (
    ConcurrentModificationError,
    EmptyHistoryError,
    HistoryStateError,
    InvalidCapacityError,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")


class BoundedHistory(History[E]):
    """History that keeps at most ``capacity`` elements.

    Elements live on two stacks. ``_past`` runs oldest to newest and
    ends with the current element. ``_future`` holds undone elements;
    its last entry is the next redo target. When an add pushes the
    total over capacity, the oldest past entries are dropped.

    Any object is accepted as an element, None included. Elements are
    never compared with each other; undo, redo and eviction work purely
    on position.

    This class is not thread safe. Wrap it with
    :func:`historylib.synchronized_history` when several threads share it.
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool):
            raise TypeError(HistoryConstants.CAPACITY_TYPE_MESSAGE.format(type(capacity).__name__))
        # Accepts any integral type (numpy ints included), rejects floats and strings
        capacity = operator.index(capacity)
        if capacity < HistoryConstants.MIN_CAPACITY:
            raise InvalidCapacityError(HistoryConstants.INVALID_CAPACITY_MESSAGE)
        self._capacity = capacity
        self._past: deque[E] = deque()
        self._future: list[E] = []
        # Bumped on every structural change so live iterators can fail fast
        self._modifications = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return len(self._past) + len(self._future)

    def add(self, element: E) -> bool:
        self._past.append(element)
        # Any new element invalidates redo history
        self._future.clear()
        evicted = 0
        while self.size() > self._capacity:
            self._past.popleft()
            evicted += 1
        self._modifications += 1
        if evicted:
            logger.debug(f"Evicted {evicted} oldest entries (capacity {self._capacity})")
        return True

    def can_undo(self) -> bool:
        # The last past entry is the current element and must stay
        return len(self._past) >= 2

    def can_redo(self) -> bool:
        return len(self._future) >= 1

    def get_current_element(self) -> E:
        if not self._past:
            raise EmptyHistoryError(HistoryConstants.EMPTY_HISTORY_MESSAGE)
        return self._past[-1]

    def get_current_element_index(self) -> int:
        return len(self._past) - 1

    def undo(self) -> E:
        if not self.can_undo():
            raise HistoryStateError(HistoryConstants.CANNOT_UNDO_MESSAGE)
        self._future.append(self._past.pop())
        self._modifications += 1
        return self._past[-1]

    def redo(self) -> E:
        if not self.can_redo():
            raise HistoryStateError(HistoryConstants.CANNOT_REDO_MESSAGE)
        element = self._future.pop()
        self._past.append(element)
        self._modifications += 1
        return element

    def clear(self) -> None:
        discarded = self.size()
        self._past.clear()
        self._future.clear()
        self._modifications += 1
        logger.debug(f"Cleared history ({discarded} entries discarded)")

    def __iter__(self) -> Iterator[E]:
        """Iterate past entries oldest first, then future entries as stored.

        Future entries come oldest undone first, so the next redo target
        is yielded last. Modifying the history while
        an iterator is live makes that iterator raise
        ConcurrentModificationError on its next step.
        """
        return self._iterate(self._modifications)

    def _iterate(self, expected: int) -> Iterator[E]:
        if self._modifications != expected:
            raise ConcurrentModificationError(HistoryConstants.CONCURRENT_MODIFICATION_MESSAGE)
        for element in chain(self._past, self._future):
            yield element
            if self._modifications != expected:
                raise ConcurrentModificationError(
                    HistoryConstants.CONCURRENT_MODIFICATION_MESSAGE
                )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"past={list(self._past)!r}, future={self._future!r})"
        )
