"""Thread-safe view over a history.

Provides :class:`SynchronizedHistory`, a decorator that runs every call
on the wrapped history under one lock, and the
:func:`synchronized_history` factory.

Example:
    history = synchronized_history(BoundedHistory(50))
    history.add("first")

    # Compound operations need the lock held across both calls
    with history.lock:
        if history.can_undo():
            history.undo()
"""

from __future__ import annotations

import threading
from typing import Any, Iterable, Iterator, Optional, TypeVar

from .base import History

E = TypeVar("E")


class SynchronizedHistory(History[E]):
    """History view that serializes every call through a lock.

    Each call acquires the lock, delegates to the wrapped history and
    releases the lock on the way out, also when the wrapped history
    raises. A single call is atomic; a sequence of calls is not. Hold
    :attr:`lock` around the sequence when it has to be.

    Iteration is NOT locked. Getting an iterator and advancing it run
    without the lock, so a thread iterating a shared view must hold
    :attr:`lock` for the whole loop::

        with view.lock:
            for element in view:
                ...

    or take a snapshot with :meth:`to_list`, which is locked.

    Without a lock argument the view creates its own reentrant lock.
    A supplied lock is shared with whoever else holds it, which lets
    several views, possibly over different histories, exclude each
    other. It is used as a context manager only. A supplied lock must
    be reentrant if callers hold it while calling the view.
    """

    def __init__(self, history: History[E], lock: Optional[Any] = None):
        self._history = history
        self._lock = threading.RLock() if lock is None else lock

    @property
    def lock(self) -> Any:
        """The lock guarding the wrapped history."""
        return self._lock

    @property
    def capacity(self) -> int:
        with self._lock:
            return self._history.capacity

    def add(self, element: E) -> bool:
        with self._lock:
            return self._history.add(element)

    def can_undo(self) -> bool:
        with self._lock:
            return self._history.can_undo()

    def can_redo(self) -> bool:
        with self._lock:
            return self._history.can_redo()

    def get_current_element(self) -> E:
        with self._lock:
            return self._history.get_current_element()

    def get_current_element_index(self) -> int:
        with self._lock:
            return self._history.get_current_element_index()

    def undo(self) -> E:
        with self._lock:
            return self._history.undo()

    def redo(self) -> E:
        with self._lock:
            return self._history.redo()

    def clear(self) -> None:
        with self._lock:
            self._history.clear()

    def size(self) -> int:
        with self._lock:
            return self._history.size()

    def __len__(self) -> int:
        with self._lock:
            return len(self._history)

    def __contains__(self, element: object) -> bool:
        with self._lock:
            return element in self._history

    def is_empty(self) -> bool:
        with self._lock:
            return self._history.is_empty()

    def to_list(self) -> list[E]:
        with self._lock:
            return self._history.to_list()

    def extend(self, elements: Iterable[E]) -> bool:
        # Drain lazy sources before taking the lock
        elements = list(elements)
        with self._lock:
            return self._history.extend(elements)

    def __iter__(self) -> Iterator[E]:
        # Unlocked on purpose, see the class docstring
        return iter(self._history)

    def __repr__(self) -> str:
        with self._lock:
            return f"{type(self).__name__}({self._history!r})"


def synchronized_history(history: History[E], lock: Optional[Any] = None) -> SynchronizedHistory[E]:
    """Return a thread-safe view backed by *history*.

    All access to *history* must go through the returned view for the
    view to be safe. Iterating the view still needs the caller to hold
    ``view.lock``; see :class:`SynchronizedHistory`.

    Args:
        history: The history to wrap
        lock: Lock to share with other views. A private reentrant lock
            is created when omitted.

    Returns:
        A synchronized view of *history*
    """
    return SynchronizedHistory(history, lock)
