"""The History interface shared by every history implementation."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Collection
from typing import Generic, Iterable, Iterator, TypeVar

E = TypeVar("E")


class History(Collection, Generic[E]):
    """A linear undo/redo history of elements.

    A history keeps a *current element* and lets the caller step back
    (undo) and forward (redo) through the elements that were added.
    Iteration walks the whole timeline, oldest first, with the current
    element at index ``get_current_element_index()``.

    Subclasses implement the abstract operations below; the collection
    conveniences at the bottom are derived from them.
    """

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Maximum number of elements kept."""

    @abstractmethod
    def add(self, element: E) -> bool:
        """Make *element* the current element, discarding any redo targets.

        Returns:
            True once the element has been added
        """

    @abstractmethod
    def can_undo(self) -> bool:
        """Return True if the current element is not the oldest one."""

    @abstractmethod
    def can_redo(self) -> bool:
        """Return True if the current element is not the newest one."""

    @abstractmethod
    def get_current_element(self) -> E:
        """Return the current element.

        Raises:
            EmptyHistoryError: If there is no current element
        """

    @abstractmethod
    def get_current_element_index(self) -> int:
        """Return the position of the current element in iteration order.

        Returns -1 when there is no current element.
        """

    @abstractmethod
    def undo(self) -> E:
        """Step one element back and return the new current element.

        Raises:
            HistoryStateError: If the current element is the oldest one
        """

    @abstractmethod
    def redo(self) -> E:
        """Step one element forward and return the new current element.

        Raises:
            HistoryStateError: If the current element is the newest one
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove every element."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements, undone ones included."""

    @abstractmethod
    def __iter__(self) -> Iterator[E]:
        pass

    # Collection conveniences

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: object) -> bool:
        return any(item is element or item == element for item in self)

    def is_empty(self) -> bool:
        return self.size() == 0

    def to_list(self) -> list[E]:
        """Return the elements in iteration order as a new list."""
        return list(self)

    def extend(self, elements: Iterable[E]) -> bool:
        """Add each of *elements* in order.

        Returns:
            True if at least one element was added
        """
        added = False
        for element in elements:
            added = self.add(element) or added
        return added
