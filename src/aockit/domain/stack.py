"""Stack — a list-backed collection with access at both ends.

INVARIANT: A Stack is a reference type. ``push``, ``pop``, ``unshift``
and ``shift`` mutate the instance itself, so every holder of the same
Stack observes the change.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from aockit.domain.errors import EmptyCollection
from aockit.domain.sequence import delete, insert


class Stack[T]:
    """Tail operations (push/pop) give LIFO order; head operations
    (unshift/shift) give the same from the other end.

    The constructor copies *items*, so the stack never shares storage
    with the caller's sequence.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def _require_items(self, op: str) -> None:
        if not self._items:
            msg = f"Cannot {op} from an empty stack"
            raise EmptyCollection(msg)

    def push(self, element: T) -> None:
        """Append *element* to the tail."""
        insert(self._items, element, len(self._items))

    def pop(self) -> T:
        """Remove and return the tail element."""
        self._require_items("pop")
        element = self._items[-1]
        delete(self._items, len(self._items) - 1)
        return element

    def unshift(self, element: T) -> None:
        """Prepend *element* to the head."""
        insert(self._items, element, 0)

    def shift(self) -> T:
        """Remove and return the head element."""
        self._require_items("shift")
        element = self._items[0]
        delete(self._items, 0)
        return element

    def peek(self) -> T:
        """Return the tail element without removing it."""
        self._require_items("peek")
        return self._items[-1]

    def peek_front(self) -> T:
        """Return the head element without removing it."""
        self._require_items("peek")
        return self._items[0]

    def to_list(self) -> list[T]:
        """Copy of the elements, head first."""
        return list(self._items)
