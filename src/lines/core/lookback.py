"""Fixed-capacity lookback buffer.

Remembers the previous N items of a stream so that each new item can be
exchanged for the one inserted exactly N insertions ago. Used for "all but the
last N lines" and "only the last N lines" without knowing how long the input
is.
"""

from typing import Generic, List, Optional, Tuple, TypeVar

from .errors import InvalidCapacity

T = TypeVar("T")


class LookbackBuffer(Generic[T]):
    """Circular buffer returning the Nth previous item on every insertion.

    A capacity of 0 is valid: every inserted item comes straight back as valid,
    so callers never need a separate "no lookback" branch.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise InvalidCapacity(capacity)
        self._capacity = capacity
        self._items: List[Optional[T]] = [None] * capacity
        self._index = 0
        self._looped = False

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._capacity if self._looped else self._index

    def __repr__(self) -> str:
        return f"LookbackBuffer(capacity={self._capacity}, held={len(self)})"

    def insert_and_evict(self, item: T) -> Tuple[Optional[T], bool]:
        """Store item and return the item from ``capacity`` insertions ago.

        Returns:
            ``(evicted, valid)``. ``valid`` is False until more than
            ``capacity`` items have been inserted, in which case ``evicted``
            is an unfilled slot and must be ignored.
        """
        if self._capacity == 0:
            return item, True

        evicted = self._items[self._index]
        self._items[self._index] = item
        valid = self._looped

        self._index += 1
        if self._index == self._capacity:
            self._index = 0
            self._looped = True

        return evicted, valid

    def drain(self) -> List[T]:
        """Return the held items, oldest first.

        Not meant to be interleaved with further insertions.
        """
        if self._looped:
            return self._items[self._index :] + self._items[: self._index]  # type: ignore[return-value]
        return self._items[: self._index]  # type: ignore[return-value]


__all__ = ["LookbackBuffer"]
