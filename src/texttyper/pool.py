"""Reusable item buffers.

A PoolableList hands out items from a free queue before constructing new
ones, so rebuilding a timeline for every line of dialogue does not
allocate a fresh object per character once the pool is warm.

Thread Safety:
Not thread-safe. Each pool is owned by a single scheduler.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar, overload

T = TypeVar("T")


class PoolableList(Generic[T]):
    """A list of live items backed by a pool of returned ones.

    Usage:
        >>> pool = PoolableList(list)
        >>> item = pool.get_item()
        >>> len(pool), pool.pooled_count
        (1, 0)
        >>> pool.return_all()
        >>> len(pool), pool.pooled_count
        (0, 1)
        >>> pool.get_item() is item
        True

    """

    __slots__ = ("_factory", "_items", "_on_return", "_pool")

    def __init__(
        self,
        factory: Callable[[], T],
        on_return: Callable[[T], None] | None = None,
    ) -> None:
        """Initialize an empty pool.

        Args:
            factory: Builds a new item when the pool is empty
            on_return: Called on each live item as it goes back to the pool
        """
        self._factory = factory
        self._on_return = on_return
        self._items: list[T] = []
        self._pool: deque[T] = deque()

    def get_item(self) -> T:
        """Take a pooled item (or build one) and append it to the live list."""
        item = self._pool.popleft() if self._pool else self._factory()
        self._items.append(item)
        return item

    def return_all(self) -> None:
        """Move every live item back to the pool."""
        on_return = self._on_return
        for item in self._items:
            if on_return is not None:
                on_return(item)
            self._pool.append(item)
        self._items.clear()

    @property
    def pooled_count(self) -> int:
        """Number of idle items waiting for reuse."""
        return len(self._pool)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]


__all__ = ["PoolableList"]
