"""A thin list wrapper supporting filtering, bulk replacement and sorting."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class DynamicList(Generic[T]):
    """An ordered collection whose contents can be replaced wholesale."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: list[T] = list(items) if items is not None else []

    def filter(self, predicate: Callable[[T], bool]) -> "DynamicList[T]":
        """A new list holding the items for which ``predicate`` is true."""
        return DynamicList(item for item in self._items if predicate(item))

    def replace_all(self, items: Iterable[T]) -> None:
        self._items = list(items)

    def sort(self, key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> None:
        """Stable in-place sort."""
        self._items.sort(key=key, reverse=reverse)

    def get(self, index: int) -> Optional[T]:
        """The item at ``index``, or None when out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def as_list(self) -> list[T]:
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DynamicList({self._items!r})"