"""Process records and the sortable, filterable collection that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True, eq=False)
class ProcessListItem:
    """A snapshot of one process. Items compare equal when their pids match."""

    pid: int = 0
    name: str = ""
    cpu_usage: float = 0.0
    memory_usage: int = 0
    start_time: int = 0
    run_time: int = 0
    accumulated_cpu_time: int = 0
    status: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcessListItem):
            return NotImplemented
        return self.pid == other.pid

    def __hash__(self) -> int:
        return hash(self.pid)


class ListSortOrder(enum.Enum):
    PID_INC = "pid_inc"
    PID_DEC = "pid_dec"
    NAME_INC = "name_inc"
    NAME_DEC = "name_dec"
    CPU_USAGE_INC = "cpu_usage_inc"
    CPU_USAGE_DEC = "cpu_usage_dec"
    MEMORY_USAGE_INC = "memory_usage_inc"
    MEMORY_USAGE_DEC = "memory_usage_dec"


DEFAULT_SORT_ORDER = ListSortOrder.CPU_USAGE_DEC

_SORT_KEYS = {
    ListSortOrder.PID_INC: (lambda item: item.pid, False),
    ListSortOrder.PID_DEC: (lambda item: item.pid, True),
    ListSortOrder.NAME_INC: (lambda item: item.name, False),
    ListSortOrder.NAME_DEC: (lambda item: item.name, True),
    ListSortOrder.CPU_USAGE_INC: (lambda item: item.cpu_usage, False),
    ListSortOrder.CPU_USAGE_DEC: (lambda item: item.cpu_usage, True),
    ListSortOrder.MEMORY_USAGE_INC: (lambda item: item.memory_usage, False),
    ListSortOrder.MEMORY_USAGE_DEC: (lambda item: item.memory_usage, True),
}


class ProcessListItems:
    """An ordered collection of process items."""

    def __init__(self, items: Optional[Iterable[ProcessListItem]] = None) -> None:
        self.items: list[ProcessListItem] = list(items) if items is not None else []

    def filter(self, filter_text: str) -> "ProcessListItems":
        """Items whose name or pid contains ``filter_text``."""
        return ProcessListItems(
            item
            for item in self.items
            if filter_text in item.name or filter_text in str(item.pid)
        )

    def update_items(self, new_list: Iterable[ProcessListItem]) -> None:
        self.items = list(new_list)

    def sort_items(self, sort: ListSortOrder) -> None:
        """Stable sort by the given order."""
        key, reverse = _SORT_KEYS[sort]
        self.items.sort(key=key, reverse=reverse)

    def get_item(self, idx: int) -> Optional[ProcessListItem]:
        if 0 <= idx < len(self.items):
            return self.items[idx]
        return None

    def index_of(self, pid: int) -> Optional[int]:
        """Position of the first item with ``pid``, or None."""
        return next((i for i, item in enumerate(self.items) if item.pid == pid), None)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ProcessListItem]:
        return iter(self.items)

    def iterate(self, start: int, max_amount: int) -> Iterator[tuple[int, ProcessListItem]]:
        """Yield ``(index, item)`` pairs beginning at ``start``.

        A non-zero ``max_amount`` yields up to one item more than asked for,
        so a view always has a row ready below its last visible line.
        """
        if start < 0 or max_amount < 0:
            raise ValueError("start and max_amount must not be negative")
        count = max_amount + 1 if max_amount > 0 else 0
        return islice(enumerate(self.items), start, start + count)