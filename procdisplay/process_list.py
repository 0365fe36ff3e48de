"""A process list with a selection cursor, sorting and filtering."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Optional

from procdisplay.process_items import (
    DEFAULT_SORT_ORDER,
    ListSortOrder,
    ProcessListItem,
    ProcessListItems,
)

_PAGE_STEP = 10


class MoveSelection(enum.Enum):
    UP = "up"
    DOWN = "down"
    MULTIPLE_UP = "multiple_up"
    MULTIPLE_DOWN = "multiple_down"
    TOP = "top"
    END = "end"


class ProcessList:
    """Process items plus the selected row, sort order and follow mode.

    Without items the list is empty and has no selection. A list built from
    items must be given at least one, and starts with the first selected.
    """

    def __init__(self, items: Optional[Iterable[ProcessListItem]] = None) -> None:
        self._sort = DEFAULT_SORT_ORDER
        self._follow_selection = False
        if items is None:
            self._items = ProcessListItems()
            self.selection: Optional[int] = None
            return
        self._items = ProcessListItems(items)
        if not self._items:
            raise ValueError("a process list needs at least one item")
        self.selection = 0

    @classmethod
    def _from_items(cls, items: ProcessListItems) -> "ProcessList":
        instance = cls()
        instance._items = items
        instance.selection = 0 if items else None
        return instance

    def filter(self, filter_text: str) -> "ProcessList":
        """A new list of the items whose name or pid contains ``filter_text``."""
        return self._from_items(self._items.filter(filter_text))

    def _pid_at_cursor(self) -> Optional[int]:
        item = self._items.get_item(self.selection if self.selection is not None else 0)
        return item.pid if item is not None else None

    def update(self, new_list: Iterable[ProcessListItem]) -> None:
        """Replace the items, keeping the sort order and a valid selection."""
        pid = self._pid_at_cursor()

        self._items.update_items(new_list)
        self._items.sort_items(self._sort)

        if not self._items:
            self.selection = None
            return

        if self._follow_selection:
            self.selection = self._items.index_of(pid) if pid is not None else None
        elif self.selection is not None:
            self.selection = min(self.selection, self._max_index())

        if self.selection is None:
            self.selection = 0

    def sort(self, sort: ListSortOrder) -> None:
        """Sort the items; in follow mode the selection stays on the same process."""
        pid = self._pid_at_cursor()
        self._items.sort_items(sort)
        self._sort = sort
        if self._follow_selection:
            self.selection = self._items.index_of(pid) if pid is not None else None

    def _max_index(self) -> int:
        return max(len(self._items) - 1, 0)

    def _down(self, current: int, lines: int) -> int:
        max_idx = self._max_index()
        if current >= max_idx:
            return current
        return min(current + lines, max_idx)

    @staticmethod
    def _up(current: int, lines: int) -> int:
        return max(current - lines, 0)

    def move_selection(self, direction: MoveSelection) -> None:
        """Move the cursor; does nothing when nothing is selected."""
        current = self.selection
        if current is None:
            return
        if direction is MoveSelection.DOWN:
            self.selection = self._down(current, 1)
        elif direction is MoveSelection.MULTIPLE_DOWN:
            self.selection = self._down(current, _PAGE_STEP)
        elif direction is MoveSelection.UP:
            self.selection = self._up(current, 1)
        elif direction is MoveSelection.MULTIPLE_UP:
            self.selection = self._up(current, _PAGE_STEP)
        elif direction is MoveSelection.END:
            self.selection = self._max_index()
        elif direction is MoveSelection.TOP:
            self.selection = 0

    def toggle_follow_selection(self) -> None:
        self._follow_selection = not self._follow_selection

    def is_empty(self) -> bool:
        return not self._items

    @property
    def follow_selection(self) -> bool:
        return self._follow_selection

    @property
    def sort_order(self) -> ListSortOrder:
        return self._sort

    def __len__(self) -> int:
        return len(self._items)

    def selected_item(self) -> Optional[ProcessListItem]:
        if self.selection is None:
            return None
        return self._items.get_item(self.selection)

    def selected_pid(self) -> Optional[int]:
        item = self.selected_item()
        return item.pid if item is not None else None

    def iterate(self, start_index: int, max_amount: int) -> Iterator[tuple[ProcessListItem, bool]]:
        """Yield ``(item, is_selected)`` pairs for a window of the list."""
        selection = self.selection
        window = self._items.iterate(start_index, max_amount)
        return ((item, index == selection) for index, item in window)