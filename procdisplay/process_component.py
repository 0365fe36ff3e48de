"""The process list panel: a navigable list with a filter box."""

from __future__ import annotations

import enum
from typing import Iterable, Optional

from procdisplay.component import (
    Component,
    DrawableComponent,
    EventState,
    Rect,
    common_nav,
    common_sort,
)
from procdisplay.config import Config, KeyCode
from procdisplay.filter import FilterComponent
from procdisplay.process_items import ProcessListItem, ProcessListItems
from procdisplay.process_list import ProcessList
from procdisplay.process_list_ui import draw_process_list
from procdisplay.vertical_scroll import VerticalScroll

_FILTER_HEIGHT = 3
_TABLE_CHROME = 3


class Focus(enum.Enum):
    FILTER = "filter"
    LIST = "list"


class ProcessComponent(Component, DrawableComponent):
    """Shows the processes, optionally narrowed down by a filter."""

    def __init__(self, config: Optional[Config], processes: Iterable[ProcessListItem]) -> None:
        self.config = config if config is not None else Config()
        self._focus = Focus.LIST
        self._list = ProcessList(processes)
        self._filter = FilterComponent(self.config)
        self._filtered_list: Optional[ProcessList] = None
        self._scroll = VerticalScroll()

    def update(self, new_processes: Iterable[ProcessListItem]) -> bool:
        """Replace the processes in the list and in any filtered view."""
        processes = list(new_processes)
        if not processes:
            raise ValueError("process update must not be empty")
        self._list.update(processes)
        if self._filtered_list is not None:
            filtered = ProcessListItems(processes).filter(self._filter.input_str)
            self._filtered_list.update(filtered.items)
        return True

    def selected_pid(self) -> Optional[int]:
        """Pid of the selected process while the list has focus."""
        if self._focus is not Focus.LIST:
            return None
        return self.active_list.selected_pid()

    @property
    def focus(self) -> Focus:
        return self._focus

    @property
    def active_list(self) -> ProcessList:
        """The filtered list when there is one, otherwise the full list."""
        return self._filtered_list if self._filtered_list is not None else self._list

    def event(self, key: KeyCode) -> EventState:
        keys = self.config.key_config
        if key == keys.filter and self._focus is Focus.LIST:
            self._focus = Focus.FILTER
            return EventState.CONSUMED

        if self._focus is Focus.FILTER:
            text = self._filter.input_str
            self._filtered_list = self._list.filter(text) if text else None
            if self._filter.event(key).is_consumed():
                return EventState.CONSUMED
            if key == keys.enter:
                self._focus = Focus.LIST
                return EventState.CONSUMED

        if self._focus is Focus.LIST:
            target = self.active_list
            move = common_nav(key, keys)
            if move is not None:
                target.move_selection(move)
                return EventState.CONSUMED
            if key == keys.follow_selection:
                target.toggle_follow_selection()
                return EventState.CONSUMED
            order = common_sort(key, keys)
            if order is not None:
                target.sort(order)
                return EventState.CONSUMED

        return EventState.NOT_CONSUMED

    def draw(self, screen, area: Rect, focused: bool) -> None:
        list_area, filter_area = area.split_vertical(None, _FILTER_HEIGHT)
        visible_height = max(list_area.height - _TABLE_CHROME, 0)

        shown = self.active_list
        if shown.selection is None:
            self._scroll.reset()
        else:
            self._scroll.update(shown.selection, len(shown), visible_height)

        list_focused = focused and self._focus is Focus.LIST
        draw_process_list(
            screen,
            list_area,
            shown.iterate(self._scroll.top, visible_height),
            shown.follow_selection,
            list_focused,
            self.config.theme_config,
        )
        self._scroll.draw(screen, list_area, list_focused)
        self._filter.draw(screen, filter_area, focused and self._focus is Focus.FILTER)