"""Scroll position tracking for a list view, and its scrollbar."""

from __future__ import annotations

from procdisplay.component import DrawableComponent, Rect, _put
from procdisplay.config import Color, Style

_BEGIN_SYMBOL = "↑"
_END_SYMBOL = "↓"
_TRACK_SYMBOL = "║"
_THUMB_SYMBOL = "█"


def calc_scroll_top(current_top: int, visual_height: int, selection: int) -> int:
    """The first visible row that keeps ``selection`` comfortably in view."""
    if visual_height == 0:
        return 0
    padding = visual_height // 2
    min_top = max(selection - padding, 0)
    if selection < current_top + padding:
        return min_top
    if selection >= current_top + visual_height - padding:
        return min_top
    return current_top


class VerticalScroll(DrawableComponent):
    """Remembers the top row of a scrolled list and draws a scrollbar for it."""

    def __init__(self) -> None:
        self._top = 0
        self._count = 0

    @property
    def top(self) -> int:
        return self._top

    @property
    def count(self) -> int:
        return self._count

    def reset(self) -> None:
        self._top = 0

    def update(self, selection: int, selection_len: int, visual_height: int) -> int:
        """Recompute the top row for ``selection`` and return it."""
        self._top = calc_scroll_top(self._top, visual_height, selection)
        self._count = selection_len
        return self._top

    def draw(self, screen, area: Rect, focused: bool) -> None:
        track_area = area.inner(1, 0)
        if self._count == 0 or track_area.width == 0 or track_area.height < 2:
            return
        style = Style().fg(Color.LIGHT_GREEN if focused else Color.DARK_GRAY)
        column = track_area.x + track_area.width - 1
        first_row = track_area.y
        last_row = track_area.y + track_area.height - 1
        _put(screen, track_area, column, first_row, _BEGIN_SYMBOL, style)
        _put(screen, track_area, column, last_row, _END_SYMBOL, style)

        track_len = track_area.height - 2
        if track_len == 0:
            return
        thumb_len = max(1, min(track_len, track_len * track_len // self._count))
        position = min(self._top, self._count - 1)
        thumb_start = position * (track_len - thumb_len) // max(self._count - 1, 1)
        for offset in range(track_len):
            in_thumb = thumb_start <= offset < thumb_start + thumb_len
            symbol = _THUMB_SYMBOL if in_thumb else _TRACK_SYMBOL
            _put(screen, track_area, column, first_row + 1 + offset, symbol, style)