"""Table rendering of the visible part of a process list."""

from __future__ import annotations

import math
from typing import Iterable

from procdisplay.component import Rect, _draw_block, _put
from procdisplay.config import Color, Modifier, Style, ThemeConfig
from procdisplay.process_items import ProcessListItem

HEADER = ("", "Pid", "Name", "CPU (%)", "Memory (B)", "Runtime (s)", "Status")
COLUMN_WIDTHS = (2, 10, 50, 20, 20, 20, 20)
_COLUMN_SPACING = 1
_TITLE = " Process List "
_SELECTION_MARK = "->"


def _format_float(value: float) -> str:
    """Shortest decimal form, without a trailing ``.0`` for whole numbers."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def row_cells(item: ProcessListItem, selected: bool) -> list[str]:
    """The table cells for ``item``; ``selected`` puts the selection mark first."""
    return [
        _SELECTION_MARK if selected else "",
        str(item.pid),
        item.name,
        _format_float(float(item.cpu_usage)),
        str(item.memory_usage),
        str(item.run_time),
        item.status,
    ]


def _format_row(cells: Iterable[str]) -> str:
    separator = " " * _COLUMN_SPACING
    return separator.join(
        cell[:width].ljust(width) for cell, width in zip(cells, COLUMN_WIDTHS)
    )


def draw_process_list(
    screen,
    area: Rect,
    visible_items: Iterable[tuple[ProcessListItem, bool]],
    follow_selection: bool,
    focus: bool,
    theme_config: ThemeConfig,
) -> None:
    """Draw a bordered table of ``(item, is_selected)`` rows into ``area``."""
    frame_style = (
        theme_config.component_in_focus if focus else theme_config.component_out_of_focus
    )
    _draw_block(screen, area, frame_style, _TITLE)
    inner = area.inner(1, 1)
    if inner.height == 0:
        return

    _put(screen, inner, inner.x, inner.y, _format_row(HEADER), frame_style)

    selected_style = Style().bg(Color.BLUE).add_modifier(Modifier.BOLD)
    for row, (item, selected) in enumerate(visible_items, start=1):
        if focus and selected and follow_selection:
            style = selected_style.add_modifier(Modifier.UNDERLINED)
        elif focus and selected:
            style = selected_style
        elif focus:
            style = theme_config.item_style
        else:
            style = theme_config.component_out_of_focus
        marked = style in (theme_config.item_select, theme_config.item_select_follow)
        _put(screen, inner, inner.x, inner.y + row, _format_row(row_cells(item, marked)), style)