"""CPU usage history chart with a selectable list of CPUs."""

from __future__ import annotations

from typing import Iterable, Optional

from procdisplay.bounded_queue import BoundedQueue, CpuItem
from procdisplay.color_wheel import ColorWheel
from procdisplay.component import (
    Component,
    DrawableComponent,
    EventState,
    Rect,
    _draw_block,
    _put,
)
from procdisplay.config import Color, Config, KeyCode, Modifier, Style

_CHART_TITLE = " CPU % "
_ALL_LABEL = "All"
_POINT_SYMBOL = "•"
_Y_LABELS = ("100", "50", "0")
_Y_LABEL_WIDTH = 4
_Y_MAX = 100.0


class CPUComponent(Component, DrawableComponent):
    """Keeps a bounded usage history per CPU and charts it.

    The list beside the chart starts with "All", followed by the global
    usage (id 0) and then every CPU, so list row ``n`` shows id ``n - 1``.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self._cpus: dict[int, BoundedQueue[CpuItem]] = {}
        self._ui_selection = 0

    def update(self, cpus: Iterable[CpuItem]) -> None:
        """Append each sample to the history of its CPU."""
        for cpu in cpus:
            queue = self._cpus.get(cpu.id)
            if queue is None:
                queue = BoundedQueue(self.config.events_per_min)
                self._cpus[cpu.id] = queue
            queue.add_item(cpu)

    @property
    def ui_selection(self) -> int:
        return self._ui_selection

    @property
    def queues(self) -> dict[int, BoundedQueue[CpuItem]]:
        """The usage histories, ordered by CPU id."""
        return dict(sorted(self._cpus.items()))

    def _max_x(self) -> int:
        queue = self._cpus.get(0)
        return max(queue.capacity() - 1, 0) if queue is not None else 0

    def series(self) -> list[tuple[int, list[tuple[float, float]]]]:
        """Chart data for the current selection: ``(cpu id, [(x, usage), ...])``.

        The newest sample sits at the right edge of the chart.
        """
        max_x = self._max_x()

        def points(queue: BoundedQueue[CpuItem]) -> list[tuple[float, float]]:
            return [
                (float(max_x - offset), float(item.usage))
                for offset, item in enumerate(reversed(queue))
            ]

        if self._ui_selection == 0:
            return [(cpu_id, points(queue)) for cpu_id, queue in self.queues.items()]
        cpu_id = self._ui_selection - 1
        queue = self._cpus.get(cpu_id)
        return [(cpu_id, points(queue))] if queue is not None else []

    def labels(self) -> list[tuple[str, Optional[Color]]]:
        """The rows of the CPU list with their colours."""
        rows: list[tuple[str, Optional[Color]]] = [(_ALL_LABEL, None)]
        for cpu_id in sorted(self._cpus):
            title = "Global" if cpu_id == 0 else f"CPU {cpu_id - 1}"
            rows.append((title, ColorWheel.from_index(cpu_id).color))
        return rows

    def event(self, key: KeyCode) -> EventState:
        keys = self.config.key_config
        if key == keys.move_down:
            if self._ui_selection < len(self._cpus):
                self._ui_selection += 1
            return EventState.CONSUMED
        if key == keys.move_up:
            self._ui_selection = max(self._ui_selection - 1, 0)
            return EventState.CONSUMED
        return EventState.NOT_CONSUMED

    def draw(self, screen, area: Rect, focused: bool) -> None:
        chart_area, list_area = area.split_horizontal(0.9, None)
        border = Style().fg(Color.LIGHT_GREEN if focused else Color.DARK_GRAY)
        self._draw_chart(screen, chart_area, border)
        self._draw_list(screen, list_area, border)

    def _draw_chart(self, screen, area: Rect, border: Style) -> None:
        _draw_block(screen, area, border, _CHART_TITLE)
        inner = area.inner(1, 1)
        if inner.width <= _Y_LABEL_WIDTH or inner.height < 2:
            return

        plot = Rect(
            inner.x + _Y_LABEL_WIDTH,
            inner.y,
            inner.width - _Y_LABEL_WIDTH,
            inner.height - 1,
        )
        label_rows = (plot.y, plot.y + (plot.height - 1) // 2, plot.y + plot.height - 1)
        for label, row in zip(_Y_LABELS, label_rows):
            _put(screen, inner, inner.x + _Y_LABEL_WIDTH - 1 - len(label), row, label, border)

        axis_row = inner.y + inner.height - 1
        _put(screen, inner, plot.x, axis_row, f"-{self.config.min_as_s}s", border)
        now = "now"
        _put(screen, inner, plot.x + max(plot.width - len(now), 0), axis_row, now, border)

        x_max = max(self.config.events_per_min - 1, 0)
        for cpu_id, points in self.series():
            style = Style().fg(ColorWheel.from_index(cpu_id).color)
            for x, y in points:
                column = plot.x + (round(x * (plot.width - 1) / x_max) if x_max else 0)
                level = min(max(y, 0.0), _Y_MAX)
                row = plot.y + plot.height - 1 - round(level * (plot.height - 1) / _Y_MAX)
                _put(screen, plot, column, row, _POINT_SYMBOL, style)

    def _draw_list(self, screen, area: Rect, border: Style) -> None:
        _draw_block(screen, area, border)
        inner = area.inner(1, 1)
        if inner.height == 0:
            return
        rows = self.labels()
        top = max(0, min(self._ui_selection - inner.height // 2, len(rows) - inner.height))
        highlight = Style().bg(Color.LIGHT_BLUE).add_modifier(Modifier.BOLD)
        for offset, (title, color) in enumerate(rows[top: top + inner.height]):
            if top + offset == self._ui_selection:
                style = highlight
            elif color is not None:
                style = Style().fg(color)
            else:
                style = border
            _put(screen, inner, inner.x, inner.y + offset, title, style)