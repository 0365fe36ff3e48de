"""Text box for typing a process filter."""

from __future__ import annotations

from typing import Optional

from procdisplay.component import (
    Component,
    DrawableComponent,
    EventState,
    Rect,
    _draw_block,
    _put,
)
from procdisplay.config import Config, KeyCode

_TITLE = " Filter "


class FilterComponent(Component, DrawableComponent):
    """Collects typed characters into a filter string."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self._input = ""

    def reset(self) -> None:
        self._input = ""

    @property
    def input_str(self) -> str:
        return self._input

    def is_filter_empty(self) -> bool:
        return not self._input

    def event(self, key: KeyCode) -> EventState:
        if key.char is not None:
            self._input += key.char
            return EventState.CONSUMED
        if key == KeyCode.BACKSPACE:
            self._input = self._input[:-1]
            return EventState.CONSUMED
        return EventState.NOT_CONSUMED

    def draw(self, screen, area: Rect, focused: bool) -> None:
        theme = self.config.theme_config
        style = theme.component_in_focus if focused else theme.component_out_of_focus
        _draw_block(screen, area, style, _TITLE)
        inner = area.inner(1, 1)
        _put(screen, inner, inner.x, inner.y, self._input, style)