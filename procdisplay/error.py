"""Popup that shows an error message until dismissed."""

from __future__ import annotations

import textwrap
from typing import Optional

from procdisplay.component import (
    Component,
    DrawableComponent,
    EventState,
    Rect,
    _clear,
    _draw_block,
    _put,
)
from procdisplay.config import Color, Config, KeyCode, Style

_WIDTH = 60
_HEIGHT = 10


def _wrap(text: str, width: int) -> list[str]:
    if width <= 0:
        return []
    return [
        line
        for paragraph in text.splitlines()
        for line in (textwrap.wrap(paragraph, width) or [""])
    ]


class ErrorComponent(Component, DrawableComponent):
    """A dismissible error popup."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self.error = ""
        self._visible = False

    def set(self, error: str) -> None:
        """Show ``error`` in the popup."""
        self.error = error
        self._visible = True

    @property
    def visible(self) -> bool:
        return self._visible

    def event(self, key: KeyCode) -> EventState:
        if self._visible and key == self.config.key_config.exit_popup:
            self.error = ""
            self._visible = False
            return EventState.CONSUMED
        return EventState.NOT_CONSUMED

    def draw(self, screen, area: Rect, focused: bool) -> None:
        if not self._visible:
            return
        size = screen.size
        popup = Rect(
            max(size.width - _WIDTH, 0) // 2,
            max(size.height - _HEIGHT, 0) // 2,
            min(_WIDTH, size.width),
            min(_HEIGHT, size.height),
        )
        style = Style().fg(Color.RED)
        _clear(screen, popup)
        _draw_block(screen, popup, style, "Error")
        inner = popup.inner(1, 1)
        for row, line in enumerate(_wrap(self.error, inner.width)):
            _put(screen, inner, inner.x, inner.y + row, line, style)