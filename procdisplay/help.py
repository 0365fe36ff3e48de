"""Popup listing the available key commands."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable, Optional

from procdisplay.command import CommandInfo
from procdisplay.component import (
    Component,
    DrawableComponent,
    EventState,
    Rect,
    _clear,
    _draw_block,
    _put,
)
from procdisplay.config import Color, Config, KeyCode, Modifier, Style

_WIDTH = 65
_HEIGHT = 24
_FOOTER = "procdisplay"


class HelpComponent(Component, DrawableComponent):
    """A scrollable list of commands grouped under headings."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self._cmds: list[CommandInfo] = []
        self._visible = False
        self._selection = 0

    def set_commands(self, cmds: Iterable[CommandInfo]) -> None:
        """Replace the listed commands, dropping those marked hidden."""
        self._cmds = [cmd for cmd in cmds if not cmd.text.hide_help]

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def selection(self) -> int:
        return self._selection

    def _scroll_selection(self, inc: bool) -> None:
        moved = self._selection + 1 if inc else max(self._selection - 1, 0)
        self._selection = min(moved, max(len(self._cmds) - 1, 0))

    def text_lines(self, width: int) -> list[tuple[str, Style]]:
        """The popup's lines: a heading per group, then its commands padded to ``width``."""
        lines: list[tuple[str, Style]] = []
        processed = 0
        for group, infos in groupby(self._cmds, key=lambda info: info.text.group):
            lines.append((group, Style().add_modifier(Modifier.REVERSED)))
            for info in infos:
                style = Style().bg(Color.BLUE) if processed == self._selection else Style()
                processed += 1
                lines.append((f" {info.text.name}".ljust(width), style))
        return lines

    def event(self, key: KeyCode) -> EventState:
        keys = self.config.key_config
        if self._visible:
            if key == keys.exit_popup:
                self._visible = False
                return EventState.CONSUMED
            if key == keys.move_down:
                self._scroll_selection(True)
                return EventState.CONSUMED
            if key == keys.move_up:
                self._scroll_selection(False)
                return EventState.CONSUMED
        elif key == keys.open_help:
            self._visible = True
            return EventState.CONSUMED
        return EventState.NOT_CONSUMED

    def draw(self, screen, area: Rect, focused: bool) -> None:
        if not self._visible:
            return
        size = screen.size
        scroll = max(self._selection - _HEIGHT // 3, 0)
        popup = Rect(
            max(size.width - _WIDTH, 0) // 2,
            max(size.height - _HEIGHT, 0) // 2,
            min(_WIDTH, size.width),
            min(_HEIGHT, size.height),
        )
        _clear(screen, popup)
        _draw_block(screen, popup, Style(), "Help", thick=True)

        body, footer = popup.inner(1, 1).split_vertical(None, 1)
        visible_lines = self.text_lines(body.width)[scroll: scroll + body.height]
        for row, (text, style) in enumerate(visible_lines):
            _put(screen, body, body.x, body.y + row, text, style)

        footer_x = footer.x + max(footer.width - len(_FOOTER), 0)
        _put(screen, footer, footer_x, footer.y, _FOOTER, Style())