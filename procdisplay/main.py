"""Terminal front end: curses screen, key translation and the main loop."""

from __future__ import annotations

import argparse
import curses
import os
import threading
import time
from typing import Optional, Sequence, Union

from procdisplay.app import App
from procdisplay.component import Rect
from procdisplay.config import Color, Config, KeyCode, Modifier, Style, char_key
from procdisplay.events import EventKind, Events

_POLL_INTERVAL = 0.01

_SPECIAL_KEYS = {
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
    curses.KEY_ENTER: KeyCode.ENTER,
    curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
    curses.KEY_DC: KeyCode.DELETE,
    curses.KEY_HOME: KeyCode.HOME,
    curses.KEY_END: KeyCode.END,
    curses.KEY_PPAGE: KeyCode.PAGE_UP,
    curses.KEY_NPAGE: KeyCode.PAGE_DOWN,
    curses.KEY_BTAB: KeyCode.BACK_TAB,
}

_CONTROL_CHARS = {
    "\x1b": KeyCode.ESC,
    "\t": KeyCode.TAB,
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}

_COLOR_TABLE = {
    Color.BLACK: (curses.COLOR_BLACK, False),
    Color.RED: (curses.COLOR_RED, False),
    Color.GREEN: (curses.COLOR_GREEN, False),
    Color.YELLOW: (curses.COLOR_YELLOW, False),
    Color.BLUE: (curses.COLOR_BLUE, False),
    Color.MAGENTA: (curses.COLOR_MAGENTA, False),
    Color.CYAN: (curses.COLOR_CYAN, False),
    Color.GRAY: (curses.COLOR_WHITE, False),
    Color.DARK_GRAY: (curses.COLOR_BLACK, True),
    Color.LIGHT_RED: (curses.COLOR_RED, True),
    Color.LIGHT_GREEN: (curses.COLOR_GREEN, True),
    Color.LIGHT_YELLOW: (curses.COLOR_YELLOW, True),
    Color.LIGHT_BLUE: (curses.COLOR_BLUE, True),
    Color.LIGHT_MAGENTA: (curses.COLOR_MAGENTA, True),
    Color.LIGHT_CYAN: (curses.COLOR_CYAN, True),
    Color.WHITE: (curses.COLOR_WHITE, True),
}

_MODIFIER_ATTRS = (
    (Modifier.BOLD, curses.A_BOLD),
    (Modifier.DIM, curses.A_DIM),
    (Modifier.ITALIC, getattr(curses, "A_ITALIC", 0)),
    (Modifier.UNDERLINED, curses.A_UNDERLINE),
    (Modifier.SLOW_BLINK, curses.A_BLINK),
    (Modifier.RAPID_BLINK, curses.A_BLINK),
    (Modifier.REVERSED, curses.A_REVERSE),
    (Modifier.HIDDEN, curses.A_INVIS),
)


def translate_key(code: Union[int, str]) -> Optional[KeyCode]:
    """The key for a curses key code or typed character, or None if unknown."""
    if isinstance(code, str):
        if len(code) != 1:
            return None
        if code in _CONTROL_CHARS:
            return _CONTROL_CHARS[code]
        return char_key(code) if code.isprintable() else None
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 0 <= code < 0x110000 and code < curses.KEY_MIN:
        return translate_key(chr(code))
    return None


class _CursesScreen:
    """A drawing surface and key source backed by a curses window."""

    def __init__(self, window) -> None:
        self._window = window
        self._lock = threading.Lock()
        self._pairs: dict[tuple[int, int], int] = {}
        window.nodelay(True)
        window.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self._colors = curses.COLORS if curses.has_colors() else 0
        self._default_color: Optional[int] = -1
        if self._colors:
            try:
                curses.use_default_colors()
            except curses.error:
                self._default_color = None

    @property
    def size(self) -> Rect:
        height, width = self._window.getmaxyx()
        return Rect(0, 0, width, height)

    def _color_number(self, color: Optional[Color], fallback: int) -> int:
        if color is None or color is Color.RESET:
            return self._default_color if self._default_color is not None else fallback
        base, bright = _COLOR_TABLE[color]
        return base + 8 if bright and self._colors >= 16 else base

    def _attr(self, style: Style) -> int:
        attr = 0
        for modifier, flag in _MODIFIER_ATTRS:
            if modifier in style.modifier:
                attr |= flag
        if not self._colors:
            return attr
        fg = self._color_number(style.foreground, curses.COLOR_WHITE)
        bg = self._color_number(style.background, curses.COLOR_BLACK)
        if fg == -1 and bg == -1:
            return attr
        number = self._pairs.get((fg, bg))
        if number is None:
            number = len(self._pairs) + 1
            if number >= curses.COLOR_PAIRS:
                return attr
            try:
                curses.init_pair(number, fg, bg)
            except curses.error:
                return attr
            self._pairs[(fg, bg)] = number
        return attr | curses.color_pair(number)

    def put(self, x: int, y: int, text: str, style: Style) -> None:
        with self._lock:
            try:
                self._window.addstr(y, x, text, self._attr(style))
            except curses.error:
                pass  # writing the bottom-right cell reports an error after drawing

    def clear(self) -> None:
        with self._lock:
            self._window.erase()

    def present(self) -> None:
        with self._lock:
            self._window.refresh()

    def read_key(self, timeout: float) -> Optional[KeyCode]:
        deadline = time.monotonic() + timeout
        while True:
            with self._lock:
                try:
                    code = self._window.get_wch()
                except curses.error:
                    code = None
            if code is not None:
                key = translate_key(code)
                if key is not None:
                    return key
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return None
            if code is None:
                time.sleep(min(_POLL_INTERVAL, remaining))


def run(screen, config: Optional[Config] = None) -> None:
    """Run the event loop on ``screen`` until the exit key goes unused.

    ``screen`` provides ``size``, ``put``, ``clear()``, ``present()`` and
    ``read_key(timeout)``.
    """
    config = config if config is not None else Config()
    app = App(config)
    with Events(screen.read_key, config.tick_rate, config.refresh_rate) as events:
        while True:
            screen.clear()
            app.draw(screen)
            screen.present()

            event = events.next()
            if event.kind is EventKind.INPUT:
                try:
                    state = app.key_event(event.key)
                except Exception as err:  # shown in the error popup
                    app.error.set(str(err))
                    continue
                if not state.is_consumed() and event.key == config.key_config.exit_popup:
                    break
            elif event.kind is EventKind.REFRESH:
                try:
                    app.refresh_event()
                except Exception as err:  # shown in the error popup
                    app.error.set(str(err))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="procdisplay", description="Interactive process and CPU monitor."
    )
    parser.add_argument("--refresh-rate", type=int, help="system refresh interval in ms")
    parser.add_argument("--tick-rate", type=int, help="input polling interval in ms")
    args = parser.parse_args(argv)

    options = {}
    if args.refresh_rate is not None:
        options["refresh_rate"] = args.refresh_rate
    if args.tick_rate is not None:
        options["tick_rate"] = args.tick_rate
    try:
        config = Config(**options)
    except ValueError as err:
        parser.error(str(err))

    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(lambda window: run(_CursesScreen(window), config))
    return 0