"""Key bindings, colour theme and timing settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import ClassVar, Optional


@dataclass(frozen=True)
class KeyCode:
    """A key on the keyboard: a named key, or ``Char`` with its character."""

    name: str
    char: Optional[str] = None

    UP: ClassVar["KeyCode"]
    DOWN: ClassVar["KeyCode"]
    LEFT: ClassVar["KeyCode"]
    RIGHT: ClassVar["KeyCode"]
    ENTER: ClassVar["KeyCode"]
    TAB: ClassVar["KeyCode"]
    BACK_TAB: ClassVar["KeyCode"]
    ESC: ClassVar["KeyCode"]
    BACKSPACE: ClassVar["KeyCode"]
    DELETE: ClassVar["KeyCode"]
    HOME: ClassVar["KeyCode"]
    END: ClassVar["KeyCode"]
    PAGE_UP: ClassVar["KeyCode"]
    PAGE_DOWN: ClassVar["KeyCode"]

    def __str__(self) -> str:
        if self.char is not None:
            return f"{self.name}({self.char!r})"
        return self.name


KeyCode.UP = KeyCode("Up")
KeyCode.DOWN = KeyCode("Down")
KeyCode.LEFT = KeyCode("Left")
KeyCode.RIGHT = KeyCode("Right")
KeyCode.ENTER = KeyCode("Enter")
KeyCode.TAB = KeyCode("Tab")
KeyCode.BACK_TAB = KeyCode("BackTab")
KeyCode.ESC = KeyCode("Esc")
KeyCode.BACKSPACE = KeyCode("Backspace")
KeyCode.DELETE = KeyCode("Delete")
KeyCode.HOME = KeyCode("Home")
KeyCode.END = KeyCode("End")
KeyCode.PAGE_UP = KeyCode("PageUp")
KeyCode.PAGE_DOWN = KeyCode("PageDown")


def char_key(c: str) -> KeyCode:
    """The key that types the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return KeyCode("Char", c)


class Color(enum.Enum):
    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "darkgray"
    LIGHT_RED = "lightred"
    LIGHT_GREEN = "lightgreen"
    LIGHT_YELLOW = "lightyellow"
    LIGHT_BLUE = "lightblue"
    LIGHT_MAGENTA = "lightmagenta"
    LIGHT_CYAN = "lightcyan"
    WHITE = "white"


class Modifier(enum.Flag):
    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


@dataclass(frozen=True)
class Style:
    """Immutable text style; the builder methods return new styles."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    modifier: Modifier = Modifier.NONE

    def fg(self, color: Color) -> "Style":
        return replace(self, foreground=color)

    def bg(self, color: Color) -> "Style":
        return replace(self, background=color)

    def add_modifier(self, modifier: Modifier) -> "Style":
        return replace(self, modifier=self.modifier | modifier)


class ThemeVariant(enum.Enum):
    DARK = "dark"
    LIGHT = "light"


@dataclass
class ThemeConfig:
    """Styles for lists and components in the current theme."""

    theme_variant: ThemeVariant = ThemeVariant.DARK
    list_header: Style = field(default_factory=lambda: Style().fg(Color.BLACK).bg(Color.GRAY))
    item_style: Style = field(default_factory=lambda: Style().fg(Color.WHITE))
    item_select: Style = field(
        default_factory=lambda: Style().bg(Color.BLUE).add_modifier(Modifier.BOLD)
    )
    item_select_follow: Style = field(
        default_factory=lambda: Style()
        .bg(Color.BLUE)
        .add_modifier(Modifier.BOLD)
        .add_modifier(Modifier.UNDERLINED)
    )
    component_out_of_focus: Style = field(default_factory=lambda: Style().fg(Color.DARK_GRAY))
    component_in_focus: Style = field(default_factory=lambda: Style().fg(Color.LIGHT_GREEN))

    def _set_dark_theme(self) -> None:
        self.theme_variant = ThemeVariant.DARK
        self.list_header = Style().fg(Color.BLACK).bg(Color.GRAY)
        self.item_style = Style().fg(Color.WHITE)
        self.item_select = Style().bg(Color.BLUE).add_modifier(Modifier.BOLD)
        self.item_select_follow = self.item_select.add_modifier(Modifier.UNDERLINED)
        self.component_out_of_focus = Style().fg(Color.DARK_GRAY)
        self.component_in_focus = Style().fg(Color.WHITE)

    def _set_light_theme(self) -> None:
        self.theme_variant = ThemeVariant.LIGHT
        self.list_header = Style().fg(Color.WHITE).bg(Color.BLACK)
        self.item_style = Style().fg(Color.BLACK)
        self.item_select = Style().fg(Color.BLACK).bg(Color.CYAN).add_modifier(Modifier.BOLD)
        self.item_select_follow = self.item_select.add_modifier(Modifier.UNDERLINED)
        self.component_out_of_focus = Style().fg(Color.DARK_GRAY)
        self.component_in_focus = Style().fg(Color.LIGHT_GREEN)

    def toggle_themes(self) -> None:
        """Switch between the dark and the light theme."""
        if self.theme_variant is ThemeVariant.DARK:
            self._set_light_theme()
        else:
            self._set_dark_theme()


@dataclass(frozen=True)
class KeyConfig:
    """Which key triggers each action."""

    move_up: KeyCode = KeyCode.UP
    move_top: KeyCode = char_key("W")
    move_down: KeyCode = KeyCode.DOWN
    move_bottom: KeyCode = char_key("S")
    enter: KeyCode = KeyCode.ENTER
    tab: KeyCode = KeyCode.TAB
    filter: KeyCode = char_key("/")
    terminate: KeyCode = char_key("T")
    tab_right: KeyCode = KeyCode.RIGHT
    tab_left: KeyCode = KeyCode.LEFT
    open_help: KeyCode = char_key("?")
    exit_popup: KeyCode = KeyCode.ESC
    sort_name_inc: KeyCode = char_key("n")
    sort_name_dec: KeyCode = char_key("N")
    sort_pid_inc: KeyCode = char_key("p")
    sort_pid_dec: KeyCode = char_key("P")
    sort_cpu_usage_inc: KeyCode = char_key("c")
    sort_cpu_usage_dec: KeyCode = char_key("C")
    sort_memory_usage_inc: KeyCode = char_key("m")
    sort_memory_usage_dec: KeyCode = char_key("M")
    follow_selection: KeyCode = char_key("f")
    toggle_themes: KeyCode = char_key("t")
    process_info: KeyCode = KeyCode.ENTER
    expand: KeyCode = char_key("e")


_MINUTE_MS = 60_000
_SECOND_MS = 1_000


class Config:
    """Application settings; rates are in milliseconds."""

    def __init__(
        self,
        key_config: Optional[KeyConfig] = None,
        theme_config: Optional[ThemeConfig] = None,
        refresh_rate: int = 2000,
        tick_rate: int = 250,
    ) -> None:
        if refresh_rate <= 0 or tick_rate <= 0:
            raise ValueError("refresh_rate and tick_rate must be positive")
        self.key_config = key_config if key_config is not None else KeyConfig()
        self.theme_config = theme_config if theme_config is not None else ThemeConfig()
        self._refresh_rate = refresh_rate
        self._tick_rate = tick_rate

    @property
    def refresh_rate(self) -> int:
        return self._refresh_rate

    @property
    def tick_rate(self) -> int:
        return self._tick_rate

    @property
    def min_as_s(self) -> int:
        """One minute in seconds."""
        return _MINUTE_MS // _SECOND_MS

    @property
    def events_per_min(self) -> int:
        """How many refreshes happen in one minute."""
        return _MINUTE_MS // self._refresh_rate

    def __repr__(self) -> str:
        return f"Config(refresh_rate={self._refresh_rate}, tick_rate={self._tick_rate})"