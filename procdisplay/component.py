"""Layout rectangles, event results and key dispatch shared by the components.

Components draw onto a *screen*: any object with a ``size`` attribute that
holds a :class:`Rect` covering the whole terminal, and a
``put(x, y, text, style)`` method that writes ``text`` from column ``x`` of
row ``y`` in the given style.
"""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from itertools import accumulate
from typing import Optional, Sequence, Union

from procdisplay.config import KeyCode, KeyConfig, Style
from procdisplay.process_items import ListSortOrder
from procdisplay.process_list import MoveSelection

SplitSpec = Union[int, float, None]

_PLAIN_BORDER = ("┌", "─", "┐", "│", "└", "┘")
_THICK_BORDER = ("┏", "━", "┓", "┃", "┗", "┛")


def _distribute(total: int, specs: Sequence[SplitSpec]) -> list[int]:
    if not specs:
        raise ValueError("at least one size is needed to split an area")
    wanted = []
    for spec in specs:
        if spec is None:
            wanted.append(0)
        elif isinstance(spec, float):
            if not 0.0 <= spec <= 1.0:
                raise ValueError(f"fraction out of range: {spec}")
            wanted.append(int(total * spec))
        elif isinstance(spec, int) and not isinstance(spec, bool):
            if spec < 0:
                raise ValueError(f"length must not be negative: {spec}")
            wanted.append(spec)
        else:
            raise TypeError(f"unsupported size: {spec!r}")

    budget = total
    lengths = []
    for length in wanted:
        taken = min(length, budget)
        lengths.append(taken)
        budget -= taken

    fills = [pos for pos, spec in enumerate(specs) if spec is None]
    if not fills:
        lengths[-1] += budget
        return lengths
    share, leftover = divmod(budget, len(fills))
    last_fill = fills[-1]
    return [
        length + share + (leftover if pos == last_fill else 0) if pos in fills else length
        for pos, length in enumerate(lengths)
    ]


@dataclass(frozen=True)
class Rect:
    """A rectangular region of the screen, in cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError("rectangle coordinates and sizes must not be negative")

    def inner(self, vertical: int = 0, horizontal: int = 0) -> "Rect":
        """The area left after removing the given margins; empty if they do not fit."""
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect()
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )

    def split_vertical(self, *args: SplitSpec) -> list["Rect"]:
        """Stack rows top to bottom.

        Each size is an ``int`` (fixed rows), a ``float`` (fraction of the
        height) or ``None`` (share of whatever is left).
        """
        heights = _distribute(self.height, args)
        starts = accumulate(heights[:-1], initial=self.y)
        return [Rect(self.x, y, self.width, h) for y, h in zip(starts, heights)]

    def split_horizontal(self, *args: SplitSpec) -> list["Rect"]:
        """Place columns left to right; sizes as for :meth:`split_vertical`."""
        widths = _distribute(self.width, args)
        starts = accumulate(widths[:-1], initial=self.x)
        return [Rect(x, self.y, w, self.height) for x, w in zip(starts, widths)]


class EventState(enum.Enum):
    CONSUMED = "consumed"
    NOT_CONSUMED = "not_consumed"

    def is_consumed(self) -> bool:
        return self is EventState.CONSUMED


class Component(abc.ABC):
    """Something that reacts to key presses."""

    @abc.abstractmethod
    def event(self, key: KeyCode) -> EventState:
        """Handle ``key`` and report whether it was used."""


class DrawableComponent(abc.ABC):
    """Something that can draw itself into an area of the screen."""

    @abc.abstractmethod
    def draw(self, screen, area: Rect, focused: bool) -> None:
        """Draw into ``area`` of ``screen``."""


def common_nav(key: KeyCode, key_config: KeyConfig) -> Optional[MoveSelection]:
    """The list movement bound to ``key``, if any."""
    bindings = (
        (key_config.move_down, MoveSelection.DOWN),
        (key_config.move_bottom, MoveSelection.END),
        (key_config.move_up, MoveSelection.UP),
        (key_config.move_top, MoveSelection.TOP),
    )
    return next((move for bound, move in bindings if key == bound), None)


def common_sort(key: KeyCode, key_config: KeyConfig) -> Optional[ListSortOrder]:
    """The sort order bound to ``key``, if any."""
    bindings = (
        (key_config.sort_cpu_usage_dec, ListSortOrder.CPU_USAGE_DEC),
        (key_config.sort_cpu_usage_inc, ListSortOrder.CPU_USAGE_INC),
        (key_config.sort_memory_usage_dec, ListSortOrder.MEMORY_USAGE_DEC),
        (key_config.sort_memory_usage_inc, ListSortOrder.MEMORY_USAGE_INC),
        (key_config.sort_pid_dec, ListSortOrder.PID_DEC),
        (key_config.sort_pid_inc, ListSortOrder.PID_INC),
        (key_config.sort_name_dec, ListSortOrder.NAME_DEC),
        (key_config.sort_name_inc, ListSortOrder.NAME_INC),
    )
    return next((order for bound, order in bindings if key == bound), None)


def _put(screen, area: Rect, x: int, y: int, text: str, style: Style) -> None:
    """Write ``text`` at ``(x, y)``, clipped to ``area``."""
    if not area.y <= y < area.y + area.height:
        return
    if x < area.x:
        text = text[area.x - x:]
        x = area.x
    text = text[: max(area.x + area.width - x, 0)]
    if text:
        screen.put(x, y, text, style)


def _clear(screen, area: Rect) -> None:
    """Blank every cell of ``area``."""
    blank = " " * area.width
    for y in range(area.y, area.y + area.height):
        _put(screen, area, area.x, y, blank, Style())


def _draw_block(
    screen,
    area: Rect,
    style: Style,
    title: Optional[str] = None,
    thick: bool = False,
) -> None:
    """Draw a bordered box around ``area`` with an optional title on its top edge."""
    if area.width < 2 or area.height < 2:
        return
    tl, horizontal, tr, vertical, bl, br = _THICK_BORDER if thick else _PLAIN_BORDER
    middle = horizontal * (area.width - 2)
    bottom = area.y + area.height - 1
    right = area.x + area.width - 1
    _put(screen, area, area.x, area.y, tl + middle + tr, style)
    _put(screen, area, area.x, bottom, bl + middle + br, style)
    for y in range(area.y + 1, bottom):
        _put(screen, area, area.x, y, vertical, style)
        _put(screen, area, right, y, vertical, style)
    if title:
        _put(screen, area, area.x + 1, area.y, title[: area.width - 2], style)