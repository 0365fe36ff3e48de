"""A fixed cycle of chart colours."""

from __future__ import annotations

import enum

from procdisplay.config import Color


class ColorWheel(enum.Enum):
    RED = "red"
    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"
    LIGHT_GREEN = "lightgreen"
    MAGENTA = "magenta"

    def as_str(self) -> str:
        return self.value

    @property
    def color(self) -> Color:
        return Color(self.value)

    def rotated(self) -> "ColorWheel":
        """The next colour on the wheel, wrapping around."""
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def from_index(cls, index: int) -> "ColorWheel":
        """The colour for ``index``, cycling through the wheel."""
        if index < 0:
            raise ValueError("index must not be negative")
        members = list(cls)
        return members[index % len(members)]

    @classmethod
    def default(cls) -> "ColorWheel":
        return cls.RED