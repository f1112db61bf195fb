"""ANSI colour codes and a small escape-sequence builder."""

from dataclasses import dataclass
from enum import IntEnum


class Color(IntEnum):
    """SGR colour codes for terminal foreground and background."""

    NONE = 0

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_PURPLE = 35
    FG_AQUA = 36
    FG_WHITE = 37

    FG_GRAY = 90
    FG_LIGHT_RED = 91
    FG_LIGHT_GREEN = 92
    FG_LIGHT_YELLOW = 93
    FG_LIGHT_BLUE = 94
    FG_LIGHT_PURPLE = 95
    FG_LIGHT_AQUA = 96
    FG_BRIGHT_WHITE = 97

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_PURPLE = 45
    BG_AQUA = 46
    BG_WHITE = 47

    BG_GRAY = 100
    BG_LIGHT_RED = 101
    BG_LIGHT_GREEN = 102
    BG_LIGHT_YELLOW = 103
    BG_LIGHT_BLUE = 104
    BG_LIGHT_PURPLE = 105
    BG_LIGHT_AQUA = 106
    BG_BRIGHT_WHITE = 107


@dataclass(frozen=True)
class ColorModifier:
    """Renders as the escape sequence that switches to ``color``.

    The default colour resets all attributes.
    """

    color: Color = Color.NONE

    def __str__(self) -> str:
        return f"\033[{int(self.color)}m"