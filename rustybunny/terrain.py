"""Terrain kinds and the styled characters used to draw them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

Color = Optional[Union[str, Tuple[int, int, int]]]

_NAMED_COLORS = {
    "black": 0,
    "red": 9,
    "green": 10,
    "yellow": 11,
    "blue": 12,
    "magenta": 13,
    "cyan": 14,
    "white": 15,
}

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class StyledChar:
    """A single character with a foreground colour and an italic flag."""

    char: str
    fg: Color = None
    italic: bool = False

    def render(self) -> str:
        """Return the character wrapped in ANSI escape sequences."""
        codes = []
        if self.italic:
            codes.append("3")
        if isinstance(self.fg, tuple):
            r, g, b = self.fg
            codes.append(f"38;2;{r};{g};{b}")
        elif self.fg is not None:
            codes.append(f"38;5;{_NAMED_COLORS[self.fg]}")
        if not codes:
            return self.char
        return f"\x1b[{';'.join(codes)}m{self.char}{_RESET}"


class Terrain(Enum):
    """The kind of terrain a row is made of."""

    GRASS_NO_HEDGE = "grass_no_hedge"
    GRASS = "grass"
    WATER = "water"
    GOAL = "goal"


class TerrainSymbol(Enum):
    """Everything that can occupy a cell of the map."""

    GRASS = "grass"
    WATER = "water"
    GOAL = "goal"
    HEDGE = "hedge"
    BOARD = "board"

    def symbol(self) -> StyledChar:
        """Return the styled character that draws this terrain."""
        return _SYMBOLS[self]


_SYMBOLS = {
    TerrainSymbol.GRASS: StyledChar(",", "green", italic=True),
    TerrainSymbol.WATER: StyledChar("\u224b", "blue"),
    TerrainSymbol.GOAL: StyledChar("$", "yellow"),
    TerrainSymbol.HEDGE: StyledChar("#", (38, 128, 37)),
    TerrainSymbol.BOARD: StyledChar("=", (100, 60, 30)),
}