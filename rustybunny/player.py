"""The bunny the player steers across the map."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .terrain import StyledChar, TerrainSymbol


@dataclass(frozen=True)
class Position:
    """A cell on the map."""

    x: int
    y: int


class PlayerState(Enum):
    """Whether the player is still going, drowned or home."""

    ALIVE = "alive"
    SPLASH = "splash"
    HAPPY = "happy"


class Player:
    """The player's position, look, state and step count."""

    def __init__(self, symbol: str, x: int, y: int) -> None:
        self.pos = Position(x, y)
        self.symbol = StyledChar(symbol, "white")
        self.state = PlayerState.ALIVE
        self.steps = 0

    def move_to(self, new_x: int, new_y: int, max_x: int, max_y: int) -> None:
        """Move to a cell, clamped to ``[0, max_x)`` and ``[0, max_y]``."""
        self.steps += 1
        x = min(max(new_x, 0), max_x - 1)
        y = min(max(new_y, 0), max_y)
        self.pos = Position(x, y)

    def update_state(self, world) -> None:
        """Look at the cell under the player and react to water or the goal."""
        cell = world.row(self.pos.y).cell(self.pos.x)
        if cell == TerrainSymbol.WATER.symbol():
            self.symbol = StyledChar("\u2205", (0, 180, 255))
            self.state = PlayerState.SPLASH
        elif cell == TerrainSymbol.GOAL.symbol():
            self.symbol = replace(self.symbol, fg="green")
            self.state = PlayerState.HAPPY