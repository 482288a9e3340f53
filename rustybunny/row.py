"""A single row of the map: base terrain, an overlay and optional logs."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .logs import LogHandler
from .terrain import StyledChar, Terrain, TerrainSymbol

_HEDGE_PERCENT = 25


@dataclass
class Row:
    """Base cells of a row plus an overlay that is drawn on top of them."""

    cells: List[StyledChar]
    log_handler: Optional[LogHandler] = None
    overlay: List[Optional[StyledChar]] = field(init=False)

    def __post_init__(self) -> None:
        self.overlay = [None] * len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells)

    def _check(self, x: int) -> None:
        if not 0 <= x < self.width:
            raise IndexError("x out of bounds!")

    def cell(self, x: int) -> StyledChar:
        """Return what is shown at ``x``: the overlay if set, else the terrain."""
        self._check(x)
        shown = self.overlay[x]
        return shown if shown is not None else self.cells[x]

    def fill_overlay(self) -> None:
        """Paint the row's logs into the overlay."""
        if self.log_handler is not None:
            self.log_handler.paint(self.overlay)

    def clear_overlay(self) -> None:
        """Remove everything from the overlay."""
        self.overlay = [None] * self.width

    def update(self, player) -> None:
        """Advance the row's logs, if it has any."""
        if self.log_handler is not None:
            self.log_handler.update(player)

    def set_overlay(self, x: int, symbol: StyledChar) -> None:
        """Place ``symbol`` over the terrain at ``x``."""
        self._check(x)
        self.overlay[x] = symbol


def make_row(
    y: int,
    width: int,
    terrain: Terrain,
    rng: Optional[random.Random] = None,
) -> Row:
    """Build a row of the given terrain at map row ``y``."""
    rng = rng if rng is not None else random.Random()
    grass = TerrainSymbol.GRASS.symbol()

    if terrain is Terrain.GRASS:
        if y == 0:
            return Row([grass] * width)
        hedge = TerrainSymbol.HEDGE.symbol()
        return Row(
            [hedge if rng.randrange(100) < _HEDGE_PERCENT else grass for _ in range(width)]
        )

    if terrain is Terrain.WATER:
        direction = 1 if rng.random() < 0.5 else -1
        return Row(
            [TerrainSymbol.WATER.symbol()] * width,
            LogHandler(width, direction, y, rng),
        )

    if terrain is Terrain.GOAL:
        return Row([TerrainSymbol.GOAL.symbol()] * width)

    return Row([grass] * width)