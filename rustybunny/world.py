"""The whole map: a stack of rows plus the clock that drives the logs."""

from __future__ import annotations

import random
import sys
from typing import List, Optional, TextIO

from .row import Row, make_row
from .terrain import StyledChar, Terrain

_LOG_PERIOD = 7
_CLEAR_SCREEN = "\x1b[2J\x1b[H"


class World:
    """The rows of the map, goal on top and the start row at the bottom.

    The map holds ``height + 1`` rows: the goal row, ``height - 1`` random
    grass or water rows, and the hedge-free grass row the player starts on.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.tick = 0
        rng = rng if rng is not None else random.Random()

        rows: List[Row] = []
        for y in range(height):
            if y == height - 1:
                rows.append(make_row(y, width, Terrain.GRASS_NO_HEDGE, rng))
                continue
            if y == 0:
                rows.append(make_row(y, width, Terrain.GOAL, rng))
            terrain = Terrain.WATER if rng.randrange(100) > 50 else Terrain.GRASS
            rows.append(make_row(y, width, terrain, rng))
        self.rows = rows

    def clear(self) -> None:
        """Clear the terminal and every row's overlay."""
        sys.stdout.write(_CLEAR_SCREEN)
        sys.stdout.flush()
        for row in self.rows:
            row.clear_overlay()

    def update(self, player) -> None:
        """Advance the clock, move logs every few ticks and paint them."""
        self.tick += 1
        if self.tick % _LOG_PERIOD == 0:
            for row in self.rows:
                row.update(player)
        for row in self.rows:
            row.fill_overlay()

    def set(self, x: int, y: int, symbol: StyledChar) -> None:
        """Place ``symbol`` in the overlay at ``(x, y)``; ignored off the map."""
        if 0 <= y <= self.height and 0 <= x < self.width:
            self.rows[y].set_overlay(x, symbol)

    def render(self, text: Optional[str] = None) -> str:
        """Return the map as terminal text, numbered rows, then ``text``."""
        lines = [
            f"{i}\t" + "".join(row.cell(x).render() for x in range(self.width)) + "\r\n"
            for i, row in enumerate(self.rows)
        ]
        if text is not None:
            lines.append(text)
        return "".join(lines)

    def draw(self, text: Optional[str] = None, out: Optional[TextIO] = None) -> None:
        """Write the rendered map to ``out`` (standard output by default)."""
        out = out if out is not None else sys.stdout
        out.write(self.render(text))
        out.flush()

    def row(self, y: int) -> Row:
        """Return the row at map line ``y``."""
        return self.rows[y]