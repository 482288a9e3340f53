"""Floating logs that drift along water rows and carry the player."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from .terrain import StyledChar, TerrainSymbol


@dataclass
class Log:
    """A log spanning ``[xli, xre)`` on row ``y`` drifting by ``direction``."""

    row_width: int
    xli: int
    xre: int
    direction: int
    y: int

    def update(self, player) -> None:
        """Drift one cell, carrying the player if standing on the row below."""
        pos = player.pos
        if self.y == pos.y - 1 and self.xli <= pos.x <= self.xre:
            new_x = min(max(pos.x + self.direction, 0), self.row_width)
            player.move_to(new_x, pos.y, self.row_width, self.y + 1)
        self.xli += self.direction
        self.xre += self.direction

    def on_map(self) -> bool:
        """Whether the log has not yet drifted off the far edge."""
        if self.direction > 0:
            return self.xli < self.row_width
        if self.direction < 0:
            return self.xre > 0
        return False

    def spawn_next(self, rng: random.Random) -> Optional[Log]:
        """Return a log trailing this one, or None if there is no room yet."""
        distance = rng.randrange(3, 5)
        length = rng.randrange(2, 4)
        if self.direction > 0:
            if self.xli < distance:
                return None
            new_xli = self.xli - distance - length
        elif self.direction < 0:
            if self.row_width - self.xre < distance:
                return None
            new_xli = self.xre + distance
        else:
            return None
        return Log(self.row_width, new_xli, new_xli + length, self.direction, self.y)


class LogHandler:
    """All logs on one water row."""

    def __init__(
        self,
        width: int,
        direction: int,
        y: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = width
        self._rng = rng if rng is not None else random.Random()
        length = self._rng.randrange(2, 4)
        self.logs: List[Log] = [Log(width, 0, length, direction, y)]
        while (nxt := self.logs[-1].spawn_next(self._rng)) is not None:
            self.logs.append(nxt)

    def update(self, player) -> None:
        """Spawn, retire and drift logs, carrying the player along."""
        if self.logs:
            nxt = self.logs[-1].spawn_next(self._rng)
            if nxt is not None:
                self.logs.append(nxt)
        if self.logs and not self.logs[0].on_map():
            self.logs.pop(0)
        for log in self.logs:
            log.update(player)

    def paint(self, overlay: List[Optional[StyledChar]]) -> None:
        """Draw every visible part of every log into ``overlay``."""
        board = TerrainSymbol.BOARD.symbol()
        for log in self.logs:
            for x in range(max(log.xli, 0), min(log.xre, self.width)):
                overlay[x] = board