"""The game's state machine, keyboard handling and entry point."""

from __future__ import annotations

import random
import time
from enum import Enum
from typing import Optional

from blessed import Terminal

from .player import Player, PlayerState
from .terrain import TerrainSymbol
from .world import World

PLAYER_SYMBOL = "\ueeed"

WIDTH = 16
HEIGHT = 20
TICK_TIME_MS = 100


class GameState(Enum):
    """Phases of a round."""

    INIT = "init"
    PLAY = "play"
    WON = "won"
    LOST = "lost"
    END = "end"


class KeyPress(Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESC = "esc"
    NONE = "none"
    SPACE = "space"


_NAMED_KEYS = {
    "KEY_ESCAPE": KeyPress.ESC,
    "KEY_UP": KeyPress.UP,
    "KEY_RIGHT": KeyPress.RIGHT,
    "KEY_DOWN": KeyPress.DOWN,
    "KEY_LEFT": KeyPress.LEFT,
}

_CHAR_KEYS = {
    "\x1b": KeyPress.ESC,
    "w": KeyPress.UP,
    "d": KeyPress.RIGHT,
    "s": KeyPress.DOWN,
    "a": KeyPress.LEFT,
    " ": KeyPress.SPACE,
}

_DELTAS = {
    KeyPress.UP: (0, -1),
    KeyPress.RIGHT: (1, 0),
    KeyPress.DOWN: (0, 1),
    KeyPress.LEFT: (-1, 0),
}


def translate_key(key) -> KeyPress:
    """Map a keystroke (a blessed ``Keystroke`` or plain string) to a KeyPress."""
    if not key:
        return KeyPress.NONE
    name = getattr(key, "name", None)
    if name in _NAMED_KEYS:
        return _NAMED_KEYS[name]
    return _CHAR_KEYS.get(str(key), KeyPress.NONE)


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


class GameControl:
    """Runs rounds of the game until the player quits."""

    def __init__(
        self,
        height: int,
        width: int,
        tick_time_ms: int,
        term=None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.height = height
        self.width = width
        self.tick_time_ms = tick_time_ms
        self._term = term
        self._rng = rng if rng is not None else random.Random()
        self.player = Player(PLAYER_SYMBOL, 0, height)
        self.world = World(width, height, self._rng)
        self.state = GameState.INIT

    def handle_key(self, key: KeyPress) -> None:
        """React to a key pressed while playing: quit the round or step."""
        if key is KeyPress.ESC:
            self.state = GameState.LOST
            return
        if key is KeyPress.NONE:
            return
        dx, dy = _DELTAS.get(key, (0, 0))
        pos = self.player.pos
        new_x = _clamp(pos.x + dx, 0, self.width - 1)
        new_y = _clamp(pos.y + dy, 0, self.height)
        if self.world.row(new_y).cell(new_x) == TerrainSymbol.HEDGE.symbol():
            return
        self.player.move_to(new_x, new_y, self.width, self.height)

    def _status(self, won_rounds: int) -> str:
        return f"Steps: {self.player.steps}\r\nWon rounds: {won_rounds}"

    def _place_player(self) -> None:
        pos = self.player.pos
        self.world.set(pos.x, pos.y, self.player.symbol)

    def _get_keypress(self, term) -> KeyPress:
        """Wait one tick for a key, discarding anything typed before it."""
        duration = self.tick_time_ms / 1000
        start = time.monotonic()
        while term.inkey(timeout=0):
            pass
        key = translate_key(term.inkey(timeout=duration))
        elapsed = time.monotonic() - start
        if elapsed < duration:
            time.sleep(duration - elapsed)
        return key

    def game_loop(self) -> None:
        """Play rounds until Escape is pressed on the end screen."""
        term = self._term if self._term is not None else Terminal()
        message = ""
        won_rounds = 0
        with term.raw():
            while True:
                if self.state is GameState.INIT:
                    self.player = Player(PLAYER_SYMBOL, 0, self.height)
                    self.world = World(self.width, self.height, self._rng)
                    self.state = GameState.PLAY
                elif self.state is GameState.PLAY:
                    if self.player.state is PlayerState.SPLASH:
                        self.state = GameState.LOST
                    elif self.player.state is PlayerState.HAPPY:
                        self.state = GameState.WON
                    self.world.clear()
                    self.world.update(self.player)
                    self.player.update_state(self.world)
                    self._place_player()
                    message = self._status(won_rounds)
                    self.world.draw(message)
                    self.handle_key(self._get_keypress(term))
                elif self.state is GameState.WON:
                    won_rounds += 1
                    message = (
                        f"{self._status(won_rounds)}\r\nYou Won! \n\r"
                        "Press Space to restart, or ESC to end game.\r\n"
                    )
                    self.state = GameState.END
                elif self.state is GameState.LOST:
                    message = (
                        f"{self._status(won_rounds)}\r\nYou Lost! \n\r"
                        "Press Space to restart, or ESC to end game.\r\n"
                    )
                    won_rounds = 0
                    self.state = GameState.END
                else:
                    self.world.clear()
                    self.world.update(self.player)
                    self._place_player()
                    self.world.draw(message)
                    key = self._get_keypress(term)
                    if key is KeyPress.ESC:
                        break
                    if key is KeyPress.SPACE:
                        self.state = GameState.INIT


def main(argv=None) -> int:
    """Greet, play until the player quits, and say goodbye."""
    print("Welcome")
    GameControl(HEIGHT, WIDTH, TICK_TIME_MS).game_loop()
    print("Goodbye!")
    return 0