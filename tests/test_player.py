import pytest

from rustybunny.player import Player, PlayerState, Position
from rustybunny.row import Row
from rustybunny.terrain import TerrainSymbol


class _World:
    def __init__(self, rows):
        self.rows = rows

    def row(self, y):
        return self.rows[y]


def _world_of(symbol, width=3):
    return _World([Row([symbol.symbol()] * width)])


def test_new_player():
    player = Player("B", 0, 5)
    assert player.pos == Position(0, 5)
    assert player.steps == 0
    assert player.state is PlayerState.ALIVE
    assert player.symbol.char == "B"
    assert player.symbol.fg == "white"


def test_move_counts_steps():
    player = Player("B", 0, 5)
    player.move_to(1, 4, 10, 10)
    player.move_to(2, 4, 10, 10)
    assert player.pos == Position(2, 4)
    assert player.steps == 2


def test_move_clamps_x_below_width():
    player = Player("B", 0, 0)
    player.move_to(10, 3, 4, 8)
    assert player.pos.x == 4 - 1
    assert player.pos.y == 3


def test_move_clamps_y_to_max_inclusive():
    player = Player("B", 0, 0)
    player.move_to(0, 12, 4, 8)
    assert player.pos.y == 8


@pytest.mark.parametrize("x,y", [(-3, -2), (-1, 0)])
def test_move_clamps_negative(x, y):
    player = Player("B", 2, 2)
    player.move_to(x, y, 4, 8)
    assert player.pos == Position(0, 0)


def test_water_splashes():
    player = Player("B", 1, 0)
    player.update_state(_world_of(TerrainSymbol.WATER))
    assert player.state is PlayerState.SPLASH
    assert player.symbol.char == "\u2205"
    assert player.symbol.fg == (0, 180, 255)


def test_goal_makes_happy():
    player = Player("B", 1, 0)
    player.update_state(_world_of(TerrainSymbol.GOAL))
    assert player.state is PlayerState.HAPPY
    assert player.symbol.char == "B"
    assert player.symbol.fg == "green"


@pytest.mark.parametrize("terrain", [TerrainSymbol.GRASS, TerrainSymbol.HEDGE])
def test_land_keeps_alive(terrain):
    player = Player("B", 1, 0)
    player.update_state(_world_of(terrain))
    assert player.state is PlayerState.ALIVE
    assert player.symbol.fg == "white"


def test_board_over_water_keeps_alive():
    row = Row([TerrainSymbol.WATER.symbol()] * 3)
    row.set_overlay(1, TerrainSymbol.BOARD.symbol())
    player = Player("B", 1, 0)
    player.update_state(_World([row]))
    assert player.state is PlayerState.ALIVE