import pytest

from rustybunny.terrain import StyledChar, TerrainSymbol


def test_goal_symbol():
    goal = TerrainSymbol.GOAL.symbol()
    assert goal.char == "$"
    assert goal.fg == "yellow"


def test_hedge_symbol_colour():
    hedge = TerrainSymbol.HEDGE.symbol()
    assert hedge.char == "#"
    assert hedge.fg == (38, 128, 37)


def test_grass_is_italic_and_water_is_not():
    assert TerrainSymbol.GRASS.symbol().italic is True
    assert TerrainSymbol.WATER.symbol().italic is False


def test_symbols_are_stable_and_distinct():
    grass = TerrainSymbol.GRASS.symbol()
    water = TerrainSymbol.WATER.symbol()
    goal = TerrainSymbol.GOAL.symbol()
    hedge = TerrainSymbol.HEDGE.symbol()
    board = TerrainSymbol.BOARD.symbol()
    assert TerrainSymbol.GRASS.symbol() == grass
    assert TerrainSymbol.BOARD.symbol() == board
    assert len({grass, water, goal, hedge, board}) == 5


def test_render_plain_char_is_unchanged():
    assert StyledChar("x").render() == "x"


def test_render_rgb_colour():
    rendered = TerrainSymbol.HEDGE.symbol().render()
    assert rendered.startswith("\x1b[38;2;38;128;37m#")
    assert rendered.endswith("\x1b[0m")


@pytest.mark.parametrize(
    ("name", "expected_char"),
    [
        ("GRASS", ","),
        ("WATER", "\u224b"),
        ("GOAL", "$"),
        ("HEDGE", "#"),
        ("BOARD", "="),
    ],
)
def test_render_contains_char(name, expected_char):
    styled = TerrainSymbol[name].symbol()
    assert styled.char == expected_char
    assert expected_char in styled.render()


def test_styles_change_equality():
    assert StyledChar("$", "yellow") == TerrainSymbol.GOAL.symbol()
    assert StyledChar("$", "green") != TerrainSymbol.GOAL.symbol()