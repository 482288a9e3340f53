# rustybunny

A small arcade game that runs in your terminal. Guide the bunny from the
hedge-free grass row at the bottom of the field to the goal row at the top
(marked with `$`). Hedges (`#`) block your way, and water (`≋`) swallows you.
Wooden logs (`=`) drift across each water row, and a log carries the bunny
along when the bunny is on the row just below it and within the log's span.

## Installing

```
pip install .
```

## Playing

```
rustybunny
```

Controls:

| Key                 | Action                                |
|---------------------|---------------------------------------|
| Arrow keys / `WASD` | Move the bunny one cell               |
| `Esc`               | Give up the round, or quit at the end |
| `Space`             | Start a new round after one ends      |

The field is 16 cells wide and the game advances every 100 ms; the logs move
one cell every seventh tick. The screen shows how many steps you have taken
and how many rounds you have won in a row. Reaching the goal adds to the
streak; losing a round (falling into the water or pressing `Esc`) resets it
to zero.

## Using the pieces

The game is built from small parts that can be used on their own, for
example to build a field and print it without running the game loop:

```python
import random

from rustybunny.player import Player
from rustybunny.world import World

world = World(16, 20, random.Random(1))
bunny = Player("B", 0, 20)

world.update(bunny)
world.set(bunny.pos.x, bunny.pos.y, bunny.symbol)
print(world.render("Steps: 0"))
```

- `rustybunny.terrain` holds `StyledChar` (a character with a colour, rendered
  with ANSI escapes), `Terrain` and `TerrainSymbol`.
- `rustybunny.player` holds `Player`, `Position` and `PlayerState`.
- `rustybunny.logs` holds `Log` and `LogHandler`, the drifting logs of a water
  row.
- `rustybunny.row` holds `Row` and `make_row`.
- `rustybunny.world` holds `World`, the stack of rows with `update`, `set`,
  `render`, `draw` and `clear` (which also clears the terminal).
- `rustybunny.game` holds `GameControl`, which runs the interactive game
  through a `blessed` terminal, `translate_key`, and `main`, which is what the
  `rustybunny` command starts.

## Running the tests

```
pip install .[test]
pytest
```