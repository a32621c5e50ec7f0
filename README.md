# marsquest

The pieces of a small survival game set on Mars. The player starts in the
personal chambers of a rocket, with food, water and oxygen at 99, on a
10 × 10 map of rocket rooms and Martian surface. Items can be collected,
carried in a six-slot inventory, kept in storage, and fuel can be loaded
into the engine bay.

Input and output go through a simulated board: ten toggle switches, one
push button, ten LEDs and six seven-segment displays, plus a text console.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `marsquest.game` – `TileType` and `Collectible` enums, `tile_name()`,
  `tile_map_symbol()` and `collectible_name()`, and the sizes
  `INVENTORY_SIZE` (6) and `STORAGE_SIZE` (5).
- `marsquest.tile` – the `Tile` dataclass, `create_tile()` (unknown types
  become wasteland) and `default_map()`, which returns fresh tiles indexed
  `[y][x]`.
- `marsquest.player` – the `Player` dataclass and `create_player()`; a new
  player stands at (0, 3) with an empty inventory.
- `marsquest.inventory` – `add_to_inventory()`, `remove_from_inventory()`,
  `add_to_storage()`, `remove_from_storage()`, `add_fuel_enginebay()` and
  `check_storage()`. Each writes its messages to an object with `say()` and
  `say_hold()`, such as a `Session`.
- `marsquest.board` – `Board`, with switches (`get_sw()`, `set_switches()`),
  the button (`get_btn()`, `press_button()`), LEDs (`set_leds()`,
  `get_leds()`), displays (`set_display()`, which raises `ValueError` for a
  display number outside 0–5), the timer (`labinit()`, `tick()`),
  `handle_interrupt()` and the `take_*_event()` methods that read and clear
  the switch, timer and button events. `segment_pattern()` gives the
  active-low segment bits for a digit or glyph code.
- `marsquest.console` – `Console` (`write()`, `write_char()`,
  `write_dec()`, `write_hex32()`), `format_dec()`, `format_hex32()`,
  `nextprime()`, and `handle_exception()`, which serves print system calls
  or reports a fault and raises `MachineException`.
- `marsquest.session` – `Session`, which couples a board and a console and
  feeds the board switch states from an iterable. `read_switches()` raises
  `EOFError` when the input runs out; `say_hold()` raises `RuntimeError` if
  the board's timer has not been started with `labinit()`.
- `marsquest.render` – `render_frame()` returns the screen text (title,
  position, map, inventory, tile text); `display_frame()` writes it;
  `update_display()` shows food, water or oxygen on the displays;
  `status_mask()` and `update_status()` compute and light the LED progress.
- `marsquest.interactions` – `interact_with_tile()` runs what a tile offers:
  the storage menu, the cockpit departure, food in the cafeteria, fuelling
  the engine bay, the laboratory, and finds on the surface.

## Example

```python
from marsquest.board import Board
from marsquest.player import create_player
from marsquest.render import render_frame
from marsquest.session import Session
from marsquest.tile import default_map
from marsquest.interactions import interact_with_tile

board = Board()
board.labinit()
world = default_map()
player = create_player()
player.position_x, player.position_y = 0, 4   # the cafeteria

session = Session(board, switch_input=[0b1, 0b1_0000_0000])  # yes, then BACK
interact_with_tile(session, player, world[4][0], world)
print(render_frame(player, world[4][0], world))
```

## What it does not do

There is no command to play the game and no main loop: nothing moves the
player in response to switches, drops the stats each second, or ends the
game when a stat runs out. The package provides the board, the map, the
player, the inventory rules, the screen and the tile interactions for a
program that drives them.