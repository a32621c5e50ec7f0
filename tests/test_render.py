import io

from marsquest.board import BLANK, Board, segment_pattern
from marsquest.console import Console
from marsquest.game import Collectible, TileType, tile_map_symbol
from marsquest.player import create_player
from marsquest.render import (
    PLAYER_SYMBOL,
    display_frame,
    render_frame,
    status_mask,
    update_display,
    update_status,
)
from marsquest.session import Session
from marsquest.tile import default_map


def frame_for(player=None):
    world = default_map()
    player = player or create_player()
    tile = world[player.position_y][player.position_x]
    return render_frame(player, tile, world), world


def test_frame_starts_by_clearing_screen():
    frame, _ = frame_for()
    assert frame.startswith("\x1B[2J\x1B[H")
    assert "|            MARS SURVIVAL GAME                  | \n" in frame


def test_frame_shows_position_and_location():
    frame, _ = frame_for()
    assert "| Position: (0, 3)" in frame
    assert "| Location: CHAMBERS" in frame


def test_frame_marks_player_once():
    frame, _ = frame_for()
    assert frame.count(PLAYER_SYMBOL) == 1
    map_rows = [line for line in frame.splitlines() if line.startswith("| [")]
    assert len(map_rows) == 10
    assert all(row.count("[") == 10 for row in map_rows)
    assert f"[{PLAYER_SYMBOL}] " in map_rows[3]


def test_frame_draws_tile_symbols():
    frame, world = frame_for()
    first_row = next(line for line in frame.splitlines() if line.startswith("| ["))
    expected = "| " + "".join(f"[{tile_map_symbol(t.type)}] " for t in world[0])
    assert first_row == expected


def test_frame_lists_inventory_and_tile_text():
    player = create_player()
    player.inventory[1] = Collectible.MAP
    frame, world = frame_for(player)
    assert "|   Slot 1: Empty" in frame
    assert "|   Slot 2: Map" in frame
    assert "|   Slot 6: Empty" in frame
    assert "| " + world[3][0].interaction_text + "\n" in frame


def test_display_frame_writes_to_session():
    board = Board()
    session = Session(board, Console(io.StringIO()))
    player = create_player()
    world = default_map()
    tile = world[3][0]
    display_frame(session, player, tile, world)
    assert session.console.stream.getvalue() == render_frame(player, tile, world)


def test_update_display_food():
    board = Board()
    player = create_player()
    update_display(board, player, 0)
    assert board.displays[5] == segment_pattern(10)
    assert board.displays[2] == segment_pattern(12)
    assert board.displays[1] == segment_pattern(9)
    assert board.displays[0] == segment_pattern(9)


def test_update_display_water_and_oxygen():
    board = Board()
    player = create_player()
    player.water = 42
    update_display(board, player, 1)
    assert board.displays[5] == segment_pattern(13)
    assert board.displays[2] == segment_pattern(BLANK)
    assert board.displays[1] == segment_pattern(4)
    assert board.displays[0] == segment_pattern(2)
    player.oxygen = 7
    update_display(board, player, 2)
    assert board.displays[3] == segment_pattern(BLANK)
    assert board.displays[1] == segment_pattern(0)
    assert board.displays[0] == segment_pattern(7)


def test_update_display_unknown_mode_leaves_displays():
    board = Board()
    before = list(board.displays)
    update_display(board, create_player(), 3)
    assert board.displays == before


def test_status_zero_without_fuel():
    board = Board()
    player = create_player()
    player.inventory[0] = Collectible.TOOLBOX
    world = default_map()
    assert status_mask(player, world) == 0
    assert update_status(board, player, world) == 0
    assert board.get_leds() == 0


def test_status_counts_vital_items():
    board = Board()
    player = create_player()
    world = default_map()
    world[5][0].storage[0] = Collectible.FUEL
    assert status_mask(player, world) == 0b1
    player.inventory[0] = Collectible.TOOLBOX
    player.inventory[1] = Collectible.FOOD
    world[4][1].storage[2] = Collectible.BLANKET
    assert update_status(board, player, world) == 0b111
    assert board.get_leds() == 0b111


def test_status_mask_is_contiguous_ones():
    player = create_player()
    world = default_map()
    world[5][0].storage[0] = Collectible.FUEL
    player.inventory = [Collectible.CLOTHING] * len(player.inventory)
    mask = status_mask(player, world)
    assert mask & (mask + 1) == 0
    assert bin(mask).count("1") == 1 + len(player.inventory)
    assert world[5][0].type == TileType.ENGINE_BAY