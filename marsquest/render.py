"""Drawing the game: the text frame, the seven-segment stats and the LED progress."""

from __future__ import annotations

from collections.abc import Sequence

from .board import BLANK, Board
from .game import Collectible, TileType, collectible_name, tile_map_symbol, tile_name
from .player import Player
from .tile import Tile

PLAYER_SYMBOL = "\U0001F385"
RULE = "+------------------------------------------------+"

STORAGE_POS = (1, 4)
ENGINE_BAY_POS = (0, 5)

# Left-hand labels per display mode, for displays 5, 4, 3 and 2.
_LABELS = (
    (10, 11, 11, 12),  # "Food"
    (13, 2, 0, BLANK),  # "H2O"
    (0, 2, BLANK, BLANK),  # "O2"
)


def render_frame(
    player: Player, current_tile: Tile, world: Sequence[Sequence[Tile]]
) -> str:
    """Return the full screen: title, position, map, inventory and tile text."""
    lines = [
        "\x1B[2J\x1B[H",
        RULE + " \n",
        "|            MARS SURVIVAL GAME                  | \n",
        RULE + " \n",
        f"| Position: ({player.position_x}, {player.position_y})"
        "                               \n",
        f"| Location: {tile_name(current_tile.type)}"
        "                                     \n",
        RULE + " \n",
        "| Map:                                             \n",
    ]
    for y, row in enumerate(world):
        cells = "".join(
            f"[{PLAYER_SYMBOL}] "
            if (x, y) == (player.position_x, player.position_y)
            else f"[{tile_map_symbol(tile.type)}] "
            for x, tile in enumerate(row)
        )
        lines.append(f"| {cells}\n")
    lines.append("| Inventory:                                     | \n")
    for slot, item in enumerate(player.inventory, start=1):
        name = collectible_name(item) if item != Collectible.NONE else "Empty"
        lines.append(f"|   Slot {slot}: {name}                                    \n")
    lines.append(RULE + "\n")
    if current_tile.interaction_text:
        lines.append(f"| {current_tile.interaction_text}\n")
    lines.append(RULE + "\n")
    return "".join(lines)


def display_frame(session, player: Player, current_tile: Tile, world) -> None:
    """Clear the console and draw the frame."""
    session.say(render_frame(player, current_tile, world))


def _split_digits(value: int) -> tuple[int, int]:
    # Truncating division, so negative stats give negative digits.
    tens, ones = divmod(abs(value), 10)
    return (-tens, -ones) if value < 0 else (tens, ones)


def update_display(board: Board, player: Player, current_display: int) -> None:
    """Show food (0), water (1) or oxygen (2) on the six displays."""
    if current_display not in (0, 1, 2):
        return
    value = (player.food, player.water, player.oxygen)[current_display]
    for display, code in zip((5, 4, 3, 2), _LABELS[current_display]):
        board.set_display(display, code)
    tens, ones = _split_digits(value)
    board.set_display(1, tens)
    board.set_display(0, ones)


def _is_vital(item: int) -> bool:
    return Collectible.MEDICAL_KIT <= item <= Collectible.CLOTHING


def status_mask(player: Player, world: Sequence[Sequence[Tile]]) -> int:
    """Return the LED progress mask; 0 until the engine bay holds fuel."""
    engine_x, engine_y = ENGINE_BAY_POS
    storage_x, storage_y = STORAGE_POS
    if world[engine_y][engine_x].storage[0] != Collectible.FUEL:
        return 0
    lit = 1
    lit += sum(1 for item in player.inventory if _is_vital(item))
    lit += sum(1 for item in world[storage_y][storage_x].storage if _is_vital(item))
    return (1 << lit) - 1


def update_status(board: Board, player: Player, world) -> int:
    """Light the progress LEDs once fuel is loaded; return the mask shown."""
    mask = status_mask(player, world)
    if mask:
        board.set_leds(mask)
    return mask


__all__ = [
    "render_frame",
    "display_frame",
    "update_display",
    "status_mask",
    "update_status",
    "TileType",
]