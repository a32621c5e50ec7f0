"""What happens when the player interacts with the tile they stand on."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .game import STORAGE_SIZE, Collectible, TileType, collectible_name
from .inventory import (
    add_fuel_enginebay,
    add_to_inventory,
    add_to_storage,
    check_storage,
    remove_from_inventory,
    remove_from_storage,
)
from .player import Player
from .session import (
    SLOT_SWITCHES,
    SWITCH_BACK,
    SWITCH_EAST,
    SWITCH_NORTH,
    SWITCH_SOUTH,
    SWITCH_WEST,
    Session,
)
from .tile import Tile

LOOK_AROUND = "Do you want to look around the wasteland?\n"
SURVIVAL_SEED = 6942069

# LED progress pattern -> (step shown, percent chance of surviving the trip home).
_SURVIVAL = {(1 << n) - 1: (n, 98 if n == 10 else n * 10) for n in range(1, 11)}

# Wasteland spots with something to find: (x, y) -> (item, what is said).
_WASTELAND_FINDS = {
    (4, 0): (Collectible.MEDICAL_KIT, "a medical kit!"),
    (1, 7): (Collectible.MAP, "a MAP!"),
    (4, 2): (Collectible.SPARE_PARTS, "spare parts!"),
    (4, 6): (Collectible.TEDDY_BEAR, "a teddy bear!"),
    (4, 5): (Collectible.BLANKET, "a blanket!"),
    (4, 4): (Collectible.CLOTHING, "cozy clothing!"),
    (4, 3): (Collectible.OLD_ROVER_PARTS, "a cool rover arm!"),
}

# Tiles offering a yes/no discovery: question, answer, item found, held answer.
_DISCOVERIES = {
    TileType.POND: (
        "You see a large ice pond, maybe there is life? Discover?\n",
        "You look around and find some tardigrades! You collect them.\n",
        Collectible.TARDIGRADES,
        False,
    ),
    TileType.CAVE: (
        "You enter a dark cave, discover more?\n",
        "You found some alien bones and collected them.\n",
        Collectible.ALIEN_BONES,
        True,
    ),
    TileType.CRATER: (
        "You are in a crater, want to discover some more?\n",
        "You found interesting sediments and collected some samples.\n",
        Collectible.SEDIMENTARY_LAYERS,
        False,
    ),
    TileType.CANYON: (
        "You are in a large canyon, want to see what lies here?\n",
        "You find interesting RSL trails, you collect some images.\n",
        Collectible.RSL_IMAGES,
        False,
    ),
}


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _halved(value: int) -> int:
    return -(-value // 2) if value < 0 else value // 2


def _chosen_slot(switches: int) -> int:
    """Return the 1-based slot of the lowest slot switch that is on, or 0."""
    return next(
        (slot for slot, mask in enumerate(SLOT_SWITCHES, start=1) if switches & mask),
        0,
    )


def _wait_for_slot(session: Session) -> int:
    """Wait for all switches off, then a slot switch; return 0 if BACK cancels."""
    needs_reset = True
    while True:
        switches = session.read_switches()
        if not switches:
            needs_reset = False
        if needs_reset:
            continue
        if switches & SWITCH_BACK:
            session.say_hold("Cancelled.\n")
            return 0
        slot = _chosen_slot(switches)
        if slot:
            return slot


def _inventory_to_storage(session: Session, player: Player, tile: Tile) -> None:
    session.say_hold("Your inventory:\n")
    for slot, item in enumerate(player.inventory, start=1):
        name = collectible_name(item) if item != Collectible.NONE else "Empty"
        session.say(f"Slot {slot}: {name}\n")
    session.say(
        "Flip one slot switch (1-5) to choose the slot to transfer (BACK to cancel):\n"
    )
    slot = _wait_for_slot(session)
    if not slot:
        return
    item = player.inventory[slot - 1]
    if item == Collectible.NONE:
        session.say_hold("Inventory slot is empty.\n")
        return
    add_to_storage(tile, item, session)
    remove_from_inventory(player, slot - 1, session)


def _storage_to_inventory(session: Session, player: Player, tile: Tile) -> None:
    session.say_hold("Storage items:\n")
    for slot, item in enumerate(tile.storage, start=1):
        if item != Collectible.NONE:
            session.say(f"Slot {slot}: {collectible_name(item)}\n")
    session.say(
        "Flip one slot switch (1-5) to choose the storage slot to transfer"
        " to inventory (BACK to cancel):\n"
    )
    slot = _wait_for_slot(session)
    if not slot or slot > STORAGE_SIZE:
        return
    item = tile.storage[slot - 1]
    if item == Collectible.NONE:
        session.say_hold("Storage slot is empty.\n")
        return
    add_to_inventory(player, item, session)
    remove_from_storage(tile, slot - 1, session)


def _storage(session: Session, player: Player, tile: Tile) -> None:
    session.say("Storage Menu:\n")
    session.say("EAST: View storage items\n")
    session.say("WEST: Transfer item from inventory to storage\n")
    session.say("SOUTH: Transfer item from storage to inventory\n")
    session.say("NORTH: Exit storage\n")
    session.say("Press a switch to choose an action.\n")
    while True:
        switches = session.read_switches()
        if switches & SWITCH_BACK:
            session.say_hold("Exiting storage.\n")
            return
        if switches & SWITCH_EAST:
            session.say_hold("Storage items:\n")
            check_storage(tile, session)
            break
        if switches & SWITCH_WEST:
            _inventory_to_storage(session, player, tile)
            break
        if switches & SWITCH_SOUTH:
            _storage_to_inventory(session, player, tile)
            break
    session.wait_for_exit("Press NORTH (or BACK) to exit storage.\n")
    session.say("Exiting storage.\n")


def _cockpit(session: Session, player: Player, tile: Tile) -> None:
    session.say("Do you want to end the game and return to Earth?\n")
    if session.wait_for_yes_no():
        session.say("You have chosen to end the game.!\n")
        leds = session.board.get_leds()
        if leds == 0:
            session.say_hold(
                "You tried to leave, but the ship doesn't want to start..."
            )
            return
        chance = 0
        if leds in _SURVIVAL:
            step, chance = _SURVIVAL[leds]
            session.say(str(step))
        product = _to_int32(player.food * player.water * SURVIVAL_SEED)
        random_value = _truncated_mod(product, 100)
        session.say("Your chance to survive was: ")
        session.console.write_dec(chance)
        session.say("%\n")
        session.say("The random value was: ")
        session.console.write_dec(random_value)
        session.say("\n")
        if random_value <= chance:
            session.say("You survived the journey back to Earth! Congratulations!\n")
        else:
            session.say(
                "Unfortunately, you did not survive the journey back to Earth.\n"
            )
        session.running = False
    else:
        session.say("Continuing the game...\n")
    session.wait_for_exit(None)


def _cafeteria(session: Session, player: Player, tile: Tile) -> None:
    session.say("Grab some food?\n")
    if session.wait_for_yes_no():
        add_to_inventory(player, Collectible.FOOD, session)
    else:
        session.say_hold("You did not grab any food.\n")
    session.wait_for_exit(None)


def _engine_bay(session: Session, player: Player, tile: Tile) -> None:
    session.say("Add fuel to the engine bay?\n")
    if session.wait_for_yes_no():
        try:
            slot = player.inventory.index(Collectible.FUEL)
        except ValueError:
            session.say_hold("You don't have any fuel in your inventory.\n")
        else:
            add_fuel_enginebay(tile, Collectible.FUEL, session)
            check_storage(tile, session)
            remove_from_inventory(player, slot, session)
            session.say("You have now added fuel to the engine bay.\n")
    session.wait_for_exit(None)


def _laboratory(session: Session, player: Player, tile: Tile) -> None:
    session.say("You can interact with the laboratory.\n")
    session.say("EAST: Attempt to create WATER\n")
    session.say("WEST: Attempt to create FUEL\n")
    session.say("NORTH: Exit\n")
    while True:
        switches = session.read_switches()
        if switches & SWITCH_NORTH:
            break
        if switches & SWITCH_EAST:
            add_to_inventory(player, Collectible.BOTTLE_OF_WATER, session)
            session.say_hold("You created some WATER.\n")
            break
        if switches & SWITCH_WEST:
            add_to_inventory(player, Collectible.FUEL, session)
            session.say_hold("You created some FUEL.\n")
            break
    session.wait_for_exit(None)


def _airlock(session: Session, player: Player, tile: Tile) -> None:
    session.say_hold(
        "You are about to leave the ship, remember to keep an eye on the oxygen.\n"
    )
    session.wait_for_exit(None)


def _landing_site(session: Session, player: Player, tile: Tile) -> None:
    session.say_hold("You are right outside the ship now.\n")
    session.say("Do you want to look around the landing site?\n")
    if session.wait_for_yes_no():
        session.say(
            "After exploring the landing site, you find a toolbox with vital tools"
            " for fixing the ship!\n"
        )
        add_to_inventory(player, Collectible.TOOLBOX, session)
    session.wait_for_exit(None)


def _wasteland(session: Session, player: Player, tile: Tile) -> None:
    session.say_hold("You are in the harsh Martian wasteland.\n")
    find = _WASTELAND_FINDS.get((player.position_x, player.position_y))
    if find is not None:
        item, what = find
        session.say(LOOK_AROUND)
        if session.wait_for_yes_no():
            session.say(f"After looking around, you found {what}\n")
            add_to_inventory(player, item, session)
    session.wait_for_exit(None)


def _loose_soil(session: Session, player: Player, tile: Tile) -> None:
    session.say_hold("Be careful, don't get stuck here!\n")
    player.food = _halved(player.food)
    session.wait_for_exit(None)


def _sharp_rocks(session: Session, player: Player, tile: Tile) -> None:
    session.say_hold("Be careful of such sharp rocks, they may break something.\n")
    player.oxygen = _halved(player.oxygen)
    session.wait_for_exit(None)


def _discovery(session: Session, player: Player, tile: Tile) -> None:
    question, answer, item, held = _DISCOVERIES[tile.type]
    session.say(question)
    if session.wait_for_yes_no():
        if held:
            session.say_hold(answer)
        else:
            session.say(answer)
        add_to_inventory(player, item, session)
    session.wait_for_exit(None)


def _nothing(session: Session, player: Player, tile: Tile) -> None:
    session.say_hold("There is nothing to interact with here.\n")
    session.wait_for_exit(None)


_Handler = Callable[[Session, Player, Tile], None]

_HANDLERS: dict[TileType, _Handler] = {
    TileType.STORAGE: _storage,
    TileType.COCKPIT: _cockpit,
    TileType.CAFETERIA: _cafeteria,
    TileType.ENGINE_BAY: _engine_bay,
    TileType.LABORATORY: _laboratory,
    TileType.AIRLOCK: _airlock,
    TileType.LANDING_SITE: _landing_site,
    TileType.WASTELAND: _wasteland,
    TileType.LOOSE_SOIL: _loose_soil,
    TileType.SHARP_ROCKS: _sharp_rocks,
    **{kind: _discovery for kind in _DISCOVERIES},
}


def interact_with_tile(
    session: Session,
    player: Player,
    current_tile: Tile,
    world: Sequence[Sequence[Tile]],
) -> None:
    """Run the interaction offered by the tile the player stands on."""
    handler = _HANDLERS.get(current_tile.type, _nothing)
    handler(session, player, current_tile)