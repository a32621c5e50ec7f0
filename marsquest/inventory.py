"""Moving items between the player's inventory and tile storage."""

from __future__ import annotations

from typing import Protocol

from .game import Collectible, collectible_name
from .player import Player
from .tile import Tile


class Output(Protocol):
    """Where game messages go: plain text, or text held on screen for a while."""

    def say(self, text: str) -> None: ...

    def say_hold(self, text: str) -> None: ...


def _is_essential(item: Collectible) -> bool:
    return Collectible.FOOD <= item <= Collectible.CLOTHING


def add_to_inventory(player: Player, item: Collectible, out: Output) -> bool:
    """Put an item in the first empty inventory slot; return False if full."""
    for slot, held in enumerate(player.inventory):
        if held == Collectible.NONE:
            player.inventory[slot] = Collectible(item)
            out.say(f"You have added: {collectible_name(item)} to your inventory.\n")
            return True
    out.say("Your inventory is full! Cannot add more items.\n")
    return False


def remove_from_inventory(player: Player, index: int, out: Output) -> Collectible:
    """Empty an inventory slot and return what was in it (NONE if nothing)."""
    if not 0 <= index < len(player.inventory):
        out.say("Invalid inventory slot.\n")
        return Collectible.NONE
    item = player.inventory[index]
    if item == Collectible.NONE:
        out.say(f"Inventory slot {index + 1} is already empty.\n")
        return Collectible.NONE
    out.say(f"Removed {collectible_name(item)} from inventory slot {index + 1}\n")
    player.inventory[index] = Collectible.NONE
    return item


def add_to_storage(storage_tile: Tile, item: Collectible, out: Output) -> bool:
    """Put an item in the first empty storage slot; return False if full."""
    for slot, held in enumerate(storage_tile.storage):
        if held == Collectible.NONE:
            storage_tile.storage[slot] = Collectible(item)
            out.say(f"Added {collectible_name(item)} to storage.\n")
            return True
    out.say("Storage is full! Cannot add more items.\n")
    return False


def add_fuel_enginebay(engine_bay_tile: Tile, item: Collectible, out: Output) -> bool:
    """Load fuel into the engine bay's first slot; return False if already fuelled."""
    if engine_bay_tile.storage[0] == Collectible.NONE:
        engine_bay_tile.storage[0] = Collectible(item)
        out.say(f"Added {collectible_name(item)} to engine bay.\n")
        return True
    out.say("Engine already has fuel, no need to add more.")
    return False


def remove_from_storage(storage_tile: Tile, index: int, out: Output) -> Collectible:
    """Empty a storage slot and return what was in it (NONE if nothing)."""
    if not 0 <= index < len(storage_tile.storage):
        out.say("Invalid storage slot.\n")
        return Collectible.NONE
    item = storage_tile.storage[index]
    if item == Collectible.NONE:
        out.say(f"Storage slot {index + 1} is already empty.\n")
        return Collectible.NONE
    out.say(f"Removed {collectible_name(item)} from storage slot {index + 1}\n")
    storage_tile.storage[index] = Collectible.NONE
    return item


def check_storage(storage_tile: Tile, out: Output) -> None:
    """List the essential items kept in a storage tile."""
    out.say(f"{storage_tile.interaction_text}\n")
    out.say_hold("You have stored the following items: \n")
    for slot, item in enumerate(storage_tile.storage, start=1):
        if item != Collectible.NONE and _is_essential(item):
            out.say(f"Slot {slot}: {collectible_name(item)}\n")