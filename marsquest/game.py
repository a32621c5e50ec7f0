"""Tile and collectible kinds, with their display names."""

from __future__ import annotations

from enum import IntEnum

INVENTORY_SIZE = 6
STORAGE_SIZE = 5


class TileType(IntEnum):
    """Kinds of map tile, rocket rooms first, then the planet surface."""

    STORAGE = 0
    CHAMBERS = 1
    COCKPIT = 2
    CAFETERIA = 3
    ENGINE_BAY = 4
    LABORATORY = 5
    AIRLOCK = 6
    LANDING_SITE = 7
    WASTELAND = 8
    LOOSE_SOIL = 9
    POND = 10
    SHARP_ROCKS = 11
    CAVE = 12
    CRATER = 13
    CANYON = 14
    MOUNTAIN = 15
    EMPTY = 16


class Collectible(IntEnum):
    """Items that can be carried or stored; NONE marks an empty slot."""

    NONE = 0
    TARDIGRADES = 1
    SEDIMENTARY_LAYERS = 2
    RSL_IMAGES = 3
    ALIEN_BONES = 4
    OLD_ROVER_PARTS = 5
    ICE = 6
    FOOD = 7
    BOTTLE_OF_WATER = 8
    FUEL = 9
    MEDICAL_KIT = 10
    TOOLBOX = 11
    MAP = 12
    SPARE_PARTS = 13
    TEDDY_BEAR = 14
    BLANKET = 15
    CLOTHING = 16


_TILE_NAMES = {
    TileType.STORAGE: "STORAGE",
    TileType.CHAMBERS: "CHAMBERS",
    TileType.COCKPIT: "COCKPIT",
    TileType.CAFETERIA: "CAFETERIA",
    TileType.ENGINE_BAY: "ENGINE_BAY",
    TileType.LABORATORY: "LABORATORY",
    TileType.AIRLOCK: "AIRLOCK",
    TileType.LANDING_SITE: "LANDING SITE",
    TileType.WASTELAND: "WASTELAND",
    TileType.LOOSE_SOIL: "LOOSE SOIL",
    TileType.POND: "POND",
    TileType.SHARP_ROCKS: "SHARP ROCKS",
    TileType.CAVE: "CAVE",
    TileType.CRATER: "CRATER",
    TileType.CANYON: "CANYON",
    TileType.MOUNTAIN: "MOUNTAIN",
    TileType.EMPTY: "",
}

# Each symbol occupies two terminal columns; some carry a padding space.
_TILE_SYMBOLS = {
    TileType.STORAGE: "\U0001F4E6",
    TileType.CHAMBERS: "\U0001F6CF\uFE0F ",
    TileType.COCKPIT: "\U0001F680",
    TileType.CAFETERIA: "\U0001F961",
    TileType.ENGINE_BAY: "\U0001F4A8",
    TileType.LABORATORY: "\U0001F9EA",
    TileType.AIRLOCK: "\U0001F6AA",
    TileType.LANDING_SITE: "\U0001F4CD",
    TileType.WASTELAND: "\U0001F3DC\uFE0F ",
    TileType.LOOSE_SOIL: "\u23F3",
    TileType.POND: "\U0001F9CA",
    TileType.SHARP_ROCKS: "\U0001FAA8 ",
    TileType.CAVE: "\U0001F987",
    TileType.CRATER: "\U0001F573\uFE0F ",
    TileType.CANYON: "\U0001F9D7",
    TileType.MOUNTAIN: "\u26F0\uFE0F ",
    TileType.EMPTY: "  ",
}

_COLLECTIBLE_NAMES = {
    Collectible.NONE: "Empty Slot",
    Collectible.TARDIGRADES: "Tardigrades",
    Collectible.SEDIMENTARY_LAYERS: "Sedimentary Layers",
    Collectible.RSL_IMAGES: "RSL Images",
    Collectible.ALIEN_BONES: "Alien Bones",
    Collectible.OLD_ROVER_PARTS: "Old Rover Parts",
    Collectible.ICE: "Ice",
    Collectible.FOOD: "Food",
    Collectible.BOTTLE_OF_WATER: "Bottle of Water",
    Collectible.FUEL: "Fuel",
    Collectible.MEDICAL_KIT: "Medical kit",
    Collectible.TOOLBOX: "Toolbox",
    Collectible.MAP: "Map",
    Collectible.SPARE_PARTS: "Spare parts",
    Collectible.TEDDY_BEAR: "Teddy bear",
    Collectible.BLANKET: "Blanket",
    Collectible.CLOTHING: "Clothing",
}


def tile_name(tile_type: int) -> str:
    """Return the location name shown for a tile type."""
    return _TILE_NAMES[TileType(tile_type)]


def tile_map_symbol(tile_type: int) -> str:
    """Return the map symbol drawn for a tile type."""
    return _TILE_SYMBOLS[TileType(tile_type)]


def collectible_name(item: int) -> str:
    """Return the display name of a collectible."""
    return _COLLECTIBLE_NAMES[Collectible(item)]