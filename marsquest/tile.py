"""Map tiles and the default world map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from .game import STORAGE_SIZE, Collectible, TileType

MAP_WIDTH = 10
MAP_HEIGHT = 10


def _empty_storage() -> list[Collectible]:
    return [Collectible.NONE] * STORAGE_SIZE


@dataclass
class Tile:
    """One square of the map."""

    type: TileType
    interaction_text: str
    outside_rocket: bool = False
    interactable: bool = False
    storage: list[Collectible] = field(default_factory=_empty_storage)
    collectible: Collectible = Collectible.NONE


class _Spec(NamedTuple):
    text: str
    outside_rocket: bool
    interactable: bool = False
    stored: tuple[Collectible, ...] = ()
    collectible: Collectible = Collectible.NONE


_SPECS = {
    TileType.STORAGE: _Spec(
        "You are in the storage room which holds your food and scientific samples"
        " - you can store your inventory here.",
        False,
        True,
        (Collectible.FOOD, Collectible.FUEL),
    ),
    TileType.CHAMBERS: _Spec(
        "You are in the personal chambers, this is the starting point.", False
    ),
    TileType.COCKPIT: _Spec(
        "You have entered the cockpit, you can now choose to end the game if you want.",
        False,
        True,
    ),
    TileType.CAFETERIA: _Spec(
        "You have entered the cafeteria, collect food here.",
        False,
        collectible=Collectible.FOOD,
    ),
    TileType.ENGINE_BAY: _Spec(
        "You are in the engine bay, you must fill the engine with fuel.", False
    ),
    TileType.LABORATORY: _Spec(
        "You are at the laboratory, you can experiment here.", False
    ),
    TileType.AIRLOCK: _Spec(
        "You entered the airlock, make sure to keep an eye on the oxygen when exiting.",
        False,
    ),
    TileType.LANDING_SITE: _Spec(
        "You are at the landing site, you can now explore the planet.",
        True,
        True,
        (Collectible.TOOLBOX,),
    ),
    TileType.WASTELAND: _Spec("You are in the Martian wasteland.", True),
    TileType.LOOSE_SOIL: _Spec(
        "Uh oh, it took a lot of energy to get out of the loose soil...", True
    ),
    TileType.POND: _Spec(
        "At the pond, you may find life.",
        True,
        stored=(Collectible.TARDIGRADES,),
        collectible=Collectible.TARDIGRADES,
    ),
    TileType.SHARP_ROCKS: _Spec(
        "Be careful! The sharp rocks destroyed one oxygen tank and now you lost"
        " half of your oxygen.",
        True,
    ),
    TileType.CAVE: _Spec(
        "Darkness engulf you, you have approached a cave.",
        True,
        stored=(Collectible.ALIEN_BONES,),
        collectible=Collectible.ALIEN_BONES,
    ),
    TileType.CRATER: _Spec(
        "You are now in a crater on Mars.",
        True,
        stored=(Collectible.SEDIMENTARY_LAYERS,),
        collectible=Collectible.SEDIMENTARY_LAYERS,
    ),
    TileType.CANYON: _Spec(
        "A canyon has many secrets, you may find one?",
        True,
        stored=(Collectible.RSL_IMAGES,),
        collectible=Collectible.RSL_IMAGES,
    ),
    TileType.MOUNTAIN: _Spec(
        "You cannot pass a mountain, you must go around it.", True
    ),
    TileType.EMPTY: _Spec("What are you even doing on an empty tile??", False),
}


def create_tile(tile_type: int) -> Tile:
    """Build a fresh tile of the given type; unknown types become wasteland."""
    try:
        kind = TileType(tile_type)
    except ValueError:
        kind = TileType.WASTELAND
    spec = _SPECS[kind]
    storage = _empty_storage()
    storage[: len(spec.stored)] = spec.stored
    return Tile(
        type=kind,
        interaction_text=spec.text,
        outside_rocket=spec.outside_rocket,
        interactable=spec.interactable,
        storage=storage,
        collectible=spec.collectible,
    )


_P = TileType.POND
_L = TileType.LOOSE_SOIL
_W = TileType.WASTELAND
_M = TileType.MOUNTAIN
_R = TileType.SHARP_ROCKS
_C = TileType.CANYON
_E = TileType.EMPTY

DEFAULT_LAYOUT: tuple[tuple[TileType, ...], ...] = (
    (_P, _L, _W, _W, _W, _P, _W, _W, _M, _P),
    (_R, _W, _W, _W, _W, _W, _P, _W, _M, _C),
    (_E, _E, _E, _W, _W, _W, _W, _W, _M, _C),
    (TileType.CHAMBERS, TileType.COCKPIT, _E, _W, _W, _W, _R, _P, _M, _W),
    (TileType.CAFETERIA, TileType.STORAGE, TileType.AIRLOCK, TileType.LANDING_SITE,
     _W, _W, _W, _W, _M, _L),
    (TileType.ENGINE_BAY, TileType.LABORATORY, _E, _W, _W, _L, _W, _W, _M, _W),
    (_E, _E, _E, _R, _W, _W, _W, _W, _R, _W),
    (_W, _W, _L, _W, _W, _C, _W, _W, _M, _W),
    (TileType.CRATER, _W, _W, _M, _M, _W, _M, _M, _M, _P),
    (TileType.CAVE, _W, _W, _M, _P, _W, _W, _C, _M, _P),
)


def default_map() -> list[list[Tile]]:
    """Return the world map as rows of fresh tiles, indexed [y][x]."""
    return [[create_tile(kind) for kind in row] for row in DEFAULT_LAYOUT]