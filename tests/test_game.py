import pytest

from marsquest.game import (
    Collectible,
    TileType,
    collectible_name,
    tile_map_symbol,
    tile_name,
)


def test_tile_names_from_source():
    assert tile_name(TileType.LANDING_SITE) == "LANDING SITE"
    assert tile_name(TileType.ENGINE_BAY) == "ENGINE_BAY"
    assert tile_name(TileType.EMPTY) == ""


def test_tile_name_accepts_plain_int():
    assert tile_name(15) == "MOUNTAIN"


def test_every_tile_except_empty_has_a_name():
    names = [tile_name(t) for t in TileType if t is not TileType.EMPTY]
    assert all(names)
    assert len(set(names)) == len(names)


def test_map_symbols_are_distinct():
    symbols = [tile_map_symbol(t) for t in TileType]
    assert len(set(symbols)) == len(symbols)
    assert tile_map_symbol(TileType.EMPTY) == "  "


def test_collectible_names():
    assert collectible_name(Collectible.NONE) == "Empty Slot"
    assert collectible_name(Collectible.FUEL) == "Fuel"
    assert collectible_name(Collectible.BOTTLE_OF_WATER) == "Bottle of Water"
    assert collectible_name(9) == collectible_name(Collectible.FUEL)


@pytest.mark.parametrize("func", [tile_name, tile_map_symbol, collectible_name])
def test_unknown_value_raises(func):
    with pytest.raises(ValueError):
        func(99)