import pytest

from marsquest.game import STORAGE_SIZE, Collectible, TileType
from marsquest.tile import MAP_HEIGHT, MAP_WIDTH, create_tile, default_map


def test_storage_tile_holds_food_and_fuel():
    tile = create_tile(TileType.STORAGE)
    assert tile.type is TileType.STORAGE
    assert tile.interactable
    assert not tile.outside_rocket
    assert tile.storage == [Collectible.FOOD, Collectible.FUEL] + [Collectible.NONE] * 3


def test_landing_site_is_outside_with_toolbox():
    tile = create_tile(TileType.LANDING_SITE)
    assert tile.outside_rocket
    assert tile.storage[0] is Collectible.TOOLBOX
    assert len(tile.storage) == STORAGE_SIZE


@pytest.mark.parametrize(
    "kind, item",
    [
        (TileType.POND, Collectible.TARDIGRADES),
        (TileType.CAVE, Collectible.ALIEN_BONES),
        (TileType.CRATER, Collectible.SEDIMENTARY_LAYERS),
        (TileType.CANYON, Collectible.RSL_IMAGES),
    ],
)
def test_discovery_tiles_store_their_collectible(kind, item):
    tile = create_tile(kind)
    assert tile.collectible is item
    assert tile.storage[0] is item


def test_interaction_text_from_source():
    tile = create_tile(TileType.MOUNTAIN)
    assert tile.interaction_text == "You cannot pass a mountain, you must go around it."


def test_unknown_type_becomes_wasteland():
    tile = create_tile(99)
    assert tile.type is TileType.WASTELAND
    assert tile.interaction_text == create_tile(TileType.WASTELAND).interaction_text


def test_tiles_have_independent_storage():
    first = create_tile(TileType.STORAGE)
    second = create_tile(TileType.STORAGE)
    first.storage[2] = Collectible.MAP
    assert second.storage[2] is Collectible.NONE


def test_default_map_shape_and_key_rooms():
    world = default_map()
    assert len(world) == MAP_HEIGHT
    assert all(len(row) == MAP_WIDTH for row in world)
    assert world[3][0].type is TileType.CHAMBERS
    assert world[4][1].type is TileType.STORAGE
    assert world[5][0].type is TileType.ENGINE_BAY
    assert world[4][3].type is TileType.LANDING_SITE


def test_outside_flag_matches_tile_kind():
    for row in default_map():
        for tile in row:
            planet = TileType.LANDING_SITE <= tile.type <= TileType.MOUNTAIN
            assert tile.outside_rocket == planet


def test_default_map_tiles_are_fresh():
    first = default_map()
    second = default_map()
    first[4][1].storage[0] = Collectible.NONE
    assert second[4][1].storage[0] is Collectible.FOOD