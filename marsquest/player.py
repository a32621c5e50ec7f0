"""The player: position, vital stats and inventory."""

from __future__ import annotations

from dataclasses import dataclass, field

from .game import INVENTORY_SIZE, Collectible

START_X = 0
START_Y = 3
MAX_STAT = 99


def _empty_inventory() -> list[Collectible]:
    return [Collectible.NONE] * INVENTORY_SIZE


@dataclass
class Player:
    """A player on the map, starting in the chambers with full stats."""

    position_x: int = START_X
    position_y: int = START_Y
    food: int = MAX_STAT
    oxygen: int = MAX_STAT
    water: int = MAX_STAT
    inventory: list[Collectible] = field(default_factory=_empty_inventory)


def create_player() -> Player:
    """Return a new player at the starting position."""
    return Player()