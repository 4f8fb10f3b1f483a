"""Game constants, the item catalogue and the unit record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MAX_NAME = 100
MIN_ARMY = 1
MAX_ARMY = 5
MAP_WIDTH = 40
MAP_HEIGHT = 20
SPRITE_HEIGHT = 4
MAX_SLOTS = 2
START_HP = 100


@dataclass(frozen=True)
class Item:
    """A piece of equipment a unit can carry."""

    name: str
    att: int
    defence: int
    slots: int
    range: int
    radius: int


ITEMS: tuple[Item, ...] = (
    # one slot
    Item("wand", att=12, defence=4, slots=1, range=4, radius=2),
    Item("fireball", att=11, defence=0, slots=1, range=3, radius=3),
    Item("sword", att=9, defence=2, slots=1, range=0, radius=0),
    Item("spear", att=6, defence=1, slots=1, range=1, radius=1),
    Item("dagger", att=4, defence=0, slots=1, range=0, radius=0),
    Item("rock", att=3, defence=0, slots=1, range=2, radius=1),
    Item("armor", att=2, defence=7, slots=1, range=0, radius=0),
    Item("shield", att=2, defence=6, slots=1, range=0, radius=0),
    Item("gloves", att=1, defence=4, slots=1, range=0, radius=0),
    Item("helmet", att=1, defence=5, slots=1, range=0, radius=0),
    Item("aura", att=0, defence=8, slots=1, range=0, radius=0),
    # two slots
    Item("cannon", att=12, defence=0, slots=2, range=4, radius=4),
    Item("axe", att=10, defence=2, slots=2, range=1, radius=1),
    Item("hammer", att=8, defence=2, slots=2, range=1, radius=2),
    Item("crossbow", att=5, defence=1, slots=2, range=3, radius=0),
    Item("slingshot", att=2, defence=0, slots=2, range=2, radius=1),
)

DEFAULT_SPRITE: tuple[str, ...] = (
    "  O  ",
    " /|\\ ",
    " / \\ ",
    "     ",
)


@dataclass
class Unit:
    """A fighter in an army."""

    name: str
    item1: Item
    item2: Optional[Item] = None
    hp: int = START_HP
    y: int = 0
    sprite: tuple[str, ...] = DEFAULT_SPRITE
    color_pair: int = 0

    def items(self) -> tuple[Item, ...]:
        return (self.item1,) if self.item2 is None else (self.item1, self.item2)

    def total_defence(self) -> int:
        """Sum of the defence of the carried items."""
        return sum(item.defence for item in self.items())

    def slots(self) -> int:
        """Number of slots taken by the carried items."""
        return sum(item.slots for item in self.items())