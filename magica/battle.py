"""Item lookup, unit creation and the combat rules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .data import DEFAULT_SPRITE, ITEMS, MAX_NAME, MAX_SLOTS, START_HP, Item, Unit


class BattleError(Exception):
    """Base error for invalid game input."""


class InvalidItemError(BattleError):
    """An item name that is not in the catalogue."""


class SlotsError(BattleError):
    """Items that need more slots than a unit has."""


@dataclass(frozen=True)
class DamageEvent:
    """One hit dealt during a round."""

    army: int
    attacker_name: str
    item: str
    defender_name: str
    damage: int
    item_index: int


_ITEMS_BY_NAME = {item.name: item for item in ITEMS}


def find_item(name: str) -> Item:
    """Return the catalogue item with this exact name."""
    try:
        return _ITEMS_BY_NAME[name]
    except KeyError:
        raise InvalidItemError(f"unknown item: {name!r}") from None


def _check_slots(item1: Item, item2: Optional[Item]) -> None:
    slots = item1.slots + (item2.slots if item2 else 0)
    if slots > MAX_SLOTS:
        raise SlotsError(f"items need {slots} slots, at most {MAX_SLOTS} allowed")


def parse_items(text: str) -> tuple[Item, Optional[Item]]:
    """Parse "item1 [item2]" into catalogue items; extra words are ignored."""
    words = text.split()
    if not words:
        raise InvalidItemError("no item given")
    item1 = find_item(words[0])
    item2 = find_item(words[1]) if len(words) > 1 else None
    _check_slots(item1, item2)
    return item1, item2


def make_unit(name: str, item1: Item, item2: Optional[Item], position: int) -> Unit:
    """Create a fresh unit at full health."""
    name = name[:MAX_NAME]
    if not name:
        raise ValueError("unit name cannot be empty")
    _check_slots(item1, item2)
    return Unit(
        name=name,
        item1=item1,
        item2=item2,
        hp=START_HP,
        y=position,
        sprite=DEFAULT_SPRITE,
    )


def attack(
    attackers: Sequence[Unit], defenders: Sequence[Unit], army_id: int
) -> tuple[list[int], list[DamageEvent]]:
    """Let every attacker strike; return damage per defender and the hits made."""
    damage = [0] * len(defenders)
    events: list[DamageEvent] = []
    for position, attacker in enumerate(attackers):
        for item_index, item in enumerate((attacker.item1, attacker.item2)):
            if item is None or item.range < position:
                continue
            for target, defender in enumerate(defenders[: item.radius + 1]):
                hit = max(1, item.att - defender.total_defence())
                damage[target] += hit
                events.append(
                    DamageEvent(
                        army=army_id,
                        attacker_name=attacker.name,
                        item=item.name,
                        defender_name=defender.name,
                        damage=hit,
                        item_index=item_index,
                    )
                )
    return damage, events


def apply_damage(army: Sequence[Unit], damage: Sequence[int]) -> list[Unit]:
    """Return the surviving units, in order, with their health reduced."""
    survivors = []
    for unit, hit in zip(army, damage):
        hp = unit.hp - hit
        if hp > 0:
            survivors.append(replace(unit, hp=hp))
    return survivors


def winner(army1_count: int, army2_count: int) -> Optional[int]:
    """None while both armies stand; else 1 or 2 for the winner, 0 for a draw."""
    if army1_count and army2_count:
        return None
    if not army1_count and not army2_count:
        return 0
    return 2 if not army1_count else 1