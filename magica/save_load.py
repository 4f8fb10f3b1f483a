"""Saving and loading the state of a battle as plain text."""

from __future__ import annotations

import os
from typing import Sequence, Union

from .data import DEFAULT_SPRITE, ITEMS, Unit


class SaveFormatError(ValueError):
    """A save file that cannot be read back."""


def _unit_line(unit: Unit) -> str:
    id1 = ITEMS.index(unit.item1)
    id2 = ITEMS.index(unit.item2) if unit.item2 is not None else -1
    return f"{unit.name} {unit.hp} {id1} {id2}\n"


def save_game(
    path: Union[str, os.PathLike], army1: Sequence[Unit], army2: Sequence[Unit]
) -> None:
    """Write both armies to a save file."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(army1)} {len(army2)}\n")
        for unit in (*army1, *army2):
            f.write(_unit_line(unit))


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise SaveFormatError(f"expected a number, got {token!r}") from None


def _read_units(tokens, count: int) -> list[Unit]:
    units = []
    for position in range(count):
        try:
            name, hp, id1, id2 = (next(tokens) for _ in range(4))
        except RuntimeError:
            raise SaveFormatError("save file ends too early") from None
        hp_value, first, second = _to_int(hp), _to_int(id1), _to_int(id2)
        if not 0 <= first < len(ITEMS) or not -1 <= second < len(ITEMS):
            raise SaveFormatError(f"bad item index for unit {name!r}")
        units.append(
            Unit(
                name=name,
                item1=ITEMS[first],
                item2=ITEMS[second] if second >= 0 else None,
                hp=hp_value,
                y=position,
                sprite=DEFAULT_SPRITE,
            )
        )
    return units


def _take(tokens, n: int) -> list[str]:
    taken = []
    for _ in range(n):
        token = next(tokens, None)
        if token is None:
            raise SaveFormatError("save file ends too early")
        taken.append(token)
    return taken


def load_game(path: Union[str, os.PathLike]) -> tuple[list[Unit], list[Unit]]:
    """Read both armies back from a save file."""
    with open(path, encoding="utf-8") as f:
        tokens = iter(f.read().split())
    count1, count2 = (_to_int(t) for t in _take(tokens, 2))
    if count1 < 0 or count2 < 0:
        raise SaveFormatError("negative army size")
    armies = []
    for count in (count1, count2):
        units = []
        for position in range(count):
            name, hp, id1, id2 = _take(tokens, 4)
            hp_value, first, second = _to_int(hp), _to_int(id1), _to_int(id2)
            if not 0 <= first < len(ITEMS) or not -1 <= second < len(ITEMS):
                raise SaveFormatError(f"bad item index for unit {name!r}")
            units.append(
                Unit(
                    name=name,
                    item1=ITEMS[first],
                    item2=ITEMS[second] if second >= 0 else None,
                    hp=hp_value,
                    y=position,
                    sprite=DEFAULT_SPRITE,
                )
            )
        armies.append(units)
    return armies[0], armies[1]