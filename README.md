# magica

A small turn-based battle game for the terminal. Two players each assemble an
army of one to five units and give every unit one or two items. The armies then
trade blows round by round until one side, or both, is wiped out.

## Installing

```
pip install .
```

The game draws with Python's `curses` module. It needs a terminal that curses
supports.

## Playing

```
magica
```

The main menu offers:

- **NEW GAME**: both players enter their armies.
- **LOAD GAME**: continue from `save.txt` in the current directory. If the file
  is missing or cannot be read, a "Failed to load game!" message appears and the
  menu comes back.
- **INSTRUCTION**: a short help screen.
- **QUIT**

Move through the menu with the arrow keys or `w`/`s`. Confirm with Enter.

While you enter an army, the game asks for:

- the number of units (1 to 5),
- a name for each unit,
- one or two item names separated by a space, for example `sword shield`.

Each unit has two slots, and some items take both slots on their own. The list
of items, with their attack, defence and slot costs, is shown beside the input
panel. Unknown item names and items that need too many slots are refused, and
the question is asked again.

During battle:

- **Enter**: play the next round.
- **S**: save the game to `save.txt`.

Army 1 is drawn in red and army 2 in cyan. When the battle ends, a window names
the winning team, or shows "NO WINNER" if both armies fell in the same round.
Press Enter to go back to the menu.

## How a round works

Every unit starts with 100 HP. In a round, each attacking unit uses each of its
items. An item is used only if the attacker's position in its line, counted
from 0 at the front, is no greater than the item's range.

When an item is used, it hits the defenders at positions 0 up to its radius.
The damage is the item's attack minus the defender's total defence, and never
less than 1.

Both armies attack at the same time. Afterwards, units with no HP left are
removed and the survivors close ranks.

## Using the engine from Python

The rules in `magica.battle` do not need a terminal:

```python
from magica.battle import make_unit, parse_items, attack, apply_damage, winner

item1, item2 = parse_items("wand shield")
knight = make_unit("knight", item1, item2, 0)
```

The main functions are:

- `find_item(name)` returns an `Item` from the catalogue in `magica.data.ITEMS`.
  It raises `InvalidItemError` for an unknown name.
- `parse_items(text)` reads `"item1 [item2]"`. It raises `InvalidItemError` or
  `SlotsError`, both subclasses of `BattleError`.
- `attack(attackers, defenders, army_id)` returns the damage for each defender
  and a list of `DamageEvent` hits.
- `apply_damage(army, damage)` returns the surviving units with reduced HP.
- `winner(army1_count, army2_count)` returns `None` while both armies stand.
  Otherwise it returns `1` or `2` for the winning army, or `0` for a draw.

`magica.app.play_round(army1, army2)` plays one full round for both sides. It
returns the two surviving armies and all the hits made.

## Save files

`magica.save_load.save_game(path, army1, army2)` writes a plain-text file:

- the first line holds the two army sizes,
- then one line per unit: name, HP, the index of the first item and the index
  of the second item (`-1` if there is none).

`magica.save_load.load_game(path)` reads the two armies back. It raises
`SaveFormatError` for a file it cannot make sense of.

The file is read as words separated by spaces. A unit whose name contains a
space therefore cannot be loaded correctly.

## Tests

```
pip install .[test]
pytest
```