"""Curses screens: main menu, item table, army panels, input forms and messages."""

from __future__ import annotations

import curses
import re
from contextlib import contextmanager
from typing import Iterator, Sequence

from .battle import InvalidItemError, SlotsError, make_unit, parse_items
from .data import ITEMS, MAX_ARMY, MAX_NAME, MAX_SLOTS, MIN_ARMY, SPRITE_HEIGHT, Unit

PAIR_TEXT = 1
PAIR_ARMY1 = 2
PAIR_ARMY2 = 3

MENU_OPTIONS = ("NEW GAME", "LOAD GAME", "INSTRUCTION", "QUIT")
NEW_GAME, LOAD_GAME, INSTRUCTIONS, QUIT = range(len(MENU_OPTIONS))
TITLE = "----- M A G I C A -----"

SWORD_ART = (
    "     _ ",
    "    (_)",
    "    |_|",
    "    |_|",
    "    |_|",
    "    |_|",
    "    |_|",
    "o=========o",
    *(["    | |"] * 16),
    "    \\ /",
)

UNIT_SPACING = 14
ENTER_KEYS = (10, 13, curses.KEY_ENTER)
INSTRUCTIONS_SIZE = (20, 60)
_ITEMS_INPUT_LIMIT = 255
_COUNT_INPUT_LIMIT = 5


def _attr(pair: int, bold: bool = False) -> int:
    return curses.color_pair(pair) | (curses.A_BOLD if bold else 0)


def _put(win, y: int, x: int, text: str, attr: int = 0) -> None:
    """Write text, ignoring anything that falls outside the window."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def _reset(win) -> None:
    win.erase()
    win.box()


@contextmanager
def _echoing() -> Iterator[None]:
    curses.echo()
    try:
        yield
    finally:
        curses.noecho()


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def item_lines() -> list[str]:
    """One descriptive line for every item in the catalogue."""
    return [
        f"- {item.name} (ATT: {item.att}, DEF: {item.defence}, SLOTS:{item.slots})"
        for item in ITEMS
    ]


def unit_lines(unit: Unit) -> list[str]:
    """The rows drawn for a unit: sprite, name, health and items."""
    lines = list(unit.sprite[:SPRITE_HEIGHT])
    lines += [unit.name, f"HP: {unit.hp}", f"1: {unit.item1.name}"]
    if unit.item2 is not None:
        lines.append(f"2: {unit.item2.name}")
    return lines


def instruction_lines() -> list[tuple[int, int, str, bool]]:
    """The instruction screen as (row, column, text, bold) entries."""
    return [
        (1, 2, "INSTRUCTIONS", True),
        (3, 2, "- Enter unit name and items.", False),
        (4, 2, f"- Max 2 items per unit. Slot limit: {MAX_SLOTS}.", False),
        (5, 2, "- Items shown in right panel during input.", False),
        (7, 2, "During battle:", False),
        (8, 4, "ENTER  - advance to next round", False),
        (9, 4, "S      - save game to file", False),
        (10, 4, "Colors - red = army 1, blue = army 2", False),
        (12, 2, "To start a new game, return to menu.", False),
        (13, 2, "To load previous save, choose 'Load Game'.", False),
        (15, 2, "Press any key to return to menu...", False),
    ]


def result_message(outcome: int) -> str:
    """Text announcing the end of a battle: 1 or 2 for a winner, 0 for a draw."""
    messages = {1: "WINNER: TEAM 1", 2: "WINNER: TEAM 2", 0: "NO WINNER"}
    try:
        return messages[outcome]
    except KeyError:
        raise ValueError(f"unknown outcome: {outcome!r}") from None


def main_menu(stdscr) -> int:
    """Show the main menu and return the index of the chosen option."""
    height, width = stdscr.getmaxyx()
    menu_height, menu_width = 25, 50
    start_y = (height - menu_height) // 2
    start_x = (width - menu_width) // 2
    menu = curses.newwin(menu_height, menu_width, max(start_y, 0), max(start_x, 0))
    stdscr.refresh()

    option = 0
    last = len(MENU_OPTIONS) - 1
    row = (menu_height - len(MENU_OPTIONS)) // 2
    while True:
        _reset(menu)
        for i, line in enumerate(SWORD_ART):
            _put(stdscr, start_y + i, start_x - 20, line)
        _put(menu, 1, (menu_width - len(TITLE)) // 2, TITLE, _attr(PAIR_ARMY1, True))
        for i, label in enumerate(MENU_OPTIONS):
            attr = _attr(PAIR_ARMY1, True) if i == option else _attr(PAIR_TEXT)
            _put(menu, row + i, (menu_width - len(label)) // 2, label, attr)
        menu.refresh()

        key = stdscr.getch()
        if key in (curses.KEY_UP, ord("w"), ord("W")) and option > 0:
            option -= 1
        elif key in (curses.KEY_DOWN, ord("s"), ord("S")) and option < last:
            option += 1
        elif key in ENTER_KEYS:
            return option


def items_table(win) -> None:
    """Draw the item catalogue in a window."""
    _reset(win)
    _put(win, 1, 2, "Items:")
    for row, line in enumerate(item_lines(), start=3):
        _put(win, row, 2, line)
    win.refresh()


def draw_army_window(win, army: Sequence[Unit], is_left: bool) -> None:
    """Draw an army side by side; the left army faces right, so it is reversed."""
    _reset(win)
    height, width = win.getmaxyx()
    start_x = (width - UNIT_SPACING * len(army)) // 2
    start_y = (height - (SPRITE_HEIGHT + 6)) // 2
    attr = _attr(PAIR_ARMY1 if is_left else PAIR_ARMY2, True)
    ordered = list(reversed(army)) if is_left else list(army)
    for i, unit in enumerate(ordered):
        x = start_x + i * UNIT_SPACING
        for row, line in enumerate(unit_lines(unit)):
            _put(win, start_y + row, x, line, attr)
    win.refresh()


def input_army(input_win, items_win, side: int) -> list[Unit]:
    """Ask the player for the units of one army and return them."""
    attr = _attr(PAIR_ARMY1 if side == 1 else PAIR_ARMY2, True)
    height, width = input_win.getmaxyx()
    prompt_row, message_row = height // 2 - 1, height // 2 + 1

    def ask(prompt: str, column: int, limit: int) -> str:
        _reset(input_win)
        items_table(items_win)
        _put(input_win, prompt_row, column, prompt, attr)
        input_win.refresh()
        with _echoing():
            raw = input_win.getstr(prompt_row, column + len(prompt), limit)
        return raw.decode("utf-8", errors="replace")

    def complain(message: str, column: int) -> None:
        _put(input_win, message_row, column, message)
        input_win.refresh()
        input_win.getch()

    while True:
        count = _atoi(ask(f"Enter unit count {MIN_ARMY}-{MAX_ARMY}: ", (width - 22) // 2,
                          _COUNT_INPUT_LIMIT))
        if MIN_ARMY <= count <= MAX_ARMY:
            break
        complain("Invalid number. Press any key...", (width - 30) // 2)

    army = []
    for position in range(count):
        while True:
            name = ask(f"Enter name for unit {position + 1}: ", (width - 26) // 2, MAX_NAME)
            if name:
                break
            complain("Name cannot be empty. Press any key...", (width - 30) // 2)

        while True:
            text = ask(f"Enter item1 [item2] for {name}: ", (width - 32) // 2,
                       _ITEMS_INPUT_LIMIT)
            try:
                item1, item2 = parse_items(text)
            except InvalidItemError:
                complain("Invalid item(s). Press any key...", (width - 34) // 2)
            except SlotsError:
                complain("Too many slots. Press any key...", (width - 34) // 2)
            else:
                break

        army.append(make_unit(name, item1, item2, position))
    return army


def show_result(stdscr, outcome: int) -> None:
    """Announce the result of a battle and wait for Enter."""
    max_y, max_x = stdscr.getmaxyx()
    height, width = 7, 30
    win = curses.newwin(height, width, max((max_y - height) // 2, 0),
                        max((max_x - width) // 2, 0))
    win.box()
    message = result_message(outcome)
    pair = {1: PAIR_ARMY1, 2: PAIR_ARMY2}.get(outcome, PAIR_TEXT)
    column = (width - 16) // 2 if outcome in (1, 2) else (width - 10) // 2
    _put(win, 2, column, message, _attr(pair, True))
    _put(win, 4, (width - 22) // 2, "Press ENTER to exit...")
    win.refresh()
    while win.getch() not in ENTER_KEYS:
        pass
    win.erase()
    win.refresh()


def show_instructions(stdscr) -> None:
    """Show the instruction screen until a key is pressed."""
    height, width = INSTRUCTIONS_SIZE
    max_y, max_x = stdscr.getmaxyx()
    win = curses.newwin(height, width, max((max_y - height) // 2, 0),
                        max((max_x - width) // 2, 0))
    win.box()
    for row, column, text, bold in instruction_lines():
        _put(win, row, column, text, curses.A_BOLD if bold else 0)
    win.refresh()
    win.getch()
    stdscr.clear()
    stdscr.refresh()