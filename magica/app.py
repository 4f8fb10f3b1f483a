"""The game loop: menu, army setup, rounds of battle, saving and loading."""

from __future__ import annotations

import argparse
import curses
from typing import Optional, Sequence

from .battle import DamageEvent, apply_damage, attack, winner
from .data import Unit
from .save_load import SaveFormatError, load_game, save_game
from .ui import (
    ENTER_KEYS,
    INSTRUCTIONS,
    NEW_GAME,
    PAIR_ARMY1,
    PAIR_ARMY2,
    PAIR_TEXT,
    QUIT,
    draw_army_window,
    input_army,
    main_menu,
    show_instructions,
    show_result,
)

SAVE_FILE = "save.txt"


def play_round(
    army1: Sequence[Unit], army2: Sequence[Unit]
) -> tuple[list[Unit], list[Unit], list[DamageEvent]]:
    """Both armies strike at once; return the survivors of each and the hits made."""
    damage_to_2, events1 = attack(army1, army2, 1)
    damage_to_1, events2 = attack(army2, army1, 2)
    return apply_damage(army1, damage_to_1), apply_damage(army2, damage_to_2), events1 + events2


def _write(win, y: int, x: int, text: str) -> None:
    try:
        win.addstr(y, x, text)
    except curses.error:
        pass


def _setup(stdscr) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    curses.start_color()
    curses.init_pair(PAIR_TEXT, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(PAIR_ARMY1, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(PAIR_ARMY2, curses.COLOR_CYAN, curses.COLOR_BLACK)


def _new_game(stdscr) -> tuple[list[Unit], list[Unit]]:
    max_y, max_x = stdscr.getmaxyx()
    input_w = max_x // 2
    input_h = max_y - 2
    input_win = curses.newwin(input_h, input_w, 1, 0)
    items_win = curses.newwin(input_h, max_x - input_w, 1, input_w)
    army1 = input_army(input_win, items_win, 1)
    army2 = input_army(input_win, items_win, 2)
    return army1, army2


def _load(stdscr) -> Optional[tuple[list[Unit], list[Unit]]]:
    try:
        return load_game(SAVE_FILE)
    except (OSError, SaveFormatError):
        pass
    max_y, max_x = stdscr.getmaxyx()
    height, width = 5, 30
    win = curses.newwin(height, width, max((max_y - height) // 2, 0),
                        max((max_x - width) // 2, 0))
    win.box()
    _write(win, 2, (width - 20) // 2, "Failed to load game!")
    win.refresh()
    curses.napms(1500)
    stdscr.clear()
    stdscr.refresh()
    return None


def _battle(stdscr, army1: list[Unit], army2: list[Unit]) -> None:
    max_y, max_x = stdscr.getmaxyx()
    half = max_x // 2
    height = max_y - 4
    left = curses.newwin(height, half, 2, 0)
    right = curses.newwin(height, max_x - half, 2, half)

    round_no = 1
    while True:
        draw_army_window(left, army1, True)
        draw_army_window(right, army2, False)
        _write(stdscr, 0, 2, f"ENTER = next round | S = save | Round {round_no}")
        stdscr.refresh()

        key = stdscr.getch()
        if key in (ord("s"), ord("S")):
            try:
                save_game(SAVE_FILE, army1, army2)
                _write(stdscr, 1, 2, "Game saved!")
            except OSError:
                _write(stdscr, 1, 2, "Could not save game!")
            stdscr.refresh()
            curses.napms(1000)
            continue
        if key not in ENTER_KEYS:
            continue

        army1, army2, _ = play_round(army1, army2)
        round_no += 1
        outcome = winner(len(army1), len(army2))
        if outcome is not None:
            show_result(stdscr, outcome)
            return


def run(stdscr) -> None:
    """Run the game on an initialised curses screen until the player quits."""
    _setup(stdscr)
    while True:
        choice = main_menu(stdscr)
        if choice == QUIT:
            return
        if choice == INSTRUCTIONS:
            show_instructions(stdscr)
            continue

        armies = _new_game(stdscr) if choice == NEW_GAME else _load(stdscr)
        if armies is None:
            continue
        stdscr.clear()
        stdscr.refresh()
        _battle(stdscr, *armies)
        stdscr.clear()
        stdscr.refresh()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="magica", description="Turn-based battle between two small armies."
    )
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())