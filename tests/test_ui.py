from unittest import mock

import pytest

from magica.battle import find_item
from magica.data import DEFAULT_SPRITE, ITEMS, MAX_SLOTS, SPRITE_HEIGHT, START_HP, Unit
from magica.ui import (
    draw_army_window,
    input_army,
    instruction_lines,
    item_lines,
    items_table,
    result_message,
    unit_lines,
)


class FakeWindow:
    def __init__(self, height=30, width=80, inputs=()):
        self.size = (height, width)
        self.inputs = list(inputs)
        self.writes = []
        self.history = []
        self.keys = 0

    def getmaxyx(self):
        return self.size

    def erase(self):
        self.writes.clear()

    def box(self, *args):
        pass

    def refresh(self):
        pass

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text))
        self.history.append(text)

    def getstr(self, *args):
        return self.inputs.pop(0).encode()

    def getch(self):
        self.keys += 1
        return ord("x")


@pytest.fixture
def fake_curses():
    with mock.patch("curses.color_pair", return_value=0) as color_pair, \
            mock.patch("curses.echo"), mock.patch("curses.noecho"):
        yield color_pair


def test_item_lines_cover_catalogue():
    lines = item_lines()
    assert len(lines) == len(ITEMS)
    for line, item in zip(lines, ITEMS):
        assert line.startswith(f"- {item.name} (")


def test_item_lines_first_entry():
    assert item_lines()[0] == "- wand (ATT: 12, DEF: 4, SLOTS:1)"


def test_unit_lines_with_two_items():
    unit = Unit("hero", find_item("sword"), find_item("shield"))
    lines = unit_lines(unit)
    assert lines[:SPRITE_HEIGHT] == list(DEFAULT_SPRITE)
    assert lines[SPRITE_HEIGHT:] == ["hero", f"HP: {START_HP}", "1: sword", "2: shield"]


def test_unit_lines_with_one_item():
    lines = unit_lines(Unit("solo", find_item("cannon"), hp=7))
    assert len(lines) == SPRITE_HEIGHT + 3
    assert "HP: 7" in lines
    assert not any(line.startswith("2:") for line in lines)


@pytest.mark.parametrize(
    "outcome, text",
    [(1, "WINNER: TEAM 1"), (2, "WINNER: TEAM 2"), (0, "NO WINNER")],
)
def test_result_message(outcome, text):
    assert result_message(outcome) == text


def test_result_message_unknown_outcome():
    with pytest.raises(ValueError):
        result_message(5)


def test_instruction_lines_content():
    entries = instruction_lines()
    texts = [text for _, _, text, _ in entries]
    assert texts[0] == "INSTRUCTIONS"
    assert any(f"Slot limit: {MAX_SLOTS}." in text for text in texts)
    rows = [row for row, _, _, _ in entries]
    assert rows == sorted(rows)


def test_items_table_draws_every_item():
    win = FakeWindow()
    items_table(win)
    texts = [text for _, _, text in win.writes]
    assert texts[0] == "Items:"
    assert texts[1:] == item_lines()


@pytest.mark.parametrize("is_left", [True, False])
def test_draw_army_window_order(fake_curses, is_left):
    army = [Unit(name, find_item("sword")) for name in ("first", "second", "third")]
    win = FakeWindow()
    draw_army_window(win, army, is_left)
    names = {unit.name for unit in army}
    drawn = sorted((x, text) for _, x, text in win.writes if text in names)
    order = [text for _, text in drawn]
    expected = [unit.name for unit in army]
    assert order == (expected[::-1] if is_left else expected)
    fake_curses.assert_called_with(2 if is_left else 3)


def test_input_army_collects_units(fake_curses):
    input_win = FakeWindow(
        inputs=["9", "2", "alpha", "sword shield", "", "beta", "nope", "cannon axe", "wand"]
    )
    items_win = FakeWindow()
    army = input_army(input_win, items_win, 1)
    assert [unit.name for unit in army] == ["alpha", "beta"]
    assert army[0].item1 == find_item("sword")
    assert army[0].item2 == find_item("shield")
    assert army[1].item1 == find_item("wand")
    assert army[1].item2 is None
    assert [unit.y for unit in army] == [0, 1]
    assert all(unit.hp == START_HP for unit in army)
    assert input_win.inputs == []
    assert input_win.keys == 4
    for message in (
        "Invalid number. Press any key...",
        "Name cannot be empty. Press any key...",
        "Invalid item(s). Press any key...",
        "Too many slots. Press any key...",
    ):
        assert message in input_win.history
    assert "Items:" in items_win.history


def test_input_army_count_reads_leading_digits(fake_curses):
    input_win = FakeWindow(inputs=["1 unit", "gamma", "dagger"])
    army = input_army(input_win, FakeWindow(), 2)
    assert [unit.name for unit in army] == ["gamma"]
    assert input_win.keys == 0
    fake_curses.assert_called_with(3)