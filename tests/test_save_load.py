import pytest

from magica.battle import find_item, make_unit
from magica.data import ITEMS
from magica.save_load import SaveFormatError, load_game, save_game


@pytest.fixture
def armies():
    army1 = [
        make_unit("alpha", find_item("sword"), find_item("shield"), 0),
        make_unit("beta", find_item("cannon"), None, 1),
    ]
    army2 = [make_unit("gamma", find_item("wand"), None, 0)]
    army2[0].hp = 42
    return army1, army2


def test_round_trip(tmp_path, armies):
    path = tmp_path / "save.txt"
    save_game(path, *armies)
    loaded1, loaded2 = load_game(path)
    assert loaded1 == armies[0]
    assert loaded2 == armies[1]


def test_file_format(tmp_path, armies):
    path = tmp_path / "save.txt"
    save_game(path, *armies)
    lines = path.read_text().splitlines()
    assert lines[0] == "2 1"
    sword, shield = find_item("sword"), find_item("shield")
    assert lines[1] == f"alpha 100 {ITEMS.index(sword)} {ITEMS.index(shield)}"
    assert lines[2].endswith(" -1")
    assert len(lines) == 4


def test_positions_restored(tmp_path):
    path = tmp_path / "save.txt"
    army = [make_unit(f"u{i}", find_item("dagger"), None, 7) for i in range(3)]
    save_game(path, army, [])
    loaded1, loaded2 = load_game(path)
    assert [u.y for u in loaded1] == [0, 1, 2]
    assert loaded2 == []


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game(tmp_path / "nothing.txt")


@pytest.mark.parametrize(
    "content",
    [
        "",
        "1",
        "x 1\n",
        "1 0\nalpha 100\n",
        "1 0\nalpha 100 99 -1\n",
        "1 0\nalpha 100 0 -2\n",
        "1 0\nalpha hp 0 -1\n",
        "-1 0\n",
    ],
)
def test_malformed_files(tmp_path, content):
    path = tmp_path / "save.txt"
    path.write_text(content)
    with pytest.raises(SaveFormatError):
        load_game(path)