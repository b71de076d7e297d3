import pytest

from raycub.header import MapError, parse_rgb
from raycub.mapfile import (
    CubMap,
    check_name,
    find_player,
    flood_check,
    load_map,
    parse_map,
    validate_grid,
)

HEADER = (
    "NO ./textures/north.xpm\n"
    "SO ./textures/south.xpm\n"
    "WE ./textures/west.xpm\n"
    "EA ./textures/east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
)

GRID = ["111111", "100101", "101001", "1100N1", "111111"]


def make_text(grid=GRID, gap="\n", trailing="\n"):
    return HEADER + gap + "\n".join(grid) + trailing


def test_check_name_accepts_cub():
    assert check_name("maps/level.cub") == "maps/level.cub"


@pytest.mark.parametrize("name", ["level.txt", "cub", "level.cubx", "levelcub"])
def test_check_name_rejects(name):
    with pytest.raises(MapError):
        check_name(name)


def test_validate_grid_returns_rows():
    assert validate_grid(GRID) == tuple(GRID)


def test_validate_grid_rejects_unknown_char():
    with pytest.raises(MapError):
        validate_grid(["1111", "1021", "1N01", "1111"])


def test_find_player_location():
    x, y, pov = find_player(GRID)
    assert GRID[y][x] == pov
    assert pov == "N"


@pytest.mark.parametrize(
    "grid",
    [["1111", "1001", "1111"], ["11111", "1NS01", "11111"]],
)
def test_find_player_count_errors(grid):
    with pytest.raises(MapError):
        find_player(grid)


def test_flood_check_closed_area():
    x, y, _ = find_player(GRID)
    reached = flood_check(GRID, y, x)
    assert (y, x) in reached
    assert all(GRID[cy][cx] != "1" for cy, cx in reached)


def test_flood_check_counts_all_open_cells_when_connected():
    grid = ["11111", "10001", "10W01", "11111"]
    x, y, _ = find_player(grid)
    reached = flood_check(grid, y, x)
    assert len(reached) == sum(row.count("0") + row.count("W") for row in grid)


@pytest.mark.parametrize(
    "grid",
    [
        ["1111", "10N0", "1111"],
        ["1111", "1 N1", "1111"],
        ["11111", "10N01", "1011"],
        ["10N1", "1111"],
    ],
)
def test_flood_check_leaks(grid):
    x, y, _ = find_player(grid)
    with pytest.raises(MapError):
        flood_check(grid, y, x)


def test_parse_map_valid():
    cub = parse_map(make_text())
    assert isinstance(cub, CubMap)
    assert cub.north == "./textures/north.xpm"
    assert cub.south == "./textures/south.xpm"
    assert cub.west == "./textures/west.xpm"
    assert cub.east == "./textures/east.xpm"
    assert cub.floor == parse_rgb("220,100,0")
    assert cub.ceiling == parse_rgb("225,30,0")
    assert cub.grid == tuple(GRID)
    assert cub.height == len(GRID)
    assert cub.grid[cub.pos_y][cub.pos_x] == cub.pov == "N"


def test_parse_map_without_trailing_newline():
    cub = parse_map(make_text(trailing=""))
    assert cub.grid == tuple(GRID)


def test_parse_map_skips_blank_lines_before_grid():
    cub = parse_map(make_text(gap="\n   \n\n"))
    assert cub.grid == tuple(GRID)


def test_parse_map_rejects_empty_line_inside_grid():
    text = HEADER + "\n" + "\n".join(GRID[:2]) + "\n\n" + "\n".join(GRID[2:]) + "\n"
    with pytest.raises(MapError):
        parse_map(text)


def test_parse_map_rejects_missing_directive():
    text = make_text().replace("C 225,30,0\n", "")
    with pytest.raises(MapError):
        parse_map(text)


def test_parse_map_rejects_nothing_after_directives():
    with pytest.raises(MapError):
        parse_map(HEADER)


def test_parse_map_rejects_empty_text():
    with pytest.raises(MapError):
        parse_map("")


def test_parse_map_rejects_open_grid():
    grid = ["111111", "100100", "101001", "1100N1", "111111"]
    with pytest.raises(MapError):
        parse_map(make_text(grid=grid))


def test_parse_map_rejects_two_players():
    grid = ["111111", "1S0101", "101001", "1100N1", "111111"]
    with pytest.raises(MapError):
        parse_map(make_text(grid=grid))


def test_parse_map_rejects_bad_character():
    grid = ["111111", "100201", "101001", "1100N1", "111111"]
    with pytest.raises(MapError):
        parse_map(make_text(grid=grid))


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(make_text())
    assert load_map(path) == parse_map(make_text())


def test_load_map_wrong_extension(tmp_path):
    path = tmp_path / "level.map"
    path.write_text(make_text())
    with pytest.raises(MapError):
        load_map(path)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "absent.cub")