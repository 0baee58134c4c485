import pytest

from cubraycaster.colors import rgb_to_int
from cubraycaster.errors import CubError
from cubraycaster.mapgrid import build_grid
from cubraycaster.scene import check_arguments, format_path, load_scene, parse_scene

HEADER = [
    "NO ./textures/north.xpm\n",
    "SO ./textures/south.xpm\n",
    "WE ./textures/west.xpm\n",
    "EA ./textures/east.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]

MAP = [
    "111111\n",
    "100001\n",
    "10N001\n",
    "111111\n",
]


def scene_lines(header=None, map_lines=None, tail=None):
    return list(HEADER if header is None else header) + list(
        MAP if map_lines is None else map_lines
    ) + list(tail or [])


def test_format_path_strips_identifier():
    assert format_path("NO ./path/to/north.xpm\n") == "./path/to/north.xpm"


def test_format_path_strips_blanks():
    assert format_path("  F   220,100,0   \n") == "220,100,0"


def test_check_arguments_returns_path():
    assert check_arguments(["maps/level.cub"]) == "maps/level.cub"


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_check_arguments_count(argv):
    with pytest.raises(CubError, match="too many or no arguments"):
        check_arguments(argv)


@pytest.mark.parametrize("name", ["level.txt", ".cub", "cub"])
def test_check_arguments_extension(name):
    with pytest.raises(CubError, match="not a .cub"):
        check_arguments([name])


def test_parse_scene_textures_in_order():
    scene = parse_scene(scene_lines())
    assert scene.textures == (
        "./textures/north.xpm",
        "./textures/east.xpm",
        "./textures/south.xpm",
        "./textures/west.xpm",
    )


def test_parse_scene_colors():
    scene = parse_scene(scene_lines())
    assert scene.floor == rgb_to_int((220, 100, 0))
    assert scene.ceiling == rgb_to_int((225, 30, 0))


def test_parse_scene_grid_and_spawn():
    scene = parse_scene(scene_lines())
    assert scene.grid == build_grid(MAP)
    assert scene.spawn.direction == "N"
    assert scene.grid[scene.spawn.row][scene.spawn.column] == "N"


def test_parse_scene_resource_order_does_not_matter():
    shuffled = [HEADER[6], HEADER[3], HEADER[0], HEADER[5], HEADER[2], HEADER[1]]
    assert parse_scene(scene_lines(header=shuffled)) == parse_scene(scene_lines())


def test_parse_scene_trailing_blank_lines_allowed():
    scene = parse_scene(scene_lines(tail=["\n", "\n"]))
    assert scene.grid == build_grid(MAP)


def test_parse_scene_map_without_final_newline():
    map_lines = MAP[:-1] + ["111111"]
    assert parse_scene(scene_lines(map_lines=map_lines)).grid == build_grid(MAP)


def test_parse_scene_content_after_map():
    with pytest.raises(CubError, match="anything after the map"):
        parse_scene(scene_lines(tail=["\n", "111\n"]))


def test_parse_scene_missing_identifier():
    with pytest.raises(CubError, match="does not conform"):
        parse_scene(HEADER[1:] + MAP)


def test_parse_scene_unknown_line():
    header = ["R 1920 1080\n"] + HEADER
    with pytest.raises(CubError, match="does not conform"):
        parse_scene(scene_lines(header=header))


def test_parse_scene_spaces_only_line_in_header():
    header = HEADER[:2] + ["   \n"] + HEADER[2:]
    with pytest.raises(CubError, match="does not conform"):
        parse_scene(scene_lines(header=header))


def test_parse_scene_invalid_color():
    header = HEADER[:5] + ["F 300,100,0\n"] + HEADER[6:]
    with pytest.raises(CubError):
        parse_scene(scene_lines(header=header))


def test_parse_scene_duplicate_texture():
    header = [HEADER[0]] + HEADER
    with pytest.raises(CubError):
        parse_scene(scene_lines(header=header))


def test_parse_scene_later_color_wins():
    header = ["F 1,2,3\n"] + HEADER[:5] + ["F 4,5,6\n"] + HEADER[6:]
    scene = parse_scene(scene_lines(header=header))
    assert scene.floor == rgb_to_int((4, 5, 6))


def test_parse_scene_no_map():
    with pytest.raises(CubError, match="does not conform"):
        parse_scene(HEADER + ["\n"])


def test_parse_scene_map_starts_with_bad_char():
    with pytest.raises(CubError, match="does not conform"):
        parse_scene(scene_lines(map_lines=["X11111\n"] + MAP[1:]))


def test_parse_scene_open_map():
    open_map = ["111111\n", "100001\n", "10N00\n", "111111\n"]
    with pytest.raises(CubError, match="The map is not valid"):
        parse_scene(scene_lines(map_lines=open_map))


def test_parse_scene_two_players():
    two = ["111111\n", "1S0001\n", "10N001\n", "111111\n"]
    with pytest.raises(CubError, match="no player"):
        parse_scene(scene_lines(map_lines=two))


def test_parse_scene_no_player():
    none = ["111111\n", "100001\n", "100001\n", "111111\n"]
    with pytest.raises(CubError, match="no player"):
        parse_scene(scene_lines(map_lines=none))


def test_load_scene_matches_parse(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text("".join(scene_lines()), encoding="utf-8")
    assert load_scene(str(path)) == parse_scene(scene_lines())


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(CubError) as info:
        load_scene(str(tmp_path / "absent.cub"))
    assert info.value.exit_code != 0
    assert str(info.value).startswith("Error\n")