# cubraycaster

cubraycaster is a small first-person raycasting engine. It reads a `.cub` scene
file that lists four wall textures, the floor and ceiling colours, and a map.
It checks the scene, then opens a 1920×1080 window where you can walk around
the map.

## Installing

```
pip install .
```

The package uses numpy, pygame and Pillow.

## Running

```
cubraycaster path/to/level.cub
```

You can also run it as `python -m cubraycaster.app path/to/level.cub`.

The program takes exactly one argument, and that argument must end in `.cub`.
If the arguments or the scene are invalid, the program prints `Error`, then a
message on the next line, and exits with a non-zero status. When the scene
file cannot be opened, the exit status is the operating-system error number.

### Controls

| Key          | Action            |
|--------------|-------------------|
| `w` / `s`    | move forward/back |
| `a` / `d`    | strafe left/right |
| Left / Right | turn              |
| Escape       | quit              |

Closing the window also quits. Walls (`1`) block movement. The frame rate is
capped at 60 frames per second. Holding a key down repeats it.

## The `.cub` format

```
NO ./textures/north.png
EA ./textures/east.png
SO ./textures/south.png
WE ./textures/west.png
F 220,100,0
C 225,30,0

        1111111111
        1000000001
11111111100N000001
100000000000000001
111111111111111111
```

- The six identifiers `NO`, `EA`, `SO`, `WE`, `F` and `C` must all appear
  before the map, each followed by a space. They may come in any order, may be
  preceded by spaces, and may have blank lines between them. Any other
  non-blank line before the map is an error. A texture identifier given twice
  is an error.
- A texture is any image file that Pillow can open. The texture's height
  should be a power of two, because vertical texture coordinates wrap with a
  bit mask.
- Colours are three integers from 0 to 255, separated by commas, for example
  `F 220,100,0`.
- The map may contain only spaces, `0`, `1`, and exactly one of `N`, `S`, `E`
  or `W`. That letter marks the player's start and facing.
- Every open cell (`0` or the start letter) must be closed in by walls. No
  open cell may touch a space or the edge of the map.
- The map ends at the first blank line. Only blank lines may follow it.

## Using it as a library

```python
from cubraycaster.scene import load_scene
from cubraycaster.app import Game

scene = load_scene("level.cub")
game = Game.from_scene(scene)   # loads the four textures, places the player
pixels = game.frame()           # (height, width) numpy array of 0xRRGGBB values
game.on_key(ord("w"))           # step forward; returns False once Escape is sent
game.run()                      # opens the window
```

Each part can also be used on its own:

- `cubraycaster.scene`: `parse_scene(lines)` turns the lines of a `.cub` file
  into a `Scene`. Each line keeps its trailing newline. `load_scene(path)`
  reads the file and parses it. A `Scene` has `textures` (north, east, south,
  west), `floor` and `ceiling` as packed colours, `grid`, and `spawn`. The
  module also provides `check_arguments(argv)`, which validates the argument
  list, and `format_path(line)`, which extracts the value from a resource
  line.
- `cubraycaster.mapgrid`: `build_grid(lines)` turns the map block into a
  rectangular grid. The grid has a border of spaces, and each row is mirrored
  and right-aligned. `validate_grid(grid)` checks characters and enclosure.
  `find_spawn(grid)` returns the single `Spawn` (column, row, direction).
  `is_map_char(char)` reports whether a character is allowed in the map.
- `cubraycaster.colors`: `parse_color(text)` validates an `R,G,B` string and
  packs it to `0xRRGGBB`. `is_rgb_valid`, `split_rgb`, `rgb_to_int` and
  `parse_int` are the steps behind it.
- `cubraycaster.player`: `Player` holds the position, direction and camera
  plane. `Player.facing(column, row, direction)` places a player in the
  middle of a cell. It moves with `move_forward`, `move_backward`,
  `strafe_left` and `strafe_right`, turns with `rotate(angle)`, and reacts to
  `Key` codes through `handle_key(key, grid)`.
- `cubraycaster.raycast`: `cast_ray(grid, player, column, width, height)`
  returns a `RayHit` for one screen column. `draw_column` paints a textured
  slice. `render_frame(grid, player, textures, ceiling, floor, width, height)`
  renders a whole view. `Texture` wraps a 2-D array of packed pixels.
- `cubraycaster.app`: `load_texture(path)` loads an image as a `Texture`.
  `Game` ties a scene, a player and textures together. `main(argv)` is the
  command.

Invalid input raises `cubraycaster.errors.CubError`. Its `message` holds the
description and its `exit_code` holds the status the command exits with.
`str(error)` gives `Error` and the message on two lines.

## Running the tests

```
pip install .[test]
pytest
```