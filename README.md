# raycub

A small first-person raycaster. It reads a `.cub` scene description, checks
that the map is well formed and closed in by walls, loads four XPM wall
textures and lets you walk around the maze in an 800×600 pygame window.

## Installing

```
pip install .
```

pygame is installed as a dependency; it draws the window.

## Running

```
raycub path/to/level.cub
```

The command takes exactly one argument, the map file, whose name must end in
`.cub`. With any other number of arguments it prints `Arguments Error` and
exits with status 1.

### Keys

| Key         | Action                |
|-------------|-----------------------|
| W / S       | move forward / back   |
| A / D       | strafe left / right   |
| Left arrow  | turn left             |
| Right arrow | turn right            |
| Escape      | quit                  |

Closing the window also quits. The player cannot walk into wall cells.

## The `.cub` format

A map file starts with six directives, one per line, in any order:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

* `NO`, `SO`, `WE`, `EA` give the path of an XPM texture for the north,
  south, west and east wall faces. Each must appear exactly once and must not
  be empty. Every texture must be at least 64×64 pixels; the top-left 64×64
  area is used.
* `F` and `C` give the floor and ceiling colours as three decimal components
  from 0 to 255, separated by exactly two commas, digits only.

No other lines may stand among the directives except blank ones. After them,
and after any blank lines, comes the map itself:

```
111111
100101
101001
1100N1
111111
```

* `1` is a wall, `0` is open floor, a space is outside the map. No other
  characters are allowed.
* Exactly one of `N`, `S`, `E`, `W` marks the player's start and the
  direction they face.
* The area reachable from the player must be closed in by walls: reaching a
  space or the edge of a row is an error.
* The map may not contain blank lines.

Any violation stops the program: it prints `Error` followed by a message
describing the problem and exits with status 1.

## Using the library

The pieces can be used on their own:

```python
from raycub.mapfile import load_map
from raycub.xpm import load_xpm
from raycub.raycaster import spawn_player, cast_ray

cub = load_map("level.cub")
player = spawn_player(cub.pov, cub.pos_x, cub.pos_y)
hit = cast_ray(player, cub.grid, 400)
print(hit.face, hit.perpwalldist)

texture = load_xpm("textures/north.xpm")
print(texture.width, texture.height, hex(texture.pixel(0, 0)))
```

* `raycub.mapfile` — `load_map`, `parse_map`, `check_name`, `validate_grid`,
  `find_player`, `flood_check` and the `CubMap` result.
* `raycub.header` — parsing of the six directives (`parse_header`, `Header`,
  `parse_rgb`, `texture_path`, `is_directive_line`, `directives_end`),
  raising `MapError`.
* `raycub.xpm` — an XPM reader (`load_xpm`, `parse_xpm`, `parse_xpm_lines`,
  `strip_comments`, `text_to_rgb`) producing `XpmImage`, raising `XpmError`.
  Transparent (`None`) pixels become `0xFF000000`.
* `raycub.colors` — `lookup_color` for X11 colour names, case-insensitive.
* `raycub.textutil` — `atoi` (lenient integer parsing) and `split_words`.
* `raycub.raycaster` — `Player`, `Controls`, `RayHit`, `spawn_player`,
  `cast_ray`, `render_column` and `render_frame`, which returns an 800×600
  row-major list of pixels.
* `raycub.app` — `key_to_control`, `load_textures`, the window loop (`run`)
  and the command entry (`main`).

## What it does not do

There is no mouse look, no minimap, no sprites or doors, and textures are
read only from XPM files.

## Running the tests

```
pip install .[test]
pytest
```