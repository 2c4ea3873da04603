# raycube

raycube is a small first-person explorer for grid maps. It draws them
with DDA raycasting. A plain-text `.cub` file describes each scene. The
file gives four wall textures, a floor colour and a ceiling colour, and
then the map itself.

## Installing

```
pip install .
```

## Running

```
raycube path/to/scene.cub
```

The command takes exactly one argument, and the file name must end in
`.cub`. It opens a 1280×720 window titled "raycube" and renders at up
to 60 frames per second.

### Controls

| Input                          | Action                  |
|--------------------------------|-------------------------|
| `W` / `S`                      | move forward / backward |
| `A` / `D`                      | strafe left / right     |
| Left / Right arrow             | turn                    |
| Mouse in the outer fifth of the window, left or right | turn slowly |
| `Esc` or closing the window    | quit                    |

Holding a key repeats it. The player cannot move when the step would
put them within about three steps of a wall cell.

A minimap in the top-left corner shows walls, open floor and the player.

## Scene files

```
NO ./textures/north.png
EA ./textures/east.png
SO ./textures/south.png
WE ./textures/west.png
F 120,110,100
C 40,60,200

        1111111111
        1000000001
111111111000N00001
100000000000000001
111111111111111111
```

- `NO`, `EA`, `SO` and `WE` give paths to texture images. Each path
  must name a file that can be opened. Any format that Pillow reads
  will load. A texture's height should be a power of two, because
  texture rows are wrapped with a bit mask.
- `F` and `C` set the floor and ceiling colours as `R,G,B`. Each value
  must lie between 0 and 255. The colours fade towards the horizon.
- Spaces around the parts of an entry are collapsed.
- Empty lines are ignored everywhere. The header entries may come in
  any order, but each may appear only once. All six must come before
  the map. A header line that is not one of these entries is an error.
- In the map, `1` is a wall and `0` is floor. One of `N`, `S`, `E` or
  `W` marks where the player starts and which way they face. Spaces
  before the first and after the last wall of a row are allowed.
  Spaces inside a row are turned into walls.
- The map must hold exactly one player. Every row and every column
  must be closed by walls at both ends.

When the file is invalid, the program prints a short message and exits
with status 1. The messages are:

- `Wrong map extension`
- `Wrong map path`
- `Map file is empty`
- `Wrong textures`
- `Map is invalid`

## Using it as a library

```python
from raycube.scene import parse_map
from raycube.raycast import cast_rays
from raycube.render import load_texture, render_frame

scene = parse_map("maps/demo.cub")   # raises MapError on bad input
for ray in cast_rays(scene.rows, scene.player):
    print(ray.side, ray.length)

textures = [load_texture(path) for path in scene.textures]
frame = render_frame(scene, textures)  # (720, 1280) array of 0xRRGGBB values
```

The modules are:

- `raycube.textutils`: string helpers (`check_extension`,
  `fix_spaces`, `atoi`, `split`, `len_to_space`).
- `raycube.validation`: map checks, such as `is_valid`,
  `open_horizontal`, `open_vertical` and `has_one_player`. It also has
  `fill_1s`, which fills interior spaces with walls.
- `raycube.scene`: `parse_map`, `process_scene` and `read_scene_file`.
  These produce a `Scene` with a `Player`, or raise `MapError`.
- `raycube.controls`: `move`, `rotate`, `handle_key_event` and
  `handle_mouse_event` act on a `Player`. The codes they take are
  listed in the `Key` enum.
- `raycube.raycast`: `cast_ray` and `cast_rays` return `Ray` results
  that carry a `Side`. `init_wall` gives the `WallSlice` for a
  distance.
- `raycube.render`: `load_texture`, `draw_background`, `draw_minimap`,
  `draw_wall` and `render_frame`. They work on numpy arrays.
- `raycube.game`: `Game`, which holds the window and its event loop,
  and the `main` entry point.

A `Game` can also be started from code:

```python
from raycube.game import Game
from raycube.scene import parse_map

Game(parse_map("maps/demo.cub")).run()
```

## What it does not do

raycube only lets you walk around a map. It has no sound, no sprites,
no doors, no enemies and no saving.

## Tests

```
pip install .[test]
pytest
```