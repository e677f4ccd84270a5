# cubcaster

cubcaster draws a maze from a plain-text `.cub` map in the style of early
first-person games. It casts one ray for each screen column through the map
grid. Walls are textured, and the ceiling and floor are flat colours. The
window is 1024×720.

## Installing

```
pip install .
```

## Running

```
cubcaster path/to/map.cub
```

The command takes exactly one argument, and that file name must end in
`.cub`. If either condition fails, the program writes a red `Error` line and
the reason to standard error, then exits with status 1. The same happens
when the map file cannot be opened or a texture cannot be loaded.

The four wall textures are read with Pillow from these paths, relative to
the current directory:

```
textures/north_wall.xpm
textures/south_wall.xpm
textures/east_wall.xpm
textures/west_wall.xpm
```

## Map format

The whole file is the grid. Each line is one row:

- `0` is open floor.
- Any other character is a wall. Cells outside the grid also count as walls,
  including the missing cells of short rows.
- The first `N`, `S`, `E` or `W` found, reading row by row, is where the
  player starts. The letter gives the direction they face. That cell then
  becomes floor.

A map with no start marker ends the program with `No player found!`.

```
111111
100001
10N001
100001
111111
```

## Controls

| Key           | Action               |
|---------------|----------------------|
| `W` / `S`     | move forward / back  |
| `A` / `D`     | strafe left / right  |
| `←` / `→`     | turn left / right    |
| `Esc`         | quit                 |

Closing the window also quits. Movement stops at walls.

## Using it as a library

You can use the pieces without opening a window:

```python
from cubcaster.mapfile import parse_map
from cubcaster.player import init_player, Direction
from cubcaster.raycaster import cast_ray

grid = parse_map("maps/room.cub")      # list of rows, each a list of characters
player = init_player(grid)             # marker cell is replaced with "0"
ray = cast_ray(player.angle, player.x, player.y, grid)
print(ray.distance, ray.map_x, ray.map_y, ray.side, ray.hit)

player.move_forward_backward(grid, Direction.FORWARD)
player.turn(Direction.LEFT)
```

### Modules

- `cubcaster.geometry`: `Vec2` (with `rotate` and `normalized`),
  `deg_to_rad` and `normalize_angle`.
- `cubcaster.errors`: `Cub3dError`, plus `error_message` and `report_error`,
  which produce the coloured error report.
- `cubcaster.mapfile`: `read_lines`, `parse_map` and `check_map_filename`.
- `cubcaster.raycaster`: `cast_ray` and its result type `Ray`.
- `cubcaster.player`: `Player`, `Direction`, `player_angle` and `init_player`.
- `cubcaster.image`: `Image`, which holds packed `0xRRGGBB` pixels and
  provides `plot`, `get` and `draw_vertical_line`. The module also has `rgb`
  and `load_texture`.
- `cubcaster.draw`: `Textures`, `select_texture`, `texture_y`,
  `draw_ceiling`, `draw_wall` and `draw_floor`.
- `cubcaster.game`: `Game` and `Key`, plus `setup` and `main`. A `Game` can
  be driven headless with `handle_key` and `render_frame`. The frame is kept
  in `game.image`. `Game.run` opens the pygame window.

## What it does not do

The map file holds only the grid. No texture paths or ceiling and floor
colours are read from it. Textures always come from the fixed paths above.
The ceiling is always black and the floor is always grey. The map is not
checked for being closed by walls. A ray that leaves the grid stops there as
if it had hit a wall.

## Tests

```
pip install ".[test]"
pytest
```