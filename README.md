# rayquest

A small raycasting engine in the style of early first-person shooters.
The world is a 14 × 14 grid of 64-pixel tiles. The window shows it in
two ways at once. On the left is a top-down minimap that shows the walls,
the grid, the player and the cast rays. On the right is the first-person
view. There, the height of each column's wall slice comes from the
distance to the nearest wall.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Playing

```
rayquest
```

This opens a 1792 × 896 window. The game runs until you press `Esc` or
close the window. The command takes no options except `--help`.

Controls:

| Key          | Action              |
|--------------|---------------------|
| `W`          | move forward        |
| `S`          | move backward       |
| `A` / `D`    | turn left / right   |
| `Esc`        | quit                |

The game also records the arrow keys, `Space` and `Left Shift` as look,
rotate, jump and crouch actions. These actions do not change the player
yet.

## What it does not do

- The player is not blocked by walls. Moving forward or back can take
  the player through walls and off the map.
- Walls in the first-person view are plain single-colour lines. There
  are no textures, floors, ceilings, sprites, enemies or sound.
- There is one built-in level and no way to load others from a file.

## Using the library

You can use the parts of the engine without opening a window:

```python
from rayquest.world import default_map
from rayquest.state import new_player, InputState, Action, update
from rayquest.raycast import closest_hit, cast_columns

tiles = default_map()
player = new_player()          # at (500, 500), angle 0

hit = closest_hit(player.pos, 1.0, tiles)
print(hit.distance, hit.point, hit.vertical)

inputs = InputState()
inputs.apply({Action.MOVE_FORWARD})
update(player, inputs)

for column in cast_columns(player, tiles, 896, 896):
    print(column.x, column.line_height, column.line_offset)
```

Modules:

- `rayquest.vector`: `Vec3`, a small immutable 3-D vector. It supports
  `+`, `-`, scalar `*`, unary `-`, `dot`, `cross`, `magnitude` and
  `normalized`.
- `rayquest.world`: the screen and angle constants, `TileMap` and
  `default_map()`. `TileMap` provides `is_wall`, `cell`, `cell_index`
  and `walls`.
- `rayquest.raycast`: `wrap_angle`, `horizontal_hit`, `vertical_hit`,
  `closest_hit` and `cast_columns`. These return `Hit` and `Column`
  records.
- `rayquest.state`: `Action`, `InputState`, `Player`, `new_player()` and
  `update()`. `update()` moves the player along its facing for forward
  and back, and turns it by 0.01 radians for left and right.
- `rayquest.render`: `Renderer`, which draws the minimap, the rays and
  the wall slices onto a pygame surface.
- `rayquest.game`: `Game`, `pressed_actions` and the `main` entry point.

The package also has a few text and number helpers:

- `rayquest.numbers`: `atoi`, `atoi_base`, `format_base`, `itoa`,
  `is_prime` and `exact_sqrt`.
- `rayquest.textutil`: `split`, `split_whitespace`, `trim`,
  `compare_ignore_case` and `LineReader`. `LineReader` reads a text or
  binary stream line by line in fixed-size chunks.

## Running the tests

```
pytest
```