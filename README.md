# cub3d

The core of a small raycasting first-person engine, without any window or
graphics layer. The package provides player state, key handling, line
reading and error reporting. An engine can be built on top of these pieces.

## Modules

### `cub3d.player`

- `Vec2` is a frozen 2D vector with `x` and `y`.
- `Orientation` is the spawn direction: `NORTH`, `SOUTH`, `EAST` and `WEST`,
  with the values `"N"`, `"S"`, `"E"` and `"W"`.
- `Player` holds `position`, `view`, `cam_plane` and `rotspeed`.
  `rotspeed` defaults to 0.06.
  - `Player.from_spawn(x, y, orientation)` puts the player at the centre of
    cell `(x, y)`, at `(x + 0.5, y + 0.5)`. It sets a unit view vector. It
    also sets a camera plane of length 0.66 for the chosen orientation. You
    can pass the orientation as an `Orientation` or as its letter. An unknown
    orientation raises `ValueError`.
  - `Player.move(direction)` steps 0.1 of the view vector in one direction:
    forward for `"W"`, left for `"A"`, back for `"S"` and right for `"D"`.
    Any other direction raises `ValueError`.
  - `Player.rotate(angle)` rotates the view vector by `angle` and the camera
    plane by `-angle`.
- `rotate_vector(x, y, angle)` returns `(x, y)` rotated by `angle` radians.

### `cub3d.input`

- `Key` holds the key codes the engine reacts to: `W`, `A`, `S`, `D`,
  `LEFT`, `RIGHT` and `ESCAPE`.
- `move_player(player, key)` moves the player for W, A, S or D. It ignores
  any other key.
- `rotate_player(player, key)` turns the player by 0.02 radians. `LEFT`
  passes -0.02 to `Player.rotate` and `RIGHT` passes 0.02. It ignores any
  other key.
- `format_position(player)` returns the text
  `"player x: <x>\nplayer y: <y>\n"`, with six decimal places.
- `handle_key(player, key, stream=None)` handles one key press:
  - For `ESCAPE` it returns `False` and writes nothing.
  - For any other key it applies the move or the turn, if there is one.
  - It then writes `format_position(player)` to `stream`, or to standard
    output when no stream is given, and returns `True`.
  - Integer codes that are not a `Key` are accepted. They only cause the
    position to be written.

### `cub3d.line_reader`

- `LineReader(fd, buffer_size=100000)` reads lines from a raw file
  descriptor, `buffer_size` bytes at a time. A `buffer_size` that is not
  positive raises `ValueError`.
  - `next_line()` returns the next line or `None` when the input is
    exhausted. A failing read raises `OSError`.
  - Each line keeps its trailing newline. The last line may lack one.
  - A line is cut short at its first NUL byte.
  - Bytes are decoded as UTF-8 with `surrogateescape`.
  - Reaching end of input is not final: a later call reads from the
    descriptor again.
  - Iterating over a `LineReader` yields lines until `next_line()` returns
    `None`.
- `read_lines(fd, buffer_size=100000)` returns a list of all remaining lines.

### `cub3d.errors`

- `print_error(message=None, stream=None)` writes `"Error\n"` to `stream`,
  or to standard error when no stream is given. It then writes `message`,
  if given, without adding a newline, and flushes the stream.
- `Cub3dError` is an exception type that callers can use for fatal game
  errors.

## Example

```python
import io
import os

from cub3d.errors import print_error
from cub3d.input import Key, handle_key
from cub3d.line_reader import read_lines
from cub3d.player import Player

fd = os.open("maps/level.cub", os.O_RDONLY)
try:
    lines = read_lines(fd, 4096)
finally:
    os.close(fd)

player = Player.from_spawn(3, 4, "N")
out = io.StringIO()
handle_key(player, Key.W, out)
print(out.getvalue())
# player x: 3.500000
# player y: 4.400000

if not lines:
    print_error("empty map file\n")
```

## What the package does not do

The package does not open a window, draw anything or run a game loop. It
does not parse `.cub` map files into textures, colours or grids, and it does
not check that a move stays inside the walls. A caller must read the spawn
cell and orientation from a map itself. It must also feed key events to
`handle_key` and do the rendering. There is no command-line program.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.