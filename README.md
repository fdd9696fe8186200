# solong

A small puzzle game played on a tile map: move the player around the map,
pick up every collectible, then reach the exit.

Maps are plain text files with the `.ber` extension. Each line is one row of
the map and uses these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

`solong.mapcheck.validate_map` accepts a map only if, checked in this order:

1. the first and last rows are all walls and every row starts and ends with a wall;
2. every row has the same length;
3. only the characters above appear, with exactly one `P` and exactly one `E`;
4. every cell that is not a wall can be reached from the player;
5. there is exactly one exit.

The first rule broken raises `solong.mapcheck.MapError` with a message saying
which. On success it returns the number of collectibles.

## Installing

```
pip install .
```

## Playing

```
solong maps/level.ber
```

The command takes exactly one argument, a file whose name ends in `.ber`.
If the argument is missing, there are too many, the name is wrong, or the map
cannot be loaded or breaks a rule, it prints `Error` and a description on
standard output and exits with status 1.

Otherwise it prints the map and reads keys from standard input, one line at a
time; every character on a line is taken as a key press, and the map is
printed again after each line:

| Key | Effect                                   |
|-----|------------------------------------------|
| `w` | move one row down the map (row + 1)      |
| `s` | move one row up the map (row - 1)        |
| `d` | move one column right                    |
| `a` | move one column left                     |
| `q` | quit                                     |

Other keys are ignored. Walls block movement. Stepping on a collectible picks
it up. The exit stays closed until every collectible has been picked up;
reaching it then prints `You won in N moves!` and ends the game. Each
successful move prints `Moves : N`.

## Using the library

```python
from solong.mapcheck import load_map, validate_map
from solong.game import Game

grid = load_map("maps/level.ber")   # rows without line endings
validate_map(grid)
game = Game(grid)
result = game.handle_key("d")       # a MoveResult
print(game.grid, game.moves, game.collectibles)
print(game.render())                # [(Tile, x_pixels, y_pixels), ...]
print(game.window_size())           # (width, height) at 64 pixels per tile
```

- `solong.mapcheck`: `load_map`, `check_name`, `check_rectangle`,
  `check_walls`, `check_valid_cases`, `flood_fill`, `check_reachable`,
  `check_exit_number`, `count_collectibles`, `validate_map`, `MapError`.
- `solong.game`: `Game` (with `move`, `handle_key`, `find_player`, `render`,
  `window_size`), the `Tile` enum (each tile has a `texture` path such as
  `texture/wall.xpm`) and the `MoveResult` enum (`IGNORED`, `BLOCKED`,
  `MOVED`, `COLLECTED`, `WON`, `QUIT`).
- `solong.lines`: `LineReader`, which splits a text or binary stream into
  lines through a fixed-size read buffer, and `read_lines(path)`.
- `solong.printf`: `format_string(fmt, *args)` and `printf(fmt, *args)`,
  supporting `%c %s %d %i %u %x %X %p %%` with 32-bit integer wrapping;
  `%s` of `None` gives `(null)` and `%p` of `0` or `None` gives `(nil)`.
- `solong.colors`: `lookup_color(name)` for the X11 colour names
  (case-insensitive, `"none"` gives -1) and `to_visual_color` for packing a
  `0xRRGGBB` colour into a visual with fewer than 24 bits.
- `solong.xpm`: `read_xpm_file`, `parse_xpm_source` and `parse_xpm` decode
  XPM images into an `XpmImage` (`width`, `height`, `pixels`, `pixel(x, y)`);
  cells coloured `None` get the value `0xFF000000`. Malformed data raises
  `XpmError`.

## What it does not do

The game runs in the terminal only. There is no graphical window:
`Game.render` and `Tile.texture` describe what would be drawn and
`solong.xpm` can decode the texture files, but nothing in the package puts
them on screen.

## Running the tests

```
pip install .[test]
pytest
```