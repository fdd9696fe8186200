"""Loading and validating game maps stored in ``.ber`` files."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Sequence

from solong.lines import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
FILLED = "F"

ALLOWED_TILES = frozenset({WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT})

MAP_SUFFIX = ".ber"


class MapError(ValueError):
    """Raised when a map cannot be loaded or breaks one of the map rules."""


def load_map(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file and return its rows without their line endings."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise MapError("The map load failed") from exc
    if not lines:
        raise MapError("The map load failed")
    return [line.removesuffix("\n") for line in lines]


def check_name(path: str | os.PathLike[str]) -> bool:
    """Tell whether the file name carries the ``.ber`` extension."""
    return os.fspath(path).endswith(MAP_SUFFIX)


def check_rectangle(grid: Sequence[str]) -> bool:
    """Tell whether every row has the same length."""
    return len({len(row) for row in grid}) == 1


def check_walls(grid: Sequence[str]) -> bool:
    """Tell whether the map is closed by walls on all four sides."""
    if not grid:
        return False
    for edge in (grid[0], grid[-1]):
        if not edge or set(edge) != {WALL}:
            return False
    return all(row.startswith(WALL) and row.endswith(WALL) for row in grid)


def check_valid_cases(grid: Sequence[str]) -> bool:
    """Tell whether only known tiles appear, with one player and one exit."""
    players = 0
    exits = 0
    for row in grid:
        for tile in row:
            if tile not in ALLOWED_TILES:
                return False
            if tile == PLAYER:
                players += 1
            elif tile == EXIT:
                exits += 1
    return players == 1 and exits == 1


def flood_fill(grid: Sequence[str], row: int, col: int) -> list[str]:
    """Return a copy of the grid with every cell reachable from (row, col) marked 'F'.

    Walls and already filled cells stop the fill.
    """
    cells = [list(line) for line in grid]
    pending = deque([(row, col)])
    while pending:
        y, x = pending.popleft()
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            continue
        if cells[y][x] in (WALL, FILLED):
            continue
        cells[y][x] = FILLED
        pending.extend(((y, x + 1), (y, x - 1), (y + 1, x), (y - 1, x)))
    return ["".join(line) for line in cells]


def _find_player(grid: Sequence[str]) -> tuple[int, int] | None:
    for y, line in enumerate(grid):
        x = line.find(PLAYER)
        if x >= 0:
            return y, x
    return None


def check_reachable(grid: Sequence[str]) -> bool:
    """Tell whether every non-wall cell can be reached from the player."""
    start = _find_player(grid)
    if start is None:
        return False
    filled = flood_fill(grid, *start)
    return all(tile in (WALL, FILLED) for line in filled for tile in line)


def check_exit_number(grid: Sequence[str]) -> bool:
    """Tell whether the map holds exactly one exit."""
    return sum(line.count(EXIT) for line in grid) == 1


def count_collectibles(grid: Sequence[str]) -> int:
    """Count the collectibles on the map."""
    return sum(line.count(COLLECTIBLE) for line in grid)


def validate_map(grid: Sequence[str]) -> int:
    """Check every map rule in turn and return the number of collectibles.

    Raises MapError naming the first rule that is broken.
    """
    if not check_walls(grid):
        raise MapError("The map must contain only 1 (walls) on each sides")
    if not check_rectangle(grid):
        raise MapError("The map must be a rectangle")
    if not check_valid_cases(grid):
        raise MapError("You must fill the map with 0, 1, P, C or E")
    if not check_reachable(grid):
        raise MapError("There is no path to collect all the coins and leave out")
    if not check_exit_number(grid):
        raise MapError("You need to have only one Exit in ur map")
    return count_collectibles(grid)