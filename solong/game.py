"""Game state: the map, the player, collected items and moves."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from solong.mapcheck import MapError, count_collectibles
from solong.printf import printf

TILE_SIZE = 64
ESCAPE_KEY = 57

_KEY_MOVES = {
    ord("w"): (1, 0),
    ord("s"): (-1, 0),
    ord("d"): (0, 1),
    ord("a"): (0, -1),
}


class Tile(str, Enum):
    """The kinds of cell a map is made of."""

    WALL = "1"
    FLOOR = "0"
    PLAYER = "P"
    COLLECTIBLE = "C"
    EXIT = "E"

    @property
    def texture(self) -> str:
        """Path of the image drawn for this tile."""
        return f"texture/{_TEXTURE_NAMES[self.value]}.xpm"


_TEXTURE_NAMES = {
    "1": "wall",
    "0": "floor",
    "P": "player",
    "C": "collectibles",
    "E": "exit",
}


class MoveResult(Enum):
    """What happened after a key press or a move."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"
    QUIT = "quit"


class Game:
    """A running game on one map."""

    def __init__(self, grid: Sequence[str]) -> None:
        if not grid:
            raise MapError("The map is empty")
        self._cells = [list(row) for row in grid]
        self.moves = 0
        self.collectibles = count_collectibles(grid)
        self.map_width = len(grid[0])
        self.map_height = len(grid)
        self.finished = False
        self.won = False
        self.player_y = 0
        self.player_x = 0
        self.find_player()

    @property
    def grid(self) -> list[str]:
        """The current map, one string per row."""
        return ["".join(row) for row in self._cells]

    def find_player(self) -> tuple[int, int]:
        """Locate the player, store and return its (row, column)."""
        for y, row in enumerate(self._cells):
            for x, tile in enumerate(row):
                if tile == Tile.PLAYER.value:
                    self.player_y, self.player_x = y, x
                    return y, x
        raise MapError("The map holds no player")

    def _tile_at(self, y: int, x: int) -> str:
        if 0 <= y < len(self._cells) and 0 <= x < len(self._cells[y]):
            return self._cells[y][x]
        return Tile.WALL.value

    def move(self, dy: int, dx: int) -> MoveResult:
        """Try to move the player by (dy, dx) and report the outcome."""
        if self.finished:
            return MoveResult.IGNORED
        new_y = self.player_y + dy
        new_x = self.player_x + dx
        next_tile = self._tile_at(new_y, new_x)
        result = MoveResult.MOVED
        if next_tile == Tile.WALL.value:
            return MoveResult.BLOCKED
        if next_tile == Tile.COLLECTIBLE.value:
            self.collectibles -= 1
            result = MoveResult.COLLECTED
        elif next_tile == Tile.EXIT.value:
            if self.collectibles:
                return MoveResult.BLOCKED
            self.finished = True
            self.won = True
            return MoveResult.WON
        self._cells[self.player_y][self.player_x] = Tile.FLOOR.value
        self._cells[new_y][new_x] = Tile.PLAYER.value
        self.player_y, self.player_x = new_y, new_x
        self.moves += 1
        printf("Moves : %d\n", self.moves)
        return result

    def handle_key(self, key: int | str) -> MoveResult:
        """Act on a key code or a one-character key name."""
        code = ord(key) if isinstance(key, str) else key
        if code == ESCAPE_KEY:
            self.finished = True
            return MoveResult.QUIT
        step = _KEY_MOVES.get(code)
        if step is None:
            return MoveResult.IGNORED
        return self.move(*step)

    def render(self) -> list[tuple[Tile, int, int]]:
        """Return the tiles to draw with their pixel positions, row by row."""
        known = {tile.value: tile for tile in Tile}
        return [
            (known[cell], x * TILE_SIZE, y * TILE_SIZE)
            for y, row in enumerate(self._cells)
            for x, cell in enumerate(row)
            if cell in known
        ]

    def window_size(self) -> tuple[int, int]:
        """Width and height in pixels of a window showing the whole map."""
        return self.map_width * TILE_SIZE, self.map_height * TILE_SIZE