"""Command line entry point: load a map and play it in the terminal."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from solong.game import ESCAPE_KEY, Game, MoveResult
from solong.mapcheck import MapError, check_name, load_map, validate_map
from solong.printf import printf


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map path from the arguments, or raise MapError."""
    if len(argv) < 1:
        raise MapError("No map file found")
    if len(argv) > 1:
        raise MapError("Too many arguments")
    if not check_name(argv[0]):
        raise MapError("The map must be a .ber file")
    return argv[0]


def _show(game: Game) -> None:
    printf("%s\n", "\n".join(game.grid))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; keys w, a, s, d move, q quits. Returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = check_arguments(args)
        grid = load_map(path)
        validate_map(grid)
        game = Game(grid)
    except MapError as exc:
        printf("Error\n%s\n", str(exc))
        return 1
    _show(game)
    for line in sys.stdin:
        for key in line.strip():
            result = game.handle_key(ESCAPE_KEY if key == "q" else key)
            if result is MoveResult.WON:
                printf("You won in %d moves!\n", game.moves)
                return 0
            if result is MoveResult.QUIT:
                return 0
        _show(game)
    return 0