"""Reading images in the XPM text format."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass

from solong.colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value given to cells whose colour is "None"."""

_NAME_BUFFER = 63
_LONG_MAX = (1 << 63) - 1
_LONG_MIN = -(1 << 63)

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: one 32-bit pixel value per cell, row by row."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    pieces: list[str] = []
    in_quote = False
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char == '"':
            in_quote = not in_quote
        elif not in_quote and text.startswith(opener, i):
            close = text.find(closer, i + len(opener))
            end = length if close < 0 else close + len(closer)
            pieces.append(" " * (end - i))
            i = end
            continue
        pieces.append(char)
        i += 1
    return "".join(pieces)


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    Block comments go first, then line comments together with their newline.
    The length of the text is kept.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def _to_int32(value: int) -> int:
    value = max(_LONG_MIN, min(_LONG_MAX, value)) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    if match is None or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, suffix: str | None = None) -> int:
    """Turn an XPM colour value into a 0xRRGGBB number.

    A value starting with '#' is read as hexadecimal. Otherwise ``suffix``,
    when given, is joined to the name with a space and the result looked up
    among the colour names, ignoring case. "None" gives -1, an unknown name 0.
    """
    if name.startswith("#"):
        return _to_int32(_parse_hex(name[1:]))
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from the strings of an XPM file, in order."""
    source = iter(lines)

    def next_line() -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = split_words(next_line())
    if len(header) < 4:
        raise XpmError("the XPM header needs width, height, colours and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    # Short keys index a direct table where later entries overwrite earlier
    # ones; longer keys are searched from the first entry read.
    first_wins = cpp > 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        key = line[:cpp]
        if len(key) < cpp:
            raise XpmError("colour line shorter than its key")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError("colour line has no 'c' entry") from None
        if index + 1 >= len(words):
            raise XpmError("colour line has no value after 'c'")
        suffix = words[index + 2] if index + 2 < len(words) else None
        color = text_to_rgb(words[index + 1], suffix)
        if first_wins:
            palette.setdefault(key, color)
        else:
            palette[key] = color

    rows: list[tuple[int, ...]] = []
    for _ in range(height):
        line = next_line()
        if len(line) < width * cpp:
            raise XpmError("pixel line shorter than the image width")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[start:start + cpp], 0))
                for start in range(0, width * cpp, cpp)
            )
        )
    return XpmImage(width, height, tuple(rows))


def parse_xpm_source(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def read_xpm_file(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            text = stream.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)!r}") from exc
    return parse_xpm_source(text)