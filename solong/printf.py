"""A small printf supporting the %c %s %d %i %u %x %X %p and %% conversions."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Callable, Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000
_PTR_MASK = 0xFFFFFFFFFFFFFFFF

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)


def _as_int32(value: Any) -> int:
    number = operator.index(value) & _UINT_MASK
    return number - (1 << 32) if number & _INT_SIGN else number


def _as_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _decimal(value: Any) -> str:
    return str(_as_int32(value))


def _unsigned(value: Any) -> str:
    return str(_as_uint32(value))


def _hex_lower(value: Any) -> str:
    return format(_as_uint32(value), "x")


def _hex_upper(value: Any) -> str:
    return format(_as_uint32(value), "X")


def _pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _PTR_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def format_string(fmt: str, *args: Any) -> str:
    """Return the text that printf would write for ``fmt`` and ``args``.

    An unknown conversion is dropped together with its '%'; a '%' at the
    very end of the format is written as is.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    remaining: Iterator[Any] = iter(args)

    def expand(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            return ""
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        return convert(value)

    return _DIRECTIVE.sub(expand, fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)