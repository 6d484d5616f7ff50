"""A small printf supporting ``%c %s %p %d %i %u %x %X %%``."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Callable, TextIO

from ftprint.conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_percent,
    format_pointer,
    format_string,
    format_unsigned,
)

_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "d": format_decimal,
    "i": format_decimal,
    "c": format_char,
    "s": format_string,
    "u": format_unsigned,
    "p": format_pointer,
    "x": lambda value: format_hex(value, upper=False),
    "X": lambda value: format_hex(value, upper=True),
}


def convert(spec: str, args: Iterator[Any]) -> str:
    """Return the text for conversion ``spec``, taking its value from ``args``.

    ``%%`` takes no value; an unknown specifier produces nothing and takes
    no value.
    """
    if spec == "%":
        return format_percent()
    formatter = _CONVERSIONS.get(spec)
    if formatter is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return formatter(value)


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    A ``%`` at the very end of ``fmt`` is kept as it is.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        pieces.append("%" if spec is None else convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)