"""Formatting of single values for the printf-style conversions.

Each function returns the text a conversion produces. Integer arguments
are wrapped to the width of the C type the conversion reads: 32 bits for
``%d``, ``%i``, ``%u``, ``%x`` and ``%X``, and 64 bits for ``%p``.
"""

from __future__ import annotations

_INT_BITS = 32
_POINTER_BITS = 64

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"


def _require_int(value: object, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        )
    return value


def _to_unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _to_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def _hex_digits(value: int, upper: bool) -> str:
    return format(value, "X" if upper else "x")


def format_char(value: int | str) -> str:
    """Return the single character for ``%c``.

    An integer is truncated to one byte; a string must hold exactly one
    character.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(
                f"%c expects a single character, got {len(value)} characters"
            )
        return value
    return chr(_require_int(value, "c") & 0xFF)


def format_string(value: str | None) -> str:
    """Return the text for ``%s``; ``None`` prints as ``(null)``."""
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def format_decimal(value: int) -> str:
    """Return the signed decimal text for ``%d`` and ``%i``."""
    return str(_to_signed(_require_int(value, "d"), _INT_BITS))


def format_unsigned(value: int) -> str:
    """Return the unsigned decimal text for ``%u``."""
    return str(_to_unsigned(_require_int(value, "u"), _INT_BITS))


def format_hex(value: int, upper: bool) -> str:
    """Return the hexadecimal text for ``%x`` or, if ``upper``, ``%X``."""
    number = _to_unsigned(_require_int(value, "X" if upper else "x"), _INT_BITS)
    return _hex_digits(number, upper)


def format_pointer(address: int | None) -> str:
    """Return the text for ``%p``: ``0x`` and lower-case hex, or ``(nil)``."""
    if address is None:
        return NULL_POINTER
    number = _to_unsigned(_require_int(address, "p"), _POINTER_BITS)
    if number == 0:
        return NULL_POINTER
    return POINTER_PREFIX + _hex_digits(number, upper=False)


def format_percent() -> str:
    """Return the text for ``%%``."""
    return "%"