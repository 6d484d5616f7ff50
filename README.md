# ftprint

ftprint is a printf-style formatter. It supports only a few conversions, on
purpose, and behaves like a minimal C `printf`:

- Integers wrap to the width of the C type the conversion reads. That is 32 bits
  for `%d`, `%i`, `%u`, `%x` and `%X`, and 64 bits for `%p`.
- A `%` at the very end of the format is printed as it is.
- An unknown conversion such as `%q` prints nothing and uses up no argument.
- Arguments left over after the format is used up are ignored.

## Installation

```
pip install .
```

## Conversions

| Spec | Meaning                                                       |
|------|---------------------------------------------------------------|
| `%c` | one character: a one-character string, or an integer (low byte) |
| `%s` | a string; `None` prints `(null)`                              |
| `%d` | signed decimal (32-bit)                                       |
| `%i` | same as `%d`                                                  |
| `%u` | unsigned decimal (32-bit)                                     |
| `%x` | lower-case hexadecimal (32-bit)                               |
| `%X` | upper-case hexadecimal (32-bit)                               |
| `%p` | `0x` and lower-case hex (64-bit); `None` or `0` prints `(nil)`  |
| `%%` | a literal percent sign; uses up no argument                   |

Flags, field widths and precisions are not supported.

## Usage

```python
from ftprint.printf import printf, render

text = render("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

count = printf("%c%c%%\n", "o", "k")   # writes "ok%\n" to stdout, returns 4
```

`render(fmt, *args)` returns the formatted text. `printf(fmt, *args, stream=None)`
writes the text to `stream` and returns the number of characters written.
If you do not pass a stream, it writes to standard output.

`convert(spec, args)` formats a single conversion. Its value comes from the
iterator `args`:

```python
from ftprint.printf import convert

convert("X", iter([48879]))   # 'BEEF'
```

Each conversion is also available as a function in `ftprint.conversions`:

```python
from ftprint.conversions import (
    format_char, format_decimal, format_hex, format_percent,
    format_pointer, format_string, format_unsigned,
)

format_hex(-1, upper=True)    # 'FFFFFFFF'
format_unsigned(-1)           # '4294967295'
format_decimal(2**31)         # '-2147483648'
format_pointer(0x1000)        # '0x1000'
format_pointer(None)          # '(nil)'
format_string(None)           # '(null)'
format_char(65)               # 'A'
format_percent()              # '%'
```

## Errors

- A conversion that needs a value but has no arguments left raises `TypeError`.
- An integer conversion given a non-integer raises `TypeError`.
- `%s` given anything other than a string or `None` raises `TypeError`.
- `%c` given a string that is not exactly one character long raises `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```