# pfmt

`pfmt` formats text the way a C `printf` does. It handles the conversions
`%c`, `%s`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p` and `%%`, and these flags:

- `-` left-justify within the field width
- `0` pad with zeros instead of spaces (ignored together with `-`, and for
  numbers when a precision is given)
- `#` prefix non-zero hexadecimal output with `0x`
- `'` group thousands with the current locale's separator
- ` ` (space) and `+` put a sign in front of non-negative signed numbers
- a field width and a `.precision`, either written in the format or taken
  from the arguments with `*` (a negative `*` width left-justifies, a
  negative `*` precision counts as none)
- the length modifiers `h`, `hh`, `l` and `ll`, which wrap integer
  arguments to 16, 8 and 64 bits; without one, integers wrap to 32 bits

## Installing

```
pip install pfmt
```

## Formatting

`pfmt.printf.format` returns the formatted string:

```python
from pfmt.printf import format

format("%5d|%-5d|", 42, 42)        # '   42|42   |'
format("%08.3d", -7)               # '    -007'
format("%#x %X", 255, 255)         # '0xff FF'
format("%.3s", "abcdef")           # 'abc'
format("%*d", -4, 1)               # '1   '
format("%hhd", 300)                # '44'
```

Arguments are consumed left to right, including those taken by `*`;
surplus arguments are ignored. A missing argument, an incomplete
specification or an unknown conversion raises `ValueError`; an argument of
the wrong kind raises `TypeError`. `%s` shows `None` as `(null)`, and `%p`
shows `None` as address `0x0`.

`pfmt.printf.printf` writes the same text to standard output and returns
the number of characters written. When formatting fails, nothing is
written and the error propagates.

## Building blocks

The pieces behind the formatter can be used on their own:

- `pfmt.spec.parse_spec(fmt, pos, args)` reads one conversion specification
  starting just after a `%` into a frozen `Spec` dataclass and returns it
  with the position after the conversion character.
- `pfmt.convert` renders a single value for a `Spec`: `format_char`,
  `format_string`, `format_signed`, `format_unsigned`, `format_hex`,
  `format_pointer`, and `render(spec, args)`, which picks the right one and
  draws the value from an iterator.
- `pfmt.numconv` converts integers to text in any base from 2 to 16
  (`itoa_base`, `utoa_base`), counts decimal digits (`int_length`) and
  thousands separators (`separator_count`), and wraps values to a fixed bit
  width (`to_signed`, `to_unsigned`).

There are also small text helpers with C semantics:

- `pfmt.chars`: `atoi`, `itoa`, `isalnum`, `isalpha`, `isascii`,
  `isdigit`, `isprint`, `toupper`, `tolower`.
- `pfmt.textops`: `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `memcmp`, `memchr`, `strchr`, `strrchr`. Searches return an index or
  `None` rather than a pointer.

## What it does not do

`pfmt` is a library only; it installs no command. It has no floating-point
conversions (`%f`, `%e`, `%g`), no `%o`, `%n` or positional (`%1$d`)
arguments, and it writes only to standard output, not to other streams or
file descriptors.

## Running the tests

```
pip install -e ".[test]"
pytest
```