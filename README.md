# fractview

A small pure-Python library: it reads XPM images, resolves X11 colour names,
and carries a handful of character, string, output and linked-list helpers.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## XPM images

`fractview.xpm` decodes XPM images into an `XpmImage` (a frozen dataclass with
`width`, `height` and `pixels`, a tuple of rows of 32-bit `0xRRGGBB` values).
Transparent pixels (colour `none`) are stored as `0xFF000000`.

```python
from fractview.xpm import load_xpm, parse_xpm

image = parse_xpm([
    "2 1 2 1",
    "a c red",
    "b c #00FF00",
    "ab",
])
image.pixel(0, 0)     # 0xFF0000
image.pixel(1, 0)     # 0x00FF00
raw = image.to_bytes()  # little-endian 32-bit words, row by row

image = load_xpm("icon.xpm")
```

`load_xpm` blanks out `/* */` and `//` comments outside quoted strings
(`strip_comments`), collects the quoted strings (`extract_strings`) and passes
them to `parse_xpm`. Malformed data raises `XpmError`, a subclass of
`ValueError`. The helpers `split_words`, `find` and `find_unquoted` are public
as well.

## Colour names

`fractview.colors` holds the X11 colour table.

```python
from fractview.colors import color_by_name, text_to_rgb

color_by_name("Dodger Blue")   # 0x1E90FF, case does not matter
color_by_name("none")          # -1
text_to_rgb("#ff8800")         # 0xFF8800
text_to_rgb("light", "green")  # 0x90EE90
text_to_rgb("no such colour")  # 0
```

`color_by_name` raises `KeyError` for an unknown name; `text_to_rgb` gives 0.

## Small utilities

- `fractview.chars` — ASCII classification and case conversion:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`,
  `to_upper`. Each takes a code point or a one-character string.
- `fractview.search` — `atoi`, `itoa`, `strlen`, `strcmp`, `strncmp`,
  `strequ`, `strnequ`, `strchr`, `strrchr`, `strstr`, `strnstr`. Strings end
  at an embedded `"\0"`; searches return an index or `None`.
- `fractview.strtools` — functions that build new strings: `strncpy`,
  `strcat`, `strncat`, `strlcat`, `strsub`, `strjoin`, `strnjoin`, `strtrim`,
  `strsplit`, `strrev`, `strmap`, `strmapi`, `striter`, `striteri`.
- `fractview.output` — `putchar`, `putstr`, `putendl`, `putnbr` and
  `print_words_table`, writing to a given text stream or to standard output.
- `fractview.linked` — `LinkedList` with `push_front`, `map`, `clear`,
  iteration and `len()`, plus `count_if` and `foreach`.

## What this package does not do

There is no fractal renderer, no interactive window and no command-line
program here: the package does not draw Mandelbrot, Julia or other fractals,
and installs no command. It also has no byte-buffer (memory) helpers. It is a
library of the modules listed above and nothing more.