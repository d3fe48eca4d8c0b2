"""Reading XPM images from text.

An XPM file is C source holding an array of strings: a header line
(``width height colours chars-per-pixel``), one line per colour, and one
line per pixel row. Pixels are 32-bit values ``0xRRGGBB``; a transparent
colour (``none``) is stored as ``0xFF000000``.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .colors import text_to_rgb
from .search import atoi

_NUL = "\0"
_TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 32-bit pixel values, top row first."""

    width: int
    height: int
    pixels: Tuple[Tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """The pixel value at column ``x`` of row ``y``."""
        return self.pixels[y][x]

    def to_bytes(self) -> bytes:
        """Pixel data as little-endian 32-bit words, row by row."""
        fmt = f"<{self.width}I"
        return b"".join(struct.pack(fmt, *row) for row in self.pixels)


def _cstr(text: str) -> str:
    return text.split(_NUL, 1)[0]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def split_words(text: str) -> List[str]:
    """The words of ``text`` separated by spaces and tabs."""
    return [word for word in _cstr(text).replace("\t", " ").split(" ") if word]


def find(text: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` in ``text``, or ``None``.

    Nothing is found when ``needle`` is longer than ``length``.
    """
    _check_needle(needle)
    if len(needle) > length:
        return None
    found = _cstr(text).find(needle)
    return None if found == -1 else found


def find_unquoted(text: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`find`, but skips matches inside double-quoted strings."""
    _check_needle(needle)
    if len(needle) > length:
        return None
    s = _cstr(text)
    quoted = False
    for pos in range(len(s) - len(needle) + 1):
        if s[pos] == '"':
            quoted = not quoted
        if not quoted and s.startswith(needle, pos):
            return pos
    return None


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count :]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside strings with spaces.

    The length of the text is kept. A line comment is blanked up to and
    including its newline.
    """
    while (begin := find_unquoted(text, "/*", len(text))) is not None:
        rel = find(text[begin + 2 :], "*/", len(text) - begin - 2)
        end = -1 if rel is None else rel
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", len(text))) is not None:
        rel = find(text[begin + 2 :], "\n", len(text) - begin - 2)
        end = -1 if rel is None else rel
        text = _blank(text, begin, end + 3)
    return text


def extract_strings(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    s = _cstr(text)
    pos = 0
    while True:
        start = s.find('"', pos)
        if start == -1:
            return
        end = s.find('"', start + 1)
        if end == -1:
            return
        yield s[start + 1 : end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return _cstr(next(lines))
    except StopIteration:
        raise XpmError(f"missing {what} line") from None


def _pixel_value(color: int) -> int:
    return _TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def _parse_header(line: str) -> Tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"header needs four values, got {line!r}")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"header values must be positive, got {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> Tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    suffix = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[index + 1], suffix)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings (header, colours, then rows).

    With one or two characters per pixel a later colour line overrides an
    earlier one of the same name; with more, the first one is kept.
    Pixels naming no defined colour are 0.
    """
    it = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(it, "header"))
    later_wins = cpp <= 2
    colors: Dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(it, "colour"), cpp)
        if later_wins:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)
    rows = []
    for _ in range(height):
        line = _next_line(it, "pixel")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        keys = (line[i : i + cpp] for i in range(0, width * cpp, cpp))
        rows.append(tuple(_pixel_value(colors.get(key, 0)) for key in keys))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def load_xpm(path: Union[str, "PathLike[str]"]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return parse_xpm(extract_strings(strip_comments(text)))