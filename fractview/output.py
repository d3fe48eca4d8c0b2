"""Writing characters, strings and numbers to text streams.

Every function writes to ``stream``, which defaults to standard output.
"""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def putendl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    _target(stream).write(str(n))


def print_words_table(
    words: Iterable[str], sep: str = "\n", stream: Optional[TextIO] = None
) -> None:
    """Write each word followed by ``sep``."""
    out = _target(stream)
    for word in words:
        out.write(word)
        out.write(sep)