"""Building new strings: copying, joining, slicing, trimming, splitting, mapping.

Strings follow C string rules: an embedded ``"\\0"`` ends the string.
Every function returns a new string rather than changing its argument.
Where an input string may be absent, ``None`` in gives ``None`` out.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Tuple

_NUL = "\0"
_TRIM_CHARS = " \n\t"


def _text(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s.split(_NUL, 1)[0]


def _check_count(n: int, what: str = "count") -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strncpy(src: str, n: int) -> str:
    """Exactly ``n`` characters: the start of ``src``, padded with NUL characters."""
    _check_count(n)
    head = _text(src)[:n]
    return head + _NUL * (n - len(head))


def strcat(dest: str, src: str) -> str:
    """``dest`` followed by ``src``."""
    return _text(dest) + _text(src)


def strncat(dest: str, src: str, n: int) -> str:
    """``dest`` followed by at most ``n`` characters of ``src``."""
    _check_count(n)
    return _text(dest) + _text(src)[:n]


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full concatenation
    would have had. The result never grows beyond ``size - 1`` characters;
    when ``dest`` already fills the buffer it is returned unchanged and the
    reported length is ``len(src) + size``.
    """
    _check_count(size, "size")
    head = _text(dest)
    tail = _text(src)
    if len(head) < size:
        return head + tail[: size - len(head) - 1], len(tail) + len(head)
    return head, len(tail) + size


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """The ``length`` characters of ``s`` beginning at ``start``."""
    if s is None:
        return None
    _check_count(start, "start")
    _check_count(length, "length")
    text = _text(s)
    if start + length > len(text):
        raise ValueError(
            f"substring [{start}, {start + length}) exceeds string length {len(text)}"
        )
    return text[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """``s1`` followed by ``s2``, or ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return _text(s1) + _text(s2)


def strnjoin(s1: Optional[str], s2: Optional[str], n: int) -> Optional[str]:
    """``s1`` followed by at most ``n`` characters of ``s2``, or ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    _check_count(n)
    return _text(s1) + _text(s2)[:n]


def strtrim(s: Optional[str]) -> Optional[str]:
    """``s`` without leading and trailing spaces, newlines and tabs."""
    if s is None:
        return None
    return _text(s).strip(_TRIM_CHARS)


def strsplit(s: Optional[str], sep: str) -> Optional[List[str]]:
    """The non-empty runs of ``s`` between occurrences of the character ``sep``."""
    if s is None:
        return None
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _text(s)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strrev(s: Optional[str]) -> Optional[str]:
    """``s`` reversed."""
    if s is None:
        return None
    return _text(s)[::-1]


def strmap(s: Optional[str], func: Callable[[str], str]) -> Optional[str]:
    """A new string made of ``func(c)`` for every character ``c`` of ``s``."""
    if s is None:
        return None
    return "".join(func(c) for c in _text(s))


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """A new string made of ``func(i, c)`` for every character ``c`` at index ``i``."""
    if s is None:
        return None
    return "".join(func(i, c) for i, c in enumerate(_text(s)))


def _chars(s: Optional[str]) -> Iterator[str]:
    return iter(()) if s is None else iter(_text(s))


def striter(s: Optional[str], func: Optional[Callable[[str], object]]) -> None:
    """Call ``func(c)`` for every character of ``s``; nothing happens if either is missing."""
    if func is None:
        return
    for c in _chars(s):
        func(c)


def striteri(
    s: Optional[str], func: Optional[Callable[[int, str], object]]
) -> None:
    """Call ``func(i, c)`` for every character of ``s``; nothing happens if either is missing."""
    if func is None:
        return
    for i, c in enumerate(_chars(s)):
        func(i, c)