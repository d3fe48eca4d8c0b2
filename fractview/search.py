"""String measurement, comparison, search and integer conversion.

Strings follow C string rules: an embedded ``"\\0"`` ends the string, and
the terminator itself can be searched for. Search functions return an
index into the string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

_WHITESPACE = frozenset(" \t\v\n\r\f")
_LONG_MAX = 2**63 - 1
_NUL = "\0"


def _cstr(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s.split(_NUL, 1)[0]


def _char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, after optional whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    A magnitude beyond the 64-bit range gives -1 when positive and 0 when
    negative; otherwise the result wraps to a 32-bit signed integer.
    """
    s = _cstr(text)
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    num = 0
    while pos < len(s) and "0" <= s[pos] <= "9":
        num = num * 10 + (ord(s[pos]) - ord("0"))
        if num > _LONG_MAX:
            return 0 if sign == -1 else -1
        pos += 1
    return _to_int32(sign * num)


def itoa(n: int) -> str:
    """Decimal text of ``n``, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def _compare(pairs) -> int:
    for a, b in pairs:
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first unequal characters, or 0 if the strings are equal."""
    return _compare(zip_longest(_cstr(s1), _cstr(s2), fillvalue=_NUL))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if n == 0:
        return 0
    return _compare(islice(zip_longest(_cstr(s1), _cstr(s2), fillvalue=_NUL), n))


def strequ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return _cstr(s1) == _cstr(s2)


def strnequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are given and agree on their first ``n`` characters."""
    if s1 is None or s2 is None:
        return False
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return _cstr(s1)[:n] == _cstr(s2)[:n]


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    found = text.find(ch)
    return None if found == -1 else found


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    found = text.rfind(ch)
    return None if found == -1 else found


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle is found at 0."""
    found = _cstr(haystack).find(_cstr(needle))
    return None if found == -1 else found


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    target = _cstr(needle)
    if not target:
        return 0
    found = _cstr(haystack)[:length].find(target)
    return None if found == -1 else found


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_cstr(s))