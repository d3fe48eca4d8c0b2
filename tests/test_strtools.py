import pytest

from fractview.chars import to_upper
from fractview.strtools import (
    strcat,
    strjoin,
    strlcat,
    strmap,
    strmapi,
    strncat,
    strncpy,
    striter,
    striteri,
    strnjoin,
    strrev,
    strsplit,
    strsub,
    strtrim,
)


def test_strncpy_pads_with_nul():
    result = strncpy("abc", 6)
    assert len(result) == 6
    assert result.startswith("abc")
    assert result[3:] == "\0" * 3


def test_strncpy_truncates():
    src = "abcdef"
    assert strncpy(src, 3) == src[:3]


def test_strncpy_negative_count():
    with pytest.raises(ValueError):
        strncpy("abc", -1)


def test_strcat_concatenates():
    a, b = "foo", "bar"
    assert strcat(a, b) == a + b


def test_strcat_stops_at_nul():
    assert strcat("ab\0zz", "cd\0yy") == "ab" + "cd"


def test_strncat_limits_source():
    dest, src = "ab", "cdef"
    assert strncat(dest, src, 2) == dest + src[:2]
    assert strncat(dest, src, 100) == dest + src


def test_strlcat_fits():
    dest, src = "ab", "cd"
    result, total = strlcat(dest, src, 10)
    assert result == dest + src
    assert total == len(dest) + len(src)


def test_strlcat_truncates_to_size_minus_one():
    dest, src = "abc", "defgh"
    result, total = strlcat(dest, src, 5)
    assert len(result) == 4
    assert (dest + src).startswith(result)
    assert total == len(dest) + len(src)


def test_strlcat_when_dest_fills_buffer():
    dest, src = "abcdef", "xy"
    result, total = strlcat(dest, src, 3)
    assert result == dest
    assert total == len(src) + 3


def test_strsub_slices():
    s = "hello world"
    assert strsub(s, 2, 3) == s[2:5]
    assert strsub(s, 0, len(s)) == s


def test_strsub_out_of_range():
    with pytest.raises(ValueError):
        strsub("abc", 2, 5)


def test_strsub_none():
    assert strsub(None, 0, 1) is None


def test_strjoin():
    a, b = "left", "right"
    assert strjoin(a, b) == a + b
    assert strjoin(None, b) is None
    assert strjoin(a, None) is None


def test_strnjoin():
    a, b = "left", "right"
    assert strnjoin(a, b, 2) == a + b[:2]
    assert strnjoin(a, b, 50) == a + b
    assert strnjoin(None, b, 2) is None


def test_strtrim_removes_space_newline_tab():
    assert strtrim(" \t\nhi there \n") == "hi there"


def test_strtrim_all_whitespace_and_empty():
    assert strtrim(" \n\t ") == ""
    assert strtrim("") == ""
    assert strtrim(None) is None


def test_strtrim_keeps_other_whitespace():
    assert strtrim("\vx\v") == "\vx\v"


def test_strsplit_drops_empty_words():
    s = "*hello*fellow***students*"
    words = strsplit(s, "*")
    assert words == ["hello", "fellow", "students"]
    assert all("*" not in w and w for w in words)


def test_strsplit_edge_cases():
    assert strsplit("", " ") == []
    assert strsplit("    ", " ") == []
    assert strsplit("single", " ") == ["single"]
    assert strsplit(None, " ") is None


def test_strsplit_bad_separator():
    with pytest.raises(ValueError):
        strsplit("a b", "ab")


def test_strrev():
    s = "abcdef"
    assert strrev(strrev(s)) == s
    assert strrev("abc") == "cba"
    assert strrev("") == ""


def test_strmap_uses_function():
    assert strmap("abc1", to_upper) == "ABC1"
    assert strmap(None, to_upper) is None


def test_strmapi_passes_index():
    s = "xyz"
    result = strmapi(s, lambda i, c: c if i % 2 == 0 else to_upper(c))
    assert result == "xYz"
    assert len(result) == len(s)


def test_striter_visits_each_character():
    seen = []
    striter("hey\0ignored", seen.append)
    assert seen == ["h", "e", "y"]


def test_striter_missing_arguments():
    seen = []
    striter(None, seen.append)
    striter("abc", None)
    assert seen == []


def test_striteri_passes_indices():
    seen = []
    striteri("abc", lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("abc"))