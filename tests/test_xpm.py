import struct

import pytest

from fractview.xpm import (
    XpmError,
    XpmImage,
    extract_strings,
    find,
    find_unquoted,
    load_xpm,
    parse_xpm,
    split_words,
    strip_comments,
)


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb   c\t") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_find_locates_needle():
    text = "hello world"
    idx = find(text, "wor", len(text))
    assert text[idx : idx + 3] == "wor"
    assert idx == text.index("wor")


def test_find_missing_and_too_long():
    assert find("abc", "x", 3) is None
    assert find("abcdef", "abc", 2) is None


def test_find_empty_needle_rejected():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_match():
    text = '"/*" /*'
    idx = find_unquoted(text, "/*", len(text))
    assert idx == text.rindex("/*")


def test_find_unquoted_only_quoted():
    text = 'x "//" y'
    assert find_unquoted(text, "//", len(text)) is None


def test_strip_block_comment():
    text = "a /* x */ b"
    out = strip_comments(text)
    assert len(out) == len(text)
    assert out.split() == ["a", "b"]


def test_strip_line_comment_including_newline():
    text = "a // note\nb"
    out = strip_comments(text)
    assert len(out) == len(text)
    assert "\n" not in out
    assert out.split() == ["a", "b"]


def test_strip_keeps_quoted_comment_markers():
    text = '"/* not */" "http://x"'
    assert strip_comments(text) == text


def test_extract_strings():
    assert list(extract_strings('x "ab", y "cd" "unterminated')) == ["ab", "cd"]


def test_parse_named_and_none_colors():
    img = parse_xpm(["2 2 2 1", ". c red", "# c none", ".#", "#."])
    assert img.width == 2 and img.height == 2
    assert img.pixels == ((0xFF0000, 0xFF000000), (0xFF000000, 0xFF0000))
    assert img.pixel(1, 0) == 0xFF000000


def test_parse_hex_and_two_word_names():
    img = parse_xpm(["2 1 2 1", "o c #123456", "g c light grey", "og"])
    assert img.pixels == ((0x123456, 0xD3D3D3),)


def test_parse_unknown_name_and_undefined_key_give_zero():
    img = parse_xpm(["2 1 1 1", "a c nosuchcolor", "az"])
    assert img.pixels == ((0, 0),)


def test_parse_direct_method_later_color_wins():
    img = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert img.pixels == ((0x0000FF,),)


def test_parse_wide_keys_first_color_wins():
    img = parse_xpm(["2 1 2 3", "aaa c red", "aaa c blue", "aaaaaa"])
    assert img.pixels == ((0xFF0000, 0xFF0000),)


def test_to_bytes_round_trip():
    img = parse_xpm(["2 1 2 1", "r c red", "n c none", "rn"])
    data = img.to_bytes()
    assert len(data) == 4 * img.width * img.height
    assert struct.unpack("<2I", data) == img.pixels[0]


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 1 1 1", "a c red", "a"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_error_is_value_error():
    with pytest.raises(ValueError):
        parse_xpm(["bad"])


def test_load_xpm_file(tmp_path):
    source = (
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c blue",\n'
        '"b c #00ff00",\n'
        "// pixels\n"
        '"ab"\n'
        "};\n"
    )
    path = tmp_path / "img.xpm"
    path.write_text(source)
    img = load_xpm(path)
    assert isinstance(img, XpmImage)
    assert img.pixels == ((0x0000FF, 0x00FF00),)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")