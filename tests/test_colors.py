import pytest

from fractview.colors import color_by_name, text_to_rgb


@pytest.mark.parametrize(
    "name, value",
    [
        ("red", 0xFF0000),
        ("ghostwhite", 0xF8F8FF),
        ("snow4", 0x8B8989),
        ("gray50", 0x7F7F7F),
        ("darkred", 0x8B0000),
    ],
)
def test_color_by_name_pins_table_values(name, value):
    assert color_by_name(name) == value


def test_color_by_name_ignores_case():
    assert color_by_name("GHOST White") == color_by_name("ghost white")
    assert color_by_name("Red") == color_by_name("red")


def test_first_listed_entry_wins_for_duplicate_names():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899


def test_none_is_transparent():
    assert color_by_name("none") == -1


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_levels_are_neutral_and_increasing():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        blue = value & 0xFF
        assert value == blue * 0x010101


def test_gray_extremes_match_black_and_white():
    assert color_by_name("gray0") == color_by_name("black")
    assert color_by_name("gray100") == color_by_name("white")


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        color_by_name("no such colour")


def test_color_by_name_rejects_non_string():
    with pytest.raises(TypeError):
        color_by_name(42)


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff8800") == 0xFF8800
    assert text_to_rgb("#FF8800") == 0xFF8800


def test_text_to_rgb_hex_stops_at_non_digit():
    assert text_to_rgb("#12zz") == 0x12


def test_text_to_rgb_hex_without_digits_is_zero():
    assert text_to_rgb("#") == 0
    assert text_to_rgb("#zz") == 0


def test_text_to_rgb_hex_accepts_prefix():
    assert text_to_rgb("#0x1f") == 0x1F


def test_text_to_rgb_hex_wraps_to_signed_32_bits():
    assert text_to_rgb("#ffffffff") == -1


def test_text_to_rgb_hex_ignores_suffix():
    assert text_to_rgb("#00ff00", "ignored") == 0x00FF00


def test_text_to_rgb_joins_name_and_suffix():
    assert text_to_rgb("ghost", "white") == color_by_name("ghost white")
    assert text_to_rgb("Navy", "Blue") == color_by_name("navy blue")


def test_text_to_rgb_matches_lookup_by_name():
    for name in ("red", "cornflowerblue", "thistle3", "none"):
        assert text_to_rgb(name) == color_by_name(name)


def test_text_to_rgb_unknown_name_is_zero():
    assert text_to_rgb("no such colour") == 0
    assert text_to_rgb("ghost", "purple") == 0


def test_text_to_rgb_truncates_joined_name():
    long_suffix = "x" * 100
    assert text_to_rgb("red", long_suffix) == 0
    assert text_to_rgb("x" * 70, "y") == 0