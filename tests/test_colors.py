import pytest

from solong.colors import COLORS, lookup_color, to_visual_color

RGB_888 = (16, 8, 8, 8, 0, 8)
RGB_565 = (11, 5, 5, 6, 0, 5)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("gray50", 0x7F7F7F),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_first_duplicate_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_gray_and_grey_spellings_agree():
    for n in range(101):
        assert lookup_color(f"gray{n}") == lookup_color(f"grey{n}")


def test_every_table_name_is_found_in_any_case():
    for name, color in COLORS.items():
        assert name == name.lower()
        assert lookup_color(name) == color
        assert lookup_color(name.upper()) == color


@pytest.mark.parametrize("depth", [24, 32])
def test_deep_visual_keeps_color(depth):
    assert to_visual_color(0x123456, depth, RGB_565) == 0x123456


@pytest.mark.parametrize("color", [0x000000, 0xFF0000, 0x00FF00, 0x0000FF, 0x123456])
def test_888_layout_is_identity(color):
    assert to_visual_color(color, 16, RGB_888) == color


def test_565_layout_white_and_black():
    assert to_visual_color(0xFFFFFF, 16, RGB_565) == 0xFFFF
    assert to_visual_color(0x000000, 16, RGB_565) == 0


def test_565_layout_channels_do_not_overlap():
    red = to_visual_color(0xFF0000, 16, RGB_565)
    green = to_visual_color(0x00FF00, 16, RGB_565)
    blue = to_visual_color(0x0000FF, 16, RGB_565)
    assert red & green == 0 and green & blue == 0 and red & blue == 0
    assert red | green | blue == to_visual_color(0xFFFFFF, 16, RGB_565)


def test_bad_shifts_raise():
    with pytest.raises(ValueError):
        to_visual_color(0xFFFFFF, 16, (11, 5, 5))
    with pytest.raises(ValueError):
        to_visual_color(0xFFFFFF, 16, (0, 17, 0, 8, 0, 8))