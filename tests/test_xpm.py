import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    parse_xpm,
    parse_xpm_source,
    read_xpm_file,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #00FF00",
"X c red",
/* pixels */
"X. ",
" .X"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_block_comment_keeps_length():
    text = "a/*xyz*/b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.replace(" ", "") == "ab"


def test_strip_comment_inside_quotes_is_kept():
    text = '"a/*b*/c"'
    assert strip_comments(text) == text


def test_strip_line_comment_with_newline():
    text = "x // note\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "note" not in result
    assert "\n" not in result
    assert result.replace(" ", "") == "xy"


def test_strip_unterminated_comment_blanks_rest():
    result = strip_comments("ab/* open")
    assert result.startswith("ab")
    assert result[2:].strip() == ""


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000") == 0xFF0000


def test_text_to_rgb_name():
    assert text_to_rgb("red") == 0xFF0000
    assert text_to_rgb("RED") == 0xFF0000


def test_text_to_rgb_none_name():
    assert text_to_rgb("None") == -1


def test_text_to_rgb_with_suffix():
    assert text_to_rgb("dark", "red") == 0x8B0000


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour") == 0


def test_text_to_rgb_all_ones_is_minus_one():
    assert text_to_rgb("#FFFFFFFF") == -1


def test_parse_xpm_basic():
    image = parse_xpm(["2 1 2 1", "a c #00FF00", "b c #0000FF", "ab"])
    assert (image.width, image.height) == (2, 1)
    assert image.pixel(0, 0) == 0x00FF00
    assert image.pixel(1, 0) == 0x0000FF


def test_parse_xpm_transparent():
    image = parse_xpm(["1 1 1 1", "  c None", " "])
    assert image.pixel(0, 0) == TRANSPARENT


def test_parse_xpm_unknown_key_is_zero():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.pixel(0, 0) == 0


def test_parse_xpm_short_keys_last_wins():
    image = parse_xpm(["1 1 2 1", "a c #00FF00", "a c #0000FF", "a"])
    assert image.pixel(0, 0) == 0x0000FF


def test_parse_xpm_long_keys_first_wins():
    image = parse_xpm(["1 1 2 3", "abc c #00FF00", "abc c #0000FF", "abc"])
    assert image.pixel(0, 0) == 0x00FF00


def test_parse_xpm_two_char_keys():
    image = parse_xpm(["2 1 2 2", "aa c #00FF00", "bb c red", "bbaa"])
    assert image.pixels == ((0xFF0000, 0x00FF00),)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 0 1 1", "a c red"],
        ["1 1 0 1", "a"],
        ["1 1 1 0", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["x y z w"],
    ],
)
def test_parse_xpm_bad_header(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_parse_xpm_missing_lines():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "a c red", "a"])


def test_parse_xpm_colour_without_c():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a m red", "a"])


def test_parse_xpm_colour_without_value():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a c", "a"])


def test_parse_xpm_short_pixel_line():
    with pytest.raises(XpmError):
        parse_xpm(["3 1 1 1", "a c red", "aa"])


def test_parse_xpm_empty():
    with pytest.raises(XpmError):
        parse_xpm([])


def test_pixel_out_of_range():
    image = parse_xpm(["1 1 1 1", "a c red", "a"])
    with pytest.raises(IndexError):
        image.pixel(1, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_parse_xpm_source_sample():
    image = parse_xpm_source(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixels[0] == (0xFF0000, 0x00FF00, TRANSPARENT)
    assert image.pixels[1] == (TRANSPARENT, 0x00FF00, 0xFF0000)


def test_read_xpm_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert read_xpm_file(path) == parse_xpm_source(SAMPLE)


def test_read_xpm_file_missing(tmp_path):
    with pytest.raises(XpmError):
        read_xpm_file(tmp_path / "missing.xpm")