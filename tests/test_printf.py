import pytest

from solong.printf import format_string, printf


@pytest.mark.parametrize("value", [42, 0, 132])
def test_unsigned_small_values_match_decimal(value):
    assert format_string("%u", value) == str(value)


def test_unsigned_wraps_negative_values():
    assert format_string("%u", -5) == "4294967291"
    assert int(format_string("%u", -(2**31))) == 2**31


def test_decimal_int_max_and_min():
    assert format_string("%d", 2**31 - 1) == str(2**31 - 1)
    assert format_string("%i", -(2**31)) == str(-(2**31))


def test_decimal_wraps_to_signed_32_bit():
    assert format_string("%d", 2**32 - 1) == "-1"
    assert format_string(" %i ", -1) == " -1 "


@pytest.mark.parametrize("value", [0, 42, 56, 132, 2**31 - 1])
def test_hex_round_trips(value):
    assert int(format_string("%x", value), 16) == value
    assert int(format_string("%X", value), 16) == value


@pytest.mark.parametrize("value", [-1, -5, 42, -(2**31)])
def test_hex_upper_is_upper_of_lower(value):
    assert format_string("%X", value) == format_string("%x", value).upper()


def test_hex_of_minus_one():
    assert format_string("%x", -1) == "ffffffff"


def test_string_and_null_string():
    assert format_string("%s", "test") == "test"
    assert format_string("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert format_string("%c%c", ord("e"), "c") == "ec"


def test_char_rejects_long_string():
    with pytest.raises(TypeError):
        format_string("%c", "ab")


def test_pointer_null_and_nonzero():
    assert format_string(" %p  %p  ", None, 0) == " (nil)  (nil)  "
    text = format_string("%p", 255)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 255


def test_percent_sequences():
    assert format_string("la%%%%%%x") == "la%%%x"


def test_trailing_percent_is_literal():
    assert format_string("100%") == "100%"
    assert format_string("%%%") == "%%"


def test_unknown_conversion_is_dropped_without_consuming():
    assert format_string("a%qb%d", 7) == "ab7"


def test_not_enough_arguments():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_none_format_rejected():
    with pytest.raises(TypeError):
        format_string(None)


def test_ultimate_example():
    text = format_string(
        "Le %s ultime %d est la%%%%%% meilleur %c%c%c%c%c %p, %x %X\n\n",
        "test", 42, "e", "c", "o", "l", "e", None, 42, 42,
    )
    assert text == "Le test ultime 42 est la%%% meilleur ecole (nil), 2a 2A\n\n"


def test_printf_writes_and_counts(capsys):
    count = printf("ft_printf = %u  %u  %u  \n", 42, 0, 132)
    out = capsys.readouterr().out
    assert out == "ft_printf = 42  0  132  \n"
    assert count == len(out)


def test_printf_count_matches_format_string(capsys):
    count = printf("printf = %x\n", 2**31 - 1)
    out = capsys.readouterr().out
    assert out == format_string("printf = %x\n", 2**31 - 1)
    assert count == len(out)