import io

import pytest

from libft.printf import FormatError, format_string, printf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%i", (-17,)),
        ("%u", (7,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%#X", (255,)),
        ("%s", ("hello",)),
        ("%c", (65,)),
        ("%c", ("z",)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (42,)),
        ("%06d", (-42,)),
        ("%.3d", (42,)),
        ("%.5d", (-42,)),
        ("%8.3d", (42,)),
        ("%-8.3d|", (42,)),
        ("%.4x", (255,)),
        ("%.2s", ("hello",)),
        ("%.0s", ("abc",)),
        ("%3.1s", ("abc",)),
        ("%10s", ("hi",)),
        ("%-10s|", ("hi",)),
        ("%5c", ("x",)),
        ("%-3c|", ("x",)),
        ("%+d", (5,)),
        ("%+d", (0,)),
        ("% d", (5,)),
        ("100%%", ()),
        ("x=%d y=%s z=%x", (3, "abc", 16)),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert format_string(fmt, *args) == fmt % args


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_pointer():
    assert format_string("%p", None) == "0x0"


def test_pointer_is_prefixed_hex():
    assert format_string("%p", 255) == "0x" + format_string("%x", 255)


def test_pointer_of_object_uses_identity():
    obj = object()
    assert format_string("%p", obj) == format_string("%p", id(obj))


def test_zero_flag_pads_strings_with_zeros():
    assert format_string("%05s", "ab") == "000ab"


def test_alternate_zero_has_no_prefix():
    assert format_string("%#x", 0) == format_string("%x", 0)


def test_zero_with_zero_precision_is_empty():
    assert format_string("%.0d", 0) == ""
    assert format_string("%3.0d", 0) == format_string("%3s", "")


def test_precision_disables_zero_flag():
    assert format_string("%08.3d", 42) == format_string("%8.3d", 42)


def test_minus_overrides_zero():
    assert format_string("%0-5d|", 7) == "%-5d|" % 7


def test_plus_on_negative_prints_plain_number():
    assert format_string("%+d", -3) == format_string("%d", -3)


def test_space_then_plus_uses_plus():
    assert format_string("% +d", 5) == format_string("%+d", 5)


def test_hash_on_decimal_repeats_conversion_letter():
    assert format_string("%#d", 42) == format_string("%d", 42) + "d"


def test_hash_at_end_writes_nothing():
    assert format_string("a%#") == "a"


def test_signed_wraps_to_32_bits():
    assert format_string("%d", 2**31) == str(-(2**31))


def test_unsigned_wraps_to_32_bits():
    assert format_string("%u", -1) == str(0xFFFFFFFF)
    assert format_string("%x", -1) == format(0xFFFFFFFF, "x")


def test_unknown_conversion_is_dropped():
    assert format_string("a%yb") == "ab"


def test_unknown_conversion_takes_an_argument():
    assert format_string("%y%d", 1, 2) == format_string("%d", 2)


def test_extra_arguments_are_ignored():
    assert format_string("%d", 1, 2, 3) == format_string("%d", 1)


def test_string_stops_at_nul():
    assert format_string("%s", "ab\0cd") == "ab"


def test_format_stops_at_nul():
    assert format_string("x\0%d", 1) == "x"


def test_nul_character_is_written():
    result = format_string("%c", 0)
    assert result == "\0"
    assert len(result) == 1


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d")


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_string("abc%")


def test_unsupported_conversion_after_width_raises():
    with pytest.raises(FormatError):
        format_string("%5%", 1)


def test_incomplete_width_raises():
    with pytest.raises(FormatError):
        format_string("%5", 1)


def test_none_format_raises():
    with pytest.raises(FormatError):
        format_string(None)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "seven")


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        format_string("%s")


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%05d\n", "n", -42, file=out)
    assert out.getvalue() == format_string("%s=%05d\n", "n", -42)
    assert count == len(out.getvalue())


def test_printf_counts_nul_character():
    out = io.StringIO()
    assert printf("a%cb", 0, file=out) == 3
    assert out.getvalue() == "a\0b"


def test_printf_defaults_to_stdout(capsys):
    count = printf("%d apples", 3)
    captured = capsys.readouterr().out
    assert captured == "3 apples"
    assert count == len(captured)