import pytest

from cursus.printf import Flags, format_address, format_hex, parse_flags, printf, render


@pytest.mark.parametrize(
    ("fmt", "arg"),
    [
        ("%d", 42),
        ("%i", -17),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", -42),
        ("%+d", 7),
        ("% d", 7),
        ("%+5d", 7),
        ("%.3d", 7),
        ("%8.3d", -7),
        ("%-8.3d|", 12),
        ("%u", 3000000000),
        ("%7u", 12),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#X", 48879),
        ("%#08x", 255),
        ("%08X", 255),
        ("%.4x", 10),
        ("%s", "hello"),
        ("%.2s", "hello"),
        ("%8s", "hello"),
        ("%-8s|", "hello"),
        ("%c", 65),
        ("%5c", 65),
        ("%-3c|", 66),
    ],
)
def test_render_agrees_with_c_style_formatting(fmt, arg):
    assert render(fmt, arg) == fmt % arg


def test_literal_text_passes_through():
    assert render("plain text") == "plain text"


def test_percent_conversion_takes_no_argument():
    assert render("100%% of %d", 5) == "100% of 5"


def test_percent_ignores_width():
    assert render("%5%") == "%"


def test_null_string_and_short_precision():
    assert render("%s", None) == "(null)"
    assert render("%.3s", None) == ""
    assert render("%.6s", None) == "(null)"


def test_null_pointer():
    assert render("%p", None) == "(nil)"
    assert render("%p", 0) == "(nil)"


def test_pointer_is_prefixed_hex():
    text = render("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text, 16) == 0xDEADBEEF


def test_pointer_width_pads_with_spaces():
    text = render("%20p", 4096)
    assert len(text) == 20
    assert text.strip() == format_address(4096)
    assert render("%-20p|", 4096) == format_address(4096).ljust(20) + "|"


def test_zero_with_zero_precision_is_empty():
    assert render("%.0d", 0) == ""
    assert render("%.0x", 0) == ""
    assert render("%3.0u|", 0) == "   |"


def test_hash_on_zero_has_no_prefix():
    assert render("%#x", 0) == "0"


def test_char_with_zero_precision_is_empty():
    assert render("%.0c|", 65) == "|"


def test_int32_wraparound():
    assert render("%d", 2**31) == str(-2147483648)
    assert int(render("%u", -1)) == 2**32 - 1


def test_char_accepts_string():
    assert render("%c%c", "o", "k") == "ok"


def test_parse_flags_reads_everything():
    flags, conversion, end = parse_flags("%-08.3xrest", 1)
    assert flags == Flags(minus=True, zero=True, width=8, precision=3)
    assert conversion == "x"
    assert end == 7


def test_parse_flags_width_starting_with_one():
    flags, conversion, end = parse_flags("10d", 0)
    assert flags.width == 10
    assert flags.zero is False
    assert (conversion, end) == ("d", 3)


def test_parse_flags_bare_point_means_zero_precision():
    flags, conversion, _ = parse_flags(".s", 0)
    assert flags.precision == 0
    assert conversion == "s"


def test_parse_flags_rejects_unknown_conversion():
    with pytest.raises(ValueError):
        parse_flags("q", 0)


def test_incomplete_specification_raises():
    with pytest.raises(ValueError):
        render("trailing %")
    with pytest.raises(ValueError):
        render("%5")


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        render("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        render("%d", "x")
    with pytest.raises(TypeError):
        render("%s", 5)


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 65535, 2**32 - 1, -1, 2**40 + 7])
def test_format_hex_round_trip(number):
    lower = format_hex(number, False)
    upper = format_hex(number, True)
    assert int(lower, 16) == number & 0xFFFFFFFF
    assert upper == lower.upper()


def test_format_address_round_trip():
    for address in (1, 0x7FFF0000, 2**63 + 5):
        text = format_address(address)
        assert text.startswith("0x")
        assert int(text[2:], 16) == address


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%5d|%-4x|\n", "key", -12, 171)
    out = capsys.readouterr().out
    assert out == render("%s=%5d|%-4x|\n", "key", -12, 171)
    assert count == len(out)
    assert out == "key=%5d|%-4x|\n" % (-12, 171)