import pytest

from minirt.printf.spec import (
    DataType,
    Flag,
    FormatSpec,
    digit_count,
    fill,
    parse_spec,
    signed_digit_count,
)


def test_plain_decimal():
    spec, used = parse_spec("%d")
    assert used == 2
    assert spec.conversion == "d"
    assert spec.type is DataType.INT
    assert spec.flags == Flag.NO_FLAG


@pytest.mark.parametrize(
    "fmt,expected",
    [
        ("%c", DataType.CHAR),
        ("%s", DataType.STR),
        ("%p", DataType.PTR),
        ("%i", DataType.INT),
        ("%u", DataType.UINT),
        ("%x", DataType.UINT),
        ("%X", DataType.UINT),
        ("%%", DataType.NONE),
    ],
)
def test_datatypes(fmt, expected):
    spec, used = parse_spec(fmt)
    assert spec.type is expected
    assert spec.conversion == fmt[1]
    assert used == len(fmt)


def test_width_with_minus():
    spec, used = parse_spec("%-10s")
    assert used == len("%-10s")
    assert spec.flags & Flag.MINUS
    assert spec.width == 10


def test_precision():
    spec, _ = parse_spec("%.5d")
    assert spec.flags & Flag.DOT
    assert spec.precision == 5
    assert spec.width == 0


def test_zero_after_dot_is_precision():
    spec, used = parse_spec("%.05d")
    assert used == len("%.05d")
    assert not spec.flags & Flag.ZERO
    assert spec.precision == 5


def test_zero_flag_width():
    spec, _ = parse_spec("%010d")
    assert spec.flags & Flag.ZERO
    assert spec.width == 10


def test_width_and_precision():
    spec, _ = parse_spec("%8.3u")
    assert spec.width == 8
    assert spec.precision == 3


def test_minus_cancels_zero_for_int():
    spec, _ = parse_spec("%-05d")
    assert spec.flags & Flag.MINUS
    assert not spec.flags & Flag.ZERO
    assert spec.width == 5


def test_zero_dropped_for_string():
    spec, _ = parse_spec("%05s")
    assert not spec.flags & Flag.ZERO
    assert spec.width == 5


def test_percent_resets_everything():
    spec, used = parse_spec("%-5%")
    assert used == len("%-5%")
    assert spec.flags == Flag.NO_FLAG
    assert spec.width == 0
    assert spec.precision == 0


def test_hash_plus_space():
    spec, _ = parse_spec("%#x")
    assert spec.flags == Flag.HASH
    spec, _ = parse_spec("%+ d")
    assert spec.flags == Flag.PLUS | Flag.SPACE


def test_parse_in_middle_of_string():
    fmt = "ab%xcd"
    spec, used = parse_spec(fmt, 2)
    assert used == 2
    assert spec.conversion == "x"


def test_spec_without_conversion():
    spec, used = parse_spec("%5")
    assert spec.conversion == ""
    assert spec.type is DataType.NONE
    assert spec.width == 5
    assert used == len("%5")


def test_invalid_character_stops_parse():
    spec, used = parse_spec("%q")
    assert used == 1
    assert spec.conversion == ""


@pytest.mark.parametrize("fmt,pos", [("%", 0), ("abc", 0), ("x%", 1), ("ab", 5)])
def test_parse_errors(fmt, pos):
    with pytest.raises(ValueError):
        parse_spec(fmt, pos)


def test_asterisk_width():
    spec, _ = parse_spec("%*d")
    assert spec.flags & Flag.DAST
    spec.apply_asterisks(iter([7]))
    assert spec.width == 7
    assert not spec.flags & Flag.MINUS


def test_negative_asterisk_width_sets_minus():
    spec, _ = parse_spec("%*d")
    spec.apply_asterisks(iter([-3]))
    assert spec.width == 3
    assert spec.flags & Flag.MINUS


def test_negative_asterisk_precision_drops_dot():
    spec, _ = parse_spec("%.*d")
    assert spec.flags & Flag.PAST
    spec.apply_asterisks(iter([-1]))
    assert spec.precision == 0
    assert not spec.flags & Flag.DOT
    assert not spec.flags & Flag.PAST


def test_width_and_precision_asterisks_consume_in_order():
    spec, _ = parse_spec("%*.*d")
    args = iter([6, 2, "rest"])
    spec.apply_asterisks(args)
    assert spec.width == 6
    assert spec.precision == 2
    assert next(args) == "rest"


def test_reversed_asterisks():
    spec, _ = parse_spec("%.**d")
    assert spec.past_reversed
    spec.apply_asterisks(iter([4, 9]))
    assert spec.precision == 4
    assert spec.width == 9


def test_asterisk_without_argument():
    spec, _ = parse_spec("%*d")
    with pytest.raises(TypeError):
        spec.apply_asterisks(iter([]))


def test_validate_on_manual_spec():
    spec = FormatSpec(flags=Flag.MINUS | Flag.ZERO, conversion="u", type=DataType.UINT)
    spec.validate()
    assert spec.flags == Flag.MINUS


@pytest.mark.parametrize("size,char", [(3, "0"), (1, " "), (0, "x")])
def test_fill_positive(size, char):
    out = fill(size, char)
    assert len(out) == size
    assert set(out) <= {char}


def test_fill_negative_is_empty():
    assert fill(-4, " ") == ""


@pytest.mark.parametrize("n", [0, 1, 9, 10, 99, 100, 123456789])
def test_digit_count_decimal_matches_str(n):
    assert digit_count(n, 10) == len(str(n))


@pytest.mark.parametrize("n", [0, 15, 16, 255, 4096])
def test_digit_count_hex_matches_format(n):
    assert digit_count(n, 16) == len(format(n, "x"))


def test_digit_count_degenerate_base():
    assert digit_count(42, 1) == 0


def test_digit_count_rejects_negative():
    with pytest.raises(ValueError):
        digit_count(-1, 10)


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -12345])
def test_signed_digit_count_matches_str(n):
    assert signed_digit_count(n, 10) == len(str(n))