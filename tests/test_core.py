import io

import pytest

from minirt.printf.core import LogLevel, log_to, printf, printf_to, sprintf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("plain text", ()),
        ("%d", (42,)),
        ("%5d|%-5d|%05d", (42, 42, 42)),
        ("%+d % d", (7, 7)),
        ("%.3d", (5,)),
        ("%s and %s", ("left", "right")),
        ("%-8s|%8s", ("ab", "cd")),
        ("%.2s", ("abcdef",)),
        ("%x %X %#x %#X", (255, 255, 255, 255)),
        ("%u", (3000000000,)),
        ("%c%c", ("o", "k")),
        ("100%%", ()),
        ("%*d", (6, 12)),
        ("%.*d", (4, 12)),
    ],
)
def test_sprintf_matches_percent_formatting(fmt, args):
    assert sprintf(fmt, *args) == fmt % args


def test_sprintf_leaves_text_without_conversions():
    text = "no conversions here"
    assert sprintf(text) == text


def test_sprintf_negative_star_width_left_justifies():
    assert sprintf("%*d|", -4, 1) == sprintf("%-4d|", 1)


def test_trailing_percent_is_rejected():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_unknown_conversion_is_rejected():
    with pytest.raises(ValueError):
        sprintf("%q")


def test_missing_argument_raises_type_error():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_printf_writes_to_stdout_and_returns_length(capsys):
    count = printf("%s=%d\n", "x", 3)
    out = capsys.readouterr().out
    assert out == "x=3\n"
    assert count == len(out)


def test_printf_to_writes_to_stream():
    stream = io.StringIO()
    count = printf_to(stream, "%05d", 42)
    assert stream.getvalue() == "%05d" % 42
    assert count == len(stream.getvalue())


def test_log_filtered_by_default_threshold():
    stream = io.StringIO()
    assert log_to(LogLevel.CRITICAL, stream, "boom") == 0
    assert stream.getvalue() == ""


def test_log_writes_prefix_when_threshold_reached():
    stream = io.StringIO()
    count = log_to(LogLevel.INFO, stream, "%d items\n", 3, threshold=LogLevel.DEBUG)
    assert stream.getvalue() == "[INFO] 3 items\n"
    assert count == len(stream.getvalue())


def test_log_below_threshold_is_dropped():
    stream = io.StringIO()
    assert log_to(LogLevel.DEBUG, stream, "hidden", threshold=LogLevel.WARNING) == 0
    assert stream.getvalue() == ""


@pytest.mark.parametrize(
    "level, prefix",
    [
        (LogLevel.DEBUG, "[DEBUG] "),
        (LogLevel.WARNING, "[WARNING] "),
        (LogLevel.ERROR, "[ERROR] "),
        (LogLevel.CRITICAL, "[CRITICAL] "),
    ],
)
def test_log_prefixes(level, prefix):
    stream = io.StringIO()
    log_to(level, stream, "msg", threshold=LogLevel.DEBUG)
    assert stream.getvalue() == prefix + "msg"


def test_no_log_level_has_no_prefix():
    stream = io.StringIO()
    log_to(LogLevel.NO_LOG, stream, "raw", threshold=LogLevel.DEBUG)
    assert stream.getvalue() == "raw"