"""Conversion specifications: parsing, validation and small formatting helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator

_DIGITS = "0123456789"
_FLAG_CHARS = "-0.#+ "
_CONVERSIONS = "cspdiuxX%"


class Flag(enum.IntFlag):
    """Flags gathered while parsing a conversion specification."""

    NO_FLAG = 0
    MINUS = enum.auto()
    ZERO = enum.auto()
    DOT = enum.auto()
    HASH = enum.auto()
    PLUS = enum.auto()
    SPACE = enum.auto()
    DAST = enum.auto()  # width given by '*'
    PAST = enum.auto()  # precision given by '*'


class DataType(enum.Enum):
    """Kind of argument a conversion consumes."""

    NONE = 0
    CHAR = 1
    STR = 2
    PTR = 3
    INT = 4
    UINT = 5


_DATATYPES = {
    "c": DataType.CHAR,
    "%": DataType.NONE,
    "s": DataType.STR,
    "p": DataType.PTR,
    "d": DataType.INT,
    "i": DataType.INT,
    "u": DataType.UINT,
    "x": DataType.UINT,
    "X": DataType.UINT,
}

_SIMPLE_FLAGS = {
    "-": Flag.MINUS,
    ".": Flag.DOT,
    "#": Flag.HASH,
    "+": Flag.PLUS,
    " ": Flag.SPACE,
}


@dataclass
class FormatSpec:
    """One parsed ``%`` conversion."""

    flags: Flag = Flag.NO_FLAG
    conversion: str = ""
    type: DataType = DataType.NONE
    width: int = 0
    precision: int = 0
    past_reversed: bool = field(default=False)

    def validate(self) -> None:
        """Drop flag combinations that have no effect for this conversion."""
        flags = self.flags
        if self.conversion == "%":
            self.flags = Flag.NO_FLAG
            self.width = 0
            self.precision = 0
        both = Flag.MINUS | Flag.ZERO
        if self.type in (DataType.INT, DataType.UINT) and (flags & both) == both:
            self.flags &= ~Flag.ZERO
        elif self.type is DataType.STR:
            self.flags &= ~Flag.ZERO

    def _set_conversion(self, char: str) -> None:
        self.type = _DATATYPES.get(char, DataType.NONE)
        self.conversion = char
        self.validate()

    def apply_asterisks(self, args: Iterator[object]) -> None:
        """Take '*' width and precision values from the argument iterator."""
        if self.flags & Flag.DAST:
            if self.past_reversed:
                self._take_precision(args)
            else:
                self._take_width(args)
        if self.flags & Flag.PAST:
            if self.past_reversed:
                self._take_width(args)
            else:
                self._take_precision(args)

    def _take_width(self, args: Iterator[object]) -> None:
        width = _next_int(args)
        if width < 0:
            self.flags |= Flag.MINUS
            width = -width
        self.width = width

    def _take_precision(self, args: Iterator[object]) -> None:
        precision = _next_int(args)
        if precision < 0:
            self.flags &= ~(Flag.PAST | Flag.DOT)
            precision = 0
        self.precision = precision


def _next_int(args: Iterator[object]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for '*' in format string") from None
    return int(value)  # type: ignore[arg-type]


def _is_valid_char(c: str) -> bool:
    return c in _FLAG_CHARS or c == "*" or c in _CONVERSIONS or c in _DIGITS


def _flag_at(fmt: str, idx: int) -> Flag:
    c = fmt[idx]
    if c == "0":
        return Flag.ZERO if fmt[idx - 1] != "." else Flag.NO_FLAG
    return _SIMPLE_FLAGS.get(c, Flag.NO_FLAG)


def _read_number(fmt: str, idx: int, spec: FormatSpec) -> int:
    end = idx
    while end < len(fmt) and fmt[end] in _DIGITS:
        end += 1
    number = int(fmt[idx:end])
    prev = fmt[idx - 1]
    if prev == "." or (prev == "0" and fmt[idx - 2] == "."):
        spec.precision = number
    else:
        spec.width = number
    return end - idx


def _mark_asterisk(fmt: str, idx: int, spec: FormatSpec) -> None:
    if fmt[idx - 1] == ".":
        spec.flags |= Flag.PAST
    else:
        if spec.flags & Flag.PAST:
            spec.past_reversed = True
        spec.flags |= Flag.DAST


def parse_spec(fmt: str, pos: int = 0) -> tuple[FormatSpec, int]:
    """Parse the conversion starting at ``fmt[pos]`` (a '%').

    Returns the specification and the number of characters it spans. A spec
    that ends without a conversion character has an empty ``conversion``.
    """
    if pos < 0 or pos + 1 >= len(fmt):
        raise ValueError("incomplete conversion specification")
    if fmt[pos] != "%":
        raise ValueError(f"no conversion specification at position {pos}")
    spec = FormatSpec()
    i = 1
    while pos + i < len(fmt) and _is_valid_char(fmt[pos + i]):
        idx = pos + i
        c = fmt[idx]
        if c in _CONVERSIONS:
            spec._set_conversion(c)
            return spec, i + 1
        if c in _FLAG_CHARS:
            spec.flags |= _flag_at(fmt, idx)
        elif c == "*":
            _mark_asterisk(fmt, idx, spec)
        elif c in _DIGITS:
            i += _read_number(fmt, idx, spec) - 1
        i += 1
    spec.validate()
    return spec, i


def fill(size: int, char: str) -> str:
    """``char`` repeated ``size`` times, or nothing when size is not positive."""
    return char * max(size, 0)


def digit_count(num: int, base: int) -> int:
    """Number of digits of a non-negative integer in ``base`` (0 for base <= 1)."""
    if num < 0:
        raise ValueError("digit_count expects a non-negative number")
    if base <= 1:
        return 0
    if num == 0:
        return 1
    count = 0
    while num > 0:
        num //= base
        count += 1
    return count


def signed_digit_count(num: int, base: int) -> int:
    """Digit count including a leading minus sign for negative numbers."""
    if num < 0:
        return digit_count(-num, base) + 1
    return digit_count(num, base)