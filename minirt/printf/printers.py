"""Rendering of parsed conversion specifications into text."""

from __future__ import annotations

import dataclasses
import operator
from typing import Iterable, Optional

from .spec import DataType, Flag, FormatSpec, digit_count, fill, signed_digit_count

_NULL_STR = "(null)"
_NULL_PTR = "(nil)"
_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: object) -> int:
    num = operator.index(value)  # type: ignore[arg-type]
    return ((num + 2**31) & _UINT_MASK) - 2**31


def _as_uint32(value: object) -> int:
    return operator.index(value) & _UINT_MASK  # type: ignore[arg-type]


def _is_hex(spec: FormatSpec) -> bool:
    return spec.conversion in ("x", "X")


def format_char(spec: FormatSpec, value: object) -> str:
    """Render a ``%c`` conversion; ``value`` is a code or a one-character string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        char = value
    else:
        char = chr(operator.index(value) & 0xFF)  # type: ignore[arg-type]
    if spec.width == 0:
        return char
    padding = fill(spec.width - 1, " ")
    if spec.flags & Flag.MINUS:
        return char + padding
    return padding + char


def format_percent(spec: FormatSpec) -> str:
    """Render a ``%%`` conversion."""
    padding = fill(spec.width - 1, " ")
    if spec.flags & Flag.MINUS:
        return "%" + padding
    return padding + "%"


def format_str(spec: FormatSpec, value: Optional[str]) -> str:
    """Render a ``%s`` conversion; ``None`` prints as the null marker."""
    if value is None:
        value = "" if spec.flags & Flag.DOT and spec.precision < 6 else _NULL_STR
    elif not isinstance(value, str):
        raise TypeError("%s requires a string or None")
    length = min(spec.precision, len(value)) if spec.flags & Flag.DOT else len(value)
    text = value[:length]
    if spec.width == 0:
        return text
    if spec.flags & Flag.MINUS:
        return text + fill(spec.width - length, " ")
    to_fill = max(spec.width, length) if spec.flags & Flag.ZERO else length
    out = fill(spec.width - to_fill, " ")
    if spec.flags & Flag.ZERO:
        out += fill(to_fill - length, "0")
    return out + text


def _int_digits(num: int, spec: FormatSpec) -> str:
    unum = abs(num)
    nsize = digit_count(unum, 10)
    out = ""
    if spec.flags & Flag.DOT:
        out += fill(spec.precision - nsize, "0")
        if spec.precision == 0 and num == 0:
            return out
    if spec.flags & Flag.ZERO and not spec.flags & Flag.DOT:
        extra = 1 if num < 0 or spec.flags & (Flag.PLUS | Flag.SPACE) else 0
        out += fill(spec.width - nsize - extra, "0")
    return out + str(unum)


def _int_body(num: int, spec: FormatSpec) -> str:
    if spec.flags & (Flag.PLUS | Flag.SPACE) or num < 0:
        if num < 0:
            sign = "-"
        elif spec.flags & Flag.PLUS:
            sign = "+"
        else:
            sign = " "
        return sign + _int_digits(num, spec)
    return _int_digits(num, spec)


def _int_size(num: int, spec: FormatSpec) -> int:
    nsize = signed_digit_count(num, 10)
    size = 0
    if spec.flags & (Flag.PLUS | Flag.SPACE) and num >= 0:
        size += 1
    if spec.flags & Flag.DOT and num < 0 and nsize <= spec.precision:
        size += 1
    return size + max(nsize, spec.precision)


def _pad_number(spec: FormatSpec, size: int, is_zero: bool, body: str) -> str:
    flags = spec.flags
    out = ""
    if not flags & Flag.MINUS and (not flags & Flag.ZERO or flags & Flag.DOT):
        if flags & Flag.DOT and spec.precision == 0 and is_zero:
            size -= 1
        out += fill(spec.width - size, " ")
    out += body
    if flags & Flag.MINUS:
        out += fill(spec.width - len(body), " ")
    return out


def format_int(spec: FormatSpec, value: object) -> str:
    """Render a ``%d`` or ``%i`` conversion of a 32-bit signed integer."""
    num = _as_int32(value)
    return _pad_number(spec, _int_size(num, spec), num == 0, _int_body(num, spec))


def _uint_digits(unum: int, spec: FormatSpec) -> str:
    nsize = digit_count(unum, 16 if _is_hex(spec) else 10)
    out = ""
    if spec.flags & Flag.DOT:
        out += fill(spec.precision - nsize, "0")
        if spec.precision == 0 and unum == 0:
            return out
    elif spec.flags & Flag.ZERO:
        if spec.flags & Flag.HASH and _is_hex(spec) and unum != 0:
            nsize += 2
        out += fill(spec.width - nsize, "0")
    if spec.conversion == "x":
        return out + format(unum, "x")
    if spec.conversion == "X":
        return out + format(unum, "X")
    return out + str(unum)


def _uint_body(unum: int, spec: FormatSpec) -> str:
    if spec.flags & Flag.HASH and _is_hex(spec) and unum != 0:
        prefix = "0x" if spec.conversion == "x" else "0X"
        return prefix + _uint_digits(unum, spec)
    return _uint_digits(unum, spec)


def format_uint(spec: FormatSpec, value: object) -> str:
    """Render a ``%u``, ``%x`` or ``%X`` conversion of a 32-bit unsigned integer."""
    unum = _as_uint32(value)
    nsize = digit_count(unum, 16 if _is_hex(spec) else 10)
    size = max(nsize, spec.precision)
    if _is_hex(spec) and spec.flags & Flag.HASH and unum != 0:
        size += 2
    return _pad_number(spec, size, unum == 0, _uint_body(unum, spec))


def _ptr_digits(ptr: int, spec: FormatSpec) -> str:
    len_p = digit_count(ptr, 16)
    zero_pad = spec.flags & Flag.ZERO and not spec.flags & Flag.MINUS
    if zero_pad:
        len_p += (1 if spec.flags & (Flag.PLUS | Flag.SPACE) else 0) + 2
    hex_digits = format(ptr, "x")
    if spec.flags & Flag.DOT:
        if ptr == 0 and spec.precision == 0:
            return "0x"
        return "0x" + fill(spec.precision - len_p, "0") + hex_digits
    if zero_pad:
        return "0x" + fill(spec.width - len_p, "0") + hex_digits
    return "0x" + hex_digits


def format_ptr(spec: FormatSpec, value: object) -> str:
    """Render a ``%p`` conversion of an address; ``None`` or 0 prints as the null marker."""
    ptr = 0 if value is None else operator.index(value) & _PTR_MASK  # type: ignore[arg-type]
    spec = dataclasses.replace(spec)
    if ptr == 0:
        if spec.flags & Flag.DOT:
            spec.precision = 0
        spec.flags &= ~(Flag.SPACE | Flag.PLUS | Flag.ZERO | Flag.DOT)
    flags = spec.flags
    if ptr == 0:
        size = len(_NULL_PTR)
        body = _NULL_PTR
    else:
        size = max(digit_count(ptr, 16), spec.precision) + 2
        if not flags & Flag.MINUS and flags & (Flag.PLUS | Flag.SPACE):
            size += 1
        if flags & Flag.PLUS:
            sign = "+"
        elif flags & Flag.SPACE:
            sign = " "
        else:
            sign = ""
        body = sign + _ptr_digits(ptr, spec)
    out = ""
    if not flags & Flag.MINUS and (not flags & Flag.ZERO or flags & Flag.DOT):
        out += fill(spec.width - size, " ")
    out += body
    if flags & Flag.MINUS:
        out += fill(spec.width - len(body), " ")
    return out


def _next_arg(args) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def render_spec(spec: FormatSpec, args: Iterable[object]) -> str:
    """Render one conversion, taking '*' values and the argument from ``args``.

    Raises ValueError for a specification with no usable conversion.
    """
    args = iter(args)
    spec.apply_asterisks(args)
    if spec.type is DataType.CHAR:
        return format_char(spec, _next_arg(args))
    if spec.type is DataType.STR:
        return format_str(spec, _next_arg(args))  # type: ignore[arg-type]
    if spec.type is DataType.PTR:
        return format_ptr(spec, _next_arg(args))
    if spec.type is DataType.INT:
        return format_int(spec, _next_arg(args))
    if spec.type is DataType.UINT:
        return format_uint(spec, _next_arg(args))
    if spec.type is DataType.NONE and spec.conversion == "%":
        return format_percent(spec)
    raise ValueError(f"invalid conversion specification {spec.conversion!r}")