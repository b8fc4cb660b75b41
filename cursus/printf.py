"""Formatted output with the cspdiuxX% conversions and the -0.#+ flags."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass

_CONVERSIONS = "cspdiuxX%"
_DIGITS = re.compile(r"[0-9]+")
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


@dataclass
class Flags:
    """Flags, field width and precision of one conversion specification."""

    minus: bool = False
    zero: bool = False
    hash: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int | None = None


def _read_number(fmt: str, pos: int) -> tuple[int | None, int]:
    match = _DIGITS.match(fmt, pos)
    if match is None:
        return None, pos
    return int(match.group()), match.end()


def parse_flags(fmt: str, pos: int) -> tuple[Flags, str, int]:
    """Parse the specification starting just after a '%' at ``pos``.

    Returns the flags, the conversion character and the index after it.
    """
    flags = Flags()
    length = len(fmt)
    while pos < length and fmt[pos] not in _CONVERSIONS:
        start = pos
        if fmt[pos] == "-":
            flags.minus = True
            pos += 1
        if pos < length and fmt[pos] == "0":
            flags.zero = True
            pos += 1
        width, pos = _read_number(fmt, pos)
        if width is not None:
            flags.width = width
        if pos < length and fmt[pos] == "+":
            flags.plus = True
            pos += 1
        if pos < length and fmt[pos] == ".":
            precision, pos = _read_number(fmt, pos + 1)
            flags.precision = precision if precision is not None else 0
        if pos < length and fmt[pos] == "#":
            flags.hash = True
            pos += 1
        if pos < length and fmt[pos] == " ":
            flags.space = True
            pos += 1
        if pos == start:
            raise ValueError(f"unknown conversion character {fmt[pos]!r} at index {pos}")
    if pos >= length:
        raise ValueError("incomplete conversion specification at end of format")
    return flags, fmt[pos], pos + 1


def format_hex(number: int, upper: bool) -> str:
    """Hexadecimal digits of ``number`` taken as a 32-bit unsigned value."""
    return format(operator.index(number) & _UINT32, "X" if upper else "x")


def format_address(address: int | None) -> str:
    """Render a pointer value: ``(nil)`` for zero, ``0x``-prefixed hex otherwise."""
    value = 0 if address is None else operator.index(address) & _UINT64
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def _justify(prefix: str, body: str, flags: Flags, numeric: bool) -> str:
    gap = flags.width - len(prefix) - len(body)
    if gap <= 0:
        return prefix + body
    if flags.minus:
        return prefix + body + " " * gap
    if numeric and flags.zero and flags.precision is None:
        return prefix + "0" * gap + body
    return " " * gap + prefix + body


def _apply_precision(digits: str, value: int, precision: int | None) -> str:
    if precision is None:
        return digits
    if value == 0 and precision == 0:
        return ""
    return digits.rjust(precision, "0")


def _to_int32(arg: object) -> int:
    value = operator.index(arg) & _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _signed(arg: object, flags: Flags) -> str:
    value = _to_int32(arg)
    if value < 0:
        sign = "-"
    elif flags.plus:
        sign = "+"
    elif flags.space:
        sign = " "
    else:
        sign = ""
    digits = _apply_precision(str(abs(value)), value, flags.precision)
    return _justify(sign, digits, flags, numeric=True)


def _unsigned(arg: object, flags: Flags) -> str:
    value = operator.index(arg) & _UINT32
    digits = _apply_precision(str(value), value, flags.precision)
    return _justify("", digits, flags, numeric=True)


def _hex(arg: object, flags: Flags, upper: bool) -> str:
    value = operator.index(arg) & _UINT32
    digits = _apply_precision(format_hex(value, upper), value, flags.precision)
    prefix = ("0X" if upper else "0x") if flags.hash and value else ""
    return _justify(prefix, digits, flags, numeric=True)


def _string(arg: object, flags: Flags) -> str:
    if arg is None:
        if flags.precision is not None and flags.precision < 6:
            text = ""
        else:
            text = "(null)"
    elif isinstance(arg, str):
        text = arg
    else:
        raise TypeError(f"%s expects a string or None, got {type(arg).__name__}")
    if flags.precision is not None:
        text = text[: flags.precision]
    return _justify("", text, flags, numeric=False)


def _char(arg: object, flags: Flags) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c expects a single character")
        char = arg
    else:
        char = chr(operator.index(arg) & 0xFF)
    if flags.precision == 0:
        char = ""
    return _justify("", char, flags, numeric=False)


def _pointer(arg: object, flags: Flags) -> str:
    return _justify("", format_address(arg), flags, numeric=False)


_CONVERTERS: dict[str, Callable[[object, Flags], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": lambda arg, flags: _hex(arg, flags, upper=False),
    "X": lambda arg, flags: _hex(arg, flags, upper=True),
}


def render(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    pieces: list[str] = []
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        flags, conversion, pos = parse_flags(fmt, percent + 1)
        if conversion == "%":
            pieces.append("%")
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise ValueError(f"not enough arguments for %{conversion}") from None
        pieces.append(_CONVERTERS[conversion](arg, flags))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the rendered text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)