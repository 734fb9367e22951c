"""EAN-8 and EAN-13 barcodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .bitlist import BitList
from .core import COLOR_SCHEME_16, TYPE_EAN8, TYPE_EAN13, Code1D, ColorScheme

_T, _F = True, False


@dataclass(frozen=True)
class _EncodedNumber:
    left_odd: Tuple[bool, ...]
    left_even: Tuple[bool, ...]
    right: Tuple[bool, ...]
    parity: Tuple[bool, ...]


_ENCODER_TABLE = {
    "0": _EncodedNumber(
        (_F, _F, _F, _T, _T, _F, _T),
        (_F, _T, _F, _F, _T, _T, _T),
        (_T, _T, _T, _F, _F, _T, _F),
        (_F, _F, _F, _F, _F, _F),
    ),
    "1": _EncodedNumber(
        (_F, _F, _T, _T, _F, _F, _T),
        (_F, _T, _T, _F, _F, _T, _T),
        (_T, _T, _F, _F, _T, _T, _F),
        (_F, _F, _T, _F, _T, _T),
    ),
    "2": _EncodedNumber(
        (_F, _F, _T, _F, _F, _T, _T),
        (_F, _F, _T, _T, _F, _T, _T),
        (_T, _T, _F, _T, _T, _F, _F),
        (_F, _F, _T, _T, _F, _T),
    ),
    "3": _EncodedNumber(
        (_F, _T, _T, _T, _T, _F, _T),
        (_F, _T, _F, _F, _F, _F, _T),
        (_T, _F, _F, _F, _F, _T, _F),
        (_F, _F, _T, _T, _T, _F),
    ),
    "4": _EncodedNumber(
        (_F, _T, _F, _F, _F, _T, _T),
        (_F, _F, _T, _T, _T, _F, _T),
        (_T, _F, _T, _T, _T, _F, _F),
        (_F, _T, _F, _F, _T, _T),
    ),
    "5": _EncodedNumber(
        (_F, _T, _T, _F, _F, _F, _T),
        (_F, _T, _T, _T, _F, _F, _T),
        (_T, _F, _F, _T, _T, _T, _F),
        (_F, _T, _T, _F, _F, _T),
    ),
    "6": _EncodedNumber(
        (_F, _T, _F, _T, _T, _T, _T),
        (_F, _F, _F, _F, _T, _F, _T),
        (_T, _F, _T, _F, _F, _F, _F),
        (_F, _T, _T, _T, _F, _F),
    ),
    "7": _EncodedNumber(
        (_F, _T, _T, _T, _F, _T, _T),
        (_F, _F, _T, _F, _F, _F, _T),
        (_T, _F, _F, _F, _T, _F, _F),
        (_F, _T, _F, _T, _F, _T),
    ),
    "8": _EncodedNumber(
        (_F, _T, _T, _F, _T, _T, _T),
        (_F, _F, _F, _T, _F, _F, _T),
        (_T, _F, _F, _T, _F, _F, _F),
        (_F, _T, _F, _T, _T, _F),
    ),
    "9": _EncodedNumber(
        (_F, _F, _F, _T, _F, _T, _T),
        (_F, _F, _T, _F, _T, _T, _T),
        (_T, _T, _T, _F, _T, _F, _F),
        (_F, _T, _T, _F, _T, _F),
    ),
}

_GUARD = (_T, _F, _T)
_CENTER = (_F, _T, _F, _T, _F)


def _digit_value(char: str) -> int:
    if len(char) == 1 and "0" <= char <= "9":
        return ord(char) - ord("0")
    return -1


def calc_check_num(code: str) -> str:
    """Return the check digit for ``code``, or ``'B'`` if it holds a non-digit."""
    triple = len(code) == 7
    total = 0
    for char in code:
        value = _digit_value(char)
        if value < 0:
            return "B"
        if triple:
            value *= 3
        triple = not triple
        total += value
    return str((10 - total % 10) % 10)


def _lookup(char: str) -> _EncodedNumber:
    try:
        return _ENCODER_TABLE[char]
    except KeyError:
        raise ValueError("invalid ean code data") from None


def encode_ean8(code: str) -> BitList:
    """Return the bars for an eight digit code."""
    bars = BitList()
    bars.add_bit(*_GUARD)
    for pos, char in enumerate(code):
        number = _lookup(char)
        if pos == 4:
            bars.add_bit(*_CENTER)
        bars.add_bit(*(number.left_odd if pos < 4 else number.right))
    bars.add_bit(*_GUARD)
    return bars


def encode_ean13(code: str) -> BitList:
    """Return the bars for a thirteen digit code."""
    bars = BitList()
    bars.add_bit(*_GUARD)
    parity: Tuple[bool, ...] = ()
    for pos, char in enumerate(code):
        number = _lookup(char)
        if pos == 0:
            parity = number.parity
            continue
        if pos < 7:
            data = number.left_even if parity[pos - 1] else number.left_odd
        else:
            data = number.right
        if pos == 7:
            bars.add_bit(*_CENTER)
        bars.add_bit(*data)
    bars.add_bit(*_GUARD)
    return bars


def encode(code: str, color: ColorScheme = COLOR_SCHEME_16) -> Code1D:
    """Encode an EAN-8 or EAN-13 code; a missing check digit is appended."""
    checksum = 0
    if len(code) in (7, 12):
        code += calc_check_num(code)
        checksum = _digit_value(calc_check_num(code))
    elif len(code) in (8, 13):
        if code[:-1] + calc_check_num(code[:-1]) != code:
            raise ValueError("checksum missmatch")
        checksum = _digit_value(code[-1])

    if len(code) == 8:
        return Code1D(TYPE_EAN8, code, encode_ean8(code), color, checksum)
    if len(code) == 13:
        return Code1D(TYPE_EAN13, code, encode_ean13(code), color, checksum)
    raise ValueError("invalid ean code data")