"""Codabar barcodes."""

from __future__ import annotations

import re

from .bitlist import BitList
from .core import COLOR_SCHEME_16, TYPE_CODABAR, Code1D, ColorScheme

_T, _F = True, False

_ENCODING_TABLE = {
    "0": (_T, _F, _T, _F, _T, _F, _F, _T, _T),
    "1": (_T, _F, _T, _F, _T, _T, _F, _F, _T),
    "2": (_T, _F, _T, _F, _F, _T, _F, _T, _T),
    "3": (_T, _T, _F, _F, _T, _F, _T, _F, _T),
    "4": (_T, _F, _T, _T, _F, _T, _F, _F, _T),
    "5": (_T, _T, _F, _T, _F, _T, _F, _F, _T),
    "6": (_T, _F, _F, _T, _F, _T, _F, _T, _T),
    "7": (_T, _F, _F, _T, _F, _T, _T, _F, _T),
    "8": (_T, _F, _F, _T, _T, _F, _T, _F, _T),
    "9": (_T, _T, _F, _T, _F, _F, _T, _F, _T),
    "-": (_T, _F, _T, _F, _F, _T, _T, _F, _T),
    "$": (_T, _F, _T, _T, _F, _F, _T, _F, _T),
    ":": (_T, _T, _F, _T, _F, _T, _T, _F, _T, _T),
    "/": (_T, _T, _F, _T, _T, _F, _T, _F, _T, _T),
    ".": (_T, _T, _F, _T, _T, _F, _T, _T, _F, _T),
    "+": (_T, _F, _T, _T, _F, _T, _T, _F, _T, _T),
    "A": (_T, _F, _T, _T, _F, _F, _T, _F, _F, _T),
    "B": (_T, _F, _F, _T, _F, _F, _T, _F, _T, _T),
    "C": (_T, _F, _T, _F, _F, _T, _F, _F, _T, _T),
    "D": (_T, _F, _T, _F, _F, _T, _T, _F, _F, _T),
}

_VALID = re.compile(r"[ABCD][0-9\-$:/.+]*[ABCD]")


def encode(content: str, color: ColorScheme = COLOR_SCHEME_16) -> Code1D:
    """Encode ``content`` (start char, data, stop char) as a Codabar barcode."""
    if not _VALID.fullmatch(content):
        raise ValueError(f'can not encode "{content}"')
    bars = BitList()
    for i, char in enumerate(content):
        if i > 0:
            bars.add_bit(False)
        bars.add_bit(*_ENCODING_TABLE[char])
    return Code1D(TYPE_CODABAR, content, bars, color)