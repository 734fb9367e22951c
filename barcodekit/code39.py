"""Code 39 barcodes."""

from __future__ import annotations

from typing import Dict, Tuple

from .bitlist import BitList
from .core import COLOR_SCHEME_16, TYPE_CODE39, Code1D, ColorScheme

_PATTERNS: Dict[str, Tuple[int, str]] = {
    "0": (0, "101001101101"),
    "1": (1, "110100101011"),
    "2": (2, "101100101011"),
    "3": (3, "110110010101"),
    "4": (4, "101001101011"),
    "5": (5, "110100110101"),
    "6": (6, "101100110101"),
    "7": (7, "101001011011"),
    "8": (8, "110100101101"),
    "9": (9, "101100101101"),
    "A": (10, "110101001011"),
    "B": (11, "101101001011"),
    "C": (12, "110110100101"),
    "D": (13, "101011001011"),
    "E": (14, "110101100101"),
    "F": (15, "101101100101"),
    "G": (16, "101010011011"),
    "H": (17, "110101001101"),
    "I": (18, "101101001101"),
    "J": (19, "101011001101"),
    "K": (20, "110101010011"),
    "L": (21, "101101010011"),
    "M": (22, "110110101001"),
    "N": (23, "101011010011"),
    "O": (24, "110101101001"),
    "P": (25, "101101101001"),
    "Q": (26, "101010110011"),
    "R": (27, "110101011001"),
    "S": (28, "101101011001"),
    "T": (29, "101011011001"),
    "U": (30, "110010101011"),
    "V": (31, "100110101011"),
    "W": (32, "110011010101"),
    "X": (33, "100101101011"),
    "Y": (34, "110010110101"),
    "Z": (35, "100110110101"),
    "-": (36, "100101011011"),
    ".": (37, "110010101101"),
    " ": (38, "100110101101"),
    "$": (39, "100100100101"),
    "/": (40, "100100101001"),
    "+": (41, "100101001001"),
    "%": (42, "101001001001"),
    "*": (-1, "100101101101"),
}

_ENCODE_TABLE: Dict[str, Tuple[int, Tuple[bool, ...]]] = {
    char: (value, tuple(c == "1" for c in pattern))
    for char, (value, pattern) in _PATTERNS.items()
}

_CHAR_BY_VALUE = {value: char for char, (value, _) in _ENCODE_TABLE.items() if value >= 0}

_EXTENDED_TABLE: Dict[int, str] = {
    0: "%U", 1: "$A", 2: "$B", 3: "$C", 4: "$D", 5: "$E", 6: "$F", 7: "$G", 8: "$H", 9: "$I",
    10: "$J", 11: "$K", 12: "$L", 13: "$M", 14: "$N", 15: "$O", 16: "$P", 17: "$Q", 18: "$R",
    19: "$S", 20: "$T", 21: "$U", 22: "$V", 23: "$W", 24: "$X", 25: "$Y", 26: "$Z", 27: "%A",
    28: "%B", 29: "%C", 30: "%D", 31: "%E", 33: "/A", 34: "/B", 35: "/C", 36: "/D", 37: "/E",
    38: "/F", 39: "/G", 40: "/H", 41: "/I", 42: "/J", 43: "/K", 44: "/L", 47: "/O", 58: "/Z",
    59: "%F", 60: "%G", 61: "%H", 62: "%I", 63: "%J", 64: "%V", 91: "%K", 92: "%L", 93: "%M",
    94: "%N", 95: "%O", 96: "%W", 97: "+A", 98: "+B", 99: "+C", 100: "+D", 101: "+E",
    102: "+F", 103: "+G", 104: "+H", 105: "+I", 106: "+J", 107: "+K", 108: "+L", 109: "+M",
    110: "+N", 111: "+O", 112: "+P", 113: "+Q", 114: "+R", 115: "+S", 116: "+T", 117: "+U",
    118: "+V", 119: "+W", 120: "+X", 121: "+Y", 122: "+Z", 123: "%P", 124: "%Q", 125: "%R",
    126: "%S", 127: "%T",
}

_INVALID = "invalid data! try full ascii mode"


def get_checksum(content: str) -> str:
    """Return the modulo 43 check character of ``content``, or ``'#'`` if it has none."""
    total = 0
    for char in content:
        info = _ENCODE_TABLE.get(char)
        if info is None or info[0] < 0:
            return "#"
        total += info[0]
    return _CHAR_BY_VALUE.get(total % 43, "#")


def _prepare(content: str) -> str:
    if any(ord(char) > 127 for char in content):
        raise ValueError("Only ASCII strings can be encoded")
    return "".join(_EXTENDED_TABLE.get(ord(char), char) for char in content)


def encode(
    content: str,
    include_checksum: bool = False,
    full_ascii_mode: bool = False,
    color: ColorScheme = COLOR_SCHEME_16,
) -> Code1D:
    """Encode ``content`` as a Code 39 barcode, optionally with a check character."""
    if full_ascii_mode:
        content = _prepare(content)
    elif "*" in content:
        raise ValueError(_INVALID)

    data = "*" + content
    if include_checksum:
        data += get_checksum(content)
    data += "*"

    bars = BitList()
    for i, char in enumerate(data):
        if i:
            bars.add_bit(False)
        info = _ENCODE_TABLE.get(char)
        if info is None:
            raise ValueError(_INVALID)
        bars.add_bit(*info[1])

    check_char = get_checksum(content)
    checksum = int(check_char) if check_char in "0123456789" else 0
    return Code1D(TYPE_CODE39, content, bars, color, checksum)