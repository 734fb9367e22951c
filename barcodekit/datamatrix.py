"""Data Matrix (ECC 200) barcodes."""

from __future__ import annotations

from typing import List, Sequence, Union

from .core import COLOR_SCHEME_16, ColorScheme
from .datamatrix_layout import CodeLayout, CodeSize, DataMatrixCode, find_code_size
from .reedsolomon import GaloisField, ReedSolomonEncoder

FNC1 = 232
"""Codeword marking a GS1 Data Matrix, used as start character and separator."""

_RS = ReedSolomonEncoder(GaloisField(301, 256, 1))


def _as_bytes(content: Union[str, bytes]) -> bytes:
    return content.encode("utf-8") if isinstance(content, str) else bytes(content)


def encode_text(content: Union[str, bytes]) -> bytes:
    """Turn ``content`` into ASCII-mode codewords, packing digit pairs.

    A text is taken as its UTF-8 bytes; pass bytes starting with ``FNC1``
    for a GS1 symbol.
    """
    data = _as_bytes(content)
    is_gs1 = len(data) > 0 and data[0] == FNC1
    result = bytearray()
    i = 0
    while i < len(data):
        c = data[i]
        i += 1
        if 0x30 <= c <= 0x39 and i < len(data) and 0x30 <= data[i] <= 0x39:
            result.append((c - 0x30) * 10 + (data[i] - 0x30) + 130)
            i += 1
        elif is_gs1 and c == FNC1:
            result.append(c)
        elif c > 127:
            result.extend((235, c - 127))
        else:
            result.append(c + 1)
    return bytes(result)


def add_padding(data: Sequence[int], to_count: int) -> bytes:
    """Pad ``data`` to ``to_count`` codewords with the pad character and its randomised followers."""
    result = bytearray(data)
    if len(result) < to_count:
        result.append(129)
    while len(result) < to_count:
        pseudo_random = (149 * (len(result) + 1)) % 253 + 1
        value = 129 + pseudo_random
        if value > 254:
            value -= 254
        result.append(value)
    return bytes(result)


def calc_ecc(data: Sequence[int], size: CodeSize) -> bytes:
    """Append the interleaved error correction codewords for ``size`` to ``data``."""
    data_size = len(data)
    result: List[int] = list(data) + [0] * size.ecc_count
    per_block = size.ecc_per_block
    for block in range(size.block_count):
        values = list(data[block:data_size:size.block_count])
        count = size.data_codewords_for_block(block)
        values.extend([0] * (count - len(values)))
        ecc = _RS.encode(values, per_block)
        positions = range(block, per_block * size.block_count, size.block_count)
        for word, position in zip(ecc, positions):
            result[data_size + position] = word
    return bytes(result)


def encode(content: Union[str, bytes], color: ColorScheme = COLOR_SCHEME_16) -> DataMatrixCode:
    """Encode ``content`` in the smallest square Data Matrix symbol that holds it.

    Bytes content is kept on the barcode decoded as Latin-1.
    """
    data = encode_text(content)
    size = find_code_size(len(data))
    data = add_padding(data, size.data_codewords)
    data = calc_ecc(data, size)
    layout = CodeLayout(size, color)
    layout.set_values(data)
    code = layout.merge()
    code.content = content if isinstance(content, str) else bytes(content).decode("latin-1")
    return code