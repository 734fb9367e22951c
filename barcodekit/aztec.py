"""Aztec Code barcodes."""

from __future__ import annotations

from typing import Dict, List, Union

from .aztec_highlevel import high_level_encode
from .bitlist import BitList
from .core import COLOR_SCHEME_16, TYPE_AZTEC, Barcode, ColorScheme, Metadata
from .reedsolomon import GaloisField, ReedSolomonEncoder

DEFAULT_EC_PERCENT = 33
DEFAULT_LAYERS = 0
MAX_LAYERS = 32
MAX_LAYERS_COMPACT = 4

_WORD_SIZE = (
    4, 6, 6, 8, 8, 8, 8, 8, 8, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10,
    12, 12, 12, 12, 12, 12, 12, 12, 12, 12,
)

_FIELD_PARAMETERS = {
    4: (0x13, 16),
    6: (0x43, 64),
    8: (0x012D, 256),
    10: (0x409, 1024),
    12: (0x1069, 4096),
}

_ENCODERS: Dict[int, ReedSolomonEncoder] = {}


class AztecCode(Barcode):
    """A rendered Aztec symbol."""

    def __init__(self, size: int, color_scheme: ColorScheme = COLOR_SCHEME_16, content: str = "") -> None:
        super().__init__(content, Metadata(TYPE_AZTEC, 2), color_scheme)
        self.size = size
        self._bits = BitList(size * size)

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size

    def is_set(self, x: int, y: int) -> bool:
        return self._bits.get_bit(x * self.size + y)

    def _set(self, x: int, y: int) -> None:
        self._bits.set_bit(x * self.size + y, True)

    def render_text(self) -> str:
        """Draw the symbol as text, ``"X "`` for a dark module and two spaces otherwise."""
        return "".join(
            "".join("X " if self.is_set(x, y) else "  " for x in range(self.size)) + "\n"
            for y in range(self.size)
        )


def _encoder(word_size: int) -> ReedSolomonEncoder:
    try:
        primitive, size = _FIELD_PARAMETERS[word_size]
    except KeyError:
        raise ValueError(f"unsupported word size {word_size}") from None
    if word_size not in _ENCODERS:
        _ENCODERS[word_size] = ReedSolomonEncoder(GaloisField(primitive, size, 1))
    return _ENCODERS[word_size]


def _total_bits_in_layer(layers: int, compact: bool) -> int:
    return ((88 if compact else 112) + 16 * layers) * layers


def stuff_bits(bits: BitList, word_size: int) -> BitList:
    """Split ``bits`` into words, stuffing a bit where a word would be all ones or all zeros."""
    out = BitList()
    n = len(bits)
    mask = (1 << word_size) - 2
    i = 0
    while i < n:
        word = 0
        for j in range(word_size):
            if i + j >= n or bits.get_bit(i + j):
                word |= 1 << (word_size - 1 - j)
        if word & mask == mask:
            out.add_bits(word & mask, word_size)
            i -= 1
        elif word & mask == 0:
            out.add_bits(word | 1, word_size)
            i -= 1
        else:
            out.add_bits(word, word_size)
        i += word_size
    return out


def _bits_to_words(bits: BitList, word_size: int, word_count: int) -> List[int]:
    words = []
    for i in range(word_count):
        value = 0
        for j in range(word_size):
            if bits.get_bit(i * word_size + j):
                value |= 1 << (word_size - j - 1)
        words.append(value)
    return words


def generate_check_words(bits: BitList, total_bits: int, word_size: int) -> BitList:
    """Return ``bits`` followed by check words, padded at the front to ``total_bits``."""
    message_word_count = len(bits) // word_size
    total_word_count = total_bits // word_size
    ecc_word_count = total_word_count - message_word_count

    message_words = _bits_to_words(bits, word_size, message_word_count)
    ecc_words = _encoder(word_size).encode(message_words, ecc_word_count)

    result = BitList()
    result.add_bits(0, total_bits % word_size)
    for word in message_words:
        result.add_bits(word, word_size)
    for word in ecc_words:
        result.add_bits(word, word_size)
    return result


def generate_mode_message(compact: bool, layers: int, message_size_in_words: int) -> BitList:
    """Return the mode message that tells a reader the layer and data word counts."""
    message = BitList()
    if compact:
        message.add_bits(layers - 1, 2)
        message.add_bits(message_size_in_words - 1, 6)
        return generate_check_words(message, 28, 4)
    message.add_bits(layers - 1, 5)
    message.add_bits(message_size_in_words - 1, 11)
    return generate_check_words(message, 40, 4)


def _draw_mode_message(code: AztecCode, compact: bool, matrix_size: int, message: BitList) -> None:
    center = matrix_size // 2
    if compact:
        for i in range(7):
            offset = center - 3 + i
            if message.get_bit(i):
                code._set(offset, center - 5)
            if message.get_bit(i + 7):
                code._set(center + 5, offset)
            if message.get_bit(20 - i):
                code._set(offset, center + 5)
            if message.get_bit(27 - i):
                code._set(center - 5, offset)
    else:
        for i in range(10):
            offset = center - 5 + i + i // 5
            if message.get_bit(i):
                code._set(offset, center - 7)
            if message.get_bit(i + 10):
                code._set(center + 7, offset)
            if message.get_bit(29 - i):
                code._set(offset, center + 7)
            if message.get_bit(39 - i):
                code._set(center - 7, offset)


def _draw_bulls_eye(code: AztecCode, center: int, size: int) -> None:
    for i in range(0, size, 2):
        for j in range(center - i, center + i + 1):
            code._set(j, center - i)
            code._set(j, center + i)
            code._set(center - i, j)
            code._set(center + i, j)
    code._set(center - size, center - size)
    code._set(center - size + 1, center - size)
    code._set(center - size, center - size + 1)
    code._set(center + size, center - size)
    code._set(center + size, center - size + 1)
    code._set(center + size, center + size - 1)


def encode(
    data: Union[bytes, bytearray, str],
    min_ecc_percent: int = DEFAULT_EC_PERCENT,
    user_specified_layers: int = DEFAULT_LAYERS,
    color: ColorScheme = COLOR_SCHEME_16,
) -> AztecCode:
    """Encode ``data`` as an Aztec symbol.

    ``user_specified_layers`` of 0 picks the smallest symbol; a negative value
    asks for a compact symbol with that many layers. Text is taken as UTF-8.
    """
    if isinstance(data, str):
        text = data.encode("utf-8")
        content = data
    else:
        text = bytes(data)
        content = text.decode("latin-1")

    bits = high_level_encode(text)
    ecc_bits = (len(bits) * min_ecc_percent) // 100 + 11
    total_size_bits = len(bits) + ecc_bits

    if user_specified_layers != DEFAULT_LAYERS:
        compact = user_specified_layers < 0
        layers = abs(user_specified_layers)
        if layers > (MAX_LAYERS_COMPACT if compact else MAX_LAYERS):
            raise ValueError(f"Illegal value {user_specified_layers} for layers")
        total_bits = _total_bits_in_layer(layers, compact)
        word_size = _WORD_SIZE[layers]
        usable_bits = total_bits - total_bits % word_size
        stuffed = stuff_bits(bits, word_size)
        if len(stuffed) + ecc_bits > usable_bits:
            raise ValueError("Data to large for user specified layer")
        if compact and len(stuffed) > word_size * 64:
            raise ValueError("Data to large for user specified layer")
    else:
        word_size = 0
        stuffed = BitList()
        # Try Compact1..Compact4, then Normal4 upwards; smaller normal symbols
        # have the same size as the next compact one but hold less.
        i = 0
        while True:
            if i > MAX_LAYERS:
                raise ValueError("Data too large for an aztec code")
            compact = i <= 3
            layers = i + 1 if compact else i
            i += 1
            total_bits = _total_bits_in_layer(layers, compact)
            if total_size_bits > total_bits:
                continue
            if word_size != _WORD_SIZE[layers]:
                word_size = _WORD_SIZE[layers]
                stuffed = stuff_bits(bits, word_size)
            usable_bits = total_bits - total_bits % word_size
            if compact and len(stuffed) > word_size * 64:
                # Compact symbols hold at most 64 data words.
                continue
            if len(stuffed) + ecc_bits <= usable_bits:
                break

    message_bits = generate_check_words(stuffed, total_bits, word_size)
    mode_message = generate_mode_message(compact, layers, len(stuffed) // word_size)

    base_size = (11 if compact else 14) + layers * 4
    if compact:
        matrix_size = base_size
        alignment = list(range(base_size))
    else:
        matrix_size = base_size + 1 + 2 * ((base_size // 2 - 1) // 15)
        orig_center = base_size // 2
        center = matrix_size // 2
        alignment = [0] * base_size
        for i in range(orig_center):
            new_offset = i + i // 15
            alignment[orig_center - i - 1] = center - new_offset - 1
            alignment[orig_center + i] = center + new_offset + 1

    code = AztecCode(matrix_size, color, content)

    row_offset = 0
    last = base_size - 1
    for i in range(layers):
        row_size = (layers - i) * 4 + (9 if compact else 12)
        for j in range(row_size):
            column_offset = j * 2
            for k in range(2):
                pos = row_offset + column_offset + k
                if message_bits.get_bit(pos):
                    code._set(alignment[i * 2 + k], alignment[i * 2 + j])
                if message_bits.get_bit(pos + row_size * 2):
                    code._set(alignment[i * 2 + j], alignment[last - i * 2 - k])
                if message_bits.get_bit(pos + row_size * 4):
                    code._set(alignment[last - i * 2 - k], alignment[last - i * 2 - j])
                if message_bits.get_bit(pos + row_size * 6):
                    code._set(alignment[last - i * 2 - j], alignment[i * 2 + k])
        row_offset += row_size * 8

    _draw_mode_message(code, compact, matrix_size, mode_message)

    half = matrix_size // 2
    if compact:
        _draw_bulls_eye(code, half, 5)
    else:
        _draw_bulls_eye(code, half, 7)
        for n, _ in enumerate(range(0, base_size // 2 - 1, 15)):
            j = n * 16
            for k in range(half & 1, matrix_size, 2):
                code._set(half - j, k)
                code._set(half + j, k)
                code._set(k, half - j)
                code._set(k, half + j)
    return code