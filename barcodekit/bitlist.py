"""A growable list of bits."""

from __future__ import annotations

from typing import Iterator


class BitList:
    """An ordered sequence of bits that can grow at its end."""

    __slots__ = ("_bits",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._bits = [False] * size

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitList):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return "BitList(" + "".join("1" if b else "0" for b in self._bits) + ")"

    def add_bit(self, *args: bool) -> None:
        """Append the given bits."""
        self._bits.extend(bool(bit) for bit in args)

    def add_bits(self, value: int, count: int) -> None:
        """Append the lowest ``count`` bits of ``value``, most significant first."""
        self._bits.extend(bool((value >> i) & 1) for i in range(count - 1, -1, -1))

    def add_byte(self, value: int) -> None:
        """Append the eight bits of ``value``, most significant first."""
        self.add_bits(value, 8)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._bits):
            raise IndexError(f"bit index {index} out of range")

    def get_bit(self, index: int) -> bool:
        self._check(index)
        return self._bits[index]

    def set_bit(self, index: int, value: bool) -> None:
        self._check(index)
        self._bits[index] = bool(value)

    def get_bytes(self) -> bytes:
        """Pack the bits into bytes, most significant bit first, zero padded."""
        out = bytearray((len(self._bits) + 7) // 8)
        for i, bit in enumerate(self._bits):
            if bit:
                out[i >> 3] |= 0x80 >> (i & 7)
        return bytes(out)