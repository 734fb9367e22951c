"""Galois field arithmetic and Reed-Solomon error correction codes."""

from __future__ import annotations

from typing import List, Sequence


class GaloisField:
    """A finite field of ``size`` elements built from a primitive polynomial."""

    def __init__(self, primitive: int, size: int, base: int) -> None:
        self.size = size
        self.base = base
        alog = [0] * size
        log = [0] * size
        x = 1
        for i in range(size):
            alog[i] = x
            x *= 2
            if x >= size:
                x = (x ^ primitive) & (size - 1)
        for i, value in enumerate(alog):
            log[value] = i
        self.alog = tuple(alog)
        self.log = tuple(log)

    def add_or_sub(self, a: int, b: int) -> int:
        return a ^ b

    def multiply(self, a: int, b: int) -> int:
        if a == 0 or b == 0:
            return 0
        return self.alog[(self.log[a] + self.log[b]) % (self.size - 1)]

    def inverse(self, a: int) -> int:
        if a == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self.alog[(self.size - 1) - self.log[a]]


class ReedSolomonEncoder:
    """Computes Reed-Solomon check words over a Galois field."""

    def __init__(self, field: GaloisField) -> None:
        self.field = field
        self._generators: List[List[int]] = [[1]]

    def _multiply_poly(self, a: Sequence[int], b: Sequence[int]) -> List[int]:
        result = [0] * (len(a) + len(b) - 1)
        for i, ca in enumerate(a):
            for j, cb in enumerate(b):
                result[i + j] ^= self.field.multiply(ca, cb)
        return result

    def _generator(self, degree: int) -> List[int]:
        while len(self._generators) <= degree:
            d = len(self._generators)
            root = self.field.alog[(d - 1 + self.field.base) % (self.field.size - 1)]
            self._generators.append(self._multiply_poly(self._generators[-1], [1, root]))
        return self._generators[degree]

    def encode(self, data: Sequence[int], ecc_count: int) -> List[int]:
        """Return ``ecc_count`` check words for ``data``, highest degree first."""
        if ecc_count < 0:
            raise ValueError("ecc_count must not be negative")
        if ecc_count == 0:
            return []
        generator = self._generator(ecc_count)[1:]
        remainder = [0] * ecc_count
        for value in data:
            factor = value ^ remainder[0]
            remainder = remainder[1:] + [0]
            if factor:
                for i, coefficient in enumerate(generator):
                    remainder[i] ^= self.field.multiply(coefficient, factor)
        return remainder