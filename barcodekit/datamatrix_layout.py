"""Data Matrix symbol sizes, module placement and the rendered symbol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .bitlist import BitList
from .core import COLOR_SCHEME_16, TYPE_DATAMATRIX, Barcode, ColorScheme, Metadata


@dataclass(frozen=True)
class CodeSize:
    """Dimensions, region layout and error correction of one Data Matrix size."""

    rows: int
    columns: int
    region_count_horizontal: int
    region_count_vertical: int
    ecc_count: int
    block_count: int

    @property
    def region_rows(self) -> int:
        return (self.rows - self.region_count_vertical * 2) // self.region_count_vertical

    @property
    def region_columns(self) -> int:
        return (self.columns - self.region_count_horizontal * 2) // self.region_count_horizontal

    @property
    def matrix_rows(self) -> int:
        return self.region_rows * self.region_count_vertical

    @property
    def matrix_columns(self) -> int:
        return self.region_columns * self.region_count_horizontal

    @property
    def data_codewords(self) -> int:
        return (self.matrix_columns * self.matrix_rows) // 8 - self.ecc_count

    @property
    def ecc_per_block(self) -> int:
        return self.ecc_count // self.block_count

    def data_codewords_for_block(self, index: int) -> int:
        """Number of data codewords in the interleaved block ``index``."""
        if self.rows == 144 and self.columns == 144:
            return 156 if index < 8 else 155
        return self.data_codewords // self.block_count


CODE_SIZES: Tuple[CodeSize, ...] = (
    CodeSize(10, 10, 1, 1, 5, 1),
    CodeSize(12, 12, 1, 1, 7, 1),
    CodeSize(14, 14, 1, 1, 10, 1),
    CodeSize(16, 16, 1, 1, 12, 1),
    CodeSize(18, 18, 1, 1, 14, 1),
    CodeSize(20, 20, 1, 1, 18, 1),
    CodeSize(22, 22, 1, 1, 20, 1),
    CodeSize(24, 24, 1, 1, 24, 1),
    CodeSize(26, 26, 1, 1, 28, 1),
    CodeSize(32, 32, 2, 2, 36, 1),
    CodeSize(36, 36, 2, 2, 42, 1),
    CodeSize(40, 40, 2, 2, 48, 1),
    CodeSize(44, 44, 2, 2, 56, 1),
    CodeSize(48, 48, 2, 2, 68, 1),
    CodeSize(52, 52, 2, 2, 84, 2),
    CodeSize(64, 64, 4, 4, 112, 2),
    CodeSize(72, 72, 4, 4, 144, 4),
    CodeSize(80, 80, 4, 4, 192, 4),
    CodeSize(88, 88, 4, 4, 224, 4),
    CodeSize(96, 96, 4, 4, 272, 4),
    CodeSize(104, 104, 4, 4, 336, 6),
    CodeSize(120, 120, 6, 6, 408, 6),
    CodeSize(132, 132, 6, 6, 496, 8),
    CodeSize(144, 144, 6, 6, 620, 10),
)


def find_code_size(data_length: int) -> CodeSize:
    """Return the smallest size holding ``data_length`` data codewords."""
    for size in CODE_SIZES:
        if size.data_codewords >= data_length:
            return size
    raise ValueError("to much data to encode")


class DataMatrixCode(Barcode):
    """A rendered Data Matrix symbol."""

    def __init__(
        self,
        size: CodeSize,
        color_scheme: ColorScheme = COLOR_SCHEME_16,
        content: str = "",
    ) -> None:
        super().__init__(content, Metadata(TYPE_DATAMATRIX, 2), color_scheme)
        self.size = size
        self._bits = BitList(size.rows * size.columns)

    @property
    def width(self) -> int:
        return self.size.columns

    @property
    def height(self) -> int:
        return self.size.rows

    def is_set(self, x: int, y: int) -> bool:
        return self._bits.get_bit(x * self.size.rows + y)

    def set(self, x: int, y: int, value: bool) -> None:
        self._bits.set_bit(x * self.size.rows + y, value)


class CodeLayout:
    """Places codewords into the data area of a Data Matrix symbol."""

    def __init__(self, size: CodeSize, color: ColorScheme = COLOR_SCHEME_16) -> None:
        self.size = size
        self.color = color
        cells = size.matrix_columns * size.matrix_rows
        self._matrix = BitList(cells)
        self._occupy = BitList(cells)

    def _index(self, row: int, col: int) -> int:
        return col + row * self.size.matrix_columns

    def occupied(self, row: int, col: int) -> bool:
        return self._occupy.get_bit(self._index(row, col))

    def set(self, row: int, col: int, value: int, bit_num: int) -> None:
        """Place bit ``bit_num`` (0 = most significant) of ``value`` at (row, col)."""
        rows = self.size.matrix_rows
        cols = self.size.matrix_columns
        bit = ((value >> (7 - bit_num)) & 1) == 1
        if row < 0:
            row += rows
            col += 4 - ((rows + 4) % 8)
        if col < 0:
            col += cols
            row += 4 - ((cols + 4) % 8)
        if self.occupied(row, col):
            raise RuntimeError(f"Field already occupied row: {row} col: {col}")
        index = self._index(row, col)
        self._occupy.set_bit(index, True)
        self._matrix.set_bit(index, bit)

    def _place(self, positions: Iterable[Tuple[int, int]], value: int) -> None:
        for bit_num, (row, col) in enumerate(positions):
            self.set(row, col, value, bit_num)

    def set_simple(self, row: int, col: int, value: int) -> None:
        """Place a codeword in the standard L shape ending at (row, col)."""
        self._place(
            (
                (row - 2, col - 2), (row - 2, col - 1),
                (row - 1, col - 2), (row - 1, col - 1), (row - 1, col),
                (row, col - 2), (row, col - 1), (row, col),
            ),
            value,
        )

    def _corner1(self, value: int) -> None:
        r, c = self.size.matrix_rows, self.size.matrix_columns
        self._place(
            ((r - 1, 0), (r - 1, 1), (r - 1, 2), (0, c - 2),
             (0, c - 1), (1, c - 1), (2, c - 1), (3, c - 1)),
            value,
        )

    def _corner2(self, value: int) -> None:
        r, c = self.size.matrix_rows, self.size.matrix_columns
        self._place(
            ((r - 3, 0), (r - 2, 0), (r - 1, 0), (0, c - 4),
             (0, c - 3), (0, c - 2), (0, c - 1), (1, c - 1)),
            value,
        )

    def _corner3(self, value: int) -> None:
        r, c = self.size.matrix_rows, self.size.matrix_columns
        self._place(
            ((r - 3, 0), (r - 2, 0), (r - 1, 0), (0, c - 2),
             (0, c - 1), (1, c - 1), (2, c - 1), (3, c - 1)),
            value,
        )

    def _corner4(self, value: int) -> None:
        r, c = self.size.matrix_rows, self.size.matrix_columns
        self._place(
            ((r - 1, 0), (r - 1, c - 1), (0, c - 3), (0, c - 2),
             (0, c - 1), (1, c - 3), (1, c - 2), (1, c - 1)),
            value,
        )

    def set_values(self, data: Sequence[int]) -> None:
        """Place all codewords of ``data`` following the diagonal placement order."""
        rows = self.size.matrix_rows
        cols = self.size.matrix_columns
        values = iter(data)
        row, col = 4, 0

        while row < rows or col < cols:
            if row == rows and col == 0:
                self._corner1(next(values))
            if row == rows - 2 and col == 0 and cols % 4 != 0:
                self._corner2(next(values))
            if row == rows - 2 and col == 0 and cols % 8 == 4:
                self._corner3(next(values))
            if row == rows + 4 and col == 2 and cols % 8 == 0:
                self._corner4(next(values))

            while True:
                if row < rows and col >= 0 and not self.occupied(row, col):
                    self.set_simple(row, col, next(values))
                row -= 2
                col += 2
                if row < 0 or col >= cols:
                    break
            row += 1
            col += 3

            while True:
                if row >= 0 and col < cols and not self.occupied(row, col):
                    self.set_simple(row, col, next(values))
                row += 2
                col -= 2
                if row >= rows or col < 0:
                    break
            row += 3
            col += 1

        if not self.occupied(rows - 1, cols - 1):
            self.set(rows - 1, cols - 1, 255, 0)
            self.set(rows - 2, cols - 2, 255, 0)

    def merge(self) -> DataMatrixCode:
        """Combine the finder patterns and the data regions into a symbol."""
        size = self.size
        result = DataMatrixCode(size, self.color)
        region_rows = size.region_rows
        region_cols = size.region_columns

        for r in range(0, size.rows, region_rows + 2):
            for c in range(0, size.columns, 2):
                result.set(c, r, True)
        for r in range(region_rows + 1, size.rows, region_rows + 2):
            for c in range(size.columns):
                result.set(c, r, True)
        for c in range(region_cols + 1, size.columns, region_cols + 2):
            for r in range(1, size.rows, 2):
                result.set(c, r, True)
        for c in range(0, size.columns, region_cols + 2):
            for r in range(size.rows):
                result.set(c, r, True)

        for h_region in range(size.region_count_horizontal):
            for v_region in range(size.region_count_vertical):
                for x in range(region_cols):
                    col_matrix = region_cols * h_region + x
                    col_result = (2 + region_cols) * h_region + x + 1
                    for y in range(region_rows):
                        row_matrix = region_rows * v_region + y
                        row_result = (2 + region_rows) * v_region + y + 1
                        value = self._matrix.get_bit(
                            col_matrix + row_matrix * size.matrix_columns
                        )
                        result.set(col_result, row_result, value)
        return result