"""Shared barcode types: colour schemes, metadata and the barcode base classes."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .bitlist import BitList

TYPE_AZTEC = "Aztec"
TYPE_CODABAR = "Codabar"
TYPE_CODE128 = "Code 128"
TYPE_CODE39 = "Code 39"
TYPE_CODE93 = "Code 93"
TYPE_DATAMATRIX = "DataMatrix"
TYPE_EAN8 = "EAN 8"
TYPE_EAN13 = "EAN 13"
TYPE_PDF = "PDF417"
TYPE_QR = "QR Code"
TYPE_2OF5 = "2 of 5"
TYPE_2OF5_INTERLEAVED = "2 of 5 (interleaved)"

Color = Union[int, Tuple[int, int, int, int]]


class ColorModel(enum.Enum):
    """Pixel model of a rendered barcode."""

    GRAY = "gray"
    GRAY16 = "gray16"
    RGBA = "rgba"


@dataclass(frozen=True)
class ColorScheme:
    """Colour model plus the background and foreground colours of a barcode."""

    model: ColorModel
    background: Color
    foreground: Color


COLOR_SCHEME_8 = ColorScheme(ColorModel.GRAY, 255, 0)
COLOR_SCHEME_16 = ColorScheme(ColorModel.GRAY16, 0xFFFF, 0)
COLOR_SCHEME_24 = ColorScheme(ColorModel.RGBA, (255, 255, 255, 255), (0, 0, 0, 255))
COLOR_SCHEME_32 = ColorScheme(ColorModel.RGBA, (255, 255, 255, 255), (0, 0, 0, 255))


@dataclass(frozen=True)
class Metadata:
    """Kind of a barcode and whether it is one- or two-dimensional."""

    code_kind: str
    dimensions: int


class Barcode(ABC):
    """A rendered and encoded barcode."""

    def __init__(
        self,
        content: str,
        metadata: Metadata,
        color_scheme: ColorScheme = COLOR_SCHEME_16,
        checksum: Optional[int] = None,
    ) -> None:
        self.content = content
        self.metadata = metadata
        self.color_scheme = color_scheme
        self.checksum = checksum

    @property
    @abstractmethod
    def width(self) -> int:
        """Number of modules along the x axis."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Number of modules along the y axis."""

    @abstractmethod
    def is_set(self, x: int, y: int) -> bool:
        """Return True where the module at (x, y) is drawn in the foreground colour."""

    def at(self, x: int, y: int) -> Color:
        """Colour of the module at (x, y)."""
        if self.is_set(x, y):
            return self.color_scheme.foreground
        return self.color_scheme.background


class Code1D(Barcode):
    """A one-dimensional barcode made of a single row of bars."""

    def __init__(
        self,
        kind: str,
        content: str,
        bars: BitList,
        color_scheme: ColorScheme = COLOR_SCHEME_16,
        checksum: Optional[int] = None,
    ) -> None:
        super().__init__(content, Metadata(kind, 1), color_scheme, checksum)
        self.bars = bars

    @property
    def width(self) -> int:
        return len(self.bars)

    @property
    def height(self) -> int:
        return 1

    def is_set(self, x: int, y: int) -> bool:
        return self.bars.get_bit(x)