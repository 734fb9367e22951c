"""Pure Python encoders for Aztec, DataMatrix, Codabar, Code 128, Code 39, Code 93 and EAN barcodes."""

__version__ = "0.1.0"

__all__ = [
    "aztec",
    "aztec_highlevel",
    "bitlist",
    "codabar",
    "code128",
    "code39",
    "code93",
    "core",
    "datamatrix",
    "datamatrix_layout",
    "ean",
    "reedsolomon",
]