# barcodekit

Barcode encoders written in plain Python. The package needs only the
standard library. Each encoder turns content into a barcode object. The object
is a grid of modules that you can query and draw however you like.

Supported symbologies:

| Module                  | Symbology              | Dimensions |
|-------------------------|------------------------|------------|
| `barcodekit.aztec`      | Aztec Code             | 2D         |
| `barcodekit.datamatrix` | DataMatrix (ECC 200)   | 2D         |
| `barcodekit.codabar`    | Codabar                | 1D         |
| `barcodekit.code128`    | Code 128               | 1D         |
| `barcodekit.code39`     | Code 39                | 1D         |
| `barcodekit.code93`     | Code 93                | 1D         |
| `barcodekit.ean`        | EAN-8 and EAN-13       | 1D         |

## Installation

```
pip install barcodekit
```

## Usage

Every symbology module has an `encode` function. If the symbology cannot carry
the content, `encode` raises `ValueError`. Too much data for the largest symbol
also raises `ValueError`.

```python
from barcodekit import aztec, code128, datamatrix, ean

bar = code128.encode("HI345678H")
print(bar.metadata.code_kind)    # "Code 128"
print(bar.metadata.dimensions)   # 1
print(bar.content)               # "HI345678H"
print(bar.checksum)              # the Code 128 check value

# 1D codes are one module high; is_set tells you whether a bar is dark.
row = "".join("1" if bar.is_set(x, 0) else "0" for x in range(bar.width))

# EAN: give 7 or 12 digits and the check digit is added for you;
# with 8 or 13 digits the check digit is verified.
code = ean.encode("5901234123457")

# 2D codes
matrix = datamatrix.encode('{"po":12,"batchAction":"start_end"}')
print(matrix.width, matrix.height)   # 24 24

symbol = aztec.encode(b"This is an example Aztec symbol.")
print(symbol.render_text())          # "X " for dark modules, two spaces for light
```

All barcodes derive from `barcodekit.core.Barcode` and share these members:

- `content`
- `metadata`
- `color_scheme`
- `checksum`
- `width`
- `height`
- `is_set(x, y)`
- `at(x, y)`

`at(x, y)` returns the foreground or background colour of the barcode's
`ColorScheme`. `barcodekit.core` defines the `ColorScheme`, `ColorModel` and
`Metadata` types. It also defines the ready-made schemes `COLOR_SCHEME_8`,
`COLOR_SCHEME_16` (the default), `COLOR_SCHEME_24` and `COLOR_SCHEME_32`. Pass
any scheme as `color=` to an `encode` function.

Options by module:

- `code39.encode(content, include_checksum=False, full_ascii_mode=False)`.
  Full ASCII mode maps any ASCII character onto the two-character sequences.
- `code93.encode(content, include_checksum=True, full_ascii_mode=False)`.
  The C check character is always written. `include_checksum` adds the K check
  character.
- `code128.encode(content)` switches between tables A, B and C as the content
  needs, and accepts 1 to 80 characters. The characters `code128.FNC1` to
  `code128.FNC4` stand for the function symbols.
  `code128.encode_without_checksum(content)` leaves out the check symbol.
- `codabar.encode(content)` takes a start character and a stop character from
  `A`–`D` around the data.
- `datamatrix.encode(content)` picks the smallest square symbol that holds the
  content. Text is encoded as UTF-8. Give bytes that start with
  `datamatrix.FNC1` for a GS1 symbol.
- `aztec.encode(data, min_ecc_percent=33, user_specified_layers=0)`. A layer
  count of 0 picks the smallest symbol. A negative layer count asks for a
  compact symbol with that many layers.

Lower-level building blocks are also available:

- `barcodekit.bitlist.BitList`
- `barcodekit.reedsolomon.GaloisField`
- `barcodekit.reedsolomon.ReedSolomonEncoder`
- `barcodekit.aztec_highlevel.high_level_encode`
- `barcodekit.datamatrix_layout`, which holds the symbol sizes and module
  placement

## What it does not do

The package only encodes. It does not read or decode barcodes. It does not
scale symbols or add quiet zones. It does not write image files: draw the
modules yourself from `is_set` or `at`. `core` defines type names for PDF417,
QR Code and 2 of 5, but the package has no encoders for those symbologies.

## Running the tests

```
pip install -e ".[test]"
pytest
```