[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barcodekit"
version = "0.1.0"
description = "Pure Python encoders for 1D and 2D barcodes: Aztec, Codabar, Code 128, Code 39, Code 93, DataMatrix and EAN."
requires-python = ">=3.10"
dependencies = []
keywords = ["barcode", "aztec", "datamatrix", "code128", "code39", "code93", "ean", "codabar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["barcodekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
