[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barcodekit"
version = "0.1.0"
description = "Pure Python QR and 2 of 5 barcode encoders, with PDF417 codeword encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["barcode", "qr", "qrcode", "pdf417", "2of5", "interleaved", "reed-solomon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
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
