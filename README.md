# barcodekit

Barcode encoders written in pure Python, with no dependencies beyond the
standard library.

What it covers:

- **QR codes**: numeric, alphanumeric and byte (UTF-8) modes, automatic mode
  selection, error correction levels L, M, Q and H, and automatic mask
  selection by penalty score.
- **2 of 5**: standard and interleaved, with an optional check digit.
- **PDF417 codewords**: high-level encoding of text, numeric and binary data
  into codewords, the choice of column and row count, and error correction
  codewords for security levels 0–8.

A QR or 2 of 5 barcode is a grid of modules. `bounds()` returns
`(min_x, min_y, max_x, max_y)`, and `at(x, y)` returns the colour of one
module as an `(r, g, b)` tuple. The default colour scheme,
`barcodekit.base.COLOR_SCHEME_16`, has a white background and black
foreground; the `encode_with_color` functions take any `ColorScheme`.

## Installation

```
pip install .
```

## QR codes

```python
from barcodekit.qr.render import encode
from barcodekit.qr.modes import Encoding
from barcodekit.qr.versions import ErrorCorrectionLevel

code = encode("hello world", ErrorCorrectionLevel.H, Encoding.UNICODE)
print(code.bounds())             # (0, 0, 25, 25)
print(code.get(0, 0))            # True for a dark module
print(code.content())            # "hello world"
```

`Encoding.AUTO` tries numeric, then alphanumeric, then byte mode, and uses the
first one that can hold the content. Content that cannot be encoded in the
chosen mode, or that is too long for version 40, raises `ValueError`.

## 2 of 5

```python
from barcodekit.twooffive import add_checksum, encode

content = add_checksum("1234567")    # "12345670"
bars = encode(content, interleaved=True)
```

Only digits can be encoded; interleaved mode needs an even number of them.
Anything else raises `ValueError`.

## Scaling

```python
from barcodekit.scaling import scale

image = scale(code, 200, 200)
_, _, width, height = image.bounds()
pixel = image.at(100, 100)
```

A 2D code is enlarged by the largest whole factor that fits both sides and is
centred. A 1D code is enlarged horizontally by the largest whole factor that
fits, centred, and repeated on every row of the requested height. Any space
left over is filled with the barcode's background colour, or with the colour
given to `scale_with_fill`. Asking for a size smaller than the code raises
`ValueError`.

## PDF417 codewords

```python
from barcodekit.pdf417.highlevel import highlevel_encode
from barcodekit.pdf417.security import SecurityLevel
from barcodekit.pdf417.dimensions import calc_dimensions

words = highlevel_encode("Super !")      # [567, 615, 137, 809, 329]
level = SecurityLevel(2)
columns, rows = calc_dimensions(len(words), level.error_correction_word_count())
ecc = level.compute(words)
```

## What it does not do

- It does not draw PDF417 symbols: there are no start/stop patterns, row
  indicators or bar patterns, so PDF417 stops at the codeword level.
- It does not write image files. Barcodes expose their pixels through
  `bounds()` and `at(x, y)`; turning those into a PNG or other format is left
  to the caller.
- There is no command-line tool.

## Tests

```
pip install .[test]
pytest
```