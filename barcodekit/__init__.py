"""Pure Python QR and 2 of 5 barcode encoders, with PDF417 codeword encoding."""

__version__ = "0.1.0"