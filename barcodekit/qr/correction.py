"""Error correction words for QR codes."""

from __future__ import annotations

from collections.abc import Iterable

from barcodekit.galois import GaloisField
from barcodekit.reedsolomon import ReedSolomonEncoder

_ENCODER = ReedSolomonEncoder(GaloisField(285, 256, 0))


def calc_ecc(data: Iterable[int], ecc_count: int) -> bytes:
    """Return ``ecc_count`` Reed-Solomon check bytes for the data bytes."""
    return bytes(_ENCODER.encode(list(data), ecc_count))