"""Reed-Solomon error correction code generation."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from barcodekit.galois import GaloisField, GFPoly


class ReedSolomonEncoder:
    """Computes Reed-Solomon check words over a Galois field."""

    def __init__(self, field: GaloisField) -> None:
        self.field = field
        self._generators: list[GFPoly] = [GFPoly(field, [1])]
        self._lock = threading.Lock()

    def _generator(self, degree: int) -> GFPoly:
        with self._lock:
            last = self._generators[-1]
            for d in range(len(self._generators), degree + 1):
                root = self.field.alog_table[d - 1 + self.field.base]
                last = last.multiply(GFPoly(self.field, [1, root]))
                self._generators.append(last)
            return self._generators[degree]

    def encode(self, data: Sequence[int], ecc_count: int) -> list[int]:
        """Return ``ecc_count`` error correction words for ``data``."""
        if ecc_count < 1:
            raise ValueError(f"ecc_count must be positive, got {ecc_count}")
        generator = self._generator(ecc_count)
        info = GFPoly(self.field, data).mult_by_monomial(ecc_count, 1)
        _, remainder = info.divide(generator)
        coeffs = list(remainder.coefficients)
        return [0] * (ecc_count - len(coeffs)) + coeffs