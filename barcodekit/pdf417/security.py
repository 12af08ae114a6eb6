"""PDF417 security levels and their Reed-Solomon error correction words."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from functools import lru_cache

_MODULUS = 929
_GENERATOR_BASE = 3


@lru_cache(maxsize=None)
def _correction_factors(count: int) -> tuple[int, ...]:
    """Return the low-order coefficients of prod(x - 3**j) for j = 1..count.

    The coefficients are given in ascending order of power, without the
    leading coefficient of x**count, which is always 1.
    """
    coeffs = [1]
    root = 1
    for _ in range(count):
        root = root * _GENERATOR_BASE % _MODULUS
        product = [0] * (len(coeffs) + 1)
        for power, coeff in enumerate(coeffs):
            product[power + 1] = (product[power + 1] + coeff) % _MODULUS
            product[power] = (product[power] - root * coeff) % _MODULUS
        coeffs = product
    return tuple(coeffs[:count])


class SecurityLevel(IntEnum):
    """A PDF417 security level; higher levels add more error correction words."""

    LEVEL_0 = 0
    LEVEL_1 = 1
    LEVEL_2 = 2
    LEVEL_3 = 3
    LEVEL_4 = 4
    LEVEL_5 = 5
    LEVEL_6 = 6
    LEVEL_7 = 7
    LEVEL_8 = 8

    def error_correction_word_count(self) -> int:
        """Return the number of error correction words of this level."""
        return 1 << (int(self) + 1)

    def compute(self, data: Sequence[int]) -> list[int]:
        """Return the error correction words for the given codewords."""
        count = self.error_correction_word_count()
        factors = _correction_factors(count)
        ec_words = [0] * count

        for value in data:
            temp = (value + ec_words[0]) % _MODULUS
            for i in range(count - 1, -1, -1):
                add = ec_words[count - i] if i > 0 else 0
                ec_words[count - 1 - i] = (
                    add + _MODULUS - (temp * factors[i]) % _MODULUS
                ) % _MODULUS

        return [_MODULUS - word if word > 0 else 0 for word in ec_words]