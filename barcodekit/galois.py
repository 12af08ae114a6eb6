"""Galois field arithmetic and polynomials over such a field."""

from __future__ import annotations

from collections.abc import Iterable


class GaloisField:
    """A Galois field GF(2^n) defined by a primitive polynomial."""

    def __init__(self, pp: int, field_size: int, base: int) -> None:
        self.size = field_size
        self.base = base
        self.alog_table = [0] * field_size
        self.log_table = [0] * field_size

        x = 1
        for i in range(field_size):
            self.alog_table[i] = x
            x *= 2
            if x >= field_size:
                x = (x ^ pp) & (field_size - 1)

        for i, value in enumerate(self.alog_table):
            self.log_table[value] = i

    def zero(self) -> GFPoly:
        """Return the zero polynomial over this field."""
        return GFPoly(self, [0])

    def add_or_sub(self, a: int, b: int) -> int:
        """Add or subtract two field elements (the same in GF(2^n))."""
        return a ^ b

    def multiply(self, a: int, b: int) -> int:
        """Multiply two field elements."""
        if a == 0 or b == 0:
            return 0
        return self.alog_table[(self.log_table[a] + self.log_table[b]) % (self.size - 1)]

    def divide(self, a: int, b: int) -> int:
        """Divide ``a`` by ``b``; dividing by zero raises ZeroDivisionError."""
        if b == 0:
            raise ZeroDivisionError("divide by zero")
        if a == 0:
            return 0
        return self.alog_table[(self.log_table[a] - self.log_table[b]) % (self.size - 1)]

    def inverse(self, num: int) -> int:
        """Return the multiplicative inverse of ``num``."""
        return self.alog_table[(self.size - 1) - self.log_table[num]]


class GFPoly:
    """A polynomial with coefficients in a Galois field, highest degree first."""

    def __init__(self, field: GaloisField, coefficients: Iterable[int]) -> None:
        coeffs = list(coefficients)
        if not coeffs:
            raise ValueError("a polynomial needs at least one coefficient")
        first_nonzero = next((i for i, c in enumerate(coeffs) if c != 0), len(coeffs) - 1)
        self.field = field
        self.coefficients = tuple(coeffs[first_nonzero:])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GFPoly):
            return NotImplemented
        return self.field is other.field and self.coefficients == other.coefficients

    def __hash__(self) -> int:
        return hash(self.coefficients)

    def __repr__(self) -> str:
        return f"GFPoly({list(self.coefficients)})"

    def degree(self) -> int:
        return len(self.coefficients) - 1

    def is_zero(self) -> bool:
        return self.coefficients[0] == 0

    def get_coefficient(self, degree: int) -> int:
        """Return the coefficient of x ** degree."""
        return self.coefficients[self.degree() - degree]

    def add_or_subtract(self, other: GFPoly) -> GFPoly:
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        small, large = self.coefficients, other.coefficients
        if len(small) > len(large):
            small, large = large, small
        diff = len(large) - len(small)
        summed = list(large[:diff]) + [
            self.field.add_or_sub(a, b) for a, b in zip(small, large[diff:])
        ]
        return GFPoly(self.field, summed)

    def mult_by_monomial(self, degree: int, coeff: int) -> GFPoly:
        """Multiply by ``coeff * x ** degree``."""
        if coeff == 0:
            return self.field.zero()
        scaled = [self.field.multiply(c, coeff) for c in self.coefficients]
        return GFPoly(self.field, scaled + [0] * degree)

    def multiply(self, other: GFPoly) -> GFPoly:
        if self.is_zero() or other.is_zero():
            return self.field.zero()
        field = self.field
        product = [0] * (len(self.coefficients) + len(other.coefficients) - 1)
        for i, ac in enumerate(self.coefficients):
            for j, bc in enumerate(other.coefficients):
                product[i + j] = field.add_or_sub(product[i + j], field.multiply(ac, bc))
        return GFPoly(field, product)

    def divide(self, other: GFPoly) -> tuple[GFPoly, GFPoly]:
        """Return ``(quotient, remainder)`` of the division by ``other``."""
        field = self.field
        quotient = field.zero()
        remainder = self
        inverse_lead = field.inverse(other.get_coefficient(other.degree()))
        while remainder.degree() >= other.degree() and not remainder.is_zero():
            degree_diff = remainder.degree() - other.degree()
            scale = field.multiply(remainder.get_coefficient(remainder.degree()), inverse_lead)
            term = other.mult_by_monomial(degree_diff, scale)
            quotient = quotient.add_or_subtract(monomial(field, degree_diff, scale))
            remainder = remainder.add_or_subtract(term)
        return quotient, remainder


def monomial(field: GaloisField, degree: int, coeff: int) -> GFPoly:
    """Return the polynomial ``coeff * x ** degree``."""
    if coeff == 0:
        return field.zero()
    return GFPoly(field, [coeff] + [0] * degree)