"""A growable list of bits."""

from __future__ import annotations

from collections.abc import Iterator


class BitList:
    """A list of bits that packs into bytes most-significant bit first."""

    def __init__(self, length: int = 0) -> None:
        if length < 0:
            raise ValueError(f"negative length {length}")
        self._bits: list[bool] = [False] * length

    def __len__(self) -> int:
        return len(self._bits)

    def __repr__(self) -> str:
        return "BitList(" + "".join("1" if b else "0" for b in self._bits) + ")"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._bits):
            raise IndexError(f"bit index {index} out of range")

    def add_bit(self, *args: bool) -> None:
        """Append the given bits to the end of the list."""
        self._bits.extend(bool(bit) for bit in args)

    def set_bit(self, index: int, value: bool) -> None:
        """Set the bit at ``index`` to ``value``."""
        self._check_index(index)
        self._bits[index] = bool(value)

    def get_bit(self, index: int) -> bool:
        """Return the bit at ``index``."""
        self._check_index(index)
        return self._bits[index]

    def add_byte(self, b: int) -> None:
        """Append all 8 bits of ``b``, most significant first."""
        self.add_bits(b, 8)

    def add_bits(self, b: int, count: int) -> None:
        """Append the lowest ``count`` bits of ``b``, most significant first."""
        self.add_bit(*(((b >> shift) & 1) == 1 for shift in range(count - 1, -1, -1)))

    def get_bytes(self) -> bytes:
        """Return the bits packed into bytes; a partial last byte is zero-padded."""
        return bytes(self.iterate_bytes())

    def iterate_bytes(self) -> Iterator[int]:
        """Yield the bits packed into byte values, one byte at a time."""
        for start in range(0, len(self._bits), 8):
            chunk = self._bits[start:start + 8]
            value = 0
            for bit in chunk:
                value = (value << 1) | int(bit)
            yield value << (8 - len(chunk))