"""Standard and interleaved "2 of 5" barcodes."""

from __future__ import annotations

from dataclasses import dataclass

from barcodekit.base import (
    COLOR_SCHEME_16,
    TYPE_2OF5,
    TYPE_2OF5_INTERLEAVED,
    ColorScheme,
    OneDCode,
)
from barcodekit.bitlist import BitList
from barcodekit.digits import int_to_rune, rune_to_int

Pattern = tuple[bool, bool, bool, bool, bool]

_ENCODING_TABLE: dict[str, Pattern] = {
    "0": (False, False, True, True, False),
    "1": (True, False, False, False, True),
    "2": (False, True, False, False, True),
    "3": (True, True, False, False, False),
    "4": (False, False, True, False, True),
    "5": (True, False, True, False, False),
    "6": (False, True, True, False, False),
    "7": (False, False, False, True, True),
    "8": (True, False, False, True, False),
    "9": (False, True, False, True, False),
}

_NON_INTERLEAVED_SPACE: Pattern = (False, False, False, False, False)


@dataclass(frozen=True)
class _Mode:
    start: tuple[bool, ...]
    end: tuple[bool, ...]
    wide: int = 3
    narrow: int = 1

    def width(self, is_wide: bool) -> int:
        return self.wide if is_wide else self.narrow


_STANDARD = _Mode(
    start=(True, True, False, True, True, False, True, False),
    end=(True, True, False, True, False, True, True),
)
_INTERLEAVED = _Mode(
    start=(True, False, True, False),
    end=(True, True, True, False, True),
)


def add_checksum(content: str) -> str:
    """Return ``content`` with its check digit appended."""
    if not content:
        raise ValueError("content is empty")

    even = len(content) % 2 == 1
    total = 0
    for ch in content:
        if ch not in _ENCODING_TABLE:
            raise ValueError(f'can not encode "{content}"')
        value = rune_to_int(ch)
        total += value * 3 if even else value
        even = not even

    return content + int_to_rune(total % 10)


def _pattern(ch: str, content: str) -> Pattern:
    try:
        return _ENCODING_TABLE[ch]
    except KeyError:
        raise ValueError(f'can not encode "{content}"') from None


def encode_with_color(content: str, interleaved: bool, color: ColorScheme) -> OneDCode:
    """Return a 2 of 5 barcode for the digits in ``content`` drawn with ``color``."""
    if not content:
        raise ValueError("content is empty")
    if interleaved and len(content) % 2 == 1:
        raise ValueError("can only encode even number of digits in interleaved mode")

    mode = _INTERLEAVED if interleaved else _STANDARD
    bits = BitList()
    bits.add_bit(*mode.start)

    if interleaved:
        chars = iter(content)
        pairs = [(_pattern(a, content), _pattern(b, content)) for a, b in zip(chars, chars)]
    else:
        pairs = [(_pattern(ch, content), _NON_INTERLEAVED_SPACE) for ch in content]

    for bars, spaces in pairs:
        for bar, space in zip(bars, spaces):
            bits.add_bit(*([True] * mode.width(bar)))
            bits.add_bit(*([False] * mode.width(space)))

    bits.add_bit(*mode.end)

    kind = TYPE_2OF5_INTERLEAVED if interleaved else TYPE_2OF5
    return OneDCode(kind, content, bits, color)


def encode(content: str, interleaved: bool) -> OneDCode:
    """Return a 2 of 5 barcode for ``content`` in the default color scheme."""
    return encode_with_color(content, interleaved, COLOR_SCHEME_16)